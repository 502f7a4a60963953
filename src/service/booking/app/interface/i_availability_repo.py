from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional
from uuid import UUID

from src.service.booking.domain.entity.availability_slot_entity import AvailabilitySlot


class IAvailabilityRepo(ABC):
    """Availability ledger: per-slot capacity and reserved-seat counters."""

    @abstractmethod
    async def get_by_restaurant_and_date(
        self, *, restaurant_id: UUID, date: date
    ) -> List[AvailabilitySlot]:
        """Slots for the date ordered by time_slot ascending (empty when none)."""
        pass

    @abstractmethod
    async def get_by_id(self, *, slot_id: UUID) -> Optional[AvailabilitySlot]:
        pass

    @abstractmethod
    async def upsert(self, *, slot: AvailabilitySlot) -> AvailabilitySlot:
        """
        Insert the slot, or update capacity + updated_at of the existing
        (restaurant_id, date, time_slot) row while preserving its reserved count.

        Returns:
            The stored slot (existing id and reserved count when it already existed)
        """
        pass

    @abstractmethod
    async def adjust_reserved_seats(self, *, slot_id: UUID, delta: int) -> AvailabilitySlot:
        """
        Atomically add ``delta`` to the slot's reserved count under a row lock.

        A negative result is clamped to 0.

        Raises:
            NotFoundError: Unknown slot
            InsufficientCapacityError: reserved + delta would exceed capacity
        """
        pass
