from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.service.booking.domain.entity.booking_alternative_entity import BookingAlternative
from src.service.booking.domain.entity.booking_entity import Booking


class IBookingQueryRepo(ABC):
    """Lock-free reads for display."""

    @abstractmethod
    async def get_by_id(self, *, booking_id: UUID) -> Optional[Booking]:
        """Booking with its alternatives, newest first."""
        pass

    @abstractmethod
    async def list_by_restaurant(self, *, restaurant_id: UUID) -> List[Booking]:
        """Ordered by date DESC, time DESC."""
        pass

    @abstractmethod
    async def list_by_user(self, *, user_id: UUID) -> List[Booking]:
        """Ordered by date DESC, time DESC."""
        pass

    @abstractmethod
    async def get_alternative_by_id(self, *, alternative_id: UUID) -> Optional[BookingAlternative]:
        pass
