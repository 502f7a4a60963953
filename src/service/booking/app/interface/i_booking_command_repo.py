from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.service.booking.domain.entity.booking_alternative_entity import BookingAlternative
from src.service.booking.domain.entity.booking_entity import Booking
from src.service.booking.domain.enum.booking_status import BookingStatus


class IBookingCommandRepo(ABC):
    """Booking writes. Every ``*_for_update`` read takes a row lock held until commit."""

    @abstractmethod
    async def create(self, *, booking: Booking) -> Booking:
        pass

    @abstractmethod
    async def get_by_id_for_update(self, *, booking_id: UUID) -> Optional[Booking]:
        """Lock the booking row for the rest of the transaction."""
        pass

    @abstractmethod
    async def update_status(self, *, booking: Booking, expected_status: BookingStatus) -> Booking:
        """
        Persist status, schedule and lifecycle timestamps of ``booking``.

        The write only applies while the stored status still equals
        ``expected_status``.

        Raises:
            InvalidBookingStatusError: The stored status changed underneath us
        """
        pass

    @abstractmethod
    async def create_alternative(self, *, alternative: BookingAlternative) -> BookingAlternative:
        pass

    @abstractmethod
    async def get_undecided_alternative_for_update(
        self, *, alternative_id: UUID
    ) -> Optional[BookingAlternative]:
        """
        Lock an alternative that is neither accepted nor rejected.

        Returns:
            None when the alternative is unknown or already decided
        """
        pass

    @abstractmethod
    async def update_alternative_decision(
        self, *, alternative: BookingAlternative
    ) -> BookingAlternative:
        """
        Persist accepted_at / rejected_at, only while the row is still undecided.

        Raises:
            AlternativeNotFoundError: The alternative was decided concurrently
        """
        pass
