from datetime import date
from typing import Any
from unittest.mock import AsyncMock, MagicMock
from uuid import UUID

import attrs

from src.platform.types.uuid7 import new_uuid7
from src.service.booking.domain.entity.availability_slot_entity import AvailabilitySlot
from src.service.booking.domain.entity.booking_entity import Booking
from src.service.booking.domain.enum.booking_status import BookingStatus
from test.constants import BOOKING_DATE, DINNER_SLOT


class UnitOfWorkMocks:
    """
    AsyncMock stand-in for SqlAlchemyUnitOfWork

    Every repository the real UoW exposes is an AsyncMock; tests set return
    values on the methods they care about. ``uow.commit`` records whether the
    use case reached the end of its transaction.
    """

    def __init__(self) -> None:
        self.uow = MagicMock()
        self.uow.__aenter__ = AsyncMock(return_value=self.uow)
        self.uow.__aexit__ = AsyncMock(return_value=False)  # never swallow errors
        self.uow.commit = AsyncMock()

        self.uow.availability_repo = AsyncMock()
        self.uow.booking_command_repo = AsyncMock()
        self.uow.booking_query_repo = AsyncMock()
        self.uow.notification_repo = AsyncMock()
        self.uow.restaurant_query_repo = AsyncMock()
        self.uow.user_query_repo = AsyncMock()

        self.uow.restaurant_query_repo.exists = AsyncMock(return_value=True)
        self.uow.user_query_repo.exists = AsyncMock(return_value=True)
        # Writes echo back what they were given
        self.uow.booking_command_repo.create = AsyncMock(side_effect=_echo('booking'))
        self.uow.booking_command_repo.update_status = AsyncMock(side_effect=_echo('booking'))
        self.uow.booking_command_repo.create_alternative = AsyncMock(
            side_effect=_echo('alternative')
        )
        self.uow.booking_command_repo.update_alternative_decision = AsyncMock(
            side_effect=_echo('alternative')
        )

        self.notification_dispatcher = AsyncMock()

    def given_booking(self, booking: Booking | None) -> None:
        self.uow.booking_command_repo.get_by_id_for_update = AsyncMock(return_value=booking)
        self.uow.booking_query_repo.get_by_id = AsyncMock(return_value=booking)

    def given_slots(self, *slots: AvailabilitySlot) -> None:
        self.uow.availability_repo.get_by_restaurant_and_date = AsyncMock(
            return_value=list(slots)
        )


def _echo(keyword: str) -> Any:
    async def _return_argument(**kwargs: Any) -> Any:
        return kwargs[keyword]

    return _return_argument


def make_slot(
    *,
    restaurant_id: UUID | None = None,
    slot_date: date = BOOKING_DATE,
    time_slot: str = DINNER_SLOT,
    capacity: int = 20,
    reserved: int = 0,
) -> AvailabilitySlot:
    return AvailabilitySlot(
        id=new_uuid7(),
        restaurant_id=restaurant_id or new_uuid7(),
        date=slot_date,
        time_slot=time_slot,
        capacity=capacity,
        reserved=reserved,
    )


def make_booking(
    *,
    status: BookingStatus = BookingStatus.PENDING,
    guests_count: int = 4,
    slot_id: UUID | None = None,
) -> Booking:
    booking = Booking.create(
        restaurant_id=new_uuid7(),
        user_id=new_uuid7(),
        date=BOOKING_DATE,
        time=DINNER_SLOT,
        guests_count=guests_count,
        slot_id=slot_id,
    )
    return attrs.evolve(booking, status=status)
