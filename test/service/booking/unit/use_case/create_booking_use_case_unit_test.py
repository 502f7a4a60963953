"""
Unit tests for CreateBookingUseCase

Tests:
- Validation happens before the unit of work is opened
- Unknown restaurant / user -> NotFoundError
- Missing or full slot -> NoAvailabilityError (fast path)
- Booking insert + seat reservation share one commit
- Notification failure never fails the booking
"""

from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import (
    DomainError,
    InsufficientCapacityError,
    NoAvailabilityError,
    NotFoundError,
)
from src.platform.types.uuid7 import new_uuid7
from src.service.booking.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.booking.domain.entity.booking_entity import Booking
from src.service.booking.domain.enum.booking_status import BookingStatus
from src.service.booking.domain.enum.notification_type import NotificationType
from test.constants import BOOKING_DATE, DINNER_SLOT, LATE_SLOT
from test.service.booking.unit.helpers import UnitOfWorkMocks, make_slot


pytestmark = pytest.mark.unit


class TestCreateBookingUseCase:
    def setup_method(self) -> None:
        self.mocks = UnitOfWorkMocks()
        self.restaurant_id = new_uuid7()
        self.user_id = new_uuid7()
        self.slot = make_slot(restaurant_id=self.restaurant_id, capacity=20, reserved=0)
        self.mocks.given_slots(self.slot)
        self.use_case = CreateBookingUseCase(
            uow=self.mocks.uow, notification_dispatcher=self.mocks.notification_dispatcher
        )

    async def _execute(self, *, guests_count: int = 4, time: str = DINNER_SLOT) -> Booking:
        return await self.use_case.execute(
            restaurant_id=self.restaurant_id,
            user_id=self.user_id,
            date=BOOKING_DATE,
            time=time,
            guests_count=guests_count,
            comment='Window seat please',
        )

    @pytest.mark.asyncio
    async def test_create_booking_reserves_seats_and_commits(self) -> None:
        # When
        booking = await self._execute(guests_count=4)

        # Then
        assert booking.status == BookingStatus.PENDING
        assert booking.slot_id == self.slot.id
        assert booking.comment == 'Window seat please'
        self.mocks.uow.booking_command_repo.create.assert_awaited_once_with(booking=booking)
        self.mocks.uow.availability_repo.adjust_reserved_seats.assert_awaited_once_with(
            slot_id=self.slot.id, delta=4
        )
        self.mocks.uow.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_booking_notifies_restaurant_after_commit(self) -> None:
        # When
        booking = await self._execute()

        # Then
        dispatcher = self.mocks.notification_dispatcher
        dispatcher.notify_restaurant.assert_awaited_once()
        kwargs = dispatcher.notify_restaurant.await_args.kwargs
        assert kwargs['restaurant_id'] == self.restaurant_id
        assert kwargs['type'] == NotificationType.NEW_BOOKING
        assert kwargs['related_id'] == booking.id
        dispatcher.notify_user.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_guests_count_fails_before_any_read(self) -> None:
        with pytest.raises(DomainError):
            await self._execute(guests_count=0)

        self.mocks.uow.__aenter__.assert_not_awaited()
        self.mocks.uow.availability_repo.get_by_restaurant_and_date.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_restaurant_raises_not_found(self) -> None:
        # Given
        self.mocks.uow.restaurant_query_repo.exists = AsyncMock(return_value=False)

        # When / Then
        with pytest.raises(NotFoundError, match='Restaurant'):
            await self._execute()
        self.mocks.uow.booking_command_repo.create.assert_not_awaited()
        self.mocks.uow.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_user_raises_not_found(self) -> None:
        self.mocks.uow.user_query_repo.exists = AsyncMock(return_value=False)

        with pytest.raises(NotFoundError, match='User'):
            await self._execute()
        self.mocks.uow.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_no_slot_at_requested_time_raises_no_availability(self) -> None:
        with pytest.raises(NoAvailabilityError):
            await self._execute(time=LATE_SLOT)

        self.mocks.uow.booking_command_repo.create.assert_not_awaited()
        self.mocks.notification_dispatcher.notify_restaurant.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_not_enough_free_seats_raises_no_availability(self) -> None:
        # Given: 18 of 20 seats already taken
        self.mocks.given_slots(make_slot(restaurant_id=self.restaurant_id, reserved=18))

        # When / Then
        with pytest.raises(NoAvailabilityError, match='2 seats left'):
            await self._execute(guests_count=4)
        self.mocks.uow.availability_repo.adjust_reserved_seats.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_capacity_lost_to_concurrent_booking_is_not_committed(self) -> None:
        # Given: the slot looked free but the locked re-check fails
        self.mocks.uow.availability_repo.adjust_reserved_seats = AsyncMock(
            side_effect=InsufficientCapacityError()
        )

        # When / Then
        with pytest.raises(InsufficientCapacityError):
            await self._execute()
        self.mocks.uow.commit.assert_not_awaited()
        self.mocks.uow.__aexit__.assert_awaited_once()
        self.mocks.notification_dispatcher.notify_restaurant.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_notification_failure_does_not_fail_booking(self) -> None:
        # Given
        self.mocks.notification_dispatcher.notify_restaurant = AsyncMock(
            side_effect=RuntimeError('mail server down')
        )

        # When
        booking = await self._execute()

        # Then
        assert booking.slot_id == self.slot.id
        self.mocks.uow.commit.assert_awaited_once()
