"""
Unit tests for the alternative-time use cases

- SuggestAlternativeTimeUseCase: pending only, no status change
- AcceptAlternativeUseCase: decision + booking move in one commit
- RejectAlternativeUseCase: decision only, booking untouched
"""

from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import (
    AlternativeNotFoundError,
    InvalidBookingStatusError,
    NotFoundError,
)
from src.platform.types.uuid7 import new_uuid7
from src.service.booking.app.command.accept_alternative_use_case import AcceptAlternativeUseCase
from src.service.booking.app.command.reject_alternative_use_case import RejectAlternativeUseCase
from src.service.booking.app.command.suggest_alternative_time_use_case import (
    SuggestAlternativeTimeUseCase,
)
from src.service.booking.domain.enum.booking_status import BookingStatus
from src.service.booking.domain.enum.notification_type import NotificationType
from test.constants import ALTERNATIVE_DATE, LATE_SLOT
from test.service.booking.unit.helpers import UnitOfWorkMocks, make_booking


pytestmark = pytest.mark.unit


class TestSuggestAlternativeTime:
    def setup_method(self) -> None:
        self.mocks = UnitOfWorkMocks()
        self.use_case = SuggestAlternativeTimeUseCase(
            uow=self.mocks.uow, notification_dispatcher=self.mocks.notification_dispatcher
        )

    @pytest.mark.asyncio
    async def test_suggest_creates_alternative_and_notifies_user(self) -> None:
        # Given
        booking = make_booking()
        self.mocks.given_booking(booking)

        # When
        alternative = await self.use_case.execute(
            booking_id=booking.id, date=ALTERNATIVE_DATE, time=LATE_SLOT, message='msg'
        )

        # Then
        assert alternative.booking_id == booking.id
        assert alternative.message == 'msg'
        self.mocks.uow.booking_command_repo.create_alternative.assert_awaited_once_with(
            alternative=alternative
        )
        self.mocks.uow.booking_command_repo.update_status.assert_not_awaited()
        self.mocks.uow.availability_repo.adjust_reserved_seats.assert_not_awaited()
        self.mocks.uow.commit.assert_awaited_once()

        kwargs = self.mocks.notification_dispatcher.notify_user.await_args.kwargs
        assert kwargs['user_id'] == booking.user_id
        assert kwargs['type'] == NotificationType.ALTERNATIVE_OFFER

    @pytest.mark.asyncio
    async def test_suggest_for_confirmed_booking_fails(self) -> None:
        self.mocks.given_booking(make_booking(status=BookingStatus.CONFIRMED))

        with pytest.raises(InvalidBookingStatusError):
            await self.use_case.execute(
                booking_id=new_uuid7(), date=ALTERNATIVE_DATE, time=LATE_SLOT
            )
        self.mocks.uow.booking_command_repo.create_alternative.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_suggest_for_missing_booking_raises_not_found(self) -> None:
        self.mocks.given_booking(None)

        with pytest.raises(NotFoundError):
            await self.use_case.execute(
                booking_id=new_uuid7(), date=ALTERNATIVE_DATE, time=LATE_SLOT
            )


class TestAcceptAlternative:
    def setup_method(self) -> None:
        self.mocks = UnitOfWorkMocks()
        self.booking = make_booking(slot_id=new_uuid7())
        self.alternative = self.booking.propose_alternative(date=ALTERNATIVE_DATE, time=LATE_SLOT)
        self.mocks.given_booking(self.booking)
        self.mocks.uow.booking_command_repo.get_undecided_alternative_for_update = AsyncMock(
            return_value=self.alternative
        )
        self.use_case = AcceptAlternativeUseCase(
            uow=self.mocks.uow, notification_dispatcher=self.mocks.notification_dispatcher
        )

    @pytest.mark.asyncio
    async def test_accept_moves_booking_and_confirms(self) -> None:
        # When
        updated = await self.use_case.execute(alternative_id=self.alternative.id)

        # Then
        assert updated.date == ALTERNATIVE_DATE
        assert updated.time == LATE_SLOT
        assert updated.status == BookingStatus.CONFIRMED
        assert updated.slot_id == self.booking.slot_id

        decision = self.mocks.uow.booking_command_repo.update_alternative_decision
        assert decision.await_args.kwargs['alternative'].accepted_at is not None
        self.mocks.uow.booking_command_repo.update_status.assert_awaited_once_with(
            booking=updated, expected_status=BookingStatus.PENDING
        )
        self.mocks.uow.availability_repo.adjust_reserved_seats.assert_not_awaited()
        self.mocks.uow.commit.assert_awaited_once()

        kwargs = self.mocks.notification_dispatcher.notify_restaurant.await_args.kwargs
        assert kwargs['type'] == NotificationType.ALTERNATIVE_ACCEPTED
        assert kwargs['restaurant_id'] == self.booking.restaurant_id

    @pytest.mark.asyncio
    async def test_accept_decided_alternative_raises_alternative_not_found(self) -> None:
        # Given: the undecided filter matches nothing
        self.mocks.uow.booking_command_repo.get_undecided_alternative_for_update = AsyncMock(
            return_value=None
        )

        # When / Then
        with pytest.raises(AlternativeNotFoundError):
            await self.use_case.execute(alternative_id=self.alternative.id)
        self.mocks.uow.booking_command_repo.get_by_id_for_update.assert_not_awaited()
        self.mocks.uow.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_accept_for_cancelled_booking_fails(self) -> None:
        self.mocks.given_booking(self.booking.cancel())

        with pytest.raises(InvalidBookingStatusError):
            await self.use_case.execute(alternative_id=self.alternative.id)
        self.mocks.uow.booking_command_repo.update_alternative_decision.assert_not_awaited()
        self.mocks.uow.commit.assert_not_awaited()


class TestRejectAlternative:
    def setup_method(self) -> None:
        self.mocks = UnitOfWorkMocks()
        self.booking = make_booking()
        self.alternative = self.booking.propose_alternative(date=ALTERNATIVE_DATE, time=LATE_SLOT)
        self.mocks.given_booking(self.booking)
        self.mocks.uow.booking_command_repo.get_undecided_alternative_for_update = AsyncMock(
            return_value=self.alternative
        )
        self.use_case = RejectAlternativeUseCase(
            uow=self.mocks.uow, notification_dispatcher=self.mocks.notification_dispatcher
        )

    @pytest.mark.asyncio
    async def test_reject_sets_rejected_at_and_leaves_booking(self) -> None:
        # When
        rejected = await self.use_case.execute(alternative_id=self.alternative.id)

        # Then
        assert rejected.rejected_at is not None
        assert rejected.accepted_at is None
        self.mocks.uow.booking_command_repo.update_status.assert_not_awaited()
        self.mocks.uow.commit.assert_awaited_once()

        kwargs = self.mocks.notification_dispatcher.notify_restaurant.await_args.kwargs
        assert kwargs['type'] == NotificationType.ALTERNATIVE_REJECTED

    @pytest.mark.asyncio
    async def test_reject_decided_alternative_raises_alternative_not_found(self) -> None:
        self.mocks.uow.booking_command_repo.get_undecided_alternative_for_update = AsyncMock(
            return_value=None
        )

        with pytest.raises(AlternativeNotFoundError):
            await self.use_case.execute(alternative_id=self.alternative.id)
        self.mocks.uow.commit.assert_not_awaited()
