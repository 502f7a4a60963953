from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import AlternativeNotFoundError, NotFoundError
from src.platform.types.uuid7 import new_uuid7
from src.service.booking.app.query.get_booking_use_case import GetBookingUseCase
from src.service.booking.app.query.list_bookings_use_case import ListBookingsUseCase
from test.constants import ALTERNATIVE_DATE, LATE_SLOT
from test.service.booking.unit.helpers import make_booking


pytestmark = pytest.mark.unit


class TestGetBooking:
    def setup_method(self) -> None:
        self.booking_query_repo = AsyncMock()
        self.use_case = GetBookingUseCase(booking_query_repo=self.booking_query_repo)

    @pytest.mark.asyncio
    async def test_get_booking(self) -> None:
        booking = make_booking()
        self.booking_query_repo.get_by_id = AsyncMock(return_value=booking)

        assert await self.use_case.get_booking(booking_id=booking.id) is booking

    @pytest.mark.asyncio
    async def test_get_missing_booking_raises_not_found(self) -> None:
        self.booking_query_repo.get_by_id = AsyncMock(return_value=None)

        with pytest.raises(NotFoundError, match='Booking not found'):
            await self.use_case.get_booking(booking_id=new_uuid7())

    @pytest.mark.asyncio
    async def test_get_decided_alternative(self) -> None:
        alternative = (
            make_booking().propose_alternative(date=ALTERNATIVE_DATE, time=LATE_SLOT).reject()
        )
        self.booking_query_repo.get_alternative_by_id = AsyncMock(return_value=alternative)

        result = await self.use_case.get_alternative(alternative_id=alternative.id)

        assert result.rejected_at is not None

    @pytest.mark.asyncio
    async def test_get_missing_alternative_raises_alternative_not_found(self) -> None:
        self.booking_query_repo.get_alternative_by_id = AsyncMock(return_value=None)

        with pytest.raises(AlternativeNotFoundError):
            await self.use_case.get_alternative(alternative_id=new_uuid7())


class TestListBookings:
    @pytest.mark.asyncio
    async def test_list_by_restaurant_and_user(self) -> None:
        booking = make_booking()
        booking_query_repo = AsyncMock()
        booking_query_repo.list_by_restaurant = AsyncMock(return_value=[booking])
        booking_query_repo.list_by_user = AsyncMock(return_value=[booking])
        use_case = ListBookingsUseCase(booking_query_repo=booking_query_repo)

        by_restaurant = await use_case.list_restaurant_bookings(
            restaurant_id=booking.restaurant_id
        )
        by_user = await use_case.list_user_bookings(user_id=booking.user_id)

        assert by_restaurant == by_user == [booking]
        booking_query_repo.list_by_restaurant.assert_awaited_once_with(
            restaurant_id=booking.restaurant_id
        )
        booking_query_repo.list_by_user.assert_awaited_once_with(user_id=booking.user_id)
