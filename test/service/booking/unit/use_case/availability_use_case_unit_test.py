"""
Unit tests for the availability ledger use cases

- PublishSlotUseCase validates before opening a transaction
- AdjustReservedSeatsUseCase surfaces InsufficientCapacityError uncommitted
- CheckAvailabilityUseCase answers False for unpublished slots
"""

from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import (
    DomainError,
    InsufficientCapacityError,
    NotFoundError,
)
from src.platform.types.uuid7 import new_uuid7
from src.service.booking.app.command.adjust_reserved_seats_use_case import (
    AdjustReservedSeatsUseCase,
)
from src.service.booking.app.command.publish_slot_use_case import PublishSlotUseCase
from src.service.booking.app.query.check_availability_use_case import CheckAvailabilityUseCase
from src.service.booking.app.query.get_slots_use_case import GetSlotsUseCase
from test.constants import BOOKING_DATE, DINNER_SLOT, LATE_SLOT
from test.service.booking.unit.helpers import UnitOfWorkMocks, make_slot


pytestmark = pytest.mark.unit


class TestPublishSlot:
    def setup_method(self) -> None:
        self.mocks = UnitOfWorkMocks()
        self.mocks.uow.availability_repo.upsert = AsyncMock(side_effect=lambda *, slot: slot)
        self.use_case = PublishSlotUseCase(uow=self.mocks.uow)

    @pytest.mark.asyncio
    async def test_publish_slot_upserts_and_commits(self) -> None:
        restaurant_id = new_uuid7()

        slot = await self.use_case.execute(
            restaurant_id=restaurant_id, date=BOOKING_DATE, time_slot=DINNER_SLOT, capacity=20
        )

        assert slot.restaurant_id == restaurant_id
        assert slot.capacity == 20
        assert slot.reserved == 0
        self.mocks.uow.availability_repo.upsert.assert_awaited_once()
        self.mocks.uow.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_publish_slot_with_zero_capacity_fails_before_write(self) -> None:
        with pytest.raises(DomainError):
            await self.use_case.execute(
                restaurant_id=new_uuid7(), date=BOOKING_DATE, time_slot=DINNER_SLOT, capacity=0
            )

        self.mocks.uow.__aenter__.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_publish_slot_for_unknown_restaurant_fails(self) -> None:
        self.mocks.uow.restaurant_query_repo.exists = AsyncMock(return_value=False)

        with pytest.raises(NotFoundError):
            await self.use_case.execute(
                restaurant_id=new_uuid7(), date=BOOKING_DATE, time_slot=DINNER_SLOT, capacity=8
            )
        self.mocks.uow.availability_repo.upsert.assert_not_awaited()


class TestAdjustReservedSeats:
    def setup_method(self) -> None:
        self.mocks = UnitOfWorkMocks()
        self.use_case = AdjustReservedSeatsUseCase(uow=self.mocks.uow)

    @pytest.mark.asyncio
    async def test_adjust_commits_new_reserved_count(self) -> None:
        # Given
        slot = make_slot(capacity=20, reserved=6)
        self.mocks.uow.availability_repo.adjust_reserved_seats = AsyncMock(return_value=slot)

        # When
        result = await self.use_case.execute(slot_id=slot.id, delta=6)

        # Then
        assert result.reserved == 6
        self.mocks.uow.availability_repo.adjust_reserved_seats.assert_awaited_once_with(
            slot_id=slot.id, delta=6
        )
        self.mocks.uow.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_adjust_beyond_capacity_is_not_committed(self) -> None:
        self.mocks.uow.availability_repo.adjust_reserved_seats = AsyncMock(
            side_effect=InsufficientCapacityError()
        )

        with pytest.raises(InsufficientCapacityError):
            await self.use_case.execute(slot_id=new_uuid7(), delta=50)
        self.mocks.uow.commit.assert_not_awaited()


class TestAvailabilityQueries:
    def setup_method(self) -> None:
        self.restaurant_id = new_uuid7()
        self.availability_repo = AsyncMock()
        self.availability_repo.get_by_restaurant_and_date = AsyncMock(
            return_value=[make_slot(restaurant_id=self.restaurant_id, capacity=10, reserved=8)]
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ('time_slot', 'guests_count', 'expected'),
        [(DINNER_SLOT, 2, True), (DINNER_SLOT, 3, False), (LATE_SLOT, 1, False)],
    )
    async def test_check_availability(
        self, time_slot: str, guests_count: int, expected: bool
    ) -> None:
        use_case = CheckAvailabilityUseCase(availability_repo=self.availability_repo)

        available = await use_case.execute(
            restaurant_id=self.restaurant_id,
            date=BOOKING_DATE,
            time_slot=time_slot,
            guests_count=guests_count,
        )

        assert available is expected

    @pytest.mark.asyncio
    async def test_get_slots_returns_repo_rows(self) -> None:
        use_case = GetSlotsUseCase(availability_repo=self.availability_repo)

        slots = await use_case.execute(restaurant_id=self.restaurant_id, date=BOOKING_DATE)

        assert [s.time_slot for s in slots] == [DINNER_SLOT]
        self.availability_repo.get_by_restaurant_and_date.assert_awaited_once_with(
            restaurant_id=self.restaurant_id, date=BOOKING_DATE
        )
