"""
Integration fixtures for the booking service

Use cases are built by hand on top of the real unit of work, repositories
and notification dispatcher, all sharing the per-test SQLite database.
"""

from collections.abc import Callable
from datetime import date
from typing import Any
from uuid import UUID

import pytest

from src.platform.database.orm_db_setting import Database
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.booking.app.command.publish_slot_use_case import PublishSlotUseCase
from src.service.booking.domain.entity.availability_slot_entity import AvailabilitySlot
from src.service.booking.driven_adapter.notification.mock_email_sender import MockEmailSender
from src.service.booking.driven_adapter.notification.notification_dispatcher_impl import (
    NotificationDispatcherImpl,
)
from src.service.booking.driven_adapter.repo.availability_repo_impl import AvailabilityRepoImpl
from src.service.booking.driven_adapter.repo.booking_query_repo_impl import BookingQueryRepoImpl
from src.service.booking.driven_adapter.repo.notification_repo_impl import NotificationRepoImpl
from test.constants import BOOKING_DATE, DEFAULT_CAPACITY, DINNER_SLOT


@pytest.fixture
def database() -> Database:
    return Database()


@pytest.fixture
def uow_factory(database: Database) -> Callable[[], SqlAlchemyUnitOfWork]:
    """One UoW per use case, as the DI container's Factory provider does."""

    def _create() -> SqlAlchemyUnitOfWork:
        return SqlAlchemyUnitOfWork(session_factory=database.session)

    return _create


@pytest.fixture
def email_sender() -> MockEmailSender:
    return MockEmailSender(enabled=True)


@pytest.fixture
def notification_dispatcher(
    database: Database, email_sender: MockEmailSender
) -> NotificationDispatcherImpl:
    return NotificationDispatcherImpl(session_factory=database.session, email_sender=email_sender)


@pytest.fixture
def availability_repo(database: Database) -> AvailabilityRepoImpl:
    return AvailabilityRepoImpl(session_factory=database.session)


@pytest.fixture
def booking_query_repo(database: Database) -> BookingQueryRepoImpl:
    return BookingQueryRepoImpl(session_factory=database.session)


@pytest.fixture
def notification_repo(database: Database) -> NotificationRepoImpl:
    return NotificationRepoImpl(session_factory=database.session)


@pytest.fixture
def publish_slot(
    uow_factory: Callable[[], SqlAlchemyUnitOfWork], restaurant: dict[str, Any]
) -> Callable[..., Any]:
    async def _publish(
        *,
        capacity: int = DEFAULT_CAPACITY,
        slot_date: date = BOOKING_DATE,
        time_slot: str = DINNER_SLOT,
        restaurant_id: UUID | None = None,
    ) -> AvailabilitySlot:
        return await PublishSlotUseCase(uow=uow_factory()).execute(
            restaurant_id=restaurant_id or restaurant['id'],
            date=slot_date,
            time_slot=time_slot,
            capacity=capacity,
        )

    return _publish
