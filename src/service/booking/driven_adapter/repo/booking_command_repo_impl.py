"""
Booking Command Repository Implementation

Every method runs on the unit of work's session; row locks taken by the
``*_for_update`` reads are held until the UoW commits or rolls back.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import select, update

from src.platform.exception.exceptions import AlternativeNotFoundError, InvalidBookingStatusError
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.booking.domain.entity.booking_alternative_entity import BookingAlternative
from src.service.booking.domain.entity.booking_entity import Booking
from src.service.booking.domain.enum.booking_status import BookingStatus
from src.service.booking.driven_adapter.model.booking_model import (
    BookingAlternativeModel,
    BookingModel,
)
from src.service.booking.driven_adapter.repo.booking_mapper import (
    alternative_to_entity,
    booking_to_entity,
    booking_to_model,
)
from src.service.booking.driven_adapter.repo.session_scoped_repo import SessionScopedRepo


class BookingCommandRepoImpl(SessionScopedRepo, IBookingCommandRepo):
    @Logger.io
    async def create(self, *, booking: Booking) -> Booking:
        async with self._get_session() as session:
            session.add(booking_to_model(booking))
            await session.flush()
            return booking

    @Logger.io
    async def get_by_id_for_update(self, *, booking_id: UUID) -> Optional[Booking]:
        async with self._get_session() as session:
            result = await session.execute(
                select(BookingModel)
                .where(BookingModel.id == booking_id)
                .with_for_update()
                .execution_options(populate_existing=True)
            )
            db_booking = result.scalar_one_or_none()
            return booking_to_entity(db_booking) if db_booking else None

    @Logger.io
    async def update_status(self, *, booking: Booking, expected_status: BookingStatus) -> Booking:
        async with self._get_session() as session:
            result = await session.execute(
                update(BookingModel)
                .where(
                    BookingModel.id == booking.id,
                    BookingModel.status == expected_status.value,
                )
                .values(
                    status=booking.status.value,
                    date=booking.date,
                    time=booking.time,
                    updated_at=booking.updated_at,
                    confirmed_at=booking.confirmed_at,
                    rejected_at=booking.rejected_at,
                    completed_at=booking.completed_at,
                )
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:  # type: ignore[attr-defined]
                raise InvalidBookingStatusError(
                    f'Booking is no longer {expected_status}, it was changed concurrently'
                )
            return booking

    @Logger.io
    async def create_alternative(self, *, alternative: BookingAlternative) -> BookingAlternative:
        async with self._get_session() as session:
            session.add(
                BookingAlternativeModel(
                    id=alternative.id,
                    booking_id=alternative.booking_id,
                    date=alternative.date,
                    time=alternative.time,
                    message=alternative.message,
                    created_at=alternative.created_at,
                )
            )
            await session.flush()
            return alternative

    @Logger.io
    async def get_undecided_alternative_for_update(
        self, *, alternative_id: UUID
    ) -> Optional[BookingAlternative]:
        async with self._get_session() as session:
            result = await session.execute(
                select(BookingAlternativeModel)
                .where(
                    BookingAlternativeModel.id == alternative_id,
                    BookingAlternativeModel.accepted_at.is_(None),
                    BookingAlternativeModel.rejected_at.is_(None),
                )
                .with_for_update()
                .execution_options(populate_existing=True)
            )
            db_alternative = result.scalar_one_or_none()
            return alternative_to_entity(db_alternative) if db_alternative else None

    @Logger.io
    async def update_alternative_decision(
        self, *, alternative: BookingAlternative
    ) -> BookingAlternative:
        async with self._get_session() as session:
            result = await session.execute(
                update(BookingAlternativeModel)
                .where(
                    BookingAlternativeModel.id == alternative.id,
                    BookingAlternativeModel.accepted_at.is_(None),
                    BookingAlternativeModel.rejected_at.is_(None),
                )
                .values(accepted_at=alternative.accepted_at, rejected_at=alternative.rejected_at)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:  # type: ignore[attr-defined]
                raise AlternativeNotFoundError()
            return alternative
