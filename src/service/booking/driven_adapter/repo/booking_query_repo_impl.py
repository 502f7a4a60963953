from typing import List, Optional
from uuid import UUID

from sqlalchemy import select

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.booking.domain.entity.booking_alternative_entity import BookingAlternative
from src.service.booking.domain.entity.booking_entity import Booking
from src.service.booking.driven_adapter.model.booking_model import (
    BookingAlternativeModel,
    BookingModel,
)
from src.service.booking.driven_adapter.repo.booking_mapper import (
    alternative_to_entity,
    booking_to_entity,
)
from src.service.booking.driven_adapter.repo.session_scoped_repo import SessionScopedRepo


class BookingQueryRepoImpl(SessionScopedRepo, IBookingQueryRepo):
    @Logger.io
    async def get_by_id(self, *, booking_id: UUID) -> Optional[Booking]:
        async with self._get_session() as session:
            result = await session.execute(
                select(BookingModel)
                .where(BookingModel.id == booking_id)
                .execution_options(populate_existing=True)
            )
            db_booking = result.scalar_one_or_none()
            if db_booking is None:
                return None

            alternatives_result = await session.execute(
                select(BookingAlternativeModel)
                .where(BookingAlternativeModel.booking_id == booking_id)
                .order_by(BookingAlternativeModel.created_at.desc(), BookingAlternativeModel.id.desc())
            )
            alternatives = [alternative_to_entity(a) for a in alternatives_result.scalars().all()]
            return booking_to_entity(db_booking, alternatives)

    @Logger.io
    async def list_by_restaurant(self, *, restaurant_id: UUID) -> List[Booking]:
        async with self._get_session() as session:
            result = await session.execute(
                select(BookingModel)
                .where(BookingModel.restaurant_id == restaurant_id)
                .order_by(BookingModel.date.desc(), BookingModel.time.desc())
            )
            return [booking_to_entity(b) for b in result.scalars().all()]

    @Logger.io
    async def list_by_user(self, *, user_id: UUID) -> List[Booking]:
        async with self._get_session() as session:
            result = await session.execute(
                select(BookingModel)
                .where(BookingModel.user_id == user_id)
                .order_by(BookingModel.date.desc(), BookingModel.time.desc())
            )
            return [booking_to_entity(b) for b in result.scalars().all()]

    @Logger.io
    async def get_alternative_by_id(self, *, alternative_id: UUID) -> Optional[BookingAlternative]:
        async with self._get_session() as session:
            result = await session.execute(
                select(BookingAlternativeModel)
                .where(BookingAlternativeModel.id == alternative_id)
                .execution_options(populate_existing=True)
            )
            db_alternative = result.scalar_one_or_none()
            return alternative_to_entity(db_alternative) if db_alternative else None
