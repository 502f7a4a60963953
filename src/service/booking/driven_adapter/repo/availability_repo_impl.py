from datetime import date, datetime, timezone
from typing import List, Optional
from uuid import UUID

from sqlalchemy import case, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from src.platform.exception.exceptions import (
    DomainError,
    InsufficientCapacityError,
    NotFoundError,
)
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_availability_repo import IAvailabilityRepo
from src.service.booking.domain.entity.availability_slot_entity import AvailabilitySlot
from src.service.booking.driven_adapter.model.availability_model import AvailabilityModel
from src.service.booking.driven_adapter.repo.session_scoped_repo import SessionScopedRepo


class AvailabilityRepoImpl(SessionScopedRepo, IAvailabilityRepo):
    @staticmethod
    def _to_entity(db_slot: AvailabilityModel) -> AvailabilitySlot:
        return AvailabilitySlot(
            id=db_slot.id,
            restaurant_id=db_slot.restaurant_id,
            date=db_slot.date,
            time_slot=db_slot.time_slot,
            capacity=db_slot.capacity,
            reserved=db_slot.reserved,
            updated_at=db_slot.updated_at,
        )

    @Logger.io
    async def get_by_restaurant_and_date(
        self, *, restaurant_id: UUID, date: date
    ) -> List[AvailabilitySlot]:
        async with self._get_session() as session:
            result = await session.execute(
                select(AvailabilityModel)
                .where(
                    AvailabilityModel.restaurant_id == restaurant_id,
                    AvailabilityModel.date == date,
                )
                .order_by(AvailabilityModel.time_slot)
            )
            return [self._to_entity(row) for row in result.scalars().all()]

    @Logger.io
    async def get_by_id(self, *, slot_id: UUID) -> Optional[AvailabilitySlot]:
        async with self._get_session() as session:
            result = await session.execute(
                select(AvailabilityModel)
                .where(AvailabilityModel.id == slot_id)
                .execution_options(populate_existing=True)
            )
            db_slot = result.scalar_one_or_none()
            return self._to_entity(db_slot) if db_slot else None

    @Logger.io
    async def upsert(self, *, slot: AvailabilitySlot) -> AvailabilitySlot:
        async with self._get_session() as session:
            insert_fn = pg_insert if self._dialect_name(session) == 'postgresql' else sqlite_insert
            now = datetime.now(timezone.utc)
            stmt = insert_fn(AvailabilityModel).values(
                id=slot.id,
                restaurant_id=slot.restaurant_id,
                date=slot.date,
                time_slot=slot.time_slot,
                capacity=slot.capacity,
                reserved=0,
                updated_at=now,
            )
            # reserved is not in set_, so re-publishing keeps the seats already taken
            stmt = stmt.on_conflict_do_update(
                index_elements=['restaurant_id', 'date', 'time_slot'],
                set_={'capacity': stmt.excluded.capacity, 'updated_at': stmt.excluded.updated_at},
                where=AvailabilityModel.reserved <= stmt.excluded.capacity,
            )
            await session.execute(stmt)

            result = await session.execute(
                select(AvailabilityModel)
                .where(
                    AvailabilityModel.restaurant_id == slot.restaurant_id,
                    AvailabilityModel.date == slot.date,
                    AvailabilityModel.time_slot == slot.time_slot,
                )
                .execution_options(populate_existing=True)
            )
            stored = self._to_entity(result.scalar_one())

        if stored.capacity != slot.capacity:
            # Conflict update skipped by its WHERE: capacity would drop below reserved
            raise DomainError(
                f'capacity {slot.capacity} is below the {stored.reserved} seats already reserved'
            )
        return stored

    @Logger.io
    async def adjust_reserved_seats(self, *, slot_id: UUID, delta: int) -> AvailabilitySlot:
        async with self._get_session() as session:
            locked = await session.execute(
                select(AvailabilityModel.capacity, AvailabilityModel.reserved)
                .where(AvailabilityModel.id == slot_id)
                .with_for_update()
            )
            row = locked.one_or_none()
            if row is None:
                raise NotFoundError('Availability slot not found')
            if row.reserved + delta > row.capacity:
                raise InsufficientCapacityError(
                    f'Cannot reserve {delta} seats: {row.capacity - row.reserved} of '
                    f'{row.capacity} left'
                )

            # Computed from the stored value and guarded on capacity, so the write
            # stays correct on stores that ignore FOR UPDATE (sqlite)
            new_reserved = AvailabilityModel.reserved + delta
            result = await session.execute(
                update(AvailabilityModel)
                .where(
                    AvailabilityModel.id == slot_id,
                    new_reserved <= AvailabilityModel.capacity,
                )
                .values(
                    reserved=case((new_reserved < 0, 0), else_=new_reserved),
                    updated_at=datetime.now(timezone.utc),
                )
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:  # type: ignore[attr-defined]
                raise InsufficientCapacityError('Slot capacity was taken by a concurrent booking')

        slot = await self.get_by_id(slot_id=slot_id)
        if slot is None:
            raise NotFoundError('Availability slot not found')
        return slot
