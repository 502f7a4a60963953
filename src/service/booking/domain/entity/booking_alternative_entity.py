from datetime import date, datetime, timezone
from typing import Optional
from uuid import UUID

import attrs

from src.platform.exception.exceptions import AlternativeNotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.types.uuid7 import new_uuid7
from src.service.booking.domain.value_object.time_slot import validate_time_slot


@attrs.define
class BookingAlternative:
    """
    A restaurant-proposed substitute date/time for a pending booking.

    At most one of accepted_at / rejected_at is ever set, and a decided
    alternative never changes again.
    """

    id: UUID
    booking_id: UUID
    date: date
    time: str
    message: str = ''
    created_at: Optional[datetime] = None
    accepted_at: Optional[datetime] = None
    rejected_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(
        cls, *, booking_id: UUID, date: date, time: str, message: str = ''
    ) -> 'BookingAlternative':
        validate_time_slot(time, field_name='time')
        return cls(
            id=new_uuid7(),
            booking_id=booking_id,
            date=date,
            time=time,
            message=message,
            created_at=datetime.now(timezone.utc),
        )

    @property
    def is_decided(self) -> bool:
        return self.accepted_at is not None or self.rejected_at is not None

    def _ensure_undecided(self) -> None:
        if self.is_decided:
            raise AlternativeNotFoundError()

    @Logger.io
    def accept(self) -> 'BookingAlternative':
        self._ensure_undecided()
        return attrs.evolve(self, accepted_at=datetime.now(timezone.utc))

    @Logger.io
    def reject(self) -> 'BookingAlternative':
        self._ensure_undecided()
        return attrs.evolve(self, rejected_at=datetime.now(timezone.utc))
