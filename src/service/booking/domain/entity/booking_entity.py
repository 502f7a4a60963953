from datetime import date, datetime, timezone
from typing import List, Optional
from uuid import UUID

import attrs

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import DomainError, InvalidBookingStatusError
from src.platform.logging.loguru_io import Logger
from src.platform.types.uuid7 import new_uuid7
from src.service.booking.domain.entity.booking_alternative_entity import BookingAlternative
from src.service.booking.domain.enum.booking_status import BookingAction, BookingStatus
from src.service.booking.domain.value_object.time_slot import validate_time_slot


# action -> {current status: next status}; anything missing is an illegal transition
BOOKING_TRANSITIONS: dict[BookingAction, dict[BookingStatus, BookingStatus]] = {
    BookingAction.CONFIRM: {BookingStatus.PENDING: BookingStatus.CONFIRMED},
    BookingAction.REJECT: {BookingStatus.PENDING: BookingStatus.REJECTED},
    BookingAction.CANCEL: {
        BookingStatus.PENDING: BookingStatus.CANCELLED,
        BookingStatus.CONFIRMED: BookingStatus.CANCELLED,
    },
    BookingAction.COMPLETE: {BookingStatus.CONFIRMED: BookingStatus.COMPLETED},
    BookingAction.PROPOSE_ALTERNATIVE: {BookingStatus.PENDING: BookingStatus.PENDING},
}


def next_status(*, current: BookingStatus, action: BookingAction) -> BookingStatus:
    """
    Raises:
        InvalidBookingStatusError: When the action is not allowed from ``current``
    """
    allowed = BOOKING_TRANSITIONS[action]
    if current not in allowed:
        raise InvalidBookingStatusError(f'Cannot {action} a booking with status {current}')
    return allowed[current]


@attrs.define
class Booking:
    id: UUID
    restaurant_id: UUID
    user_id: UUID
    date: date
    time: str
    guests_count: int
    duration: int = 120
    status: BookingStatus = BookingStatus.PENDING
    comment: str = ''
    slot_id: Optional[UUID] = None  # slot holding this booking's seats
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    confirmed_at: Optional[datetime] = None
    rejected_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    alternatives: List[BookingAlternative] = attrs.field(factory=list)

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        restaurant_id: UUID,
        user_id: UUID,
        date: date,
        time: str,
        guests_count: int,
        duration: Optional[int] = None,
        comment: str = '',
        slot_id: Optional[UUID] = None,
    ) -> 'Booking':
        if duration is None:
            duration = settings.DEFAULT_BOOKING_DURATION_MINUTES
        if guests_count < 1:
            raise DomainError('guests_count must be at least 1')
        if duration < settings.MIN_BOOKING_DURATION_MINUTES:
            raise DomainError(
                f'duration must be at least {settings.MIN_BOOKING_DURATION_MINUTES} minutes'
            )
        validate_time_slot(time, field_name='time')

        now = datetime.now(timezone.utc)
        return cls(
            id=new_uuid7(),
            restaurant_id=restaurant_id,
            user_id=user_id,
            date=date,
            time=time,
            guests_count=guests_count,
            duration=duration,
            status=BookingStatus.PENDING,
            comment=comment,
            slot_id=slot_id,
            created_at=now,
            updated_at=now,
        )

    @Logger.io
    def confirm(self) -> 'Booking':
        status = next_status(current=self.status, action=BookingAction.CONFIRM)
        now = datetime.now(timezone.utc)
        return attrs.evolve(self, status=status, confirmed_at=now, updated_at=now)

    @Logger.io
    def reject(self) -> 'Booking':
        status = next_status(current=self.status, action=BookingAction.REJECT)
        now = datetime.now(timezone.utc)
        return attrs.evolve(self, status=status, rejected_at=now, updated_at=now)

    @Logger.io
    def cancel(self) -> 'Booking':
        """Cancellation has no dedicated timestamp."""
        status = next_status(current=self.status, action=BookingAction.CANCEL)
        now = datetime.now(timezone.utc)
        return attrs.evolve(self, status=status, updated_at=now)

    @Logger.io
    def complete(self) -> 'Booking':
        status = next_status(current=self.status, action=BookingAction.COMPLETE)
        now = datetime.now(timezone.utc)
        return attrs.evolve(self, status=status, completed_at=now, updated_at=now)

    @Logger.io
    def propose_alternative(
        self, *, date: date, time: str, message: str = ''
    ) -> BookingAlternative:
        next_status(current=self.status, action=BookingAction.PROPOSE_ALTERNATIVE)
        return BookingAlternative.create(booking_id=self.id, date=date, time=time, message=message)

    @Logger.io
    def accept_alternative(self, alternative: BookingAlternative) -> 'Booking':
        """
        Move the booking to the alternative's date/time and confirm it.

        The seats stay on ``slot_id``; nothing is reserved on the new slot.
        Only a pending booking can take an alternative, so a terminal booking
        is never brought back to life.
        """
        if alternative.booking_id != self.id:
            raise DomainError('Alternative does not belong to this booking')
        status = next_status(current=self.status, action=BookingAction.CONFIRM)
        now = datetime.now(timezone.utc)
        return attrs.evolve(
            self,
            date=alternative.date,
            time=alternative.time,
            status=status,
            confirmed_at=now,
            updated_at=now,
        )
