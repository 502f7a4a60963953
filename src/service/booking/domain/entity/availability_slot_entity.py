from datetime import date, datetime, timezone
from typing import Optional
from uuid import UUID

import attrs

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.platform.types.uuid7 import new_uuid7
from src.service.booking.domain.enum.availability_status import AvailabilityStatus
from src.service.booking.domain.value_object.time_slot import validate_time_slot


@attrs.define
class AvailabilitySlot:
    """Seating capacity a restaurant publishes for one (date, time_slot)."""

    id: UUID
    restaurant_id: UUID
    date: date
    time_slot: str
    capacity: int
    reserved: int = 0
    updated_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        restaurant_id: UUID,
        date: date,
        time_slot: str,
        capacity: int,
    ) -> 'AvailabilitySlot':
        if capacity < 1:
            raise DomainError('capacity must be at least 1')
        validate_time_slot(time_slot)

        return cls(
            id=new_uuid7(),
            restaurant_id=restaurant_id,
            date=date,
            time_slot=time_slot,
            capacity=capacity,
            reserved=0,
            updated_at=datetime.now(timezone.utc),
        )

    @property
    def available_seats(self) -> int:
        return max(self.capacity - self.reserved, 0)

    def can_seat(self, guests_count: int) -> bool:
        return self.capacity - self.reserved >= guests_count

    def availability_status(
        self, *, high_occupancy_threshold: float | None = None
    ) -> AvailabilityStatus:
        threshold = (
            settings.HIGH_OCCUPANCY_THRESHOLD
            if high_occupancy_threshold is None
            else high_occupancy_threshold
        )
        if self.capacity <= self.reserved:
            return AvailabilityStatus.FULLY_BOOKED
        if self.reserved / self.capacity >= threshold:
            return AvailabilityStatus.LIMITED
        return AvailabilityStatus.AVAILABLE
