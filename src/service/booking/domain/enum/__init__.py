"""Booking Domain Enums"""

from src.service.booking.domain.enum.availability_status import AvailabilityStatus
from src.service.booking.domain.enum.booking_status import (
    TERMINAL_STATUSES,
    BookingAction,
    BookingStatus,
)
from src.service.booking.domain.enum.notification_type import NotificationType, RecipientType

__all__ = [
    'AvailabilityStatus',
    'BookingAction',
    'BookingStatus',
    'NotificationType',
    'RecipientType',
    'TERMINAL_STATUSES',
]
