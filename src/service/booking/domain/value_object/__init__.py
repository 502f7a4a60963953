"""Booking Domain Value Objects"""

from src.service.booking.domain.value_object.notification_message import NotificationMessage
from src.service.booking.domain.value_object.time_slot import validate_time_slot

__all__ = ['NotificationMessage', 'validate_time_slot']
