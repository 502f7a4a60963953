"""Booking Domain Entities"""

from src.service.booking.domain.entity.availability_slot_entity import AvailabilitySlot
from src.service.booking.domain.entity.booking_alternative_entity import BookingAlternative
from src.service.booking.domain.entity.booking_entity import Booking
from src.service.booking.domain.entity.notification_entity import Notification

__all__ = ['AvailabilitySlot', 'Booking', 'BookingAlternative', 'Notification']
