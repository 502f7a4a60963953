"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.booking.driven_adapter.model.availability_model import AvailabilityModel
from src.service.booking.driven_adapter.model.booking_model import (
    BookingAlternativeModel,
    BookingModel,
)
from src.service.booking.driven_adapter.model.notification_model import NotificationModel
from src.service.booking.driven_adapter.model.party_model import RestaurantModel, UserModel

__all__ = [
    'AvailabilityModel',
    'BookingAlternativeModel',
    'BookingModel',
    'NotificationModel',
    'RestaurantModel',
    'UserModel',
]
