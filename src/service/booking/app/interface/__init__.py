"""Application layer interfaces (Ports)"""

from src.service.booking.app.interface.i_availability_repo import IAvailabilityRepo
from src.service.booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.booking.app.interface.i_notification_dispatcher import (
    IEmailSender,
    INotificationDispatcher,
)
from src.service.booking.app.interface.i_notification_repo import INotificationRepo
from src.service.booking.app.interface.i_party_query_repo import (
    IRestaurantQueryRepo,
    IUserQueryRepo,
)

__all__ = [
    'IAvailabilityRepo',
    'IBookingCommandRepo',
    'IBookingQueryRepo',
    'IEmailSender',
    'INotificationDispatcher',
    'INotificationRepo',
    'IRestaurantQueryRepo',
    'IUserQueryRepo',
]
