"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.booking.app.command import (
    accept_alternative_use_case,
    adjust_reserved_seats_use_case,
    create_booking_use_case,
    mark_notification_as_read_use_case,
    publish_slot_use_case,
    reject_alternative_use_case,
    suggest_alternative_time_use_case,
    update_booking_status_to_cancelled_use_case,
    update_booking_status_to_completed_use_case,
    update_booking_status_to_confirmed_use_case,
    update_booking_status_to_rejected_use_case,
)
from src.service.booking.app.query import (
    check_availability_use_case,
    get_booking_use_case,
    get_slots_use_case,
    list_bookings_use_case,
    list_notifications_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    publish_slot_use_case,
    adjust_reserved_seats_use_case,
    create_booking_use_case,
    update_booking_status_to_confirmed_use_case,
    update_booking_status_to_rejected_use_case,
    update_booking_status_to_cancelled_use_case,
    update_booking_status_to_completed_use_case,
    suggest_alternative_time_use_case,
    accept_alternative_use_case,
    reject_alternative_use_case,
    mark_notification_as_read_use_case,
    get_slots_use_case,
    check_availability_use_case,
    get_booking_use_case,
    list_bookings_use_case,
    list_notifications_use_case,
]
