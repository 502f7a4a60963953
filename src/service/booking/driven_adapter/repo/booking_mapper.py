from typing import List

from src.service.booking.domain.entity.booking_alternative_entity import BookingAlternative
from src.service.booking.domain.entity.booking_entity import Booking
from src.service.booking.domain.enum.booking_status import BookingStatus
from src.service.booking.driven_adapter.model.booking_model import (
    BookingAlternativeModel,
    BookingModel,
)


def booking_to_entity(
    db_booking: BookingModel, alternatives: List[BookingAlternative] | None = None
) -> Booking:
    return Booking(
        id=db_booking.id,
        restaurant_id=db_booking.restaurant_id,
        user_id=db_booking.user_id,
        date=db_booking.date,
        time=db_booking.time,
        guests_count=db_booking.guests_count,
        duration=db_booking.duration,
        status=BookingStatus(db_booking.status),
        comment=db_booking.comment or '',
        slot_id=db_booking.slot_id,
        created_at=db_booking.created_at,
        updated_at=db_booking.updated_at,
        confirmed_at=db_booking.confirmed_at,
        rejected_at=db_booking.rejected_at,
        completed_at=db_booking.completed_at,
        alternatives=alternatives or [],
    )


def booking_to_model(booking: Booking) -> BookingModel:
    return BookingModel(
        id=booking.id,
        restaurant_id=booking.restaurant_id,
        user_id=booking.user_id,
        slot_id=booking.slot_id,
        date=booking.date,
        time=booking.time,
        duration=booking.duration,
        guests_count=booking.guests_count,
        status=booking.status.value,
        comment=booking.comment,
        created_at=booking.created_at,
        updated_at=booking.updated_at,
        confirmed_at=booking.confirmed_at,
        rejected_at=booking.rejected_at,
        completed_at=booking.completed_at,
    )


def alternative_to_entity(db_alternative: BookingAlternativeModel) -> BookingAlternative:
    return BookingAlternative(
        id=db_alternative.id,
        booking_id=db_alternative.booking_id,
        date=db_alternative.date,
        time=db_alternative.time,
        message=db_alternative.message or '',
        created_at=db_alternative.created_at,
        accepted_at=db_alternative.accepted_at,
        rejected_at=db_alternative.rejected_at,
    )
