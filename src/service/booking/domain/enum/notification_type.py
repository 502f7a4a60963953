from enum import StrEnum


class NotificationType(StrEnum):
    NEW_BOOKING = 'new_booking'
    BOOKING_CONFIRMED = 'booking_confirmed'
    BOOKING_REJECTED = 'booking_rejected'
    BOOKING_CANCELLED = 'booking_cancelled'
    ALTERNATIVE_OFFER = 'alternative_offer'
    ALTERNATIVE_ACCEPTED = 'alternative_accepted'
    ALTERNATIVE_REJECTED = 'alternative_rejected'


class RecipientType(StrEnum):
    USER = 'user'
    RESTAURANT = 'restaurant'
