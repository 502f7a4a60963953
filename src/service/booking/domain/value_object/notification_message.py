"""
Notification texts produced by booking state changes.

Each factory returns the recipient and text for one NotificationType; the
application layer hands the message to the dispatcher after commit.
"""

from datetime import date
from typing import Optional
from uuid import UUID

import attrs

from src.service.booking.domain.enum.notification_type import NotificationType, RecipientType


DISPLAY_DATE_FORMAT = '%d.%m.%Y'


def format_display_date(value: date) -> str:
    return value.strftime(DISPLAY_DATE_FORMAT)


@attrs.define(frozen=True)
class NotificationMessage:
    recipient_type: RecipientType
    recipient_id: UUID
    type: NotificationType
    title: str
    message: str
    related_id: UUID

    @classmethod
    def new_booking(
        cls, *, restaurant_id: UUID, booking_id: UUID, booking_date: date, booking_time: str
    ) -> 'NotificationMessage':
        return cls(
            recipient_type=RecipientType.RESTAURANT,
            recipient_id=restaurant_id,
            type=NotificationType.NEW_BOOKING,
            title='New booking',
            message=(
                f'You have a new booking on {format_display_date(booking_date)} at {booking_time}'
            ),
            related_id=booking_id,
        )

    @classmethod
    def booking_confirmed(
        cls, *, user_id: UUID, booking_id: UUID, booking_date: date, booking_time: str
    ) -> 'NotificationMessage':
        return cls(
            recipient_type=RecipientType.USER,
            recipient_id=user_id,
            type=NotificationType.BOOKING_CONFIRMED,
            title='Booking confirmed',
            message=(
                f'Your booking on {format_display_date(booking_date)} at {booking_time} '
                'has been confirmed by the restaurant.'
            ),
            related_id=booking_id,
        )

    @classmethod
    def booking_rejected(
        cls,
        *,
        user_id: UUID,
        booking_id: UUID,
        booking_date: date,
        booking_time: str,
        reason: Optional[str] = None,
    ) -> 'NotificationMessage':
        message = (
            f'Your booking on {format_display_date(booking_date)} at {booking_time} '
            'has been rejected by the restaurant.'
        )
        if reason:
            message += f' Reason: {reason}'
        return cls(
            recipient_type=RecipientType.USER,
            recipient_id=user_id,
            type=NotificationType.BOOKING_REJECTED,
            title='Booking rejected',
            message=message,
            related_id=booking_id,
        )

    @classmethod
    def booking_cancelled(
        cls, *, restaurant_id: UUID, booking_id: UUID, booking_date: date, booking_time: str
    ) -> 'NotificationMessage':
        return cls(
            recipient_type=RecipientType.RESTAURANT,
            recipient_id=restaurant_id,
            type=NotificationType.BOOKING_CANCELLED,
            title='Booking cancelled',
            message=(
                f'Booking on {format_display_date(booking_date)} at {booking_time} '
                'has been cancelled by the user.'
            ),
            related_id=booking_id,
        )

    @classmethod
    def alternative_offer(
        cls, *, user_id: UUID, booking_id: UUID, alternative_date: date, alternative_time: str
    ) -> 'NotificationMessage':
        return cls(
            recipient_type=RecipientType.USER,
            recipient_id=user_id,
            type=NotificationType.ALTERNATIVE_OFFER,
            title='Alternative time offered',
            message=(
                'Restaurant offers alternative time for your booking: '
                f'{format_display_date(alternative_date)} at {alternative_time}'
            ),
            related_id=booking_id,
        )

    @classmethod
    def alternative_accepted(
        cls, *, restaurant_id: UUID, booking_id: UUID, alternative_date: date, alternative_time: str
    ) -> 'NotificationMessage':
        return cls(
            recipient_type=RecipientType.RESTAURANT,
            recipient_id=restaurant_id,
            type=NotificationType.ALTERNATIVE_ACCEPTED,
            title='Alternative booking accepted',
            message=(
                'User has accepted your alternative booking offer for '
                f'{format_display_date(alternative_date)} at {alternative_time}'
            ),
            related_id=booking_id,
        )

    @classmethod
    def alternative_rejected(
        cls, *, restaurant_id: UUID, booking_id: UUID, alternative_date: date, alternative_time: str
    ) -> 'NotificationMessage':
        return cls(
            recipient_type=RecipientType.RESTAURANT,
            recipient_id=restaurant_id,
            type=NotificationType.ALTERNATIVE_REJECTED,
            title='Alternative booking rejected',
            message=(
                'User has rejected your alternative booking offer for '
                f'{format_display_date(alternative_date)} at {alternative_time}'
            ),
            related_id=booking_id,
        )
