"""
Create Booking Use Case

Flow (one transaction):
1. Validate booking input
2. Check restaurant and user exist
3. Find the slot for (restaurant, date, time) and fast-fail when it is
   missing or has too few free seats
4. Insert the pending booking and reserve its seats on the slot
5. Commit, then notify the restaurant

The seat reservation re-checks capacity under the slot's row lock, so two
requests racing for the last seats cannot both commit. If it fails, the
booking insert is rolled back with it.
"""

from datetime import date
from typing import Optional, Self
from uuid import UUID

import attrs
from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.context.request_context import RequestContext
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NoAvailabilityError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.booking.app.command.notification_helper import dispatch_notification
from src.service.booking.app.interface.i_notification_dispatcher import INotificationDispatcher
from src.service.booking.domain.entity.booking_entity import Booking
from src.service.booking.domain.value_object.notification_message import NotificationMessage


class CreateBookingUseCase:
    def __init__(
        self, *, uow: AbstractUnitOfWork, notification_dispatcher: INotificationDispatcher
    ) -> None:
        self.uow = uow
        self.notification_dispatcher = notification_dispatcher
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
        notification_dispatcher: INotificationDispatcher = Depends(
            Provide[Container.notification_dispatcher]
        ),
    ) -> Self:
        return cls(uow=uow, notification_dispatcher=notification_dispatcher)

    @Logger.io
    async def execute(
        self,
        *,
        restaurant_id: UUID,
        user_id: UUID,
        date: date,
        time: str,
        guests_count: int,
        duration: Optional[int] = None,
        comment: str = '',
        context: RequestContext | None = None,
    ) -> Booking:
        context = context or RequestContext()
        with (
            self.tracer.start_as_current_span(
                'use_case.create_booking',
                attributes={
                    'restaurant.id': str(restaurant_id),
                    'user.id': str(user_id),
                    'booking.date': date.isoformat(),
                    'booking.time': time,
                    'booking.guests_count': guests_count,
                },
            ) as span,
            metrics.track_booking_operation('create_booking'),
        ):
            # Validation before any read or write
            booking = Booking.create(
                restaurant_id=restaurant_id,
                user_id=user_id,
                date=date,
                time=time,
                guests_count=guests_count,
                duration=duration,
                comment=comment,
            )

            with context.deadline():
                async with self.uow:
                    if not await self.uow.restaurant_query_repo.exists(restaurant_id=restaurant_id):
                        raise NotFoundError('Restaurant not found')
                    if not await self.uow.user_query_repo.exists(user_id=user_id):
                        raise NotFoundError('User not found')

                    slots = await self.uow.availability_repo.get_by_restaurant_and_date(
                        restaurant_id=restaurant_id, date=date
                    )
                    slot = next((s for s in slots if s.time_slot == time), None)
                    if slot is None:
                        raise NoAvailabilityError(f'No availability on {date} at {time}')
                    if not slot.can_seat(guests_count):
                        raise NoAvailabilityError(
                            f'Only {slot.available_seats} seats left on {date} at {time}'
                        )

                    booking = attrs.evolve(booking, slot_id=slot.id)
                    await self.uow.booking_command_repo.create(booking=booking)
                    await self.uow.availability_repo.adjust_reserved_seats(
                        slot_id=slot.id, delta=guests_count
                    )
                    await self.uow.commit()

            span.set_attribute('booking.id', str(booking.id))

        metrics.record_seat_adjustment(delta=guests_count, result='success')
        context.logger.info(
            f'📝 [CREATE-BOOKING] {booking.id}: {guests_count} guests on {date} {time} '
            f'at restaurant {restaurant_id}'
        )

        await dispatch_notification(
            dispatcher=self.notification_dispatcher,
            message=NotificationMessage.new_booking(
                restaurant_id=restaurant_id,
                booking_id=booking.id,
                booking_date=booking.date,
                booking_time=booking.time,
            ),
            context=context,
        )
        return booking
