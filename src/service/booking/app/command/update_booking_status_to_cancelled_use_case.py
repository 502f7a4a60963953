from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.context.request_context import RequestContext
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.booking.app.command.notification_helper import dispatch_notification
from src.service.booking.app.interface.i_notification_dispatcher import INotificationDispatcher
from src.service.booking.domain.entity.booking_entity import Booking
from src.service.booking.domain.value_object.notification_message import NotificationMessage


class UpdateBookingStatusToCancelledUseCase:
    """
    pending/confirmed -> cancelled, then tell the restaurant.

    With ``release_seats_on_cancel`` on, the booking's seats go back to the
    slot they were reserved on, in the same transaction as the status change.
    With it off, the seats stay reserved.
    """

    def __init__(
        self,
        *,
        uow: AbstractUnitOfWork,
        notification_dispatcher: INotificationDispatcher,
        release_seats_on_cancel: bool | None = None,
    ) -> None:
        self.uow = uow
        self.notification_dispatcher = notification_dispatcher
        self.release_seats_on_cancel = (
            settings.RELEASE_SEATS_ON_CANCEL
            if release_seats_on_cancel is None
            else release_seats_on_cancel
        )
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
    async def execute(self, *, booking_id: UUID, context: RequestContext | None = None) -> Booking:
        context = context or RequestContext()
        released = False
        with (
            self.tracer.start_as_current_span(
                'use_case.cancel_booking', attributes={'booking.id': str(booking_id)}
            ),
            metrics.track_booking_operation('cancel'),
            context.deadline(),
        ):
            async with self.uow:
                booking = await self.uow.booking_command_repo.get_by_id_for_update(
                    booking_id=booking_id
                )
                if not booking:
                    raise NotFoundError('Booking not found')

                cancelled = booking.cancel()
                await self.uow.booking_command_repo.update_status(
                    booking=cancelled, expected_status=booking.status
                )
                if self.release_seats_on_cancel and cancelled.slot_id is not None:
                    await self.uow.availability_repo.adjust_reserved_seats(
                        slot_id=cancelled.slot_id, delta=-cancelled.guests_count
                    )
                    released = True
                await self.uow.commit()

        if released:
            metrics.record_seat_adjustment(delta=-cancelled.guests_count, result='success')
        context.logger.info(
            f'❌ [CANCEL] Booking {booking_id} cancelled '
            f'(released {cancelled.guests_count if released else 0} seats)'
        )

        await dispatch_notification(
            dispatcher=self.notification_dispatcher,
            message=NotificationMessage.booking_cancelled(
                restaurant_id=cancelled.restaurant_id,
                booking_id=cancelled.id,
                booking_date=cancelled.date,
                booking_time=cancelled.time,
            ),
            context=context,
        )
        return cancelled
