from typing import Optional, Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

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


class UpdateBookingStatusToRejectedUseCase:
    """pending -> rejected. The reason only travels in the user's notification."""

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
        booking_id: UUID,
        reason: Optional[str] = None,
        context: RequestContext | None = None,
    ) -> Booking:
        context = context or RequestContext()
        with (
            self.tracer.start_as_current_span(
                'use_case.reject_booking', attributes={'booking.id': str(booking_id)}
            ),
            metrics.track_booking_operation('reject'),
            context.deadline(),
        ):
            async with self.uow:
                booking = await self.uow.booking_command_repo.get_by_id_for_update(
                    booking_id=booking_id
                )
                if not booking:
                    raise NotFoundError('Booking not found')

                rejected = booking.reject()
                await self.uow.booking_command_repo.update_status(
                    booking=rejected, expected_status=booking.status
                )
                await self.uow.commit()

        context.logger.info(f'🚫 [REJECT] Booking {booking_id} rejected (reason={reason!r})')

        await dispatch_notification(
            dispatcher=self.notification_dispatcher,
            message=NotificationMessage.booking_rejected(
                user_id=rejected.user_id,
                booking_id=rejected.id,
                booking_date=rejected.date,
                booking_time=rejected.time,
                reason=reason,
            ),
            context=context,
        )
        return rejected
