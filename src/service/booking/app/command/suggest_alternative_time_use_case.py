from datetime import date
from typing import Self
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
from src.service.booking.domain.entity.booking_alternative_entity import BookingAlternative
from src.service.booking.domain.value_object.notification_message import NotificationMessage


class SuggestAlternativeTimeUseCase:
    """
    Restaurant proposes another date/time for a pending booking.

    The booking stays pending and no seats move. Earlier undecided proposals
    remain open.
    """

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
        date: date,
        time: str,
        message: str = '',
        context: RequestContext | None = None,
    ) -> BookingAlternative:
        context = context or RequestContext()
        with (
            self.tracer.start_as_current_span(
                'use_case.suggest_alternative_time',
                attributes={
                    'booking.id': str(booking_id),
                    'alternative.date': date.isoformat(),
                    'alternative.time': time,
                },
            ),
            metrics.track_booking_operation('suggest_alternative'),
            context.deadline(),
        ):
            async with self.uow:
                booking = await self.uow.booking_command_repo.get_by_id_for_update(
                    booking_id=booking_id
                )
                if not booking:
                    raise NotFoundError('Booking not found')

                alternative = booking.propose_alternative(date=date, time=time, message=message)
                await self.uow.booking_command_repo.create_alternative(alternative=alternative)
                await self.uow.commit()

        context.logger.info(
            f'🔁 [SUGGEST-ALT] Booking {booking_id}: offered {date} {time} ({alternative.id})'
        )

        await dispatch_notification(
            dispatcher=self.notification_dispatcher,
            message=NotificationMessage.alternative_offer(
                user_id=booking.user_id,
                booking_id=booking.id,
                alternative_date=alternative.date,
                alternative_time=alternative.time,
            ),
            context=context,
        )
        return alternative
