from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.context.request_context import RequestContext
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import AlternativeNotFoundError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.booking.app.command.notification_helper import dispatch_notification
from src.service.booking.app.interface.i_notification_dispatcher import INotificationDispatcher
from src.service.booking.domain.entity.booking_alternative_entity import BookingAlternative
from src.service.booking.domain.value_object.notification_message import NotificationMessage


class RejectAlternativeUseCase:
    """User declines a proposed alternative; the booking itself is untouched."""

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
        self, *, alternative_id: UUID, context: RequestContext | None = None
    ) -> BookingAlternative:
        context = context or RequestContext()
        with (
            self.tracer.start_as_current_span(
                'use_case.reject_alternative', attributes={'alternative.id': str(alternative_id)}
            ),
            metrics.track_booking_operation('reject_alternative'),
            context.deadline(),
        ):
            async with self.uow:
                alternative = await self.uow.booking_command_repo.get_undecided_alternative_for_update(
                    alternative_id=alternative_id
                )
                if not alternative:
                    raise AlternativeNotFoundError()

                booking = await self.uow.booking_query_repo.get_by_id(
                    booking_id=alternative.booking_id
                )
                if not booking:
                    raise NotFoundError('Booking not found')

                rejected = alternative.reject()
                await self.uow.booking_command_repo.update_alternative_decision(
                    alternative=rejected
                )
                await self.uow.commit()

        context.logger.info(f'🙅 [REJECT-ALT] Alternative {alternative_id} rejected')

        await dispatch_notification(
            dispatcher=self.notification_dispatcher,
            message=NotificationMessage.alternative_rejected(
                restaurant_id=booking.restaurant_id,
                booking_id=booking.id,
                alternative_date=rejected.date,
                alternative_time=rejected.time,
            ),
            context=context,
        )
        return rejected
