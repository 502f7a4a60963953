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
from src.service.booking.domain.entity.booking_entity import Booking
from src.service.booking.domain.value_object.notification_message import NotificationMessage


class AcceptAlternativeUseCase:
    """
    User accepts a proposed alternative.

    The alternative's accepted_at and the booking's new date/time/confirmed
    status are written in one transaction. Seats stay on the booking's
    original slot.
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
        self, *, alternative_id: UUID, context: RequestContext | None = None
    ) -> Booking:
        context = context or RequestContext()
        with (
            self.tracer.start_as_current_span(
                'use_case.accept_alternative', attributes={'alternative.id': str(alternative_id)}
            ),
            metrics.track_booking_operation('accept_alternative'),
            context.deadline(),
        ):
            async with self.uow:
                # Lock order: alternative, then its booking
                alternative = await self.uow.booking_command_repo.get_undecided_alternative_for_update(
                    alternative_id=alternative_id
                )
                if not alternative:
                    raise AlternativeNotFoundError()

                booking = await self.uow.booking_command_repo.get_by_id_for_update(
                    booking_id=alternative.booking_id
                )
                if not booking:
                    raise NotFoundError('Booking not found')

                accepted = alternative.accept()
                updated = booking.accept_alternative(accepted)
                await self.uow.booking_command_repo.update_alternative_decision(
                    alternative=accepted
                )
                await self.uow.booking_command_repo.update_status(
                    booking=updated, expected_status=booking.status
                )
                await self.uow.commit()

        context.logger.info(
            f'🤝 [ACCEPT-ALT] Booking {updated.id} moved to {updated.date} {updated.time} '
            f'and confirmed'
        )

        await dispatch_notification(
            dispatcher=self.notification_dispatcher,
            message=NotificationMessage.alternative_accepted(
                restaurant_id=updated.restaurant_id,
                booking_id=updated.id,
                alternative_date=accepted.date,
                alternative_time=accepted.time,
            ),
            context=context,
        )
        return updated
