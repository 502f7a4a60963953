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
from src.service.booking.domain.entity.booking_entity import Booking


class UpdateBookingStatusToCompletedUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])
    ) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, booking_id: UUID, context: RequestContext | None = None) -> Booking:
        context = context or RequestContext()
        with (
            self.tracer.start_as_current_span(
                'use_case.complete_booking', attributes={'booking.id': str(booking_id)}
            ),
            metrics.track_booking_operation('complete'),
            context.deadline(),
        ):
            async with self.uow:
                booking = await self.uow.booking_command_repo.get_by_id_for_update(
                    booking_id=booking_id
                )
                if not booking:
                    raise NotFoundError('Booking not found')

                completed = booking.complete()
                await self.uow.booking_command_repo.update_status(
                    booking=completed, expected_status=booking.status
                )
                await self.uow.commit()

        context.logger.info(f'🏁 [COMPLETE] Booking {booking_id} completed')
        return completed
