from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.context.request_context import RequestContext
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.booking.domain.entity.availability_slot_entity import AvailabilitySlot


class AdjustReservedSeatsUseCase:
    """Add ``delta`` seats to a slot's reserved count (negative releases, floored at 0)."""

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
    async def execute(
        self, *, slot_id: UUID, delta: int, context: RequestContext | None = None
    ) -> AvailabilitySlot:
        context = context or RequestContext()
        with (
            self.tracer.start_as_current_span(
                'use_case.adjust_reserved_seats',
                attributes={'slot.id': str(slot_id), 'slot.delta': delta},
            ),
            metrics.track_booking_operation('adjust_reserved_seats'),
        ):
            try:
                with context.deadline():
                    async with self.uow:
                        slot = await self.uow.availability_repo.adjust_reserved_seats(
                            slot_id=slot_id, delta=delta
                        )
                        await self.uow.commit()
            except CustomBaseError as e:
                metrics.record_seat_adjustment(delta=delta, result=e.code)
                raise

        metrics.record_seat_adjustment(delta=delta, result='success')
        context.logger.info(
            f'💺 [ADJUST-SEATS] slot={slot_id} delta={delta:+d} '
            f'-> reserved={slot.reserved}/{slot.capacity}'
        )
        return slot
