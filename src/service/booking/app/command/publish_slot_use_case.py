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
from src.service.booking.domain.entity.availability_slot_entity import AvailabilitySlot


class PublishSlotUseCase:
    """
    Publish (or re-publish) a restaurant's capacity for one date/time slot.

    Re-publishing updates capacity only; seats already reserved on the slot
    are kept.
    """

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
        self,
        *,
        restaurant_id: UUID,
        date: date,
        time_slot: str,
        capacity: int,
        context: RequestContext | None = None,
    ) -> AvailabilitySlot:
        context = context or RequestContext()
        with (
            self.tracer.start_as_current_span(
                'use_case.publish_slot',
                attributes={
                    'restaurant.id': str(restaurant_id),
                    'slot.date': date.isoformat(),
                    'slot.time_slot': time_slot,
                    'slot.capacity': capacity,
                },
            ),
            metrics.track_booking_operation('publish_slot'),
        ):
            slot = AvailabilitySlot.create(
                restaurant_id=restaurant_id, date=date, time_slot=time_slot, capacity=capacity
            )

            with context.deadline():
                async with self.uow:
                    if not await self.uow.restaurant_query_repo.exists(restaurant_id=restaurant_id):
                        raise NotFoundError('Restaurant not found')

                    stored = await self.uow.availability_repo.upsert(slot=slot)
                    await self.uow.commit()

        context.logger.info(
            f'📅 [PUBLISH-SLOT] {restaurant_id} {date} {time_slot}: '
            f'capacity={stored.capacity}, reserved={stored.reserved}'
        )
        return stored
