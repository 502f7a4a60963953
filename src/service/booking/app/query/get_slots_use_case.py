from datetime import date
from typing import List, Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.context.request_context import RequestContext
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_availability_repo import IAvailabilityRepo
from src.service.booking.domain.entity.availability_slot_entity import AvailabilitySlot


class GetSlotsUseCase:
    def __init__(self, *, availability_repo: IAvailabilityRepo) -> None:
        self.availability_repo = availability_repo

    @classmethod
    @inject
    def depends(
        cls,
        availability_repo: IAvailabilityRepo = Depends(Provide[Container.availability_repo]),
    ) -> Self:
        return cls(availability_repo=availability_repo)

    @Logger.io
    async def execute(
        self, *, restaurant_id: UUID, date: date, context: RequestContext | None = None
    ) -> List[AvailabilitySlot]:
        context = context or RequestContext()
        with context.deadline():
            return await self.availability_repo.get_by_restaurant_and_date(
                restaurant_id=restaurant_id, date=date
            )
