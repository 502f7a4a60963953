from typing import List, Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.context.request_context import RequestContext
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.booking.domain.entity.booking_entity import Booking


class ListBookingsUseCase:
    def __init__(self, *, booking_query_repo: IBookingQueryRepo) -> None:
        self.booking_query_repo = booking_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
    ) -> Self:
        return cls(booking_query_repo=booking_query_repo)

    @Logger.io
    async def list_restaurant_bookings(
        self, *, restaurant_id: UUID, context: RequestContext | None = None
    ) -> List[Booking]:
        context = context or RequestContext()
        with context.deadline():
            return await self.booking_query_repo.list_by_restaurant(restaurant_id=restaurant_id)

    @Logger.io
    async def list_user_bookings(
        self, *, user_id: UUID, context: RequestContext | None = None
    ) -> List[Booking]:
        context = context or RequestContext()
        with context.deadline():
            return await self.booking_query_repo.list_by_user(user_id=user_id)
