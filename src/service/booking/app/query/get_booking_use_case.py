from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.context.request_context import RequestContext
from src.platform.exception.exceptions import AlternativeNotFoundError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.booking.domain.entity.booking_alternative_entity import BookingAlternative
from src.service.booking.domain.entity.booking_entity import Booking


class GetBookingUseCase:
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
    async def get_booking(
        self, *, booking_id: UUID, context: RequestContext | None = None
    ) -> Booking:
        context = context or RequestContext()
        with context.deadline():
            booking = await self.booking_query_repo.get_by_id(booking_id=booking_id)

        if not booking:
            raise NotFoundError('Booking not found')
        return booking

    @Logger.io
    async def get_alternative(
        self, *, alternative_id: UUID, context: RequestContext | None = None
    ) -> BookingAlternative:
        """Any decision state, unlike the accept/reject lookups."""
        context = context or RequestContext()
        with context.deadline():
            alternative = await self.booking_query_repo.get_alternative_by_id(
                alternative_id=alternative_id
            )

        if not alternative:
            raise AlternativeNotFoundError('Alternative not found')
        return alternative
