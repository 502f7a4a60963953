from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.context.request_context import RequestContext
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger


class MarkNotificationAsReadUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(
        cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])
    ) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(
        self, *, notification_id: UUID, context: RequestContext | None = None
    ) -> None:
        context = context or RequestContext()
        with context.deadline():
            async with self.uow:
                if not await self.uow.notification_repo.mark_as_read(
                    notification_id=notification_id
                ):
                    raise NotFoundError('Notification not found')
                await self.uow.commit()
