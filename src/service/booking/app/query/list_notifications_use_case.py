from typing import List, Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.context.request_context import RequestContext
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_notification_repo import INotificationRepo
from src.service.booking.domain.entity.notification_entity import Notification
from src.service.booking.domain.enum.notification_type import RecipientType


class ListNotificationsUseCase:
    def __init__(self, *, notification_repo: INotificationRepo) -> None:
        self.notification_repo = notification_repo

    @classmethod
    @inject
    def depends(
        cls,
        notification_repo: INotificationRepo = Depends(Provide[Container.notification_repo]),
    ) -> Self:
        return cls(notification_repo=notification_repo)

    @Logger.io
    async def list_user_notifications(
        self, *, user_id: UUID, context: RequestContext | None = None
    ) -> List[Notification]:
        context = context or RequestContext()
        with context.deadline():
            return await self.notification_repo.list_by_recipient(
                recipient_type=RecipientType.USER, recipient_id=user_id
            )

    @Logger.io
    async def list_restaurant_notifications(
        self, *, restaurant_id: UUID, context: RequestContext | None = None
    ) -> List[Notification]:
        context = context or RequestContext()
        with context.deadline():
            return await self.notification_repo.list_by_recipient(
                recipient_type=RecipientType.RESTAURANT, recipient_id=restaurant_id
            )
