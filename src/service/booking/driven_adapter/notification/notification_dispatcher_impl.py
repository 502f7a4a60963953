"""
Notification Dispatcher Implementation

Each notification is stored in its own short transaction (the state change
that triggered it has already committed), then mailed to the recipient's
address when one is on file.
"""

from typing import AsyncContextManager, Callable, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_notification_dispatcher import (
    IEmailSender,
    INotificationDispatcher,
)
from src.service.booking.domain.entity.notification_entity import Notification
from src.service.booking.domain.enum.notification_type import NotificationType, RecipientType
from src.service.booking.driven_adapter.repo.notification_repo_impl import NotificationRepoImpl
from src.service.booking.driven_adapter.repo.party_query_repo_impl import (
    RestaurantQueryRepoImpl,
    UserQueryRepoImpl,
)


class NotificationDispatcherImpl(INotificationDispatcher):
    def __init__(
        self,
        *,
        session_factory: Callable[..., AsyncContextManager[AsyncSession]],
        email_sender: IEmailSender,
    ) -> None:
        self.session_factory = session_factory
        self.email_sender = email_sender

    @Logger.io
    async def notify_user(
        self,
        *,
        user_id: UUID,
        type: NotificationType,
        title: str,
        message: str,
        related_id: Optional[UUID] = None,
    ) -> None:
        notification = Notification.create(
            recipient_type=RecipientType.USER,
            recipient_id=user_id,
            type=type,
            title=title,
            message=message,
            related_id=related_id,
        )
        async with self.session_factory() as session:
            await NotificationRepoImpl(session=session).create(notification=notification)
            email = await UserQueryRepoImpl(session=session).get_email(user_id=user_id)
            await session.commit()

        await self._send_email(email=email, notification=notification)

    @Logger.io
    async def notify_restaurant(
        self,
        *,
        restaurant_id: UUID,
        type: NotificationType,
        title: str,
        message: str,
        related_id: Optional[UUID] = None,
    ) -> None:
        notification = Notification.create(
            recipient_type=RecipientType.RESTAURANT,
            recipient_id=restaurant_id,
            type=type,
            title=title,
            message=message,
            related_id=related_id,
        )
        async with self.session_factory() as session:
            await NotificationRepoImpl(session=session).create(notification=notification)
            email = await RestaurantQueryRepoImpl(session=session).get_contact_email(
                restaurant_id=restaurant_id
            )
            await session.commit()

        await self._send_email(email=email, notification=notification)

    async def _send_email(self, *, email: Optional[str], notification: Notification) -> None:
        if not email:
            Logger.base.debug(
                f'📭 [NOTIFY] No email on file for {notification.recipient_type} '
                f'{notification.recipient_id}, stored only'
            )
            return
        await self.email_sender.send_email(
            to=email, subject=notification.title, body=notification.message
        )
