from typing import List
from uuid import UUID

from sqlalchemy import select, update

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_notification_repo import INotificationRepo
from src.service.booking.domain.entity.notification_entity import Notification
from src.service.booking.domain.enum.notification_type import NotificationType, RecipientType
from src.service.booking.driven_adapter.model.notification_model import NotificationModel
from src.service.booking.driven_adapter.repo.session_scoped_repo import SessionScopedRepo


class NotificationRepoImpl(SessionScopedRepo, INotificationRepo):
    @staticmethod
    def _to_entity(db_notification: NotificationModel) -> Notification:
        return Notification(
            id=db_notification.id,
            recipient_type=RecipientType(db_notification.recipient_type),
            recipient_id=db_notification.recipient_id,
            type=NotificationType(db_notification.type),
            title=db_notification.title,
            message=db_notification.message,
            related_id=db_notification.related_id,
            is_read=db_notification.is_read,
            created_at=db_notification.created_at,
        )

    @Logger.io
    async def create(self, *, notification: Notification) -> Notification:
        async with self._get_session() as session:
            session.add(
                NotificationModel(
                    id=notification.id,
                    recipient_type=notification.recipient_type.value,
                    recipient_id=notification.recipient_id,
                    type=notification.type.value,
                    title=notification.title,
                    message=notification.message,
                    is_read=notification.is_read,
                    related_id=notification.related_id,
                    created_at=notification.created_at,
                )
            )
            await session.flush()
            return notification

    @Logger.io
    async def list_by_recipient(
        self, *, recipient_type: RecipientType, recipient_id: UUID
    ) -> List[Notification]:
        async with self._get_session() as session:
            result = await session.execute(
                select(NotificationModel)
                .where(
                    NotificationModel.recipient_type == recipient_type.value,
                    NotificationModel.recipient_id == recipient_id,
                )
                .order_by(NotificationModel.created_at.desc(), NotificationModel.id.desc())
            )
            return [self._to_entity(n) for n in result.scalars().all()]

    @Logger.io
    async def mark_as_read(self, *, notification_id: UUID) -> bool:
        async with self._get_session() as session:
            result = await session.execute(
                update(NotificationModel)
                .where(NotificationModel.id == notification_id)
                .values(is_read=True)
                .execution_options(synchronize_session=False)
            )
            return result.rowcount > 0  # type: ignore[attr-defined]
