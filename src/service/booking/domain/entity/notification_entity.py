from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

import attrs

from src.platform.types.uuid7 import new_uuid7
from src.service.booking.domain.enum.notification_type import NotificationType, RecipientType
from src.service.booking.domain.value_object.notification_message import NotificationMessage


@attrs.define
class Notification:
    id: UUID
    recipient_type: RecipientType
    recipient_id: UUID
    type: NotificationType
    title: str
    message: str
    related_id: Optional[UUID] = None
    is_read: bool = False
    created_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        *,
        recipient_type: RecipientType,
        recipient_id: UUID,
        type: NotificationType,
        title: str,
        message: str,
        related_id: Optional[UUID] = None,
    ) -> 'Notification':
        return cls(
            id=new_uuid7(),
            recipient_type=recipient_type,
            recipient_id=recipient_id,
            type=type,
            title=title,
            message=message,
            related_id=related_id,
            is_read=False,
            created_at=datetime.now(timezone.utc),
        )

    @classmethod
    def from_message(cls, message: NotificationMessage) -> 'Notification':
        return cls.create(
            recipient_type=message.recipient_type,
            recipient_id=message.recipient_id,
            type=message.type,
            title=message.title,
            message=message.message,
            related_id=message.related_id,
        )
