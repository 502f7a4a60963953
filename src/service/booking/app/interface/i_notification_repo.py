from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from src.service.booking.domain.entity.notification_entity import Notification
from src.service.booking.domain.enum.notification_type import RecipientType


class INotificationRepo(ABC):
    @abstractmethod
    async def create(self, *, notification: Notification) -> Notification:
        pass

    @abstractmethod
    async def list_by_recipient(
        self, *, recipient_type: RecipientType, recipient_id: UUID
    ) -> List[Notification]:
        """Newest first."""
        pass

    @abstractmethod
    async def mark_as_read(self, *, notification_id: UUID) -> bool:
        """
        Returns:
            False when no notification has this id
        """
        pass
