from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.service.booking.domain.enum.notification_type import NotificationType


class INotificationDispatcher(ABC):
    """
    Delivers user/restaurant-facing messages for committed state changes.

    Implementations may raise; callers treat every failure as non-fatal.
    """

    @abstractmethod
    async def notify_user(
        self,
        *,
        user_id: UUID,
        type: NotificationType,
        title: str,
        message: str,
        related_id: Optional[UUID] = None,
    ) -> None:
        pass

    @abstractmethod
    async def notify_restaurant(
        self,
        *,
        restaurant_id: UUID,
        type: NotificationType,
        title: str,
        message: str,
        related_id: Optional[UUID] = None,
    ) -> None:
        pass


class IEmailSender(ABC):
    @abstractmethod
    async def send_email(self, *, to: str, subject: str, body: str) -> None:
        pass
