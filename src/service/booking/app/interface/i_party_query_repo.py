from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID


class IRestaurantQueryRepo(ABC):
    """Existence checks against the restaurant directory (owned elsewhere)."""

    @abstractmethod
    async def exists(self, *, restaurant_id: UUID) -> bool:
        pass

    @abstractmethod
    async def get_contact_email(self, *, restaurant_id: UUID) -> Optional[str]:
        pass


class IUserQueryRepo(ABC):
    """Existence checks against the user directory (owned elsewhere)."""

    @abstractmethod
    async def exists(self, *, user_id: UUID) -> bool:
        pass

    @abstractmethod
    async def get_email(self, *, user_id: UUID) -> Optional[str]:
        pass
