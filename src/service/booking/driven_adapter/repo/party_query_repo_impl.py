from typing import Optional
from uuid import UUID

from sqlalchemy import select

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_party_query_repo import (
    IRestaurantQueryRepo,
    IUserQueryRepo,
)
from src.service.booking.driven_adapter.model.party_model import RestaurantModel, UserModel
from src.service.booking.driven_adapter.repo.session_scoped_repo import SessionScopedRepo


class RestaurantQueryRepoImpl(SessionScopedRepo, IRestaurantQueryRepo):
    @Logger.io
    async def exists(self, *, restaurant_id: UUID) -> bool:
        async with self._get_session() as session:
            result = await session.execute(
                select(RestaurantModel.id).where(RestaurantModel.id == restaurant_id)
            )
            return result.scalar_one_or_none() is not None

    @Logger.io
    async def get_contact_email(self, *, restaurant_id: UUID) -> Optional[str]:
        async with self._get_session() as session:
            result = await session.execute(
                select(RestaurantModel.contact_email).where(RestaurantModel.id == restaurant_id)
            )
            return result.scalar_one_or_none()


class UserQueryRepoImpl(SessionScopedRepo, IUserQueryRepo):
    @Logger.io
    async def exists(self, *, user_id: UUID) -> bool:
        async with self._get_session() as session:
            result = await session.execute(select(UserModel.id).where(UserModel.id == user_id))
            return result.scalar_one_or_none() is not None

    @Logger.io
    async def get_email(self, *, user_id: UUID) -> Optional[str]:
        async with self._get_session() as session:
            result = await session.execute(select(UserModel.email).where(UserModel.id == user_id))
            return result.scalar_one_or_none()
