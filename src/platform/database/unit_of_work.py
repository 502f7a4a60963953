"""
Unit of Work Pattern - one database transaction shared by a set of repositories

Architecture:
- UoW owns the session lifecycle (open on enter, rollback + close on exit)
- UoW owns commit/rollback
- Repositories created by the UoW share its session, so every write made
  through them lands in the same transaction
- Use cases coordinate several repositories through one UoW
"""

from __future__ import annotations

import abc
from contextlib import AbstractAsyncContextManager
from typing import TYPE_CHECKING, Any, Callable, Self

import anyio
from sqlalchemy.exc import DBAPIError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import TransientStoreError
from src.platform.logging.loguru_io import Logger


if TYPE_CHECKING:
    from src.service.booking.app.interface.i_availability_repo import IAvailabilityRepo
    from src.service.booking.app.interface.i_booking_command_repo import IBookingCommandRepo
    from src.service.booking.app.interface.i_booking_query_repo import IBookingQueryRepo
    from src.service.booking.app.interface.i_notification_repo import INotificationRepo
    from src.service.booking.app.interface.i_party_query_repo import (
        IRestaurantQueryRepo,
        IUserQueryRepo,
    )


SessionFactory = Callable[[], AbstractAsyncContextManager[AsyncSession]]


def is_transient_db_error(exc: BaseException | None) -> bool:
    """Connection-level failures that a caller may retry."""
    if isinstance(exc, OperationalError):
        return True
    return isinstance(exc, DBAPIError) and bool(exc.connection_invalidated)


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work for the booking service

    Usage:
        async with uow:
            booking = await uow.booking_command_repo.create(booking=...)
            await uow.availability_repo.adjust_reserved_seats(slot_id=..., delta=...)
            await uow.commit()

    Leaving the block without commit() rolls everything back.
    """

    availability_repo: IAvailabilityRepo
    booking_command_repo: IBookingCommandRepo
    booking_query_repo: IBookingQueryRepo
    notification_repo: INotificationRepo
    restaurant_query_repo: IRestaurantQueryRepo
    user_query_repo: IUserQueryRepo

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.rollback()

    async def commit(self) -> None:
        """Commit the transaction"""
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """
    SQLAlchemy implementation of Unit of Work

    A fresh session is opened from ``session_factory`` on every ``async with``,
    so a single instance must not be entered concurrently.
    """

    def __init__(self, *, session_factory: SessionFactory) -> None:
        self._session_factory = session_factory
        self._session_cm: AbstractAsyncContextManager[AsyncSession] | None = None
        self.session: AsyncSession | None = None

    async def __aenter__(self) -> Self:
        from src.service.booking.driven_adapter.repo.availability_repo_impl import (
            AvailabilityRepoImpl,
        )
        from src.service.booking.driven_adapter.repo.booking_command_repo_impl import (
            BookingCommandRepoImpl,
        )
        from src.service.booking.driven_adapter.repo.booking_query_repo_impl import (
            BookingQueryRepoImpl,
        )
        from src.service.booking.driven_adapter.repo.notification_repo_impl import (
            NotificationRepoImpl,
        )
        from src.service.booking.driven_adapter.repo.party_query_repo_impl import (
            RestaurantQueryRepoImpl,
            UserQueryRepoImpl,
        )

        self._session_cm = self._session_factory()
        self.session = await self._session_cm.__aenter__()

        # Create repositories with shared session
        self.availability_repo = AvailabilityRepoImpl(session=self.session)
        self.booking_command_repo = BookingCommandRepoImpl(session=self.session)
        self.booking_query_repo = BookingQueryRepoImpl(session=self.session)
        self.notification_repo = NotificationRepoImpl(session=self.session)
        self.restaurant_query_repo = RestaurantQueryRepoImpl(session=self.session)
        self.user_query_repo = UserQueryRepoImpl(session=self.session)

        return await super().__aenter__()

    async def __aexit__(self, exc_type: Any, exc: BaseException | None, tb: Any) -> None:
        session_cm = self._session_cm
        try:
            # Shielded so a cancelled (timed out) operation still releases its locks
            with anyio.CancelScope(shield=True):
                try:
                    await self.rollback()
                finally:
                    if session_cm is not None:
                        await session_cm.__aexit__(exc_type, exc, tb)
        except DBAPIError as e:
            if is_transient_db_error(e):
                raise TransientStoreError(f'Storage temporarily unavailable: {e}') from e
            raise
        finally:
            self._session_cm = None
            self.session = None

        if is_transient_db_error(exc):
            Logger.base.warning(f'⚠️ [UOW] Transient store error: {exc}')
            raise TransientStoreError(f'Storage temporarily unavailable: {exc}') from exc

    async def _commit(self) -> None:
        if self.session is None:
            raise RuntimeError('commit() called outside of async with')
        try:
            await self.session.commit()
        except DBAPIError as e:
            if is_transient_db_error(e):
                raise TransientStoreError(f'Storage temporarily unavailable: {e}') from e
            raise

    async def rollback(self) -> None:
        if self.session is not None:
            await self.session.rollback()
