from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable

from sqlalchemy.ext.asyncio import AsyncSession


class SessionScopedRepo:
    """
    Base for SQLAlchemy repositories.

    Inside a unit of work the UoW's session is injected and shared; outside of
    one (display reads from the DI container) a short-lived session is opened
    from ``session_factory`` per call.
    """

    def __init__(
        self,
        *,
        session_factory: Callable[..., AsyncContextManager[AsyncSession]] | None = None,
        session: AsyncSession | None = None,
    ) -> None:
        self.session_factory = session_factory
        self.session = session

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        if self.session is not None:
            # Session injected by UoW - use directly (no context manager needed)
            yield self.session
        elif self.session_factory is not None:
            async with self.session_factory() as session:
                yield session
        else:
            raise RuntimeError('No session or session_factory available')

    @staticmethod
    def _dialect_name(session: AsyncSession) -> str:
        bind = session.bind
        return bind.dialect.name if bind is not None else ''
