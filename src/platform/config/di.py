"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.booking.driven_adapter.notification.mock_email_sender import MockEmailSender
from src.service.booking.driven_adapter.notification.notification_dispatcher_impl import (
    NotificationDispatcherImpl,
)
from src.service.booking.driven_adapter.repo.availability_repo_impl import AvailabilityRepoImpl
from src.service.booking.driven_adapter.repo.booking_query_repo_impl import BookingQueryRepoImpl
from src.service.booking.driven_adapter.repo.notification_repo_impl import NotificationRepoImpl


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (session factory shared by query repos, UoW and dispatcher)
    database = providers.Singleton(Database)

    # Unit of Work: a new instance per use case, since one UoW holds one session
    unit_of_work = providers.Factory(
        SqlAlchemyUnitOfWork, session_factory=database.provided.session
    )

    # Query repositories (stateless - short-lived session per call, no locks)
    availability_repo = providers.Singleton(
        AvailabilityRepoImpl, session_factory=database.provided.session
    )
    booking_query_repo = providers.Singleton(
        BookingQueryRepoImpl, session_factory=database.provided.session
    )
    notification_repo = providers.Singleton(
        NotificationRepoImpl, session_factory=database.provided.session
    )

    # Notifications
    email_sender = providers.Singleton(
        MockEmailSender, enabled=config_service.provided.MOCK_EMAIL_ENABLED
    )
    notification_dispatcher = providers.Singleton(
        NotificationDispatcherImpl,
        session_factory=database.provided.session,
        email_sender=email_sender,
    )


container = Container()


def setup() -> None:
    container.config_service()


def cleanup() -> None:
    container.reset_singletons()
