"""
Test Configuration and Fixtures

This module provides:
- A throwaway SQLite database per pytest-xdist worker
- Table cleanup between integration tests
- Seeded restaurant / user rows
- The FastAPI TestClient

Architecture:
- Unit tests (test/**/unit/): Override fixtures with mocks in their own conftest.py
- Integration tests: Use the real SQLite database with cleanup after every test
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the log config read these variables at import time
# =============================================================================
import os
from pathlib import Path
import tempfile


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports.

    This must run at the top of conftest.py, before importing any application
    modules that read environment variables at import time.
    """
    # One database file per xdist worker
    worker_id = os.environ.get('PYTEST_XDIST_WORKER', 'master')
    db_path = Path(tempfile.gettempdir()) / f'restaurant_booking_test_{worker_id}.db'
    os.environ['TEST_DB_PATH'] = str(db_path)
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{db_path}'

    # Create test log directory
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ.setdefault('REQUEST_TIMEOUT_SECONDS', '10')
    os.environ.setdefault('RELEASE_SEATS_ON_CANCEL', 'true')


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import AsyncGenerator, Callable, Generator  # noqa: E402
import inspect  # noqa: E402
from typing import Any  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy import Engine, create_engine, delete  # noqa: E402
from sqlalchemy.orm import Session  # noqa: E402

from src.platform.database.orm_db_setting import Base, dispose_engine  # noqa: E402
from src.platform.types.uuid7 import new_uuid7  # noqa: E402
from src.service.booking.driven_adapter.model import RestaurantModel, UserModel  # noqa: E402
from test.constants import (  # noqa: E402
    ANOTHER_USER_EMAIL,
    ANOTHER_USER_NAME,
    TEST_RESTAURANT_EMAIL,
    TEST_RESTAURANT_NAME,
    TEST_USER_EMAIL,
    TEST_USER_NAME,
)


# =============================================================================
# Pytest Hooks: Detect test type and setup accordingly
# =============================================================================
def _is_unit_test_only_run(config: pytest.Config) -> bool:
    markexpr = config.getoption('markexpr', default='')
    if markexpr and 'unit' in str(markexpr) and 'not unit' not in str(markexpr):
        return True

    args = config.args or []
    test_paths = [arg for arg in args if arg and not arg.startswith('-')]
    return bool(test_paths and all('/unit/' in path or '\\unit\\' in path for path in test_paths))


_sync_engine: Engine | None = None


def _get_sync_engine() -> Engine:
    """Plain pysqlite engine on the same file, used for schema setup and cleanup."""
    global _sync_engine
    if _sync_engine is None:
        _sync_engine = create_engine(f'sqlite:///{os.environ["TEST_DB_PATH"]}')
    return _sync_engine


def _setup_test_database() -> None:
    db_path = Path(os.environ['TEST_DB_PATH'])
    db_path.unlink(missing_ok=True)
    Base.metadata.create_all(_get_sync_engine())


def _clean_all_tables() -> None:
    with _get_sync_engine().begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(delete(table))


def pytest_sessionstart(session: pytest.Session) -> None:
    if _is_unit_test_only_run(session.config):
        return
    _setup_test_database()


def pytest_sessionfinish(session: pytest.Session, exitstatus: int) -> None:
    if _sync_engine is not None:
        _sync_engine.dispose()


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        markers = [m.name for m in item.iter_markers()]
        if 'unit' in markers:
            continue
        item.fixturenames.insert(0, 'clean_database')
        if inspect.iscoroutinefunction(getattr(item, 'function', None)):
            item.fixturenames.append('dispose_async_engine')


# =============================================================================
# Integration Test Fixtures
# =============================================================================
@pytest.fixture(scope='function')
def clean_database() -> Generator[None, None, None]:
    _clean_all_tables()
    yield
    _clean_all_tables()


@pytest.fixture(scope='function')
async def dispose_async_engine() -> AsyncGenerator[None, None]:
    """Every async test runs on its own event loop; drop the engine bound to it."""
    yield
    await dispose_engine()


@pytest.fixture(scope='function')
def client() -> Generator[TestClient, None, None]:
    from test.test_main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


def _insert(model: Any) -> None:
    with Session(_get_sync_engine()) as session:
        session.add(model)
        session.commit()


@pytest.fixture
def restaurant(clean_database: None) -> dict[str, Any]:
    restaurant_id = new_uuid7()
    _insert(
        RestaurantModel(
            id=restaurant_id, name=TEST_RESTAURANT_NAME, contact_email=TEST_RESTAURANT_EMAIL
        )
    )
    return {'id': restaurant_id, 'name': TEST_RESTAURANT_NAME, 'email': TEST_RESTAURANT_EMAIL}


@pytest.fixture
def user(clean_database: None) -> dict[str, Any]:
    user_id = new_uuid7()
    _insert(UserModel(id=user_id, name=TEST_USER_NAME, email=TEST_USER_EMAIL))
    return {'id': user_id, 'name': TEST_USER_NAME, 'email': TEST_USER_EMAIL}


@pytest.fixture
def another_user(clean_database: None) -> dict[str, Any]:
    user_id = new_uuid7()
    _insert(UserModel(id=user_id, name=ANOTHER_USER_NAME, email=ANOTHER_USER_EMAIL))
    return {'id': user_id, 'name': ANOTHER_USER_NAME, 'email': ANOTHER_USER_EMAIL}


@pytest.fixture
def make_users(clean_database: None) -> Callable[[int], list[dict[str, Any]]]:
    def _make(count: int) -> list[dict[str, Any]]:
        users = []
        for n in range(count):
            user_id = new_uuid7()
            name, email = f'Guest {n}', f'guest_{n}@test.com'
            _insert(UserModel(id=user_id, name=name, email=email))
            users.append({'id': user_id, 'name': name, 'email': email})
        return users

    return _make
