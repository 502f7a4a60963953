"""
Unit test configuration for the booking service.

Overrides fixtures from the root conftest so unit tests never touch the
database or start the FastAPI lifespan.
"""

from collections.abc import Generator
from unittest.mock import MagicMock

from fastapi.testclient import TestClient
import pytest

from test.service.booking.unit.helpers import UnitOfWorkMocks


@pytest.fixture(autouse=True, scope='function')
def clean_database() -> Generator[None, None, None]:
    """No-op override for unit tests - no real database needed"""
    yield


@pytest.fixture(scope='function')
def client() -> Generator[MagicMock, None, None]:
    """Mock client for unit tests - prevents TestClient/lifespan from being created"""
    yield MagicMock(spec=TestClient)


@pytest.fixture
def uow_mocks() -> UnitOfWorkMocks:
    return UnitOfWorkMocks()
