"""
Conftest for pure unit tests - no external dependencies.

Override session-scoped fixtures to avoid database connections.
"""

from collections.abc import Generator
from unittest.mock import MagicMock

import pytest


@pytest.fixture(scope='session')
def client() -> Generator[MagicMock, None, None]:
    """Mock client for unit tests - no FastAPI app needed"""
    yield MagicMock()


@pytest.fixture
def clean_database() -> None:
    """No database in unit tests"""
    return None
