"""
Test Configuration and Fixtures

This module provides:
- SQLite test database created by the alembic migrations, one file per xdist worker
- Row cleanup before every integration test
- Session-scoped TestClient over the test app (test/test_main.py)
- Registered user fixtures (seller, buyer, another buyer)

Architecture:
- Unit tests (test/**/unit/): Override fixtures with mocks in their own conftest.py
- Integration tests: Use the real app and database with cleanup
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read at import time, so DATABASE_URL and SECRET_KEY must be set first
# =============================================================================
import os
from pathlib import Path


_TEST_DIR = Path(__file__).parent


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    worker_id = os.environ.get('PYTEST_XDIST_WORKER', 'master')
    suffix = '' if worker_id == 'master' else f'_{worker_id}'
    db_name = f'test_marketplace{suffix}.db'
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{_TEST_DIR / db_name}'

    # Create test log directory
    test_log_dir = _TEST_DIR / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ['SECRET_KEY'] = 'marketplace_test_secret_key'
    os.environ['SERVICE_NAME'] = 'marketplace-test'
    os.environ['DEPLOY_ENV'] = 'test'
    os.environ.setdefault('DEBUG', 'true')


# Call immediately to set env vars before any imports
_early_setup_test_environment()

import asyncio  # noqa: E402
from collections.abc import Generator  # noqa: E402
from typing import Any  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy import delete  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402

from test.shared.utils import register_user  # noqa: E402
from test.util_constant import (  # noqa: E402
    ANOTHER_BUYER_EMAIL,
    TEST_BUYER_EMAIL,
    TEST_SELLER_EMAIL,
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


def pytest_sessionstart(session: pytest.Session) -> None:
    if _is_unit_test_only_run(session.config):
        return

    _setup_test_database()


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        markers = [m.name for m in item.iter_markers()]
        if 'unit' not in markers:
            # Before the user fixtures so they register into an empty database
            item.fixturenames.insert(0, 'clean_database')


# =============================================================================
# Database Setup and Cleanup
# =============================================================================
def _test_database_url() -> str:
    return os.environ['DATABASE_URL']


def _test_database_file() -> Path:
    return Path(_test_database_url().removeprefix('sqlite+aiosqlite:///'))


def _setup_test_database() -> None:
    """Start from an empty file and build the schema with the migrations."""
    from src.platform.alembic.commands import upgrade

    _test_database_file().unlink(missing_ok=True)
    upgrade(_test_database_url())


async def _clean_all_tables() -> None:
    from src.platform.database.orm_db_setting import Base
    import src.service.marketplace.driven_adapter.model  # noqa: F401

    engine = create_async_engine(_test_database_url())
    try:
        async with engine.begin() as conn:
            # Children first: review -> product -> seller -> user
            for table in reversed(Base.metadata.sorted_tables):
                await conn.execute(delete(table))
    finally:
        await engine.dispose()


# =============================================================================
# Integration Test Fixtures
# =============================================================================
@pytest.fixture(scope='function')
def clean_database() -> Generator[None, None, None]:
    asyncio.run(_clean_all_tables())
    yield


@pytest.fixture(scope='session')
def client() -> Generator[Any, None, None]:
    from test.test_main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def seller_user(client: TestClient) -> dict[str, Any]:
    """Registered user who lists products; {'user': ..., 'token': ...}"""
    return register_user(client, email=TEST_SELLER_EMAIL, first_name='Abebe')


@pytest.fixture
def buyer_user(client: TestClient) -> dict[str, Any]:
    return register_user(client, email=TEST_BUYER_EMAIL, first_name='Sara')


@pytest.fixture
def another_buyer_user(client: TestClient) -> dict[str, Any]:
    return register_user(client, email=ANOTHER_BUYER_EMAIL, first_name='Dawit')
