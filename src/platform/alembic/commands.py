"""Alembic command shortcuts for project scripts."""

import sys
from typing import Optional

from alembic import command
from alembic.config import Config

from src.platform.constant.path import ALEMBIC_INI_PATH
from src.platform.logging.loguru_io import Logger


def alembic_config(url: Optional[str] = None) -> Config:
    """Config for the project's alembic.ini; `url` overrides the settings-derived URL."""
    config = Config(str(ALEMBIC_INI_PATH))
    if url:
        config.set_main_option('sqlalchemy.url', url)
    return config


def upgrade(url: Optional[str] = None) -> int:
    """Upgrade database to latest migration."""
    Logger.base.info('⬆️  [ALEMBIC] Running migrations...')
    command.upgrade(alembic_config(url), 'head')
    return 0


def downgrade(url: Optional[str] = None) -> int:
    """Downgrade database by one migration."""
    Logger.base.info('⬇️  [ALEMBIC] Rolling back one migration...')
    command.downgrade(alembic_config(url), '-1')
    return 0


def make_migration() -> int:
    """Create a new migration based on model changes."""
    if len(sys.argv) < 2:
        Logger.base.error("Usage: make-migration 'migration message'")
        return 1

    message = ' '.join(sys.argv[1:])
    Logger.base.info(f'📝 [ALEMBIC] Creating migration: {message}')
    command.revision(alembic_config(), message=message, autogenerate=True)
    return 0


def history() -> int:
    command.history(alembic_config())
    return 0


def current() -> int:
    command.current(alembic_config())
    return 0
