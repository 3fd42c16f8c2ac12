"""
Marketplace Service - Main Application
Handles registration, product listings, reviews, user profiles and search.

Run with:
    granian src.service.marketplace.main:app --interface asgi --host 0.0.0.0 --port 8000
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.platform.app_factory import create_app
from src.platform.config.di import cleanup, container, setup
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    Logger.base.info('🚀 [Marketplace] Starting up...')

    # Wire dependency injection for all modules
    container.wire(modules=WIRE_MODULES)
    setup()
    Logger.base.info('🔌 [Marketplace] Dependency injection wired')

    # Production schemas come from alembic; create_all only fills in missing tables
    await container.database().create_tables()

    Logger.base.info('✅ [Marketplace] Startup complete')

    yield

    Logger.base.info('🛑 [Marketplace] Shutting down...')
    await cleanup()
    container.unwire()
    Logger.base.info('👋 [Marketplace] Shutdown complete')


app = create_app(lifespan=lifespan)
