"""
FastAPI app assembly for the marketplace API

main.py and the test app both build through create_app and differ only in lifespan.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from src.platform.config.core_setting import settings
from src.platform.constant.route_constant import (
    AUTH_BASE,
    HEALTH,
    METRICS,
    PRODUCT_BASE,
    REVIEW_BASE,
    SEARCH,
    USER_BASE,
)
from src.platform.exception.exception_handlers import register_exception_handlers
from src.service.marketplace.driving_adapter.http_controller import (
    auth_controller,
    product_controller,
    review_controller,
    search_controller,
    user_controller,
)


# (router, prefix, tag)
ROUTES: tuple[tuple[APIRouter, str, str], ...] = (
    (auth_controller.router, AUTH_BASE, 'auth'),
    (product_controller.router, PRODUCT_BASE, 'product'),
    (review_controller.router, REVIEW_BASE, 'review'),
    (user_controller.router, USER_BASE, 'user'),
    (search_controller.router, SEARCH, 'search'),
)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'Marketplace listings, reviews and user profiles',
) -> FastAPI:
    app = FastAPI(
        title=f'{settings.PROJECT_NAME}{title_suffix}',
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )
    register_exception_handlers(app)

    for router, prefix, tag in ROUTES:
        app.include_router(router, prefix=prefix, tags=[tag])
    _register_common_endpoints(app)

    return app


def _register_common_endpoints(app: FastAPI) -> None:
    @app.get(HEALTH)
    async def health_check() -> dict[str, str]:
        return {'status': 'healthy', 'service': settings.PROJECT_NAME}

    @app.get(METRICS)
    async def get_metrics() -> PlainTextResponse:
        """Prometheus scrape endpoint."""
        return PlainTextResponse(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
