import traceback
from typing import Any, Callable, Coroutine

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io import Logger

# Type alias for exception handlers (compatible with Starlette's expected signature)
ExceptionHandler = Callable[[Request, Exception], Coroutine[Any, Any, Response]]

MISSING_FIELDS_MESSAGE = 'Missing required fields'
INTERNAL_ERROR_MESSAGE = 'Internal server error'


def _error_body(message: str, details: Any = None) -> dict[str, Any]:
    body: dict[str, Any] = {'error': message}
    if settings.DEBUG and details is not None:
        body['details'] = details
    return body


def _format_location(loc: tuple[Any, ...] | list[Any]) -> str:
    # drop the 'body' / 'query' / 'path' prefix FastAPI adds
    parts = [str(part) for part in loc[1:]] if len(loc) > 1 else [str(part) for part in loc]
    return '.'.join(parts)


async def custom_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, CustomBaseError) else CustomBaseError(str(exc))
    return JSONResponse(status_code=error.status_code, content=_error_body(error.message))


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, RequestValidationError) else RequestValidationError([])
    errors = list(error.errors())
    details = [
        {'loc': list(e.get('loc', ())), 'msg': e.get('msg', ''), 'type': e.get('type', '')}
        for e in errors
    ]

    if any(e.get('type') == 'missing' for e in errors):
        message = MISSING_FIELDS_MESSAGE
    elif errors:
        first = errors[0]
        message = f'{_format_location(first.get("loc", ()))}: {first.get("msg", "")}'
    else:
        message = 'Invalid request'

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(message, details),
    )


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    error = (
        exc
        if isinstance(exc, StarletteHTTPException)
        else StarletteHTTPException(status.HTTP_500_INTERNAL_SERVER_ERROR)
    )
    return JSONResponse(
        status_code=error.status_code,
        content=_error_body(str(error.detail)),
        headers=getattr(error, 'headers', None),
    )


async def general_500_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    if not getattr(exc, '_has_logged', False):
        Logger.base.opt(exception=exc).error(
            f'💥 [UNHANDLED] {request.method} {request.url.path}: {type(exc).__name__}: {exc}'
        )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(
            INTERNAL_ERROR_MESSAGE,
            {
                'message': f'{type(exc).__name__}: {exc}',
                'stack': traceback.format_exception(exc),
            },
        ),
    )


# Exception handler mapping
EXCEPTION_HANDLERS: dict[type[Exception], ExceptionHandler] = {
    CustomBaseError: custom_error_handler,
    RequestValidationError: validation_error_handler,
    StarletteHTTPException: http_exception_handler,
    Exception: general_500_exception_handler,  # Catch-all for unhandled exceptions
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
