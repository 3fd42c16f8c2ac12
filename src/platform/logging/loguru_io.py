"""
@Logger.io: entry/exit/error logging for controllers, use cases and repositories

Arguments and return values are logged at DEBUG with credentials masked. Domain errors
(CustomBaseError) are logged once, at the innermost decorated frame, with a level that
follows their ErrorType: client mistakes are warnings, server faults get a traceback.
"""

from collections.abc import Awaitable
from functools import wraps
from inspect import iscoroutinefunction
from time import perf_counter
import types
from typing import TYPE_CHECKING, Any, Callable, ParamSpec, TypeVar, cast, overload


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import CustomBaseError, ErrorType
from src.platform.logging.loguru_io_config import (
    ExtraField,
    call_depth_var,
    custom_logger,
)
from src.platform.logging.loguru_io_utils import (
    build_call_target_func_path,
    get_chain_start_time,
    mask_sensitive,
    normalize_args_kwargs,
    reset_call_depth,
    should_mask_keyword,
    truncate_content,
)


_F = TypeVar('_F', bound=Callable[..., Any])

CLIENT_ERROR_TYPES = frozenset(
    {
        ErrorType.VALIDATION,
        ErrorType.CONFLICT,
        ErrorType.AUTHENTICATION,
        ErrorType.AUTHORIZATION,
        ErrorType.NOT_FOUND,
    }
)


def redact(data: Any, *, truncate: bool) -> Any:
    """Mask credentials in nested args/kwargs/return values before they are rendered."""
    if isinstance(data, dict):
        redacted: Any = {
            key: redact(should_mask_keyword(key, value), truncate=False)
            for key, value in data.items()
        }
    elif isinstance(data, list | tuple):
        redacted = type(data)(redact(item, truncate=False) for item in data)
    else:
        redacted = mask_sensitive(data)
    return truncate_content(redacted) if truncate else redacted


class LoguruIO:
    depth = 2  # wrapper frame + LoguruIO method

    def __init__(
        self, custom_logger: 'LoguruLogger', *, reraise: bool = True, truncate_content: bool = True
    ) -> None:
        self._custom_logger = custom_logger
        self.reraise = reraise
        self.truncate_content = truncate_content
        self.extra: dict[str, Any] = {}

    def _bound(self) -> 'LoguruLogger':
        return self._custom_logger.bind(**self.extra).opt(depth=self.depth)

    def on_enter(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> float:
        call_depth_var.set(call_depth_var.get() + 1)
        self.extra[ExtraField.CHAIN_START_TIME] = get_chain_start_time()
        if settings.DEBUG:
            self._bound().debug(
                f'args: {redact(args, truncate=self.truncate_content)}, '
                f'kwargs: {redact(kwargs, truncate=self.truncate_content)}'
            )
        return perf_counter()

    def on_return(self, return_value: Any, started: float) -> Any:
        if settings.DEBUG:
            elapsed_ms = (perf_counter() - started) * 1000
            self._bound().debug(
                f'return ({elapsed_ms:.1f}ms): '
                f'{redact(return_value, truncate=self.truncate_content)}'
            )
        return return_value

    def on_error(self, e: Exception) -> None:
        # Outer decorated frames see the same exception again
        if getattr(e, '_has_logged', False):
            return
        e._has_logged = True  # type: ignore[attr-defined]

        if isinstance(e, CustomBaseError) and e.error_type in CLIENT_ERROR_TYPES:
            self._bound().warning(f'{type(e).__name__}({e.status_code}): {e.message}')
        elif isinstance(e, CustomBaseError):
            self._bound().error(f'{type(e).__name__}({e.status_code}): {e.message}')
        else:
            self._bound().exception(f'{type(e).__name__}: {e}')

    def _hide_from_traceback(self, func: Callable[..., Any]) -> Callable[..., Any]:
        func.__code__ = func.__code__.replace(  # type: ignore[attr-defined]
            co_filename=cast(types.FunctionType, self._custom_logger.catch).__code__.co_filename
        )
        return func

    def __call__(self, func: _F) -> _F:
        self.extra[ExtraField.CALL_TARGET] = build_call_target_func_path(func)

        if iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                try:
                    started = self.on_enter(args, kwargs)
                    args, kwargs = normalize_args_kwargs(func, *args, **kwargs)
                    result = await cast(Awaitable[Any], func(*args, **kwargs))
                    return self.on_return(result, started)
                except Exception as e:
                    self.on_error(e)
                    if self.reraise:
                        raise
                    return None
                finally:
                    reset_call_depth()

            return cast(_F, self._hide_from_traceback(async_wrapper))

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                started = self.on_enter(args, kwargs)
                args, kwargs = normalize_args_kwargs(func, *args, **kwargs)
                return self.on_return(func(*args, **kwargs), started)
            except Exception as e:
                self.on_error(e)
                if self.reraise:
                    raise
                return None
            finally:
                reset_call_depth()

        return cast(_F, self._hide_from_traceback(sync_wrapper))


_P = ParamSpec('_P')
_T = TypeVar('_T')


class Logger:
    base = custom_logger

    @overload
    @staticmethod
    def io(func: Callable[_P, _T]) -> Callable[_P, _T]: ...

    @overload
    @staticmethod
    def io(func: None = ..., *, reraise: bool = ..., truncate_content: bool = ...) -> LoguruIO: ...

    @staticmethod
    def io(
        func: Callable[_P, _T] | None = None, *, reraise: bool = True, truncate_content: bool = True
    ) -> Callable[_P, _T] | LoguruIO:
        decorator = LoguruIO(custom_logger, reraise=reraise, truncate_content=truncate_content)
        return decorator(func) if func else decorator
