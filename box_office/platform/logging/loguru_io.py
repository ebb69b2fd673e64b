from collections.abc import Awaitable, Generator
from functools import wraps
from inspect import iscoroutinefunction, isgeneratorfunction
import types
from typing import TYPE_CHECKING, Any, Callable, Optional, ParamSpec, TypeVar, cast, overload


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from box_office.platform.config.core_setting import settings
from box_office.platform.exception.exceptions import CustomBaseError
from box_office.platform.logging.generator_wrapper import GeneratorWrapper
from box_office.platform.logging.loguru_io_config import (
    ExtraField,
    GeneratorMethod,
    call_depth_var,
    custom_logger,
)
from box_office.platform.logging.loguru_io_utils import (
    build_call_target_func_path,
    get_chain_start_time,
    handle_yield,
    mask_for_log,
    normalize_args_kwargs,
    reset_call_depth,
)


_F = TypeVar('_F', bound=Callable[..., Any])


class LoguruIO:
    """
    Decorator that logs masked arguments and return values of a call at DEBUG,
    and each exception once, at the frame where it first surfaces.

    Nested decorated calls share one chain start time so a use case and the
    repo calls under it can be read as a single request.
    """

    # Stack frames from `_debug` up to the decorated function's caller
    depth = 3

    def __init__(self, custom_logger: 'LoguruLogger', *, reraise: bool = True) -> None:
        self._custom_logger = custom_logger
        self.reraise = reraise
        self.extra: dict[str, Any] = {}

    def _debug(self, message: str, yield_method: Optional[GeneratorMethod]) -> None:
        self._custom_logger.bind(**self.extra).opt(depth=self.depth).debug(
            f'{handle_yield(yield_method)}{message}'
        )

    def log_call(
        self, *args: Any, yield_method: Optional[GeneratorMethod] = None, **kwargs: Any
    ) -> None:
        call_depth_var.set(call_depth_var.get() + 1)
        self.extra[ExtraField.CHAIN_START_TIME] = get_chain_start_time()
        if settings.DEBUG:
            self._debug(f'args: {mask_for_log(args)}, kwargs: {mask_for_log(kwargs)}', yield_method)

    def log_return(self, return_value: Any, yield_method: Optional[GeneratorMethod] = None) -> None:
        if settings.DEBUG:
            self._debug(f'return: {mask_for_log(return_value)}', yield_method)

    def log_exception(self, e: Exception) -> None:
        if getattr(e, '_has_logged', False):
            return
        e._has_logged = True  # type: ignore[attr-defined]
        bound = self._custom_logger.bind(**self.extra).opt(depth=self.depth - 1)
        # CustomBaseError is logged without a traceback
        if isinstance(e, CustomBaseError):
            bound.error(f'{type(e).__name__}: {e}')
        else:
            bound.exception(f'{type(e).__name__}: {e}')

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
                    self.log_call(*args, **kwargs)
                    args, kwargs = normalize_args_kwargs(func, *args, **kwargs)
                    result = await cast(Awaitable[Any], func(*args, **kwargs))
                    self.log_return(result)
                    return result
                except Exception as e:
                    self.log_exception(e)
                    if self.reraise:
                        raise
                    return None
                finally:
                    reset_call_depth()

            wrapper: Callable[..., Any] = async_wrapper

        elif isgeneratorfunction(func):

            @wraps(func)
            def generator_wrapper(*args: Any, **kwargs: Any) -> GeneratorWrapper | None:
                try:
                    self.log_call(*args, **kwargs)
                    gen_obj = cast(Generator[Any, Any, Any], func(*args, **kwargs))
                    return GeneratorWrapper(gen_obj, self)
                except Exception as e:
                    self.log_exception(e)
                    if self.reraise:
                        raise
                    return None
                finally:
                    reset_call_depth()

            wrapper = generator_wrapper

        else:

            @wraps(func)
            def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
                try:
                    self.log_call(*args, **kwargs)
                    args, kwargs = normalize_args_kwargs(func, *args, **kwargs)
                    result = func(*args, **kwargs)
                    self.log_return(result)
                    return result
                except Exception as e:
                    self.log_exception(e)
                    if self.reraise:
                        raise
                    return None
                finally:
                    reset_call_depth()

            wrapper = sync_wrapper

        return cast(_F, self._hide_from_traceback(wrapper))


_P = ParamSpec('_P')
_T = TypeVar('_T')


class Logger:
    base = custom_logger

    @overload
    @staticmethod
    def io(func: Callable[_P, _T]) -> Callable[_P, _T]: ...

    @overload
    @staticmethod
    def io(func: None = ..., *, reraise: bool = ...) -> LoguruIO: ...

    @staticmethod
    def io(
        func: Callable[_P, _T] | None = None, *, reraise: bool = True
    ) -> Callable[_P, _T] | LoguruIO:
        io = LoguruIO(custom_logger=custom_logger, reraise=reraise)
        return io(func) if func else io
