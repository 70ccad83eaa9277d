"""
This module provides decorators for cross-cutting concerns of the navigation
flow, keeping timing and error conversion out of the core logic.

Decorators:
-   `timing_decorator`: Logs the execution time of a synchronous function.
-   `async_timing_decorator`: Logs the execution time of an asynchronous function.
-   `navigation_try_except`: Converts errors raised by a navigation coroutine into
    a result object so every invocation ends with exactly one outcome.
"""

import asyncio
import time
from collections.abc import Awaitable, Callable
from functools import wraps

from loguru import logger

from rails_navigator.core import logs as ls
from rails_navigator.core.constants import ErrorKind
from rails_navigator.infrastructure import exceptions as ex


def timing_decorator[**P, T](func: Callable[P, T]) -> Callable[P, T]:
    """
    Decorator that logs the execution time of a synchronous function.

    Args:
        func: The function to wrap.

    Returns:
        The wrapped function.
    """

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed = (time.perf_counter() - start) * 1000
            logger.debug(ls.FUNC_TIMING.format(func=func.__qualname__, time=elapsed))

    return wrapper


def async_timing_decorator[**P, T](
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[T]]:
    """
    Decorator that logs the execution time of an asynchronous function.

    Args:
        func: The async function to wrap.

    Returns:
        The wrapped async function.
    """

    @wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        start = time.perf_counter()
        try:
            return await func(*args, **kwargs)
        finally:
            elapsed = (time.perf_counter() - start) * 1000
            logger.debug(ls.FUNC_TIMING.format(func=func.__qualname__, time=elapsed))

    return wrapper


def navigation_try_except[T](
    error_factory: Callable[[str, ErrorKind | None], T],
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """
    Decorator factory that wraps a navigation coroutine in a try...except block.

    `NavigationError` subclasses are turned into a result carrying their message
    and kind. Any other exception is logged with its traceback and reported with
    a generic message and no kind.

    Args:
        error_factory: A callable taking the error message and its kind and
                       returning a result object of type T.

    Returns:
        A decorator function.
    """

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @wraps(func)
        async def wrapper(*args, **kwargs) -> T:
            try:
                return await func(*args, **kwargs)
            except (asyncio.CancelledError, KeyboardInterrupt, SystemExit):
                raise
            except ex.NavigationError as e:
                logger.info(ls.NAVIGATION_FAILED.format(kind=e.kind, message=e.message))
                return error_factory(e.message, e.kind)
            except Exception as e:
                logger.exception(ls.NAVIGATION_FAILED.format(kind="unexpected", message=e))
                return error_factory(ex.UNEXPECTED.format(error=e), None)

        return wrapper

    return decorator
