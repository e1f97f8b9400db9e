"""Timing helpers that report elapsed time through the app logger."""

import inspect
import logging
import time
from collections.abc import Callable, Generator
from contextlib import contextmanager
from functools import wraps
from typing import Any, ParamSpec, TypeVar

from newsgather.logger import logger

__all__ = ["timeit", "timer"]

P = ParamSpec("P")
R = TypeVar("R")

ELAPSED_MESSAGE = "%s took %.4f seconds"


def _log_elapsed(name: str, started: float, log_level: int) -> None:
    logger.log(log_level, ELAPSED_MESSAGE, name, time.perf_counter() - started)


@contextmanager
def timer(name: str = "Operation", log_level: int = logging.INFO) -> Generator[None]:
    """Log how long the wrapped block took, even when it raises.

    Example:
        >>> with timer("Search results parsing", logging.DEBUG):
        ...     articles = parse_search_results(markup)

    """
    started = time.perf_counter()
    try:
        yield
    finally:
        _log_elapsed(name, started, log_level)


def timeit(
    name: str | None = None, log_level: int = logging.INFO
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Log the execution time of a sync or async function.

    Args:
        name: Operation name for the log record (default: module.function)
        log_level: Logging level to use (default: INFO)

    """
    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        operation_name = name or f"{func.__module__}.{func.__name__}"

        if inspect.iscoroutinefunction(func):
            @wraps(func)
            async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> Any:
                started = time.perf_counter()
                try:
                    return await func(*args, **kwargs)  # type: ignore[misc]
                finally:
                    _log_elapsed(operation_name, started, log_level)
            return async_wrapper  # type: ignore[return-value]

        @wraps(func)
        def sync_wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            started = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                _log_elapsed(operation_name, started, log_level)
        return sync_wrapper
    return decorator
