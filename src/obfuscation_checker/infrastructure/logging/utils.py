#!/usr/bin/env python3

"""Logging utility functions and decorators."""

import logging
from collections.abc import Callable
from functools import wraps
from time import perf_counter
from typing import Any, TypeVar, cast

F = TypeVar("F", bound=Callable[..., Any])


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module name.

    Args:
        name: Module name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def log_timing(func: F) -> F:
    """
    Decorator to log execution time of a function at debug level.

    Failures are logged with their exception type and re-raised; callers
    decide whether the failure deserves a warning or an error.

    Args:
        func: Function to decorate

    Returns:
        Wrapped function that logs timing
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = get_logger(func.__module__)
        func_name = func.__qualname__
        start = perf_counter()

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            logger.debug(
                f"{func_name} raised {type(e).__name__} after {perf_counter() - start:.3f}s"
            )
            raise

        logger.debug(f"Completed {func_name} in {perf_counter() - start:.3f}s")
        return result

    return cast("F", wrapper)
