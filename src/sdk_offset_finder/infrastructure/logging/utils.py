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
        Logger instance
    """
    return logging.getLogger(name)


def log_timing(func: F) -> F:
    """
    Decorator logging how long a load or build stage took.

    Failures are logged with their elapsed time and re-raised unchanged.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = get_logger(func.__module__)
        stage = func.__qualname__
        logger.debug(f"Starting {stage}")
        started = perf_counter()

        try:
            result = func(*args, **kwargs)
        except Exception as e:
            elapsed_ms = (perf_counter() - started) * 1000
            logger.debug(f"{stage} failed after {elapsed_ms:.1f}ms: {e}")
            raise

        elapsed_ms = (perf_counter() - started) * 1000
        logger.debug(f"{stage} finished in {elapsed_ms:.1f}ms")
        return result

    return cast("F", wrapper)
