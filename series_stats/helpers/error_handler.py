#!/usr/bin/env python
# coding:utf-8


from typing import Callable
from traceback import format_exc as tracebackFormat_exc
from functools import wraps


import logging


class SeriesStatsError(Exception):
    """Base exception for the series statistics application"""
    pass

class ConfigurationError(SeriesStatsError):
    """Configuration-related errors"""
    pass

class ValidationError(SeriesStatsError):
    """Input validation errors (raw samples rejected before reaching the core)"""
    pass


#-----------------------------------------------------------------------------------------------
def handle_errors(logger: logging.Logger, re_raise: bool = True):
    """Decorator logging controlled and unexpected errors of entry-point callables"""
    def decorator(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except SeriesStatsError as e:
                logger.error(f"Controlled error in {func.__name__}: {e}")
                if re_raise:
                    raise
                return None
            except Exception as e:
                logger.error(f"Unexpected error in {func.__name__}: {e}\n{tracebackFormat_exc()}")
                if re_raise:
                    raise SeriesStatsError(f"Operation failed: {e}") from e
                return None
        return wrapper
    return decorator
