"""Error handling decorators for rule execution."""

import logging
from functools import wraps
from typing import Any, Callable

from ...domain.exceptions import FieldError


def handle_rule_errors(
    operation_name: str,
    logger: logging.Logger = None,
    reraise: bool = True,
    default_return: Any = None,
):
    """Decorator for standardized rule error handling.

    A ``FieldError`` raised by the wrapped function is a validation outcome
    and becomes its return value. Any other exception is a bug in the rule:
    it is logged with a stack trace and re-raised, or replaced by
    ``default_return`` when ``reraise`` is False.

    Args:
        operation_name: Human-readable operation name for logging
        logger: Logger to use (defaults to function's module logger)
        reraise: Whether to re-raise unexpected exceptions after logging
        default_return: Value to return on unexpected error if not re-raising

    Example:
        @handle_rule_errors("min rule")
        def minimum(value, param):
            # as_int raises BadParameterError, returned to the caller
            return None if value >= as_int(param) else BelowMinimumError()
    """

    def decorator(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs):
            log = logger or logging.getLogger(func.__module__)
            try:
                return func(*args, **kwargs)
            except FieldError as err:
                log.debug("%s failed: %s", operation_name, err)
                return err
            except Exception as err:
                log.error(
                    "%s unexpected error: %s",
                    operation_name,
                    err,
                    exc_info=True,
                )
                if reraise:
                    raise
                return default_return

        return wrapper

    return decorator
