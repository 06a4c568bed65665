"""Package level convenience API backed by a process-wide default validator.

The default validator is created lazily on first use and is only changed
through ``set_tag_name`` and ``register_rule``.
"""

from __future__ import annotations

import threading
from typing import Any

from .domain.exceptions import FieldError
from .domain.value_objects.error_map import ErrorMap
from .validation.rules import RuleFunction
from .validation.validator import Validator

_default_validator: Validator | None = None
_default_lock = threading.Lock()


def get_default_validator() -> Validator:
    """Return the process-wide validator, creating it on first use."""
    global _default_validator
    with _default_lock:
        if _default_validator is None:
            _default_validator = Validator()
        return _default_validator


def reset_default_validator() -> None:
    """Drop the process-wide validator (used by tests)."""
    global _default_validator
    with _default_lock:
        _default_validator = None


def validate(record: Any) -> ErrorMap:
    """Validate a record with the default validator."""
    return get_default_validator().validate(record)


def validate_field(value: Any, raw_tags: str) -> FieldError | None:
    """Validate one value against a raw annotation with the default validator."""
    return get_default_validator().valid(value, raw_tags)


def set_tag_name(tag_name: str) -> None:
    """Change the annotation key the default validator reads from fields."""
    get_default_validator().set_tag(tag_name)


def with_tag_name(tag_name: str) -> Validator:
    """Return a validator using another tag name.

    The default validator keeps its tag name, so this can be chained:
    ``with_tag_name("check").validate(record)``.
    """
    return get_default_validator().with_tag(tag_name)


def register_rule(name: str, func: RuleFunction | None) -> None:
    """Add, replace or remove (func=None) a rule on the default validator.

    Raises:
        BadParameterError: If name is empty
    """
    get_default_validator().set_validation_func(name, func)
