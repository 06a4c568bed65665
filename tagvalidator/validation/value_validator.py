"""Value validation against a directive list."""

from __future__ import annotations

import logging
from typing import Any

from ..const import PARAM_PLACEHOLDER
from ..domain.exceptions import (
    CustomMessageError,
    ErrorArray,
    FieldError,
    UnknownTagError,
    UnsupportedTypeError,
)
from ..domain.value_objects.directive import DirectiveList
from ..domain.value_objects.nullable import unwrap_optional
from ..domain.value_objects.value_kind import ValueKind
from ..infrastructure.decorators.error_handler import handle_rule_errors
from .rule_registry import RuleRegistry
from .rules import RuleFunction

_LOGGER = logging.getLogger(__name__)


@handle_rule_errors("rule dispatch")
def _run_rule(func: RuleFunction, value: Any, param: str) -> FieldError | None:
    result = func(value, param)
    if result is None or isinstance(result, FieldError):
        return result
    # Custom rules may return any exception; keep only its text
    return FieldError(str(result))


def validate_value(
    value: Any, directives: DirectiveList, registry: RuleRegistry
) -> FieldError | None:
    """Apply each rule directive to a value.

    All rules run even after one fails, so a ``msg_<rule>`` override on a
    later rule is still rendered. An unknown rule name stops validation of
    the value immediately.

    Args:
        value: Field value (present optionals are unwrapped)
        directives: Parsed annotation
        registry: Rules to dispatch to

    Returns:
        ErrorArray with every failure in directive order, UnknownTagError,
        UnsupportedTypeError for record values, or None when all rules pass
    """
    value = unwrap_optional(value)
    if ValueKind.of(value) is ValueKind.RECORD:
        return UnsupportedTypeError()

    errors = ErrorArray()
    for directive in directives:
        if directive.is_reserved:
            continue

        func = registry.lookup(directive.name)
        if func is None:
            _LOGGER.debug("Unknown rule '%s'", directive.name)
            return UnknownTagError()

        err = _run_rule(func, value, directive.param)
        if err is None:
            continue

        template = directives.message_for(directive.name)
        if template is not None:
            err = CustomMessageError(
                template.replace(PARAM_PLACEHOLDER, directive.param), original=err
            )
        errors.append(err)

    return errors if errors else None
