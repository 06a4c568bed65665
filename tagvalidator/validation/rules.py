"""Built-in validation rules.

Every rule has the shape ``rule(value, param) -> FieldError | None``. A rule
returns an error instead of raising when the value kind is not supported, so
malformed input never aborts validation of a record.
"""

from __future__ import annotations

import operator
import re
from datetime import datetime
from typing import Any, Callable, Optional

from ..domain.exceptions import (
    AboveMaximumError,
    BadParameterError,
    BelowMinimumError,
    FieldError,
    InvalidInputError,
    InvalidTypedValueError,
    InvalidValueError,
    LengthMismatchError,
    PatternMismatchError,
    UnsupportedTypeError,
    ZeroValueError,
)
from ..domain.helpers.params import as_float, as_int, as_number
from ..domain.value_objects.nullable import unwrap_optional
from ..domain.value_objects.value_kind import ValueKind
from ..infrastructure.decorators.error_handler import handle_rule_errors

RuleFunction = Callable[[Any, str], Optional[FieldError]]

REGEXP_BASE64 = re.compile(
    r"^(?:[A-Za-z0-9+/]{4})*(?:[A-Za-z0-9+/]{2}==|[A-Za-z0-9+/]{3}=|[A-Za-z0-9+/]{4})\Z"
)
REGEXP_RFC3339 = re.compile(
    r"^\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2}(?P<fraction>\.\d+)?(?:[Zz]|[+-]\d{2}:\d{2})\Z"
)


def _classify(value: Any) -> tuple[Any, ValueKind]:
    value = unwrap_optional(value)
    return value, ValueKind.of(value)


@handle_rule_errors("notempty rule")
def not_zero(value: Any, param: str) -> FieldError | None:
    """Check that a value is not the zero value of its kind.

    Empty strings, empty collections, ``0``, ``0.0``, ``False``, ``None`` and
    absent optionals are zero values.
    """
    value, kind = _classify(value)

    if kind is ValueKind.ABSENT:
        valid = False
    elif kind is ValueKind.STRING:
        valid = value != ""
    elif kind is ValueKind.COLLECTION:
        valid = len(value) != 0
    elif kind.is_numeric:
        valid = value != 0
    elif kind is ValueKind.BOOLEAN:
        valid = value
    else:
        return UnsupportedTypeError()

    if not valid:
        return ZeroValueError()
    return None


@handle_rule_errors("len rule")
def length(value: Any, param: str) -> FieldError | None:
    """Check that a value's length equals the parameter.

    Strings are measured in characters and collections in items. Numbers are
    compared to the parameter directly.
    """
    value, kind = _classify(value)

    if kind is ValueKind.ABSENT:
        return InvalidInputError()
    if kind.is_sized:
        valid = len(value) == as_int(param)
    elif kind is ValueKind.INTEGER:
        valid = value == as_int(param)
    elif kind is ValueKind.FLOAT:
        valid = value == as_float(param)
    else:
        return UnsupportedTypeError()

    if not valid:
        return LengthMismatchError()
    return None


def _compare(
    value: Any, param: str, failed: Callable[[Any, Any], bool], error: type[FieldError]
) -> FieldError | None:
    value, kind = _classify(value)

    if kind is ValueKind.ABSENT:
        return InvalidInputError()
    if kind.is_sized:
        invalid = failed(len(value), as_int(param))
    elif kind is ValueKind.INTEGER:
        invalid = failed(value, as_int(param))
    elif kind is ValueKind.FLOAT:
        invalid = failed(value, as_number(param))
    else:
        return UnsupportedTypeError()

    if invalid:
        return error()
    return None


@handle_rule_errors("min rule")
def minimum(value: Any, param: str) -> FieldError | None:
    """Check that a value (or its length) is at least the parameter."""
    return _compare(value, param, operator.lt, BelowMinimumError)


@handle_rule_errors("max rule")
def maximum(value: Any, param: str) -> FieldError | None:
    """Check that a value (or its length) is at most the parameter."""
    return _compare(value, param, operator.gt, AboveMaximumError)


@handle_rule_errors("regexp rule")
def regex(value: Any, param: str) -> FieldError | None:
    """Check that a string contains a match of the regular expression."""
    value, kind = _classify(value)

    if kind is ValueKind.ABSENT:
        return InvalidInputError()
    if kind is not ValueKind.STRING:
        return UnsupportedTypeError()

    try:
        pattern = re.compile(param)
    except re.error:
        return BadParameterError()

    if not pattern.search(value):
        return PatternMismatchError()
    return None


@handle_rule_errors("in rule")
def in_set(value: Any, param: str) -> FieldError | None:
    """Check that a value is one of the comma separated parameter values.

    Works with integers, floats and strings. String members are compared as
    written, without trimming.
    """
    value, kind = _classify(value)
    members = param.split(",")

    if kind is ValueKind.ABSENT:
        return InvalidInputError()
    if kind is ValueKind.INTEGER:
        expected = [as_int(member) for member in members]
    elif kind is ValueKind.FLOAT:
        expected = [as_float(member) for member in members]
    elif kind is ValueKind.STRING:
        expected = members
    else:
        return BadParameterError()

    if value not in expected:
        return InvalidValueError()
    return None


def _is_timestamp(text: str) -> bool:
    match = REGEXP_RFC3339.match(text)
    if match is None:
        return False

    normalized = text[:10] + "T" + text[11:]
    if normalized[-1] in "Zz":
        normalized = normalized[:-1] + "+00:00"

    # fromisoformat wants exactly six fraction digits on older interpreters
    fraction = match.group("fraction")
    if fraction:
        digits = (fraction[1:] + "000000")[:6]
        normalized = normalized.replace(fraction, "." + digits, 1)

    try:
        datetime.fromisoformat(normalized)
    except ValueError:
        return False
    return True


@handle_rule_errors("type rule")
def type_valid(value: Any, param: str) -> FieldError | None:
    """Check that a string is valid for a named format.

    Supported formats: ``timestamp`` (RFC 3339), ``base64``.
    """
    if param == "timestamp":
        check = _is_timestamp
    elif param == "base64":
        check = REGEXP_BASE64.match
    else:
        return BadParameterError()

    value, kind = _classify(value)
    if kind is ValueKind.ABSENT:
        return InvalidInputError()
    if kind is not ValueKind.STRING or not check(value):
        return InvalidTypedValueError()
    return None


BUILTIN_RULES: dict[str, RuleFunction] = {
    "notempty": not_zero,
    "empty": not_zero,
    "len": length,
    "min": minimum,
    "max": maximum,
    "regexp": regex,
    "in": in_set,
    "type": type_valid,
}
