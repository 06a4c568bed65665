"""Record traversal.

Walks the declared fields of a record depth-first, validates each annotated
field and assembles a flat ``ErrorMap``. Nested record errors are keyed by
``parent.child`` paths built from display names. A failure on one field never
stops validation of its siblings.
"""

from __future__ import annotations

import logging
from typing import Any

from ..const import NESTED_SEPARATOR, SKIP_FIELD, SUMMARY_KEY
from ..domain.exceptions import ErrorArray, UnknownTagError, UnsupportedTypeError
from ..domain.helpers.record_fields import is_public_field, is_record, iter_record_fields
from ..domain.services.tag_parser import parse_tags
from ..domain.value_objects.error_map import ErrorMap
from ..domain.value_objects.nullable import unwrap_optional
from .rule_registry import RuleRegistry
from .value_validator import validate_value

_LOGGER = logging.getLogger(__name__)


def validate_record(record: Any, tag_name: str, registry: RuleRegistry) -> ErrorMap:
    """Validate every annotated field of a record.

    Args:
        record: Record instance, optionally wrapped in present optionals
        tag_name: Annotation key consulted on each field
        registry: Rules to dispatch to

    Returns:
        ErrorMap keyed by display name; ``{"_summary": UnsupportedTypeError}``
        when the input is not a record
    """
    record = unwrap_optional(record)
    errors = ErrorMap()

    if not is_record(record):
        errors[SUMMARY_KEY] = UnsupportedTypeError()
        return errors

    for name, raw_value, annotation in iter_record_fields(record, tag_name):
        value = unwrap_optional(raw_value)
        nested = is_record(value)

        if annotation == SKIP_FIELD or (not annotation and not nested):
            continue

        try:
            directives = parse_tags(annotation)
        except UnknownTagError as err:
            errors[name] = err
            continue

        display_name = directives.alias if directives.alias is not None else name

        if nested:
            if not is_public_field(name):
                _LOGGER.debug("Skipping non-public nested record '%s'", name)
                continue

            for key, err in validate_record(value, tag_name, registry).items():
                errors[f"{display_name}{NESTED_SEPARATOR}{key}"] = err
            continue

        err = validate_value(value, directives, registry)
        if isinstance(err, ErrorArray):
            err = err.first
        if err is not None:
            errors[display_name] = err

    return errors
