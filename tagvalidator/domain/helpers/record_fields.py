"""Record field discovery.

A record is a value with named, declared fields that may carry annotation
strings. Dataclass instances are records out of the box: the annotation for
a tag name is read from ``field(metadata={tag_name: "..."})``. Any other
class can become a record by registering an explicit field descriptor list.

Example:
    >>> @dataclass
    ... class Account:
    ...     name: str = field(metadata={"validate": "min=3"})
    >>> list(iter_record_fields(Account("bo"), "validate"))
    [('name', 'bo', 'min=3')]
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping

from ..interfaces.i_optional import IOptional

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldDescriptor:
    """Declared field of a registered record type.

    Attributes:
        name: Attribute name read from the instance
        annotations: Annotation strings keyed by tag name
    """

    name: str
    annotations: Mapping[str, str] = field(default_factory=dict)

    def annotation(self, tag_name: str) -> str:
        """Return the annotation for a tag name, or ``""``."""
        return self.annotations.get(tag_name, "")


# Registered record types -> declared fields in declaration order
_RECORD_TYPES: dict[type, tuple[FieldDescriptor, ...]] = {}


def register_record(cls: type, fields: list[FieldDescriptor]) -> None:
    """Register a non-dataclass type as a record.

    Args:
        cls: Record class
        fields: Declared fields in declaration order

    Raises:
        ValueError: If a field name is empty or duplicated
    """
    names = [descriptor.name for descriptor in fields]
    if any(not name for name in names):
        raise ValueError(f"Record {cls.__name__}: field name cannot be empty")
    if len(set(names)) != len(names):
        raise ValueError(f"Record {cls.__name__}: duplicate field names {names}")

    _RECORD_TYPES[cls] = tuple(fields)
    _LOGGER.debug("Registered record type %s with %d fields", cls.__name__, len(fields))


def unregister_record(cls: type) -> None:
    """Remove a registered record type (no-op when unknown)."""
    _RECORD_TYPES.pop(cls, None)


def _registered_fields(value: Any) -> tuple[FieldDescriptor, ...] | None:
    for klass in type(value).__mro__:
        if klass in _RECORD_TYPES:
            return _RECORD_TYPES[klass]
    return None


def is_record(value: Any) -> bool:
    """Return True for dataclass instances and registered record instances.

    Optional wrappers are never records, even when they are dataclasses.
    """
    if isinstance(value, (type, IOptional)):
        return False
    if dataclasses.is_dataclass(value):
        return True
    return _registered_fields(value) is not None


def is_public_field(name: str) -> bool:
    """Return True when a declared field name is externally visible."""
    return bool(name) and not name.startswith("_")


def iter_record_fields(record: Any, tag_name: str) -> Iterator[tuple[str, Any, str]]:
    """Yield ``(declared name, value, annotation)`` for each declared field.

    Args:
        record: Record instance
        tag_name: Annotation key consulted on each field

    Raises:
        TypeError: If the value is not a record
    """
    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        for dc_field in dataclasses.fields(record):
            annotation = dc_field.metadata.get(tag_name, "")
            yield dc_field.name, getattr(record, dc_field.name, None), annotation
        return

    descriptors = _registered_fields(record)
    if descriptors is None:
        raise TypeError(f"{type(record).__name__} is not a record type")

    for descriptor in descriptors:
        yield (
            descriptor.name,
            getattr(record, descriptor.name, None),
            descriptor.annotation(tag_name),
        )
