"""ValueKind value object.

Closed classification of field values. Rule functions branch on the kind
instead of testing concrete types one by one.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence, Set
from enum import Enum
from typing import Any

from ..helpers.record_fields import is_record
from ..interfaces.i_optional import IOptional


class ValueKind(Enum):
    """Shape of a field value."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    COLLECTION = "collection"  # list, tuple, set, dict, bytes
    RECORD = "record"  # dataclass instance or registered record type
    ABSENT = "absent"  # None or an absent optional
    OTHER = "other"

    @classmethod
    def of(cls, value: Any) -> ValueKind:
        """Classify a value.

        ``bool`` is checked before ``int`` so booleans are never compared as
        numbers. Present optionals are not unwrapped here.

        Example:
            >>> ValueKind.of("abc")
            <ValueKind.STRING: 'string'>
            >>> ValueKind.of(True)
            <ValueKind.BOOLEAN: 'boolean'>
            >>> ValueKind.of(None)
            <ValueKind.ABSENT: 'absent'>
        """
        if value is None:
            return cls.ABSENT
        if isinstance(value, IOptional):
            return cls.OTHER if value.is_present() else cls.ABSENT
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, int):
            return cls.INTEGER
        if isinstance(value, float):
            return cls.FLOAT
        if isinstance(value, str):
            return cls.STRING
        if isinstance(value, (Sequence, Set, Mapping)):
            return cls.COLLECTION
        if is_record(value):
            return cls.RECORD
        return cls.OTHER

    @property
    def is_numeric(self) -> bool:
        """Return True for integer and float kinds."""
        return self in (ValueKind.INTEGER, ValueKind.FLOAT)

    @property
    def is_sized(self) -> bool:
        """Return True for kinds compared by length."""
        return self in (ValueKind.STRING, ValueKind.COLLECTION)
