"""Domain helper functions."""

from .params import as_float, as_int, as_number
from .record_fields import (
    FieldDescriptor,
    is_public_field,
    is_record,
    iter_record_fields,
    register_record,
    unregister_record,
)

__all__ = [
    # Parameter conversion
    "as_int",
    "as_float",
    "as_number",
    # Record fields
    "FieldDescriptor",
    "register_record",
    "unregister_record",
    "is_record",
    "is_public_field",
    "iter_record_fields",
]
