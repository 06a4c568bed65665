"""Value objects for field validation.

Immutable primitives created fresh per validation call: parsed directives,
value kinds, optional wrappers and the resulting error map.
"""

from .directive import Directive, DirectiveList
from .error_map import ErrorMap
from .nullable import Nullable, unwrap_optional
from .value_kind import ValueKind

__all__ = [
    "Directive",
    "DirectiveList",
    "ErrorMap",
    "Nullable",
    "unwrap_optional",
    "ValueKind",
]
