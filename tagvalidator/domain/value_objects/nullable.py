"""Nullable value object.

Optional wrapper for field values, the counterpart of nullable database
column types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from ..interfaces.i_optional import IOptional

T = TypeVar("T")


@dataclass(frozen=True)
class Nullable(IOptional, Generic[T]):
    """Immutable optional value.

    Attributes:
        value: Held value (ignored when ``valid`` is False)
        valid: Whether a value is present

    Example:
        >>> Nullable(0).is_present()
        True
        >>> Nullable.empty().is_present()
        False
    """

    value: T | None = None
    valid: bool = True

    @classmethod
    def empty(cls) -> Nullable[Any]:
        """Create an absent value."""
        return cls(None, valid=False)

    def is_present(self) -> bool:
        """Return True when a value is held."""
        return self.valid

    def unwrap(self) -> T:
        """Return the held value.

        Raises:
            ValueError: If the value is absent
        """
        if not self.valid:
            raise ValueError("Nullable value is absent")
        return self.value  # type: ignore[return-value]

    def __str__(self) -> str:
        return f"Nullable({self.value!r})" if self.valid else "Nullable(<absent>)"


def unwrap_optional(value: Any) -> Any:
    """Dereference a chain of present optionals.

    Absent optionals are returned as they are.

    Example:
        >>> unwrap_optional(Nullable(Nullable("x")))
        'x'
    """
    while isinstance(value, IOptional) and value.is_present():
        value = value.unwrap()
    return value
