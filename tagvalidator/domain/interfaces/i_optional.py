"""IOptional interface for values that may be absent."""

from abc import ABC, abstractmethod
from typing import Any


class IOptional(ABC):
    """Interface for optional/nullable wrappers around a field value.

    The record traversal unwraps present optionals before deciding whether a
    field is a nested record or a scalar. An absent optional is treated as the
    zero value of the field: it is never recursed into and only fails rules
    that check for presence (``notempty``).

    Example:
        >>> count = Nullable(42)
        >>> count.is_present()
        True
        >>> count.unwrap()
        42
    """

    @abstractmethod
    def is_present(self) -> bool:
        """Return True when a value is held."""

    @abstractmethod
    def unwrap(self) -> Any:
        """Return the held value.

        Raises:
            ValueError: If no value is present
        """
