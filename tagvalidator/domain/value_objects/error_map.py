"""ErrorMap value object.

Result of validating a record: display name (or dotted ``parent.child``
path) mapped to the first error found for that field. A missing key means the
field passed.
"""

from __future__ import annotations

from ..exceptions import FieldError


class ErrorMap(dict[str, FieldError]):
    """Field name to representative error mapping.

    Example:
        >>> errors = ErrorMap()
        >>> errors.is_empty()
        True
        >>> errors["Min"] = BelowMinimumError()
        >>> str(errors)
        'Min: less than min'
    """

    def is_empty(self) -> bool:
        """Return True when no field failed."""
        return len(self) == 0

    def error(self) -> FieldError | None:
        """Collapse the map into one error.

        Returns the first non-nil entry rendered as ``"key: message"``.
        Only meaningful when a single failing field is expected.
        """
        for key, err in self.items():
            if err is not None:
                return FieldError(f"{key}: {err}")
        return None

    def to_text(self) -> dict[str, str]:
        """Render every error to plain text."""
        return {key: str(err) for key, err in self.items() if err is not None}

    def __str__(self) -> str:
        err = self.error()
        return str(err) if err is not None else ""
