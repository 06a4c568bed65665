"""Error values reported by field validation.

Every rule outcome is a ``FieldError``. Errors are returned as values by the
value validator and the record traversal, so the top-level ``ErrorMap`` is the
only channel a caller needs to inspect. The parser and the rule registry raise
them instead, since a malformed annotation or registration is a caller bug.

All errors render to plain text (``str(err)`` or ``err.marshal_text()``) so
they can be written into text based wire formats.
"""

from __future__ import annotations

from typing import Iterator


class FieldError(ValueError):
    """Base class for all field validation errors.

    Subclasses set ``default_message``; instances may override it.
    """

    default_message = "validation failed"

    def __init__(self, message: str | None = None) -> None:
        """Initialize error with its message."""
        self.message = message if message is not None else self.default_message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldError):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))

    def marshal_text(self) -> bytes:
        """Return the error message encoded for plain text formats."""
        return self.message.encode("utf-8")


class ZeroValueError(FieldError):
    """Value is the zero value of its kind but must not be."""

    default_message = "zero value"


class BelowMinimumError(FieldError):
    """Value (or its length) is less than the minimum."""

    default_message = "less than min"


class AboveMaximumError(FieldError):
    """Value (or its length) is greater than the maximum."""

    default_message = "greater than max"


class LengthMismatchError(FieldError):
    """Length is not equal to the parameter."""

    default_message = "invalid length"


class PatternMismatchError(FieldError):
    """String does not match the regular expression parameter."""

    default_message = "regular expression mismatch"


class UnsupportedTypeError(FieldError):
    """Rule was used with a value kind it cannot check."""

    default_message = "unsupported type"


class BadParameterError(FieldError):
    """Rule parameter is invalid (e.g. ``max=foo`` or ``len=``)."""

    default_message = "bad parameter"


class UnknownTagError(FieldError):
    """Annotation names a rule that is not registered, or is malformed."""

    default_message = "unknown tag"


class InvalidInputError(FieldError):
    """Nil or otherwise unusable value reached a scalar rule."""

    default_message = "invalid value"


class InvalidValueError(FieldError):
    """Value is not a member of the allowed set."""

    default_message = "invalid value"


class InvalidTypedValueError(FieldError):
    """Value does not satisfy the named format."""

    default_message = "invalid value for provided type"


class CustomMessageError(FieldError):
    """Rule failure rendered from a ``msg_<rule>`` template.

    Attributes:
        original: The error the rule returned before the override
    """

    def __init__(self, message: str, original: FieldError | None = None) -> None:
        """Initialize with rendered message and the replaced error."""
        super().__init__(message)
        self.original = original


class ErrorArray(FieldError):
    """Ordered errors collected for one field across all its directives.

    Renders as the first error; an empty array renders as ``""``.
    """

    def __init__(self, errors: list[FieldError] | None = None) -> None:
        """Initialize with the accumulated errors."""
        self.errors: list[FieldError] = list(errors or [])
        super().__init__(str(self.errors[0]) if self.errors else "")

    @property
    def first(self) -> FieldError | None:
        """Return the representative error for the field."""
        return self.errors[0] if self.errors else None

    def append(self, error: FieldError) -> None:
        """Add an error, keeping the rendered message on the first one."""
        self.errors.append(error)
        self.message = str(self.errors[0])
        self.args = (self.message,)

    def __len__(self) -> int:
        return len(self.errors)

    def __iter__(self) -> Iterator[FieldError]:
        return iter(self.errors)

    def __getitem__(self, index: int) -> FieldError:
        return self.errors[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorArray):
            return NotImplemented
        return self.errors == other.errors

    def __hash__(self) -> int:
        return hash(tuple(self.errors))

    def __repr__(self) -> str:
        return f"ErrorArray({self.errors!r})"


class ConfigurationError(ValueError):
    """Validator configuration could not be loaded or is invalid."""
