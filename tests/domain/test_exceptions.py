"""Tests for field error values."""

import pytest

from tagvalidator.domain.exceptions import (
    BelowMinimumError,
    CustomMessageError,
    ErrorArray,
    FieldError,
    InvalidInputError,
    InvalidValueError,
    UnknownTagError,
    ZeroValueError,
)


class TestFieldError:
    """Test FieldError behaviour."""

    def test_is_value_error(self):
        """Test FieldError is a ValueError subclass."""
        assert issubclass(FieldError, ValueError)
        with pytest.raises(ValueError):
            raise UnknownTagError()

    @pytest.mark.parametrize(
        ("error", "text"),
        [
            (ZeroValueError(), "zero value"),
            (BelowMinimumError(), "less than min"),
            (UnknownTagError(), "unknown tag"),
            (InvalidValueError(), "invalid value"),
        ],
    )
    def test_default_messages(self, error, text):
        """Test each kind renders its default text."""
        assert str(error) == text
        assert error.marshal_text() == text.encode()

    def test_equality_by_kind_and_message(self):
        """Test errors compare by class and message."""
        assert BelowMinimumError() == BelowMinimumError()
        assert BelowMinimumError() != ZeroValueError()
        # Same text, different kind
        assert InvalidInputError() != InvalidValueError()

    def test_custom_message_keeps_original(self):
        """Test custom message errors keep the replaced error."""
        err = CustomMessageError("too small: 3", original=BelowMinimumError())
        assert str(err) == "too small: 3"
        assert err.original == BelowMinimumError()


class TestErrorArray:
    """Test ErrorArray behaviour."""

    def test_renders_first_error(self):
        """Test the array renders as its first error."""
        errors = ErrorArray([BelowMinimumError(), ZeroValueError()])
        assert str(errors) == "less than min"
        assert errors.first == BelowMinimumError()
        assert len(errors) == 2

    def test_empty_array(self):
        """Test an empty array renders as empty text and is falsy."""
        errors = ErrorArray()
        assert str(errors) == ""
        assert errors.first is None
        assert not errors

    def test_append_updates_message(self):
        """Test appending to an empty array sets its message."""
        errors = ErrorArray()
        errors.append(ZeroValueError())
        errors.append(BelowMinimumError())
        assert str(errors) == "zero value"
        assert list(errors) == [ZeroValueError(), BelowMinimumError()]
