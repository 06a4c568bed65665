"""Tests for validate_record."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import pytest

from tagvalidator.domain.exceptions import (
    AboveMaximumError,
    BelowMinimumError,
    InvalidInputError,
    InvalidTypedValueError,
    InvalidValueError,
    LengthMismatchError,
    UnknownTagError,
    UnsupportedTypeError,
    ZeroValueError,
)
from tagvalidator.domain.helpers.record_fields import (
    FieldDescriptor,
    register_record,
    unregister_record,
)
from tagvalidator.domain.value_objects.nullable import Nullable
from tagvalidator.validation.record_traversal import validate_record


def tag(annotation: str, default=None, **kwargs):
    """Declare a dataclass field annotated for the default tag name."""
    return field(default=default, metadata={"validate": annotation}, **kwargs)


@dataclass
class Sample:
    Min: int = tag("min=3", 1)
    Max: int = tag("max=0", 1)
    Empty: int = tag("empty=''", 0)
    In: int = tag("in='2,3,4,5'", 1)
    Type: str = tag("type=base64", "test_string")
    CustomMsg: int = tag("min=3,msg_min=msg1{param}msg2", 1)
    CustomAlias: int = tag("min=3,attr=custom_alias", 1)


@dataclass
class Address:
    Zip: str = tag("len=5", "123")
    City: str = tag("notempty=1", "Oslo")


@dataclass
class Customer:
    Name: str = tag("min=2", "Al")
    Address: Address = field(default_factory=Address)


@dataclass
class Order:
    Shipping: Address = field(default_factory=Address, metadata={"validate": "attr=ship"})
    _billing: Address = field(default_factory=Address)
    Buyer: Customer = field(default_factory=Customer)


class TestValidateRecord:
    """Test record traversal."""

    def test_end_to_end(self, registry):
        """Test every kind of field failure is reported once."""
        errors = validate_record(Sample(), "validate", registry)

        assert not errors.is_empty()
        assert errors["Min"] == BelowMinimumError()
        assert errors["Max"] == AboveMaximumError()
        assert errors["Empty"] == ZeroValueError()
        assert errors["In"] == InvalidValueError()
        assert errors["Type"] == InvalidTypedValueError()
        assert str(errors["CustomMsg"]) == "msg13msg2"
        assert errors["custom_alias"] == BelowMinimumError()
        assert "CustomAlias" not in errors
        assert len(errors) == 7

    def test_single_failing_field(self, registry):
        """Test only failing fields have keys."""

        @dataclass
        class One:
            count: int = tag("min=3", 1)
            other: int = tag("max=10", 5)

        errors = validate_record(One(), "validate", registry)
        assert errors == {"count": BelowMinimumError()}

    def test_passing_record(self, registry):
        """Test a valid record yields an empty map."""
        assert validate_record(Sample(3, 0, 1, 2, "dGVzdA==", 3, 3), "validate", registry) == {}

    def test_nested_record_path(self, registry):
        """Test nested failures are keyed parent.child."""
        errors = validate_record(Customer(), "validate", registry)
        assert errors == {"Address.Zip": LengthMismatchError()}

    def test_deep_nesting_uses_aliases(self, registry):
        """Test alias prefixes and multi-level dotted paths."""
        errors = validate_record(Order(), "validate", registry)
        assert errors == {
            "ship.Zip": LengthMismatchError(),
            "Buyer.Address.Zip": LengthMismatchError(),
        }

    def test_non_public_nested_record_skipped(self, registry):
        """Test nested records behind a private name are not traversed."""
        errors = validate_record(Order(), "validate", registry)
        assert not any(key.startswith("_billing") for key in errors)

    def test_skip_marker(self, registry):
        """Test fields annotated '-' never produce entries."""

        @dataclass
        class Skipped:
            value: int = tag("-", 0)
            nested: Address = field(default_factory=Address, metadata={"validate": "-"})

        assert validate_record(Skipped(), "validate", registry) == {}

    def test_unannotated_scalar_skipped(self, registry):
        """Test fields without annotation are ignored."""

        @dataclass
        class Plain:
            value: int = 0

        assert validate_record(Plain(), "validate", registry) == {}

    def test_parse_error_under_declared_name(self, registry):
        """Test a malformed annotation is reported under the declared name."""

        @dataclass
        class Broken:
            value: int = tag("attr=alias, =3", 0)

        assert validate_record(Broken(), "validate", registry) == {
            "value": UnknownTagError()
        }

    def test_unknown_rule_isolated(self, registry):
        """Test an unknown rule does not stop sibling fields."""

        @dataclass
        class Mixed:
            first: str = tag("foo=bar", "x")
            second: int = tag("min=3", 1)

        errors = validate_record(Mixed(), "validate", registry)
        assert errors == {"first": UnknownTagError(), "second": BelowMinimumError()}

    def test_non_record_input(self, registry):
        """Test non-record input is reported under the summary key."""
        for value in (42, "text", None, [Sample()], Sample):
            assert validate_record(value, "validate", registry) == {
                "_summary": UnsupportedTypeError()
            }

    def test_optional_record_is_dereferenced(self, registry):
        """Test a present optional wrapping a record is validated."""
        errors = validate_record(Nullable(Customer()), "validate", registry)
        assert errors == {"Address.Zip": LengthMismatchError()}

    def test_optional_fields(self, registry):
        """Test optional field values are unwrapped or treated as zero."""

        @dataclass
        class WithOptionals:
            present: Nullable = tag("min=3", Nullable(1))
            absent: Nullable = tag("notempty=1", Nullable.empty())
            missing: Optional[str] = tag("notempty=1", None)
            nested: Nullable = field(default_factory=lambda: Nullable(Address()))

        errors = validate_record(WithOptionals(), "validate", registry)
        assert errors == {
            "present": BelowMinimumError(),
            "absent": ZeroValueError(),
            "missing": ZeroValueError(),
            "nested.Zip": LengthMismatchError(),
        }

    def test_tag_name_selects_annotations(self, registry):
        """Test only annotations for the given tag name are read."""

        @dataclass
        class Tagged:
            value: int = field(default=1, metadata={"validate": "min=3", "check": "max=0"})

        assert validate_record(Tagged(), "check", registry) == {
            "value": AboveMaximumError()
        }

    def test_first_error_reported(self, registry):
        """Test only the first failing directive is surfaced."""

        @dataclass
        class Many:
            value: str = tag("min=5,len=4,regexp=^[0-9]+$", "ab")

        assert validate_record(Many(), "validate", registry) == {
            "value": BelowMinimumError()
        }

    def test_unassigned_field_treated_as_absent(self, registry):
        """Test a never-assigned init=False field does not stop its siblings."""

        @dataclass
        class Partial:
            name: str = tag("min=3", "Al")
            count: int = field(init=False, metadata={"validate": "min=3"})
            flag: int = field(init=False, metadata={"validate": "notempty=1"})

        assert validate_record(Partial(), "validate", registry) == {
            "name": BelowMinimumError(),
            "count": InvalidInputError(),
            "flag": ZeroValueError(),
        }

    def test_idempotent(self, registry):
        """Test validating twice gives identical maps."""
        first = validate_record(Order(), "validate", registry)
        second = validate_record(Order(), "validate", registry)
        assert first == second


class Legacy:
    """Plain class made into a record by registration."""

    def __init__(self, code, inner):
        self.code = code
        self.inner = inner


@pytest.fixture
def legacy_record():
    """Register Legacy with explicit descriptors."""
    register_record(
        Legacy,
        [
            FieldDescriptor("code", {"validate": "len=3"}),
            FieldDescriptor("inner"),
        ],
    )
    yield Legacy
    unregister_record(Legacy)


class TestRegisteredRecords:
    """Test traversal of explicitly registered record types."""

    def test_registered_record(self, registry, legacy_record):
        """Test descriptors drive the same traversal as dataclasses."""
        errors = validate_record(legacy_record("ab", Address()), "validate", registry)
        assert errors == {
            "code": LengthMismatchError(),
            "inner.Zip": LengthMismatchError(),
        }
