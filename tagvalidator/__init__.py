"""Declarative field validation driven by annotation strings.

Fields declare their constraints as small annotations::

    @dataclass
    class Address:
        zip: str = field(metadata={"validate": "len=5"})

    @dataclass
    class Customer:
        name: str = field(metadata={"validate": "min=3,msg_min=too short: {param}"})
        tier: str = field(metadata={"validate": "attr=level,in='gold,silver'"})
        address: Address = field(default_factory=Address)

    errors = validate(Customer(...))
    if not errors.is_empty():
        ...

Architecture:
- domain: errors, directives, value kinds, annotation parser, record fields
- validation: rules, rule registry, value validator, record traversal
- config: voluptuous/YAML validator configuration
- infrastructure: rule error handling decorator
"""

from .api import (
    get_default_validator,
    register_rule,
    reset_default_validator,
    set_tag_name,
    validate,
    validate_field,
    with_tag_name,
)
from .config import load_validator_config, validate_config
from .domain.exceptions import (
    AboveMaximumError,
    BadParameterError,
    BelowMinimumError,
    ConfigurationError,
    CustomMessageError,
    ErrorArray,
    FieldError,
    InvalidInputError,
    InvalidTypedValueError,
    InvalidValueError,
    LengthMismatchError,
    PatternMismatchError,
    UnknownTagError,
    UnsupportedTypeError,
    ZeroValueError,
)
from .domain.helpers.record_fields import FieldDescriptor, register_record, unregister_record
from .domain.services.tag_parser import format_tags, parse_tags
from .domain.value_objects import Directive, DirectiveList, ErrorMap, Nullable
from .validation import RuleRegistry, Validator

__all__ = [
    # Convenience API
    "validate",
    "validate_field",
    "set_tag_name",
    "with_tag_name",
    "register_rule",
    "get_default_validator",
    "reset_default_validator",
    # Core types
    "Validator",
    "RuleRegistry",
    "Directive",
    "DirectiveList",
    "ErrorMap",
    "Nullable",
    "FieldDescriptor",
    "register_record",
    "unregister_record",
    "parse_tags",
    "format_tags",
    # Configuration
    "load_validator_config",
    "validate_config",
    # Errors
    "FieldError",
    "ErrorArray",
    "ZeroValueError",
    "BelowMinimumError",
    "AboveMaximumError",
    "LengthMismatchError",
    "PatternMismatchError",
    "UnsupportedTypeError",
    "BadParameterError",
    "UnknownTagError",
    "InvalidInputError",
    "InvalidValueError",
    "InvalidTypedValueError",
    "CustomMessageError",
    "ConfigurationError",
]
