"""Validation layer.

Architecture:
- rules: Built-in rule functions
- RuleRegistry: Named rule lookup, shared or copied between validators
- validate_value: Applies a directive list to one value
- validate_record: Recursive field walk producing an ErrorMap
- Validator: Tag name + registry facade
"""

from .record_traversal import validate_record
from .rule_registry import RuleRegistry
from .rules import BUILTIN_RULES, RuleFunction
from .validator import Validator
from .value_validator import validate_value

__all__ = [
    "BUILTIN_RULES",
    "RuleFunction",
    "RuleRegistry",
    "validate_value",
    "validate_record",
    "Validator",
]
