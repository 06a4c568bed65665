"""Validator facade.

Binds a tag name (the annotation key read from each field) to a rule
registry and exposes record and single-value validation.
"""

from __future__ import annotations

import logging
from typing import Any

from ..const import DEFAULT_TAG_NAME, SKIP_FIELD
from ..domain.exceptions import FieldError, UnknownTagError
from ..domain.services.tag_parser import parse_tags
from ..domain.value_objects.error_map import ErrorMap
from .record_traversal import validate_record
from .rule_registry import RuleRegistry
from .rules import RuleFunction
from .value_validator import validate_value

_LOGGER = logging.getLogger(__name__)


class Validator:
    """Field validator.

    Example:
        >>> @dataclass
        ... class Signup:
        ...     age: int = field(metadata={"validate": "min=18"})
        >>> Validator().validate(Signup(age=12))
        {'age': BelowMinimumError('less than min')}
        >>> Validator().valid("abc", "len=3")
    """

    def __init__(
        self,
        tag_name: str = DEFAULT_TAG_NAME,
        registry: RuleRegistry | None = None,
    ) -> None:
        """Initialize validator.

        Args:
            tag_name: Annotation key read from each field
            registry: Rules to use (defaults to a fresh built-in registry)
        """
        self.tag_name = tag_name
        self.registry = registry if registry is not None else RuleRegistry.with_builtins()

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> Validator:
        """Create a validator from a validated configuration mapping.

        Args:
            config: Output of ``validate_config`` / ``load_validator_config``
        """
        validator = cls(tag_name=config.get("tag_name", DEFAULT_TAG_NAME))
        for name in config.get("disabled_rules", []):
            validator.registry.unregister(name)

        _LOGGER.debug(
            "Validator configured: tag '%s', %d rules",
            validator.tag_name,
            len(validator.registry),
        )
        return validator

    def set_tag(self, tag_name: str) -> None:
        """Change the annotation key read from fields."""
        self.tag_name = tag_name

    def with_tag(self, tag_name: str) -> Validator:
        """Return a validator with another tag name sharing this registry.

        Rules registered through either instance are visible through both;
        use ``copy`` first when isolation is needed.
        """
        return Validator(tag_name=tag_name, registry=self.registry)

    def copy(self) -> Validator:
        """Return a validator with an independent copy of the registry."""
        return Validator(tag_name=self.tag_name, registry=self.registry.copy())

    def set_validation_func(self, name: str, func: RuleFunction | None) -> None:
        """Add, replace or remove (func=None) a rule.

        Raises:
            BadParameterError: If name is empty
        """
        self.registry.register(name, func)

    def validate(self, record: Any) -> ErrorMap:
        """Validate the fields of a record.

        Returns:
            ErrorMap keyed by field display name; empty on success
        """
        return validate_record(record, self.tag_name, self.registry)

    def valid(self, value: Any, raw_tags: str) -> FieldError | None:
        """Validate one value against a raw annotation string.

        Returns:
            None when valid or when ``raw_tags`` is ``-``; otherwise the
            ErrorArray of failures or the parse/dispatch error
        """
        if raw_tags == SKIP_FIELD:
            return None

        try:
            directives = parse_tags(raw_tags)
        except UnknownTagError as err:
            return err

        return validate_value(value, directives, self.registry)

    def __repr__(self) -> str:
        return f"Validator(tag_name={self.tag_name!r}, rules={len(self.registry)})"
