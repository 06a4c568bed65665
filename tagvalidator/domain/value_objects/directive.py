"""Directive value objects.

A directive is one ``name=param`` validation instruction parsed from a field
annotation. Order matters: ``msg_<rule>`` directives customize the rule they
name, and the first failing rule is the one reported for a field.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from ...const import MSG_PREFIX, TAG_ATTR


@dataclass(frozen=True)
class Directive:
    """Immutable parsed directive.

    Attributes:
        name: Rule or reserved directive name (never empty)
        param: Raw parameter string (may be empty)
    """

    name: str
    param: str = ""

    def __post_init__(self) -> None:
        """Validate directive name.

        Raises:
            ValueError: If name is empty
        """
        if not self.name:
            raise ValueError("Directive name cannot be empty")

    @property
    def is_reserved(self) -> bool:
        """Return True for metadata directives that are never dispatched."""
        return self.name == TAG_ATTR or self.name.startswith(MSG_PREFIX)

    def __str__(self) -> str:
        if "," in self.param:
            return f"{self.name}='{self.param}'"
        return f"{self.name}={self.param}"


class DirectiveList:
    """Ordered, immutable sequence of directives from one annotation."""

    __slots__ = ("_directives",)

    def __init__(self, directives: Iterable[Directive] = ()) -> None:
        """Initialize from parsed directives."""
        self._directives: tuple[Directive, ...] = tuple(directives)

    def get_by_name(self, name: str) -> Directive | None:
        """Return the first directive with the given name, if any."""
        for directive in self._directives:
            if directive.name == name:
                return directive
        return None

    @property
    def alias(self) -> str | None:
        """Return the display name supplied by an ``attr`` directive."""
        directive = self.get_by_name(TAG_ATTR)
        return directive.param if directive else None

    def message_for(self, rule_name: str) -> str | None:
        """Return the custom error template for a rule, if any."""
        directive = self.get_by_name(f"{MSG_PREFIX}{rule_name}")
        return directive.param if directive else None

    def __iter__(self) -> Iterator[Directive]:
        return iter(self._directives)

    def __len__(self) -> int:
        return len(self._directives)

    def __getitem__(self, index: int) -> Directive:
        return self._directives[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DirectiveList):
            return self._directives == other._directives
        if isinstance(other, (list, tuple)):
            return list(self._directives) == list(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._directives)

    def __repr__(self) -> str:
        return f"DirectiveList({list(self._directives)!r})"

    def __str__(self) -> str:
        return ",".join(str(directive) for directive in self._directives)
