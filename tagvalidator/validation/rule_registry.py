"""Rule registry.

Mutable mapping from directive name to rule function. Each ``Validator`` owns
one; instances derived with ``Validator.with_tag`` share it by reference and
``RuleRegistry.copy`` gives an independent mapping.
"""

from __future__ import annotations

import logging
import threading

from ..domain.exceptions import BadParameterError
from .rules import BUILTIN_RULES, RuleFunction

_LOGGER = logging.getLogger(__name__)


class RuleRegistry:
    """Named rule functions.

    Access to the mapping is guarded with a lock so registration from one
    thread never races with lookups from validations running in another.

    Example:
        >>> registry = RuleRegistry.with_builtins()
        >>> registry.register("even", lambda v, p: None if v % 2 == 0 else BadParameterError())
        >>> "even" in registry
        True
        >>> registry.unregister("even")
        >>> registry.lookup("even") is None
        True
    """

    def __init__(self, rules: dict[str, RuleFunction] | None = None) -> None:
        """Initialize registry.

        Args:
            rules: Initial rules (copied)
        """
        self._rules: dict[str, RuleFunction] = dict(rules or {})
        self._lock = threading.Lock()

    @classmethod
    def with_builtins(cls) -> RuleRegistry:
        """Create a registry seeded with the built-in rules."""
        return cls(BUILTIN_RULES)

    def register(self, name: str, func: RuleFunction | None) -> None:
        """Add, replace or remove a rule.

        Args:
            name: Directive name
            func: Rule function; None removes the rule

        Raises:
            BadParameterError: If name is empty
        """
        if not name:
            raise BadParameterError("name cannot be empty")

        with self._lock:
            if func is None:
                self._rules.pop(name, None)
                _LOGGER.debug("Removed rule '%s'", name)
                return
            self._rules[name] = func

        _LOGGER.debug("Registered rule '%s'", name)

    def unregister(self, name: str) -> None:
        """Remove a rule (same as registering None)."""
        self.register(name, None)

    def lookup(self, name: str) -> RuleFunction | None:
        """Return the rule registered under name, or None."""
        with self._lock:
            return self._rules.get(name)

    def names(self) -> list[str]:
        """Return registered rule names, sorted."""
        with self._lock:
            return sorted(self._rules)

    def copy(self) -> RuleRegistry:
        """Return an independent registry with the same rules."""
        with self._lock:
            return RuleRegistry(self._rules)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._rules

    def __len__(self) -> int:
        with self._lock:
            return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleRegistry({self.names()!r})"
