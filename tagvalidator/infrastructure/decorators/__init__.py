"""Infrastructure layer decorators."""

from .error_handler import handle_rule_errors

__all__ = [
    "handle_rule_errors",
]
