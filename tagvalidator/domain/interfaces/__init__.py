"""Domain interfaces."""

from .i_optional import IOptional

__all__ = ["IOptional"]
