"""Domain services."""

from .tag_parser import TAG_PATTERN, format_tags, parse_tags

__all__ = ["TAG_PATTERN", "parse_tags", "format_tags"]
