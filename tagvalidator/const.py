"""Constants for the tagvalidator package."""

from __future__ import annotations

# Field annotation lookup
DEFAULT_TAG_NAME = "validate"
SKIP_FIELD = "-"

# Reserved directive shapes
TAG_ATTR = "attr"
MSG_PREFIX = "msg_"
PARAM_PLACEHOLDER = "{param}"

# Error map key used when the input is not a record at all
SUMMARY_KEY = "_summary"

# Separator between parent alias and nested field key
NESTED_SEPARATOR = "."
