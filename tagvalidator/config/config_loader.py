"""Configuration loader for validator settings."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import voluptuous as vol
import yaml

from ..const import DEFAULT_TAG_NAME
from ..domain.exceptions import ConfigurationError

_LOGGER = logging.getLogger(__name__)

VALIDATOR_CONFIG_SCHEMA = vol.Schema(
    {
        vol.Optional("tag_name", default=DEFAULT_TAG_NAME): vol.All(
            str, vol.Length(min=1)
        ),
        vol.Optional("disabled_rules", default=list): [vol.All(str, vol.Length(min=1))],
    }
)


def validate_config(data: dict[str, Any] | None) -> dict[str, Any]:
    """Validate an in-memory configuration mapping.

    Args:
        data: Raw configuration (None means all defaults)

    Returns:
        Configuration with defaults applied

    Raises:
        ConfigurationError: If configuration is invalid
    """
    try:
        return VALIDATOR_CONFIG_SCHEMA(data or {})
    except vol.Invalid as err:
        raise ConfigurationError(f"Invalid validator configuration: {err}") from err


def load_validator_config(path: str | Path) -> dict[str, Any]:
    """Load and validate validator configuration from YAML.

    Example file::

        tag_name: check
        disabled_rules:
          - regexp

    Args:
        path: YAML file path

    Returns:
        Validated configuration dict

    Raises:
        FileNotFoundError: If configuration file not found
        ConfigurationError: If YAML or configuration is invalid
    """
    config_file = Path(path)
    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_file}")

    try:
        data = yaml.safe_load(config_file.read_text(encoding="utf-8"))
    except yaml.YAMLError as err:
        raise ConfigurationError(f"Invalid YAML: {err}") from err

    if not data:
        raise ConfigurationError("Configuration file is empty")
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration must be a mapping")

    config = validate_config(data)

    _LOGGER.debug(
        "Loaded validator configuration from %s: tag '%s', %d disabled rules",
        config_file,
        config["tag_name"],
        len(config["disabled_rules"]),
    )
    return config
