"""Validator configuration."""

from .config_loader import VALIDATOR_CONFIG_SCHEMA, load_validator_config, validate_config

__all__ = [
    "VALIDATOR_CONFIG_SCHEMA",
    "load_validator_config",
    "validate_config",
]
