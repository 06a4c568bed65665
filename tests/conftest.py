"""Pytest configuration and fixtures for tagvalidator tests."""

from __future__ import annotations

import sys
from pathlib import Path

# Add parent directory to Python path so we can import tagvalidator
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from tagvalidator import reset_default_validator
from tagvalidator.validation import RuleRegistry, Validator


@pytest.fixture(autouse=True)
def fresh_default_validator():
    """Give every test its own process-wide default validator."""
    reset_default_validator()
    yield
    reset_default_validator()


@pytest.fixture
def validator() -> Validator:
    """Return a validator with the built-in rules and default tag name."""
    return Validator()


@pytest.fixture
def registry() -> RuleRegistry:
    """Return a registry seeded with the built-in rules."""
    return RuleRegistry.with_builtins()


@pytest.fixture
def validator_config_yaml(tmp_path: Path) -> Path:
    """Write a valid validator configuration file."""
    config_file = tmp_path / "validator.yaml"
    config_file.write_text(
        "tag_name: check\n"
        "disabled_rules:\n"
        "  - regexp\n"
        "  - type\n",
        encoding="utf-8",
    )
    return config_file
