"""
Pytest configuration and fixtures for rulechain tests

This module provides shared fixtures for unit and integration tests.
"""
from pathlib import Path
from typing import Any, Callable

import pytest

from rulechain.core.rules import DictRecord


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't require external services"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that exercise several components or the CLI end to end"
    )


# =======================
# RECORD FIXTURES
# =======================

@pytest.fixture
def make_record() -> Callable[..., DictRecord]:
    """
    Factory for dict-backed records

    Returns:
        Callable taking typed attributes and optional raw attributes
    """
    def _make(attributes: dict[str, Any] | None = None, raw: dict[str, Any] | None = None) -> DictRecord:
        return DictRecord(attributes or {}, raw_attributes=raw)

    return _make


# =======================
# CONFIGURATION FIXTURES
# =======================

SIGNUP_RULES_YAML = """
chain:
  continue_on_failure: true
  items:
    - chain:
        items:
          - validate: Presence
            attributes: [username]
          - validate: Length
            attributes: username
            params:
              length: {min: 4, max: 10}
          - validate: Format
            attributes: username
            params:
              format: alnum
    - validate: ValueMatch
      attributes: [password, password_confirm]
    - chain:
        if_present: email
        items:
          - validate: Format
            attributes: [email]
            params:
              format: email
    - validate: Inclusion
      attributes: [role]
      params:
        in: [admin, editor, viewer]
    - validate: IntegerCoercible
      attributes: [age]
"""


@pytest.fixture
def signup_rules_file(tmp_path) -> Path:
    """
    Write the sign-up chain configuration to a temporary YAML file

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Path to the YAML file
    """
    path = tmp_path / "signup_rules.yaml"
    path.write_text(SIGNUP_RULES_YAML)
    return path
