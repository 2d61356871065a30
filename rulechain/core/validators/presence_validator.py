"""
PresenceValidator - ensures a value is set and not empty.
"""

from typing import Any

from .base_validator import BaseValidator, is_empty


class Presence(BaseValidator):
    """
    Validates that a value is present and not empty. The opposite of Absence.

    Fails if:
    - Value is None (missing)
    - Value is an empty string or empty collection (empty)
    """

    error_codes = {
        "missing": "must be provided",
        "empty": "cannot be empty",
    }

    def run_validator(self, value: Any) -> bool:
        if value is None:
            self.set_error("missing")
            return False

        if is_empty(value):
            self.set_error("empty")
            return False

        return True
