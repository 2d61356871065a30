"""
AbsenceValidator - ensures a value is not set (or empty).
"""

from typing import Any

from .base_validator import BaseValidator, is_empty


class Absence(BaseValidator):
    """
    Validates that a value is None or empty. The opposite of Presence.
    """

    error_codes = {
        "present": "must be absent",
    }

    def run_validator(self, value: Any) -> bool:
        if value is None or is_empty(value):
            return True

        self.set_error("present")
        return False
