"""
ValueMatchValidator - complex validator checking that two values are equal.
"""

from typing import Any

from .base_validator import BaseValidator


class ValueMatch(BaseValidator):
    """
    Validates that two values match (e.g. password and password confirmation).

    Takes two inputs, so a Validation using it must be bound to two attributes
    and its failures are recorded model-wide.
    """

    inputs = 2

    error_codes = {
        "no_match": "must be the same",
    }

    def run_validator(self, value1: Any, value2: Any) -> bool:
        if value1 is None and value2 is None:
            return True

        if value1 == value2:
            return True

        self.set_error("no_match")
        return False
