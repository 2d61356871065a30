"""
Coercion validators - check that raw (pre-type-cast) values can be coerced.
"""

from typing import Any

from .base_validator import BaseValidator


class BooleanCoercible(BaseValidator):
    """
    Validates that a raw value can be reliably coerced into a boolean.

    Accepted (case-insensitive): true, false, 1, 0
    """

    raw = True

    BOOLEAN_LITERALS = frozenset({"true", "false", "0", "1"})

    error_codes = {
        "not_boolean": "must be one of: true, false, 1, 0",
    }

    def run_validator(self, value: Any) -> bool:
        if value is None:
            return True

        if str(value).lower() in self.BOOLEAN_LITERALS:
            return True

        self.set_error("not_boolean")
        return False


class IntegerCoercible(BaseValidator):
    """
    Validates that a raw value can be coerced into an integer with int().
    """

    raw = True

    error_codes = {
        "not_integer": "must be an integer",
    }

    def run_validator(self, value: Any) -> bool:
        if value is None:
            return True

        try:
            int(value)
        except (ValueError, TypeError, OverflowError):
            self.set_error("not_integer")
            return False
        return True


class FloatCoercible(BaseValidator):
    """
    Validates that a raw value can be coerced into a float with float().
    """

    raw = True

    error_codes = {
        "not_float": "must be a float",
    }

    def run_validator(self, value: Any) -> bool:
        if value is None:
            return True

        try:
            float(value)
        except (ValueError, TypeError, OverflowError):
            self.set_error("not_float")
            return False
        return True
