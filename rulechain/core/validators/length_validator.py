"""
LengthValidator - validates the length of a value is within a range.
"""

from typing import Any

from rulechain.core.models import ValueRange

from .base_validator import BaseValidator, ValidatorConfigError


class Length(BaseValidator):
    """
    Validates that len(value) falls within an inclusive range.

    Parameters:
    - length: ValueRange or built-in range (range(4, 11) means 4..10)

    Values without a length (numbers, booleans) always pass.
    """

    error_codes = {
        "short": "has to be longer than %d characters",
        "long": "has to be %d characters or less",
    }

    def __init__(self, params: dict[str, Any] | None = None):
        super().__init__(params)

        if "length" not in self.params:
            raise ValidatorConfigError("Missing 'length' parameter for Length validator")

        length = self.params["length"]
        if isinstance(length, range):
            try:
                length = ValueRange.from_range(length)
            except ValueError as e:
                raise ValidatorConfigError(f"Invalid 'length' parameter: {e}")
        elif not isinstance(length, ValueRange):
            raise ValidatorConfigError(
                f"The 'length' parameter has to be provided as a range, {type(length).__name__} given"
            )

        self.length_range = length

    def run_validator(self, value: Any) -> bool:
        if value is None:
            return True

        try:
            size = len(value)
        except TypeError:
            return True

        if size < self.length_range.min:
            self.set_error("short", self.length_range.min)
            return False

        if size > self.length_range.max:
            self.set_error("long", self.length_range.max)
            return False

        return True
