"""
ExclusionValidator - validates a value is not a member of a set or range.
"""

from typing import Any

from .base_validator import BaseValidator
from .inclusion_validator import collection_param, contains, is_range, joined, range_bounds


class Exclusion(BaseValidator):
    """
    Validates that a value is not included in a pre-defined set or range.
    The opposite of Inclusion.

    Parameters:
    - not_in: Any collection supporting `in`, a ValueRange or a built-in range
    """

    error_codes = {
        "in_range": "must not be between %s and %s",
        "in_set": "must not be any of: %s",
    }

    def __init__(self, params: dict[str, Any] | None = None):
        super().__init__(params)
        self.collection = collection_param(self.params, "not_in", "Exclusion")

    def run_validator(self, value: Any) -> bool:
        if value is None:
            return True

        if not contains(self.collection, value):
            return True

        if is_range(self.collection):
            self.set_error("in_range", *range_bounds(self.collection))
        else:
            self.set_error("in_set", joined(self.collection))
        return False
