"""
InclusionValidator - validates a value is a member of a set or range.
"""

from typing import Any

from rulechain.core.models import ValueRange

from .base_validator import BaseValidator, ValidatorConfigError


def collection_param(params: dict[str, Any], key: str, validator_name: str) -> Any:
    """
    Fetch and check a set-or-range parameter.

    Built-in ranges are kept as they are for membership, since range(0, 11)
    only contains integers.

    Raises:
        ValidatorConfigError: If the parameter is missing or does not support `in`
    """
    if key not in params:
        raise ValidatorConfigError(f"Missing '{key}' parameter for {validator_name} validator")

    collection = params[key]
    if not hasattr(collection, "__contains__"):
        raise ValidatorConfigError(
            f"The '{key}' parameter must be provided as a collection or range, "
            f"{type(collection).__name__} given"
        )
    if isinstance(collection, range) and len(collection) == 0:
        raise ValidatorConfigError(
            f"The '{key}' parameter for {validator_name} validator cannot be an empty {collection!r}"
        )
    return collection


def is_range(collection: Any) -> bool:
    return isinstance(collection, (range, ValueRange))


def range_bounds(collection: range | ValueRange) -> tuple[Any, Any]:
    if isinstance(collection, range):
        return min(collection), max(collection)
    return collection.min, collection.max


def contains(collection: Any, value: Any) -> bool:
    try:
        return value in collection
    except TypeError:
        # e.g. an int tested against a string, or an unhashable value against a set
        return False


def joined(collection: Any) -> str:
    return ", ".join(str(item) for item in collection)


class Inclusion(BaseValidator):
    """
    Validates that a value is included in a pre-defined set or range.
    The opposite of Exclusion.

    Parameters:
    - in: Any collection supporting `in`, a ValueRange or a built-in range
    """

    error_codes = {
        "not_in_range": "must be between %s and %s",
        "not_in_set": "must be one of: %s",
    }

    def __init__(self, params: dict[str, Any] | None = None):
        super().__init__(params)
        self.collection = collection_param(self.params, "in", "Inclusion")

    def run_validator(self, value: Any) -> bool:
        if value is None:
            return True

        if contains(self.collection, value):
            return True

        if is_range(self.collection):
            self.set_error("not_in_range", *range_bounds(self.collection))
        else:
            self.set_error("not_in_set", joined(self.collection))
        return False
