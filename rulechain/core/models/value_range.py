"""
ValueRange model representing an inclusive [min, max] interval.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class ValueRange(BaseModel):
    """
    Inclusive range of mutually comparable values (numbers, dates, strings).

    Used as the `length` parameter of the Length validator and as the
    `in` / `not_in` parameter of Inclusion and Exclusion.

    Attributes:
        min: Lower bound (inclusive)
        max: Upper bound (inclusive)
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={"example": {"min": 4, "max": 10}},
    )

    min: Any
    max: Any

    @model_validator(mode="after")
    def check_bounds(self) -> "ValueRange":
        """Validate that min does not exceed max."""
        try:
            inverted = self.min > self.max
        except TypeError as e:
            raise ValueError(f"Range bounds must be comparable: {e}")
        if inverted:
            raise ValueError(f"Range minimum {self.min!r} is greater than maximum {self.max!r}")
        return self

    @classmethod
    def from_range(cls, value: range) -> "ValueRange":
        """Build an inclusive range from a built-in range (4..10 is range(4, 11))."""
        if len(value) == 0:
            raise ValueError(f"Cannot build a ValueRange from empty {value!r}")
        return cls(min=min(value), max=max(value))

    def __contains__(self, value: Any) -> bool:
        try:
            return bool(self.min <= value <= self.max)
        except TypeError:
            return False

    def __str__(self) -> str:
        return f"{self.min}..{self.max}"
