"""
ChainCondition model representing a guard on a validation chain.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ChainCondition(BaseModel):
    """
    Guard that must hold for a chain's items to run.

    Attributes:
        kind: "presence" (attribute must be set) or "absence" (must be unset)
        attribute: Name of the attribute to check
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["presence", "absence"]
    attribute: str = Field(..., min_length=1)
