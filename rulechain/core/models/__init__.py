"""
Core data models for the rule validation engine.

All models use Pydantic for runtime validation and type safety.
"""

from .chain_condition import ChainCondition
from .failure_entry import AttributeFailure, ModelFailure
from .value_range import ValueRange

__all__ = [
    "AttributeFailure",
    "ModelFailure",
    "ChainCondition",
    "ValueRange",
]
