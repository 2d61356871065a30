"""
Validator implementations and the registry that maps names to them.

Provides validators for presence/absence, length, formats, set/range
membership, value matching and raw type coercibility.
"""

from .absence_validator import Absence
from .base_validator import BaseValidator, ValidatorConfigError
from .coercion_validator import BooleanCoercible, FloatCoercible, IntegerCoercible
from .exclusion_validator import Exclusion
from .format_validator import Format
from .inclusion_validator import Inclusion
from .length_validator import Length
from .presence_validator import Presence
from .registry import (
    BUILTIN_VALIDATORS,
    UnknownValidatorError,
    ValidatorRegistry,
    default_registry,
    register_validator,
)
from .value_match_validator import ValueMatch

__all__ = [
    "BaseValidator",
    "ValidatorConfigError",
    "UnknownValidatorError",
    "ValidatorRegistry",
    "default_registry",
    "register_validator",
    "BUILTIN_VALIDATORS",
    "Presence",
    "Absence",
    "Length",
    "Format",
    "Inclusion",
    "Exclusion",
    "ValueMatch",
    "BooleanCoercible",
    "IntegerCoercible",
    "FloatCoercible",
]
