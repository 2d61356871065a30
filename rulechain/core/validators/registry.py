"""
Validator registry mapping short names to validator classes.

The default registry is a static table populated at import time with the
built-in validators. Custom validators are added with register().
"""

from typing import Iterator

from .absence_validator import Absence
from .base_validator import BaseValidator, ValidatorConfigError
from .coercion_validator import BooleanCoercible, FloatCoercible, IntegerCoercible
from .exclusion_validator import Exclusion
from .format_validator import Format
from .inclusion_validator import Inclusion
from .length_validator import Length
from .presence_validator import Presence
from .value_match_validator import ValueMatch


class UnknownValidatorError(ValidatorConfigError):
    """Raised when a validator name is not found in the registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown validator: {name}")


class ValidatorRegistry:
    """
    Name -> validator class table.

    Names are derived from the class (BaseValidator.validator_name), so
    `Presence` is registered as "Presence".
    """

    def __init__(self, validators: list[type[BaseValidator]] | None = None):
        self._validators: dict[str, type[BaseValidator]] = {}
        for validator_class in validators or []:
            self.register(validator_class)

    def register(self, validator_class: type[BaseValidator]) -> type[BaseValidator]:
        """
        Add a validator class under its short name. Usable as a class decorator.

        Raises:
            ValidatorConfigError: If the class is not a BaseValidator, or a
                                  different class already uses the name
        """
        if not (isinstance(validator_class, type) and issubclass(validator_class, BaseValidator)):
            raise ValidatorConfigError(
                f"Only BaseValidator subclasses can be registered, {validator_class!r} given"
            )

        name = validator_class.validator_name()
        existing = self._validators.get(name)
        if existing is not None and existing is not validator_class:
            raise ValidatorConfigError(
                f"Validator name '{name}' is already registered to {existing.__module__}.{existing.__qualname__}"
            )

        self._validators[name] = validator_class
        return validator_class

    def resolve(self, name: str) -> type[BaseValidator] | None:
        """Return the validator class registered under name, or None."""
        if not isinstance(name, str):
            return None
        return self._validators.get(name)

    def get(self, name: str) -> type[BaseValidator]:
        """
        Return the validator class registered under name.

        Raises:
            UnknownValidatorError: If no validator is registered under name
        """
        validator_class = self.resolve(name)
        if validator_class is None:
            raise UnknownValidatorError(str(name))
        return validator_class

    def names(self) -> list[str]:
        return sorted(self._validators)

    def __contains__(self, name: object) -> bool:
        return name in self._validators

    def __iter__(self) -> Iterator[type[BaseValidator]]:
        return iter(self._validators.values())

    def __len__(self) -> int:
        return len(self._validators)


BUILTIN_VALIDATORS: list[type[BaseValidator]] = [
    Presence,
    Absence,
    Length,
    Format,
    Inclusion,
    Exclusion,
    ValueMatch,
    BooleanCoercible,
    IntegerCoercible,
    FloatCoercible,
]

default_registry = ValidatorRegistry(BUILTIN_VALIDATORS)


def register_validator(validator_class: type[BaseValidator]) -> type[BaseValidator]:
    """Register a custom validator in the default registry (class decorator)."""
    return default_registry.register(validator_class)
