"""
Base validator interface for all validation rules.

All validators must inherit from BaseValidator and implement run_validator().
A validator checks one value (or, for multi-input validators, a fixed number of
values) and reports the reason for a failure through last_error and
last_error_code instead of raising.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar


class ValidatorConfigError(ValueError):
    """Raised when a validator, validation or chain is set up incorrectly."""


class BaseValidator(ABC):
    """
    Abstract base class for all validators.

    Class attributes:
        inputs: Number of values validate() expects (1 for simple validators)
        raw: Whether the validator reads the attribute before type coercion
        error_codes: Mapping of error code -> message template. Templates may
                     contain printf-style placeholders filled by set_error().

    Instance state last_error / last_error_code is reset on every validate()
    call and only ever describes the most recent failure.
    """

    inputs: ClassVar[int] = 1
    raw: ClassVar[bool] = False
    error_codes: ClassVar[dict[str, str]] = {}

    def __init__(self, params: dict[str, Any] | None = None):
        """
        Initialize validator.

        Args:
            params: Validator-specific parameters (e.g. {"length": ValueRange(...)}).
                    Validators that take parameters check them in their own
                    __init__ and raise ValidatorConfigError when malformed.
        """
        self.params = dict(params or {})
        self.last_error: str | None = None
        self.last_error_code: str | None = None

    @classmethod
    def validator_name(cls) -> str:
        """Short name used to reference this validator in the registry."""
        return cls.__name__

    def reset_last_error(self) -> None:
        self.last_error = None
        self.last_error_code = None

    def validate(self, *values: Any) -> bool:
        """
        Run the validator against the given value(s).

        Args:
            *values: Exactly `inputs` values to check

        Returns:
            True on success, False on failure (see last_error/last_error_code)

        Raises:
            ValidatorConfigError: If the wrong number of values is passed in
        """
        self.reset_last_error()

        if len(values) != self.inputs:
            raise ValidatorConfigError(
                f"This validator takes {self.inputs} value(s) for validation, {len(values)} given"
            )

        return bool(self.run_validator(*values))

    def set_error(self, code: str, *args: Any) -> None:
        """
        Record a failure, rendering the message template for the given code.

        Args:
            code: One of the codes declared in error_codes
            *args: Positional values for the message placeholders

        Raises:
            ValidatorConfigError: If the code is not declared for this validator
        """
        if code not in self.error_codes:
            raise ValidatorConfigError(
                f"Unknown error code {code} for validator {self.validator_name()}"
            )

        message = self.error_codes[code]
        if args:
            message = message % args

        self.last_error = message
        self.last_error_code = code

    @abstractmethod
    def run_validator(self, *values: Any) -> bool:
        """
        Validate the value(s). Must call set_error() before returning False.
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(params={self.params})"


def is_empty(value: Any) -> bool:
    """True for sized values of length zero ("", [], {}), False otherwise."""
    try:
        return len(value) == 0
    except TypeError:
        return False
