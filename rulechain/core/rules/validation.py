"""
Validation binding one validator to one or more attributes of a record.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from rulechain.core.validators import (
    BaseValidator,
    ValidatorConfigError,
    ValidatorRegistry,
    default_registry,
)
from rulechain.observability.logger import get_logger

from .record import ValidatableRecord

logger = get_logger(__name__)


class ChainNode(ABC):
    """
    Anything that can be placed in a ValidationChain: a Validation or
    another ValidationChain.
    """

    @abstractmethod
    def run(self, record: ValidatableRecord) -> bool:
        """
        Validate the record, recording failures in record.failed_validators.

        Returns:
            True on success, False on failure
        """
        pass


def split_params(args: tuple[Any, ...], params: dict[str, Any]) -> tuple[list[Any], dict[str, Any]]:
    """
    Separate positional names from parameters.

    A trailing mapping in args is merged into params, which allows parameter
    names that are Python keywords:

        split_params(("status", {"in": ["draft", "live"]}), {})
        # => ["status"], {"in": ["draft", "live"]}
    """
    names = list(args)
    merged: dict[str, Any] = {}
    if names and isinstance(names[-1], Mapping):
        merged.update(names.pop())
    merged.update(params)
    return names, merged


class Validation(ChainNode):
    """
    Runs one validator against one or more attributes of a record.

    Validations normally form part of a ValidationChain, but can also be
    used on their own. They are immutable once constructed.

    Example:
        Validation("Length", "title", length=range(1, 51))
        Validation("ValueMatch", "password", "password_confirm")
        Validation("Inclusion", "status", {"in": ["draft", "live"]})
    """

    def __init__(self, validator: str, *args: Any, registry: ValidatorRegistry | None = None, **params: Any):
        """
        Args:
            validator: Registered name of the validator to use
            *args: Attribute names, optionally followed by a parameter mapping
            registry: Registry to resolve the validator name in (default registry if None)
            **params: Parameters passed to the validator

        Raises:
            ValidatorConfigError: If the validator name or an attribute name is not a
                                  string, the number of attributes does not match
                                  the validator's inputs, or the parameters are invalid
            UnknownValidatorError: If the validator name is not registered
        """
        if not isinstance(validator, str):
            raise ValidatorConfigError(
                f"Validator name should be provided as a string, {type(validator).__name__} given"
            )

        self._validator_class = (registry if registry is not None else default_registry).get(validator)
        self._validator_name = str(validator)

        attributes, merged_params = split_params(args, params)
        for attribute in attributes:
            if not isinstance(attribute, str):
                raise ValidatorConfigError(
                    f"Attribute name has to be a string, {type(attribute).__name__} given"
                )

        if len(attributes) != self._validator_class.inputs:
            raise ValidatorConfigError(
                f"{self._validator_name} validator takes {self._validator_class.inputs} "
                f"attribute(s), {len(attributes)} given"
            )

        self._attributes = tuple(str(attribute) for attribute in attributes)
        self._params = merged_params

        # Fail on bad parameters now rather than on first run
        self._validator_class(self._params)

    @property
    def validator_name(self) -> str:
        return self._validator_name

    @property
    def validator_class(self) -> type[BaseValidator]:
        return self._validator_class

    @property
    def attributes(self) -> tuple[str, ...]:
        return self._attributes

    @property
    def params(self) -> Mapping[str, Any]:
        return MappingProxyType(self._params)

    def run(self, record: ValidatableRecord) -> bool:
        """
        Read the attribute value(s) and pass them to a fresh validator instance.

        Raw validators read through read_attribute_before_type_cast. On failure
        one entry is added to record.failed_validators.

        Returns:
            True on success, False on failure
        """
        if self._validator_class.raw:
            read = record.read_attribute_before_type_cast
        else:
            read = record.read_attribute

        values = [read(attribute) for attribute in self._attributes]

        validator = self._validator_class(self._params)
        if validator.validate(*values):
            return True

        record.failed_validators.add(
            self._attributes,
            self._validator_name,
            validator.last_error,
            validator.last_error_code,
        )
        logger.debug(
            f"Validation failed: {self._validator_name} on {', '.join(self._attributes)}",
            extra={
                "validator": self._validator_name,
                "attributes": list(self._attributes),
                "error_code": validator.last_error_code,
            },
        )
        return False

    def __repr__(self) -> str:
        return f"Validation({self._validator_name!r}, attributes={list(self._attributes)}, params={self._params})"
