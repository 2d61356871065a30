"""
Failure report collecting the validators that failed for one record.

Failures are stored in two buckets:

    {
        "attribute": {
            "username": [
                {"validator": "Presence", "error_code": "missing", "message": "must be provided"}
            ]
        },
        "model": [
            {
                "validator": "ValueMatch",
                "attributes": ["password", "password_confirm"],
                "error_code": "no_match",
                "message": "must be the same"
            }
        ]
    }

Validators bound to a single attribute are stored under that attribute name,
validators bound to several attributes are stored under "model".
"""

from collections.abc import Sequence
from types import MappingProxyType
from typing import Any, Mapping

from rulechain.core.models import AttributeFailure, ModelFailure
from rulechain.core.validators import ValidatorConfigError


class FailureReport:
    """
    Append-only (until cleared) sink for validation failures of one record.
    """

    def __init__(self):
        self._attribute_failures: dict[str, list[AttributeFailure]] = {}
        self._model_failures: list[ModelFailure] = []

    def add(
        self,
        attributes: Sequence[str],
        validator_name: str,
        message: str | None,
        error_code: str | None = None,
    ) -> None:
        """
        Record a validation failure.

        Args:
            attributes: Attributes the failed validator was run against (a bare
                        string names a single attribute)
            validator_name: Short name of the failed validator
            message: Rendered error message
            error_code: Specific error code of the failure

        Raises:
            ValidatorConfigError: If no attribute is given
        """
        if isinstance(attributes, str):
            attributes = [attributes]
        attributes = [str(attribute) for attribute in attributes]
        if not attributes:
            raise ValidatorConfigError(f"A {validator_name} failure needs at least one attribute")

        if len(attributes) > 1:
            self._model_failures.append(
                ModelFailure(
                    validator=validator_name,
                    attributes=attributes,
                    error_code=error_code,
                    message=message,
                )
            )
            return

        self._attribute_failures.setdefault(attributes[0], []).append(
            AttributeFailure(validator=validator_name, error_code=error_code, message=message)
        )

    def clear(self) -> None:
        self._attribute_failures = {}
        self._model_failures = []

    def to_dict(self) -> dict[str, Any]:
        """Return the recorded failures as plain, JSON-ready data."""
        result: dict[str, Any] = {}
        if self._attribute_failures:
            result["attribute"] = {
                attribute: [failure.model_dump() for failure in failures]
                for attribute, failures in self._attribute_failures.items()
            }
        if self._model_failures:
            result["model"] = [failure.model_dump() for failure in self._model_failures]
        return result

    def for_attribute(self, attribute: str) -> tuple[AttributeFailure, ...]:
        return tuple(self._attribute_failures.get(attribute, ()))

    def model_failures(self) -> tuple[ModelFailure, ...]:
        return tuple(self._model_failures)

    def attributes(self) -> list[str]:
        """Names of attributes with at least one failure, in first-failure order."""
        return list(self._attribute_failures)

    def error_codes(self, attribute: str) -> list[str | None]:
        return [failure.error_code for failure in self._attribute_failures.get(attribute, ())]

    def is_empty(self) -> bool:
        return not self._attribute_failures and not self._model_failures

    def __len__(self) -> int:
        return sum(len(failures) for failures in self._attribute_failures.values()) + len(
            self._model_failures
        )

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __repr__(self) -> str:
        return f"FailureReport({self.to_dict()!r})"

    # Defined last: the name shadows the builtin for annotations in this class body
    def list(self) -> Mapping[str, Any]:
        """
        Return a read-only snapshot of the recorded failures.

        Buckets only appear once they hold an entry, so an empty report lists as {}.
        """
        return MappingProxyType(self.to_dict())
