"""
Host record boundary: what the engine needs from the objects it validates.
"""

from typing import Any, Mapping, Protocol, runtime_checkable

from .failure_report import FailureReport


@runtime_checkable
class ValidatableRecord(Protocol):
    """
    Capabilities a host record must supply to be validated.

    - read_attribute: typed/coerced value, used by most validators
    - read_attribute_before_type_cast: raw value, used by "coercible" validators
    - failed_validators: the record's FailureReport, created lazily
    """

    def read_attribute(self, name: str) -> Any: ...

    def read_attribute_before_type_cast(self, name: str) -> Any: ...

    @property
    def failed_validators(self) -> FailureReport: ...


class DictRecord:
    """
    Mapping-backed record.

    Missing attributes read as None. Raw reads come from raw_attributes when
    provided, otherwise from the typed attributes.

    Example:
        record = DictRecord({"age": 42}, raw_attributes={"age": "42"})
    """

    def __init__(
        self,
        attributes: Mapping[str, Any] | None = None,
        raw_attributes: Mapping[str, Any] | None = None,
    ):
        self.attributes = dict(attributes or {})
        self.raw_attributes = dict(raw_attributes) if raw_attributes is not None else None
        self._failed_validators: FailureReport | None = None

    def read_attribute(self, name: str) -> Any:
        return self.attributes.get(name)

    def read_attribute_before_type_cast(self, name: str) -> Any:
        if self.raw_attributes is None:
            return self.read_attribute(name)
        return self.raw_attributes.get(name)

    @property
    def failed_validators(self) -> FailureReport:
        if self._failed_validators is None:
            self._failed_validators = FailureReport()
        return self._failed_validators

    def __repr__(self) -> str:
        return f"DictRecord({self.attributes!r})"
