"""
Validation chains: ordered, optionally guarded trees of validations.

A chain runs its items (Validation and ValidationChain instances) in order
against a record, stopping at the first failing item unless
continue_on_failure is set. A chain may carry conditions (if_present /
if_absent); when any condition does not hold, the chain's items are skipped
and run() returns True without recording anything.
"""

from collections.abc import Callable, Iterable, Iterator
from typing import Any

from rulechain.core.models import ChainCondition
from rulechain.core.validators import (
    Absence,
    BaseValidator,
    Presence,
    ValidatorConfigError,
    ValidatorRegistry,
    default_registry,
)
from rulechain.observability.logger import get_logger

from .record import ValidatableRecord
from .validation import ChainNode, Validation, split_params

logger = get_logger(__name__)

ChainBuilder = Callable[["ValidationChain"], Any]

CONDITION_VALIDATORS: dict[str, type[BaseValidator]] = {
    "presence": Presence,
    "absence": Absence,
}


def _as_attribute_list(value: str | Iterable[str] | None) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


class ValidationChain(ChainNode):
    """
    Ordered list of Validation / ValidationChain items with a failure policy
    and optional guard conditions.

    Example:
        def build(chain):
            chain.validate("Presence", "title")
            chain.validate("Length", "title", length=range(1, 51))
            chain.if_present("email", build=lambda c: c.validate("Format", "email", format="email"))

        chain = ValidationChain(continue_on_failure=True, build=build)
        chain.run(record)

    Conflicting conditions (if_present and if_absent on the same attribute)
    are accepted as given; such a chain simply never runs its items.
    """

    def __init__(
        self,
        continue_on_failure: bool = False,
        if_present: str | Iterable[str] | None = None,
        if_absent: str | Iterable[str] | None = None,
        build: ChainBuilder | None = None,
        registry: ValidatorRegistry | None = None,
    ):
        """
        Args:
            continue_on_failure: Keep running items after one fails
            if_present: Attribute(s) that must pass Presence for the chain to run
            if_absent: Attribute(s) that must pass Absence for the chain to run
            build: Callable receiving the new chain, used to add items to it
            registry: Registry used to resolve validator names in validate()

        Raises:
            ValidatorConfigError: If a condition attribute is not a string
        """
        self._continue_on_failure = bool(continue_on_failure)
        self._registry = registry if registry is not None else default_registry
        self._items: list[ChainNode] = []
        self._conditions: list[ChainCondition] = []

        for kind, attributes in (("presence", if_present), ("absence", if_absent)):
            for attribute in _as_attribute_list(attributes):
                if not isinstance(attribute, str):
                    raise ValidatorConfigError(
                        f"Condition attribute has to be a string, {type(attribute).__name__} given"
                    )
                self._conditions.append(ChainCondition(kind=kind, attribute=attribute))

        if build is not None:
            build(self)

    @property
    def continue_on_failure(self) -> bool:
        return self._continue_on_failure

    @property
    def items(self) -> tuple[ChainNode, ...]:
        return tuple(self._items)

    @property
    def conditions(self) -> tuple[ChainCondition, ...]:
        return tuple(self._conditions)

    def validate(self, validator: str, *args: Any, **params: Any) -> Validation:
        """
        Add a new Validation to this chain.

        Example:
            chain.validate("Length", "name", length=range(1, 11))

        Returns:
            The Validation that was added
        """
        return self.add(Validation(validator, *args, registry=self._registry, **params))

    def chain(
        self,
        continue_on_failure: bool = False,
        if_present: str | Iterable[str] | None = None,
        if_absent: str | Iterable[str] | None = None,
        build: ChainBuilder | None = None,
    ) -> "ValidationChain":
        """
        Add a new nested ValidationChain to this chain.

        Takes the same arguments as the constructor; the nested chain shares
        this chain's registry.

        Returns:
            The ValidationChain that was added
        """
        return self.add(
            ValidationChain(
                continue_on_failure=continue_on_failure,
                if_present=if_present,
                if_absent=if_absent,
                build=build,
                registry=self._registry,
            )
        )

    def if_present(self, *args: Any, build: ChainBuilder | None = None, **config: Any) -> "ValidationChain":
        """Add a nested chain that only runs when all given attributes are present."""
        attributes, config = split_params(args, config)
        return self.chain(if_present=attributes, build=build, **config)

    def if_absent(self, *args: Any, build: ChainBuilder | None = None, **config: Any) -> "ValidationChain":
        """Add a nested chain that only runs when all given attributes are absent."""
        attributes, config = split_params(args, config)
        return self.chain(if_absent=attributes, build=build, **config)

    def add(self, *items: Any) -> Any:
        """
        Add one or more items to the chain.

        Returns:
            The last item added (None if no items were given)

        Raises:
            ValidatorConfigError: If an item is neither a Validation nor a ValidationChain
        """
        for item in items:
            if not isinstance(item, ChainNode):
                raise ValidatorConfigError(
                    "Validator chain item has to be a Validation or another ValidationChain, "
                    f"{type(item).__name__} given"
                )

        self._items.extend(items)
        return items[-1] if items else None

    def applies_to(self, record: ValidatableRecord) -> bool:
        """
        Test the chain conditions against a record.

        Returns:
            True if all conditions hold or none are defined, False otherwise
        """
        for condition in self._conditions:
            validator = CONDITION_VALIDATORS[condition.kind]()
            if not validator.validate(record.read_attribute(condition.attribute)):
                return False
        return True

    def run(self, record: ValidatableRecord) -> bool:
        """
        Execute the chain against a record.

        Returns:
            True if the chain conditions weren't met, or if all the executed
            items returned True. False otherwise.
        """
        if not self.applies_to(record):
            logger.debug(
                "Chain conditions not met, skipping items",
                extra={"conditions": [c.model_dump() for c in self._conditions]},
            )
            return True

        success = True
        for item in self._items:
            item_success = item.run(record)
            success = success and item_success
            if not (self._continue_on_failure or success):
                break

        return success

    def walk(self, depth: int = 0) -> Iterator[tuple[int, ChainNode]]:
        """Yield (depth, node) for every item below this chain, depth-first in run order."""
        for item in self._items:
            yield depth + 1, item
            if isinstance(item, ValidationChain):
                yield from item.walk(depth + 1)

    def get_summary(self) -> dict[str, Any]:
        """
        Get summary of the chain tree.

        Returns:
            Dictionary with validation/chain counts, validations by validator
            name and the nesting depth
        """
        by_validator: dict[str, int] = {}
        total_chains = 0
        max_depth = 0

        for depth, node in self.walk():
            max_depth = max(max_depth, depth)
            if isinstance(node, Validation):
                by_validator[node.validator_name] = by_validator.get(node.validator_name, 0) + 1
            else:
                total_chains += 1

        return {
            "total_validations": sum(by_validator.values()),
            "total_chains": total_chains,
            "validations_by_validator": by_validator,
            "max_depth": max_depth,
            "conditions": len(self._conditions),
            "continue_on_failure": self._continue_on_failure,
        }

    def __repr__(self) -> str:
        return (
            f"ValidationChain(continue_on_failure={self._continue_on_failure}, "
            f"conditions={[(c.kind, c.attribute) for c in self._conditions]}, items={len(self._items)})"
        )
