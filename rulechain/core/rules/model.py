"""
ValidatedModel mixin giving a class its own validation chain and instances
their own failure report.
"""

from typing import Any

from rulechain.observability.logger import get_logger

from .failure_report import FailureReport
from .validation import Validation
from .validation_chain import ValidationChain

logger = get_logger(__name__)


class ValidatedModel:
    """
    Mixin for host classes that validate their own attributes.

    Each subclass owns one main ValidationChain, populated through the
    validate / chain / if_present / if_absent class methods. Instances keep
    a FailureReport and remember whether they were validated since the last
    reset_validated(), so repeated valid() calls don't re-run the chain.

    Attributes are read with getattr() unless read_attribute is overridden.

    Example:
        class User(ValidatedModel):
            def __init__(self, username=None, email=None):
                self.username = username
                self.email = email

        User.validate("Presence", "username")
        User.if_present("email", build=lambda c: c.validate("Format", "email", format="email"))

        User(username="batman").valid()  # True
    """

    @classmethod
    def validation_chain(cls) -> ValidationChain:
        """Return the main chain of this class (not shared with parent classes)."""
        chain = cls.__dict__.get("_validation_chain")
        if chain is None:
            chain = ValidationChain()
            cls._validation_chain = chain
        return chain

    @classmethod
    def attribute_chain(cls) -> ValidationChain:
        """
        Return the continue-on-failure chain for per-attribute validations.

        It is added to the main chain on first access, so every attribute
        reports its own failures independently.
        """
        chain = cls.__dict__.get("_attribute_chain")
        if chain is None:
            chain = cls.validation_chain().chain(continue_on_failure=True)
            cls._attribute_chain = chain
        return chain

    @classmethod
    def validate(cls, validator: str, *args: Any, **params: Any) -> Validation:
        return cls.validation_chain().validate(validator, *args, **params)

    @classmethod
    def chain(cls, **config: Any) -> ValidationChain:
        return cls.validation_chain().chain(**config)

    @classmethod
    def if_present(cls, *args: Any, **config: Any) -> ValidationChain:
        return cls.validation_chain().if_present(*args, **config)

    @classmethod
    def if_absent(cls, *args: Any, **config: Any) -> ValidationChain:
        return cls.validation_chain().if_absent(*args, **config)

    def read_attribute(self, name: str) -> Any:
        return getattr(self, name, None)

    def read_attribute_before_type_cast(self, name: str) -> Any:
        return self.read_attribute(name)

    @property
    def failed_validators(self) -> FailureReport:
        report = self.__dict__.get("_failed_validators")
        if report is None:
            report = FailureReport()
            self._failed_validators = report
        return report

    @property
    def validated(self) -> bool:
        """Whether validations ran since the data last changed."""
        return self.__dict__.get("_validated", False)

    def reset_validated(self) -> None:
        """Force the validations to run again on the next valid() call."""
        self._validated = False

    def valid(self) -> bool:
        """Run validations (unless already validated) and report whether there were no failures."""
        if not self.validated:
            self.run_validations()
        return self.failed_validators.is_empty()

    def run_validations(self) -> bool:
        """
        Clear the failure report and run the main chain of this class.

        Returns:
            The result of the chain run
        """
        self.failed_validators.clear()
        result = self.validation_chain().run(self)
        self._validated = True

        logger.debug(
            f"Validated {type(self).__name__}",
            extra={"model": type(self).__name__, "failures": len(self.failed_validators)},
        )
        return result
