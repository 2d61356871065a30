"""
Unit tests for Validation.
"""

import pytest

from rulechain.core.models import ValueRange
from rulechain.core.rules import Validation
from rulechain.core.rules.validation import split_params
from rulechain.core.validators import (
    BaseValidator,
    Length,
    UnknownValidatorError,
    ValidatorConfigError,
    ValidatorRegistry,
)


class TestSplitParams:
    """Tests for separating attribute names from parameters"""

    def test_no_mapping(self):
        """Test names pass through when no mapping is given"""
        assert split_params(("a", "b"), {"x": 1}) == (["a", "b"], {"x": 1})

    def test_trailing_mapping_is_merged(self):
        """Test a trailing mapping becomes parameters"""
        names, params = split_params(("status", {"in": ["draft", "live"]}), {"extra": True})
        assert names == ["status"]
        assert params == {"in": ["draft", "live"], "extra": True}

    def test_keyword_params_win(self):
        """Test keyword parameters override the mapping"""
        _, params = split_params(("a", {"x": 1}), {"x": 2})
        assert params == {"x": 2}


class TestValidationConstruction:
    """Tests for Validation construction errors"""

    def test_valid_construction(self):
        """Test creating a valid Validation"""
        validation = Validation("Length", "title", length=range(1, 51))

        assert validation.validator_name == "Length"
        assert validation.validator_class is Length
        assert validation.attributes == ("title",)
        assert validation.params["length"] == range(1, 51)

    def test_params_are_read_only(self):
        """Test params cannot be modified after construction"""
        validation = Validation("Length", "title", length=range(1, 51))
        with pytest.raises(TypeError):
            validation.params["length"] = range(1, 3)

    def test_params_as_trailing_mapping(self):
        """Test keyword-named params passed as a mapping"""
        validation = Validation("Inclusion", "status", {"in": ["draft", "live"]})
        assert validation.params == {"in": ["draft", "live"]}

    def test_non_string_validator_name(self):
        """Test the validator must be named by a string"""
        with pytest.raises(ValidatorConfigError) as exc_info:
            Validation(Length, "title")
        assert str(exc_info.value) == "Validator name should be provided as a string, ABCMeta given"

    def test_unknown_validator(self):
        """Test an unknown validator name raises UnknownValidatorError"""
        with pytest.raises(UnknownValidatorError) as exc_info:
            Validation("Banana", "title")
        assert str(exc_info.value) == "Unknown validator: Banana"

    def test_non_string_attribute(self):
        """Test attribute names must be strings"""
        with pytest.raises(ValidatorConfigError) as exc_info:
            Validation("Presence", 12)
        assert str(exc_info.value) == "Attribute name has to be a string, int given"

    def test_too_many_attributes(self):
        """Test more attributes than the validator takes"""
        with pytest.raises(ValidatorConfigError) as exc_info:
            Validation("Presence", "title", "body")
        assert str(exc_info.value) == "Presence validator takes 1 attribute(s), 2 given"

    def test_too_few_attributes(self):
        """Test fewer attributes than the validator takes"""
        with pytest.raises(ValidatorConfigError) as exc_info:
            Validation("ValueMatch", "password")
        assert str(exc_info.value) == "ValueMatch validator takes 2 attribute(s), 1 given"

    def test_invalid_params_fail_at_construction(self):
        """Test bad validator params fail immediately"""
        with pytest.raises(ValidatorConfigError):
            Validation("Length", "title")

        with pytest.raises(ValidatorConfigError):
            Validation("Format", "title", format="magic")

    def test_custom_registry(self):
        """Test names resolve in the given registry only"""
        class Shouting(BaseValidator):
            error_codes = {"quiet": "must be upper case"}

            def run_validator(self, value):
                if value is None or value.isupper():
                    return True
                self.set_error("quiet")
                return False

        registry = ValidatorRegistry([Shouting])

        assert Validation("Shouting", "title", registry=registry).validator_class is Shouting
        with pytest.raises(UnknownValidatorError):
            Validation("Presence", "title", registry=registry)


class TestValidationRun:
    """Tests for running a Validation against a record"""

    def test_success_records_nothing(self, make_record):
        """Test a passing validation leaves the report empty"""
        record = make_record({"title": "Hello"})

        assert Validation("Presence", "title").run(record) is True
        assert record.failed_validators.is_empty()

    def test_failure_adds_attribute_entry(self, make_record):
        """Test a failure is recorded under its attribute"""
        record = make_record({"title": ""})

        assert Validation("Presence", "title").run(record) is False
        assert dict(record.failed_validators.list()) == {
            "attribute": {
                "title": [{"validator": "Presence", "error_code": "empty", "message": "cannot be empty"}]
            }
        }

    def test_missing_attribute_reads_none(self, make_record):
        """Test a missing attribute is validated as None"""
        record = make_record({})

        assert Validation("Presence", "title").run(record) is False
        assert record.failed_validators.error_codes("title") == ["missing"]

    def test_multi_attribute_failure_adds_model_entry(self, make_record):
        """Test a multi-attribute failure is recorded under 'model'"""
        record = make_record({"password": "secret", "password_confirm": "sekret"})

        assert Validation("ValueMatch", "password", "password_confirm").run(record) is False
        assert dict(record.failed_validators.list()) == {
            "model": [
                {
                    "validator": "ValueMatch",
                    "attributes": ["password", "password_confirm"],
                    "error_code": "no_match",
                    "message": "must be the same",
                }
            ]
        }

    def test_raw_validator_reads_before_type_cast(self, make_record):
        """Test raw validators read the pre-coercion value"""
        record = make_record({"age": 0}, raw={"age": "forty"})

        assert Validation("IntegerCoercible", "age").run(record) is False
        assert record.failed_validators.error_codes("age") == ["not_integer"]

    def test_unconvertible_raw_number_is_recorded(self, make_record):
        """Test a raw value too large for float is reported, not raised"""
        record = make_record({"amount": 1.0}, raw={"amount": 10 ** 400})

        assert Validation("FloatCoercible", "amount").run(record) is False
        assert record.failed_validators.error_codes("amount") == ["not_float"]

    def test_typed_validator_reads_cast_value(self, make_record):
        """Test other validators read the typed value"""
        record = make_record({"age": 42}, raw={"age": "forty-two"})

        assert Validation("Inclusion", "age", {"in": ValueRange(min=18, max=99)}).run(record) is True

    def test_repeated_runs_are_independent(self, make_record):
        """Test one Validation can run against many records"""
        validation = Validation("Length", "title", length=range(3, 6))
        short = make_record({"title": "hi"})
        ok = make_record({"title": "hello"})

        assert validation.run(short) is False
        assert validation.run(ok) is True
        assert ok.failed_validators.is_empty()
        assert short.failed_validators.error_codes("title") == ["short"]
