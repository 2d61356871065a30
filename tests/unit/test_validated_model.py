"""
Unit tests for the record boundary: DictRecord and the ValidatedModel mixin.
"""

from rulechain.core.rules import (
    DictRecord,
    FailureReport,
    ValidatableRecord,
    ValidatedModel,
    ValidationChain,
)


class User(ValidatedModel):
    def __init__(self, username=None, email=None, age=None):
        self.username = username
        self.email = email
        self.age = age


User.validate("Presence", "username")
User.if_present("email", build=lambda c: c.validate("Format", "email", format="email"))


class Admin(User):
    pass


Admin.validate("Inclusion", "username", {"in": ["root", "admin"]})


class Account(ValidatedModel):
    """Keeps raw form input next to the typed attributes."""

    def __init__(self, balance=None, raw=None):
        self.balance = balance
        self._raw = raw or {}

    def read_attribute_before_type_cast(self, name):
        return self._raw.get(name, self.read_attribute(name))


Account.attribute_chain().validate("Presence", "balance")
Account.attribute_chain().validate("FloatCoercible", "balance")


class TestDictRecord:
    """Tests for DictRecord"""

    def test_is_validatable_record(self):
        """Test DictRecord satisfies the record protocol"""
        assert isinstance(DictRecord(), ValidatableRecord)

    def test_missing_attribute_reads_none(self):
        """Test missing attributes read as None"""
        assert DictRecord({"a": 1}).read_attribute("b") is None

    def test_raw_reads_fall_back_to_attributes(self):
        """Test raw reads use typed values when no raw data is given"""
        record = DictRecord({"age": 42})
        assert record.read_attribute_before_type_cast("age") == 42

    def test_raw_reads_use_raw_attributes(self):
        """Test raw reads use raw_attributes when given"""
        record = DictRecord({"age": 42}, raw_attributes={"age": "42"})
        assert record.read_attribute("age") == 42
        assert record.read_attribute_before_type_cast("age") == "42"

    def test_failure_report_is_created_once(self):
        """Test the failure report is created lazily and kept"""
        record = DictRecord()
        assert isinstance(record.failed_validators, FailureReport)
        assert record.failed_validators is record.failed_validators


class TestValidatedModel:
    """Tests for the ValidatedModel mixin"""

    def test_is_validatable_record(self):
        """Test model instances satisfy the record protocol"""
        assert isinstance(User(), ValidatableRecord)

    def test_valid_instance(self):
        """Test a valid instance has an empty report"""
        user = User(username="batman", email="bruce@wayne.com")

        assert user.valid() is True
        assert user.validated is True
        assert user.failed_validators.is_empty()

    def test_invalid_instance(self):
        """Test an invalid instance records its failure"""
        user = User(email="joker")

        assert user.valid() is False
        assert user.failed_validators.error_codes("username") == ["missing"]

    def test_valid_does_not_rerun_until_reset(self):
        """Test valid() reuses the last result until reset_validated()"""
        user = User(username="batman")
        assert user.valid() is True

        user.username = None
        assert user.valid() is True

        user.reset_validated()
        assert user.valid() is False
        assert user.failed_validators.error_codes("username") == ["missing"]

    def test_run_validations_clears_previous_failures(self):
        """Test run_validations() starts from an empty report"""
        user = User()
        user.run_validations()
        user.run_validations()

        assert len(user.failed_validators) == 1

    def test_subclass_has_its_own_chain(self):
        """Test subclasses do not share their parent's chain"""
        assert isinstance(User.validation_chain(), ValidationChain)
        assert Admin.validation_chain() is not User.validation_chain()
        assert len(User.validation_chain().items) == 2
        assert len(Admin.validation_chain().items) == 1

        admin = Admin(username="batman")
        assert admin.valid() is False
        assert admin.failed_validators.error_codes("username") == ["not_in_set"]

    def test_attribute_chain_continues_on_failure(self):
        """Test every attribute validation runs in the attribute chain"""
        account = Account(balance=None, raw={"balance": "lots"})

        assert account.valid() is False
        assert account.failed_validators.error_codes("balance") == ["missing", "not_float"]

    def test_attribute_chain_is_added_once(self):
        """Test the attribute chain is created once per class"""
        assert Account.attribute_chain() is Account.attribute_chain()
        assert len(Account.validation_chain().items) == 1
        assert Account.attribute_chain().continue_on_failure is True

    def test_raw_read_path_is_overridable(self):
        """Test models can supply their own raw values"""
        account = Account(balance=10.5, raw={"balance": "10.50"})
        assert account.valid() is True
