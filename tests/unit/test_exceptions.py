"""Tests for exception hierarchy."""

from rentfleet.exceptions import (
    InvalidConfiguration,
    RentfleetError,
    SettingsError,
    SettingsValidationError,
)


class TestExceptionHierarchy:
    def test_base_exception(self):
        e = RentfleetError("test", "details")
        assert e.message == "test"
        assert e.details == "details"
        assert str(e) == "test"

    def test_details_optional(self):
        e = RentfleetError("test")
        assert e.details is None

    def test_invalid_configuration_inherits(self):
        assert issubclass(InvalidConfiguration, RentfleetError)

    def test_invalid_configuration_is_not_value_error(self):
        # Must escape pydantic validators without being wrapped.
        assert not issubclass(InvalidConfiguration, ValueError)

    def test_settings_errors_inherit(self):
        assert issubclass(SettingsError, RentfleetError)
        assert issubclass(SettingsValidationError, SettingsError)


class TestExceptionMessages:
    def test_invalid_configuration(self):
        e = InvalidConfiguration("Vehicle not available for rent", "No match")
        assert e.message == "Vehicle not available for rent"
        assert e.details == "No match"

    def test_settings_validation(self):
        e = SettingsValidationError("data_dir", "not a path")
        assert "data_dir" in e.message
        assert "not a path" in e.details
