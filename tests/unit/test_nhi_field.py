"""Tests for the NHIField form-field adapter."""

from __future__ import annotations

import pytest

from nhifield.core.config import AppSettings, FieldConfig, ValidationConfig
from nhifield.core.protocols import INHIValidator, IValidationErrorSink
from nhifield.forms.nhi_field import NHIField, name_to_label
from nhifield.models.nhi import ErrorKind, FormatKind, ValidationResult
from nhifield.validator.formats import LEGACY_REGEX_PATTERN, REGEX_PATTERN
from tests.fakes import RecordingValidator, StubNHIValidator


@pytest.fixture
def settings():
    return AppSettings(validation=ValidationConfig(disable_checksum_validation=False), field=FieldConfig())


@pytest.fixture
def sink():
    return RecordingValidator()


class TestNameToLabel:
    @pytest.mark.parametrize(
        ("name", "label"),
        [("PatientNHI", "Patient NHI"), ("patient_nhi", "Patient nhi"), ("NHI", "NHI"), ("nhi", "Nhi")],
    )
    def test_labels(self, name, label):
        assert name_to_label(name) == label


class TestValue:
    def test_constructor_uppercases(self, settings):
        assert NHIField("NHI", value="zzz0016", settings=settings).value == "ZZZ0016"

    def test_setter_uppercases(self, settings):
        field = NHIField("NHI", settings=settings)
        field.value = "abc12dv"
        assert field.value == "ABC12DV"
        assert field.attributes["value"] == "ABC12DV"

    def test_none_becomes_empty(self, settings):
        assert NHIField("NHI", value=None, settings=settings).value == ""

    def test_title_defaults_from_name(self, settings):
        assert NHIField("PatientNHI", settings=settings).title == "Patient NHI"
        assert NHIField("PatientNHI", "Health number", settings=settings).title == "Health number"


class TestHtml5Pattern:
    def test_disabled_by_default(self, settings):
        field = NHIField("NHI", settings=settings)
        assert "pattern" not in field.attributes
        assert field.get_html5_pattern() is False

    def test_empty_value_gets_current_pattern(self, settings):
        field = NHIField("NHI", html5_pattern=True, settings=settings)
        assert field.attributes["pattern"] == REGEX_PATTERN
        assert field.get_html5_pattern() is True

    def test_legacy_value_gets_legacy_pattern(self, settings):
        field = NHIField("NHI", value="zzz0016", html5_pattern=True, settings=settings)
        assert field.attributes["pattern"] == LEGACY_REGEX_PATTERN

    def test_pattern_follows_value_changes(self, settings):
        field = NHIField("NHI", value="ZZZ0016", html5_pattern=True, settings=settings)
        field.set_value("ZZZ00AX")
        assert field.attributes["pattern"] == REGEX_PATTERN
        assert field.get_html5_pattern() is True

    def test_can_be_switched_off(self, settings):
        field = NHIField("NHI", html5_pattern=True, settings=settings)
        field.set_html5_pattern(False)
        assert "pattern" not in field.attributes
        assert field.get_html5_pattern() is False

    def test_default_comes_from_settings(self):
        settings = AppSettings(field=FieldConfig(html5_pattern=True))
        assert NHIField("NHI", settings=settings).get_html5_pattern() is True


class TestAttributes:
    def test_base_attributes(self, settings):
        attrs = NHIField("PatientNHI", settings=settings).attributes
        assert attrs["type"] == "text"
        assert attrs["name"] == "PatientNHI"
        assert attrs["maxlength"] == 7
        assert attrs["class"] == "nhi text"


class TestValidate:
    def test_valid_value_reports_nothing(self, settings, sink):
        assert NHIField("NHI", value="zzz0016", settings=settings).validate(sink) is True
        assert sink.errors == []

    def test_checksum_failure_message(self, settings, sink):
        field = NHIField("PatientNHI", value="ABC1234", settings=settings)
        assert field.validate(sink) is False
        assert sink.errors == [
            ("PatientNHI", "The value for Patient NHI is not a valid NHI number.", "validation"),
        ]

    def test_current_pattern_message(self, settings, sink):
        NHIField("NHI", value="ABC12", settings=settings).validate(sink)
        assert sink.messages == [
            "The value for NHI must be a sequence of 3 letters followed by 2 digits then 2 more letters."
        ]

    def test_legacy_pattern_message(self, settings, sink):
        NHIField("NHI", value="ABC123", settings=settings).validate(sink)
        assert sink.messages == ["The value for NHI must be a sequence of 3 letters followed by 4 digits."]

    def test_empty_value_fails_pattern(self, settings, sink):
        assert NHIField("NHI", settings=settings).validate(sink) is False
        assert len(sink.errors) == 1

    def test_too_long_reports_only_max_length(self, settings, sink):
        assert NHIField("NHI", value="ZZZ00161", settings=settings).validate(sink) is False
        assert sink.messages == ["The value for NHI must not exceed 7 characters in length"]

    def test_checksum_bypass_from_settings(self, sink):
        settings = AppSettings(validation=ValidationConfig(disable_checksum_validation=True))
        assert NHIField("NHI", value="ABC1234", settings=settings).validate(sink) is True

    def test_uses_injected_validator(self, settings, sink):
        stub = StubNHIValidator(ValidationResult.checksum_invalid("ZZZ0016", FormatKind.LEGACY))
        field = NHIField("NHI", value="zzz0016", settings=settings, validator=stub)
        assert field.validate(sink) is False
        assert stub.calls == [("ZZZ0016", None)]


class TestProtocols:
    def test_fakes_satisfy_protocols(self):
        assert isinstance(RecordingValidator(), IValidationErrorSink)
        assert isinstance(StubNHIValidator(), INHIValidator)

    def test_result_error_kind(self):
        assert ValidationResult.checksum_invalid("X", FormatKind.LEGACY).error is ErrorKind.CHECKSUM_INVALID
