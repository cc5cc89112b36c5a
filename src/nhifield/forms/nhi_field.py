"""NHIField: form-field adapter around the NHI validator.

Keeps the value uppercase, derives the client-side ``pattern`` attribute from
the value's format, and reports failures to a form's error sink. Rendering is
left to whatever form library hosts the field; this class only exposes
attributes and validation.
"""

from __future__ import annotations

import re
from typing import Any, Optional

from nhifield.core.config import AppSettings
from nhifield.core.protocols import INHIValidator, IValidationErrorSink
from nhifield.validator.formats import normalize, pattern_hint
from nhifield.validator.messages import render, render_result
from nhifield.validator.nhi_validator import NHIValidatorService

_LABEL_SPLIT = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|[_\-\s]+")


def name_to_label(name: str) -> str:
    """``PatientNHI`` -> ``Patient NHI``, ``patient_nhi`` -> ``Patient nhi``."""
    words = [w for w in _LABEL_SPLIT.split(name) if w]
    if not words:
        return name
    label = " ".join(words)
    return label[0].upper() + label[1:]


class NHIField:
    """Text input holding one NHI number."""

    def __init__(
        self,
        name: str,
        title: Optional[str] = None,
        value: Optional[str] = "",
        html5_pattern: Optional[bool] = None,
        *,
        settings: AppSettings | None = None,
        validator: INHIValidator | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._validator = validator or NHIValidatorService(self._settings.validation)
        self.name = name
        self.title = title if title is not None else name_to_label(name)
        self.max_length = self._settings.field.max_length
        self._attributes: dict[str, Any] = {}
        self._html5_pattern = False
        self._value = ""
        self.set_value(value)
        if html5_pattern is None:
            html5_pattern = self._settings.field.html5_pattern
        self.set_html5_pattern(html5_pattern)

    # --- value ---

    @property
    def value(self) -> str:
        return self._value

    @value.setter
    def value(self, value: Optional[str]) -> None:
        self.set_value(value)

    def set_value(self, value: Optional[str]) -> NHIField:
        """Store the value, always uppercased."""
        self._value = normalize(value or "")
        if self._html5_pattern:
            self._attributes["pattern"] = pattern_hint(self._value)
        return self

    # --- pattern attribute ---

    def get_html5_pattern(self) -> bool:
        """Whether the ``pattern`` attribute matches the value's format."""
        return self._html5_pattern and self._attributes.get("pattern") == pattern_hint(self._value)

    def set_html5_pattern(self, enabled: bool) -> NHIField:
        self._html5_pattern = bool(enabled)
        self._attributes["pattern"] = pattern_hint(self._value) if enabled else ""
        return self

    @property
    def attributes(self) -> dict[str, Any]:
        attrs: dict[str, Any] = {
            "type": "text",
            "name": self.name,
            "value": self._value,
            "maxlength": self.max_length,
            "class": " ".join(self._settings.field.default_classes),
        }
        for key, val in self._attributes.items():
            if val not in ("", None):
                attrs[key] = val
        return attrs

    # --- validation ---

    def validate(self, validator: IValidationErrorSink) -> bool:
        """Run the text-field length rule, then the NHI checks.

        Reports at most one error to ``validator``.
        """
        if self.max_length and len(self._value) > self.max_length:
            validator.validation_error(
                self.name,
                render("TextField.VALIDATEMAXLENGTH", name=self.title, maxLength=self.max_length),
                "validation",
            )
            return False

        result = self._validator.validate(self._value)
        if not result.valid:
            validator.validation_error(self.name, render_result(result, name=self.title), "validation")
            return False
        return True
