"""Shared test doubles."""

from __future__ import annotations

from typing import Optional

from nhifield.models.nhi import FormatKind, ValidationResult


class RecordingValidator:
    """IValidationErrorSink that keeps every reported error."""

    def __init__(self) -> None:
        self.errors: list[tuple[str, str, str]] = []

    def validation_error(self, field_name: str, message: str, message_type: str = "validation") -> None:
        self.errors.append((field_name, message, message_type))

    @property
    def messages(self) -> list[str]:
        return [message for _, message, _ in self.errors]


class StubNHIValidator:
    """INHIValidator returning a canned result and recording calls."""

    def __init__(self, result: ValidationResult | None = None) -> None:
        self.result = result
        self.calls: list[tuple[str, Optional[bool]]] = []

    def validate(
        self, identifier: str, *, disable_checksum_validation: Optional[bool] = None
    ) -> ValidationResult:
        self.calls.append((identifier, disable_checksum_validation))
        if self.result is not None:
            return self.result
        return ValidationResult.ok(identifier, FormatKind.LEGACY)


__all__ = ["RecordingValidator", "StubNHIValidator"]
