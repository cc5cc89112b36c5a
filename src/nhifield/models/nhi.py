"""NHI validation models: format kinds, error kinds, results."""

from __future__ import annotations

from enum import StrEnum
from typing import Optional

from pydantic import BaseModel


class FormatKind(StrEnum):
    LEGACY = "LEGACY"  # LLLDDDD, issued before July 2022
    CURRENT = "CURRENT"  # LLLDDLL, issued from July 2022


class ErrorKind(StrEnum):
    PATTERN_MISMATCH = "PATTERN_MISMATCH"
    CHECKSUM_INVALID = "CHECKSUM_INVALID"


EXPECTED_FORMAT: dict[FormatKind, str] = {
    FormatKind.LEGACY: "3 letters + 4 digits",
    FormatKind.CURRENT: "3 letters + 2 digits + 2 letters",
}


class ValidationResult(BaseModel):
    """Outcome of validating one identifier.

    ``value`` is always the normalised (uppercase) identifier so callers can
    store or redisplay it in place of what the user typed.
    """

    model_config = {"frozen": True}

    value: str
    format: FormatKind
    valid: bool
    error: Optional[ErrorKind] = None
    message_key: Optional[str] = None
    expected_format: Optional[str] = None

    @classmethod
    def ok(cls, value: str, kind: FormatKind) -> ValidationResult:
        return cls(value=value, format=kind, valid=True)

    @classmethod
    def pattern_mismatch(cls, value: str, kind: FormatKind) -> ValidationResult:
        key = "NHIField.LEGACYVALIDATEPATTERN" if kind is FormatKind.LEGACY else "NHIField.VALIDATEPATTERN"
        return cls(
            value=value,
            format=kind,
            valid=False,
            error=ErrorKind.PATTERN_MISMATCH,
            message_key=key,
            expected_format=EXPECTED_FORMAT[kind],
        )

    @classmethod
    def checksum_invalid(cls, value: str, kind: FormatKind) -> ValidationResult:
        return cls(
            value=value,
            format=kind,
            valid=False,
            error=ErrorKind.CHECKSUM_INVALID,
            message_key="NHIField.VALIDATECHECKSUM",
        )

    def __bool__(self) -> bool:
        return self.valid
