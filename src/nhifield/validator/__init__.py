"""NHI validation core: pure functions plus a settings-bound service."""

from __future__ import annotations

from nhifield.validator.alphabet import letter_value
from nhifield.validator.checksum import current_check_value, legacy_check_digit
from nhifield.validator.formats import (
    LEGACY_REGEX_PATTERN,
    REGEX_PATTERN,
    detect_format,
    hint_format,
    normalize,
    pattern_for,
    pattern_hint,
)
from nhifield.validator.nhi_validator import (
    NHIValidatorService,
    validate,
    validate_current,
    validate_legacy,
)

__all__ = [
    "LEGACY_REGEX_PATTERN",
    "NHIValidatorService",
    "REGEX_PATTERN",
    "current_check_value",
    "detect_format",
    "hint_format",
    "legacy_check_digit",
    "letter_value",
    "normalize",
    "pattern_for",
    "pattern_hint",
    "validate",
    "validate_current",
    "validate_legacy",
]
