"""NHIValidatorService: NHI pattern and checksum validation.

Checks follow the published NHI check-digit steps:
https://en.wikipedia.org/w/index.php?title=NHI_Number&oldid=770434870
and HISO 10046:2021 for the alphanumeric format introduced in July 2022.

Every function here is pure: results are returned, never raised or logged.
"""

from __future__ import annotations

from typing import Optional

from nhifield.core.config import ValidationConfig
from nhifield.core.exceptions import InvalidNHIError
from nhifield.models.nhi import FormatKind, ValidationResult
from nhifield.validator.alphabet import letter_value
from nhifield.validator.checksum import current_check_value, legacy_check_digit
from nhifield.validator.formats import (
    NHI_LENGTH,
    detect_format,
    hint_format,
    matches,
    normalize,
)


def validate_current(identifier: str, *, disable_checksum_validation: bool = False) -> ValidationResult:
    """Validate an LLLDDLL identifier (mod 24 check letter)."""
    value = normalize(identifier)
    if not matches(value, FormatKind.CURRENT):
        return ValidationResult.pattern_mismatch(value, FormatKind.CURRENT)

    if disable_checksum_validation:
        return ValidationResult.ok(value, FormatKind.CURRENT)

    expected = current_check_value(value)
    if expected is None or expected != letter_value(value[6]):
        return ValidationResult.checksum_invalid(value, FormatKind.CURRENT)

    return ValidationResult.ok(value, FormatKind.CURRENT)


def validate_legacy(identifier: str, *, disable_checksum_validation: bool = False) -> ValidationResult:
    """Validate an LLLDDDD identifier (mod 11 check digit)."""
    value = normalize(identifier)
    if not matches(value, FormatKind.LEGACY):
        return ValidationResult.pattern_mismatch(value, FormatKind.LEGACY)

    if disable_checksum_validation:
        return ValidationResult.ok(value, FormatKind.LEGACY)

    expected = legacy_check_digit(value)
    if expected is None or expected != int(value[6]):
        return ValidationResult.checksum_invalid(value, FormatKind.LEGACY)

    return ValidationResult.ok(value, FormatKind.LEGACY)


def validate(identifier: str, *, disable_checksum_validation: bool = False) -> ValidationResult:
    """Normalise, pick the format and run the matching validator."""
    value = normalize(identifier)

    if len(value) != NHI_LENGTH:
        return ValidationResult.pattern_mismatch(value, hint_format(value))

    if detect_format(value) is FormatKind.LEGACY:
        return validate_legacy(value, disable_checksum_validation=disable_checksum_validation)
    return validate_current(value, disable_checksum_validation=disable_checksum_validation)


class NHIValidatorService:
    """Validator bound to configuration.

    The checksum bypass comes from ``ValidationConfig`` unless a call
    overrides it explicitly.
    """

    def __init__(self, config: ValidationConfig | None = None) -> None:
        self._config = config or ValidationConfig()

    @property
    def disable_checksum_validation(self) -> bool:
        return self._config.disable_checksum_validation

    def validate(
        self, identifier: str, *, disable_checksum_validation: Optional[bool] = None
    ) -> ValidationResult:
        if disable_checksum_validation is None:
            disable_checksum_validation = self.disable_checksum_validation
        return validate(identifier, disable_checksum_validation=disable_checksum_validation)

    def is_valid(self, identifier: str) -> bool:
        return self.validate(identifier).valid

    def require_valid(self, identifier: str) -> str:
        """Return the normalised identifier, or raise if it does not validate.

        Raises:
            InvalidNHIError: carrying the failing ``ValidationResult``.
        """
        result = self.validate(identifier)
        if not result.valid:
            raise InvalidNHIError(result)
        return result.value
