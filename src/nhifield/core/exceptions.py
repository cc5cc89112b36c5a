"""nhifield exception hierarchy.

Validation failures are reported as ``ValidationResult`` values. The
exceptions below cover contract misuse and callers that opt into raising.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nhifield.models.nhi import ValidationResult


class NHIFieldError(Exception):
    """Base exception for all nhifield errors."""


class InvalidLengthError(NHIFieldError, ValueError):
    """Identifier too short to inspect the format discriminator."""

    def __init__(self, identifier: str, minimum: int) -> None:
        self.identifier = identifier
        self.minimum = minimum
        super().__init__(
            f"Identifier {identifier!r} has {len(identifier)} characters, need at least {minimum}"
        )


class UnknownLetterError(NHIFieldError, ValueError):
    """Character has no entry in the NHI alphabet conversion table."""

    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(f"{char!r} is not in the NHI alphabet (A-Z excluding I and O)")


class InvalidNHIError(NHIFieldError):
    """Identifier failed validation where the caller required a valid one."""

    def __init__(self, result: ValidationResult) -> None:
        self.result = result
        super().__init__(f"{result.value!r} is not a valid NHI number ({result.error})")
