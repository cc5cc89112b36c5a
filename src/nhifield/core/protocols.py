"""Protocol interfaces for the seams between the core and its callers.

Structural typing, no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from nhifield.models.nhi import ValidationResult


# ---------------------------------------------------------------------------
# Validator
# ---------------------------------------------------------------------------

@runtime_checkable
class INHIValidator(Protocol):
    """Anything that can turn a raw identifier into a ValidationResult."""

    def validate(
        self, identifier: str, *, disable_checksum_validation: Optional[bool] = None
    ) -> ValidationResult: ...


# ---------------------------------------------------------------------------
# Form validation error sink
# ---------------------------------------------------------------------------

@runtime_checkable
class IValidationErrorSink(Protocol):
    """Collects field errors during form validation."""

    def validation_error(self, field_name: str, message: str, message_type: str = "validation") -> None: ...
