"""Request and response bodies for the NHI HTTP API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from nhifield.models.nhi import FormatKind, ValidationResult


class ValidateRequest(BaseModel):
    """Identifier to check. ``None`` for the flag means use the configured default."""

    value: str
    disable_checksum_validation: Optional[bool] = None


class ValidateResponse(ValidationResult):
    """Validation result plus the rendered user-facing message."""

    message: str = ""


class NormalizeRequest(BaseModel):
    value: str


class NormalizeResponse(BaseModel):
    value: str
    format: FormatKind


class PatternResponse(BaseModel):
    """Client-side input pattern hint for a value."""

    format: FormatKind
    pattern: str
