"""NHI validation endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Query, Request

from nhifield.models.requests import (
    NormalizeRequest,
    NormalizeResponse,
    PatternResponse,
    ValidateRequest,
    ValidateResponse,
)
from nhifield.validator.formats import detect_format, hint_format, pattern_for
from nhifield.validator.messages import render_result
from nhifield.validator.nhi_validator import NHIValidatorService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["nhi"])


def _validator(request: Request) -> NHIValidatorService:
    return request.app.state.validator


@router.post("/validate", response_model=ValidateResponse)
async def validate_nhi(body: ValidateRequest, request: Request) -> ValidateResponse:
    """Validate an identifier and return the normalised value and outcome."""
    result = _validator(request).validate(
        body.value, disable_checksum_validation=body.disable_checksum_validation
    )
    logger.debug("Validated NHI format=%s valid=%s error=%s", result.format, result.valid, result.error)
    return ValidateResponse(**result.model_dump(), message=render_result(result))


@router.post("/normalize", response_model=NormalizeResponse)
async def normalize_nhi(body: NormalizeRequest, request: Request) -> NormalizeResponse:
    """Return the stored form of a valid identifier; invalid ones get a 422."""
    value = _validator(request).require_valid(body.value)
    return NormalizeResponse(value=value, format=detect_format(value))


@router.get("/pattern", response_model=PatternResponse)
async def get_pattern(value: str = Query(default="")) -> PatternResponse:
    """Client-side input pattern for the format ``value`` appears to be in."""
    kind = hint_format(value)
    return PatternResponse(format=kind, pattern=pattern_for(kind))
