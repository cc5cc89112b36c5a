"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from nhifield.api.routes import health, nhi
from nhifield.core.config import AppSettings, setup_logging
from nhifield.core.exceptions import InvalidNHIError
from nhifield.validator.messages import render_result
from nhifield.validator.nhi_validator import NHIValidatorService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize and tear down application resources."""
    settings = getattr(app.state, "settings", None) or AppSettings()
    setup_logging(settings.log_level)
    app.state.settings = settings
    app.state.validator = NHIValidatorService(settings.validation)
    if settings.validation.disable_checksum_validation:
        logger.warning("NHI checksum validation is disabled (environment=%s)", settings.environment)
    yield


async def invalid_nhi_handler(request: Request, exc: InvalidNHIError) -> JSONResponse:
    result = exc.result
    logger.info("Rejected NHI on %s: %s", request.url.path, result.error)
    return JSONResponse(
        status_code=422,
        content={
            "detail": render_result(result),
            "result": result.model_dump(mode="json"),
        },
    )


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="NHI Field Validation Service",
        version="0.1.0",
        lifespan=lifespan,
    )
    if settings is not None:
        app.state.settings = settings
    app.add_exception_handler(InvalidNHIError, invalid_nhi_handler)
    app.include_router(health.router)
    app.include_router(nhi.router, prefix="/nhi")
    return app
