"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ValidationConfig(BaseSettings):
    """NHI validation behaviour."""

    model_config = {"env_prefix": "NHIFIELD_VALIDATION_"}

    # Test fixtures use made-up identifiers that only need the right shape.
    disable_checksum_validation: bool = False


class FieldConfig(BaseSettings):
    """Form-field rendering defaults."""

    model_config = {"env_prefix": "NHIFIELD_FIELD_"}

    html5_pattern: bool = False
    max_length: int = 7
    default_classes: list[str] = Field(default_factory=lambda: ["nhi", "text"])


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "NHIFIELD_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    field: FieldConfig = Field(default_factory=FieldConfig)


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure and return the package logger."""
    logging.basicConfig(
        format=LOG_FORMAT,
        level=getattr(logging, level.upper(), logging.INFO),
    )
    return logging.getLogger("nhifield")
