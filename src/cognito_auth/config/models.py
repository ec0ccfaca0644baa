"""Pydantic models for the cognito-auth configuration file."""

from typing import Literal

from pydantic import Field

from .._base import FrozenModel
from ..models import OAuth2Settings


class LoggingConfigModel(FrozenModel):
    """Application logging configuration."""

    enabled: bool = True
    path: str | None = None
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    max_bytes: int = Field(default=10 * 1024 * 1024, gt=0)
    backup_count: int = Field(default=5, ge=0)


class AppConfigModel(FrozenModel):
    """Top-level configuration: Cognito provider settings plus logging."""

    cognito: OAuth2Settings = Field(default_factory=OAuth2Settings)
    logging: LoggingConfigModel = Field(default_factory=LoggingConfigModel)
