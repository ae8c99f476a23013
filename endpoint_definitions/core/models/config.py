"""
Configuration sections of AppSettings.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

LogLevel = Literal["debug", "info", "warning", "error"]


class ConfigBaseModel(BaseModel):
    """Base for config sections: values arrive as TOML or environment strings."""

    model_config = ConfigDict(
        validate_assignment=True,
        extra="ignore",  # Unknown keys in config files are not an error
    )


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "info"
    console: bool = False
    file: Path | None = None

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        """Accept log levels in any case."""
        return v.lower() if isinstance(v, str) else v


class ServerConfig(ConfigBaseModel):
    """Settings used by the `serve` command."""

    host: str = "127.0.0.1"
    port: int = 8000
