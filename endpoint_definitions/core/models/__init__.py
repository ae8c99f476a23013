"""
Pydantic models for endpoint definitions.
"""

from .config import ConfigBaseModel, LoggingConfig, LogLevel, ServerConfig

__all__ = [
    "ConfigBaseModel",
    "LogLevel",
    "LoggingConfig",
    "ServerConfig",
]
