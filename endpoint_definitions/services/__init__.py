"""
Service implementations registered by the host by default.
"""

from .logging import AppLogger, NullLogger

__all__ = [
    "AppLogger",
    "NullLogger",
]
