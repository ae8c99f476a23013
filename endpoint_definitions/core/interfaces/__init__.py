"""
Interface definitions for endpoint definitions.

These abstract base classes define the contracts that endpoint definitions
and host-supplied services implement.
"""

from .endpoint_definition import IEndpointDefinition
from .logger import ILogger

__all__ = [
    "IEndpointDefinition",
    "ILogger",
]
