"""
Starlette hosting for endpoint definitions.
"""

from .application import WebApplication, WebApplicationBuilder, create_application
from .environment import Environments, HostEnvironment

__all__ = [
    "Environments",
    "HostEnvironment",
    "WebApplication",
    "WebApplicationBuilder",
    "create_application",
]
