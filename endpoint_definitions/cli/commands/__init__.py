"""
Native Click command implementations.
"""

from .routes import routes
from .serve import serve

COMMANDS = [routes, serve]

__all__ = ["COMMANDS", "routes", "serve"]
