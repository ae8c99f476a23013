"""
Logging interface used while an application starts.

Discovery, both registration phases and the endpoint definitions themselves
log through ILogger. A host swaps the implementation by registering its own
ILogger in the service collection before add_endpoint_definitions().
"""

from abc import ABC, abstractmethod
from typing import Any


class ILogger(ABC):
    """Leveled logger taking printf-style arguments, like stdlib logging."""

    @abstractmethod
    def debug(self, message: str, *args: Any, **kwargs: Any) -> None: ...

    @abstractmethod
    def info(self, message: str, *args: Any, **kwargs: Any) -> None: ...

    @abstractmethod
    def warning(self, message: str, *args: Any, **kwargs: Any) -> None: ...

    @abstractmethod
    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log an error. Pass exc_info=True to include the active traceback."""
