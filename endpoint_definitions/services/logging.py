"""
ILogger implementations.

AppLogger writes through a named stdlib logger. Console (stderr) and a
rotating log file are opt-in; with neither, records propagate to the root
logger so an embedding host's logging configuration applies.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING, Any

from ..core.interfaces.logger import ILogger

if TYPE_CHECKING:
    from ..core.models.config import LoggingConfig

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class AppLogger(ILogger):
    """
    Logger for endpoint definition hosts.

    Creating an AppLogger replaces the handlers a previous AppLogger with the
    same name attached. close() detaches and closes them again.
    """

    MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
    BACKUP_COUNT = 3
    FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

    def __init__(
        self,
        name: str = "endpoint_definitions",
        level: str = "info",
        console_enabled: bool = False,
        log_file: Path | None = None,
    ) -> None:
        """
        Args:
            name: Name of the underlying stdlib logger
            level: debug, info, warning or error (unknown values mean info)
            console_enabled: Write records to stderr
            log_file: Write records to this file, rotated at MAX_FILE_SIZE
        """
        self._logger = logging.getLogger(name)
        self._handlers: list[logging.Handler] = []

        for stale in list(self._logger.handlers):
            self._logger.removeHandler(stale)

        if console_enabled:
            self._attach(logging.StreamHandler(sys.stderr))
        if log_file is not None:
            path = Path(log_file)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._attach(
                RotatingFileHandler(path, maxBytes=self.MAX_FILE_SIZE, backupCount=self.BACKUP_COUNT)
            )

        self._logger.propagate = not self._handlers
        self._logger.setLevel(_LEVELS.get(level.lower(), logging.INFO))

    @classmethod
    def from_config(cls, config: LoggingConfig, name: str = "endpoint_definitions") -> AppLogger:
        """Create a logger from the [logging] settings section."""
        return cls(name, level=config.level, console_enabled=config.console, log_file=config.file)

    def _attach(self, handler: logging.Handler) -> None:
        handler.setFormatter(logging.Formatter(self.FORMAT, datefmt=self.DATE_FORMAT))
        self._logger.addHandler(handler)
        self._handlers.append(handler)

    @property
    def name(self) -> str:
        return self._logger.name

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.error(message, *args, **kwargs)

    def close(self) -> None:
        """Detach and close the handlers this logger attached. Idempotent."""
        while self._handlers:
            handler = self._handlers.pop()
            self._logger.removeHandler(handler)
            handler.close()
        self._logger.propagate = True


class NullLogger(ILogger):
    """Discards every record. Used when no ILogger is registered."""

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass
