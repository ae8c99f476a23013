"""
Click context extension for the endpoint-definitions CLI.

Provides CliContext dataclass that holds data passed through the Click
command chain via ctx.obj.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

from ..core.settings import AppSettings, load_settings


@dataclass
class CliContext:
    """Extended context passed through Click command chain.

    Attributes:
        cwd: Current working directory
        settings: Loaded configuration
    """

    cwd: Path
    settings: AppSettings

    @classmethod
    def create(cls, cwd: Path | None = None) -> CliContext:
        """Create a CliContext for the current environment.

        Args:
            cwd: Working directory override (defaults to Path.cwd())

        Returns:
            Configured CliContext instance
        """
        if cwd is None:
            cwd = Path.cwd()
        return cls(cwd=cwd, settings=load_settings(start_dir=str(cwd)))

    def add_import_path(self, app_dir: str) -> None:
        """Make modules under app_dir importable as scan markers."""
        path = str((self.cwd / app_dir).resolve())
        if path not in sys.path:
            sys.path.insert(0, path)
