"""
Hosting environment descriptor.

Passed to every endpoint definition's define_endpoints hook so definitions
can register environment-specific routes (for example debug endpoints that
only exist in Development).
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from ..core.settings import AppSettings


class Environments:
    """Well-known environment names."""

    DEVELOPMENT = "Development"
    STAGING = "Staging"
    PRODUCTION = "Production"


class HostEnvironment(BaseModel):
    """Information about the environment an application is running in."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    environment_name: str = Environments.PRODUCTION
    application_name: str = ""
    content_root_path: Path = Path(".")

    @classmethod
    def from_settings(cls, settings: AppSettings) -> HostEnvironment:
        return cls(
            environment_name=settings.environment,
            application_name=settings.resolved_application_name(),
            content_root_path=settings.resolved_content_root(),
        )

    def is_environment(self, name: str) -> bool:
        """Compare the environment name, ignoring case."""
        return self.environment_name.casefold() == name.casefold()

    def is_development(self) -> bool:
        return self.is_environment(Environments.DEVELOPMENT)

    def is_staging(self) -> bool:
        return self.is_environment(Environments.STAGING)

    def is_production(self) -> bool:
        return self.is_environment(Environments.PRODUCTION)
