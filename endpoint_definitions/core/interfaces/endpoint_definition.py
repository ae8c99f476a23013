"""
Endpoint definition interface.

An endpoint definition groups related routes together with the services
those routes need. Definitions are discovered by scanning packages, so the
host never lists them by hand.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...hosting.application import WebApplication
    from ...hosting.environment import HostEnvironment
    from ..container import ServiceCollection


class IEndpointDefinition(ABC):
    """
    Contract for organizing endpoints and their dependencies in a modular way.

    Implementations are instantiated once per discovery pass. Constructor
    parameters are resolved from the services registered before discovery
    ran. Classes that cannot subclass this interface may be registered as
    virtual subclasses with ``IEndpointDefinition.register(cls)``.
    """

    @abstractmethod
    def define_services(self, services: ServiceCollection) -> None:
        """
        Register the services required by this definition's endpoints.

        Called during startup, before the application is built.

        Args:
            services: The service collection to add services to
        """
        pass

    @abstractmethod
    def define_endpoints(self, app: WebApplication, env: HostEnvironment) -> None:
        """
        Configure the endpoints of this definition.

        Called after the application has been built.

        Args:
            app: The application to add routes to
            env: The hosting environment, for environment-specific routes
        """
        pass
