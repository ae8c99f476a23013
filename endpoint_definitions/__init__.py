"""
endpoint_definitions - modular endpoint registration for Starlette.

Endpoint definitions are classes implementing IEndpointDefinition. They are
discovered by scanning packages, register their services before the
application is built, and register their routes afterwards.
"""

from .core import (
    ConfigurationError,
    EndpointDefinitionException,
    EndpointDefinitionRegistry,
    EntryPointGroup,
    IEndpointDefinition,
    ILogger,
    InvalidArgumentError,
    ServiceCollection,
    ServiceLifetime,
    ServiceProvider,
    ServiceResolutionError,
    add_endpoint_definitions,
    use_endpoint_definitions,
)
from .hosting import (
    Environments,
    HostEnvironment,
    WebApplication,
    WebApplicationBuilder,
    create_application,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "EndpointDefinitionException",
    "EndpointDefinitionRegistry",
    "EntryPointGroup",
    "Environments",
    "HostEnvironment",
    "IEndpointDefinition",
    "ILogger",
    "InvalidArgumentError",
    "ServiceCollection",
    "ServiceLifetime",
    "ServiceProvider",
    "ServiceResolutionError",
    "WebApplication",
    "WebApplicationBuilder",
    "__version__",
    "add_endpoint_definitions",
    "create_application",
    "use_endpoint_definitions",
]
