"""
Core infrastructure for endpoint definitions.

This module provides:
- ServiceCollection / ServiceProvider: DI container using dependency-injector
- Endpoint definition discovery and the two registration phases
- Interface definitions for endpoint definitions and logging
- Custom exception hierarchy
"""

from .container import ServiceCollection, ServiceDescriptor, ServiceLifetime, ServiceProvider
from .di import create_instance, resolve_or_default
from .exceptions import (
    ConfigurationError,
    EndpointDefinitionException,
    InvalidArgumentError,
    ServiceResolutionError,
)
from .interfaces import IEndpointDefinition, ILogger
from .registry import (
    EndpointDefinitionRegistry,
    EntryPointGroup,
    add_endpoint_definitions,
    discover_endpoint_definition_types,
    get_endpoint_definitions,
    use_endpoint_definitions,
)

__all__ = [
    "ConfigurationError",
    "EndpointDefinitionException",
    "EndpointDefinitionRegistry",
    "EntryPointGroup",
    "IEndpointDefinition",
    "ILogger",
    "InvalidArgumentError",
    "ServiceCollection",
    "ServiceDescriptor",
    "ServiceLifetime",
    "ServiceProvider",
    "ServiceResolutionError",
    "add_endpoint_definitions",
    "create_instance",
    "discover_endpoint_definition_types",
    "get_endpoint_definitions",
    "resolve_or_default",
    "use_endpoint_definitions",
]
