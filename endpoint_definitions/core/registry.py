"""
Endpoint definition registry with package scanning.

Discovers IEndpointDefinition implementations from scan markers and runs
their two hooks:

1. add_endpoint_definitions() - instantiate every discovered definition,
   call define_services() on each and publish the instances as an
   EndpointDefinitionRegistry singleton.
2. use_endpoint_definitions() - once the application is built, call
   define_endpoints() on each published definition, in order.

A scan marker bounds discovery to a subset of code:
- a module (a package is scanned together with its public submodules)
- a class (the package its defining module belongs to is scanned)
- a dotted module name
- an EntryPointGroup (every installed entry point of the group)
"""

from __future__ import annotations

import importlib
import inspect
import pkgutil
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from importlib.metadata import entry_points
from types import ModuleType
from typing import TYPE_CHECKING, Any, TypeVar, Union, overload

from .container import ServiceCollection
from .di import create_instance, resolve_or_default
from .exceptions import ConfigurationError, InvalidArgumentError, qualified_name
from .interfaces.endpoint_definition import IEndpointDefinition
from .interfaces.logger import ILogger

if TYPE_CHECKING:
    from ..hosting.application import WebApplication
    from ..hosting.environment import HostEnvironment
    from .container import ServiceProvider

D = TypeVar("D", bound=IEndpointDefinition)


@dataclass(frozen=True)
class EntryPointGroup:
    """
    Scan marker selecting installed entry points.

    External packages expose definitions in their packaging metadata:

        [project.entry-points."endpoint_definitions"]
        weather = "weather_api.endpoints"
    """

    name: str = "endpoint_definitions"


ScanMarker = Union[ModuleType, type, str, EntryPointGroup]

_SCAN_MARKER_TYPES = (ModuleType, type, str, EntryPointGroup)


class EndpointDefinitionRegistry(Sequence[IEndpointDefinition]):
    """
    Read-only, ordered collection of instantiated endpoint definitions.

    Published once by add_endpoint_definitions() and resolved by
    use_endpoint_definitions(). Each concrete class appears at most once.
    """

    __slots__ = ("_definitions",)

    def __init__(self, definitions: Iterable[IEndpointDefinition] = ()) -> None:
        self._definitions: tuple[IEndpointDefinition, ...] = tuple(definitions)

    @overload
    def __getitem__(self, index: int) -> IEndpointDefinition: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[IEndpointDefinition, ...]: ...

    def __getitem__(self, index: int | slice) -> Any:
        return self._definitions[index]

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[IEndpointDefinition]:
        return iter(self._definitions)

    def __repr__(self) -> str:
        names = ", ".join(type(d).__name__ for d in self._definitions)
        return f"EndpointDefinitionRegistry([{names}])"

    def definition_types(self) -> list[type[IEndpointDefinition]]:
        """Concrete classes of the definitions, in registry order."""
        return [type(d) for d in self._definitions]

    def of_type(self, cls: type[D]) -> list[D]:
        """Definitions that are instances of cls."""
        return [d for d in self._definitions if isinstance(d, cls)]


# -------------------------------------------------------------------------
# Discovery
# -------------------------------------------------------------------------


def discover_endpoint_definition_types(
    *scan_markers: ScanMarker,
) -> list[type[IEndpointDefinition]]:
    """
    Find concrete endpoint definition classes reachable from scan_markers.

    Results are de-duplicated by class, keeping first-seen order. The order
    is deterministic: markers in the order given, submodules in name order,
    classes in definition order.

    Raises:
        ConfigurationError: If a marker or one of its submodules cannot be imported
    """
    found: dict[type[IEndpointDefinition], None] = {}
    for marker in scan_markers:
        for cls in _types_for_marker(marker):
            found.setdefault(cls, None)
    return list(found)


def _types_for_marker(marker: ScanMarker) -> Iterator[type[IEndpointDefinition]]:
    if isinstance(marker, EntryPointGroup):
        yield from _types_from_entry_points(marker.name)
        return

    for module in _iter_modules(_module_for_marker(marker)):
        yield from _public_definition_types(module)


def _module_for_marker(marker: ScanMarker) -> ModuleType:
    """Resolve a marker to the module (or package) it stands for."""
    if isinstance(marker, ModuleType):
        return marker

    if isinstance(marker, str):
        return _import(marker)

    if isinstance(marker, type):
        module = sys.modules.get(marker.__module__) or _import(marker.__module__)
        package_name = getattr(module, "__package__", None)
        if package_name and package_name != module.__name__:
            return _import(package_name)
        return module

    raise _unsupported_marker(marker)


def _unsupported_marker(marker: object) -> InvalidArgumentError:
    return InvalidArgumentError(
        f"Unsupported scan marker {marker!r}; expected a module, class, "
        "dotted module name or EntryPointGroup.",
        param_name="scan_markers",
    )


def _iter_modules(module: ModuleType) -> Iterator[ModuleType]:
    """Yield module and, for packages, every public submodule recursively."""
    yield module

    package_path = getattr(module, "__path__", None)
    if not package_path:
        return

    for _importer, modname, _ispkg in pkgutil.iter_modules(package_path):
        # Skip private modules
        if modname.startswith("_"):
            continue
        yield from _iter_modules(_import(f"{module.__name__}.{modname}"))


def _public_definition_types(module: ModuleType) -> Iterator[type[IEndpointDefinition]]:
    exported = getattr(module, "__all__", None)
    for attr_name, attr in list(vars(module).items()):
        if attr_name.startswith("_"):
            continue
        if exported is not None and attr_name not in exported:
            continue
        # Only classes defined here; imports are found through their own module
        if getattr(attr, "__module__", None) != module.__name__:
            continue
        if _implements(attr):
            yield attr


def _types_from_entry_points(group: str) -> Iterator[type[IEndpointDefinition]]:
    for ep in entry_points(group=group):
        try:
            loaded = ep.load()
        except Exception as e:
            raise ConfigurationError(
                f"Failed to load entry point '{ep.name}' ({ep.value}).",
                context={"group": group},
                cause=e,
            ) from e

        if isinstance(loaded, ModuleType):
            for module in _iter_modules(loaded):
                yield from _public_definition_types(module)
        elif _implements(loaded):
            yield loaded


def _implements(cls: object) -> bool:
    """
    Check if cls is a concrete endpoint definition.

    Returns True for subclasses (including virtual subclasses) of
    IEndpointDefinition that are neither the interface itself nor abstract.
    """
    try:
        return (
            isinstance(cls, type)
            and issubclass(cls, IEndpointDefinition)
            and cls is not IEndpointDefinition
            and not inspect.isabstract(cls)
        )
    except TypeError:
        return False


def _import(module_name: str) -> ModuleType:
    try:
        return importlib.import_module(module_name)
    except Exception as e:
        raise ConfigurationError(
            f"Failed to import scan marker module '{module_name}'.",
            context={"module": module_name},
            cause=e,
        ) from e


# -------------------------------------------------------------------------
# Discovery & service phase
# -------------------------------------------------------------------------


def add_endpoint_definitions(services: ServiceCollection, *scan_markers: ScanMarker) -> None:
    """
    Discover endpoint definitions and let them register their services.

    Definitions may use constructor injection; dependencies are resolved from
    a temporary provider built from the registrations made before this call.
    Every definition is constructed before any define_services() runs. The
    temporary provider is closed before returning.

    Args:
        services: The service collection to add services to
        *scan_markers: Modules, classes, dotted module names or EntryPointGroups
            bounding the search

    Raises:
        InvalidArgumentError: If services is None, or scan_markers is empty or
            contains None or an unsupported marker; checked before any import
        ConfigurationError: If a marker cannot be imported, or a definition
            cannot be instantiated or fails in define_services()
    """
    if services is None:
        raise InvalidArgumentError("Service collection cannot be None.", param_name="services")
    if not scan_markers or any(marker is None for marker in scan_markers):
        raise InvalidArgumentError("Scan markers cannot be None or empty.", param_name="scan_markers")
    for marker in scan_markers:
        if not isinstance(marker, _SCAN_MARKER_TYPES):
            raise _unsupported_marker(marker)

    definition_types = discover_endpoint_definition_types(*scan_markers)
    if not definition_types:
        return

    with services.build_service_provider() as provider:
        logger = _logger_from(provider)
        logger.debug(
            "Discovered %d endpoint definition(s): %s",
            len(definition_types),
            ", ".join(qualified_name(t) for t in definition_types),
        )

        definitions = [_instantiate(provider, t) for t in definition_types]

        for definition in definitions:
            try:
                definition.define_services(services)
            except Exception as e:
                raise ConfigurationError(
                    f"Failed to define services for {qualified_name(definition)}.",
                    definition_type=qualified_name(definition),
                    hook="define_services",
                    cause=e,
                ) from e

        if services.contains(EndpointDefinitionRegistry):
            logger.warning(
                "Endpoint definitions were already added; the latest registry replaces the earlier one"
            )

        services.add_singleton(
            EndpointDefinitionRegistry,
            instance=EndpointDefinitionRegistry(definitions),
        )
        logger.info("Registered services for %d endpoint definition(s)", len(definitions))


def _instantiate(provider: ServiceProvider, cls: type[D]) -> D:
    try:
        return create_instance(provider, cls)
    except Exception as e:
        raise ConfigurationError(
            f"Failed to create an instance of {qualified_name(cls)}. "
            "Ensure the class has a usable constructor and all dependencies are registered.",
            definition_type=qualified_name(cls),
            hook="__init__",
            cause=e,
        ) from e


# -------------------------------------------------------------------------
# Route registration phase
# -------------------------------------------------------------------------


def use_endpoint_definitions(application: WebApplication, environment: HostEnvironment) -> None:
    """
    Configure endpoints by calling define_endpoints() on every registered definition.

    Definitions run one at a time, in registry order: route table mutation is
    not thread-safe. The first failure stops the pass.

    Args:
        application: The built application to add routes to
        environment: The hosting environment

    Raises:
        InvalidArgumentError: If application or environment is None
        ConfigurationError: If a definition fails in define_endpoints()
    """
    if application is None:
        raise InvalidArgumentError("Application cannot be None.", param_name="application")
    if environment is None:
        raise InvalidArgumentError("Environment cannot be None.", param_name="environment")

    provider = getattr(application, "services", None)
    if provider is None:
        return

    registry = get_endpoint_definitions(provider)
    if registry is None:
        return

    logger = _logger_from(provider)
    for definition in registry:
        try:
            definition.define_endpoints(application, environment)
        except Exception as e:
            raise ConfigurationError(
                f"Failed to define endpoints for {qualified_name(definition)}.",
                definition_type=qualified_name(definition),
                hook="define_endpoints",
                cause=e,
            ) from e
        logger.debug("Defined endpoints for %s", qualified_name(definition))

    logger.info(
        "Defined endpoints for %d endpoint definition(s) in %s environment",
        len(registry),
        environment.environment_name,
    )


def get_endpoint_definitions(provider: ServiceProvider) -> EndpointDefinitionRegistry | None:
    """Return the published registry, or None if none was published."""
    return provider.try_resolve(EndpointDefinitionRegistry)


def _logger_from(provider: ServiceProvider) -> ILogger:
    from ..services.logging import NullLogger

    return resolve_or_default(provider, ILogger, NullLogger)  # type: ignore[type-abstract]
