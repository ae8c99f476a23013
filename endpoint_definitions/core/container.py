"""
Dependency injection container for endpoint definitions.

Uses dependency-injector for DI with support for:
- Singleton and transient lifetimes
- Factory and pre-built instance registration
- Constructor injection driven by type annotations
- Closing the singletons a provider created when the provider is closed

A ServiceCollection is the mutable list of registrations a host and its
endpoint definitions write into. build_service_provider() takes a snapshot
of it; later registrations do not affect providers that were already built.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable, Iterator
from contextlib import ExitStack
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

from dependency_injector import providers

from .di import create_instance
from .exceptions import InvalidArgumentError, ServiceResolutionError

T = TypeVar("T")


def describe_service(service_type: Any) -> str:
    """Readable name for a service key (a class or a typing alias)."""
    if isinstance(service_type, type):
        return f"{service_type.__module__}.{service_type.__qualname__}"
    return repr(service_type)


class ServiceLifetime(str, Enum):
    """How long a resolved service lives."""

    SINGLETON = "singleton"
    TRANSIENT = "transient"


@dataclass(frozen=True)
class ServiceDescriptor:
    """
    A single service registration.

    Exactly one of implementation_type, factory or instance is set.
    Factories receive the ServiceProvider that resolves them.
    """

    service_type: Any
    lifetime: ServiceLifetime
    implementation_type: type | None = None
    factory: Callable[[ServiceProvider], Any] | None = None
    instance: Any = None


class ServiceCollection:
    """
    Ordered, mutable collection of service registrations.

    Registering the same service type twice keeps both descriptors; the
    last one wins when a provider is built.
    """

    def __init__(self, descriptors: Iterable[ServiceDescriptor] = ()) -> None:
        self._descriptors: list[ServiceDescriptor] = list(descriptors)

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def add(self, descriptor: ServiceDescriptor) -> ServiceCollection:
        """Append a pre-built descriptor."""
        self._descriptors.append(descriptor)
        return self

    def add_singleton(
        self,
        service_type: Any,
        implementation: type | None = None,
        *,
        factory: Callable[[ServiceProvider], Any] | None = None,
        instance: Any = None,
    ) -> ServiceCollection:
        """
        Register a singleton service.

        Args:
            service_type: The interface/key the service is resolved by
            implementation: Concrete class, constructed with injection on first resolve
            factory: Callable receiving the ServiceProvider (for lazy init)
            instance: Pre-created object, returned as-is

        With none of the three given, service_type is its own implementation.

        Returns:
            The collection, for chaining
        """
        return self.add(
            _make_descriptor(
                service_type,
                ServiceLifetime.SINGLETON,
                implementation=implementation,
                factory=factory,
                instance=instance,
            )
        )

    def add_transient(
        self,
        service_type: Any,
        implementation: type | None = None,
        *,
        factory: Callable[[ServiceProvider], Any] | None = None,
    ) -> ServiceCollection:
        """
        Register a transient service (new instance per resolve).

        Args:
            service_type: The interface/key the service is resolved by
            implementation: Concrete class, constructed with injection on each resolve
            factory: Callable receiving the ServiceProvider

        Returns:
            The collection, for chaining
        """
        return self.add(
            _make_descriptor(
                service_type,
                ServiceLifetime.TRANSIENT,
                implementation=implementation,
                factory=factory,
            )
        )

    def remove_all(self, service_type: Any) -> int:
        """
        Remove every registration of service_type (useful for testing).

        Returns:
            Number of descriptors removed
        """
        before = len(self._descriptors)
        self._descriptors = [d for d in self._descriptors if d.service_type != service_type]
        return before - len(self._descriptors)

    # -------------------------------------------------------------------------
    # Inspection
    # -------------------------------------------------------------------------

    def contains(self, service_type: Any) -> bool:
        """Check whether service_type has at least one registration."""
        return any(d.service_type == service_type for d in self._descriptors)

    def get_descriptor(self, service_type: Any) -> ServiceDescriptor | None:
        """Get the effective (last) registration of service_type, if any."""
        for descriptor in reversed(self._descriptors):
            if descriptor.service_type == service_type:
                return descriptor
        return None

    def __contains__(self, service_type: object) -> bool:
        return self.contains(service_type)

    def __iter__(self) -> Iterator[ServiceDescriptor]:
        return iter(list(self._descriptors))

    def __len__(self) -> int:
        return len(self._descriptors)

    def __repr__(self) -> str:
        return f"ServiceCollection({len(self._descriptors)} registrations)"

    def build_service_provider(self) -> ServiceProvider:
        """Build a provider from the registrations made so far."""
        return ServiceProvider(self._descriptors)


def _make_descriptor(
    service_type: Any,
    lifetime: ServiceLifetime,
    *,
    implementation: type | None = None,
    factory: Callable[[ServiceProvider], Any] | None = None,
    instance: Any = None,
) -> ServiceDescriptor:
    if service_type is None:
        raise InvalidArgumentError("Service type cannot be None.", param_name="service_type")

    given = [v for v in (implementation, factory, instance) if v is not None]
    if len(given) > 1:
        raise InvalidArgumentError(
            "Provide only one of implementation, factory or instance.",
            param_name="implementation",
        )

    if not given:
        if not isinstance(service_type, type):
            raise InvalidArgumentError(
                f"{describe_service(service_type)} is not a class; "
                "provide an implementation, factory or instance.",
                param_name="implementation",
            )
        implementation = service_type

    return ServiceDescriptor(
        service_type=service_type,
        lifetime=lifetime,
        implementation_type=implementation,
        factory=factory,
        instance=instance,
    )


class ServiceProvider:
    """
    Resolves services from a snapshot of a ServiceCollection.

    Singletons constructed by the provider that expose a ``close()`` method
    are closed, newest first, when the provider is closed. Pre-built
    instances and transients belong to whoever created or resolved them.
    The provider can be used as a context manager.
    """

    def __init__(self, descriptors: Iterable[ServiceDescriptor]) -> None:
        self._providers: dict[Any, providers.Provider] = {}
        self._disposables = ExitStack()
        self._local = threading.local()
        self._closed = False

        for descriptor in descriptors:
            self._providers[descriptor.service_type] = self._make_provider(descriptor)

        # A provider always resolves itself
        self._providers[ServiceProvider] = providers.Object(self)

    def _make_provider(self, descriptor: ServiceDescriptor) -> providers.Provider:
        if descriptor.instance is not None:
            return providers.Object(descriptor.instance)

        if descriptor.lifetime is ServiceLifetime.SINGLETON:
            if descriptor.factory is not None:
                return providers.ThreadSafeSingleton(self._call_factory, descriptor.factory, True)
            return providers.ThreadSafeSingleton(self._construct, descriptor.implementation_type, True)

        if descriptor.factory is not None:
            return providers.Factory(self._call_factory, descriptor.factory, False)
        return providers.Factory(self._construct, descriptor.implementation_type, False)

    def _construct(self, implementation: type, owned: bool) -> Any:
        instance = create_instance(self, implementation)
        return self._track(instance) if owned else instance

    def _call_factory(self, factory: Callable[[ServiceProvider], Any], owned: bool) -> Any:
        instance = factory(self)
        return self._track(instance) if owned else instance

    def _track(self, instance: Any) -> Any:
        close = getattr(instance, "close", None)
        if callable(close):
            self._disposables.callback(close)
        return instance

    def _resolution_stack(self) -> list[Any]:
        stack = getattr(self._local, "stack", None)
        if stack is None:
            stack = self._local.stack = []
        return stack

    # -------------------------------------------------------------------------
    # Resolution
    # -------------------------------------------------------------------------

    def resolve(self, service_type: type[T]) -> T:
        """
        Resolve a service by interface.

        Args:
            service_type: The interface/key to resolve

        Returns:
            The registered implementation

        Raises:
            ServiceResolutionError: If nothing is registered, the provider is
                closed, or a circular dependency is detected
        """
        if self._closed:
            raise ServiceResolutionError(
                "Cannot resolve services from a closed provider.",
                service_type=describe_service(service_type),
            )

        provider = self._providers.get(service_type)
        if provider is None:
            raise ServiceResolutionError(
                f"No service registered for: {describe_service(service_type)}",
                service_type=describe_service(service_type),
            )

        stack = self._resolution_stack()
        if service_type in stack:
            chain = " -> ".join(describe_service(t) for t in [*stack, service_type])
            raise ServiceResolutionError(
                f"Circular dependency detected: {chain}",
                service_type=describe_service(service_type),
            )

        stack.append(service_type)
        try:
            return provider()
        finally:
            stack.pop()

    def try_resolve(self, service_type: type[T]) -> T | None:
        """
        Try to resolve a service, returning None if not registered.

        Construction failures of a registered service still raise.
        """
        if service_type not in self._providers:
            return None
        return self.resolve(service_type)

    def is_registered(self, service_type: Any) -> bool:
        """Check if service_type can be resolved from this provider."""
        return service_type in self._providers

    def create_instance(self, cls: type[T]) -> T:
        """Construct cls, injecting its constructor parameters from this provider."""
        return create_instance(self, cls)

    # -------------------------------------------------------------------------
    # Disposal
    # -------------------------------------------------------------------------

    @property
    def is_closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Close owned singletons and drop cached instances. Idempotent."""
        if self._closed:
            return
        self._closed = True
        try:
            self._disposables.close()
        finally:
            for provider in self._providers.values():
                if isinstance(provider, providers.BaseSingleton):
                    provider.reset()

    def __enter__(self) -> ServiceProvider:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
