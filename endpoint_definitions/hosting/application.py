"""
Starlette application and builder for endpoint definition hosts.

The builder owns the ServiceCollection endpoint definitions write into;
build() turns it into the application's final ServiceProvider. The usual
startup sequence:

    builder = WebApplicationBuilder()
    builder.add_endpoint_definitions(my_api.endpoints)
    app = builder.build()
    app.use_endpoint_definitions()
"""

from __future__ import annotations

import inspect
from collections.abc import AsyncIterator, Callable, Sequence
from contextlib import asynccontextmanager
from typing import Any

from starlette.applications import Starlette
from starlette.routing import Route

from ..core.container import ServiceCollection, ServiceProvider
from ..core.di import resolve_or_default
from ..core.interfaces.logger import ILogger
from ..core.registry import (
    EndpointDefinitionRegistry,
    ScanMarker,
    add_endpoint_definitions,
    get_endpoint_definitions,
    use_endpoint_definitions,
)
from ..core.settings import AppSettings, load_settings
from ..services.logging import AppLogger, NullLogger
from .environment import HostEnvironment


def _lifespan(inner: Callable[[Any], Any] | None) -> Callable[[WebApplication], Any]:
    if inner is not None and inspect.isasyncgenfunction(inner):
        inner = asynccontextmanager(inner)

    @asynccontextmanager
    async def lifespan(app: WebApplication) -> AsyncIterator[Any]:
        try:
            if inner is None:
                yield None
            else:
                async with inner(app) as state:
                    yield state
        finally:
            logger = app.logger
            app.services.close()
            if isinstance(logger, AppLogger):
                logger.close()

    return lifespan


class WebApplication(Starlette):
    """
    Starlette application carrying its ServiceProvider and environment.

    Route handlers reach services through ``request.app.services``.
    The provider and the host logger are closed when the application shuts
    down. A caller-supplied lifespan runs inside that cleanup.
    """

    def __init__(
        self,
        services: ServiceProvider,
        environment: HostEnvironment,
        **kwargs: Any,
    ) -> None:
        kwargs["lifespan"] = _lifespan(kwargs.get("lifespan"))
        super().__init__(**kwargs)
        self._services = services
        self._environment = environment
        self.state.services = services
        self.state.environment = environment

    @property
    def services(self) -> ServiceProvider:
        return self._services

    @property
    def environment(self) -> HostEnvironment:
        return self._environment

    @property
    def logger(self) -> ILogger:
        return resolve_or_default(self._services, ILogger, NullLogger)  # type: ignore[type-abstract]

    # -------------------------------------------------------------------------
    # Route mapping
    # -------------------------------------------------------------------------

    def map_route(
        self,
        path: str,
        endpoint: Callable[..., Any],
        methods: Sequence[str] | None = None,
        *,
        name: str | None = None,
        include_in_schema: bool = True,
    ) -> None:
        """Add an HTTP route. methods defaults to GET."""
        self.router.add_route(
            path,
            endpoint,
            methods=list(methods) if methods else ["GET"],
            name=name,
            include_in_schema=include_in_schema,
        )

    def map_get(self, path: str, endpoint: Callable[..., Any], *, name: str | None = None) -> None:
        self.map_route(path, endpoint, ["GET"], name=name)

    def map_post(self, path: str, endpoint: Callable[..., Any], *, name: str | None = None) -> None:
        self.map_route(path, endpoint, ["POST"], name=name)

    def map_put(self, path: str, endpoint: Callable[..., Any], *, name: str | None = None) -> None:
        self.map_route(path, endpoint, ["PUT"], name=name)

    def map_delete(self, path: str, endpoint: Callable[..., Any], *, name: str | None = None) -> None:
        self.map_route(path, endpoint, ["DELETE"], name=name)

    def routes_table(self) -> list[tuple[list[str], str]]:
        """List (methods, path) for every HTTP route, in registration order."""
        table = []
        for route in self.routes:
            if isinstance(route, Route):
                # HEAD is added implicitly alongside GET
                methods = sorted(m for m in (route.methods or ()) if m != "HEAD")
                table.append((methods, route.path))
        return table

    # -------------------------------------------------------------------------
    # Endpoint definitions
    # -------------------------------------------------------------------------

    def use_endpoint_definitions(self, environment: HostEnvironment | None = None) -> WebApplication:
        """Run define_endpoints() on every registered definition."""
        use_endpoint_definitions(self, environment or self._environment)
        return self

    @property
    def endpoint_definitions(self) -> EndpointDefinitionRegistry | None:
        return get_endpoint_definitions(self._services)


class WebApplicationBuilder:
    """
    Collects services and configuration, then builds a WebApplication.

    Registers AppSettings, HostEnvironment and ILogger up front so endpoint
    definitions can receive them through constructor injection.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        environment_name: str | None = None,
    ) -> None:
        """
        Initialize the builder.

        Args:
            settings: Loaded settings (default: load_settings())
            environment_name: Override of the configured environment name
        """
        settings = settings or load_settings()
        if environment_name:
            settings = settings.model_copy(update={"environment": environment_name})

        self.settings = settings
        self.services = ServiceCollection()
        self._environment = HostEnvironment.from_settings(settings)
        self._built = False

        self.services.add_singleton(AppSettings, instance=settings)
        self.services.add_singleton(HostEnvironment, instance=self._environment)
        logger = AppLogger.from_config(settings.logging)
        if settings.config_error:
            logger.warning(settings.config_error)
        self.services.add_singleton(ILogger, instance=logger)

    @property
    def environment(self) -> HostEnvironment:
        return self._environment

    @environment.setter
    def environment(self, value: HostEnvironment) -> None:
        self.services.remove_all(HostEnvironment)
        self.services.add_singleton(HostEnvironment, instance=value)
        self._environment = value

    def add_endpoint_definitions(self, *scan_markers: ScanMarker) -> WebApplicationBuilder:
        """Discover endpoint definitions and register their services."""
        add_endpoint_definitions(self.services, *scan_markers)
        return self

    def build(self, **kwargs: Any) -> WebApplication:
        """
        Build the application.

        Keyword arguments are passed to Starlette (middleware,
        exception_handlers, ...).

        Raises:
            RuntimeError: If the builder was already built
        """
        if self._built:
            raise RuntimeError("WebApplicationBuilder.build() can only be called once.")
        self._built = True

        kwargs.setdefault("debug", self.settings.debug)
        return WebApplication(
            self.services.build_service_provider(),
            self._environment,
            **kwargs,
        )


def create_application(
    *scan_markers: ScanMarker,
    settings: AppSettings | None = None,
    environment_name: str | None = None,
) -> WebApplication:
    """
    Build an application from scan markers in one call.

    Runs the full startup sequence: discover definitions, register their
    services, build the application, then register their endpoints.
    """
    builder = WebApplicationBuilder(settings, environment_name=environment_name)
    builder.add_endpoint_definitions(*scan_markers)
    app = builder.build()
    app.use_endpoint_definitions()
    return app
