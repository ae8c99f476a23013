"""Definitions using constructor injection."""

from __future__ import annotations

from endpoint_definitions import HostEnvironment, IEndpointDefinition, ILogger


class Clock:
    def now(self) -> str:
        return "12:00"


class ConstructorInjectionEndpointDefinition(IEndpointDefinition):
    def __init__(self, logger: ILogger, environment: HostEnvironment) -> None:
        if logger is None:
            raise ValueError("logger")
        self.logger = logger
        self.environment = environment
        self.logger_injected = True
        self.define_services_called = False
        self.define_endpoints_called = False

    def define_services(self, services):
        self.define_services_called = True
        services.add_singleton(Clock)

    def define_endpoints(self, app, env):
        self.define_endpoints_called = True


class OptionalDependencyEndpointDefinition(IEndpointDefinition):
    def __init__(self, clock: Clock | None = None, retries: int = 3) -> None:
        self.clock = clock
        self.retries = retries

    def define_services(self, services):
        pass

    def define_endpoints(self, app, env):
        pass
