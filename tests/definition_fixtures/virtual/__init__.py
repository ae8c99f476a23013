"""A definition satisfying the contract by virtual registration."""

from endpoint_definitions import IEndpointDefinition


class PlainEndpoints:
    def __init__(self) -> None:
        self.define_services_called = False

    def define_services(self, services):
        self.define_services_called = True

    def define_endpoints(self, app, env):
        pass


IEndpointDefinition.register(PlainEndpoints)
