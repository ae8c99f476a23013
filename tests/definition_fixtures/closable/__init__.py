"""Definition depending on a closable service created by the provider."""

from endpoint_definitions import IEndpointDefinition


class Connection:
    def __init__(self) -> None:
        self.closed = False

    def close(self) -> None:
        self.closed = True


class ConnectionEndpointDefinition(IEndpointDefinition):
    def __init__(self, connection: Connection) -> None:
        self.connection = connection

    def define_services(self, services):
        pass

    def define_endpoints(self, app, env):
        pass
