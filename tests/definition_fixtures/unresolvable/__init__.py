from endpoint_definitions import IEndpointDefinition

CALLS: list[str] = []


class AValidEndpointDefinition(IEndpointDefinition):
    def define_services(self, services):
        CALLS.append("define_services")

    def define_endpoints(self, app, env):
        pass


class NoParameterlessConstructorEndpointDefinition(IEndpointDefinition):
    def __init__(self, parameter: str) -> None:
        self.parameter = parameter

    def define_services(self, services):
        pass

    def define_endpoints(self, app, env):
        pass
