from endpoint_definitions import IEndpointDefinition


class ConstructorRaisesEndpointDefinition(IEndpointDefinition):
    def __init__(self) -> None:
        raise RuntimeError("Test exception in __init__")

    def define_services(self, services):
        pass

    def define_endpoints(self, app, env):
        pass
