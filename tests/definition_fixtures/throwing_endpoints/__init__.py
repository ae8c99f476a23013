from endpoint_definitions import IEndpointDefinition

CALLS: list[str] = []


class AThrowsOnDefineEndpointsEndpointDefinition(IEndpointDefinition):
    def define_services(self, services):
        pass

    def define_endpoints(self, app, env):
        CALLS.append(type(self).__name__)
        raise RuntimeError("Test exception in define_endpoints")


class BAfterThrowingEndpointDefinition(IEndpointDefinition):
    def define_services(self, services):
        pass

    def define_endpoints(self, app, env):
        CALLS.append(type(self).__name__)
