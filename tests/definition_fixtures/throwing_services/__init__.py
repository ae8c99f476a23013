from endpoint_definitions import IEndpointDefinition


class ThrowsOnDefineServicesEndpointDefinition(IEndpointDefinition):
    def define_services(self, services):
        raise RuntimeError("Test exception in define_services")

    def define_endpoints(self, app, env):
        pass
