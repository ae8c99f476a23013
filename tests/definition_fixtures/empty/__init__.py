"""A package with no endpoint definitions."""


class NotAnEndpointDefinition:
    def define_services(self, services):
        pass

    def define_endpoints(self, app, env):
        pass
