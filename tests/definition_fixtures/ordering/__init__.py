"""Several definitions recording the order their hooks run in."""

from endpoint_definitions import IEndpointDefinition

CALLS: list[tuple[str, str]] = []


class _Recording(IEndpointDefinition):
    def define_services(self, services):
        CALLS.append(("define_services", type(self).__name__))

    def define_endpoints(self, app, env):
        CALLS.append(("define_endpoints", type(self).__name__))


class ZuluEndpoints(_Recording):
    pass


class AlphaEndpoints(_Recording):
    pass


class MikeEndpoints(_Recording):
    pass
