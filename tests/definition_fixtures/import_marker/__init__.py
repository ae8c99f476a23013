"""Imported only by the scan marker validation test; importing it is observable."""

from endpoint_definitions import IEndpointDefinition


class ImportMarkerEndpoints(IEndpointDefinition):
    def define_services(self, services):
        pass

    def define_endpoints(self, app, env):
        pass
