"""Two definitions: A registers service S and route /a, B registers T and /b."""

from starlette.requests import Request
from starlette.responses import PlainTextResponse

from endpoint_definitions import IEndpointDefinition


class ServiceS:
    name = "S"


class ServiceT:
    name = "T"


class AEndpoints(IEndpointDefinition):
    def define_services(self, services):
        services.add_singleton(ServiceS)

    def define_endpoints(self, app, env):
        async def handler(request: Request) -> PlainTextResponse:
            return PlainTextResponse(request.app.services.resolve(ServiceS).name)

        app.map_get("/a", handler)


class BEndpoints(IEndpointDefinition):
    def define_services(self, services):
        services.add_transient(ServiceT)

    def define_endpoints(self, app, env):
        async def handler(request: Request) -> PlainTextResponse:
            return PlainTextResponse(request.app.services.resolve(ServiceT).name)

        app.map_get("/b", handler)
