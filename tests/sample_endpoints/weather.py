"""Weather endpoints backed by a singleton service."""

from abc import ABC, abstractmethod

from starlette.requests import Request
from starlette.responses import PlainTextResponse

from endpoint_definitions import IEndpointDefinition


class IWeatherService(ABC):
    @abstractmethod
    def get_weather(self) -> str: ...

    @abstractmethod
    def get_weather_for_city(self, city: str) -> str: ...


class WeatherService(IWeatherService):
    def get_weather(self) -> str:
        return "Sunny"

    def get_weather_for_city(self, city: str) -> str:
        return f"Weather in {city}: Cloudy"


async def get_weather(request: Request) -> PlainTextResponse:
    service = request.app.services.resolve(IWeatherService)
    return PlainTextResponse(service.get_weather())


async def get_city_weather(request: Request) -> PlainTextResponse:
    service = request.app.services.resolve(IWeatherService)
    return PlainTextResponse(service.get_weather_for_city(request.path_params["city"]))


class WeatherEndpoints(IEndpointDefinition):
    def define_services(self, services):
        services.add_singleton(IWeatherService, WeatherService)

    def define_endpoints(self, app, env):
        app.map_get("/weather", get_weather)
        app.map_get("/weather/{city}", get_city_weather)
