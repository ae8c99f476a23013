"""A definition whose optional parameter is typed only for type checkers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from endpoint_definitions import IEndpointDefinition, ILogger

if TYPE_CHECKING:
    from decimal import Decimal


class PrecisionEndpointDefinition(IEndpointDefinition):
    def __init__(self, logger: ILogger, precision: Decimal | None = None) -> None:
        self.logger = logger
        self.precision = precision

    def define_services(self, services):
        pass

    def define_endpoints(self, app, env):
        pass
