"""Starlette/FastAPI adapter for route assertions."""

from fastapi_route_tester.fastapi.loader import (
    AreaRegistration,
    AreaRegistrationContext,
    RouteRegistrar,
    RouteTableLoader,
)
from fastapi_route_tester.fastapi.router import StarletteRouter
from fastapi_route_tester.fastapi.routing import IgnoreRoute, MvcRoute, RouteTable, stop_routing
from fastapi_route_tester.fastapi.simulator import StarletteRequestSimulator

__all__ = [
    "AreaRegistration",
    "AreaRegistrationContext",
    "IgnoreRoute",
    "MvcRoute",
    "RouteRegistrar",
    "RouteTable",
    "RouteTableLoader",
    "StarletteRequestSimulator",
    "StarletteRouter",
    "stop_routing",
]
