"""Shared pytest fixtures for fastapi-route-tester tests."""

import pytest

from fastapi_route_tester import (
    OPTIONAL,
    AreaRegistration,
    AreaRegistrationContext,
    RouteTable,
    RouteTester,
)


class AdminAreaRegistration(AreaRegistration):
    """Registers the admin area used across the tests."""

    area_name = "admin"

    def register_area(self, context: AreaRegistrationContext) -> None:
        context.map_route(
            "admin_default",
            "admin/{controller}/{action}/{id}",
            defaults={"action": "Index", "id": OPTIONAL},
        )


class Application:
    """Application object registering the global routes."""

    def register_routes(self, routes: RouteTable) -> None:
        routes.ignore_route("{resource}.axd{path_info:path}")
        routes.map_route(
            "catalog",
            "catalog/{category}",
            defaults={"controller": "Catalog", "action": "Browse", "page": 1},
        )
        routes.map_route(
            "default",
            "{controller}/{action}/{id}",
            defaults={"action": "Index", "id": OPTIONAL},
        )


@pytest.fixture
def default_routes() -> RouteTable:
    """Return the global route table.

    Contains, in order:
    - an ignore route for "*.axd" resources
    - "catalog/{category}" with non-pattern defaults (controller, action, page)
    - the conventional "{controller}/{action}/{id}" route
    """
    routes = RouteTable()
    Application().register_routes(routes)
    return routes


@pytest.fixture
def area_routes(default_routes: RouteTable) -> RouteTable:
    """Return a table with the admin area routes ahead of the global routes."""
    routes = RouteTable()
    AdminAreaRegistration().register_area(AreaRegistrationContext("admin", routes))
    for route in default_routes:
        routes.add(route)
    return routes


@pytest.fixture
def tester(default_routes: RouteTable) -> RouteTester:
    """Return a RouteTester over the global route table."""
    return RouteTester(default_routes)


@pytest.fixture
def area_tester(area_routes: RouteTable) -> RouteTester:
    """Return a RouteTester over the admin area plus global routes."""
    return RouteTester(area_routes)
