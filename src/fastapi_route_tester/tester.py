"""Entry point binding a route table to incoming and outgoing route assertions."""

import logging
from collections.abc import Iterable, Mapping, Sized
from typing import Any

from fastapi_route_tester.core.incoming import IncomingRouteAssertion, normalize_url
from fastapi_route_tester.core.models import AREA_REQUIRED_MESSAGE, GenerationTarget, require_text
from fastapi_route_tester.core.outgoing import OutgoingRouteAssertion
from fastapi_route_tester.core.protocols import RequestSimulator, Router, RouteTableLoader
from fastapi_route_tester.exceptions import ArgumentError
from fastapi_route_tester.fastapi.loader import RouteTableLoader as DefaultRouteTableLoader
from fastapi_route_tester.fastapi.router import StarletteRouter
from fastapi_route_tester.fastapi.routing import RouteTable
from fastapi_route_tester.fastapi.simulator import DEFAULT_HTTP_METHOD, StarletteRequestSimulator

logger = logging.getLogger(__name__)


class RouteTester:
    """Asserts how a route table routes requests and generates URLs.

    The table is only read, never modified, so one table can back any
    number of testers. Each assertion object it hands out checks a single
    request or a single set of routing attributes.

    Args:
        routes: The route table under test. Iterators of routes are collected
            into a RouteTable.
        router: Resolves requests and generates URLs. Defaults to a
            StarletteRouter.
        simulator: Builds simulated requests. Defaults to a
            StarletteRequestSimulator.

    Raises:
        ArgumentError: If routes is None, empty, or not a collection of routes.

    Example:
        routes = RouteTable()
        routes.map_route(
            "default",
            "{controller}/{action}/{id}",
            defaults={"controller": "Home", "action": "Index", "id": OPTIONAL},
        )
        tester = RouteTester(routes)

        tester.with_incoming_request("products/show/42").should_match_route(
            "products", "show", {"id": 42}
        )
        tester.with_route_info("home", "about").should_generate_url("home/about")
    """

    def __init__(
        self,
        routes: Any,
        *,
        router: Router | None = None,
        simulator: RequestSimulator | None = None,
    ) -> None:
        if routes is None:
            raise ArgumentError("The route table cannot be None.", argument="routes")

        if not isinstance(routes, Sized):
            if not isinstance(routes, Iterable):
                raise ArgumentError(
                    "The route table must be a collection of routes, "
                    f"got {type(routes).__name__}.",
                    argument="routes",
                )
            routes = RouteTable(routes)

        if len(routes) == 0:
            raise ArgumentError("There are no routes in the route table.", argument="routes")

        self.routes = routes
        self.router: Router = router or StarletteRouter()
        self.simulator: RequestSimulator = simulator or StarletteRequestSimulator()

    @classmethod
    def from_registration(
        cls,
        entry_point: Any,
        *,
        loader: RouteTableLoader | None = None,
        router: Router | None = None,
        simulator: RequestSimulator | None = None,
    ) -> "RouteTester":
        """Create a tester for the routes an application registers.

        Args:
            entry_point: An AreaRegistration, an object with a
                register_routes(routes) method, or a class of either.
            loader: Populates the table. Defaults to the Starlette
                RouteTableLoader.
            router: See RouteTester.
            simulator: See RouteTester.

        Raises:
            ArgumentError: If the entry point shape is not supported.
            RouteTableConfigurationError: If no routes were registered.
        """
        loader = loader or DefaultRouteTableLoader()
        routes = loader.populate(entry_point)
        return cls(routes, router=router, simulator=simulator)

    def with_incoming_request(
        self,
        url: str,
        method: str = DEFAULT_HTTP_METHOD,
    ) -> IncomingRouteAssertion:
        """Start an assertion about how a request is routed.

        Args:
            url: Request URL; "~/products", "/products" and "products" are
                equivalent.
            method: HTTP method of the request.

        Raises:
            ArgumentError: If url is blank.
        """
        require_text(url, "url", "Url cannot be None or empty.")

        request = self.simulator.build_context(normalize_url(url), method)
        logger.debug("Created incoming route assertion", extra={"url": url, "method": method})
        return IncomingRouteAssertion(self.routes, request, url, router=self.router)

    def with_route_info(
        self,
        controller: str,
        action: str,
        values: Mapping[str, Any] | None = None,
        *,
        area: str | None = None,
    ) -> OutgoingRouteAssertion:
        """Start an assertion about the URL routing attributes generate.

        Args:
            controller: Controller name.
            action: Action name.
            values: Other route values, by name.
            area: Area name; passed to URL generation as the "area" value.

        Raises:
            ArgumentError: If controller, action, or a given area is blank.
        """
        target = GenerationTarget(controller=controller, action=action, values=values, area=area)
        context = self.simulator.build_context()
        logger.debug("Created outgoing route assertion", extra={"target": target.describe()})
        return OutgoingRouteAssertion(self.routes, target, context, router=self.router)

    def with_area_route_info(
        self,
        area: str,
        controller: str,
        action: str,
        values: Mapping[str, Any] | None = None,
    ) -> OutgoingRouteAssertion:
        """Start an assertion about the URL an area route generates."""
        require_text(area, "area", AREA_REQUIRED_MESSAGE)
        return self.with_route_info(controller, action, values, area=area)
