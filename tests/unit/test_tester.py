"""Tests for the RouteTester entry point."""

from typing import Any

import pytest

from fastapi_route_tester import (
    OPTIONAL,
    AreaRegistration,
    AreaRegistrationContext,
    ArgumentError,
    GenerationTarget,
    IncomingRouteAssertion,
    OutgoingRouteAssertion,
    ResolvedRoute,
    RouteTable,
    RouteTableConfigurationError,
    RouteTester,
)
from fastapi_route_tester.fastapi import StarletteRequestSimulator, StarletteRouter


class RecordingSimulator:
    def __init__(self) -> None:
        self.calls: list[tuple[str | None, str]] = []

    def build_context(self, url: str | None = None, method: str = "GET") -> Any:
        self.calls.append((url, method))
        return {"url": url, "method": method}


class FixedRouter:
    def resolve(self, routes: Any, request: Any) -> ResolvedRoute | None:
        return ResolvedRoute(controller="home", action="index")

    def generate_url(self, target: GenerationTarget, routes: Any, context: Any) -> str | None:
        return "fixed"


class ShopAreaRegistration(AreaRegistration):
    area_name = "shop"

    def register_area(self, context: AreaRegistrationContext) -> None:
        context.map_route("shop", "shop/{controller}/{action}", defaults={"action": "Index"})


class TestConstruction:
    def test_none_routes(self):
        with pytest.raises(ArgumentError, match="cannot be None") as exc_info:
            RouteTester(None)
        assert exc_info.value.argument == "routes"

    @pytest.mark.parametrize("routes", [RouteTable(), []])
    def test_empty_routes(self, routes):
        with pytest.raises(ArgumentError, match="There are no routes"):
            RouteTester(routes)

    def test_iterator_of_routes(self, default_routes):
        tester = RouteTester(iter(default_routes))

        assert isinstance(tester.routes, RouteTable)
        assert len(tester.routes) == 3
        tester.with_incoming_request("products/show/42").should_match_route(
            "products", "show", {"id": 42}
        )

    def test_generator_of_routes(self, default_routes):
        tester = RouteTester(route for route in default_routes)

        assert len(tester.routes) == 3

    def test_empty_iterator(self):
        with pytest.raises(ArgumentError, match="There are no routes"):
            RouteTester(iter([]))

    @pytest.mark.parametrize("routes", [object(), 42])
    def test_not_a_collection(self, routes):
        with pytest.raises(ArgumentError, match="must be a collection of routes") as exc_info:
            RouteTester(routes)
        assert exc_info.value.argument == "routes"

    def test_argument_error_is_value_error(self):
        with pytest.raises(ValueError):
            RouteTester(RouteTable())

    def test_default_collaborators(self, default_routes):
        tester = RouteTester(default_routes)

        assert tester.routes is default_routes
        assert isinstance(tester.router, StarletteRouter)
        assert isinstance(tester.simulator, StarletteRequestSimulator)

    def test_custom_collaborators(self, default_routes):
        router = FixedRouter()
        simulator = RecordingSimulator()

        tester = RouteTester(default_routes, router=router, simulator=simulator)

        assert tester.router is router
        assert tester.simulator is simulator


class TestFromRegistration:
    def test_area_registration(self):
        tester = RouteTester.from_registration(ShopAreaRegistration())

        tester.with_incoming_request("shop/cart").should_match_area_route("shop", "cart", "index")

    def test_registration_class(self):
        tester = RouteTester.from_registration(ShopAreaRegistration)

        assert len(tester.routes) == 1

    def test_unsupported_entry_point(self):
        with pytest.raises(ArgumentError):
            RouteTester.from_registration("not an application")

    def test_empty_registration(self):
        class NoRoutes:
            def register_routes(self, routes):
                pass

        with pytest.raises(RouteTableConfigurationError):
            RouteTester.from_registration(NoRoutes())

    def test_custom_loader(self, default_routes):
        class StaticLoader:
            def populate(self, entry_point):
                return default_routes

        tester = RouteTester.from_registration("anything", loader=StaticLoader())

        assert tester.routes is default_routes


class TestWithIncomingRequest:
    def test_returns_incoming_assertion(self, tester):
        assertion = tester.with_incoming_request("products/show/42")

        assert isinstance(assertion, IncomingRouteAssertion)
        assert assertion.url == "products/show/42"

    @pytest.mark.parametrize(
        "url,normalized",
        [
            ("products", "~/products"),
            ("/products", "~/products"),
            ("~/products", "~/products"),
        ],
    )
    def test_simulator_receives_normalized_url(self, default_routes, url, normalized):
        simulator = RecordingSimulator()
        tester = RouteTester(default_routes, router=FixedRouter(), simulator=simulator)

        tester.with_incoming_request(url, "POST")

        assert simulator.calls == [(normalized, "POST")]

    def test_method_defaults_to_get(self, default_routes):
        simulator = RecordingSimulator()
        tester = RouteTester(default_routes, router=FixedRouter(), simulator=simulator)

        tester.with_incoming_request("products")

        assert simulator.calls == [("~/products", "GET")]

    @pytest.mark.parametrize("url", [None, "", "  "])
    def test_blank_url(self, tester, url):
        with pytest.raises(ArgumentError, match="Url cannot be None or empty"):
            tester.with_incoming_request(url)


class TestWithRouteInfo:
    def test_returns_outgoing_assertion(self, tester):
        assertion = tester.with_route_info("home", "about", {"page": 2})

        assert isinstance(assertion, OutgoingRouteAssertion)
        assert assertion.target == GenerationTarget("home", "about", {"page": 2})

    def test_context_built_without_url(self, default_routes):
        simulator = RecordingSimulator()
        tester = RouteTester(default_routes, router=FixedRouter(), simulator=simulator)

        assertion = tester.with_route_info("home", "about")

        assert simulator.calls == [(None, "GET")]
        assert assertion.context == {"url": None, "method": "GET"}

    def test_area_injected(self, tester):
        assertion = tester.with_area_route_info("admin", "users", "edit", {"id": 7})

        assert assertion.target.area == "admin"
        assert assertion.target.route_values()["area"] == "admin"

    def test_no_area_injected(self, tester):
        assertion = tester.with_route_info("home", "about")

        assert "area" not in assertion.target.route_values()

    @pytest.mark.parametrize(
        "controller,action,argument",
        [("", "about", "controller"), ("home", None, "action"), (" ", " ", "controller")],
    )
    def test_blank_controller_or_action(self, tester, controller, action, argument):
        with pytest.raises(ArgumentError) as exc_info:
            tester.with_route_info(controller, action)
        assert exc_info.value.argument == argument

    @pytest.mark.parametrize("area", [None, "", "  "])
    def test_blank_area(self, tester, area):
        with pytest.raises(ArgumentError, match="Area cannot be None or empty"):
            tester.with_area_route_info(area, "users", "edit")

    def test_custom_router_used(self, default_routes):
        tester = RouteTester(default_routes, router=FixedRouter())

        assert tester.with_route_info("home", "about").generates_url("fixed") is True


class TestTableNotModified:
    def test_assertions_leave_table_unchanged(self, tester, default_routes):
        before = list(default_routes)

        tester.with_incoming_request("products/show/42").should_match_route(
            "products", "show", {"id": 42}
        )
        tester.with_route_info("home", "about").should_generate_url("home/about")

        assert list(default_routes) == before
        assert len(default_routes) == 3


def test_optional_exported():
    assert repr(OPTIONAL) == "OPTIONAL"
