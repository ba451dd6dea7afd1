"""Route tests for the basic example.

Run with:
    python -m pytest test_routes.py
"""

import pytest

from fastapi_route_tester import RouteTester, UrlMismatchError
from main import build_routes


@pytest.fixture
def tester() -> RouteTester:
    return RouteTester(build_routes())


def test_home(tester: RouteTester) -> None:
    tester.with_incoming_request("/").should_match_route("home", "index")
    tester.with_route_info("Home", "Index").should_generate_url("/")


def test_product(tester: RouteTester) -> None:
    tester.with_incoming_request("products/show/42").should_match_route(
        "products", "show", {"id": 42}
    )
    tester.with_route_info("products", "show", {"id": 42}).should_generate_url("products/show/42")


def test_non_numeric_id_not_routed(tester: RouteTester) -> None:
    tester.with_incoming_request("products/show/abc").should_match_no_route()


def test_admin_area(tester: RouteTester) -> None:
    tester.with_incoming_request("admin/users/edit/7").should_match_area_route(
        "admin", "users", "edit", {"id": 7}
    )
    tester.with_area_route_info("admin", "users", "edit", {"id": 7}).should_generate_url(
        "admin/users/edit/7"
    )


def test_favicon_ignored(tester: RouteTester) -> None:
    tester.with_incoming_request("favicon.ico").should_be_ignored()


def test_generated_urls_are_case_sensitive(tester: RouteTester) -> None:
    with pytest.raises(UrlMismatchError):
        tester.with_route_info("products", "list").should_generate_url("Products/List")
