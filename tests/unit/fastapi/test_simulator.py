"""Tests for simulated Starlette requests."""

from starlette.requests import Request

from fastapi_route_tester.fastapi.simulator import DEFAULT_HTTP_METHOD, StarletteRequestSimulator


class TestBuildContext:
    def test_default_method_is_get(self):
        assert DEFAULT_HTTP_METHOD == "GET"

    def test_returns_starlette_request(self):
        request = StarletteRequestSimulator().build_context("~/products")

        assert isinstance(request, Request)
        assert request.scope["type"] == "http"

    def test_application_relative_url(self):
        request = StarletteRequestSimulator().build_context("~/products/show/42")

        assert request.url.path == "/products/show/42"
        assert request.method == "GET"

    def test_plain_paths(self):
        simulator = StarletteRequestSimulator()

        assert simulator.build_context("/products").scope["path"] == "/products"
        assert simulator.build_context("products").scope["path"] == "/products"

    def test_query_string_split_off(self):
        request = StarletteRequestSimulator().build_context("~/products?page=2&sort=name")

        assert request.scope["path"] == "/products"
        assert request.query_params["page"] == "2"
        assert request.query_params["sort"] == "name"

    def test_method_uppercased(self):
        request = StarletteRequestSimulator().build_context("~/orders", "post")

        assert request.method == "POST"

    def test_context_without_url(self):
        request = StarletteRequestSimulator().build_context()

        assert request.scope["path"] == "/"
        assert request.method == "GET"

    def test_percent_encoded_path_decoded(self):
        request = StarletteRequestSimulator().build_context("~/files/my%20file")

        assert request.scope["path"] == "/files/my file"
        assert request.scope["raw_path"] == b"/files/my%20file"

    def test_root_path_and_host(self):
        simulator = StarletteRequestSimulator(root_path="/app/", host="example.com")
        request = simulator.build_context("~/products")

        assert request.scope["root_path"] == "/app"
        assert request.scope["path"] == "/app/products"
        assert request.headers["host"] == "example.com"
