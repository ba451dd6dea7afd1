"""Assertions about how an incoming request is routed."""

from collections.abc import Mapping
from typing import Any

from fastapi_route_tester.core.models import (
    AREA_REQUIRED_MESSAGE,
    Mismatch,
    MismatchKind,
    ResolvedRoute,
    RouteExpectation,
    raise_for_mismatch,
    require_text,
)
from fastapi_route_tester.core.protocols import Router
from fastapi_route_tester.core.values import diff_value_sets, scalar_equals


def normalize_url(url: str) -> str:
    """Convert a URL into the application-relative form the router expects.

    Examples:
        "~/products" -> "~/products"
        "/products" -> "~/products"
        "products" -> "~/products"
    """
    if url.startswith("~/"):
        return url

    if url.startswith("/"):
        return "~" + url

    return "~/" + url


def check_incoming(
    resolved: ResolvedRoute | None,
    expectation: RouteExpectation,
    *,
    url: str,
) -> Mismatch | None:
    """Compare a resolved route to an expectation.

    Checks run in a fixed order and stop at the first disagreement: route
    found, area, controller, action, then route values. When the
    expectation names no area, a resolved route that carries one is a
    mismatch, so area routes can only pass through an area expectation.

    Args:
        resolved: What the router resolved, or None if nothing matched.
        expectation: What the test expects.
        url: The literal request URL, for the mismatch description.

    Returns:
        The first Mismatch found, or None when the route matches.
    """
    if resolved is None:
        return Mismatch(MismatchKind.NO_ROUTE_MATCHED, source=url)

    if expectation.area is not None:
        if not scalar_equals(resolved.area, expectation.area):
            return Mismatch(
                MismatchKind.AREA_MISMATCH,
                expected=expectation.area,
                actual=resolved.area,
                source=url,
            )
    elif resolved.area is not None:
        return Mismatch(
            MismatchKind.AREA_MISMATCH,
            expected=None,
            actual=resolved.area,
            source=url,
        )

    if not scalar_equals(expectation.controller, resolved.controller):
        return Mismatch(
            MismatchKind.CONTROLLER_MISMATCH,
            expected=expectation.controller,
            actual=resolved.controller,
            source=url,
        )

    if not scalar_equals(expectation.action, resolved.action):
        return Mismatch(
            MismatchKind.ACTION_MISMATCH,
            expected=expectation.action,
            actual=resolved.action,
            source=url,
        )

    return diff_value_sets(expectation.values, resolved.values, source=url)


class IncomingRouteAssertion:
    """Checks what a single simulated request resolves to.

    Every check resolves the request again, so repeating a check always
    gives the same outcome.

    Example:
        request = tester.with_incoming_request("/products/show/42")
        request.should_match_route("products", "show", {"id": 42})
    """

    def __init__(self, routes: Any, request: Any, url: str, *, router: Router) -> None:
        self._routes = routes
        self._router = router
        self.request = request
        self.url = url

    def resolve(self) -> ResolvedRoute | None:
        """Resolve the request through the router."""
        return self._router.resolve(self._routes, self.request)

    def should_match_route(
        self,
        expected_controller: str,
        expected_action: str,
        expected_values: Mapping[str, Any] | None = None,
        *,
        area: str | None = None,
    ) -> None:
        """Assert that the request resolves to the given routing attributes.

        Args:
            expected_controller: Controller the request should resolve to.
            expected_action: Action the request should resolve to.
            expected_values: Every other route value the request should
                resolve to. Parameters left at OPTIONAL are not counted.
            area: Area the route should belong to. Leave it out for routes
                outside any area.

        Raises:
            ArgumentError: If controller, action, or a given area is blank.
            RouteAssertionError: The subclass matching the first mismatch.
        """
        expectation = RouteExpectation(
            controller=expected_controller,
            action=expected_action,
            values=expected_values,
            area=area,
        )
        raise_for_mismatch(check_incoming(self.resolve(), expectation, url=self.url))

    def should_match_area_route(
        self,
        expected_area: str,
        expected_controller: str,
        expected_action: str,
        expected_values: Mapping[str, Any] | None = None,
    ) -> None:
        """Assert that the request resolves to a route in the given area."""
        require_text(expected_area, "area", AREA_REQUIRED_MESSAGE)
        self.should_match_route(
            expected_controller,
            expected_action,
            expected_values,
            area=expected_area,
        )

    def should_match_no_route(self) -> None:
        """Assert that no route, not even an ignore route, matches the request."""
        if self.resolve() is not None:
            raise_for_mismatch(
                Mismatch(MismatchKind.ROUTE_FOUND_BUT_SHOULD_NOT_MATCH, source=self.url)
            )

    def should_be_ignored(self) -> None:
        """Assert that the request is matched by an ignore route."""
        resolved = self.resolve()
        if resolved is None or not resolved.is_ignored:
            raise_for_mismatch(Mismatch(MismatchKind.REQUEST_NOT_IGNORED, source=self.url))
