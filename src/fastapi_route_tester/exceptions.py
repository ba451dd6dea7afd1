"""Exception hierarchy for route assertion errors."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastapi_route_tester.core.models import Mismatch


class RouteTesterError(Exception):
    """Base exception for all route tester errors.

    This is the parent class for all exceptions raised by the
    fastapi-route-tester package. Catching this exception will catch
    both caller misuse and failed assertions.

    Example:
        try:
            tester.with_incoming_request("/users/7").should_match_route("users", "show")
        except RouteTesterError as e:
            logger.error(f"Route check failed: {e}")
    """


class ArgumentError(RouteTesterError, ValueError):
    """Raised when a route tester API is called with invalid arguments.

    This exception is raised immediately at the offending call for:
        - Missing or empty route tables
        - Blank URLs, areas, controllers, actions or expected URLs
        - Route values that are not a mapping
        - Registration entry points of an unsupported type

    Example:
        ArgumentError("Controller cannot be None or empty.", argument="controller")
    """

    def __init__(self, message: str, *, argument: str | None = None) -> None:
        super().__init__(message)
        self.argument = argument


class RouteTableConfigurationError(RouteTesterError):
    """Raised when a registration entry point produced no routes.

    Example:
        RouteTableConfigurationError(
            "There are no routes defined. Make sure you have defined at least one route."
        )
    """


class RouteAssertionError(RouteTesterError, AssertionError):
    """Raised when a route assertion does not hold.

    Subclasses AssertionError so that test runners report it as a failed
    test rather than an error. The mismatch that caused the failure is
    kept on the exception for programmatic inspection.

    Example:
        try:
            tester.with_incoming_request("/products/show/42").should_match_route(
                "products", "show", {"id": 43}
            )
        except RouteAssertionError as e:
            assert e.mismatch.key == "id"
    """

    def __init__(self, mismatch: "Mismatch") -> None:
        super().__init__(mismatch.message)
        self.mismatch = mismatch


class NoRouteMatchedError(RouteAssertionError):
    """Raised when no route matched a request that was expected to match."""


class AreaMismatchError(RouteAssertionError):
    """Raised when the matched route belongs to a different area.

    Also raised when an area route is checked without naming its area.
    """


class ControllerMismatchError(RouteAssertionError):
    """Raised when the matched route resolved to a different controller."""


class ActionMismatchError(RouteAssertionError):
    """Raised when the matched route resolved to a different action."""


class RouteValueCountMismatchError(RouteAssertionError):
    """Raised when route values were expected but none resolved, or vice versa."""


class RouteValueMissingError(RouteAssertionError):
    """Raised when an expected route value key was not resolved."""


class RouteValueValueMismatchError(RouteAssertionError):
    """Raised when a route value resolved with a different value."""


class UnexpectedRouteValueError(RouteAssertionError):
    """Raised when a route value resolved that was not expected."""


class UrlMismatchError(RouteAssertionError):
    """Raised when the generated URL differs from the expected URL."""


class RouteFoundButShouldNotMatchError(RouteAssertionError):
    """Raised when a route matched a request that was expected to match nothing."""


class RequestNotIgnoredError(RouteAssertionError):
    """Raised when a request was expected to be ignored by the routing system."""
