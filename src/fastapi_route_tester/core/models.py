"""Data carried between the router and the route assertions.

- RouteExpectation: what a test expects an incoming request to resolve to
- ResolvedRoute: what the router actually resolved, normalized
- GenerationTarget: the routing attributes used to generate an outgoing URL
- Mismatch: the first disagreement found between the two
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from fastapi_route_tester.exceptions import (
    ActionMismatchError,
    AreaMismatchError,
    ArgumentError,
    ControllerMismatchError,
    NoRouteMatchedError,
    RequestNotIgnoredError,
    RouteAssertionError,
    RouteFoundButShouldNotMatchError,
    RouteValueCountMismatchError,
    RouteValueMissingError,
    RouteValueValueMismatchError,
    UnexpectedRouteValueError,
    UrlMismatchError,
)

CONTROLLER_KEY = "controller"
ACTION_KEY = "action"
AREA_KEY = "area"
RESERVED_ROUTE_KEYS = (CONTROLLER_KEY, ACTION_KEY)
AREA_REQUIRED_MESSAGE = (
    "Area cannot be None or empty. If you are testing non-area routes, "
    "leave the area argument out."
)


class _OptionalParameter:
    """Marker for a route parameter that was not supplied."""

    _instance: "_OptionalParameter | None" = None

    def __new__(cls) -> "_OptionalParameter":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "OPTIONAL"


OPTIONAL = _OptionalParameter()


def is_blank(value: str | None) -> bool:
    """Check if a string is None, empty, or whitespace only."""
    return value is None or not str(value).strip()


def require_text(value: str | None, name: str, message: str | None = None) -> str:
    """Return value unchanged, or raise ArgumentError if it is blank."""
    if is_blank(value):
        label = name.capitalize()
        raise ArgumentError(message or f"{label} cannot be None or empty.", argument=name)
    return value  # type: ignore[return-value]


def route_value_map(values: Mapping[str, Any] | None) -> dict[str, Any] | None:
    """Copy caller-supplied route values into an ordered dict.

    None stays None so that "no values expected" can be told apart from
    an empty mapping.
    """
    if values is None:
        return None
    if not isinstance(values, Mapping):
        raise ArgumentError(
            f"Route values must be a mapping of names to values, got {type(values).__name__}",
            argument="values",
        )
    return dict(values)


class MismatchKind(Enum):
    """Which check an assertion failed."""

    NO_ROUTE_MATCHED = "no_route_matched"
    AREA_MISMATCH = "area_mismatch"
    CONTROLLER_MISMATCH = "controller_mismatch"
    ACTION_MISMATCH = "action_mismatch"
    ROUTE_VALUE_COUNT_MISMATCH = "route_value_count_mismatch"
    ROUTE_VALUE_MISSING = "route_value_missing"
    ROUTE_VALUE_VALUE_MISMATCH = "route_value_value_mismatch"
    UNEXPECTED_ROUTE_VALUE = "unexpected_route_value"
    URL_MISMATCH = "url_mismatch"
    ROUTE_FOUND_BUT_SHOULD_NOT_MATCH = "route_found_but_should_not_match"
    REQUEST_NOT_IGNORED = "request_not_ignored"


_MESSAGES: dict[MismatchKind, str] = {
    MismatchKind.NO_ROUTE_MATCHED: 'No matching route was found (for url: "{source}").',
    MismatchKind.AREA_MISMATCH: (
        'Area name mismatch. Expected: "{expected}", but was: "{actual}" (for url: "{source}").'
    ),
    MismatchKind.CONTROLLER_MISMATCH: (
        'Controller name mismatch. Expected: "{expected}", but was: "{actual}" '
        '(for url: "{source}").'
    ),
    MismatchKind.ACTION_MISMATCH: (
        'Action name mismatch. Expected: "{expected}", but was: "{actual}" (for url: "{source}").'
    ),
    MismatchKind.ROUTE_VALUE_COUNT_MISMATCH: (
        "Route values mismatch. Expected: {expected} route values, "
        'but was: {actual} route values (for url: "{source}").'
    ),
    MismatchKind.ROUTE_VALUE_MISSING: (
        'Route values mismatch. Expected route value with key "{key}" was not found '
        '(for url: "{source}").'
    ),
    MismatchKind.ROUTE_VALUE_VALUE_MISMATCH: (
        'Route values mismatch. Expected: route value with key "{key}" and value "{expected}", '
        'but was: route value with key "{key}" and value "{actual}" (for url: "{source}").'
    ),
    MismatchKind.UNEXPECTED_ROUTE_VALUE: (
        'Route values mismatch. Unexpected route value with key "{key}" and value "{actual}" '
        'was found (for url: "{source}").'
    ),
    MismatchKind.URL_MISMATCH: (
        'URL mismatch. Expected: "{expected}", but was: "{actual}" (for route: {source}).'
    ),
    MismatchKind.ROUTE_FOUND_BUT_SHOULD_NOT_MATCH: (
        'A matching route was found (for url: "{source}").'
    ),
    MismatchKind.REQUEST_NOT_IGNORED: 'The request was not ignored (for url: "{source}").',
}


def _display(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass(frozen=True)
class Mismatch:
    """The first disagreement between an expectation and what was resolved.

    Attributes:
        kind: Which check failed.
        expected: The expected value (a count for ROUTE_VALUE_COUNT_MISMATCH).
        actual: The value that was found instead.
        key: Route value name, for the route value kinds.
        source: The request URL or generation target the check ran against.
    """

    kind: MismatchKind
    expected: Any = None
    actual: Any = None
    key: str | None = None
    source: str = ""

    @property
    def message(self) -> str:
        """Human readable description used as the assertion error message."""
        return _MESSAGES[self.kind].format(
            expected=_display(self.expected),
            actual=_display(self.actual),
            key=_display(self.key),
            source=self.source,
        )


@dataclass(frozen=True)
class RouteExpectation:
    """Routing attributes an incoming request is expected to resolve to.

    An area of None means the route must not carry an area at all.
    """

    controller: str
    action: str
    values: Mapping[str, Any] | None = None
    area: str | None = None

    def __post_init__(self) -> None:
        if self.area is not None:
            require_text(self.area, "area", AREA_REQUIRED_MESSAGE)
        require_text(self.controller, "controller")
        require_text(self.action, "action")
        object.__setattr__(self, "values", route_value_map(self.values))


@dataclass(frozen=True)
class ResolvedRoute:
    """Normalized outcome of resolving a simulated request.

    values never contains the controller and action keys, nor parameters
    still holding the OPTIONAL marker.
    """

    controller: Any = None
    action: Any = None
    values: Mapping[str, Any] = field(default_factory=dict)
    area: str | None = None
    is_ignored: bool = False

    @classmethod
    def from_route_values(
        cls,
        route_values: Mapping[str, Any],
        *,
        area: str | None = None,
        is_ignored: bool = False,
    ) -> "ResolvedRoute":
        """Build a ResolvedRoute from the raw values a router matched.

        Args:
            route_values: All values of the matched route, controller and
                action included, defaults merged in.
            area: Area the matched route belongs to, if any.
            is_ignored: Whether the matched route stops routing.

        Example:
            ResolvedRoute.from_route_values(
                {"controller": "products", "action": "show", "id": 42, "page": OPTIONAL}
            )
            -> ResolvedRoute(controller="products", action="show", values={"id": 42})
        """
        values = {
            key: value
            for key, value in route_values.items()
            if key not in RESERVED_ROUTE_KEYS and value is not OPTIONAL
        }
        return cls(
            controller=route_values.get(CONTROLLER_KEY),
            action=route_values.get(ACTION_KEY),
            values=values,
            area=area,
            is_ignored=is_ignored,
        )


@dataclass(frozen=True)
class GenerationTarget:
    """Routing attributes an outgoing URL is generated from."""

    controller: str
    action: str
    values: Mapping[str, Any] | None = None
    area: str | None = None

    def __post_init__(self) -> None:
        if self.area is not None:
            require_text(self.area, "area", AREA_REQUIRED_MESSAGE)
        require_text(self.controller, "controller")
        require_text(self.action, "action")
        object.__setattr__(self, "values", route_value_map(self.values))

    def route_values(self) -> dict[str, Any]:
        """All values handed to URL generation, area injected when set."""
        values: dict[str, Any] = dict(self.values or {})
        if self.area is not None:
            values[AREA_KEY] = self.area
        values[CONTROLLER_KEY] = self.controller
        values[ACTION_KEY] = self.action
        return values

    def describe(self) -> str:
        parts = []
        if self.area is not None:
            parts.append(f"area={self.area!r}")
        parts.append(f"controller={self.controller!r}")
        parts.append(f"action={self.action!r}")
        if self.values:
            parts.append(f"values={dict(self.values)!r}")
        return ", ".join(parts)


_ERRORS_BY_KIND: dict[MismatchKind, type[RouteAssertionError]] = {
    MismatchKind.NO_ROUTE_MATCHED: NoRouteMatchedError,
    MismatchKind.AREA_MISMATCH: AreaMismatchError,
    MismatchKind.CONTROLLER_MISMATCH: ControllerMismatchError,
    MismatchKind.ACTION_MISMATCH: ActionMismatchError,
    MismatchKind.ROUTE_VALUE_COUNT_MISMATCH: RouteValueCountMismatchError,
    MismatchKind.ROUTE_VALUE_MISSING: RouteValueMissingError,
    MismatchKind.ROUTE_VALUE_VALUE_MISMATCH: RouteValueValueMismatchError,
    MismatchKind.UNEXPECTED_ROUTE_VALUE: UnexpectedRouteValueError,
    MismatchKind.URL_MISMATCH: UrlMismatchError,
    MismatchKind.ROUTE_FOUND_BUT_SHOULD_NOT_MATCH: RouteFoundButShouldNotMatchError,
    MismatchKind.REQUEST_NOT_IGNORED: RequestNotIgnoredError,
}


def error_for(mismatch: Mismatch) -> RouteAssertionError:
    """Build the assertion error matching a mismatch kind."""
    return _ERRORS_BY_KIND[mismatch.kind](mismatch)


def raise_for_mismatch(mismatch: Mismatch | None) -> None:
    """Raise the assertion error for a mismatch, or do nothing if there is none."""
    if mismatch is not None:
        raise error_for(mismatch)
