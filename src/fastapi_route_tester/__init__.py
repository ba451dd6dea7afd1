"""Route assertions for FastAPI and Starlette route tables."""

# Primary API: the main entry point
from fastapi_route_tester.tester import RouteTester

# Core types: for custom routers and type checking
from fastapi_route_tester.core.incoming import IncomingRouteAssertion, check_incoming
from fastapi_route_tester.core.models import (
    OPTIONAL,
    GenerationTarget,
    Mismatch,
    MismatchKind,
    ResolvedRoute,
    RouteExpectation,
)
from fastapi_route_tester.core.outgoing import OutgoingRouteAssertion
from fastapi_route_tester.core.values import diff_value_sets, scalar_equals

# Exceptions: for error handling
from fastapi_route_tester.exceptions import (
    ActionMismatchError,
    AreaMismatchError,
    ArgumentError,
    ControllerMismatchError,
    NoRouteMatchedError,
    RequestNotIgnoredError,
    RouteAssertionError,
    RouteFoundButShouldNotMatchError,
    RouteTableConfigurationError,
    RouteTesterError,
    RouteValueCountMismatchError,
    RouteValueMissingError,
    RouteValueValueMismatchError,
    UnexpectedRouteValueError,
    UrlMismatchError,
)

# Route tables: the Starlette adapter used by default
from fastapi_route_tester.fastapi import (
    AreaRegistration,
    AreaRegistrationContext,
    IgnoreRoute,
    MvcRoute,
    RouteTable,
)

__all__ = [
    # Primary API
    "RouteTester",
    # Route tables
    "AreaRegistration",
    "AreaRegistrationContext",
    "IgnoreRoute",
    "MvcRoute",
    "OPTIONAL",
    "RouteTable",
    # Core types
    "GenerationTarget",
    "IncomingRouteAssertion",
    "Mismatch",
    "MismatchKind",
    "OutgoingRouteAssertion",
    "ResolvedRoute",
    "RouteExpectation",
    "check_incoming",
    "diff_value_sets",
    "scalar_equals",
    # Exceptions
    "ActionMismatchError",
    "AreaMismatchError",
    "ArgumentError",
    "ControllerMismatchError",
    "NoRouteMatchedError",
    "RequestNotIgnoredError",
    "RouteAssertionError",
    "RouteFoundButShouldNotMatchError",
    "RouteTableConfigurationError",
    "RouteTesterError",
    "RouteValueCountMismatchError",
    "RouteValueMissingError",
    "RouteValueValueMismatchError",
    "UnexpectedRouteValueError",
    "UrlMismatchError",
]

__version__ = "0.1.0"
