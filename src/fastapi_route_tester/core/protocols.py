"""Contracts the assertions need from their collaborators.

The assertions never match URL patterns themselves. A Router resolves
requests and generates URLs, a RequestSimulator builds the request it
resolves, and a RouteTableLoader fills a route table from an application's
registration code.
"""

from collections.abc import Sized
from typing import Any, Protocol

from fastapi_route_tester.core.models import GenerationTarget, ResolvedRoute


class Router(Protocol):
    """Resolves requests against, and generates URLs from, a route table."""

    def resolve(self, routes: Any, request: Any) -> ResolvedRoute | None:
        """Return the route the request resolves to, or None if nothing matches."""
        ...

    def generate_url(self, target: GenerationTarget, routes: Any, context: Any) -> str | None:
        """Return the URL the routing attributes generate, or None if no route fits."""
        ...


class RequestSimulator(Protocol):
    """Builds simulated requests without a running server."""

    def build_context(self, url: str | None = None, method: str = "GET") -> Any:
        """Build a request for url, or a bare request context when url is None."""
        ...


class RouteTableLoader(Protocol):
    """Fills a route table from an application's registration entry point."""

    def populate(self, entry_point: Any) -> Sized:
        ...
