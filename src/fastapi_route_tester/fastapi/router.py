"""Router adapter resolving simulated requests through Starlette routes.

Walks a route table in order the way Starlette's own Router does, but
instead of dispatching, reports what the first matching route resolved to.
"""

import logging
from collections.abc import Iterable
from typing import Any

from starlette.requests import Request
from starlette.routing import BaseRoute, Match

from fastapi_route_tester.core.models import GenerationTarget, ResolvedRoute
from fastapi_route_tester.fastapi.routing import MvcRoute, stop_routing

logger = logging.getLogger(__name__)


class StarletteRouter:
    """Resolves requests and generates URLs over a table of Starlette routes.

    Resolution takes the first route reporting a full match. A route that
    matches the path but not the HTTP method does not count as a match.

    Only MvcRoute entries generate URLs; ignore routes and plain Starlette
    routes are skipped during generation.
    """

    def resolve(self, routes: Iterable[BaseRoute], request: Request) -> ResolvedRoute | None:
        """Return the route the request resolves to, or None if nothing matches."""
        scope = request.scope

        for route in routes:
            match, child_scope = route.matches(scope)
            if match != Match.FULL:
                continue

            resolved = _resolved_route(route, child_scope)
            logger.debug(
                "Resolved request",
                extra={
                    "method": scope["method"],
                    "path": scope["path"],
                    "route": repr(route),
                    "ignored": resolved.is_ignored,
                },
            )
            return resolved

        logger.debug(
            "No route matched request",
            extra={"method": scope["method"], "path": scope["path"]},
        )
        return None

    def generate_url(
        self,
        target: GenerationTarget,
        routes: Iterable[BaseRoute],
        context: Request,
    ) -> str | None:
        """Generate the URL for the target from the first route that can.

        The URL is the application-relative virtual path ("home/about"),
        prefixed with the context's root path when there is one. The root
        of the application is reported as "/".

        Returns:
            The generated URL, or None if no route can produce one.
        """
        values = target.route_values()

        for route in routes:
            if not isinstance(route, MvcRoute):
                continue

            virtual_path = route.generate(values)
            if virtual_path is None:
                continue

            url = _application_url(virtual_path, context.scope.get("root_path", ""))
            logger.debug(
                "Generated URL",
                extra={"target": target.describe(), "route": repr(route), "url": url},
            )
            return url

        logger.debug("No route generated a URL", extra={"target": target.describe()})
        return None


def _resolved_route(route: BaseRoute, child_scope: dict[str, Any]) -> ResolvedRoute:
    route_values = child_scope.get("path_params", {})

    if child_scope.get("endpoint") is stop_routing:
        return ResolvedRoute.from_route_values(route_values, is_ignored=True)

    area = route.area if isinstance(route, MvcRoute) else None
    return ResolvedRoute.from_route_values(route_values, area=area)


def _application_url(virtual_path: str, root_path: str) -> str:
    if root_path:
        return f"{root_path.rstrip('/')}/{virtual_path}"

    if not virtual_path or virtual_path.startswith("?"):
        return "/" + virtual_path

    return virtual_path
