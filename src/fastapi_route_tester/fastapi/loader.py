"""Route table loading from an application's route registration code.

Two registration shapes are supported:
- an AreaRegistration subclass, which registers the routes of one area
- any object with a register_routes(routes) method, which registers the
  application's global routes
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping, Sequence
from typing import Any, Protocol, runtime_checkable

from fastapi_route_tester.exceptions import ArgumentError, RouteTableConfigurationError
from fastapi_route_tester.fastapi.routing import MvcRoute, RouteTable, route_values_endpoint

logger = logging.getLogger(__name__)


class AreaRegistrationContext:
    """Handed to AreaRegistration.register_area; maps routes into one area."""

    def __init__(self, area_name: str, routes: RouteTable) -> None:
        self.area_name = area_name
        self.routes = routes

    def map_route(
        self,
        name: str | None,
        path: str,
        *,
        defaults: Mapping[str, Any] | None = None,
        constraints: Mapping[str, str] | None = None,
        methods: Sequence[str] | None = None,
        endpoint: Callable[..., Any] = route_values_endpoint,
    ) -> MvcRoute:
        """Append a conventional route belonging to this area."""
        return self.routes.map_route(
            name,
            path,
            defaults=defaults,
            constraints=constraints,
            methods=methods,
            area=self.area_name,
            endpoint=endpoint,
        )


class AreaRegistration(ABC):
    """Registers the routes of one area of an application.

    Example:
        class AdminAreaRegistration(AreaRegistration):
            area_name = "admin"

            def register_area(self, context):
                context.map_route(
                    "admin_default",
                    "admin/{controller}/{action}/{id}",
                    defaults={"action": "Index", "id": OPTIONAL},
                )
    """

    @property
    @abstractmethod
    def area_name(self) -> str:
        ...

    @abstractmethod
    def register_area(self, context: AreaRegistrationContext) -> None:
        ...


@runtime_checkable
class RouteRegistrar(Protocol):
    """An application object that registers its global routes."""

    def register_routes(self, routes: RouteTable) -> None:
        ...


class RouteTableLoader:
    """Fills a RouteTable from an area registration or a route registrar."""

    def populate(self, entry_point: Any) -> RouteTable:
        """Run the entry point's registration code against a new table.

        Args:
            entry_point: An AreaRegistration or RouteRegistrar instance, or a
                class of either that can be created without arguments.

        Returns:
            The populated RouteTable.

        Raises:
            ArgumentError: If the entry point is neither registration shape.
            RouteTableConfigurationError: If registration added no routes.
        """
        if entry_point is None:
            raise ArgumentError(
                "The registration entry point cannot be None.", argument="entry_point"
            )

        if isinstance(entry_point, type):
            try:
                entry_point = entry_point()
            except TypeError as exc:
                raise ArgumentError(
                    f"The registration entry point {entry_point.__name__} must be creatable "
                    "without arguments.",
                    argument="entry_point",
                ) from exc

        routes = RouteTable()

        if isinstance(entry_point, AreaRegistration):
            area_name = entry_point.area_name
            entry_point.register_area(AreaRegistrationContext(area_name, routes))
        elif isinstance(entry_point, RouteRegistrar):
            entry_point.register_routes(routes)
        else:
            raise ArgumentError(
                "The registration entry point must be an AreaRegistration or provide a "
                f"register_routes(routes) method, got {type(entry_point).__name__}.",
                argument="entry_point",
            )

        if not routes:
            raise RouteTableConfigurationError(
                "There are no routes defined. Make sure you have defined at least one route."
            )

        logger.info(
            "Populated route table",
            extra={"entry_point": type(entry_point).__name__, "route_count": len(routes)},
        )
        return routes
