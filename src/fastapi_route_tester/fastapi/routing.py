"""Conventional routes on top of Starlette routing.

An MvcRoute maps a pattern such as "{controller}/{action}/{id}" onto
controller, action and route values:
- parameters are Starlette path parameters ({id}, {id:int}, {rest:path})
- trailing parameters with a default may be left out of the URL
- defaults set to OPTIONAL mark a parameter that may be absent entirely
- literal segments match case-insensitively

An IgnoreRoute marks URLs the application does not route at all.
"""

import re
from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from starlette.convertors import Convertor
from starlette.datastructures import QueryParams
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response
from starlette.routing import BaseRoute, Match, Route, compile_path, replace_params
from starlette.types import Scope

from fastapi_route_tester.core.models import AREA_KEY, OPTIONAL
from fastapi_route_tester.core.values import scalar_equals
from fastapi_route_tester.exceptions import ArgumentError

_PARAMETER_SEGMENT = re.compile(r"^\{([a-zA-Z_][a-zA-Z0-9_]*)(:[a-zA-Z_][a-zA-Z0-9_]*)?\}$")


def stop_routing(request: Request) -> Response:
    """Endpoint of ignore routes; requests that reach it were never routed."""
    return PlainTextResponse("Not Found", status_code=404)


def route_values_endpoint(request: Request) -> Response:
    """Default MvcRoute endpoint, echoing the route values it matched."""
    return JSONResponse(
        {
            key: str(value)
            for key, value in request.path_params.items()
            if value is not OPTIONAL
        }
    )


def _route_path(scope: Scope) -> str:
    """Path of the request relative to the application root."""
    path: str = scope["path"]
    root_path: str = scope.get("root_path", "")
    if root_path and path.startswith(root_path):
        path = path[len(root_path) :]
    return path or "/"


def _normalize_pattern(path: str) -> str:
    return "/" + path.strip("/")


def _is_unset(value: Any) -> bool:
    return value is None or value is OPTIONAL or (isinstance(value, str) and value == "")


@dataclass(frozen=True)
class _PathForm:
    """One URL shape of an MvcRoute, with some trailing parameters left out."""

    path: str
    regex: re.Pattern[str]
    path_format: str
    convertors: dict[str, Convertor[Any]]
    omitted: tuple[str, ...]


def _compile_form(path: str, omitted: tuple[str, ...]) -> _PathForm:
    regex, path_format, convertors = compile_path(path)
    return _PathForm(
        path=path,
        regex=re.compile(regex.pattern, re.IGNORECASE),
        path_format=path_format,
        convertors=convertors,
        omitted=omitted,
    )


def _renders(form: _PathForm, params: Mapping[str, Any]) -> bool:
    """Check that every parameter of form is a value its convertor can render."""
    return all(
        re.fullmatch(convertor.regex, str(params[name])) is not None
        for name, convertor in form.convertors.items()
    )


def _compile_forms(path: str, defaults: Mapping[str, Any]) -> list[_PathForm]:
    """Compile the full pattern plus every shorter form defaults allow.

    Examples:
        "/{controller}/{action}/{id}" with defaults for action and id
        -> "/{controller}/{action}/{id}", "/{controller}/{action}", "/{controller}"
    """
    forms = [_compile_form(path, ())]
    segments = path.strip("/").split("/") if path.strip("/") else []
    omitted: tuple[str, ...] = ()

    while segments:
        match = _PARAMETER_SEGMENT.match(segments[-1])
        if match is None or match.group(1) not in defaults:
            break
        omitted = (match.group(1), *omitted)
        segments = segments[:-1]
        forms.append(_compile_form("/" + "/".join(segments), omitted))

    return forms


class MvcRoute(Route):
    """A Starlette route that resolves to controller, action and route values.

    Args:
        path: URL pattern, with or without the leading slash.
        endpoint: Handler used when the route is dispatched in an application.
        name: Route name.
        defaults: Values used when the URL does not supply them. OPTIONAL
            marks a parameter that may be absent.
        constraints: Regular expressions route values must fully match,
            ignoring case.
        methods: HTTP methods the route accepts; all methods when None.
        area: Area the route belongs to.

    Example:
        MvcRoute(
            "{controller}/{action}/{id}",
            defaults={"controller": "Home", "action": "Index", "id": OPTIONAL},
            constraints={"id": r"\\d+"},
        )
    """

    def __init__(
        self,
        path: str,
        endpoint: Callable[..., Any] = route_values_endpoint,
        *,
        name: str | None = None,
        defaults: Mapping[str, Any] | None = None,
        constraints: Mapping[str, str] | None = None,
        methods: Sequence[str] | None = None,
        area: str | None = None,
    ) -> None:
        path = _normalize_pattern(path)
        super().__init__(path, endpoint, methods=list(methods) if methods else None, name=name)
        if not methods:
            # Starlette limits function endpoints to GET by default
            self.methods = None
        self.defaults: dict[str, Any] = dict(defaults or {})
        self.constraints: dict[str, str] = dict(constraints or {})
        self.area = area
        self._forms = _compile_forms(path, self.defaults)
        self.parameter_names: tuple[str, ...] = tuple(self._forms[0].convertors)

    def __repr__(self) -> str:
        area = f", area={self.area!r}" if self.area else ""
        return f"{type(self).__name__}(path={self.path!r}, name={self.name!r}{area})"

    def matches(self, scope: Scope) -> tuple[Match, Scope]:
        if scope["type"] != "http":
            return Match.NONE, {}

        route_path = _route_path(scope)
        if route_path != "/":
            route_path = route_path.rstrip("/")

        for form in self._forms:
            match = form.regex.match(route_path)
            if match is None:
                continue

            matched = {
                key: form.convertors[key].convert(value)
                for key, value in match.groupdict().items()
            }
            values = {**self.defaults, **matched}
            if not self._satisfies_constraints(values):
                return Match.NONE, {}

            path_params = dict(scope.get("path_params", {}))
            path_params.update(values)
            child_scope = {"endpoint": self.endpoint, "path_params": path_params}
            if self.methods and scope["method"] not in self.methods:
                return Match.PARTIAL, child_scope
            return Match.FULL, child_scope

        return Match.NONE, {}

    def generate(self, values: Mapping[str, Any]) -> str | None:
        """Generate the virtual path for the given route values.

        Returns the path without a leading slash, with values that are not
        part of the pattern appended as a query string. Returns None when
        the route cannot produce a URL for these values.
        """
        if not scalar_equals(values.get(AREA_KEY), self.area):
            return None

        supplied = {
            key: value
            for key, value in values.items()
            if not _is_unset(value)
        }

        params: dict[str, Any] = {}
        for name in self.parameter_names:
            if name in supplied:
                params[name] = supplied[name]
            elif name not in self.defaults:
                return None
            elif self.defaults[name] is not OPTIONAL:
                params[name] = self.defaults[name]

        for key, default in self.defaults.items():
            if key in self.parameter_names or default is OPTIONAL:
                continue
            if key in supplied and not scalar_equals(supplied[key], default):
                return None

        if not self._satisfies_constraints(params):
            return None

        form = self._shortest_form(params)
        if form is None or not _renders(form, params):
            return None

        path, _ = replace_params(
            form.path_format,
            form.convertors,
            {name: params[name] for name in form.convertors},
        )
        virtual_path = path.lstrip("/")

        extra = {
            key: str(value)
            for key, value in supplied.items()
            if key not in self.parameter_names and key not in self.defaults and key != AREA_KEY
        }
        if extra:
            virtual_path = f"{virtual_path}?{QueryParams(extra)}"

        return virtual_path

    def _shortest_form(self, params: Mapping[str, Any]) -> _PathForm | None:
        for form in reversed(self._forms):
            if not all(name in params for name in form.convertors):
                continue
            if all(self._can_omit(name, params) for name in form.omitted):
                return form
        return None

    def _can_omit(self, name: str, params: Mapping[str, Any]) -> bool:
        return name not in params or scalar_equals(params[name], self.defaults[name])

    def _satisfies_constraints(self, values: Mapping[str, Any]) -> bool:
        for key, pattern in self.constraints.items():
            value = values.get(key)
            if value is None or value is OPTIONAL:
                continue
            if re.fullmatch(pattern, str(value), re.IGNORECASE) is None:
                return False
        return True


class IgnoreRoute(Route):
    """A route the routing system stops at without dispatching.

    Example:
        IgnoreRoute("{resource}.axd{path_info:path}")
    """

    def __init__(self, path: str, *, methods: Sequence[str] | None = None) -> None:
        super().__init__(
            _normalize_pattern(path),
            stop_routing,
            methods=list(methods) if methods else None,
            include_in_schema=False,
        )
        if not methods:
            self.methods = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self.path!r})"


class RouteTable:
    """Ordered collection of routes under test.

    Earlier routes take precedence. Any Starlette route can be added,
    including the routes of a FastAPI application:

        table = RouteTable(app.routes)
    """

    def __init__(self, routes: Iterable[BaseRoute] | None = None) -> None:
        self.routes: list[BaseRoute] = list(routes or [])

    def __len__(self) -> int:
        return len(self.routes)

    def __iter__(self) -> Iterator[BaseRoute]:
        return iter(self.routes)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.routes!r})"

    def add(self, route: BaseRoute) -> BaseRoute:
        """Append a route and return it."""
        if not isinstance(route, BaseRoute):
            raise ArgumentError(
                f"Expected a Starlette route, got {type(route).__name__}",
                argument="route",
            )
        self.routes.append(route)
        return route

    def map_route(
        self,
        name: str | None,
        path: str,
        *,
        defaults: Mapping[str, Any] | None = None,
        constraints: Mapping[str, str] | None = None,
        methods: Sequence[str] | None = None,
        area: str | None = None,
        endpoint: Callable[..., Any] = route_values_endpoint,
    ) -> MvcRoute:
        """Append a conventional route; see MvcRoute for the arguments."""
        route = MvcRoute(
            path,
            endpoint,
            name=name,
            defaults=defaults,
            constraints=constraints,
            methods=methods,
            area=area,
        )
        self.routes.append(route)
        return route

    def ignore_route(self, path: str, *, methods: Sequence[str] | None = None) -> IgnoreRoute:
        """Append a route whose matches are ignored by the routing system."""
        route = IgnoreRoute(path, methods=methods)
        self.routes.append(route)
        return route
