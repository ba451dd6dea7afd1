"""Basic example demonstrating fastapi-route-tester.

The application registers conventional routes in one place, serves them
with FastAPI, and test_routes.py asserts how they route.

Run with:
    uvicorn main:app --reload

Available endpoints:
    GET /                      - Home/Index
    GET /{controller}          - {controller}/Index
    GET /{controller}/{action} - any action
    GET /admin/{controller}    - admin area
    GET /favicon.ico           - ignored (404)
"""

from fastapi import FastAPI

from fastapi_route_tester import OPTIONAL, AreaRegistration, AreaRegistrationContext, RouteTable


class AdminAreaRegistration(AreaRegistration):
    area_name = "admin"

    def register_area(self, context: AreaRegistrationContext) -> None:
        context.map_route(
            "admin_default",
            "admin/{controller}/{action}/{id}",
            defaults={"action": "Index", "id": OPTIONAL},
        )


class Application:
    def register_routes(self, routes: RouteTable) -> None:
        routes.ignore_route("favicon.ico")
        routes.map_route(
            "default",
            "{controller}/{action}/{id}",
            defaults={"controller": "Home", "action": "Index", "id": OPTIONAL},
            constraints={"id": r"\d+"},
        )


def build_routes() -> RouteTable:
    routes = RouteTable()
    AdminAreaRegistration().register_area(AreaRegistrationContext("admin", routes))
    Application().register_routes(routes)
    return routes


app = FastAPI(title="Basic Example")
app.router.routes.extend(build_routes())
