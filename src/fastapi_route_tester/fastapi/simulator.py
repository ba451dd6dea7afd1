"""Simulated Starlette requests for routing tests.

Builds the ASGI HTTP scope a server would hand to an application, without
a server, a transport or a body.
"""

from urllib.parse import unquote

from starlette.datastructures import URL
from starlette.requests import Request

DEFAULT_HTTP_METHOD = "GET"


class StarletteRequestSimulator:
    """Builds Starlette requests for application-relative URLs.

    Args:
        root_path: Path the application is mounted under.
        host: Host name sent in the Host header.
    """

    def __init__(self, *, root_path: str = "", host: str = "testserver") -> None:
        self.root_path = root_path.rstrip("/")
        self.host = host

    def build_context(self, url: str | None = None, method: str = DEFAULT_HTTP_METHOD) -> Request:
        """Build a request for url, or for the application root when url is None.

        "~/" marks the application root, so "~/products?page=2" becomes a
        request for "/products" with query string "page=2".
        """
        relative = "/" if url is None else url
        if relative.startswith("~"):
            relative = relative[1:]
        if not relative.startswith("/"):
            relative = "/" + relative

        parsed = URL(relative)
        raw_path = self.root_path + parsed.path
        scope = {
            "type": "http",
            "asgi": {"version": "3.0"},
            "http_version": "1.1",
            "method": method.upper(),
            "scheme": "http",
            "server": (self.host, 80),
            "client": ("testclient", 50000),
            "root_path": self.root_path,
            "path": unquote(raw_path),
            "raw_path": raw_path.encode("utf-8"),
            "query_string": parsed.query.encode("utf-8"),
            "headers": [(b"host", self.host.encode("latin-1"))],
        }
        return Request(scope)
