"""Assertions about the URL generated from routing attributes."""

from typing import Any

from fastapi_route_tester.core.models import (
    GenerationTarget,
    Mismatch,
    MismatchKind,
    raise_for_mismatch,
    require_text,
)
from fastapi_route_tester.core.protocols import Router
from fastapi_route_tester.exceptions import RouteAssertionError


class OutgoingRouteAssertion:
    """Checks the URL a set of routing attributes generates.

    URLs are compared exactly, case included. Resolution is forgiving about
    case; generation is not, because the generated text ends up in links.
    """

    def __init__(
        self,
        routes: Any,
        target: GenerationTarget,
        context: Any,
        *,
        router: Router,
    ) -> None:
        self._routes = routes
        self._router = router
        self.target = target
        self.context = context

    def generate(self) -> str | None:
        """Generate the URL for the target through the router."""
        return self._router.generate_url(self.target, self._routes, self.context)

    def should_generate_url(self, expected_url: str) -> None:
        """Assert that the routing attributes generate exactly expected_url.

        Raises:
            ArgumentError: If expected_url is blank.
            UrlMismatchError: If a different URL, or no URL, is generated.
        """
        require_text(expected_url, "expected_url", "Url cannot be None or empty.")

        generated_url = self.generate()
        if generated_url != expected_url:
            raise_for_mismatch(
                Mismatch(
                    MismatchKind.URL_MISMATCH,
                    expected=expected_url,
                    actual=generated_url,
                    source=self.target.describe(),
                )
            )

    def generates_url(self, expected_url: str) -> bool:
        """Return whether the routing attributes generate exactly expected_url.

        Only assertion failures turn into False; a blank expected_url still
        raises ArgumentError.
        """
        try:
            self.should_generate_url(expected_url)
        except RouteAssertionError:
            return False
        return True
