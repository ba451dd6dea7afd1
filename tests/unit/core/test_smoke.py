"""Smoke tests to verify basic package structure and imports."""

import fastapi_route_tester


def test_package_imports():
    """Verify the package can be imported."""
    assert fastapi_route_tester is not None


def test_package_has_version():
    """Verify the package exposes a version string."""
    assert isinstance(fastapi_route_tester.__version__, str)
    assert len(fastapi_route_tester.__version__) > 0


def test_version_format():
    """Verify version follows semantic versioning format."""
    parts = fastapi_route_tester.__version__.split(".")
    assert len(parts) >= 3, "Version should have at least major.minor.patch"
    assert all(part.isdigit() for part in parts[:3])
