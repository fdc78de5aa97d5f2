r"""Unit tests for package initialization and metadata."""

from __future__ import annotations

import httpengine


def test_package_version_is_string() -> None:
    """Test that __version__ is a string."""
    assert isinstance(httpengine.__version__, str)


def test_package_version_format() -> None:
    """Test that __version__ follows semantic versioning."""
    assert "." in httpengine.__version__


def test_all_exports_defined() -> None:
    """Test that all items in __all__ are defined in the module."""
    for name in httpengine.__all__:
        assert hasattr(httpengine, name), f"{name} is in __all__ but not defined in module"


def test_package_execute() -> None:
    """Test a request built from the package namespace."""
    transport = httpengine.MockHttpTransport()
    request = transport.create_request_factory().build_get_request("https://example.com")
    assert isinstance(request, httpengine.HttpRequest)
    assert request.execute().status_code == 200
