from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

from httpengine.request import HttpRequest
from httpengine.transport import MockHttpTransport

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_transport() -> MockHttpTransport:
    """Create a mock transport returning empty ``200`` responses."""
    return MockHttpTransport()


@pytest.fixture
def mock_request(mock_transport: MockHttpTransport) -> HttpRequest:
    """Create a ``GET`` request bound to the mock transport."""
    return HttpRequest(mock_transport, "GET", "https://api.example.com/data")


@pytest.fixture
def mock_callback() -> Mock:
    """Create a mock callback function for testing callbacks.

    Returns:
        A Mock object that can be used as a callback function.

    Example:
        >>> def test_callback(mock_callback):
        ...     request.callbacks = CallbackConfig(on_request=mock_callback)
        ...     request.execute()
        ...     mock_callback.assert_called_once()
    """
    return Mock()
