r"""Unit tests for callback manager."""

from __future__ import annotations

from unittest.mock import Mock, patch

from httpengine.callbacks import (
    CallbackConfig,
    CallbackManager,
    FailureInfo,
    RequestInfo,
    ResponseInfo,
    RetryInfo,
)
from httpengine.response import HttpResponse

TEST_URL = "https://example.com"


def test_callback_manager_creation() -> None:
    config = CallbackConfig()
    assert CallbackManager(config).callbacks is config


def test_callback_manager_without_config() -> None:
    manager = CallbackManager(None)
    assert manager.callbacks == CallbackConfig()


def test_callback_manager_no_callbacks() -> None:
    manager = CallbackManager(None)
    manager.on_request(TEST_URL, "GET", attempt=0, retries_remaining=3)
    manager.on_retry(TEST_URL, "GET", attempt=0, retries_remaining=2, reason="backoff")
    manager.on_success(TEST_URL, "GET", attempt=0, response=HttpResponse(status_code=200))
    manager.on_failure(TEST_URL, "GET", attempt=0, error=OSError(), status_code=None)


def test_on_request_callback_invoked() -> None:
    mock_callback = Mock()
    manager = CallbackManager(CallbackConfig(on_request=mock_callback))

    manager.on_request(TEST_URL, "GET", attempt=0, retries_remaining=3)

    mock_callback.assert_called_once_with(
        RequestInfo(url=TEST_URL, method="GET", attempt=1, retries_remaining=3)
    )


def test_on_retry_callback_invoked() -> None:
    mock_callback = Mock()
    error = OSError("reset")
    manager = CallbackManager(CallbackConfig(on_retry=mock_callback))

    manager.on_retry(
        TEST_URL, "POST", attempt=1, retries_remaining=4, reason="io_error", error=error
    )

    mock_callback.assert_called_once_with(
        RetryInfo(
            url=TEST_URL,
            method="POST",
            attempt=3,
            retries_remaining=4,
            reason="io_error",
            wait_time=0.0,
            error=error,
            status_code=None,
        )
    )


@patch("time.time", side_effect=[100.0, 102.5])
def test_on_success_callback_invoked(mock_time: Mock) -> None:
    mock_callback = Mock()
    response = HttpResponse(status_code=200)
    manager = CallbackManager(CallbackConfig(on_success=mock_callback))

    manager.on_success(TEST_URL, "GET", attempt=2, response=response)

    mock_callback.assert_called_once_with(
        ResponseInfo(url=TEST_URL, method="GET", attempt=3, response=response, total_time=2.5)
    )
    assert mock_time.call_count == 2


@patch("time.time", side_effect=[100.0, 101.0])
def test_on_failure_callback_invoked(mock_time: Mock) -> None:  # noqa: ARG001
    mock_callback = Mock()
    error = OSError("refused")
    manager = CallbackManager(CallbackConfig(on_failure=mock_callback))

    manager.on_failure(TEST_URL, "GET", attempt=0, error=error, status_code=None)

    mock_callback.assert_called_once_with(
        FailureInfo(
            url=TEST_URL, method="GET", attempt=1, error=error, status_code=None, total_time=1.0
        )
    )
