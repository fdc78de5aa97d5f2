r"""Configuration defaults and shared request configuration.

This module provides the default values used by ``HttpRequest`` and a
dataclass-based ``RequestConfig`` that can hold a set of execution
settings and apply them to several requests.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_CONTENT_LOGGING_LIMIT",
    "DEFAULT_NUMBER_OF_RETRIES",
    "DEFAULT_TIMEOUT",
    "USER_AGENT_SUFFIX",
    "RequestConfig",
]

from dataclasses import dataclass, replace
from importlib.metadata import PackageNotFoundError, version
from typing import TYPE_CHECKING, Any

from httpengine.utils.validation import validate_execution_params

if TYPE_CHECKING:
    from httpengine.backoff import BackOffPolicy
    from httpengine.callbacks import CallbackConfig
    from httpengine.handler import UnsuccessfulResponseHandler
    from httpengine.request import HttpRequest


# Default timeout in seconds used by the httpx transport
DEFAULT_TIMEOUT = 10.0

# Default retry budget shared by every retry trigger
# Total transmissions <= number_of_retries + 1
DEFAULT_NUMBER_OF_RETRIES = 10

# Default maximum number of content bytes written to the debug log
DEFAULT_CONTENT_LOGGING_LIMIT = 0x4000

try:
    _VERSION = version("httpengine")
except PackageNotFoundError:  # pragma: no cover
    _VERSION = "0.0.0"

# Appended to every User-Agent header unless suppressed on the request
USER_AGENT_SUFFIX = f"httpengine/{_VERSION} (gzip)"


@dataclass
class RequestConfig:
    """Execution settings that can be shared by several requests.

    Args:
        number_of_retries: The retry budget. Must be >= 0.
        backoff_policy: Optional backoff policy. ``None`` disables backoff.
        unsuccessful_response_handler: Optional unsuccessful response handler.
        follow_redirects: Whether redirect responses are followed.
        retry_on_execute_io_exception: Whether transport I/O failures are
            retried.
        throw_exception_on_execute_error: Whether an unsuccessful final
            response raises ``HttpResponseError``.
        suppress_user_agent_suffix: Whether the engine user agent suffix is
            omitted.
        enable_gzip_content: Whether request content is gzip encoded.
        content_logging_limit: Maximum number of content bytes to log.
            Must be >= 0.
        logging_enabled: Whether the request is logged.
        callbacks: Optional lifecycle callbacks.

    Example:
        ```pycon
        >>> from httpengine.config import RequestConfig
        >>> config = RequestConfig(number_of_retries=3)
        >>> config.number_of_retries
        3
        >>> merged = config.merge(number_of_retries=5, follow_redirects=False)
        >>> merged.number_of_retries, merged.follow_redirects
        (5, False)
        >>> config.number_of_retries  # Original unchanged
        3

        ```
    """

    number_of_retries: int = DEFAULT_NUMBER_OF_RETRIES
    backoff_policy: BackOffPolicy | None = None
    unsuccessful_response_handler: UnsuccessfulResponseHandler | None = None
    follow_redirects: bool = True
    retry_on_execute_io_exception: bool = False
    throw_exception_on_execute_error: bool = True
    suppress_user_agent_suffix: bool = False
    enable_gzip_content: bool = False
    content_logging_limit: int = DEFAULT_CONTENT_LOGGING_LIMIT
    logging_enabled: bool = True
    callbacks: CallbackConfig | None = None

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            ValueError: If any parameter fails validation.
        """
        validate_execution_params(
            number_of_retries=self.number_of_retries,
            content_logging_limit=self.content_logging_limit,
        )

    def merge(self, **overrides: Any) -> RequestConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new ``RequestConfig`` instance with overrides applied.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary format.

        Returns:
            Dictionary with the execution settings, keyed by the
            ``HttpRequest`` attribute names.
        """
        return {
            "number_of_retries": self.number_of_retries,
            "backoff_policy": self.backoff_policy,
            "unsuccessful_response_handler": self.unsuccessful_response_handler,
            "follow_redirects": self.follow_redirects,
            "retry_on_execute_io_exception": self.retry_on_execute_io_exception,
            "throw_exception_on_execute_error": self.throw_exception_on_execute_error,
            "suppress_user_agent_suffix": self.suppress_user_agent_suffix,
            "enable_gzip_content": self.enable_gzip_content,
            "content_logging_limit": self.content_logging_limit,
            "logging_enabled": self.logging_enabled,
            "callbacks": self.callbacks,
        }

    def apply_to(self, request: HttpRequest) -> HttpRequest:
        """Copy the settings onto a request.

        Args:
            request: The request to configure.

        Returns:
            The same request, for chaining.
        """
        for name, value in self.to_dict().items():
            setattr(request, name, value)
        return request
