"""
Resilient HTTP - Retrying async HTTP requests.

Wraps each outbound request in a retry policy that retries transient
failures, waits between attempts, and gives up with the last error.
"""

from .clients import HttpxTransport, Method, RetryingHttpClient, Transport
from .exceptions import (
    ResilientHTTPError,
    InvalidConfigurationError,
    TransportError,
    ConnectionError,
    TimeoutError,
    ClientError,
    AuthenticationError,
    NotFoundError,
    RateLimitError,
    ServerError,
)
from .retry import (
    AsyncioScheduler,
    RetryConfig,
    RetryPolicyExecutor,
    RetryStrategy,
    async_with_retry,
    calculate_backoff,
    classify,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Clients
    "HttpxTransport",
    "Method",
    "RetryingHttpClient",
    "Transport",
    # Exceptions
    "ResilientHTTPError",
    "InvalidConfigurationError",
    "TransportError",
    "ConnectionError",
    "TimeoutError",
    "ClientError",
    "AuthenticationError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    # Retry
    "AsyncioScheduler",
    "RetryConfig",
    "RetryPolicyExecutor",
    "RetryStrategy",
    "async_with_retry",
    "calculate_backoff",
    "classify",
]
