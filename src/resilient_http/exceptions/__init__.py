"""
Resilient HTTP - Exception Hierarchy.

Custom exceptions for HTTP operations with retry-awareness.
"""

from .base import (
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
    error_for_status,
    is_retryable,
)

__all__ = [
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
    "error_for_status",
    "is_retryable",
]
