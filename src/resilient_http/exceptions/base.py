"""
Base exception classes for resilient HTTP operations.

Each transport error exposes a `retryable` flag derived from its status code,
so callers and the retry executor agree on which failures deserve another
attempt.
"""

REQUEST_TIMEOUT = 408


def is_retryable(status_code: int | None) -> bool:
    """
    Classify a status code as retryable or not.

    Client errors (4xx) are final, except 408 Request Timeout. Server errors,
    missing status codes (the request never got an answer) and everything
    else are retryable.
    """
    if status_code is None:
        return True
    return not (400 <= status_code < 500 and status_code != REQUEST_TIMEOUT)


class ResilientHTTPError(Exception):
    """Base exception for all resilient_http errors."""


class InvalidConfigurationError(ResilientHTTPError, ValueError):
    """Raised when retry settings are outside their allowed domain."""


class TransportError(ResilientHTTPError):
    """Raised when a single request attempt fails."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        method: str | None = None,
        url: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.method = method
        self.url = url

    @property
    def retryable(self) -> bool:
        return is_retryable(self.status_code)

    def __str__(self) -> str:
        parts = [self.message]
        if self.method and self.url:
            parts.insert(0, f"[{self.method} {self.url}]")
        if self.status_code:
            parts.append(f"(status: {self.status_code})")
        return " ".join(parts)


class ConnectionError(TransportError):
    """Raised when the server could not be reached. Retryable."""

    def __init__(self, message: str = "Connection failed", **kwargs):
        super().__init__(message, **kwargs)


class TimeoutError(TransportError):
    """Raised when the request or the server timed out. Retryable."""

    def __init__(self, message: str = "Request timed out", **kwargs):
        super().__init__(message, **kwargs)


class ClientError(TransportError):
    """Raised when the server rejects the request with a 4xx status."""

    def __init__(self, message: str = "Client error", **kwargs):
        super().__init__(message, **kwargs)


class AuthenticationError(ClientError):
    """Raised on 401/403. Not retryable."""

    def __init__(self, message: str = "Authentication failed", **kwargs):
        super().__init__(message, **kwargs)


class NotFoundError(ClientError):
    """Raised on 404. Not retryable."""

    def __init__(self, message: str = "Not found", **kwargs):
        super().__init__(message, **kwargs)


class RateLimitError(ClientError):
    """Raised on 429. Not retryable by the default classification."""

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        *,
        retry_after: float | None = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(TransportError):
    """Raised when the server returns a 5xx error. Retryable."""

    def __init__(self, message: str = "Server error", **kwargs):
        super().__init__(message, **kwargs)


def error_for_status(
    status_code: int,
    message: str = "",
    **kwargs,
) -> TransportError:
    """Build the TransportError subclass matching an HTTP status code."""
    if status_code == REQUEST_TIMEOUT:
        return TimeoutError(message or "Request timed out", status_code=status_code, **kwargs)
    if status_code in (401, 403):
        return AuthenticationError(message or "Authentication failed", status_code=status_code, **kwargs)
    if status_code == 404:
        return NotFoundError(message or "Not found", status_code=status_code, **kwargs)
    if status_code == 429:
        return RateLimitError(message or "Rate limit exceeded", status_code=status_code, **kwargs)
    if 400 <= status_code < 500:
        return ClientError(message or "Client error", status_code=status_code, **kwargs)
    if status_code >= 500:
        return ServerError(message or "Server error", status_code=status_code, **kwargs)
    return TransportError(message or f"Unexpected status {status_code}", status_code=status_code, **kwargs)
