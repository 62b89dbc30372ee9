"""
httpx transport adapter.

Turns httpx responses and failures into the TransportError hierarchy.
"""

import logging
from typing import Any, Mapping

import httpx

from .base import Transport
from ..exceptions import ConnectionError, RateLimitError, TimeoutError, error_for_status

logger = logging.getLogger(__name__)


class HttpxTransport(Transport):
    """
    Transport backed by httpx.AsyncClient.

    Features:
    - Optional shared client (connection reuse is the caller's business)
    - Status >= 400 raised as the matching TransportError subclass
    - Timeouts and connection failures raised without a status code
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        base_url: str = "",
        timeout: float = 30.0,
    ):
        """
        Initialize the transport.

        Args:
            client: Shared httpx client; a short-lived one is opened per request when omitted
            base_url: Base URL prepended to relative request URLs
            timeout: Request timeout in seconds for per-request clients
        """
        self.client = client
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def execute(
        self,
        method: str,
        url: str,
        options: Mapping[str, Any] | None = None,
    ) -> httpx.Response:
        """Send one request and raise on failure."""
        options = dict(options or {})
        try:
            if self.client is not None:
                response = await self.client.request(method, url, **options)
            else:
                async with httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout) as client:
                    response = await client.request(method, url, **options)

        except httpx.TimeoutException as e:
            raise TimeoutError(
                f"Request timed out: {e}",
                method=method,
                url=url,
            ) from e

        except httpx.TransportError as e:
            raise ConnectionError(
                f"Request failed: {e}",
                method=method,
                url=url,
            ) from e

        if response.status_code >= 400:
            logger.debug(f"[{method} {url}] Got status {response.status_code}")
            error = error_for_status(
                response.status_code,
                response.text or response.reason_phrase,
                method=method,
                url=url,
            )
            if isinstance(error, RateLimitError):
                error.retry_after = _parse_retry_after(response.headers.get("Retry-After"))
            raise error
        return response


def _parse_retry_after(value: str | None) -> float | None:
    """Read a Retry-After header given in seconds. HTTP dates are ignored."""
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        return None
