"""
Retrying HTTP client.

One method per verb, each wrapping a single transport call in the retry executor.
"""

import logging
from typing import Any, Mapping

import httpx

from .base import Method, Transport
from .transport import HttpxTransport
from ..retry import (
    RetryConfig,
    RetryPolicyExecutor,
    RetryStrategy,
    Scheduler,
)
from ..retry.executor import OnRetry

logger = logging.getLogger(__name__)

DEFAULT_MAX_RETRIES = 3
DEFAULT_BASE_DELAY = 1.0


class RetryingHttpClient:
    """
    HTTP client that retries failed requests.

    Features:
    - Retries network failures, timeouts (408) and 5xx responses
    - Fails immediately on other 4xx responses
    - Constant delay between retries unless another strategy is chosen
    """

    def __init__(
        self,
        transport: Transport | None = None,
        *,
        base_url: str = "",
        timeout: float = 30.0,
        scheduler: Scheduler | None = None,
        on_retry: OnRetry | None = None,
        strategy: RetryStrategy = RetryStrategy.CONSTANT,
    ):
        """
        Initialize the client.

        Args:
            transport: Transport to send requests with (default: HttpxTransport)
            base_url: Base URL for the default transport
            timeout: Request timeout in seconds for the default transport
            scheduler: Delay provider shared by all calls
            on_retry: Optional callback(attempt, error, delay) called before each retry
            strategy: Backoff strategy applied to every call
        """
        self.transport = transport or HttpxTransport(base_url=base_url, timeout=timeout)
        self.executor = RetryPolicyExecutor(scheduler=scheduler, on_retry=on_retry)
        self.strategy = strategy

    async def request(
        self,
        method: str,
        url: str,
        options: Mapping[str, Any] | None = None,
        max_retries: int = DEFAULT_MAX_RETRIES,
        base_delay: float = DEFAULT_BASE_DELAY,
    ) -> httpx.Response:
        """
        Send a request, retrying according to the given limits.

        Args:
            method: HTTP verb
            url: Request URL
            options: Passed untouched to the transport
            max_retries: Retries allowed after the first attempt
            base_delay: Seconds to wait before each retry

        Returns:
            The first successful response

        Raises:
            InvalidConfigurationError: max_retries or base_delay is out of range
            TransportError: the final attempt's error
        """
        config = RetryConfig(
            max_retries=max_retries,
            base_delay=base_delay,
            strategy=self.strategy,
        )
        logger.debug(f"[{method} {url}] Sending with max_retries={max_retries}")
        return await self.executor.execute(
            lambda: self.transport.execute(method, url, options),
            config,
        )

    async def get(
        self,
        url: str,
        options: Mapping[str, Any] | None = None,
        max_retries: int = DEFAULT_MAX_RETRIES,
        base_delay: float = DEFAULT_BASE_DELAY,
    ) -> Any:
        """GET `url` and return the decoded JSON body."""
        response = await self.request(Method.GET.value, url, options, max_retries, base_delay)
        return _decode(response)

    async def post(
        self,
        url: str,
        body: Any = None,
        options: Mapping[str, Any] | None = None,
        max_retries: int = DEFAULT_MAX_RETRIES,
        base_delay: float = DEFAULT_BASE_DELAY,
    ) -> Any:
        """POST `body` to `url` and return the decoded JSON body."""
        response = await self.request(
            Method.POST.value, url, _with_body(options, body), max_retries, base_delay
        )
        return _decode(response)

    async def put(
        self,
        url: str,
        body: Any = None,
        options: Mapping[str, Any] | None = None,
        max_retries: int = DEFAULT_MAX_RETRIES,
        base_delay: float = DEFAULT_BASE_DELAY,
    ) -> Any:
        """PUT `body` to `url` and return the decoded JSON body."""
        response = await self.request(
            Method.PUT.value, url, _with_body(options, body), max_retries, base_delay
        )
        return _decode(response)

    async def delete(
        self,
        url: str,
        options: Mapping[str, Any] | None = None,
        max_retries: int = DEFAULT_MAX_RETRIES,
        base_delay: float = DEFAULT_BASE_DELAY,
    ) -> Any:
        """DELETE `url` and return the decoded JSON body."""
        response = await self.request(Method.DELETE.value, url, options, max_retries, base_delay)
        return _decode(response)


def _with_body(options: Mapping[str, Any] | None, body: Any) -> dict[str, Any]:
    """Merge a request body into the options as httpx expects it."""
    merged = dict(options or {})
    if body is None:
        return merged
    if isinstance(body, (str, bytes)):
        merged["content"] = body
    else:
        merged["json"] = body
    return merged


def _decode(response: httpx.Response) -> Any:
    if not response.content:
        return None
    return response.json()
