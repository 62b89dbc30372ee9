"""
Base transport interface.

Defines the single capability the retrying client needs from the network layer.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Mapping

import httpx


class Method(str, Enum):
    """HTTP verbs exposed by the retrying client."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class Transport(ABC):
    """
    Abstract base class for transports.

    A transport performs exactly one network call per `execute` and reports
    failures as TransportError. It must be safe to call concurrently.
    """

    @abstractmethod
    async def execute(
        self,
        method: str,
        url: str,
        options: Mapping[str, Any] | None = None,
    ) -> httpx.Response:
        """
        Perform one request.

        Args:
            method: HTTP verb
            url: Absolute URL, or a path relative to the transport's base URL
            options: Extra request arguments (headers, params, json, ...), passed through as-is

        Returns:
            The successful response

        Raises:
            TransportError: The request failed or returned an error status
        """
        ...
