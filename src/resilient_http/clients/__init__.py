"""
Resilient HTTP - Clients.

Transport abstraction and the retrying verb API built on it.
"""

from .base import Method, Transport
from .transport import HttpxTransport
from .http import RetryingHttpClient

__all__ = [
    "Method",
    "Transport",
    "HttpxTransport",
    "RetryingHttpClient",
]
