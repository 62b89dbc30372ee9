"""
Resilient HTTP - Retry Logic.

Status-based retry classification with constant, linear or exponential backoff.
"""

from .config import RetryConfig, RetryStrategy
from .backoff import calculate_backoff
from .policy import RetryDecision, classify, decide
from ..exceptions import is_retryable
from .executor import (
    AsyncioScheduler,
    AttemptState,
    RetryPolicyExecutor,
    Scheduler,
    async_with_retry,
)

__all__ = [
    "RetryConfig",
    "RetryStrategy",
    "calculate_backoff",
    "RetryDecision",
    "classify",
    "is_retryable",
    "decide",
    "AsyncioScheduler",
    "AttemptState",
    "RetryPolicyExecutor",
    "Scheduler",
    "async_with_retry",
]
