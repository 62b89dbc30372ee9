"""
Retry decisions.

Pure functions that turn a failed attempt into a retry/give-up decision.
They hold no state and can be tested without running the attempt loop.
"""

from dataclasses import dataclass

from .backoff import calculate_backoff
from .config import RetryConfig
from ..exceptions import TransportError, is_retryable


@dataclass(frozen=True)
class RetryDecision:
    """Outcome of classifying one failed attempt."""

    should_retry: bool
    wait: float = 0.0


def classify(error: TransportError) -> bool:
    """Return True when the error is worth another attempt."""
    return is_retryable(error.status_code)


def decide(error: TransportError, attempts_made: int, config: RetryConfig) -> RetryDecision:
    """
    Decide what to do after a failed attempt.

    Args:
        error: Error raised by the attempt that just failed
        attempts_made: Attempts executed so far, including the failed one
        config: Retry configuration of the invocation

    Returns:
        RetryDecision with the wait to apply before the next attempt
    """
    if not classify(error):
        return RetryDecision(should_retry=False)
    retries_done = attempts_made - 1
    if retries_done >= config.max_retries:
        return RetryDecision(should_retry=False)
    return RetryDecision(should_retry=True, wait=calculate_backoff(retries_done, config))
