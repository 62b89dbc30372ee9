"""
Backoff calculation.
"""

import random

from .config import RetryConfig, RetryStrategy


def _raw_delay(retry_index: int, config: RetryConfig) -> float:
    if config.strategy == RetryStrategy.EXPONENTIAL:
        return config.base_delay * (2**retry_index)
    if config.strategy == RetryStrategy.LINEAR:
        return config.base_delay * (retry_index + 1)
    return config.base_delay


def calculate_backoff(retry_index: int, config: RetryConfig) -> float:
    """
    Seconds to wait before a retry.

    The constant strategy always yields `base_delay`. Growing strategies are
    capped at `max_delay` when one is configured; a config never allows a cap
    below `base_delay`, so the cap only trims growth.

    Args:
        retry_index: Zero-based retry number (0 = wait before the first retry)
        config: Retry configuration

    Returns:
        Delay in seconds, jittered by ±`jitter` when set, never negative
    """
    delay = _raw_delay(retry_index, config)
    if config.max_delay is not None and delay > config.max_delay:
        delay = config.max_delay

    if not config.jitter:
        return delay
    spread = delay * config.jitter
    return max(0.0, delay + random.uniform(-spread, spread))
