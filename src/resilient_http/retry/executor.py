"""
Retry executor and decorator.
"""

import asyncio
import functools
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, ParamSpec, Protocol, TypeVar

from .config import RetryConfig
from .policy import classify, decide
from ..exceptions import InvalidConfigurationError, TransportError

logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")

OnRetry = Callable[[int, TransportError, float], None]


class Scheduler(Protocol):
    """Anything able to suspend the caller for a duration."""

    async def after(self, seconds: float) -> None: ...


class AsyncioScheduler:
    """Scheduler backed by asyncio.sleep."""

    async def after(self, seconds: float) -> None:
        await asyncio.sleep(seconds)


@dataclass
class AttemptState:
    """Progress of a single invocation. Never shared between invocations."""

    attempts_made: int = 0
    last_error: TransportError | None = None


class RetryPolicyExecutor:
    """
    Runs an async operation until it succeeds or the retry policy gives up.

    Attempts are strictly sequential. Cancelling the awaiting task stops the
    loop at whichever await it is suspended on, so no further attempt is made.
    """

    def __init__(
        self,
        scheduler: Scheduler | None = None,
        on_retry: OnRetry | None = None,
    ):
        """
        Initialize the executor.

        Args:
            scheduler: Delay provider (default: AsyncioScheduler)
            on_retry: Optional callback(attempt, error, delay) called before each retry
        """
        self.scheduler = scheduler or AsyncioScheduler()
        self.on_retry = on_retry

    async def execute(
        self,
        operation: Callable[[], Awaitable[T]],
        config: RetryConfig,
    ) -> T:
        """
        Run `operation` under `config`.

        Args:
            operation: Zero-argument callable returning a fresh awaitable per attempt
            config: Retry configuration for this invocation

        Returns:
            Result of the first successful attempt

        Raises:
            InvalidConfigurationError: config is not a RetryConfig
            TransportError: the last attempt's error, unchanged
        """
        if not isinstance(config, RetryConfig):
            raise InvalidConfigurationError(
                f"Expected RetryConfig, got {type(config).__name__}"
            )

        state = AttemptState()

        while True:
            state.attempts_made += 1
            logger.debug(f"Attempt {state.attempts_made}/{config.max_retries + 1}")
            try:
                return await operation()
            except TransportError as e:
                state.last_error = e

            decision = decide(state.last_error, state.attempts_made, config)
            if not decision.should_retry:
                self._log_give_up(state, config)
                raise state.last_error

            retry_index = state.attempts_made
            if self.on_retry:
                self.on_retry(retry_index, state.last_error, decision.wait)
            else:
                logger.warning(
                    f"Retry {retry_index}/{config.max_retries}: {state.last_error}, "
                    f"waiting {decision.wait:.1f}s"
                )
            await self.scheduler.after(decision.wait)

    @staticmethod
    def _log_give_up(state: AttemptState, config: RetryConfig) -> None:
        error = state.last_error
        if not classify(error):
            logger.warning(f"Not retrying non-retryable error: {error}")
        else:
            logger.error(
                f"Giving up after {state.attempts_made} attempt(s) "
                f"({config.max_retries} retries): {error}"
            )


def async_with_retry(
    config: RetryConfig | None = None,
    on_retry: OnRetry | None = None,
    scheduler: Scheduler | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]:
    """
    Decorator for async functions with retry logic.

    Args:
        config: Retry configuration (default: RetryConfig())
        on_retry: Optional callback(attempt, error, delay) called before each retry
        scheduler: Delay provider (default: AsyncioScheduler)

    Returns:
        Decorated async function with retry behavior
    """
    if config is None:
        config = RetryConfig()
    executor = RetryPolicyExecutor(scheduler=scheduler, on_retry=on_retry)

    def decorator(func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            return await executor.execute(lambda: func(*args, **kwargs), config)

        return wrapper

    return decorator
