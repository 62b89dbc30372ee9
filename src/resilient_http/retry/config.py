"""
Retry configuration and strategy definitions.
"""

import math
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Mapping

from ..exceptions import InvalidConfigurationError


class RetryStrategy(str, Enum):
    """Available retry strategies."""

    CONSTANT = "constant"  # delay = base
    LINEAR = "linear"  # delay = base * (attempt + 1)
    EXPONENTIAL = "exponential"  # delay = base * (2 ** attempt)


_ALIASES = {"retries": "max_retries", "delay": "base_delay"}


@dataclass(frozen=True)
class RetryConfig:
    """
    Configuration for retry behavior.

    Attributes:
        max_retries: Retries allowed after the first attempt (default: 3)
        base_delay: Base delay in seconds (default: 1.0)
        max_delay: Cap on grown delays in seconds (default: None = no cap)
        strategy: Backoff strategy to use (default: constant)
        jitter: Jitter factor as fraction of delay (default: 0 = none)
    """

    max_retries: int = 3
    base_delay: float = 1.0
    max_delay: float | None = None
    strategy: RetryStrategy = RetryStrategy.CONSTANT
    jitter: float = 0.0

    def __post_init__(self) -> None:
        if isinstance(self.max_retries, bool) or not isinstance(self.max_retries, int):
            raise InvalidConfigurationError(
                f"max_retries must be an integer, got {self.max_retries!r}"
            )
        if self.max_retries < 0:
            raise InvalidConfigurationError(
                f"max_retries must be >= 0, got {self.max_retries}"
            )
        names = ["base_delay", "jitter"]
        if self.max_delay is not None:
            names.append("max_delay")
        for name in names:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidConfigurationError(f"{name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise InvalidConfigurationError(f"{name} must be finite, got {value}")
            if value < 0:
                raise InvalidConfigurationError(f"{name} must be >= 0, got {value}")
        if self.max_delay is not None and self.base_delay > self.max_delay:
            raise InvalidConfigurationError(
                f"base_delay ({self.base_delay}) exceeds max_delay ({self.max_delay})"
            )
        if self.jitter > 1:
            raise InvalidConfigurationError(
                f"jitter must be between 0 and 1, got {self.jitter}"
            )
        try:
            # Accept plain strings such as "exponential"
            object.__setattr__(self, "strategy", RetryStrategy(self.strategy))
        except ValueError:
            raise InvalidConfigurationError(
                f"Unknown retry strategy: {self.strategy!r}"
            ) from None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RetryConfig":
        """
        Build a config from a plain mapping.

        Accepts `retries` and `delay` as aliases of `max_retries` and
        `base_delay`. Unknown keys are rejected.
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            name = _ALIASES.get(key, key)
            if name not in known:
                raise InvalidConfigurationError(f"Unknown retry option: {key!r}")
            if name in kwargs:
                raise InvalidConfigurationError(f"Retry option given twice: {name!r}")
            kwargs[name] = value
        return cls(**kwargs)

    @classmethod
    def aggressive(cls) -> "RetryConfig":
        """Preset for aggressive retry (more attempts, growing delays)."""
        return cls(
            max_retries=10,
            base_delay=2.0,
            max_delay=120.0,
            strategy=RetryStrategy.EXPONENTIAL,
            jitter=0.25,
        )

    @classmethod
    def conservative(cls) -> "RetryConfig":
        """Preset for conservative retry (fewer attempts, shorter delays)."""
        return cls(
            max_retries=2,
            base_delay=0.5,
            max_delay=10.0,
        )

    @classmethod
    def no_retry(cls) -> "RetryConfig":
        """Preset for no retry (single attempt only)."""
        return cls(max_retries=0)
