"""Tests for retry module - behavior focused."""

import math

import pytest
from resilient_http.exceptions import (
    ConnectionError,
    InvalidConfigurationError,
    TransportError,
    error_for_status,
)
from resilient_http.retry import (
    RetryConfig,
    RetryStrategy,
    calculate_backoff,
    classify,
    decide,
)


class TestCalculateBackoff:
    """Test backoff calculation behavior."""

    def test_default_strategy_is_constant(self):
        """Without a strategy, every retry waits base_delay."""
        config = RetryConfig(base_delay=0.1)

        delays = [calculate_backoff(attempt, config) for attempt in range(5)]

        assert delays == [0.1] * 5

    def test_exponential_strategy_doubles(self):
        """Exponential strategy: delay = base * 2 ** attempt."""
        config = RetryConfig(base_delay=0.1, strategy=RetryStrategy.EXPONENTIAL)

        delays = [calculate_backoff(attempt, config) for attempt in range(4)]

        assert delays == pytest.approx([0.1, 0.2, 0.4, 0.8])

    def test_linear_strategy_grows_linearly(self):
        """Linear strategy: delay = base * (attempt + 1)."""
        config = RetryConfig(base_delay=1.0, strategy=RetryStrategy.LINEAR)

        assert calculate_backoff(0, config) == 1.0
        assert calculate_backoff(1, config) == 2.0
        assert calculate_backoff(2, config) == 3.0

    def test_backoff_respects_max_delay(self):
        """Delay never exceeds max_delay config."""
        config = RetryConfig(
            base_delay=1.0, max_delay=5.0, strategy=RetryStrategy.EXPONENTIAL
        )

        assert calculate_backoff(100, config) == 5.0

    def test_backoff_with_jitter_stays_in_range(self):
        """With jitter, delays vary but stay within ±jitter of the base."""
        config = RetryConfig(base_delay=1.0, jitter=0.25)

        delays = [calculate_backoff(2, config) for _ in range(50)]

        assert all(0.75 <= delay <= 1.25 for delay in delays)
        assert len(set(delays)) > 1

    def test_large_constant_delay_is_not_capped(self):
        """A constant delay above a minute is used as given."""
        config = RetryConfig(base_delay=120)

        assert config.max_delay is None
        assert calculate_backoff(0, config) == 120
        assert calculate_backoff(4, config) == 120

    def test_uncapped_exponential_keeps_growing(self):
        """Without max_delay, exponential growth is not trimmed."""
        config = RetryConfig(base_delay=10, strategy=RetryStrategy.EXPONENTIAL)

        assert calculate_backoff(4, config) == 160

    def test_max_delay_equal_to_base_keeps_constant_delay(self):
        """A cap equal to base_delay leaves the constant delay untouched."""
        config = RetryConfig(base_delay=100, max_delay=100)

        assert calculate_backoff(3, config) == 100

    def test_zero_base_delay_gives_zero(self):
        """A zero base delay never waits."""
        config = RetryConfig(base_delay=0, strategy=RetryStrategy.EXPONENTIAL)

        assert calculate_backoff(3, config) == 0


class TestRetryConfig:
    """Test RetryConfig behavior."""

    def test_defaults(self):
        """Defaults are 3 retries, one second apart."""
        config = RetryConfig()

        assert config.max_retries == 3
        assert config.base_delay == 1.0
        assert config.strategy == RetryStrategy.CONSTANT

    def test_is_immutable(self):
        """Config values cannot be changed after creation."""
        config = RetryConfig()

        with pytest.raises(AttributeError):
            config.max_retries = 10

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"max_retries": -1},
            {"base_delay": -0.5},
            {"max_delay": -1},
            {"jitter": 1.5},
            {"jitter": -0.1},
            {"max_retries": 1.5},
            {"max_retries": True},
            {"base_delay": "1"},
            {"strategy": "fibonacci"},
            {"base_delay": math.nan},
            {"base_delay": math.inf},
            {"max_delay": math.nan},
            {"max_delay": math.inf},
            {"jitter": math.nan},
            {"base_delay": 10, "max_delay": 5},
        ],
    )
    def test_rejects_invalid_values(self, kwargs):
        """Out-of-domain values fail fast instead of being clamped."""
        with pytest.raises(InvalidConfigurationError):
            RetryConfig(**kwargs)

    def test_invalid_configuration_is_value_error(self):
        """Callers can catch bad settings as ValueError."""
        with pytest.raises(ValueError):
            RetryConfig(max_retries=-3)

    def test_zero_values_are_allowed(self):
        """Zero retries and zero delay are valid."""
        config = RetryConfig(max_retries=0, base_delay=0)

        assert config.max_retries == 0
        assert config.base_delay == 0

    def test_strategy_accepts_string(self):
        """Strategy names are converted to RetryStrategy."""
        config = RetryConfig(strategy="exponential")

        assert config.strategy is RetryStrategy.EXPONENTIAL

    def test_from_dict_accepts_aliases(self):
        """from_dict understands retries/delay aliases."""
        config = RetryConfig.from_dict({"retries": 2, "delay": 0.1})

        assert config.max_retries == 2
        assert config.base_delay == 0.1

    def test_from_dict_rejects_unknown_keys(self):
        """Unknown options are reported, not ignored."""
        with pytest.raises(InvalidConfigurationError):
            RetryConfig.from_dict({"max_attempts": 2})

    def test_from_dict_rejects_duplicate_keys(self):
        """An option and its alias cannot both be given."""
        with pytest.raises(InvalidConfigurationError):
            RetryConfig.from_dict({"retries": 2, "max_retries": 3})

    def test_from_dict_validates_values(self):
        """Values read from a mapping go through the same validation."""
        with pytest.raises(InvalidConfigurationError):
            RetryConfig.from_dict({"max_retries": -1})

    def test_aggressive_preset_has_more_retries(self):
        """Aggressive preset should have more retries than default."""
        assert RetryConfig.aggressive().max_retries > RetryConfig().max_retries

    def test_conservative_preset_has_fewer_retries(self):
        """Conservative preset should have fewer retries than default."""
        assert RetryConfig.conservative().max_retries < RetryConfig().max_retries

    def test_no_retry_preset_has_zero_retries(self):
        """No retry preset should have zero retries."""
        assert RetryConfig.no_retry().max_retries == 0


class TestClassify:
    """Test error classification."""

    @pytest.mark.parametrize("status", [400, 401, 403, 404, 409, 422, 429, 499])
    def test_client_errors_are_final(self, status):
        """4xx statuses other than 408 are not retried."""
        assert classify(error_for_status(status)) is False

    @pytest.mark.parametrize("status", [408, 500, 502, 503, 504, 599])
    def test_timeouts_and_server_errors_are_retried(self, status):
        """408 and 5xx statuses are retried."""
        assert classify(error_for_status(status)) is True

    def test_missing_status_is_retried(self):
        """A connection failure has no status and is retried."""
        assert classify(ConnectionError()) is True

    def test_plain_transport_error_without_status_is_retried(self):
        """Any error without a status code is retryable."""
        assert classify(TransportError("socket closed")) is True


class TestDecide:
    """Test retry decisions."""

    def test_retries_within_budget(self):
        """A retryable failure within budget waits base_delay."""
        config = RetryConfig(max_retries=2, base_delay=0.1)

        decision = decide(error_for_status(500), 1, config)

        assert decision.should_retry is True
        assert decision.wait == 0.1

    def test_stops_when_budget_spent(self):
        """After max_retries + 1 attempts, no more retries."""
        config = RetryConfig(max_retries=2, base_delay=0.1)

        decision = decide(error_for_status(500), 3, config)

        assert decision.should_retry is False

    def test_stops_on_non_retryable_regardless_of_budget(self):
        """A 404 is final even on the first attempt."""
        config = RetryConfig(max_retries=5)

        decision = decide(error_for_status(404), 1, config)

        assert decision.should_retry is False
        assert decision.wait == 0

    def test_zero_retries_never_retries(self):
        """With max_retries=0 even retryable errors are final."""
        decision = decide(error_for_status(503), 1, RetryConfig.no_retry())

        assert decision.should_retry is False

    def test_wait_follows_exponential_strategy(self):
        """The second retry waits twice as long under exponential backoff."""
        config = RetryConfig(
            max_retries=3, base_delay=0.1, strategy=RetryStrategy.EXPONENTIAL
        )

        assert decide(error_for_status(500), 1, config).wait == pytest.approx(0.1)
        assert decide(error_for_status(500), 2, config).wait == pytest.approx(0.2)
