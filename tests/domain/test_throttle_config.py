"""Tests for ThrottleConfig value object."""

import dataclasses

import pytest

from burstpace.domain import ConfigError, ThrottleConfig


class TestThrottleConfig:
    """Tests for ThrottleConfig."""

    def test_defaults_match_download_example(self):
        """Test default burst and sustained limits."""
        config = ThrottleConfig()
        assert config.enabled is True
        assert config.burst_limit == 50000
        assert config.rate_limit == 15000
        assert config.burst_timeout == 30

    def test_is_immutable(self, throttle_config):
        """Test that config cannot be changed after construction."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            throttle_config.rate_limit = 1

    def test_zero_burst_limit_raises(self):
        """Test that burst_limit of 0 is rejected when enabled."""
        with pytest.raises(ConfigError, match="burst_limit"):
            ThrottleConfig(enabled=True, burst_limit=0, rate_limit=100, burst_timeout=10)

    def test_zero_rate_limit_raises(self):
        """Test that rate_limit of 0 is rejected when enabled."""
        with pytest.raises(ConfigError, match="rate_limit"):
            ThrottleConfig(enabled=True, burst_limit=100, rate_limit=0, burst_timeout=10)

    def test_negative_limits_raise(self):
        """Test that negative limits are rejected when enabled."""
        with pytest.raises(ConfigError):
            ThrottleConfig(burst_limit=-1)
        with pytest.raises(ConfigError):
            ThrottleConfig(rate_limit=-1)

    def test_negative_burst_timeout_raises(self):
        """Test that a negative burst timeout is rejected."""
        with pytest.raises(ConfigError, match="burst_timeout"):
            ThrottleConfig(burst_timeout=-1)

    def test_zero_burst_timeout_allowed(self):
        """Test that burst_timeout of 0 is valid (burst skipped)."""
        config = ThrottleConfig(burst_timeout=0)
        assert config.burst_timeout == 0

    def test_non_integer_limit_raises(self):
        """Test that float and bool limits are rejected."""
        with pytest.raises(ConfigError, match="integer"):
            ThrottleConfig(burst_limit=1.5)
        with pytest.raises(ConfigError, match="integer"):
            ThrottleConfig(rate_limit=True)

    def test_config_error_is_value_error(self):
        """Test that ConfigError can be caught as ValueError."""
        with pytest.raises(ValueError):
            ThrottleConfig(rate_limit=0)

    @pytest.mark.parametrize(
        ("burst_limit", "rate_limit", "burst_timeout"),
        [(0, 0, 0), (-5, -5, -5), (0, 100, -1)],
    )
    def test_disabled_accepts_any_values(self, burst_limit, rate_limit, burst_timeout):
        """Test that a disabled config is never validated."""
        config = ThrottleConfig(
            enabled=False,
            burst_limit=burst_limit,
            rate_limit=rate_limit,
            burst_timeout=burst_timeout,
        )
        assert config.enabled is False

    def test_disabled_factory(self):
        """Test the passthrough factory."""
        assert ThrottleConfig.disabled().enabled is False

    def test_active_rate_cutover(self, throttle_config):
        """Test hard cutover at burst_timeout."""
        assert throttle_config.active_rate(0) == 50000
        assert throttle_config.active_rate(29.999) == 50000
        assert throttle_config.active_rate(30) == 15000
        assert throttle_config.active_rate(30.001) == 15000

    def test_equal_configs_compare_equal(self):
        """Test value semantics."""
        assert ThrottleConfig(rate_limit=10) == ThrottleConfig(rate_limit=10)
