"""Unit tests for the rate calculator."""

import pytest

from zfsmon.rate import RateCalculator


class TestRateCalculator:
    """Tests for RateCalculator.observe."""

    def test_first_observation_has_no_rate(self):
        """Test that a fresh key returns None."""
        rates = RateCalculator()
        assert rates.observe("ops", 100, 10.0) is None

    def test_rate_from_increase(self):
        """Test value delta divided by elapsed seconds."""
        rates = RateCalculator()
        rates.observe("ops", 1000, 10.0)
        assert rates.observe("ops", 1100, 10.1) == pytest.approx(1000.0)

    def test_identical_timestamp_returns_zero(self):
        """Test that no elapsed time yields exactly 0."""
        rates = RateCalculator()
        rates.observe("ops", 100, 5.0)
        assert rates.observe("ops", 500, 5.0) == 0.0

    def test_backwards_clock_returns_zero(self):
        """Test that a negative time delta yields 0 instead of dividing."""
        rates = RateCalculator()
        rates.observe("ops", 100, 5.0)
        assert rates.observe("ops", 500, 4.0) == 0.0

    def test_counter_decrease_clamped(self):
        """Test that a counter reset never produces a negative rate."""
        rates = RateCalculator()
        rates.observe("ops", 5000, 1.0)
        assert rates.observe("ops", 10, 2.0) == 0.0

    def test_updates_after_clamped_observation(self):
        """Test that the stored point always moves to the latest observation."""
        rates = RateCalculator()
        rates.observe("ops", 5000, 1.0)
        rates.observe("ops", 10, 2.0)
        assert rates.observe("ops", 60, 3.0) == pytest.approx(50.0)

    def test_keys_are_independent(self):
        """Test that histories of different keys do not interfere."""
        rates = RateCalculator()
        rates.observe("a", 0, 0.0)
        assert rates.observe("b", 1000, 1.0) is None
        assert rates.observe("a", 10, 2.0) == pytest.approx(5.0)
        assert rates.observe("b", 1100, 2.0) == pytest.approx(100.0)

    def test_large_counters(self):
        """Test 64-bit sized counters."""
        rates = RateCalculator()
        rates.observe("bytes", 2**64 - 1001, 0.0)
        assert rates.observe("bytes", 2**64 - 1, 2.0) == pytest.approx(500.0)
