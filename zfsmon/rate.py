"""
Per-second rates from monotonically increasing counters.

Kernel and zpool counters are cumulative; the collector samples them at
irregular intervals and turns consecutive samples into rates.
"""

from typing import Dict, Optional, Tuple


class RateCalculator:
    """
    Track the last observation of each counter and derive rates.

    Not thread-safe: the owning collector serializes access.
    """

    def __init__(self):
        """Initialize with no observations."""
        self._previous: Dict[str, Tuple[int, float]] = {}

    def observe(self, key: str, value: int, timestamp: float) -> Optional[float]:
        """
        Record an observation and return the rate since the previous one.

        Args:
            key: Metric identifier
            value: Current raw counter value
            timestamp: Observation time in seconds (monotonic clock)

        Returns:
            None for the first observation of a key, 0.0 if no time has
            elapsed or the counter went backwards, otherwise value delta
            divided by elapsed seconds
        """
        previous = self._previous.get(key)
        self._previous[key] = (value, timestamp)

        if previous is None:
            return None

        prev_value, prev_timestamp = previous
        # Counter resets clamp to zero instead of producing a negative rate
        value_delta = max(0, value - prev_value)
        time_delta = timestamp - prev_timestamp
        if time_delta <= 0:
            return 0.0
        return value_delta / time_delta
