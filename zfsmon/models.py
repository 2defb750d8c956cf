"""
Typed metric records produced by one collection cycle.

Records are immutable; a new set is built on every refresh and handed to
the display layer.
"""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Any, Dict, Optional

from .constants import HIT_RATE_EXCELLENT, HIT_RATE_GOOD, HIT_RATE_FAIR


class CacheStatus(Enum):
    """Four-level classification of a cache hit rate."""
    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"

    @classmethod
    def from_hit_rate(cls, hit_rate: float) -> "CacheStatus":
        if hit_rate >= HIT_RATE_EXCELLENT:
            return cls.EXCELLENT
        if hit_rate >= HIT_RATE_GOOD:
            return cls.GOOD
        if hit_rate >= HIT_RATE_FAIR:
            return cls.FAIR
        return cls.POOR

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ArcStats:
    """
    Primary ARC snapshot.

    Attributes:
        hit_rate: Hit percentage (0-100)
        miss_rate: Miss percentage (0-100)
        size: Current ARC size in bytes
        target: Target (maximum) ARC size in bytes
        read_ops: Read operations per second
    """
    hit_rate: float
    miss_rate: float
    size: int
    target: int
    read_ops: int

    @property
    def status(self) -> CacheStatus:
        return CacheStatus.from_hit_rate(self.hit_rate)


@dataclass(frozen=True)
class L2ArcStats:
    """
    L2ARC snapshot.

    Attributes:
        hit_rate: Hit percentage (0-100)
        miss_rate: Miss percentage (0-100)
        size: L2ARC size in bytes
        read_bytes: Bytes read per second
        total_ops: Hits plus misses per second
    """
    hit_rate: float
    miss_rate: float
    size: int
    read_bytes: int
    total_ops: int

    @property
    def status(self) -> CacheStatus:
        return CacheStatus.from_hit_rate(self.hit_rate)


@dataclass(frozen=True)
class SlogStats:
    """
    Separate intent log snapshot.

    Utilization and latency are not measured and are always 0.0.
    """
    device: str
    write_ops: int
    write_bw: int
    utilization: float = 0.0
    latency: float = 0.0


@dataclass
class CollectionSnapshot:
    """Result of collecting every metric family once."""
    timestamp: str
    arc: Optional[ArcStats] = None
    l2arc: Optional[L2ArcStats] = None
    slog: Optional[SlogStats] = None
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        if self.arc is not None:
            data["arc"]["status"] = str(self.arc.status)
        if self.l2arc is not None:
            data["l2arc"]["status"] = str(self.l2arc.status)
        return data
