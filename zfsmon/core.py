"""
ZFS statistics collection.

Decides which data source to query for each metric family, applies
fallback ordering, and turns cumulative counters into per-second rates.
"""

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Callable, List, Optional, Sequence

from .cache import TtlCache
from .collectors.arcstat import ARCSTAT_VARIANTS, ArcstatVariant
from .collectors.arcstats import hit_rate, miss_rate, parse_arcstats
from .collectors.zpool import parse_pool_list, parse_slog_device, parse_slog_iostat
from .constants import (
    ARCSTATS_PATH,
    CACHE_KEY_ZPOOL_IOSTAT,
    CACHE_KEY_ZPOOL_STATUS,
    DEFAULT_CACHE_TTL,
    DEFAULT_COMMAND_TIMEOUT,
    RATE_KEY_ARC_READ_OPS,
    RATE_KEY_L2_READ_BYTES,
    RATE_KEY_L2_TOTAL_OPS,
    ZPOOL_COMMAND,
    ZPOOL_IOSTAT_ARGS,
    ZPOOL_LIST_ARGS,
    ZPOOL_STATUS_ARGS,
)
from .errors import SubsystemUnavailableError, ZfsError
from .models import ArcStats, CollectionSnapshot, L2ArcStats, SlogStats
from .rate import RateCalculator
from .system import CommandExecutor, FilesystemReader

logger = logging.getLogger(__name__)


class ZfsStatsCollector:
    """
    Collect ARC, L2ARC and SLOG statistics.

    Owns the rate calculator and the command-output cache for its whole
    lifetime. Both are guarded by an internal lock so the collect methods
    may run concurrently against one instance.
    """

    def __init__(self, executor: CommandExecutor, reader: FilesystemReader,
                 cache_ttl: float = DEFAULT_CACHE_TTL,
                 command_timeout: float = DEFAULT_COMMAND_TIMEOUT,
                 arcstats_path: str = ARCSTATS_PATH,
                 arcstat_variants: Sequence[ArcstatVariant] = ARCSTAT_VARIANTS,
                 clock: Callable[[], float] = time.monotonic):
        """
        Initialize collector.

        Args:
            executor: Runs zpool and arcstat
            reader: Reads the arcstats kstat file
            cache_ttl: Seconds to reuse zpool command output
            command_timeout: Seconds before a zpool or arcstat invocation is abandoned
            arcstats_path: Location of the ARC kstat file
            arcstat_variants: Fallback arcstat invocations, tried in order
            clock: Monotonic time source in seconds
        """
        self.executor = executor
        self.reader = reader
        self.command_timeout = command_timeout
        self.arcstats_path = arcstats_path
        self.arcstat_variants = tuple(arcstat_variants)
        self._clock = clock
        self._rates = RateCalculator()
        self._cache = TtlCache(default_ttl=cache_ttl, clock=clock)
        self._lock = threading.RLock()

    def _rate(self, key: str, value: int, now: float) -> int:
        with self._lock:
            rate = self._rates.observe(key, value, now)
        return int(rate or 0)

    def _cached_command(self, key: str, command: str, args: Sequence[str]) -> str:
        with self._lock:
            cached = self._cache.get(key)
        if cached is not None:
            logger.debug(f"Using cached output for {key}")
            return cached

        output = self.executor.run(command, args, timeout=self.command_timeout)
        with self._lock:
            self._cache.insert(key, output)
        return output

    def collect_arc_stats(self) -> ArcStats:
        """
        Collect primary ARC statistics.

        Reads the kstat file first and falls back to arcstat when the file
        is unreadable or malformed.

        Returns:
            ArcStats with read_ops as operations per second

        Raises:
            SubsystemUnavailableError: If the file and every arcstat variant fail
        """
        now = self._clock()
        try:
            return self._collect_arc_from_kstat(now)
        except ZfsError as e:
            logger.debug(f"ARC kstat unavailable, trying arcstat: {e}")
            return self._collect_arc_from_arcstat(now, e)

    def _collect_arc_from_kstat(self, now: float) -> ArcStats:
        fields = parse_arcstats(self.reader.read(self.arcstats_path))
        return ArcStats(
            hit_rate=hit_rate(fields.hits, fields.misses),
            miss_rate=miss_rate(fields.hits, fields.misses),
            size=fields.size,
            target=fields.c_max,
            read_ops=self._rate(RATE_KEY_ARC_READ_OPS, fields.read_ops, now),
        )

    def _collect_arc_from_arcstat(self, now: float, kstat_error: ZfsError) -> ArcStats:
        failures: List[ZfsError] = [kstat_error]

        for variant in self.arcstat_variants:
            try:
                output = self.executor.run(variant.command, variant.args, timeout=self.command_timeout)
                sample = variant.parse(output)
            except ZfsError as e:
                logger.warning(f"arcstat variant failed ({variant.command} {' '.join(variant.args)}): {e}")
                failures.append(e)
                continue

            return ArcStats(
                hit_rate=sample.hit_rate,
                miss_rate=sample.miss_rate,
                size=sample.size,
                target=sample.target,
                read_ops=self._rate(RATE_KEY_ARC_READ_OPS, sample.read_ops, now),
            )

        raise SubsystemUnavailableError(
            "ARC",
            "failed to collect statistics from all sources (kstat and arcstat)",
            causes=failures
        )

    def collect_l2arc_stats(self) -> Optional[L2ArcStats]:
        """
        Collect L2ARC statistics from the kstat file.

        Returns:
            L2ArcStats, or None when the host has no L2ARC device

        Raises:
            FilesystemError: If the kstat file cannot be read
            ParseError: If a recognized counter is malformed
        """
        now = self._clock()
        fields = parse_arcstats(self.reader.read(self.arcstats_path))
        if not fields.has_l2arc:
            return None

        total_ops = fields.l2_hits + fields.l2_misses
        return L2ArcStats(
            hit_rate=hit_rate(fields.l2_hits, fields.l2_misses),
            miss_rate=miss_rate(fields.l2_hits, fields.l2_misses),
            size=fields.l2_size,
            read_bytes=self._rate(RATE_KEY_L2_READ_BYTES, fields.l2_read_bytes, now),
            total_ops=self._rate(RATE_KEY_L2_TOTAL_OPS, total_ops, now),
        )

    def collect_slog_stats(self) -> Optional[SlogStats]:
        """
        Collect separate intent log statistics.

        zpool output is cached for the configured TTL and shared by every
        pool and device.

        Returns:
            SlogStats, or None when no log device is configured

        Raises:
            CommandError: If a zpool command fails
            ParseError: If the device's iostat row is malformed
        """
        now = self._clock()
        status_output = self._cached_command(CACHE_KEY_ZPOOL_STATUS, ZPOOL_COMMAND, ZPOOL_STATUS_ARGS)
        device = parse_slog_device(status_output)
        if device is None:
            return None

        iostat_output = self._cached_command(CACHE_KEY_ZPOOL_IOSTAT, ZPOOL_COMMAND, ZPOOL_IOSTAT_ARGS)
        write_ops, write_bw = parse_slog_iostat(iostat_output, device)

        return SlogStats(
            device=device,
            write_ops=self._rate(f"slog_{device}_write_ops", write_ops, now),
            write_bw=self._rate(f"slog_{device}_write_bw", write_bw, now),
        )

    def collect_all(self, parallel: bool = False) -> CollectionSnapshot:
        """
        Collect every metric family once.

        A failure in one family is recorded in the snapshot's errors and
        does not stop the others.

        Args:
            parallel: Run the three families on worker threads

        Returns:
            CollectionSnapshot
        """
        snapshot = CollectionSnapshot(timestamp=datetime.now().isoformat())
        families = {
            "arc": self.collect_arc_stats,
            "l2arc": self.collect_l2arc_stats,
            "slog": self.collect_slog_stats,
        }

        outcomes = {}
        if parallel:
            with ThreadPoolExecutor(max_workers=len(families)) as pool:
                futures = {name: pool.submit(fn) for name, fn in families.items()}
                for name, future in futures.items():
                    error = future.exception()
                    outcomes[name] = error if error is not None else future.result()
        else:
            for name, fn in families.items():
                try:
                    outcomes[name] = fn()
                except ZfsError as e:
                    outcomes[name] = e

        for name, outcome in outcomes.items():
            if isinstance(outcome, ZfsError):
                snapshot.errors[name] = str(outcome)
            elif isinstance(outcome, BaseException):
                raise outcome
            else:
                setattr(snapshot, name, outcome)

        return snapshot

    def clear_cache(self) -> None:
        """Drop every cached command output."""
        with self._lock:
            self._cache.clear()

    def cleanup_cache(self) -> int:
        """Drop expired command output; returns the number removed."""
        with self._lock:
            return self._cache.cleanup()


class PoolManager:
    """Pool discovery and validation."""

    def __init__(self, executor: CommandExecutor,
                 command_timeout: float = DEFAULT_COMMAND_TIMEOUT):
        self.executor = executor
        self.command_timeout = command_timeout

    def list_pools(self) -> List[str]:
        """
        List imported pools.

        Raises:
            CommandError: If zpool list fails
        """
        return parse_pool_list(
            self.executor.run(ZPOOL_COMMAND, ZPOOL_LIST_ARGS, timeout=self.command_timeout)
        )

    def validate_pool(self, pool_name: str) -> bool:
        return pool_name in self.list_pools()

    def default_pool(self) -> str:
        """First imported pool."""
        pools = self.list_pools()
        if not pools:
            raise SubsystemUnavailableError("zpool", "no pools found")
        return pools[0]
