#!/usr/bin/env python3
"""
Live ZFS cache monitor.

Polls ARC, L2ARC and SLOG statistics at a fixed interval and prints a
summary after each refresh.

Usage (run from repo root):
    python scripts/zfs_cache_monitor.py --pool data --interval 2
    python scripts/zfs_cache_monitor.py --demo --count 3
    python scripts/zfs_cache_monitor.py --count 1 --json
"""

import argparse
import json
import logging
import sys
import time
from pathlib import Path

# Add repo root to Python path for zfsmon package import
sys.path.insert(0, str(Path(__file__).parent.parent))

from zfsmon.constants import (
    DEFAULT_INTERVAL,
    DEFAULT_POOL,
    EXIT_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_SUCCESS,
    STATUS_ERROR,
    STATUS_INFO,
    STATUS_OK,
    STATUS_WARN,
)
from zfsmon.core import PoolManager, ZfsStatsCollector
from zfsmon.errors import ZfsError
from zfsmon.formatting import (
    format_bytes,
    format_bytes_ratio,
    format_latency_ms,
    format_ops,
    format_rate,
)
from zfsmon.models import CollectionSnapshot
from zfsmon.system import (
    DemoCommandExecutor,
    DemoFilesystemReader,
    RealCommandExecutor,
    RealFilesystemReader,
)


def print_summary(snapshot: CollectionSnapshot, pool: str, interval: int) -> None:
    """
    Print one refresh of the monitor.

    Args:
        snapshot: Statistics from the latest collection cycle
        pool: Pool name shown in the header
        interval: Refresh interval in seconds
    """
    print()
    print("=" * 60)
    print(f"ZFS Cache Monitor - pool: {pool} (refresh {interval}s)")
    print("=" * 60)

    arc = snapshot.arc
    if arc is not None:
        print(f"\nARC: {arc.status}")
        print(f"  Hit rate:  {arc.hit_rate:.1f}%")
        print(f"  Size:      {format_bytes_ratio(arc.size, arc.target)}")
        print(f"  Read ops:  {format_ops(arc.read_ops)}")
    elif "arc" in snapshot.errors:
        print(f"\nARC: {STATUS_ERROR} ({snapshot.errors['arc']})")

    l2arc = snapshot.l2arc
    if l2arc is not None:
        print(f"\nL2ARC: {l2arc.status}")
        print(f"  Hit rate:  {l2arc.hit_rate:.1f}%")
        print(f"  Size:      {format_bytes(l2arc.size)}")
        print(f"  Reads:     {format_rate(l2arc.read_bytes)}")
        print(f"  Ops:       {format_ops(l2arc.total_ops)}")
    elif "l2arc" in snapshot.errors:
        print(f"\nL2ARC: {STATUS_ERROR} ({snapshot.errors['l2arc']})")
    else:
        print(f"\nL2ARC: {STATUS_INFO} (not configured)")

    slog = snapshot.slog
    if slog is not None:
        print(f"\nSLOG: {slog.device}")
        print(f"  Writes:    {format_ops(slog.write_ops)}")
        print(f"  Bandwidth: {format_rate(slog.write_bw)}")
        print(f"  Latency:   {format_latency_ms(slog.latency)}")
    elif "slog" in snapshot.errors:
        print(f"\nSLOG: {STATUS_ERROR} ({snapshot.errors['slog']})")
    else:
        print(f"\nSLOG: {STATUS_INFO} (no log device)")

    print("=" * 60)


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        description="Live ZFS ARC, L2ARC and SLOG monitor",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Monitor the default pool every 2 seconds
  python scripts/zfs_cache_monitor.py

  # Offline run against fixture data
  python scripts/zfs_cache_monitor.py --demo --count 3

  # Single JSON snapshot
  python scripts/zfs_cache_monitor.py --count 1 --json
        """
    )

    parser.add_argument(
        "--pool",
        default=DEFAULT_POOL,
        help=f"Pool name shown in the header (default: {DEFAULT_POOL})"
    )

    parser.add_argument(
        "--interval",
        type=int,
        default=DEFAULT_INTERVAL,
        help=f"Refresh interval in seconds (default: {DEFAULT_INTERVAL})"
    )

    parser.add_argument(
        "--count",
        type=int,
        help="Stop after this many refreshes (default: run until interrupted)"
    )

    parser.add_argument(
        "--demo",
        action="store_true",
        help="Use built-in fixture data instead of the host"
    )

    parser.add_argument(
        "--parallel",
        action="store_true",
        help="Collect metric families concurrently"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print each snapshot as JSON instead of the text summary"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    return parser


def main() -> int:
    """
    Main function to run the monitor.

    Returns:
        Exit code: 0 for success, 1 for failure, 2 for invalid usage.
    """
    parser = create_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    if args.interval < 1 or (args.count is not None and args.count < 1):
        print("ERROR: --interval and --count must be positive", file=sys.stderr)
        return EXIT_INVALID_USAGE

    if args.demo:
        executor, reader = DemoCommandExecutor(), DemoFilesystemReader()
    else:
        executor, reader = RealCommandExecutor(), RealFilesystemReader()

    try:
        pools = PoolManager(executor)
        if pools.validate_pool(args.pool):
            print(f"Pool check: {STATUS_OK} ({args.pool})")
        else:
            print(f"Pool check: {STATUS_WARN} (pool '{args.pool}' not found)")
    except ZfsError as e:
        print(f"Pool check: {STATUS_WARN} ({e})")

    collector = ZfsStatsCollector(executor, reader)
    refreshes = 0

    try:
        while True:
            snapshot = collector.collect_all(parallel=args.parallel)
            collector.cleanup_cache()

            if args.json:
                print(json.dumps(snapshot.to_dict(), indent=2))
            else:
                print_summary(snapshot, args.pool, args.interval)

            refreshes += 1
            if args.count is not None and refreshes >= args.count:
                return EXIT_SUCCESS

            time.sleep(args.interval)

    except KeyboardInterrupt:
        print("\nMonitoring stopped.")
        return EXIT_SUCCESS
    except Exception as e:
        print(f"ERROR: Unexpected error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
