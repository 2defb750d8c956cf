"""
Parsers for zpool command output.

Handles the ``zpool status`` device tree, the ``zpool iostat -v`` table,
``zpool list -H`` pool names, and the human-readable sizes zpool prints.
"""

import re
from typing import List, Optional, Tuple

from ..errors import ParseError

LOGS_SECTION = "logs"
VDEV_STATES = frozenset([
    "ONLINE", "DEGRADED", "FAULTED", "OFFLINE", "UNAVAIL", "REMOVED", "AVAIL",
])

# iostat -v row: name alloc free read_ops write_ops read_bw write_bw
_IOSTAT_MIN_FIELDS = 7
_IOSTAT_WRITE_OPS = 4
_IOSTAT_WRITE_BW = 6

_UNIT_MULTIPLIERS = {
    "B": 1,
    "K": 1024,
    "M": 1024 ** 2,
    "G": 1024 ** 3,
    "T": 1024 ** 4,
}

_INTEGER = re.compile(r"^[0-9]+$")
_DECIMAL = re.compile(r"^([0-9]+(\.[0-9]*)?|\.[0-9]+)$")


def parse_bandwidth(value: str) -> int:
    """
    Convert a zpool size string to bytes.

    Accepts "12.0M", "1.82T", "234k", "1024", "-" and "". Units are
    powers of 1024; fractional byte counts are truncated.

    Raises:
        ParseError: On an unknown unit letter or a non-numeric value
    """
    value = value.strip()
    if not value or value == "-":
        return 0

    unit = value[-1]
    if unit.isdigit():
        if not _INTEGER.match(value):
            raise ParseError("bandwidth", "invalid number format", data=value)
        return int(value)

    multiplier = _UNIT_MULTIPLIERS.get(unit.upper())
    if multiplier is None:
        raise ParseError("bandwidth", f"unrecognized unit '{unit}'", data=value)

    number = value[:-1]
    if not _DECIMAL.match(number):
        raise ParseError("bandwidth", "invalid numeric value", data=value)
    return int(float(number) * multiplier)


def parse_slog_device(status_output: str) -> Optional[str]:
    """
    Find the log device in ``zpool status`` output.

    Args:
        status_output: Full status text

    Returns:
        Log vdev name (e.g. "mirror-1"), or None when there is no log section
    """
    in_logs_section = False

    for line in status_output.split('\n'):
        line = line.strip()

        if line == LOGS_SECTION:
            in_logs_section = True
            continue

        if not in_logs_section or not line:
            continue

        parts = line.split()
        if len(parts) >= 2 and parts[1] in VDEV_STATES:
            return parts[0]

        # Any other top-level section (cache, spares, errors:) ends the logs
        break

    return None


def _write_counters(line: str) -> Tuple[int, int]:
    parts = line.split()
    write_ops = parts[_IOSTAT_WRITE_OPS]
    if not _INTEGER.match(write_ops):
        raise ParseError("iostat write_ops", "invalid write operations count", data=line)
    return int(write_ops), parse_bandwidth(parts[_IOSTAT_WRITE_BW])


def parse_slog_iostat(iostat_output: str, device_name: str) -> Tuple[int, int]:
    """
    Extract write counters for a device from ``zpool iostat -v`` output.

    The device row usually carries its own counters. When the name is
    printed on a line of its own, the counters are on the next data line.
    If the table has a ``logs`` row, only rows after the first one are
    searched, so a data vdev with the same name in an earlier pool is
    never matched.

    Args:
        iostat_output: Full iostat text
        device_name: Vdev to look for

    Returns:
        Tuple of (write operations, write bandwidth in bytes); (0, 0) if the
        device has no row

    Raises:
        ParseError: If the matched row has a malformed counter
    """
    lines = iostat_output.split('\n')
    for index, line in enumerate(lines):
        parts = line.split()
        if parts and parts[0] == LOGS_SECTION:
            lines = lines[index + 1:]
            break

    found = False

    for line in lines:
        line = line.strip()

        if not found:
            if device_name in line.split():
                if len(line.split()) >= _IOSTAT_MIN_FIELDS:
                    return _write_counters(line)
                found = True
            continue

        if not line or line.startswith('-'):
            continue
        if len(line.split()) >= _IOSTAT_MIN_FIELDS:
            return _write_counters(line)
        break

    return 0, 0


def parse_pool_list(list_output: str) -> List[str]:
    """Pool names from ``zpool list -H -o name``."""
    return [line.strip() for line in list_output.split('\n') if line.strip()]
