"""
Kernel ARC statistics parser.

Decodes /proc/spl/kstat/zfs/arcstats, a kstat dump of
``<name> <type> <value>`` lines following a header.
"""

import re
from dataclasses import dataclass

from ..constants import L2ARC_SIZE_MARKER
from ..errors import ParseError

_UNSIGNED = re.compile(r"^[0-9]+$")

_COUNTERS = frozenset([
    "hits", "misses", "size", "c_max", "read_ops",
    "l2_hits", "l2_misses", "l2_size", "l2_read_bytes",
])


@dataclass
class ArcstatsFields:
    """Raw counters extracted from one arcstats dump."""
    hits: int = 0
    misses: int = 0
    size: int = 0
    c_max: int = 0
    read_ops: int = 0
    l2_hits: int = 0
    l2_misses: int = 0
    l2_size: int = 0
    l2_read_bytes: int = 0
    has_l2arc: bool = False


def hit_rate(hits: int, misses: int) -> float:
    """Hit percentage, 0.0 when there has been no traffic."""
    total = hits + misses
    if total == 0:
        return 0.0
    return (hits / total) * 100


def miss_rate(hits: int, misses: int) -> float:
    """Miss percentage, 0.0 when there has been no traffic."""
    total = hits + misses
    if total == 0:
        return 0.0
    return (misses / total) * 100


def parse_arcstats(content: str) -> ArcstatsFields:
    """
    Parse an arcstats dump.

    Args:
        content: Full text of the kstat file

    Returns:
        ArcstatsFields with every recognized counter (0 when missing)

    Raises:
        ParseError: If a recognized counter has a non-integer value
    """
    fields = ArcstatsFields()

    for line in content.split('\n'):
        line = line.strip()
        if not line or line.startswith("name"):
            continue

        if line.startswith(L2ARC_SIZE_MARKER):
            fields.has_l2arc = True

        parts = line.split()
        if len(parts) < 3:
            continue

        name = parts[0]
        if name not in _COUNTERS:
            continue

        value = parts[2]
        if not _UNSIGNED.match(value):
            raise ParseError("ARC kstat", f"invalid number for {name}: {value}", data=line)
        setattr(fields, name, int(value))

    return fields
