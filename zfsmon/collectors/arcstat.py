"""
Parsers for arcstat output.

arcstat prints a header line followed by one row per interval. Each
invocation variant has its own column contract, so each gets its own
parser; the collector tries the variants in order.
"""

import re
from dataclasses import dataclass
from typing import Callable, List, Tuple

from ..constants import ARCSTAT_COMMAND
from ..errors import InvalidFormatError, ParseError
from .zpool import parse_bandwidth

_NUMBER = re.compile(r"^[0-9]+(\.[0-9]+)?$")
_COUNT_SUFFIXES = "KMGTPE"


@dataclass
class ArcstatSample:
    """One arcstat row reduced to the fields the collector needs."""
    hit_rate: float
    miss_rate: float
    read_ops: int
    size: int
    target: int


def _data_lines(output: str) -> List[List[str]]:
    rows = []
    for line in output.split('\n'):
        parts = line.split()
        if parts and _NUMBER.match(parts[0]):
            rows.append(parts)
    return rows


def _percent(value: str, field: str) -> float:
    if not _NUMBER.match(value):
        raise ParseError(f"arcstat {field}", "invalid percentage", data=value)
    return float(value)


def _count(value: str, field: str) -> int:
    """
    Parse an arcstat count column.

    Without -p, arcstat shortens counts such as 1.2K or 3.4M. Count
    suffixes are powers of 1000, unlike the byte columns.
    """
    multiplier = 1
    suffix = value[-1:].upper()
    if suffix and suffix in _COUNT_SUFFIXES:
        multiplier = 1000 ** (_COUNT_SUFFIXES.index(suffix) + 1)
        value = value[:-1]
    if not _NUMBER.match(value):
        raise ParseError(f"arcstat {field}", "invalid count", data=value)
    return int(round(float(value) * multiplier))


def _size(value: str, field: str) -> int:
    try:
        return parse_bandwidth(value)
    except ParseError as e:
        raise ParseError(f"arcstat {field}", e.reason, data=value)


def parse_arcstat_fields(output: str) -> ArcstatSample:
    """
    Parse ``arcstat -f hit%,miss%,read,arcsz,c 1 1`` output.

    Columns are positional: hit%, miss%, read, arcsz, c. Header lines are
    skipped and the last data row is used.

    Raises:
        InvalidFormatError: If no row has five columns
        ParseError: If a column is not numeric
    """
    rows = _data_lines(output)
    parts = rows[-1] if rows else output.split()
    if len(parts) < 5:
        raise InvalidFormatError("5 space-separated numbers", f"{len(parts)} parts", "arcstat output")

    return ArcstatSample(
        hit_rate=_percent(parts[0], "hit%"),
        miss_rate=_percent(parts[1], "miss%"),
        read_ops=_count(parts[2], "read"),
        size=_size(parts[3], "arcsz"),
        target=_size(parts[4], "c"),
    )


def parse_arcstat_default(output: str) -> ArcstatSample:
    """
    Parse ``arcstat 1 1`` output using its header.

    The default field set differs between OpenZFS releases, so columns
    are located by name: ``read``, ``size`` or ``arcsz``, ``c``, and
    ``hit%`` or ``miss%``.

    Raises:
        InvalidFormatError: If the header or a required column is missing
        ParseError: If a column is not numeric
    """
    header = None
    row = None
    for line in output.split('\n'):
        parts = line.split()
        if not parts:
            continue
        if "read" in parts and "c" in parts:
            header = parts
        elif header is not None and len(parts) == len(header):
            row = parts

    if header is None or row is None:
        raise InvalidFormatError("header line and data row", output.strip()[:40], "arcstat output")

    columns = dict(zip(header, row))
    size_field = "size" if "size" in columns else "arcsz"
    if size_field not in columns:
        raise InvalidFormatError("size or arcsz column", " ".join(header), "arcstat header")

    if "hit%" in columns:
        hit = _percent(columns["hit%"], "hit%")
        miss = 100.0 - hit
    elif "miss%" in columns:
        miss = _percent(columns["miss%"], "miss%")
        hit = 100.0 - miss
    else:
        raise InvalidFormatError("hit% or miss% column", " ".join(header), "arcstat header")

    return ArcstatSample(
        hit_rate=hit,
        miss_rate=miss,
        read_ops=_count(columns["read"], "read"),
        size=_size(columns[size_field], size_field),
        target=_size(columns["c"], "c"),
    )


@dataclass(frozen=True)
class ArcstatVariant:
    """One way of invoking arcstat, paired with the parser for its output."""
    command: str
    args: Tuple[str, ...]
    parse: Callable[[str], ArcstatSample]


ARCSTAT_VARIANTS = (
    ArcstatVariant(ARCSTAT_COMMAND, ("-f", "hit%,miss%,read,arcsz,c", "1", "1"), parse_arcstat_fields),
    ArcstatVariant(ARCSTAT_COMMAND, ("1", "1"), parse_arcstat_default),
)
