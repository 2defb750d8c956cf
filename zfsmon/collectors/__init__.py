"""
Parsers for ZFS statistics sources.

Available parsers:
- parse_arcstats: ARC and L2ARC counters from /proc/spl/kstat/zfs/arcstats
- parse_arcstat_fields / parse_arcstat_default: arcstat command output
- parse_slog_device / parse_slog_iostat: zpool status and iostat tables
- parse_bandwidth: human-readable zpool sizes
"""

from .arcstats import ArcstatsFields, parse_arcstats, hit_rate, miss_rate
from .arcstat import (
    ARCSTAT_VARIANTS,
    ArcstatSample,
    ArcstatVariant,
    parse_arcstat_default,
    parse_arcstat_fields,
)
from .zpool import parse_bandwidth, parse_pool_list, parse_slog_device, parse_slog_iostat

__all__ = [
    'ArcstatsFields',
    'parse_arcstats',
    'hit_rate',
    'miss_rate',
    'ARCSTAT_VARIANTS',
    'ArcstatSample',
    'ArcstatVariant',
    'parse_arcstat_default',
    'parse_arcstat_fields',
    'parse_bandwidth',
    'parse_pool_list',
    'parse_slog_device',
    'parse_slog_iostat'
]
