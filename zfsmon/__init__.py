"""
ZFS cache monitor.

This package collects ARC, L2ARC and SLOG statistics from the kernel
kstat interface and zpool/arcstat output, and derives per-second rates
for a live terminal dashboard.
"""

from .core import ZfsStatsCollector, PoolManager
from .models import ArcStats, L2ArcStats, SlogStats, CacheStatus, CollectionSnapshot
from .system import (
    CommandExecutor,
    FilesystemReader,
    RealCommandExecutor,
    RealFilesystemReader,
    DemoCommandExecutor,
    DemoFilesystemReader
)
from .constants import (
    STATUS_OK,
    STATUS_WARN,
    STATUS_ERROR,
    STATUS_INFO,
    EXIT_SUCCESS,
    EXIT_FAILURE,
    EXIT_INVALID_USAGE
)

__all__ = [
    'ZfsStatsCollector',
    'PoolManager',
    'ArcStats',
    'L2ArcStats',
    'SlogStats',
    'CacheStatus',
    'CollectionSnapshot',
    'CommandExecutor',
    'FilesystemReader',
    'RealCommandExecutor',
    'RealFilesystemReader',
    'DemoCommandExecutor',
    'DemoFilesystemReader',
    'STATUS_OK',
    'STATUS_WARN',
    'STATUS_ERROR',
    'STATUS_INFO',
    'EXIT_SUCCESS',
    'EXIT_FAILURE',
    'EXIT_INVALID_USAGE'
]
