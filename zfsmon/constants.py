"""
Status, exit code and data-source constants.

Status strings match the output conventions of the monitor script;
paths, command lines and keys are shared by the collector and its tests.
"""

# Status indicators
STATUS_OK = "OK"
STATUS_WARN = "WARN"
STATUS_ERROR = "ERROR"
STATUS_INFO = "INFO"

# Exit codes (Unix standard)
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_INVALID_USAGE = 2

# Kernel statistics
ARCSTATS_PATH = "/proc/spl/kstat/zfs/arcstats"
L2ARC_SIZE_MARKER = "l2_size"

# External commands
ZPOOL_COMMAND = "zpool"
ZPOOL_STATUS_ARGS = ("status",)
ZPOOL_IOSTAT_ARGS = ("iostat", "-v")
ZPOOL_LIST_ARGS = ("list", "-H", "-o", "name")
ARCSTAT_COMMAND = "arcstat"

# Result cache keys (shared across pools and devices)
CACHE_KEY_ZPOOL_STATUS = "zpool_status"
CACHE_KEY_ZPOOL_IOSTAT = "zpool_iostat"

# Rate calculator keys
RATE_KEY_ARC_READ_OPS = "arc_read_ops"
RATE_KEY_L2_TOTAL_OPS = "l2_total_ops"
RATE_KEY_L2_READ_BYTES = "l2_read_bytes"

# Defaults
DEFAULT_CACHE_TTL = 30.0      # seconds
DEFAULT_COMMAND_TIMEOUT = 3.0  # seconds
DEFAULT_INTERVAL = 2          # seconds between refreshes
DEFAULT_POOL = "data"

# Hit rate thresholds for cache status classification
HIT_RATE_EXCELLENT = 85.0
HIT_RATE_GOOD = 70.0
HIT_RATE_FAIR = 50.0
