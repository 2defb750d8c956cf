"""
Human-readable formatting of sizes and rates.
"""

_UNITS = ["B", "K", "M", "G", "T", "P"]


def format_bytes(num_bytes: int) -> str:
    """Format a byte count with 1024-based units ("512 B", "1.5K", "46.3G")."""
    size = float(num_bytes)
    unit_index = 0
    while size >= 1024 and unit_index < len(_UNITS) - 1:
        size /= 1024
        unit_index += 1

    if unit_index == 0:
        return f"{num_bytes} B"
    return f"{size:.1f}{_UNITS[unit_index]}"


def format_bytes_ratio(current: int, total: int) -> str:
    return f"{format_bytes(current)}/{format_bytes(total)}"


def format_rate(bytes_per_second: int) -> str:
    return f"{format_bytes(bytes_per_second)}/s"


def format_ops(ops_per_second: int) -> str:
    return f"{ops_per_second}/s"


def format_latency_ms(latency: float) -> str:
    return f"{latency:.1f}ms"
