from __future__ import annotations

from typing import List

BYTE_BASE = 1024
UNITS: List[str] = ["B", "KB", "MB", "GB", "TB", "PB", "EB", "ZB"]


def format_byte_size(byte_size: int) -> str:
    """Convert a byte count into a human-readable string.

    Scales by 1024 until the value drops below the base or the largest unit
    (ZB) is reached, then rounds to two decimals with ``round()`` and drops
    trailing zeros.

    Examples:
        >>> format_byte_size(0)
        '0 B'
        >>> format_byte_size(1536)
        '1.5 KB'
        >>> format_byte_size(1530000)
        '1.46 MB'
    """
    if byte_size < 0:
        raise ValueError(f"byte_size must be non-negative, got {byte_size}")

    size = float(byte_size)
    unit_index = 0
    while size >= BYTE_BASE and unit_index < len(UNITS) - 1:
        size /= BYTE_BASE
        unit_index += 1

    return f"{_trim(round(size, 2))} {UNITS[unit_index]}"


def _trim(value: float) -> str:
    """Print a rounded value without trailing zeros (1.50 -> 1.5, 1.00 -> 1)."""
    return f"{value:.2f}".rstrip("0").rstrip(".")
