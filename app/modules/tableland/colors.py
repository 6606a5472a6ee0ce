"""Embed colors scaled by table size, matching the TABLE NFT artwork."""

from typing import Tuple

PALETTE: Tuple[int, ...] = (
    0x452858,
    0x5A2F5A,
    0x6E365B,
    0x833D5D,
    0x98445E,
    0xAC4B60,
    0xC15261,
    0xD65963,
    0xEA6064,
    0xFF6766,
)

# Upper bounds (exclusive) of the row count for each palette entry but the last
THRESHOLDS: Tuple[int, ...] = (27, 60, 150, 300, 600, 1500, 3000, 15000, 60000)


def find_color(rows: int) -> int:
    """Palette color for a table with ``rows`` rows."""
    for threshold, color in zip(THRESHOLDS, PALETTE):
        if rows < threshold:
            return color
    return PALETTE[-1]
