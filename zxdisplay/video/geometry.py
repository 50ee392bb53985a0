"""Fixed ZX Spectrum screen geometry."""

from __future__ import annotations

CHAR_SIZE = 8  # each character cell is 8 pixels high and wide
COLUMNS = 32  # text columns (and horizontal colour attributes)
LINES = 24  # text lines (and vertical colour attributes)
SCALE = 3  # one Spectrum pixel becomes SCALE x SCALE physical pixels

XMAX = COLUMNS * CHAR_SIZE  # 256
YMAX = LINES * CHAR_SIZE  # 192

PIXEL_PLANE_SIZE = XMAX * YMAX // 8
ATTRIBUTE_PLANE_SIZE = COLUMNS * LINES

BYTES_PER_PIXEL = 4  # RGBA


def in_grid(row: int, col: int) -> bool:
    return 0 <= row < LINES and 0 <= col < COLUMNS


def clip_region(row: int, col: int, height: int, width: int) -> tuple[int, int, int, int] | None:
    """Clip a cell rectangle to the character grid.

    Returns ``(row, col, height, width)`` or ``None`` when nothing of the
    rectangle remains on screen.
    """

    if height < 1 or width < 1:
        return None
    top = max(row, 0)
    left = max(col, 0)
    bottom = min(row + height, LINES)
    right = min(col + width, COLUMNS)
    if bottom <= top or right <= left:
        return None
    return top, left, bottom - top, right - left


__all__ = [
    "CHAR_SIZE",
    "COLUMNS",
    "LINES",
    "SCALE",
    "XMAX",
    "YMAX",
    "PIXEL_PLANE_SIZE",
    "ATTRIBUTE_PLANE_SIZE",
    "BYTES_PER_PIXEL",
    "in_grid",
    "clip_region",
]
