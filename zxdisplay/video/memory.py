"""Virtual display memory: the pixel plane and the attribute plane.

The pixel plane is laid out character-row major, then pixel sub-row, then
character column, so byte ``(row * 8 + subrow) * COLUMNS + col`` holds the
eight pixels of sub-row ``subrow`` of cell ``(row, col)`` (MSB = leftmost).
The attribute plane holds one byte per cell at ``row * COLUMNS + col``.
"""

from __future__ import annotations

import random
from typing import Sequence

from zxdisplay.utils import debug_enabled, debug_log

from .attributes import FLASH_BIT, pack_attribute
from .font import GLYPH_BYTES
from .geometry import (
    ATTRIBUTE_PLANE_SIZE,
    CHAR_SIZE,
    COLUMNS,
    PIXEL_PLANE_SIZE,
    clip_region,
    in_grid,
)

DITHER_EVEN = 0b01010101
DITHER_ODD = 0b10101010


def pixel_address(row: int, subrow: int, col: int) -> int:
    """Pixel plane offset of sub-row ``subrow`` of cell ``(row, col)``."""

    return (row * CHAR_SIZE + subrow) * COLUMNS + col


def attribute_address(row: int, col: int) -> int:
    return row * COLUMNS + col


class DisplayMemory:
    """Owns the two byte planes mutated by drawing operations."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._pixels = bytearray(PIXEL_PLANE_SIZE)
        self._attributes = bytearray(ATTRIBUTE_PLANE_SIZE)
        self._rng = rng or random.Random()

    @property
    def pixels(self) -> bytearray:
        return self._pixels

    @property
    def attributes(self) -> bytearray:
        return self._attributes

    def snapshot(self) -> tuple[bytes, bytes]:
        """Return immutable copies of ``(pixels, attributes)``."""

        return bytes(self._pixels), bytes(self._attributes)

    def attribute_at(self, row: int, col: int) -> int:
        return self._attributes[attribute_address(row, col)]

    def pixel_row(self, row: int, subrow: int, col: int) -> int:
        return self._pixels[pixel_address(row, subrow, col)]

    def clear(self, ink: int, paper: int) -> None:
        """Fill every cell with ``ink``/``paper`` and a checkerboard dither.

        Even pixel rows get ``0b01010101`` and odd rows ``0b10101010`` so that
        neighbours alternate both horizontally and vertically.
        """

        attr = pack_attribute(ink, paper)
        self._attributes[:] = bytes([attr]) * ATTRIBUTE_PLANE_SIZE
        even_line = bytes([DITHER_EVEN]) * COLUMNS
        odd_line = bytes([DITHER_ODD]) * COLUMNS
        for y in range(PIXEL_PLANE_SIZE // COLUMNS):
            start = y * COLUMNS
            self._pixels[start : start + COLUMNS] = odd_line if y & 1 else even_line
        if debug_enabled("memory"):
            debug_log("memory", "clear attr=%02X", attr)

    def set_glyph(self, row: int, col: int, glyph: Sequence[int], attr: int) -> None:
        """Write ``attr`` and the eight ``glyph`` rows into cell ``(row, col)``.

        Cells outside the grid are ignored.
        """

        if not in_grid(row, col):
            return
        self._attributes[attribute_address(row, col)] = attr & ~FLASH_BIT & 0xFF
        for subrow in range(GLYPH_BYTES):
            self._pixels[pixel_address(row, subrow, col)] = glyph[subrow] & 0xFF

    def randomize_region(self, row: int, col: int, height: int, width: int) -> None:
        """Fill the clipped cell rectangle of both planes with random bytes."""

        region = clip_region(row, col, height, width)
        if region is None:
            return
        row, col, height, width = region
        rng = self._rng
        for r in range(row, row + height):
            base = attribute_address(r, col)
            self._attributes[base : base + width] = bytes(
                rng.getrandbits(8) & ~FLASH_BIT & 0xFF for _ in range(width)
            )
            for subrow in range(CHAR_SIZE):
                start = pixel_address(r, subrow, col)
                self._pixels[start : start + width] = rng.randbytes(width)
        if debug_enabled("memory"):
            debug_log("memory", "randomize row=%d col=%d height=%d width=%d", row, col, height, width)


__all__ = [
    "DITHER_EVEN",
    "DITHER_ODD",
    "DisplayMemory",
    "pixel_address",
    "attribute_address",
]
