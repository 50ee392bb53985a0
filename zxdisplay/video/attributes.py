"""Attribute byte codec.

An attribute byte describes one 8x8 character cell::

    bit 7    flash (unsupported, always written as 0)
    bit 6    bright, shared by ink and paper
    bits 5-3 paper colour 0-7
    bits 2-0 ink colour 0-7
"""

from __future__ import annotations

from .palette import BLACK, BRIGHT_OFFSET, BRIGHT_WHITE

BRIGHT_BIT = 0x40
FLASH_BIT = 0x80
INK_MASK = 0x07
PAPER_SHIFT = 3


def clamp_colour(value: int) -> int:
    """Clamp a colour index into 0-15 (black floor, bright white ceiling)."""

    if value < BLACK:
        return BLACK
    if value > BRIGHT_WHITE:
        return BRIGHT_WHITE
    return value


def pack_attribute(ink: int, paper: int) -> int:
    ink = clamp_colour(ink)
    paper = clamp_colour(paper)
    bright = ink >= BRIGHT_OFFSET or paper >= BRIGHT_OFFSET
    attr = ((paper & INK_MASK) << PAPER_SHIFT) | (ink & INK_MASK)
    if bright:
        attr |= BRIGHT_BIT
    return attr


def unpack_attribute(attr: int) -> tuple[int, int]:
    """Return ``(ink, paper)`` colour indices for an attribute byte."""

    ink = attr & INK_MASK
    paper = (attr >> PAPER_SHIFT) & INK_MASK
    if attr & BRIGHT_BIT:
        ink += BRIGHT_OFFSET
        paper += BRIGHT_OFFSET
    return ink, paper


def is_bright(attr: int) -> bool:
    return bool(attr & BRIGHT_BIT)


__all__ = [
    "BRIGHT_BIT",
    "FLASH_BIT",
    "clamp_colour",
    "pack_attribute",
    "unpack_attribute",
    "is_bright",
]
