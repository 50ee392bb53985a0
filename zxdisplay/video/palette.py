"""Palette definitions for ZX Spectrum rendering."""

from __future__ import annotations

from typing import Sequence, Tuple

RGBAColor = Tuple[int, int, int, int]

# Colour indices. 0-7 are the normal colours, 8-15 their bright variants.
BLACK = 0
BLUE = 1
RED = 2
MAGENTA = 3
GREEN = 4
CYAN = 5
YELLOW = 6
WHITE = 7
BRIGHT_BLACK = 8
BRIGHT_BLUE = 9
BRIGHT_RED = 10
BRIGHT_MAGENTA = 11
BRIGHT_GREEN = 12
BRIGHT_CYAN = 13
BRIGHT_YELLOW = 14
BRIGHT_WHITE = 15

BRIGHT_OFFSET = 8

COLOUR_NAMES: Tuple[str, ...] = (
    "black",
    "blue",
    "red",
    "magenta",
    "green",
    "cyan",
    "yellow",
    "white",
)

_NORMAL_HEX = (
    "#000000",
    "#0000D7",
    "#D70000",
    "#D700D7",
    "#00D700",
    "#00D7D7",
    "#D7D700",
    "#D7D7D7",
)

# Bright black is still black on the real hardware.
_BRIGHT_HEX = (
    "#000000",
    "#0000FF",
    "#FF0000",
    "#FF00FF",
    "#00FF00",
    "#00FFFF",
    "#FFFF00",
    "#FFFFFF",
)


def hex_to_rgba(value: str) -> RGBAColor:
    """Convert ``#RRGGBB`` to an opaque RGBA tuple."""

    text = value.lstrip("#")
    if len(text) != 6:
        raise ValueError(f"colour must be #RRGGBB, got {value!r}")
    return (int(text[0:2], 16), int(text[2:4], 16), int(text[4:6], 16), 0xFF)


SPECTRUM_PALETTE: Tuple[RGBAColor, ...] = tuple(hex_to_rgba(code) for code in _NORMAL_HEX + _BRIGHT_HEX)


def validate_palette(palette: Sequence[Sequence[int]]) -> Tuple[RGBAColor, ...]:
    if len(palette) != 16:
        raise ValueError("palette must contain exactly sixteen colours (8 normal, 8 bright)")
    if any(len(color) != 4 for color in palette):
        raise ValueError("palette entries must be RGBA tuples")
    return tuple(tuple(int(channel) & 0xFF for channel in color) for color in palette)  # type: ignore[return-value]


def colour_index(name: str) -> int:
    """Resolve ``"red"`` or ``"bright-red"`` style names (or digits) to an index."""

    text = name.strip().lower().replace("_", "-")
    if text.isdigit():
        return int(text)
    offset = 0
    if text.startswith("bright-"):
        offset = BRIGHT_OFFSET
        text = text[len("bright-") :]
    try:
        return COLOUR_NAMES.index(text) + offset
    except ValueError:
        raise ValueError(f"unknown colour name: {name!r}") from None


__all__ = [
    "RGBAColor",
    "BLACK",
    "BLUE",
    "RED",
    "MAGENTA",
    "GREEN",
    "CYAN",
    "YELLOW",
    "WHITE",
    "BRIGHT_BLACK",
    "BRIGHT_BLUE",
    "BRIGHT_RED",
    "BRIGHT_MAGENTA",
    "BRIGHT_GREEN",
    "BRIGHT_CYAN",
    "BRIGHT_YELLOW",
    "BRIGHT_WHITE",
    "BRIGHT_OFFSET",
    "COLOUR_NAMES",
    "SPECTRUM_PALETTE",
    "hex_to_rgba",
    "validate_palette",
    "colour_index",
]
