"""Video memory, codec and rendering for the ZX Spectrum display."""

from __future__ import annotations

from .attributes import clamp_colour, is_bright, pack_attribute, unpack_attribute
from .font import FONT_HEIGHT, FONT_WIDTH, FontSet
from .geometry import CHAR_SIZE, COLUMNS, LINES, SCALE, XMAX, YMAX
from .memory import DisplayMemory
from .palette import SPECTRUM_PALETTE, validate_palette
from .renderer import RenderResult, Renderer

__all__ = [
    "FontSet",
    "DisplayMemory",
    "Renderer",
    "RenderResult",
    "SPECTRUM_PALETTE",
    "validate_palette",
    "pack_attribute",
    "unpack_attribute",
    "clamp_colour",
    "is_bright",
    "FONT_WIDTH",
    "FONT_HEIGHT",
    "CHAR_SIZE",
    "COLUMNS",
    "LINES",
    "SCALE",
    "XMAX",
    "YMAX",
]
