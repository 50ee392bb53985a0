"""ZX Spectrum display simulator.

Emulates the Spectrum's screen memory (a 1-bit pixel bitmap overlaid with
an 8x8 colour attribute grid) and renders it to upscaled RGBA frames.
"""

from __future__ import annotations

from . import system, ui, utils, video

__all__: list[str] = [
    "video",
    "system",
    "ui",
    "utils",
]
