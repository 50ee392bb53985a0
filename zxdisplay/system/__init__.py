"""ZX Spectrum display assembly helpers."""

from __future__ import annotations

from .display import Display, DisplayConfig, PresentationSurface, create_display

__all__ = [
    "DisplayConfig",
    "Display",
    "PresentationSurface",
    "create_display",
]
