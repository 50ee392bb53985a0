"""Utility helpers for the ZX Spectrum display simulator."""

from .debug import debug_enabled, debug_log, reset_debug_categories

__all__ = [
    "debug_enabled",
    "debug_log",
    "reset_debug_categories",
]
