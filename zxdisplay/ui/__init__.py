"""User interface layer for the ZX Spectrum display simulator."""

from .app import AppConfig, PygameSurface, ZXDisplayApp

__all__ = ["AppConfig", "PygameSurface", "ZXDisplayApp"]
