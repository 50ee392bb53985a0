"""Pygame front end presenting the simulated ZX Spectrum screen."""

from __future__ import annotations

import time
from dataclasses import dataclass

from zxdisplay.system import Display, DisplayConfig, PresentationSurface, create_display
from zxdisplay.utils import debug_enabled, debug_log
from zxdisplay.video.geometry import COLUMNS, LINES, XMAX, YMAX
from zxdisplay.video.palette import BLACK, BRIGHT_YELLOW
from zxdisplay.video.renderer import RenderResult

DEMOS = ("dither", "charset", "noise")

_TITLE = "ZX Spectrum display"
_NOISE_HEIGHT = 6
_NOISE_WIDTH = 12


@dataclass
class AppConfig:
    """Configuration for the pygame front end."""

    scale: int = 3
    fullscreen: bool = False
    demo: str = "charset"
    seed: int | None = None
    ink: int = BLACK
    paper: int = BRIGHT_YELLOW
    frame_rate: int = 50


class PygameSurface(PresentationSurface):
    """Presents frames on a pygame surface (usually the display window)."""

    def __init__(self, target) -> None:
        self._target = target
        self.frames_presented = 0

    def present(self, frame: RenderResult) -> None:
        self._target.blit(frame.to_surface(), frame.origin)
        self.frames_presented += 1


class ZXDisplayApp:
    """Thin wrapper around the pygame event loop."""

    def __init__(self, config: AppConfig) -> None:
        if config.demo not in DEMOS:
            raise ValueError(f"unknown demo {config.demo!r}; choose one of {', '.join(DEMOS)}")
        self._config = config
        self._running = False
        self._perf_enabled = debug_enabled("perf")
        self._frame_counter = 0
        self.display: Display = create_display(
            DisplayConfig(scale=config.scale, ink=config.ink, paper=config.paper, seed=config.seed)
        )

    @property
    def window_size(self) -> tuple[int, int]:
        return XMAX * self._config.scale, YMAX * self._config.scale

    def prepare_screen(self) -> None:
        """Draw the initial picture for the selected demo."""

        display = self.display
        display.set_ink(self._config.ink)
        display.set_paper(self._config.paper)
        display.clear()
        if self._config.demo == "dither":
            return
        display.draw_text(1, (COLUMNS - len(_TITLE)) // 2, _TITLE)
        display.draw_charset()

    def step(self) -> RenderResult | None:
        """Advance one frame and render whatever changed."""

        self._frame_counter += 1
        if self._config.demo == "noise":
            row = (LINES - _NOISE_HEIGHT) // 2
            col = (COLUMNS - _NOISE_WIDTH) // 2
            self.display.randomize_region(row, col, _NOISE_HEIGHT, _NOISE_WIDTH)
            return self.display.render_region(row, col, _NOISE_HEIGHT, _NOISE_WIDTH)
        return None

    def run(self) -> None:
        try:
            import pygame  # type: ignore
        except Exception as exc:  # pragma: no cover - optional dependency
            raise RuntimeError("pygame is required to run the UI") from exc

        pygame.init()
        pygame.display.set_caption("ZX Spectrum Display")

        flags = pygame.FULLSCREEN if self._config.fullscreen else 0
        screen = pygame.display.set_mode(self.window_size, flags)
        self.display.surface = PygameSurface(screen)

        self.prepare_screen()
        self.display.update()
        pygame.display.flip()

        clock = pygame.time.Clock()
        self._running = True
        while self._running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self._running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    self._running = False

            frame_start = time.perf_counter()
            if self.step() is not None:
                pygame.display.flip()
            frame_duration = time.perf_counter() - frame_start

            if self._perf_enabled:
                debug_log("perf", "frame=%d frame_ms=%.3f", self._frame_counter, frame_duration * 1000.0)

            clock.tick(self._config.frame_rate)

        pygame.quit()


__all__ = ["AppConfig", "PygameSurface", "ZXDisplayApp", "DEMOS"]
