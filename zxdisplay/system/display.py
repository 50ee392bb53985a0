"""Display context tying memory, ink/paper state and the renderer together."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from zxdisplay.utils import debug_enabled, debug_log
from zxdisplay.video.attributes import clamp_colour, pack_attribute
from zxdisplay.video.font import FIRST_CODE, GLYPH_COUNT, FontSet, is_printable
from zxdisplay.video.geometry import COLUMNS, LINES, SCALE
from zxdisplay.video.memory import DisplayMemory
from zxdisplay.video.palette import BLACK, WHITE
from zxdisplay.video.renderer import Renderer, RenderResult

CHARSET_ROW = LINES - GLYPH_COUNT // COLUMNS


class PresentationSurface:
    """Interface for whatever shows rendered frames to the user."""

    def present(self, frame: RenderResult) -> None:  # pragma: no cover - interface
        """Blit ``frame`` at ``frame.origin``."""

        raise NotImplementedError


@dataclass
class DisplayConfig:
    """Runtime configuration for a display context."""

    scale: int = SCALE
    ink: int = BLACK
    paper: int = WHITE
    seed: Optional[int] = None
    surface: Optional[PresentationSurface] = None


class Display:
    """Owns display memory and the current ink/paper colours."""

    def __init__(
        self,
        memory: DisplayMemory,
        renderer: Renderer,
        font: FontSet,
        *,
        ink: int = BLACK,
        paper: int = WHITE,
        surface: PresentationSurface | None = None,
    ) -> None:
        self.memory = memory
        self.renderer = renderer
        self.font = font
        self.surface = surface
        self._ink = clamp_colour(ink)
        self._paper = clamp_colour(paper)

    # ------------------------------------------------------------------
    # Colour state

    @property
    def ink(self) -> int:
        return self._ink

    @property
    def paper(self) -> int:
        return self._paper

    def set_ink(self, colour: int) -> None:
        self._ink = clamp_colour(colour)

    def set_paper(self, colour: int) -> None:
        self._paper = clamp_colour(colour)

    @property
    def attribute(self) -> int:
        """Attribute byte for the current ink/paper pair."""

        return pack_attribute(self._ink, self._paper)

    @property
    def scale(self) -> int:
        return self.renderer.scale

    # ------------------------------------------------------------------
    # Drawing

    def clear(self) -> None:
        """Clear the screen to a dither of the current ink and paper."""

        self.memory.clear(self._ink, self._paper)

    def draw_char(self, row: int, col: int, char: str | int) -> None:
        if isinstance(char, str):
            if len(char) != 1:
                raise ValueError(f"expected a single character, got {char!r}")
            code = ord(char)
        else:
            code = char
        if not is_printable(code) and debug_enabled("draw"):
            debug_log("draw", "placeholder glyph for code=%#x at row=%d col=%d", code, row, col)
        self.memory.set_glyph(row, col, self.font.get_glyph(code), self.attribute)

    def draw_text(self, row: int, col: int, text: str) -> None:
        """Draw ``text`` left to right, wrapping at the right edge.

        Characters that would land below the last line are dropped.
        """

        for index, char in enumerate(text):
            if col >= COLUMNS:
                col = 0
                row += 1
            if row >= LINES:
                if debug_enabled("draw"):
                    debug_log("draw", "dropped %d characters past last line", len(text) - index)
                return
            self.draw_char(row, col, char)
            col += 1

    def draw_charset(self) -> None:
        """Print every printable character on the bottom lines of the screen."""

        text = "".join(chr(code) for code in range(FIRST_CODE, FIRST_CODE + GLYPH_COUNT))
        self.draw_text(CHARSET_ROW, 0, text)

    def randomize_region(self, row: int, col: int, height: int, width: int) -> None:
        self.memory.randomize_region(row, col, height, width)

    # ------------------------------------------------------------------
    # Rendering

    def render_region(self, row: int, col: int, height: int, width: int) -> RenderResult | None:
        """Render a cell rectangle and hand it to the presentation surface."""

        frame = self.renderer.render_region(self.memory, row, col, height, width)
        if frame is not None and self.surface is not None:
            self.surface.present(frame)
        return frame

    def update(self) -> RenderResult:
        """Refresh the whole screen."""

        frame = self.render_region(0, 0, LINES, COLUMNS)
        assert frame is not None
        return frame


def create_display(config: DisplayConfig | None = None) -> Display:
    config = config or DisplayConfig()
    rng = random.Random(config.seed)
    return Display(
        DisplayMemory(rng),
        Renderer(scale=config.scale),
        FontSet(),
        ink=config.ink,
        paper=config.paper,
        surface=config.surface,
    )


__all__ = [
    "CHARSET_ROW",
    "Display",
    "DisplayConfig",
    "PresentationSurface",
    "create_display",
]
