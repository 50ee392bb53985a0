"""Raster compositor turning display memory into an upscaled RGBA image."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from zxdisplay.utils import debug_enabled, debug_log

from .attributes import unpack_attribute
from .geometry import BYTES_PER_PIXEL, CHAR_SIZE, COLUMNS, LINES, SCALE, clip_region
from .memory import DisplayMemory, attribute_address, pixel_address
from .palette import SPECTRUM_PALETTE, RGBAColor, validate_palette

_BIT_MASKS = (0x80, 0x40, 0x20, 0x10, 0x08, 0x04, 0x02, 0x01)


@dataclass
class RenderResult:
    """Row-major, top-to-bottom RGBA image plus its position on the screen."""

    width: int
    height: int
    pixels: bytearray
    origin: tuple[int, int] = field(default=(0, 0))

    @property
    def stride(self) -> int:
        return self.width * BYTES_PER_PIXEL

    def get_pixel(self, x: int, y: int) -> RGBAColor:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        offset = y * self.stride + x * BYTES_PER_PIXEL
        r, g, b, a = self.pixels[offset : offset + BYTES_PER_PIXEL]
        return (r, g, b, a)

    def to_surface(self):
        """Convert the image into a ``pygame.Surface``.

        Raises
        ------
        RuntimeError
            If pygame is not available.
        """

        try:
            import pygame  # type: ignore
        except Exception as exc:  # pragma: no cover - optional dependency
            raise RuntimeError("pygame is required for to_surface") from exc

        return pygame.image.frombuffer(bytes(self.pixels), (self.width, self.height), "RGBA")


class Renderer:
    """Composites the pixel and attribute planes into RGBA frames.

    Horizontal upscaling happens while each bit is written (``scale`` copies
    of the colour); vertical upscaling duplicates each finished scanline
    ``scale - 1`` times.
    """

    def __init__(self, palette: Sequence[Sequence[int]] = SPECTRUM_PALETTE, scale: int = SCALE) -> None:
        if scale <= 0:
            raise ValueError("scaling factor must be positive")
        self._palette = validate_palette(palette)
        self._scale = scale
        self._scaled_colours = tuple(bytes(colour) * scale for colour in self._palette)

    @property
    def scale(self) -> int:
        return self._scale

    @property
    def palette(self) -> tuple[RGBAColor, ...]:
        return self._palette

    def render_region(
        self,
        memory: DisplayMemory,
        row: int,
        col: int,
        height: int,
        width: int,
    ) -> RenderResult | None:
        """Render cells ``[row, row + height) x [col, col + width)``.

        The region is clipped to the screen; ``None`` is returned when nothing
        is left to draw.
        """

        region = clip_region(row, col, height, width)
        if region is None:
            return None
        row, col, height, width = region

        scale = self._scale
        scaled = self._scaled_colours
        pixel_stride = scale * BYTES_PER_PIXEL
        cell_stride = CHAR_SIZE * pixel_stride
        line_bytes = width * cell_stride
        out = bytearray(line_bytes * height * CHAR_SIZE * scale)

        pixels = memory.pixels
        attributes = memory.attributes

        last_attr = -1
        cell_rows: dict[int, bytes] = {}
        ink_px = paper_px = b""
        attr_changes = 0

        dest = 0
        for r in range(row, row + height):
            attr_base = attribute_address(r, col)
            for subrow in range(CHAR_SIZE):
                line_start = dest
                src = pixel_address(r, subrow, col)
                x = line_start
                for offset in range(width):
                    attr = attributes[attr_base + offset]
                    if attr != last_attr:
                        ink, paper = unpack_attribute(attr)
                        ink_px = scaled[ink]
                        paper_px = scaled[paper]
                        cell_rows = {}
                        last_attr = attr
                        attr_changes += 1
                    bits = pixels[src + offset]
                    cell_row = cell_rows.get(bits)
                    if cell_row is None:
                        cell_row = b"".join(ink_px if bits & mask else paper_px for mask in _BIT_MASKS)
                        cell_rows[bits] = cell_row
                    out[x : x + cell_stride] = cell_row
                    x += cell_stride
                line_end = line_start + line_bytes
                if scale > 1:
                    scanline = bytes(out[line_start:line_end])
                    for copy in range(1, scale):
                        start = line_start + copy * line_bytes
                        out[start : start + line_bytes] = scanline
                dest = line_start + line_bytes * scale

        if debug_enabled("render"):
            debug_log(
                "render",
                "region row=%d col=%d height=%d width=%d attr_changes=%d",
                row,
                col,
                height,
                width,
                attr_changes,
            )

        return RenderResult(
            width=width * CHAR_SIZE * scale,
            height=height * CHAR_SIZE * scale,
            pixels=out,
            origin=(col * CHAR_SIZE * scale, row * CHAR_SIZE * scale),
        )

    def render(self, memory: DisplayMemory) -> RenderResult:
        """Render the whole screen."""

        result = self.render_region(memory, 0, 0, LINES, COLUMNS)
        assert result is not None
        return result


__all__ = ["Renderer", "RenderResult"]
