"""Unit tests for the Spectrum palette."""

from __future__ import annotations

import pytest

from zxdisplay.video.palette import (
    BLACK,
    BRIGHT_BLACK,
    BRIGHT_RED,
    BRIGHT_YELLOW,
    SPECTRUM_PALETTE,
    WHITE,
    colour_index,
    hex_to_rgba,
    validate_palette,
)


def test_palette_shape() -> None:
    assert len(SPECTRUM_PALETTE) == 16
    assert all(len(colour) == 4 and colour[3] == 0xFF for colour in SPECTRUM_PALETTE)


def test_bright_black_is_black() -> None:
    assert SPECTRUM_PALETTE[BRIGHT_BLACK] == SPECTRUM_PALETTE[BLACK] == (0, 0, 0, 0xFF)


def test_normal_and_bright_intensity() -> None:
    assert SPECTRUM_PALETTE[WHITE] == (0xD7, 0xD7, 0xD7, 0xFF)
    assert SPECTRUM_PALETTE[BRIGHT_YELLOW] == (0xFF, 0xFF, 0x00, 0xFF)


def test_hex_to_rgba_rejects_short_codes() -> None:
    assert hex_to_rgba("#D70000") == (0xD7, 0, 0, 0xFF)
    with pytest.raises(ValueError):
        hex_to_rgba("#FFF")


def test_validate_palette() -> None:
    assert validate_palette(SPECTRUM_PALETTE) == SPECTRUM_PALETTE
    with pytest.raises(ValueError):
        validate_palette(SPECTRUM_PALETTE[:8])
    with pytest.raises(ValueError):
        validate_palette([(0, 0, 0)] * 16)


def test_colour_index_names() -> None:
    assert colour_index("white") == WHITE
    assert colour_index("Bright-Red") == BRIGHT_RED
    assert colour_index("bright_yellow") == BRIGHT_YELLOW
    assert colour_index("3") == 3
    with pytest.raises(ValueError):
        colour_index("orange")
