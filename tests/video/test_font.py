"""Unit tests for the character ROM."""

from __future__ import annotations

import pytest

from zxdisplay.video.font import GLYPH_BYTES, GLYPH_COUNT, PLACEHOLDER_CODE, SPECTRUM_ROM_FONT, FontSet


def test_rom_size() -> None:
    assert GLYPH_COUNT == 96
    assert len(SPECTRUM_ROM_FONT) == 96 * GLYPH_BYTES


def test_space_is_blank_and_letter_is_not() -> None:
    font = FontSet()
    assert font.get_glyph(ord(" ")) == bytes(GLYPH_BYTES)
    assert any(font.get_glyph(ord("A")))


def test_glyph_offset_matches_code() -> None:
    font = FontSet()
    assert font.glyph_offset(0x20) == 0
    assert font.glyph_offset(ord("A")) == (0x41 - 0x20) * 8
    assert font.get_glyph(0x7F) == SPECTRUM_ROM_FONT[-GLYPH_BYTES:]


@pytest.mark.parametrize("code", [0x00, 0x1F, 0x80, 0xFF, -1])
def test_unprintable_codes_use_placeholder(code: int) -> None:
    font = FontSet()
    assert font.get_glyph(code) == font.get_glyph(PLACEHOLDER_CODE)


def test_custom_rom_must_hold_all_glyphs() -> None:
    rom = bytes(range(256)) * 3
    font = FontSet(rom)
    assert font.get_glyph(0x20) == bytes(range(8))
    with pytest.raises(ValueError):
        FontSet(bytes(10))
