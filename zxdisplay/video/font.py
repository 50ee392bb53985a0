"""8x8 character ROM for ZX Spectrum rendering."""

from __future__ import annotations

from dataclasses import dataclass

FONT_WIDTH = 8
FONT_HEIGHT = 8
GLYPH_BYTES = FONT_HEIGHT

FIRST_CODE = 0x20
LAST_CODE = 0x7F
GLYPH_COUNT = LAST_CODE - FIRST_CODE + 1
PLACEHOLDER_CODE = ord("?")

# Printable character set 0x20-0x7F, one row per glyph, MSB = leftmost pixel.
# 0x60 is the pound sign and 0x7F the copyright sign, as in the Spectrum ROM.
SPECTRUM_ROM_FONT = bytes(
    [
        0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,  # space
        0x00, 0x10, 0x10, 0x10, 0x10, 0x00, 0x10, 0x00,  # !
        0x00, 0x24, 0x24, 0x00, 0x00, 0x00, 0x00, 0x00,  # "
        0x00, 0x24, 0x7E, 0x24, 0x24, 0x7E, 0x24, 0x00,  # #
        0x00, 0x08, 0x3E, 0x28, 0x3E, 0x0A, 0x3E, 0x08,  # $
        0x00, 0x62, 0x64, 0x08, 0x10, 0x26, 0x46, 0x00,  # %
        0x00, 0x10, 0x28, 0x10, 0x2A, 0x44, 0x3A, 0x00,  # &
        0x00, 0x08, 0x10, 0x00, 0x00, 0x00, 0x00, 0x00,  # '
        0x00, 0x04, 0x08, 0x08, 0x08, 0x08, 0x04, 0x00,  # (
        0x00, 0x20, 0x10, 0x10, 0x10, 0x10, 0x20, 0x00,  # )
        0x00, 0x00, 0x14, 0x08, 0x3E, 0x08, 0x14, 0x00,  # *
        0x00, 0x00, 0x08, 0x08, 0x3E, 0x08, 0x08, 0x00,  # +
        0x00, 0x00, 0x00, 0x00, 0x00, 0x08, 0x08, 0x10,  # ,
        0x00, 0x00, 0x00, 0x00, 0x3E, 0x00, 0x00, 0x00,  # -
        0x00, 0x00, 0x00, 0x00, 0x00, 0x18, 0x18, 0x00,  # .
        0x00, 0x00, 0x02, 0x04, 0x08, 0x10, 0x20, 0x00,  # /
        0x00, 0x3C, 0x46, 0x4A, 0x52, 0x62, 0x3C, 0x00,  # 0
        0x00, 0x18, 0x28, 0x08, 0x08, 0x08, 0x3E, 0x00,  # 1
        0x00, 0x3C, 0x42, 0x02, 0x3C, 0x40, 0x7E, 0x00,  # 2
        0x00, 0x3C, 0x42, 0x0C, 0x02, 0x42, 0x3C, 0x00,  # 3
        0x00, 0x08, 0x18, 0x28, 0x48, 0x7E, 0x08, 0x00,  # 4
        0x00, 0x7E, 0x40, 0x7C, 0x02, 0x42, 0x3C, 0x00,  # 5
        0x00, 0x3C, 0x40, 0x7C, 0x42, 0x42, 0x3C, 0x00,  # 6
        0x00, 0x7E, 0x02, 0x04, 0x08, 0x10, 0x10, 0x00,  # 7
        0x00, 0x3C, 0x42, 0x3C, 0x42, 0x42, 0x3C, 0x00,  # 8
        0x00, 0x3C, 0x42, 0x42, 0x3E, 0x02, 0x3C, 0x00,  # 9
        0x00, 0x00, 0x00, 0x10, 0x00, 0x00, 0x10, 0x00,  # :
        0x00, 0x00, 0x10, 0x00, 0x00, 0x10, 0x10, 0x20,  # ;
        0x00, 0x00, 0x04, 0x08, 0x10, 0x08, 0x04, 0x00,  # <
        0x00, 0x00, 0x00, 0x3E, 0x00, 0x3E, 0x00, 0x00,  # =
        0x00, 0x00, 0x10, 0x08, 0x04, 0x08, 0x10, 0x00,  # >
        0x00, 0x3C, 0x42, 0x04, 0x08, 0x00, 0x08, 0x00,  # ?
        0x00, 0x3C, 0x4A, 0x56, 0x5E, 0x40, 0x3C, 0x00,  # @
        0x00, 0x3C, 0x42, 0x42, 0x7E, 0x42, 0x42, 0x00,  # A
        0x00, 0x7C, 0x42, 0x7C, 0x42, 0x42, 0x7C, 0x00,  # B
        0x00, 0x3C, 0x42, 0x40, 0x40, 0x42, 0x3C, 0x00,  # C
        0x00, 0x78, 0x44, 0x42, 0x42, 0x44, 0x78, 0x00,  # D
        0x00, 0x7E, 0x40, 0x7C, 0x40, 0x40, 0x7E, 0x00,  # E
        0x00, 0x7E, 0x40, 0x7C, 0x40, 0x40, 0x40, 0x00,  # F
        0x00, 0x3C, 0x42, 0x40, 0x4E, 0x42, 0x3C, 0x00,  # G
        0x00, 0x42, 0x42, 0x7E, 0x42, 0x42, 0x42, 0x00,  # H
        0x00, 0x3E, 0x08, 0x08, 0x08, 0x08, 0x3E, 0x00,  # I
        0x00, 0x02, 0x02, 0x02, 0x42, 0x42, 0x3C, 0x00,  # J
        0x00, 0x44, 0x48, 0x70, 0x48, 0x44, 0x42, 0x00,  # K
        0x00, 0x40, 0x40, 0x40, 0x40, 0x40, 0x7E, 0x00,  # L
        0x00, 0x42, 0x66, 0x5A, 0x42, 0x42, 0x42, 0x00,  # M
        0x00, 0x42, 0x62, 0x52, 0x4A, 0x46, 0x42, 0x00,  # N
        0x00, 0x3C, 0x42, 0x42, 0x42, 0x42, 0x3C, 0x00,  # O
        0x00, 0x7C, 0x42, 0x42, 0x7C, 0x40, 0x40, 0x00,  # P
        0x00, 0x3C, 0x42, 0x42, 0x52, 0x4A, 0x3C, 0x00,  # Q
        0x00, 0x7C, 0x42, 0x42, 0x7C, 0x44, 0x42, 0x00,  # R
        0x00, 0x3C, 0x40, 0x3C, 0x02, 0x42, 0x3C, 0x00,  # S
        0x00, 0xFE, 0x10, 0x10, 0x10, 0x10, 0x10, 0x00,  # T
        0x00, 0x42, 0x42, 0x42, 0x42, 0x42, 0x3C, 0x00,  # U
        0x00, 0x42, 0x42, 0x42, 0x42, 0x24, 0x18, 0x00,  # V
        0x00, 0x42, 0x42, 0x42, 0x42, 0x5A, 0x24, 0x00,  # W
        0x00, 0x42, 0x24, 0x18, 0x18, 0x24, 0x42, 0x00,  # X
        0x00, 0x82, 0x44, 0x28, 0x10, 0x10, 0x10, 0x00,  # Y
        0x00, 0x7E, 0x04, 0x08, 0x10, 0x20, 0x7E, 0x00,  # Z
        0x00, 0x0E, 0x08, 0x08, 0x08, 0x08, 0x0E, 0x00,  # [
        0x00, 0x00, 0x40, 0x20, 0x10, 0x08, 0x04, 0x00,  # backslash
        0x00, 0x70, 0x10, 0x10, 0x10, 0x10, 0x70, 0x00,  # ]
        0x00, 0x10, 0x38, 0x54, 0x10, 0x10, 0x10, 0x00,  # ^ (up arrow)
        0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0xFF,  # _
        0x00, 0x1C, 0x22, 0x78, 0x20, 0x20, 0x7E, 0x00,  # pound
        0x00, 0x00, 0x38, 0x04, 0x3C, 0x44, 0x3C, 0x00,  # a
        0x00, 0x20, 0x20, 0x3C, 0x22, 0x22, 0x3C, 0x00,  # b
        0x00, 0x00, 0x1C, 0x20, 0x20, 0x20, 0x1C, 0x00,  # c
        0x00, 0x04, 0x04, 0x3C, 0x44, 0x44, 0x3C, 0x00,  # d
        0x00, 0x00, 0x38, 0x44, 0x78, 0x40, 0x3C, 0x00,  # e
        0x00, 0x0C, 0x10, 0x18, 0x10, 0x10, 0x10, 0x00,  # f
        0x00, 0x00, 0x3C, 0x44, 0x44, 0x3C, 0x04, 0x38,  # g
        0x00, 0x40, 0x40, 0x78, 0x44, 0x44, 0x44, 0x00,  # h
        0x00, 0x10, 0x00, 0x30, 0x10, 0x10, 0x38, 0x00,  # i
        0x00, 0x04, 0x00, 0x04, 0x04, 0x04, 0x24, 0x18,  # j
        0x00, 0x20, 0x28, 0x30, 0x30, 0x28, 0x24, 0x00,  # k
        0x00, 0x10, 0x10, 0x10, 0x10, 0x10, 0x0C, 0x00,  # l
        0x00, 0x00, 0x68, 0x54, 0x54, 0x54, 0x54, 0x00,  # m
        0x00, 0x00, 0x78, 0x44, 0x44, 0x44, 0x44, 0x00,  # n
        0x00, 0x00, 0x38, 0x44, 0x44, 0x44, 0x38, 0x00,  # o
        0x00, 0x00, 0x78, 0x44, 0x44, 0x78, 0x40, 0x40,  # p
        0x00, 0x00, 0x3C, 0x44, 0x44, 0x3C, 0x04, 0x06,  # q
        0x00, 0x00, 0x1C, 0x20, 0x20, 0x20, 0x20, 0x00,  # r
        0x00, 0x00, 0x38, 0x40, 0x38, 0x04, 0x78, 0x00,  # s
        0x00, 0x10, 0x38, 0x10, 0x10, 0x10, 0x0C, 0x00,  # t
        0x00, 0x00, 0x44, 0x44, 0x44, 0x44, 0x38, 0x00,  # u
        0x00, 0x00, 0x44, 0x44, 0x28, 0x28, 0x10, 0x00,  # v
        0x00, 0x00, 0x44, 0x54, 0x54, 0x54, 0x28, 0x00,  # w
        0x00, 0x00, 0x44, 0x28, 0x10, 0x28, 0x44, 0x00,  # x
        0x00, 0x00, 0x44, 0x44, 0x44, 0x3C, 0x04, 0x38,  # y
        0x00, 0x00, 0x7C, 0x08, 0x10, 0x20, 0x7C, 0x00,  # z
        0x00, 0x0E, 0x08, 0x30, 0x08, 0x08, 0x0E, 0x00,  # {
        0x00, 0x08, 0x08, 0x08, 0x08, 0x08, 0x08, 0x00,  # |
        0x00, 0x70, 0x10, 0x0C, 0x10, 0x10, 0x70, 0x00,  # }
        0x00, 0x14, 0x28, 0x00, 0x00, 0x00, 0x00, 0x00,  # ~
        0x3C, 0x42, 0x99, 0xA1, 0xA1, 0x99, 0x42, 0x3C,  # copyright
    ]
)


def is_printable(code: int) -> bool:
    return FIRST_CODE <= code <= LAST_CODE


@dataclass
class FontSet:
    """Stores the printable glyphs of the character ROM."""

    rom: bytes

    def __init__(self, rom: bytes | None = None) -> None:
        if rom is None:
            rom = SPECTRUM_ROM_FONT
        if len(rom) != GLYPH_COUNT * GLYPH_BYTES:
            raise ValueError(f"ROM font must contain exactly {GLYPH_COUNT} glyphs")
        self.rom = bytes(rom)

    def glyph_offset(self, code: int) -> int:
        """Offset of ``code`` in the ROM; unprintable codes map to the placeholder."""

        if not is_printable(code):
            code = PLACEHOLDER_CODE
        return (code - FIRST_CODE) * GLYPH_BYTES

    def get_glyph(self, code: int) -> bytes:
        """Return the eight row bytes of the glyph for ``code``."""

        offset = self.glyph_offset(code)
        return self.rom[offset : offset + GLYPH_BYTES]


__all__ = [
    "FONT_WIDTH",
    "FONT_HEIGHT",
    "GLYPH_BYTES",
    "FIRST_CODE",
    "LAST_CODE",
    "GLYPH_COUNT",
    "PLACEHOLDER_CODE",
    "SPECTRUM_ROM_FONT",
    "FontSet",
    "is_printable",
]
