"""Unit tests for the virtual display memory planes."""

from __future__ import annotations

import random

from zxdisplay.video.attributes import pack_attribute, unpack_attribute
from zxdisplay.video.geometry import ATTRIBUTE_PLANE_SIZE, COLUMNS, LINES, PIXEL_PLANE_SIZE
from zxdisplay.video.memory import DITHER_EVEN, DITHER_ODD, DisplayMemory, attribute_address, pixel_address
from zxdisplay.video.palette import BLUE, RED, WHITE, YELLOW


def test_plane_sizes() -> None:
    memory = DisplayMemory()
    assert len(memory.pixels) == PIXEL_PLANE_SIZE == 6144
    assert len(memory.attributes) == ATTRIBUTE_PLANE_SIZE == 768


def test_pixel_address_is_character_row_major() -> None:
    assert pixel_address(0, 0, 0) == 0
    assert pixel_address(0, 0, 1) == 1
    assert pixel_address(0, 1, 0) == COLUMNS
    assert pixel_address(1, 0, 0) == 8 * COLUMNS
    assert pixel_address(LINES - 1, 7, COLUMNS - 1) == PIXEL_PLANE_SIZE - 1
    assert attribute_address(2, 3) == 2 * COLUMNS + 3


def test_clear_sets_attributes_and_dither() -> None:
    memory = DisplayMemory()
    memory.clear(BLUE, WHITE)

    assert all(unpack_attribute(attr) == (BLUE, WHITE) for attr in memory.attributes)
    for y in range(LINES * 8):
        expected = DITHER_ODD if y % 2 else DITHER_EVEN
        line = memory.pixels[y * COLUMNS : (y + 1) * COLUMNS]
        assert line == bytes([expected]) * COLUMNS


def test_set_glyph_writes_rows_and_attribute() -> None:
    memory = DisplayMemory()
    glyph = bytes([1, 2, 3, 4, 5, 6, 7, 8])
    attr = pack_attribute(RED, YELLOW)
    memory.set_glyph(3, 4, glyph, attr)

    assert memory.attribute_at(3, 4) == attr
    assert [memory.pixel_row(3, subrow, 4) for subrow in range(8)] == list(glyph)
    assert memory.pixel_row(3, 0, 5) == 0


def test_set_glyph_outside_grid_is_ignored() -> None:
    memory = DisplayMemory()
    before = memory.snapshot()
    glyph = bytes([0xFF] * 8)
    for row, col in ((-1, 0), (0, -1), (LINES, 0), (0, COLUMNS)):
        memory.set_glyph(row, col, glyph, 0x38)
    assert memory.snapshot() == before


def _changed_cells(before: tuple[bytes, bytes], after: tuple[bytes, bytes]) -> set[tuple[int, int]]:
    changed = set()
    for row in range(LINES):
        for col in range(COLUMNS):
            if before[1][attribute_address(row, col)] != after[1][attribute_address(row, col)]:
                changed.add((row, col))
            for subrow in range(8):
                address = pixel_address(row, subrow, col)
                if before[0][address] != after[0][address]:
                    changed.add((row, col))
    return changed


def test_randomize_region_is_confined() -> None:
    memory = DisplayMemory(random.Random(1234))
    memory.clear(BLUE, WHITE)
    before = memory.snapshot()

    memory.randomize_region(2, 3, 4, 5)

    after = memory.snapshot()
    changed = _changed_cells(before, after)
    inside = {(row, col) for row in range(2, 6) for col in range(3, 8)}
    assert changed
    assert changed <= inside
    assert all(attr & 0x80 == 0 for attr in memory.attributes)


def test_randomize_region_is_clipped() -> None:
    memory = DisplayMemory(random.Random(99))
    before = memory.snapshot()

    memory.randomize_region(LINES - 2, COLUMNS - 2, 10, 10)

    changed = _changed_cells(before, memory.snapshot())
    assert changed <= {(LINES - 2, COLUMNS - 2), (LINES - 2, COLUMNS - 1), (LINES - 1, COLUMNS - 2), (LINES - 1, COLUMNS - 1)}


def test_randomize_empty_region_is_noop() -> None:
    memory = DisplayMemory(random.Random(5))
    before = memory.snapshot()
    memory.randomize_region(0, 0, 0, 10)
    memory.randomize_region(0, 0, 10, -1)
    memory.randomize_region(LINES, 0, 3, 3)
    assert memory.snapshot() == before


def test_randomize_is_reproducible_with_seed() -> None:
    first = DisplayMemory(random.Random(7))
    second = DisplayMemory(random.Random(7))
    first.randomize_region(0, 0, LINES, COLUMNS)
    second.randomize_region(0, 0, LINES, COLUMNS)
    assert first.snapshot() == second.snapshot()
