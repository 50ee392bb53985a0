"""Unit tests for the attribute byte codec."""

from __future__ import annotations

import pytest

from zxdisplay.video.attributes import BRIGHT_BIT, clamp_colour, is_bright, pack_attribute, unpack_attribute
from zxdisplay.video.palette import (
    BLACK,
    BLUE,
    BRIGHT_BLUE,
    BRIGHT_WHITE,
    BRIGHT_YELLOW,
    RED,
    WHITE,
)


def test_pack_layout() -> None:
    # ink in bits 0-2, paper in bits 3-5
    assert pack_attribute(BLUE, WHITE) == (WHITE << 3) | BLUE
    assert pack_attribute(BLACK, BRIGHT_YELLOW) == BRIGHT_BIT | (6 << 3)


def test_round_trip_when_brightness_shared() -> None:
    for base_ink in range(8):
        for base_paper in range(8):
            for offset in (0, 8):
                ink = base_ink + offset
                paper = base_paper + offset
                assert unpack_attribute(pack_attribute(ink, paper)) == (ink, paper)


def test_bright_bit_follows_either_colour() -> None:
    for ink in range(16):
        for paper in range(16):
            attr = pack_attribute(ink, paper)
            assert is_bright(attr) == (ink > 7 or paper > 7)
            assert attr & 0x80 == 0


def test_mixed_brightness_promotes_whole_cell() -> None:
    attr = pack_attribute(BLUE, BRIGHT_WHITE)
    assert unpack_attribute(attr) == (BRIGHT_BLUE, BRIGHT_WHITE)


@pytest.mark.parametrize(
    ("value", "expected"),
    [(-1, BLACK), (-100, BLACK), (0, BLACK), (15, BRIGHT_WHITE), (16, BRIGHT_WHITE), (99, BRIGHT_WHITE), (RED, RED)],
)
def test_clamp_colour(value: int, expected: int) -> None:
    assert clamp_colour(value) == expected


def test_out_of_range_inputs_are_clamped() -> None:
    assert pack_attribute(-5, 20) == pack_attribute(BLACK, BRIGHT_WHITE)


def test_unpack_ignores_flash_bit() -> None:
    assert unpack_attribute(0x80 | pack_attribute(RED, WHITE)) == (RED, WHITE)
