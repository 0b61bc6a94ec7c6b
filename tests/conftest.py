"""Shared test fixtures."""

from __future__ import annotations

import pytest

from pnmkit.codec import decode_bytes
from pnmkit.models.image import BitmapImage, ColorImage, GreyscaleImage


# Sample files, one per variant

P1_ALTERNATING = b"""P1
# 4x4 checker rows
4 4
1 0 1 0
0 1 0 1
1 0 1 0
0 1 0 1
"""

P2_SMALL = b"P2\n3 2\n255\n0 128 255\n10 20 30\n"

P3_SMALL = b"P3\n2 2\n255\n255 0 0 0 255 0\n0 0 255 255 255 255\n"

# 10 pixels wide: two bytes per row, six padding bits
P4_SMALL = b"P4\n10 2\n" + bytes([0b10101010, 0b11000000, 0b00000000, 0b01000000])

P5_SMALL = b"P5\n3 2\n255\n" + bytes([0, 128, 255, 10, 20, 30])

P6_SMALL = b"P6\n2 1\n255\n" + bytes([255, 0, 0, 0, 255, 0])

ALL_SAMPLES = [P1_ALTERNATING, P2_SMALL, P3_SMALL, P4_SMALL, P5_SMALL, P6_SMALL]


@pytest.fixture
def checker_bitmap() -> BitmapImage:
    return decode_bytes(P1_ALTERNATING)


@pytest.fixture
def small_greyscale() -> GreyscaleImage:
    return decode_bytes(P2_SMALL)


@pytest.fixture
def small_color() -> ColorImage:
    return decode_bytes(P3_SMALL)


@pytest.fixture
def blank_bitmap() -> BitmapImage:
    return BitmapImage.blank(5, 5)
