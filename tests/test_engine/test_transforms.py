"""Tests for geometric and sample-value transforms."""

import numpy as np
import pytest

from pnmkit.codec.parser import decode_bytes
from pnmkit.engine.transforms import flip, flop, invert, rotate90cw, set_magic_number, set_max_value
from pnmkit.errors import OperationError
from pnmkit.models.header import MagicNumber
from pnmkit.models.image import ColorImage, GreyscaleImage, Pixel
from tests.conftest import ALL_SAMPLES, P1_ALTERNATING


def _grey(rows, max_value=255):
    return GreyscaleImage(data=np.array(rows), magic=MagicNumber.P2, max_value=max_value)


def test_flip_checker_scenario():
    img = decode_bytes(P1_ALTERNATING)
    flip(img)
    assert img.data[0].astype(int).tolist() == [0, 1, 0, 1]


def test_flip_mirrors_columns():
    img = flip(_grey([[1, 2, 3], [4, 5, 6]]))
    assert img.data.tolist() == [[3, 2, 1], [6, 5, 4]]


def test_flop_mirrors_rows():
    img = flop(_grey([[1, 2, 3], [4, 5, 6]]))
    assert img.data.tolist() == [[4, 5, 6], [1, 2, 3]]


@pytest.mark.parametrize("sample", ALL_SAMPLES)
def test_flip_and_flop_are_involutions(sample):
    img = decode_bytes(sample)
    original = img.copy()
    assert flip(flip(img)) == original
    assert flop(flop(img)) == original


def test_rotate90cw_moves_pixels():
    img = rotate90cw(_grey([[1, 2, 3], [4, 5, 6]]))
    assert img.size() == (2, 3)
    assert img.data.tolist() == [[4, 1], [5, 2], [6, 3]]
    # (x, y) = (0, 0) moved to (height - 1 - 0, 0)
    assert img.get(1, 0) == 1


def test_rotate90cw_color_keeps_channels():
    img = ColorImage.blank(3, 1)
    img.set(0, 0, (1, 2, 3))
    rotate90cw(img)
    assert img.size() == (1, 3)
    assert img.get(0, 0) == Pixel(1, 2, 3)


@pytest.mark.parametrize("sample", ALL_SAMPLES)
def test_four_rotations_restore(sample):
    img = decode_bytes(sample)
    original = img.copy()
    for _ in range(4):
        rotate90cw(img)
    assert img == original


def test_invert_bitmap_twice(checker_bitmap):
    original = checker_bitmap.copy()
    invert(checker_bitmap)
    assert checker_bitmap.get(0, 0) is False
    assert invert(checker_bitmap) == original


def test_invert_greyscale():
    img = invert(_grey([[0, 100, 255]]))
    assert img.data.tolist() == [[255, 155, 0]]


def test_invert_color_uses_declared_max():
    img = ColorImage.blank(1, 1, max_value=100, fill=(10, 20, 30))
    invert(img)
    assert img.get(0, 0) == Pixel(90, 80, 70)
    invert(img)
    assert img.get(0, 0) == Pixel(10, 20, 30)


def test_invert_greyscale_non_255_max_is_involution():
    img = _grey([[0, 7, 15]], max_value=15)
    invert(img)
    assert img.data.tolist() == [[15, 8, 0]]
    invert(img)
    assert img.data.tolist() == [[0, 7, 15]]


def test_set_max_value_rescales():
    img = set_max_value(_grey([[0, 128, 255]]), 100)
    assert img.max_value == 100
    assert img.data.tolist() == [[0, 50, 100]]


def test_set_max_value_color():
    img = ColorImage.blank(1, 1, max_value=10, fill=(10, 5, 0))
    set_max_value(img, 255)
    assert img.get(0, 0) == Pixel(255, 127, 0)
    assert img.header.max_value == 255


def test_set_max_value_rejects_zero_old_max():
    img = _grey([[0]])
    img.max_value = 0
    with pytest.raises(OperationError):
        set_max_value(img, 10)


@pytest.mark.parametrize("new_max", [0, 256])
def test_set_max_value_rejects_out_of_range(new_max):
    with pytest.raises(OperationError):
        set_max_value(_grey([[1]]), new_max)


def test_set_max_value_rejects_bitmap(checker_bitmap):
    with pytest.raises(OperationError):
        set_max_value(checker_bitmap, 10)


def test_set_magic_number_op(small_color):
    set_magic_number(small_color, "P6")
    assert small_color.magic is MagicNumber.P6
