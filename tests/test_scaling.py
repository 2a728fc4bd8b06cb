"""Tests for the height-locked resize math."""
from __future__ import annotations

import pytest

from core.imaging.scaling import DISPLAY_HEIGHT, InvalidImageSize, scaled_size


def test_wide_image():
    assert scaled_size(1600, 400) == (3200, 800)


def test_width_is_floored():
    # 1000 * 800 / 3 = 266666.67
    assert scaled_size(1000, 3) == (266666, 800)
    assert scaled_size(640, 480) == (1066, 800)


def test_default_height_is_800():
    assert DISPLAY_HEIGHT == 800
    assert scaled_size(800, 800)[1] == 800


def test_custom_target_height():
    assert scaled_size(1600, 400, target_height=200) == (800, 200)


def test_tiny_width_is_clamped_to_one_pixel():
    assert scaled_size(1, 1000) == (1, 800)


@pytest.mark.parametrize("width,height", [(100, 0), (100, -5), (-1, 10)])
def test_invalid_dimensions_raise(width, height):
    with pytest.raises(InvalidImageSize):
        scaled_size(width, height)


def test_invalid_size_is_value_error():
    assert issubclass(InvalidImageSize, ValueError)
