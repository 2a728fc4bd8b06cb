# Path: core/imaging/scaling.py
# Purpose: Compute display sizes that lock the height and preserve aspect ratio.
# Layer: core/imaging.
# Details: Integer arithmetic throughout; invalid source dimensions raise InvalidImageSize.

from __future__ import annotations

from typing import Tuple

DISPLAY_HEIGHT = 800


class InvalidImageSize(ValueError):
    """Raised when an image's dimensions cannot be scaled."""


def scaled_size(width: int, height: int, target_height: int = DISPLAY_HEIGHT) -> Tuple[int, int]:
    """Return ``(width * target_height // height, target_height)``.

    The derived width is floored. Images so narrow that it floors to zero are
    given a width of one pixel.
    """

    if height <= 0 or width < 0:
        raise InvalidImageSize(f"Cannot scale an image of size {width}x{height}.")
    if target_height <= 0:
        raise InvalidImageSize(f"Target height must be positive, got {target_height}.")
    new_width = (width * target_height) // height
    return max(1, new_width), target_height
