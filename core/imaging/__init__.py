# Path: core/imaging/__init__.py
# Purpose: Package initializer for image decoding and scaling.
# Layer: core/imaging.
# Details: Exposes the decoder interface, the Pillow implementation, and the resize math.

from .base import ImageDecoder
from .pillow_decoder import PillowImageDecoder
from .scaling import DISPLAY_HEIGHT, InvalidImageSize, scaled_size

__all__ = ["ImageDecoder", "PillowImageDecoder", "DISPLAY_HEIGHT", "InvalidImageSize", "scaled_size"]
