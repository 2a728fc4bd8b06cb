# Path: core/imaging/pillow_decoder.py
# Purpose: Decode and resize images with Pillow.
# Layer: core/imaging.
# Details: Pixel data is loaded eagerly so the file handle is closed before decode() returns.

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from PIL import Image

from core.models.domain import DecodedImage
from .base import ImageDecoder

LOGGER = logging.getLogger("image_viewer.imaging")

# Modes Qt cannot render directly are converted on load.
_DISPLAY_MODES = {
    "P": "RGBA", "PA": "RGBA",
    "CMYK": "RGB", "YCbCr": "RGB", "LAB": "RGB", "HSV": "RGB",
    "I;16": "I", "I;16B": "I", "I;16L": "I", "I;16N": "I",
}


class PillowImageDecoder(ImageDecoder):
    """Image decoder backed by Pillow using bilinear resampling."""

    name = "pillow"

    def __init__(self, resample: Image.Resampling = Image.Resampling.BILINEAR) -> None:
        self.resample = resample

    def decode(self, path: Union[str, Path]) -> Optional[DecodedImage]:
        try:
            with Image.open(path) as source:
                source.load()
                target_mode = _DISPLAY_MODES.get(source.mode)
                image = source.convert(target_mode) if target_mode else source.copy()
        except (OSError, ValueError, Image.DecompressionBombError) as exc:
            LOGGER.debug("Cannot decode %s: %s", path, exc)
            return None
        return DecodedImage.from_pil(image)

    def resize(self, image: DecodedImage, width: int, height: int) -> Optional[DecodedImage]:
        try:
            resized = image.image.resize((width, height), self.resample)
        except ValueError as exc:
            LOGGER.debug("Cannot resize %s image to %dx%d: %s", image.image.mode, width, height, exc)
            return None
        return DecodedImage.from_pil(resized)
