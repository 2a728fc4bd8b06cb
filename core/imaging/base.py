# Path: core/imaging/base.py
# Purpose: Define the ImageDecoder interface for loading and resizing bitmaps.
# Layer: core/imaging.
# Details: Decoding failures are reported as None so callers can keep what they already show.

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from core.models.domain import DecodedImage


class ImageDecoder(ABC):
    """Abstract base class for image decoding backends."""

    name: str

    @abstractmethod
    def decode(self, path: Union[str, Path]) -> Optional[DecodedImage]:
        """Return the decoded image at ``path``, or None if it cannot be read."""

    @abstractmethod
    def resize(self, image: DecodedImage, width: int, height: int) -> Optional[DecodedImage]:
        """Return a new image scaled to exactly ``width`` x ``height``, or None if it cannot be resampled."""
