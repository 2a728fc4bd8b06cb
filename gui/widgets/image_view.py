# Path: gui/widgets/image_view.py
# Purpose: Display the already-scaled image of the selected entry.
# Layer: gui.
# Details: Wraps QLabel and converts Pillow images to QPixmap without rescaling them again.

from __future__ import annotations

from typing import Optional

from PIL.ImageQt import ImageQt
from PySide6.QtCore import Qt
from PySide6.QtGui import QPixmap
from PySide6.QtWidgets import QLabel

from core.models.domain import DecodedImage


class ImageView(QLabel):
    """Label showing one decoded image at its native (display) size."""

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self.setAlignment(Qt.AlignLeft | Qt.AlignTop)

    def set_image(self, image: Optional[DecodedImage]) -> None:
        if image is None:
            self.clear()
            self.resize(0, 0)
            return
        pixmap = to_pixmap(image)
        self.setPixmap(pixmap)
        self.resize(pixmap.size())


def to_pixmap(image: DecodedImage) -> QPixmap:
    """Convert a decoded Pillow image into a QPixmap."""

    return QPixmap.fromImage(ImageQt(image.image.convert("RGBA")))
