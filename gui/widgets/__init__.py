# Path: gui/widgets/__init__.py
# Purpose: Package initializer for reusable GUI widgets.
# Layer: gui.
# Details: Exposes the image display widget.

from .image_view import ImageView

__all__ = ["ImageView"]
