# Path: gui/__init__.py
# Purpose: Package initializer for GUI layer.
# Layer: gui.
# Details: Provide lightweight exports without importing MainWindow to avoid side effects.

from .widgets.image_view import ImageView

__all__ = ["ImageView"]
