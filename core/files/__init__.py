# Path: core/files/__init__.py
# Purpose: Package initializer for filesystem helpers.
# Layer: core/files.
# Details: Exposes the predicates deciding which directory entries are browsable images.

from .classifier import IMAGE_EXTENSIONS, is_image_file, is_regular_file

__all__ = ["IMAGE_EXTENSIONS", "is_image_file", "is_regular_file"]
