# Path: core/metadata/__init__.py
# Purpose: Package initializer for metadata extraction.
# Layer: core/metadata.
# Details: Exposes the extractor interface, the Pillow EXIF implementation, and text helpers.

from .base import MetadataExtractor
from .exif_extractor import ExifMetadataExtractor
from .formatting import flatten_metadata, format_metadata

__all__ = ["MetadataExtractor", "ExifMetadataExtractor", "flatten_metadata", "format_metadata"]
