# Path: core/models/__init__.py
# Purpose: Package initializer for domain model definitions.
# Layer: core/models.
# Details: Exposes dataclasses used across scanning, metadata, imaging, and display layers.

from .domain import BrowserState, DecodedImage, MetadataBundle, MetadataTag

__all__ = ["BrowserState", "DecodedImage", "MetadataBundle", "MetadataTag"]
