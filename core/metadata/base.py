# Path: core/metadata/base.py
# Purpose: Define the MetadataExtractor interface used by scanning and display.
# Layer: core/metadata.
# Details: Implementations return an ordered tag bundle, or None when a file carries no readable metadata.

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from core.models.domain import MetadataBundle


class MetadataExtractor(ABC):
    """Abstract base class for embedded-metadata readers."""

    name: str

    @abstractmethod
    def extract(self, path: Union[str, Path]) -> Optional[MetadataBundle]:
        """Return the ordered (tag, value) pairs of ``path`` or None if absent or unparseable."""
