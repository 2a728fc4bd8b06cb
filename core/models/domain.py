# Path: core/models/domain.py
# Purpose: Define domain models shared across scanning, metadata, imaging, and display workflows.
# Layer: core/models.
# Details: Lightweight dataclasses keep the browsing core independent of GUI widgets.

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, NamedTuple, Optional

from PIL import Image


class MetadataTag(NamedTuple):
    """A single metadata entry as rendered for display and search."""

    name: str
    value: str


# Ordered as returned by the extractor; never cached between requests.
MetadataBundle = List[MetadataTag]


@dataclass
class DecodedImage:
    """Decoded bitmap together with its pixel dimensions."""

    image: Image.Image
    width: int
    height: int

    @classmethod
    def from_pil(cls, image: Image.Image) -> "DecodedImage":
        return cls(image=image, width=image.width, height=image.height)


@dataclass
class BrowserState:
    """Mutable state owned by the browser controller.

    ``folder`` stays ``None`` until the user picks a directory. ``entries`` is
    replaced wholesale on every folder or search change, and ``selected``,
    ``image`` and ``metadata_text`` always describe the same entry.
    """

    folder: Optional[Path] = None
    search_term: str = ""
    entries: List[str] = field(default_factory=list)
    selected: Optional[str] = None
    image: Optional[DecodedImage] = None
    metadata_text: str = ""

    def clear_display(self) -> None:
        self.selected = None
        self.image = None
        self.metadata_text = ""
