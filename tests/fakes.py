"""In-memory collaborators and file helpers shared by the test suite."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from PIL import Image

from core.imaging.base import ImageDecoder
from core.metadata.base import MetadataExtractor
from core.models.domain import DecodedImage, MetadataTag


class FakeExtractor(MetadataExtractor):
    """Serve canned tags keyed by file name; unknown names have no metadata."""

    name = "fake"

    def __init__(self, tags_by_name: Optional[Dict[str, List[Tuple[str, str]]]] = None) -> None:
        self.tags_by_name = tags_by_name or {}
        self.calls: List[str] = []

    def extract(self, path):
        name = Path(path).name
        self.calls.append(name)
        tags = self.tags_by_name.get(name)
        if tags is None:
            return None
        return [MetadataTag(tag, value) for tag, value in tags]


class FakeDecoder(ImageDecoder):
    """Report canned dimensions without allocating full-size bitmaps."""

    name = "fake"

    def __init__(self, sizes: Optional[Dict[str, Tuple[int, int]]] = None, unresizable: Sequence[str] = ()) -> None:
        self.sizes = sizes or {}
        self.unresizable = set(unresizable)
        self.resize_calls: List[Tuple[str, int, int]] = []

    def decode(self, path):
        name = Path(path).name
        if name not in self.sizes:
            return None
        width, height = self.sizes[name]
        image = Image.new("RGB", (1, 1))
        image.info["source"] = name
        return DecodedImage(image=image, width=width, height=height)

    def resize(self, image, width, height):
        self.resize_calls.append((image.image.info["source"], width, height))
        if image.image.info["source"] in self.unresizable:
            return None
        resized = Image.new("RGB", (1, 1))
        resized.info["source"] = image.image.info["source"]
        return DecodedImage(image=resized, width=width, height=height)


class RecordingView:
    """BrowserView double remembering the latest output and every call."""

    def __init__(self) -> None:
        self.entries: List[str] = []
        self.image: Optional[DecodedImage] = None
        self.metadata_text = ""
        self.calls: List[str] = []

    def set_entry_list(self, names: Sequence[str]) -> None:
        self.calls.append("set_entry_list")
        self.entries = list(names)

    def set_image(self, image: Optional[DecodedImage]) -> None:
        self.calls.append("set_image")
        self.image = image

    def set_metadata_text(self, text: str) -> None:
        self.calls.append("set_metadata_text")
        self.metadata_text = text


def touch(folder: Path, *names: str) -> None:
    for name in names:
        (folder / name).write_bytes(b"not really an image")


def write_image(path: Path, fmt: str, size: Tuple[int, int] = (16, 8), tags: Optional[Dict[int, Any]] = None) -> Path:
    """Save a small image; dict values in ``tags`` become sub-IFDs (Exif, GPS)."""
    image = Image.new("RGB", size, "white")
    if tags:
        exif = Image.Exif()
        for tag, value in tags.items():
            exif[tag] = value
        image.save(path, fmt, exif=exif)
    else:
        image.save(path, fmt)
    return path


def write_jpeg(path: Path, size: Tuple[int, int] = (16, 8), tags: Optional[Dict[int, Any]] = None) -> Path:
    return write_image(path, "JPEG", size, tags)


def write_png(path: Path, size: Tuple[int, int] = (16, 8), tags: Optional[Dict[int, Any]] = None) -> Path:
    return write_image(path, "PNG", size, tags)
