# Path: core/metadata/exif_extractor.py
# Purpose: Read EXIF tags from image files with Pillow.
# Layer: core/metadata.
# Details: Walks IFD groups in a fixed order and renders every value as text.

from __future__ import annotations

import logging
import struct
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Tuple, Union

from PIL import ExifTags, Image

from core.models.domain import MetadataBundle, MetadataTag
from .base import MetadataExtractor

LOGGER = logging.getLogger("image_viewer.metadata")

# Offsets to sub-IFDs are structure, not metadata.
POINTER_TAGS = frozenset({ExifTags.IFD.Exif, ExifTags.IFD.GPSInfo, ExifTags.IFD.Interop})

GROUP_ORDER: Tuple[str, ...] = ("IFD0", "IFD1", "EXIF", "GPS", "Interoperability")


class ExifMetadataExtractor(MetadataExtractor):
    """Pillow-backed EXIF reader.

    Groups are visited as IFD0, IFD1 (thumbnail), Exif, GPS and
    Interoperability; within a group tags are emitted in ascending tag id
    order. Files that cannot be opened, carry a malformed EXIF block or no
    tags at all yield None.
    """

    name = "pillow-exif"

    def extract(self, path: Union[str, Path]) -> Optional[MetadataBundle]:
        try:
            with Image.open(path) as image:
                exif = image.getexif()
                bundle = [
                    MetadataTag(_tag_name(group, tag), render_value(value))
                    for group, tag, value in _iter_entries(exif)
                ]
        except (OSError, SyntaxError, ValueError, struct.error, Image.DecompressionBombError) as exc:
            LOGGER.debug("No readable metadata in %s: %s", path, exc)
            return None
        return bundle or None


def _iter_entries(exif: Image.Exif) -> Iterator[Tuple[str, int, Any]]:
    groups = _groups(exif)
    for group in GROUP_ORDER:
        entries = groups.get(group) or {}
        for tag in sorted(entries):
            if tag in POINTER_TAGS:
                continue
            yield group, tag, entries[tag]


def _groups(exif: Image.Exif) -> Dict[str, Dict[int, Any]]:
    exif_ifd = exif.get_ifd(ExifTags.IFD.Exif)
    groups: Dict[str, Dict[int, Any]] = {
        "IFD0": dict(exif.items()),
        "IFD1": exif.get_ifd(ExifTags.IFD.IFD1),
        "EXIF": exif_ifd,
        "GPS": exif.get_ifd(ExifTags.IFD.GPSInfo),
    }
    try:
        groups["Interoperability"] = exif.get_ifd(ExifTags.IFD.Interop)
    except KeyError:
        # Pillow raises when the Exif IFD has no Interop pointer.
        pass
    return groups


def _tag_name(group: str, tag: int) -> str:
    table = ExifTags.GPSTAGS if group == "GPS" else ExifTags.TAGS
    return table.get(tag, f"0x{tag:04x}")


def render_value(value: Any) -> str:
    """Convert a raw EXIF value into display text."""

    if isinstance(value, bytes):
        text = value.rstrip(b"\x00")
        if text and all(32 <= byte < 127 for byte in text):
            return text.decode("ascii")
        return f"{len(value)} bytes undefined data"
    if isinstance(value, str):
        return value.rstrip("\x00")
    if isinstance(value, (tuple, list)):
        return ", ".join(render_value(item) for item in value)
    return str(value)
