# Path: core/browsing/scanner.py
# Purpose: List the image files of one directory that match a search term.
# Layer: core/browsing.
# Details: Full, non-recursive rescan on every call; names and flattened metadata are matched by substring.

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional, Union

from core.files.classifier import IMAGE_EXTENSIONS, is_image_file, is_regular_file
from core.metadata.base import MetadataExtractor
from core.metadata.exif_extractor import ExifMetadataExtractor
from core.metadata.formatting import flatten_metadata

LOGGER = logging.getLogger("image_viewer.scanner")


class DirectoryScanner:
    """Scan a single directory for image files whose name or metadata contains a term."""

    def __init__(self, extractor: MetadataExtractor, extensions: Iterable[str] = IMAGE_EXTENSIONS) -> None:
        self.extractor = extractor
        self.extensions = tuple(extensions)

    def scan_and_filter(self, folder: Union[str, Path], search_term: str) -> List[str]:
        """
        Return matching file names in directory iteration order.

        Both checks are case-sensitive substring matches, so an empty term keeps
        every regular image file. A directory that cannot be read yields an
        empty list.

        External calls:
        - core/metadata/base.py::MetadataExtractor.extract - read tags of every candidate.
        """

        matches: List[str] = []
        try:
            with os.scandir(folder) as entries:
                for entry in entries:
                    if not self._is_candidate(folder, entry.name):
                        continue
                    metadata = flatten_metadata(self.extractor.extract(os.path.join(folder, entry.name)))
                    if search_term in entry.name or search_term in metadata:
                        matches.append(entry.name)
        except OSError as exc:
            LOGGER.debug("Cannot list %s: %s", folder, exc)
            return []
        LOGGER.debug("%d entries in %s match %r", len(matches), folder, search_term)
        return matches

    def _is_candidate(self, folder: Union[str, Path], name: str) -> bool:
        return is_regular_file(os.path.join(folder, name)) and is_image_file(name, self.extensions)


def scan_and_filter(
    folder: Union[str, Path], search_term: str, extractor: Optional[MetadataExtractor] = None
) -> List[str]:
    """Scan ``folder`` with the default EXIF extractor unless one is supplied."""

    if extractor is None:
        extractor = ExifMetadataExtractor()
    return DirectoryScanner(extractor).scan_and_filter(folder, search_term)
