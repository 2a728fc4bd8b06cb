# Path: core/files/classifier.py
# Purpose: Classify directory entries as regular files and as image files.
# Layer: core/files.
# Details: Pure predicates; filesystem errors are reported as "not a match" rather than raised.

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import Iterable, Union

# Suffix matching is case-sensitive: "photo.JPG" is not listed.
IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg", ".gif", ".bmp")


def is_image_file(name: str, extensions: Iterable[str] = IMAGE_EXTENSIONS) -> bool:
    """Return True if ``name`` ends with one of the image suffixes."""

    return name.endswith(tuple(extensions))


def is_regular_file(path: Union[str, Path]) -> bool:
    """Return True only for regular files; symlinks, directories and devices are excluded."""

    try:
        mode = os.lstat(path).st_mode
    except OSError:
        return False
    return stat.S_ISREG(mode)
