# Path: core/metadata/formatting.py
# Purpose: Turn metadata bundles into display text and searchable strings.
# Layer: core/metadata.
# Details: Strings grow as needed; no value is truncated.

from __future__ import annotations

from typing import Optional

from core.models.domain import MetadataBundle


def flatten_metadata(bundle: Optional[MetadataBundle]) -> str:
    """Concatenate tag values, each followed by a single space; tag names are left out.

    The result is used only for substring search. A missing bundle flattens to an
    empty string so the file can still match on its name.
    """

    if not bundle:
        return ""
    return "".join(f"{tag.value} " for tag in bundle)


def format_metadata(bundle: MetadataBundle) -> str:
    """Render one ``"<tag>: <value>"`` line per entry, preserving extractor order."""

    return "".join(f"{tag.name}: {tag.value}\n" for tag in bundle)
