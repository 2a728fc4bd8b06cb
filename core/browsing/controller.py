# Path: core/browsing/controller.py
# Purpose: React to folder, search, and selection events and drive what the view displays.
# Layer: core/browsing.
# Details: Owns the BrowserState; the GUI forwards events here and renders through the BrowserView protocol.

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Protocol, Sequence, Union

from config.settings import AppSettings
from core.imaging.base import ImageDecoder
from core.imaging.scaling import InvalidImageSize, scaled_size
from core.metadata.base import MetadataExtractor
from core.metadata.formatting import format_metadata
from core.models.domain import BrowserState, DecodedImage
from .scanner import DirectoryScanner

LOGGER = logging.getLogger("image_viewer.controller")


class BrowserView(Protocol):
    """Rendering surface driven by the controller."""

    def set_entry_list(self, names: Sequence[str]) -> None:
        """Replace every listed entry with ``names``."""

    def set_image(self, image: Optional[DecodedImage]) -> None:
        """Show ``image``, or clear the image area when None."""

    def set_metadata_text(self, text: str) -> None:
        """Overwrite the metadata panel with ``text``."""


class BrowserController:
    """Coordinate scanning, decoding, and metadata display for the selected folder."""

    def __init__(
        self,
        view: BrowserView,
        scanner: DirectoryScanner,
        decoder: ImageDecoder,
        extractor: MetadataExtractor,
        settings: Optional[AppSettings] = None,
    ) -> None:
        self.view = view
        self.scanner = scanner
        self.decoder = decoder
        self.extractor = extractor
        self.settings = settings or AppSettings()
        self.state = BrowserState()

    def on_folder_chosen(self, path: Union[str, Path, None]) -> None:
        """Handle the folder dialog result; a cancelled dialog (None or empty) changes nothing."""

        if not path:
            return
        self.on_folder_changed(Path(path))

    def on_folder_changed(self, new_folder: Union[str, Path]) -> None:
        self.state.folder = Path(new_folder)
        LOGGER.info("Selected folder: %s", self.state.folder)
        self.on_search_changed(self.state.search_term)

    def on_search_changed(self, term: str) -> None:
        """
        Recompute the entry list for ``term`` and replace the displayed list.

        External calls:
        - core/browsing/scanner.py::DirectoryScanner.scan_and_filter - full rescan of the current folder.
        """

        state = self.state
        state.search_term = term
        entries = [] if state.folder is None else self.scanner.scan_and_filter(state.folder, term)
        had_selection = state.selected is not None
        state.entries = entries
        state.selected = None
        self.view.set_entry_list(list(entries))
        if had_selection or not entries:
            self._clear_display()

    def on_selection_changed(self, name: Optional[str]) -> None:
        """Show the image and metadata of ``name``, or clear both when nothing is selected."""

        state = self.state
        if name is None or state.folder is None:
            self._clear_display()
            return
        state.selected = name
        path = state.folder / name
        self._show_image(path)
        self._show_metadata(path)

    def _show_image(self, path: Path) -> None:
        """
        Decode, rescale to the display height, and show the image; failures keep the current image.

        External calls:
        - core/imaging/base.py::ImageDecoder.decode - load the bitmap.
        - core/imaging/base.py::ImageDecoder.resize - produce the display-sized bitmap.
        """

        decoded = self.decoder.decode(path)
        if decoded is None:
            LOGGER.warning("Could not decode %s; keeping the current image", path)
            return
        try:
            width, height = scaled_size(decoded.width, decoded.height, self.settings.display_height)
        except InvalidImageSize as exc:
            LOGGER.warning("Skipping %s: %s", path, exc)
            return
        resized = self.decoder.resize(decoded, width, height)
        if resized is None:
            LOGGER.warning("Could not resize %s; keeping the current image", path)
            return
        self.state.image = resized
        self.view.set_image(resized)

    def _show_metadata(self, path: Path) -> None:
        bundle = self.extractor.extract(path)
        text = self.settings.no_metadata_text if bundle is None else format_metadata(bundle)
        self.state.metadata_text = text
        self.view.set_metadata_text(text)

    def _clear_display(self) -> None:
        self.state.clear_display()
        self.view.set_image(None)
        self.view.set_metadata_text("")
