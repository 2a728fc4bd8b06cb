# Path: gui/app.py
# Purpose: Desktop entrypoint wiring settings, logging, collaborators, and the main window.
# Layer: gui.
# Details: Runs the Qt event loop on the calling thread until the window is closed.

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from config import AppSettings, configure_logging
from core.browsing.scanner import DirectoryScanner
from core.imaging.pillow_decoder import PillowImageDecoder
from core.metadata.exif_extractor import ExifMetadataExtractor
from .main_window import MainWindow


def main() -> int:
    """Start the image viewer and block until its window closes."""

    settings = AppSettings.from_env()
    configure_logging(settings)

    app = QApplication(sys.argv)
    extractor = ExifMetadataExtractor()
    scanner = DirectoryScanner(extractor, settings.image_extensions)
    window = MainWindow(settings, scanner, PillowImageDecoder(), extractor)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
