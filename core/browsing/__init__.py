# Path: core/browsing/__init__.py
# Purpose: Package initializer for directory browsing.
# Layer: core/browsing.
# Details: Exposes the scanner/filter and the event-driven controller.

from .controller import BrowserController, BrowserView
from .scanner import DirectoryScanner, scan_and_filter

__all__ = ["BrowserController", "BrowserView", "DirectoryScanner", "scan_and_filter"]
