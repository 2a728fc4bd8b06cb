# Path: gui/main_window.py
# Purpose: Define the main desktop window: search field, folder picker, file list, image and metadata panes.
# Layer: gui.
# Details: Forwards widget signals to BrowserController and implements BrowserView for rendering.

from __future__ import annotations

from typing import Optional, Sequence

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QLineEdit,
    QMainWindow,
    QPlainTextEdit,
    QPushButton,
    QScrollArea,
    QSplitter,
    QTreeWidget,
    QTreeWidgetItem,
    QVBoxLayout,
    QWidget,
)

from config.settings import AppSettings
from core.browsing.controller import BrowserController
from core.browsing.scanner import DirectoryScanner
from core.imaging.base import ImageDecoder
from core.metadata.base import MetadataExtractor
from core.models.domain import DecodedImage
from .widgets.image_view import ImageView


class MainWindow(QMainWindow):
    """Main application window hosting the file list and the image/metadata viewer."""

    def __init__(
        self,
        settings: AppSettings,
        scanner: DirectoryScanner,
        decoder: ImageDecoder,
        extractor: MetadataExtractor,
    ) -> None:
        super().__init__()
        self.settings = settings
        self.controller = BrowserController(self, scanner, decoder, extractor, settings)
        self.setWindowTitle(settings.window_title)
        self.resize(settings.window_width, settings.window_height)
        self._build_ui()
        self._connect_signals()

    def _build_ui(self) -> None:
        container = QWidget()
        root_layout = QHBoxLayout(container)
        root_layout.setContentsMargins(0, 0, 0, 0)

        sidebar = QWidget()
        sidebar.setFixedWidth(self.settings.sidebar_width)
        sidebar_layout = QVBoxLayout(sidebar)
        sidebar_layout.setSpacing(10)

        self.search_edit = QLineEdit()
        self.search_edit.setPlaceholderText(self.settings.search_placeholder)
        sidebar_layout.addWidget(self.search_edit)

        self.open_button = QPushButton("Open Directory")
        sidebar_layout.addWidget(self.open_button)

        self.file_tree = QTreeWidget()
        self.file_tree.setColumnCount(1)
        self.file_tree.setHeaderLabels(["Image File Name"])
        self.file_tree.setRootIsDecorated(False)
        sidebar_layout.addWidget(self.file_tree, 1)
        root_layout.addWidget(sidebar)

        viewer = QSplitter(Qt.Vertical)
        self.image_view = ImageView()
        image_scroll = QScrollArea()
        image_scroll.setWidget(self.image_view)
        viewer.addWidget(image_scroll)

        self.metadata_view = QPlainTextEdit()
        self.metadata_view.setReadOnly(True)
        viewer.addWidget(self.metadata_view)
        viewer.setStretchFactor(0, 3)
        viewer.setStretchFactor(1, 1)
        root_layout.addWidget(viewer, 1)

        self.setCentralWidget(container)

    def _connect_signals(self) -> None:
        self.search_edit.textChanged.connect(self.controller.on_search_changed)
        self.open_button.clicked.connect(self._choose_folder)
        self.file_tree.itemSelectionChanged.connect(self._on_tree_selection)

    def _choose_folder(self) -> None:
        """
        Ask for a directory and hand the answer to the controller.

        External calls:
        - core/browsing/controller.py::BrowserController.on_folder_chosen - an empty answer means cancel.
        """

        path = QFileDialog.getExistingDirectory(self, "Select Directory")
        self.controller.on_folder_chosen(path or None)

    def _on_tree_selection(self) -> None:
        items = self.file_tree.selectedItems()
        self.controller.on_selection_changed(items[0].text(0) if items else None)

    # BrowserView

    def set_entry_list(self, names: Sequence[str]) -> None:
        # The controller already dropped the selection; rebuilding must not re-announce it.
        self.file_tree.blockSignals(True)
        try:
            self.file_tree.clear()
            self.file_tree.addTopLevelItems([QTreeWidgetItem([name]) for name in names])
        finally:
            self.file_tree.blockSignals(False)

    def set_image(self, image: Optional[DecodedImage]) -> None:
        self.image_view.set_image(image)

    def set_metadata_text(self, text: str) -> None:
        self.metadata_view.setPlainText(text)
