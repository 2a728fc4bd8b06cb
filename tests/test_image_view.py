"""Tests for the Pillow-to-Qt image widget."""
from __future__ import annotations

import os

import pytest
from PIL import Image

pytest.importorskip("PySide6")
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication  # noqa: E402

from core.models.domain import DecodedImage  # noqa: E402
from gui.widgets.image_view import ImageView, to_pixmap  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    return QApplication.instance() or QApplication([])


def test_to_pixmap_keeps_dimensions(qapp):
    image = DecodedImage.from_pil(Image.new("RGB", (24, 8), "red"))

    pixmap = to_pixmap(image)

    assert not pixmap.isNull()
    assert (pixmap.width(), pixmap.height()) == (24, 8)


def test_palette_image_converts(qapp):
    image = DecodedImage.from_pil(Image.new("P", (5, 3)))
    assert (to_pixmap(image).width(), to_pixmap(image).height()) == (5, 3)


def test_set_image_and_clear(qapp):
    view = ImageView()

    view.set_image(DecodedImage.from_pil(Image.new("RGB", (12, 6))))
    assert (view.width(), view.height()) == (12, 6)
    assert not view.pixmap().isNull()

    view.set_image(None)
    assert view.pixmap().isNull()
    assert (view.width(), view.height()) == (0, 0)
