"""Pytest fixtures for the browsing core tests."""
from __future__ import annotations

import pytest

from fakes import RecordingView


@pytest.fixture
def view() -> RecordingView:
    return RecordingView()
