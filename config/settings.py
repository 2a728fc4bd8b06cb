# Path: config/settings.py
# Purpose: Provide typed application configuration models.
# Layer: config.
# Details: Centralizes display sizing, accepted image extensions, window chrome, and logging level.

from __future__ import annotations

import os
from typing import Tuple

from pydantic import BaseModel, Field

LOG_LEVEL_ENV = "IMAGE_VIEWER_LOG_LEVEL"


class AppSettings(BaseModel):
    """Top-level application settings shared by the browsing core and the GUI shell."""

    display_height: int = Field(default=800, gt=0, description="Fixed height, in pixels, of the displayed image.")
    image_extensions: Tuple[str, ...] = Field(
        default=(".png", ".jpg", ".jpeg", ".gif", ".bmp"),
        description="Case-sensitive filename suffixes treated as images.",
    )
    no_metadata_text: str = Field(
        default="No EXIF data found.", description="Text shown when a file carries no readable metadata."
    )
    window_title: str = Field(default="Image Viewer with Filter", description="Main window title.")
    window_width: int = Field(default=800, description="Initial main window width.")
    window_height: int = Field(default=600, description="Initial main window height.")
    sidebar_width: int = Field(default=240, description="Width of the search/list column.")
    search_placeholder: str = Field(default="Search...", description="Placeholder text of the search field.")
    log_level: str = Field(default="INFO", description="Verbosity level for application logs.")

    @classmethod
    def from_env(cls) -> "AppSettings":
        """Instantiate settings, honouring the log level override from the environment."""

        level = os.environ.get(LOG_LEVEL_ENV, "").strip()
        if level:
            return cls(log_level=level.upper())
        return cls()


__all__ = ["AppSettings", "LOG_LEVEL_ENV"]
