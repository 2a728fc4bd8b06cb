# Path: config/log_setup.py
# Purpose: Configure process-wide logging once at startup.
# Layer: config.
# Details: Module loggers live under the "image_viewer" namespace and inherit this configuration.

from __future__ import annotations

import logging

from .settings import AppSettings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: AppSettings) -> None:
    """Install the root handler and apply the configured level to the application namespace."""

    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("image_viewer").setLevel(level)


__all__ = ["configure_logging", "LOG_FORMAT"]
