"""
SITE LOGGING
============
Rotating file loggers shared by the site modules.

FLOW:
- get_logger() configures a named logger once and returns it.

HOW:
- Writes key=value lines to the configured log file (default logs/site.log).
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler

from .config import SITE_SETTINGS


def get_logger(name: str, filename: str | None = None) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    path = filename or SITE_SETTINGS["LOG_FILE"]
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    handler = RotatingFileHandler(path, maxBytes=2_000_000, backupCount=3)
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
    handler.setFormatter(formatter)

    logger.setLevel(logging.INFO)
    logger.addHandler(handler)
    return logger
