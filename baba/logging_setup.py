"""Application-wide logging configuration."""

from __future__ import annotations

import logging
from pathlib import Path
from logging.handlers import RotatingFileHandler
from baba.config import CONFIG_DIR

LOG_FILE = CONFIG_DIR / "baba.log"

def init_logging(level: int = logging.INFO, *, console: bool = True) -> Path:
    """
    Configures root logging with a rotating file handler and, optionally, a console handler.

    Returns the path to the log file.
    """
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    if root_logger.handlers:
        return LOG_FILE

    root_logger.setLevel(level)

    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    file_handler = RotatingFileHandler(LOG_FILE, maxBytes=512_000, backupCount=3, encoding="utf-8")
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    root_logger.debug("Logging initialized. Log file: %s", LOG_FILE)

    return LOG_FILE
