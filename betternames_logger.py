# -*- coding: utf-8 -*-
"""
BetterNames central logging module.

Configures the 'betternames' root logger once. Log files live in
~/.betternames/logs/ with one file per day.

Handlers are only attached to the root 'betternames' logger; child loggers
propagate to it and never add handlers themselves.
"""

import logging
from pathlib import Path
from datetime import datetime

LOG_DIR = Path.home() / ".betternames" / "logs"

LOG_FILE = LOG_DIR / f"betternames_{datetime.now().strftime('%Y%m%d')}.log"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_root_configured = False


def _configure_root_logger():
    """Configure the root 'betternames' logger with handlers (once only)."""
    global _root_configured
    if _root_configured:
        return

    root_logger = logging.getLogger("betternames")
    root_logger.setLevel(logging.DEBUG)

    # Prevent propagation to Python's root logger to avoid duplicates
    root_logger.propagate = False

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    root_logger.addHandler(console_handler)

    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(LOG_FILE, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        root_logger.addHandler(file_handler)
    except OSError as e:
        # Read-only home directories still get console logging
        root_logger.warning(f"File logging disabled ({LOG_FILE}): {e}")

    _root_configured = True


def set_console_level(level: int):
    """Change the level of the console handler (used by the CLI --verbose flag)."""
    _configure_root_logger()
    for handler in logging.getLogger("betternames").handlers:
        if type(handler) is logging.StreamHandler:
            handler.setLevel(level)


_configure_root_logger()
logger = logging.getLogger("betternames")


def get_logger(name: str) -> logging.Logger:
    """
    Return a child logger for a module.

    Child loggers do NOT add handlers - they propagate to the root
    'betternames' logger.

    Args:
        name: Module name, e.g. "core.ingestor"

    Returns:
        Logger named betternames.{name}
    """
    _configure_root_logger()
    return logging.getLogger(f"betternames.{name}")
