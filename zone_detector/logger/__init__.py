"""Package-wide logging with a colored console handler.

Usage:
    from zone_detector.logger import get_logger
    logger = get_logger(__name__)
    logger.info("Message here")
"""

import logging
import sys
import threading

from .config import DATE_FORMAT, LOG_FORMAT, LOG_LEVEL, ROOT_LOGGER_NAME

_lock = threading.Lock()
_is_configured = False


class ZoneColorFormatter(logging.Formatter):
    """Colors each record by level for terminal output."""

    CYAN = "\x1b[36m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    RED = "\x1b[31m"
    BOLD_RED = "\x1b[31;1m"
    RESET = "\x1b[0m"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._formatters = {
            level: logging.Formatter(f"{color}{LOG_FORMAT}{self.RESET}", datefmt=DATE_FORMAT)
            for level, color in {
                logging.DEBUG: self.CYAN,
                logging.INFO: self.GREEN,
                logging.WARNING: self.YELLOW,
                logging.ERROR: self.RED,
                logging.CRITICAL: self.BOLD_RED,
            }.items()
        }
        self._default_formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    def format(self, record):
        formatter = self._formatters.get(record.levelno, self._default_formatter)
        return formatter.format(record)


def setup_logging() -> None:
    """Attach the console handler to the package logger exactly once."""
    global _is_configured

    with _lock:
        if _is_configured:
            return

        package_logger = logging.getLogger(ROOT_LOGGER_NAME)
        package_logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

        # Replace handlers left behind by an earlier configuration
        for handler in package_logger.handlers[:]:
            package_logger.removeHandler(handler)

        console = logging.StreamHandler(sys.stdout)
        console.setFormatter(ZoneColorFormatter())
        package_logger.addHandler(console)
        package_logger.propagate = False

        _is_configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name``, configuring package logging on first use."""
    if not _is_configured:
        setup_logging()
    return logging.getLogger(name)


__all__ = ["ZoneColorFormatter", "get_logger", "setup_logging"]
