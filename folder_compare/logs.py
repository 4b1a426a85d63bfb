"""Log file and console logging for a comparison run."""

import logging
import sys
from pathlib import Path
from typing import Optional

LOGGER_NAME = "folder_compare"
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"
CONSOLE_FORMAT = "[%(levelname)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_TAG = "_folder_compare_handler"


def _remove_our_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            logger.removeHandler(handler)
            handler.close()


def configure_logging(log_file: Optional[Path] = None, verbose: bool = False) -> logging.Logger:
    """
    Set up the package logger.

    The log file (truncated) receives everything; the console shows
    warnings and errors, or everything when verbose. Calling it again
    replaces the handlers installed by the previous call.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    _remove_our_handlers(logger)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    setattr(console, _HANDLER_TAG, True)
    logger.addHandler(console)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8", errors="surrogateescape")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        setattr(file_handler, _HANDLER_TAG, True)
        logger.addHandler(file_handler)

    return logger
