"""Logging configuration for skilldex."""

import logging
import sys
from logging.handlers import RotatingFileHandler

from skilldex.utils.config import Config

LOGGER_NAME = "skilldex"
LOG_FILENAME = "skilldex.log"

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

# Marks handlers installed here so a repeated setup can replace them.
_OWNED_ATTR = "_skilldex_owned"


def _remove_owned_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if getattr(handler, _OWNED_ATTR, False):
            logger.removeHandler(handler)
            handler.close()


def _own(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _OWNED_ATTR, True)
    return handler


def setup_logging(config: Config, console_output: bool = False) -> logging.Logger:
    """
    Set up logging for skilldex.

    Safe to call more than once: handlers from an earlier call are closed and
    replaced, so each record is written once to the log file and at most once
    to the console. Handlers added by other code are left alone.

    Args:
        config: Application configuration (logging_path and log_level)
        console_output: Whether to also log to stdout (used by `serve`)

    Returns:
        The configured `skilldex` logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    _remove_owned_handlers(logger)
    logger.setLevel(logging.DEBUG)

    config.logging_path.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        config.logging_path / LOG_FILENAME,
        maxBytes=config.log_max_bytes,
        backupCount=config.log_backup_count,
        encoding="utf-8",
    )
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    file_handler.setLevel(logging.DEBUG)
    logger.addHandler(_own(file_handler))

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        console_handler.setLevel(config.log_level)
        logger.addHandler(_own(console_handler))

    return logger
