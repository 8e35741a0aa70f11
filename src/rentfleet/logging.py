"""Logging configuration for rentfleet."""

import logging
from pathlib import Path

import platformdirs
from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "rentfleet"
LOG_FILENAME = "debug.log"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure the ``rentfleet`` logger.

    Every record goes to debug.log in the rentfleet user config directory.
    With ``verbose``, INFO and above (rent, return, add, data directory) are
    also echoed to stderr through Rich. Safe to call more than once.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    if not _has_handler(logger, (logging.FileHandler, logging.NullHandler)):
        logger.addHandler(_file_handler())

    if verbose and not _has_handler(logger, RichHandler):
        console_handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            show_time=False,
        )
        console_handler.setLevel(logging.INFO)
        logger.addHandler(console_handler)

    return logger


def _has_handler(logger: logging.Logger, kinds) -> bool:
    return any(isinstance(h, kinds) for h in logger.handlers)


def _file_handler() -> logging.Handler:
    log_dir = Path(platformdirs.user_config_dir(LOGGER_NAME, ensure_exists=True))
    log_file = log_dir / LOG_FILENAME

    try:
        fh = logging.FileHandler(log_file, encoding="utf-8")
    except OSError:
        # Read-only home: no file log, records are dropped.
        return logging.NullHandler()

    fh.setLevel(logging.DEBUG)
    fh.setFormatter(
        logging.Formatter(
            "%(asctime)s [%(levelname)-7s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    return fh
