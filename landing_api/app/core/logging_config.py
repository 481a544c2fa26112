"""
Logging configuration for the landing page API.

Handlers are attached to the ``landing_api`` package logger rather
than the root logger, so uvicorn's own access and error loggers keep
their formatting and module loggers (``landing_api.app.*``) inherit
ours.  Records still propagate to the root logger, which lets test
harnesses capture them.

``setup_logging`` may be called once per ``create_app``; handlers are
named and added only if missing, while the level is always applied.
"""

import logging
from pathlib import Path
from typing import Optional

APP_LOGGER = "landing_api"
CONSOLE_HANDLER = "landing_api.console"
FILE_HANDLER = "landing_api.file"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _has_handler(logger: logging.Logger, name: str) -> bool:
    return any(h.get_name() == name for h in logger.handlers)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure and return the ``landing_api`` logger.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        Path of a file to append log lines to (``LOG_FILE``).  Resolved
        against the current working directory.
    """
    logger = logging.getLogger(APP_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not _has_handler(logger, CONSOLE_HANDLER):
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if logfile and not _has_handler(logger, FILE_HANDLER):
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.set_name(FILE_HANDLER)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
