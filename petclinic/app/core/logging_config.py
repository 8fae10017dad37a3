"""
Logging setup for the Pet Clinic API.

``setup_logging`` attaches a console handler and, when ``LOG_FILE`` is
set, a file handler to the root logger.  Handlers are tagged by name so
that building several apps in one process (tests, reloads) reuses them
instead of stacking duplicates.  A relative ``LOG_FILE`` lives under
the project root, like the SQLite database.
"""

import logging
from pathlib import Path
from typing import Optional

from .config import resolve_path


CONSOLE_HANDLER = "petclinic-console"
FILE_HANDLER = "petclinic-file"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _named_handler(logger: logging.Logger, name: str) -> Optional[logging.Handler]:
    return next((h for h in logger.handlers if h.get_name() == name), None)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> Optional[Path]:
    """Configure the root logger for the clinic.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        File to append log records to.  Its parent directory is created
        if needed.

    Returns
    -------
    Optional[Path]
        The resolved log file path, or ``None`` when logging to the
        console only.
    """
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if _named_handler(logger, CONSOLE_HANDLER) is None:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if not logfile:
        return None

    log_path = resolve_path(logfile)
    current = _named_handler(logger, FILE_HANDLER)
    if current is not None:
        if getattr(current, "baseFilename", None) == str(log_path):
            return log_path
        # LOG_FILE changed between apps; switch files.
        logger.removeHandler(current)
        current.close()

    log_path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.set_name(FILE_HANDLER)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)
    return log_path
