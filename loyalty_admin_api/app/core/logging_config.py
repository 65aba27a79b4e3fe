"""
Root logger setup for the loyalty admin service.

Every store mutation is reported by ``CrudService`` at INFO as
"Created business 4", "Updated customer 2 (email)" or
"Deleted offer 3"; lookups of unknown ids are reported at DEBUG.  Set
``LOG_LEVEL=DEBUG`` to see both, and ``LOG_FILE`` to keep a copy on
disk.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach console (and optional file) output to the root logger.

    ``create_app`` calls this for every app it builds; once handlers
    exist, later calls only change the level, so repeated apps in one
    process never duplicate output.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted, no file
        handler is added.
    """
    logger = logging.getLogger()
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)
    if logger.handlers:
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # uvicorn's access log duplicates every request at INFO
    logging.getLogger("uvicorn.access").setLevel(max(numeric_level, logging.WARNING))
