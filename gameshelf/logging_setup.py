"""File logging for interactive sessions.

The terminal is in raw alternate-screen mode while the UI runs, so log
records go to a file under the per-user log directory instead of stderr.
"""

from __future__ import annotations

import logging
from pathlib import Path

from platformdirs import user_log_dir

from .manifest import APP_NAME

LOG_FILENAME = "gameshelf.log"
DEFAULT_LOG_PATH = Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME


def setup_logging(log_file: Path | None = None, verbose: bool = False) -> Path | None:
    """Attach a file handler to the ``gameshelf`` logger.

    Returns the log path, or ``None`` when the file cannot be opened (records
    are then discarded). Calling it again reuses the existing handler.
    """
    logger = logging.getLogger(APP_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler):
            return Path(handler.baseFilename)

    path = log_file if log_file is not None else DEFAULT_LOG_PATH
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
    except OSError:
        logger.addHandler(logging.NullHandler())
        return None
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s [%(threadName)s] %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    logger.addHandler(handler)
    return path
