"""File logging for the browser session.

The TUI owns stdout, so log records go to a file under the user log
directory unless a path is given.
"""

from __future__ import annotations

import logging
from pathlib import Path

from platformdirs import user_log_dir

from .config import APP_NAME

LOG_FILENAME = f"{APP_NAME}.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def default_log_path() -> Path:
    return Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME


def configure_logging(log_file: Path | None = None, debug: bool = False) -> Path | None:
    """Attach a file handler to the package logger and return its path.

    When the log file cannot be opened a ``NullHandler`` is installed and
    ``None`` is returned.
    """
    package_logger = logging.getLogger(APP_NAME)
    package_logger.setLevel(logging.DEBUG if debug else logging.INFO)
    package_logger.propagate = False
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    path = log_file if log_file is not None else default_log_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(path, encoding="utf-8")
    except OSError:
        package_logger.addHandler(logging.NullHandler())
        return None
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    return path
