"""
Logging setup for the API process.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger.  One request line per call is written by
the middleware in ``main``, so Uvicorn's own access log is lowered to
``WARNING`` to avoid printing every request twice.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers whose per‑request output duplicates the request middleware.
QUIET_LOGGERS = ("uvicorn.access",)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure the root logger once and return it.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        Extra file to append log records to.
    """
    root = logging.getLogger()
    if root.handlers:
        # Already configured, e.g. by pytest or an earlier create_app().
        return root

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return root
