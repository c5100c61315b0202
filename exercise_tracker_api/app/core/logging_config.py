"""
Logging configuration for the Exercise Tracker API.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger.  Modules obtain their own logger through
``logging.getLogger(__name__)`` and inherit this configuration.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once; later calls are no‑ops.

    ``level`` is a level name such as ``"DEBUG"`` (case insensitive,
    unknown names mean INFO).  ``logfile`` adds a UTF‑8 file handler.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
