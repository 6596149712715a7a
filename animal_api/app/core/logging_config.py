"""
Logging setup for the Animal API.

``setup_logging`` attaches one formatted console handler (and
optionally a file handler) to the root logger.  Uvicorn's loggers are
routed through the same handlers so request logs and application logs
share a format.  PyMongo emits one structured record per command at
DEBUG level; its loggers get their own level, INFO by default.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level(name: str, default: int = logging.INFO) -> int:
    return getattr(logging, name.upper(), default)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, mongo_level: str = "INFO") -> None:
    """Configure the root logger once per process.

    Parameters
    ----------
    level : str
        Root level name, case insensitive; unknown names mean ``INFO``.
    logfile : Optional[str]
        Also write records to this file when given.
    mongo_level : str
        Level for the ``pymongo`` loggers.
    """
    root = logging.getLogger()
    if root.handlers:
        # Already configured (repeated create_app calls, pytest capture).
        return

    root.setLevel(_level(level))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True

    logging.getLogger("pymongo").setLevel(_level(mongo_level))
