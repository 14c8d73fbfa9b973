"""
Logging for the ``tsse_api`` package.

Every module logs through ``logging.getLogger(__name__)``, so all of the
application's records end up in the ``tsse_api`` logger.  ``setup_logging``
attaches the handlers chosen by ``Settings`` to that logger only; the
root logger (and uvicorn's own loggers) are left alone.  Calling it
again replaces the handlers, which lets every application built by
``create_app`` log where its own settings say.
"""

import logging
from pathlib import Path

from .config import Settings

PACKAGE_LOGGER = "tsse_api"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s | %(message)s"


def _level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(settings: Settings) -> logging.Logger:
    """Point the package logger at the console and ``settings.log_file``."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(_level(settings.log_level))
    logger.propagate = False

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if settings.log_file:
        handlers.append(logging.FileHandler(Path(settings.log_file).expanduser(), encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
