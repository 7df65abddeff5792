"""Logging setup for blockdash (stdlib logging).

curses owns the terminal while the dashboard runs, so records only ever go to
a file. Without ``[logging] file`` in the config the package logger gets a
NullHandler and stays silent.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

LOGGER_NAME = "blockdash"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_signature: tuple[Any, ...] | None = None


def _coerce_level(level: Any) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        name = level.strip().upper()
        if name.isdigit():
            return int(name)
        value = logging.getLevelName(name)
        if isinstance(value, int):
            return value
    return logging.WARNING


def init_logging(config: dict[str, Any]) -> logging.Logger:
    """Configure the package logger from the ``[logging]`` table.

    Safe to call repeatedly; handlers are only replaced when the settings change.
    """
    global _signature

    settings: dict[str, Any] = config.get("logging", {})
    level = _coerce_level(settings.get("level", "WARNING"))
    log_file = settings.get("file")
    signature = (level, str(log_file) if log_file else None)

    logger = logging.getLogger(LOGGER_NAME)
    if _signature == signature:
        return logger

    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    if log_file:
        path = Path(log_file).expanduser()
        handler: logging.Handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    else:
        handler = logging.NullHandler()

    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    _signature = signature
    return logger
