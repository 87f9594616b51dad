"""Logging for the console and the dev API, driven by ``Settings``.

Modules only ever do ``logger = logging.getLogger(__name__)``; the handlers are
installed once, by whoever owns the process (``main.py`` for the API server).
"""
from __future__ import annotations

import logging.config
from pathlib import Path
from typing import Any

from console.core.config import Settings, settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"

# one line per request is already written by the console's own loggers
QUIET_LOGGERS = ("httpx", "httpcore", "aiosqlite", "sqlalchemy.engine")


def logging_config(config: Settings = settings) -> dict[str, Any]:
    level = config.LOG_LEVEL.upper()
    handlers: dict[str, dict[str, Any]] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
    }
    if config.LOG_FILE:
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": "standard",
            "filename": config.LOG_FILE,
            "maxBytes": config.LOG_MAX_BYTES,
            "backupCount": config.LOG_BACKUPS,
            "encoding": "utf-8",
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": LOG_FORMAT, "datefmt": "%Y-%m-%d %H:%M:%S"},
        },
        "handlers": handlers,
        "loggers": {name: {"level": "WARNING"} for name in QUIET_LOGGERS},
        "root": {"handlers": list(handlers), "level": level},
    }


def setup_logging(config: Settings = settings) -> None:
    if config.LOG_FILE:
        Path(config.LOG_FILE).parent.mkdir(parents=True, exist_ok=True)
    logging.config.dictConfig(logging_config(config))
