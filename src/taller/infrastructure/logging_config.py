"""Logging setup: console output plus an optional rotating log file."""

from __future__ import annotations

from logging.config import dictConfig
from pathlib import Path

from taller.infrastructure.settings import Settings, settings as default_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(config: Settings | None = None) -> None:
    config = config or default_settings

    handlers: dict[str, dict] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
            "stream": "ext://sys.stderr",
        },
    }
    if config.LOG_FILE:
        log_path = Path(config.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": "default",
            "filename": str(log_path),
            "maxBytes": 5 * 1024 * 1024,  # 5 MB
            "backupCount": 5,
            "encoding": "utf-8",
        }

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {"format": LOG_FORMAT},
            },
            "handlers": handlers,
            "loggers": {
                "taller": {
                    "level": config.LOG_LEVEL.upper(),
                    "handlers": list(handlers),
                    "propagate": False,
                },
            },
        }
    )
