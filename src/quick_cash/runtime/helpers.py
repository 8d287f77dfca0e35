"""Process-level helpers shared by the CLI and scripts."""

from __future__ import annotations

import logging
import logging.config


def configure_logging(level: str | int = "INFO") -> None:
    """Send ``quick_cash`` log records to stderr at ``level``."""

    if isinstance(level, str):
        level = level.upper()

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
                "datefmt": "%H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            "quick_cash": {
                "handlers": ["console"],
                "level": level,
                "propagate": False,
            },
        },
    })
