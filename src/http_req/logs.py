"""Logging configuration."""

import logging
import logging.config
import sys


def setup_logging(level: str = "WARNING") -> None:
    """Send http_req log records to stderr at ``level``."""
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "standard",
                "stream": sys.stderr,
            },
        },
        "loggers": {
            "http_req": {"level": level, "handlers": ["console"], "propagate": False},
            "httpx": {"level": "WARNING", "handlers": ["console"], "propagate": False},
            "aiohttp": {"level": "WARNING", "handlers": ["console"], "propagate": False},
        },
    })
