"""Console logging setup for the API process."""

import logging.config
from typing import Any


def setup_logging(level: str = "INFO", format_style: str = "detailed") -> None:
    """Configure root and uvicorn loggers to write to stdout.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ...)
        format_style: 'simple' or 'detailed'
    """
    formats = {
        "simple": "%(levelname)s - %(name)s - %(message)s",
        "detailed": "%(asctime)s | %(levelname)-8s | %(name)-28s | %(message)s",
    }

    config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": formats.get(format_style, formats["detailed"]),
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "default",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            "": {"level": level, "handlers": ["console"]},
            "uvicorn": {"level": "INFO", "handlers": ["console"], "propagate": False},
            "uvicorn.access": {"level": "INFO", "handlers": ["console"], "propagate": False},
        },
    }
    logging.config.dictConfig(config)
