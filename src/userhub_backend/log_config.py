"""Logging configuration shared by the API server and helper commands."""

from __future__ import annotations

import logging.config

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Route application loggers to stderr at *level*."""
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"default": {"format": LOG_FORMAT}},
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "stream": "ext://sys.stderr",
                }
            },
            "loggers": {
                "userhub_backend": {
                    "handlers": ["console"],
                    "level": level.upper(),
                    "propagate": False,
                }
            },
        }
    )
