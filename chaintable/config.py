"""
Package-wide defaults and logging configuration.

Nothing here runs on import beyond reading the environment; call
`configure_logging()` from an entry point (the benchmark does) to apply
`LOGGING`.
"""

import logging.config
import os

# Bucket count used when a table is built without an explicit capacity.
DEFAULT_CAPACITY = 256

# Multiplier of the polynomial string hash.
HASH_BASE = 31

LOG_LEVEL = os.getenv("CHAINTABLE_LOG_LEVEL", "WARNING").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        }
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "DEBUG",
            "formatter": "simple",
            "stream": "ext://sys.stdout",
        }
    },
    "loggers": {
        "chaintable": {
            "level": LOG_LEVEL,
            "handlers": ["console"],
            "propagate": False,
        }
    },
}


def configure_logging(level=None) -> None:
    """Apply `LOGGING`, optionally overriding the package logger level."""
    config = dict(LOGGING)
    if level is not None:
        loggers = {name: dict(opts) for name, opts in LOGGING["loggers"].items()}
        loggers["chaintable"]["level"] = level.upper()
        config["loggers"] = loggers
    logging.config.dictConfig(config)
