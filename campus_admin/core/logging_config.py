# /campus_admin/core/logging_config.py

import logging.config

from .config import LOG_LEVEL

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
            "stream": "ext://sys.stdout",
        },
    },
    "loggers": {
        "campus_admin": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
        # SQL echo stays off unless explicitly asked for.
        "sqlalchemy.engine": {
            "handlers": ["console"],
            "level": "WARNING",
            "propagate": False,
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
}


def setup_logging() -> None:
    """Installs the application's logging configuration. Called once at startup."""
    logging.config.dictConfig(LOGGING_CONFIG)
