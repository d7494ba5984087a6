"""Logging configuration."""

import logging
import logging.config
import sys


def configure_logging(log_level: str = "INFO") -> None:
    """Configure console logging for the application loggers.

    Records still propagate to the root logger so a host application's own
    handlers receive them.

    Args:
        log_level: Logging level name (default: INFO)

    """
    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "stream": sys.stdout,
                "formatter": "default",
                "level": log_level,
            },
        },
        "loggers": {
            "authrules": {
                "handlers": ["console"],
                "level": log_level,
                "propagate": True,
            },
        },
    }

    logging.config.dictConfig(logging_config)
    logging.getLogger("authrules").debug(f"Logging initialized at {log_level}")
