import logging
from logging.config import dictConfig

from app.core import config

# Parent of every module logger in this package
LOGGER_NAME = "app"


def configure_logging() -> None:
    """
    Attach a console handler to the package logger once.
    Safe to call repeatedly; second invocation becomes a no-op.
    The root logger is left to the embedding application.
    """
    if logging.getLogger(LOGGER_NAME).handlers:
        return

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
                }
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                }
            },
            "loggers": {
                LOGGER_NAME: {"handlers": ["console"], "level": config.LOG_LEVEL},
            },
        }
    )


def get_logger(name: str) -> logging.Logger:
    """Return a module logger, configuring the package logger on first use."""
    configure_logging()
    return logging.getLogger(name)
