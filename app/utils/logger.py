"""Logging helpers shared by the API and the maintenance scripts."""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are too chatty at INFO
NOISY_LOGGERS = ("pymongo", "uvicorn.access")


def _build_handler() -> logging.Handler:
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger for the application.

    Installs a single stdout handler, replacing any handlers from earlier calls,
    and quiets the noisy third-party loggers.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()
    root.addHandler(_build_handler())

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def setup_logger(name: str, level: str = "INFO") -> logging.Logger:
    """
    Create a standalone logger with its own stdout handler (used by scripts).

    Args:
        name: Logger name
        level: Log level name

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.handlers.clear()
    logger.addHandler(_build_handler())
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a module logger; output goes wherever setup_logging pointed the root."""
    return logging.getLogger(name)
