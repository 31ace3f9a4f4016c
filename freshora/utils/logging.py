# freshora/utils/logging.py
"""
Logging setup for the Freshora API.

Call setup_logging() once at startup, then use get_logger(__name__) in modules.
LOG_LEVEL selects the level (DEBUG, INFO, WARNING, ERROR, CRITICAL; default INFO).
"""
import logging
import sys

from freshora.utils.settings import LOG_LEVEL

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str | None = None) -> None:
    level = (level or LOG_LEVEL).upper()
    if level not in VALID_LEVELS:
        level = "INFO"

    numeric_level = getattr(logging, level)

    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )
    logging.getLogger("freshora").setLevel(numeric_level)

    if level != "DEBUG":
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
        logging.getLogger("celery").setLevel(logging.WARNING)
        logging.getLogger("kombu").setLevel(logging.WARNING)

    logging.getLogger(__name__).debug("Logging configured at %s level", level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
