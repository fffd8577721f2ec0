"""
Centralized logging configuration for MealMate.
"""
import logging
import os
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

FORMATTER = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)


def level_from_env(default: int = logging.INFO) -> int:
    """Resolve MEALMATE_LOG_LEVEL (e.g. "DEBUG") to a logging level; unknown names give `default`."""
    level = logging.getLevelName(os.getenv("MEALMATE_LOG_LEVEL", "").strip().upper())
    return level if isinstance(level, int) else default


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger that writes to stdout in the shared MealMate format.

    Args:
        name: The name of the logger (typically __name__)

    Returns:
        A configured Logger instance
    """
    logger = logging.getLogger(name)

    # Handlers are attached once per logger name
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(FORMATTER)
        logger.addHandler(handler)
        logger.setLevel(level_from_env())

    return logger


def setup_logging(level: int = logging.INFO) -> None:
    """
    Configure the root logger, used by entry points such as run.py.

    Args:
        level: The logging level (default: INFO)
    """
    logging.basicConfig(
        level=level_from_env(level),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)]
    )
