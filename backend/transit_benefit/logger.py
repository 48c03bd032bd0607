"""
Logging configuration for the Transit Benefit Calculator
"""

import logging
import sys
from typing import Optional

from transit_benefit.config import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
ROOT_LOGGER_NAME = "transit_benefit"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger with a console handler.

    Safe to call more than once; handlers are only attached the first time.

    Args:
        level: Level name such as "DEBUG". Defaults to settings.LOG_LEVEL.

    Returns:
        The package root logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level or settings.LOG_LEVEL)

    # Prevent duplicate handlers
    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(console_handler)

    return logger

