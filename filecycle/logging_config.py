"""
Logger setup for the `filecycle` namespace.

Records go to stderr; stdout is reserved for the benchmark report line.
"""
from __future__ import annotations

import logging
import sys

ROOT_LOGGER = 'filecycle'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Attach a single stderr handler to the package logger.

    Calling it again replaces the handler, so the level can be changed
    between runs without duplicating output.

    Args:
        level: Threshold for both the logger and its handler.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger for `name`, placed under the package namespace if it isn't already."""
    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + '.'):
        return logging.getLogger(name)
    return logging.getLogger(f'{ROOT_LOGGER}.{name}')
