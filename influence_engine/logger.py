"""Logging configuration for the influence engine."""

from __future__ import annotations

import logging
import os
from datetime import datetime

from influence_engine import config

ROOT_LOGGER = "influence_engine"


def setup_logging(log_dir: str | None = None, level: int | None = None, to_file: bool = True) -> logging.Logger:
    """
    Configure the package logger with console and (optionally) file handlers.

    Args:
        log_dir: Directory for log files, defaults to ``config.LOG_DIR``
        level: Logging level, defaults to ``config.LOG_LEVEL``
        to_file: Also write a dated log file under ``log_dir``

    Returns:
        Configured logger instance
    """
    level = config.LOG_LEVEL if level is None else level

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)

    # Prevent duplicate handlers on multiple calls
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if to_file:
        log_dir = log_dir or config.LOG_DIR
        os.makedirs(log_dir, exist_ok=True)
        log_filename = os.path.join(log_dir, f"influence_{datetime.now():%Y%m%d}.log")
        file_handler = logging.FileHandler(log_filename, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Get a logger instance by name."""
    return logging.getLogger(name)
