"""Logging utilities for tableish."""

import logging
import sys
from datetime import datetime
from typing import Optional

from tableish.config import LoggingConfig, get_config


def setup_logger(name: str = "tableish", config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    Set up and return a logger instance.

    The library itself only logs through ``logging.getLogger(__name__)``;
    applications and test suites call this once to get readable output.

    Args:
        name: Logger name
        config: Logging settings (defaults to the global configuration)

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    config = config or get_config().logging
    level = getattr(logging, config.level.upper())
    logger.setLevel(level)

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_format = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%H:%M:%S"
    )
    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    if config.log_to_file:
        config.logs_dir.mkdir(parents=True, exist_ok=True)
        log_file = config.logs_dir / f"{name}_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_format = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        file_handler.setFormatter(file_format)
        logger.addHandler(file_handler)

    return logger
