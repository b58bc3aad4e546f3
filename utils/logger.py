"""Logging configuration using Loguru."""

import sys

from loguru import logger

from config.constants import LOGGING
from config.data_sources import PROJECT_ROOT


def setup_logging(level: str = None, to_file: bool = True) -> None:
    logger.remove()

    level = level or LOGGING["level"]

    # Console
    logger.add(
        sys.stderr,
        format=LOGGING["format"],
        level=level,
        colorize=True,
    )

    # File
    if to_file:
        log_dir = PROJECT_ROOT / "logs"
        log_dir.mkdir(exist_ok=True)
        logger.add(
            log_dir / LOGGING["file_name"],
            format=LOGGING["format"],
            level=level,
            rotation=LOGGING["rotation"],
            retention=LOGGING["retention"],
            compression="zip",
        )

    logger.debug(f"Logging initialized - Level: {level}")


def get_logger(name: str):
    return logger.bind(name=name)
