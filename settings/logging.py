"""Logging configuration."""

import sys

from loguru import logger

from settings import LOG_DIR, LOG_LEVEL, LOG_RETENTION


def setup_logging(level: str | None = None, to_file: bool = True):
    """Configure loguru sinks: coloured stderr plus an optional rotating file."""
    logger.remove()

    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <cyan>{name}</cyan> | <level>{message}</level>",
        level=level or LOG_LEVEL,
        colorize=True,
    )

    if to_file:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        logger.add(
            LOG_DIR / "election_{time:YYYY-MM-DD}.log",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{function}:{line} | {message}",
            level="DEBUG",
            rotation="00:00",
            retention=LOG_RETENTION,
            compression="gz",
        )
        logger.info("Logging to {} (level={})", LOG_DIR, level or LOG_LEVEL)

    return logger
