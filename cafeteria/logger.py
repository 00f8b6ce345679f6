"""Logger setup for the console application."""

from __future__ import annotations

from loguru import logger

from cafeteria.config import LOG_LEVEL, LOG_PATH, LOG_ROTATION


def setup_logging(log_path: str = LOG_PATH, level: str = LOG_LEVEL) -> None:
    """Send log records to a rotating file so the operator console stays clean."""
    # Remove default stderr handler
    logger.remove()
    logger.add(
        log_path,
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
        rotation=LOG_ROTATION,
        retention=5,
        encoding="utf-8",
        catch=True,
    )
