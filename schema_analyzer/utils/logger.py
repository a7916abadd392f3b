"""
Logging utility with loguru.
Provides console output and optional file rotation.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from schema_analyzer.config.settings import settings


def setup_logger(level: Optional[str] = None, log_file: Optional[str] = None, sink=None):
    """
    Configure loguru logger with console and (optionally) file outputs.

    Args:
        level: Console log level (defaults to settings.log_level)
        log_file: Path of a rotating log file (defaults to settings.log_file)
        sink: Console stream (defaults to sys.stdout)
    """
    level = level or settings.log_level
    log_file = log_file or settings.log_file

    # Remove default handler
    logger.remove()

    logger.add(
        sink or sys.stdout,
        colorize=True,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=level,
    )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            rotation="10 MB",
            retention="1 week",
            compression="zip",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            level="DEBUG",
        )

    logger.debug(f"Logger initialized (level={level})")
    return logger
