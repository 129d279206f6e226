"""Logging configuration for timephrase."""

import sys
from pathlib import Path
from typing import Optional
from loguru import logger


def setup_logging(log_dir: Optional[Path] = None, debug: bool = False) -> None:
    """Configure logging for an application using timephrase.

    Args:
        log_dir: Directory for log files, console only when None
        debug: Enable debug logging
    """
    # Remove default logger
    logger.remove()

    # Console logging
    log_level = "DEBUG" if debug else "INFO"
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level=log_level,
        colorize=True,
    )

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        # Main log file (rotated)
        logger.add(
            log_dir / "timephrase.log",
            rotation="10 MB",
            retention="1 week",
            compression="zip",
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
        )

        # Error log file
        logger.add(
            log_dir / "error.log",
            rotation="10 MB",
            retention="2 weeks",
            compression="zip",
            level="ERROR",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}\n{exception}",
        )

    logger.info(f"Logging initialized (debug={debug}, log_dir={log_dir})")


def setup_from_settings(settings) -> None:
    """Configure logging from a ``Settings`` object."""
    setup_logging(settings.logging.log_path, debug=settings.logging.debug)
