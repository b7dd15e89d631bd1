"""Centralized logging configuration using loguru."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"


def configure_logging(
    console_level: str = "INFO",
    log_dir: Optional[Union[str, Path]] = "logs",
    file_level: str = "DEBUG",
) -> None:
    """Replace all handlers with a console sink and an optional rotating file sink.

    Association drops and per-box counts are logged at DEBUG, so they reach
    the file sink but stay off the console at the default level.

    Args:
        console_level: Minimum level written to stderr
        log_dir: Directory for the rotating log file, or None to disable it
        file_level: Minimum level written to the log file
    """
    logger.remove()
    logger.add(sys.stderr, level=console_level, format=CONSOLE_FORMAT, colorize=True)

    if log_dir is None:
        return
    path = Path(log_dir)
    path.mkdir(parents=True, exist_ok=True)
    logger.add(
        path / "ttc_fusion_{time}.log",
        rotation="20 MB",
        retention="7 days",
        level=file_level,
        format=FILE_FORMAT,
        enqueue=True,  # Thread-safe logging
    )


configure_logging()


def get_logger(name: Optional[str] = None):
    """Get a logger instance with the given name.

    Args:
        name: Module name for the logger (usually __name__)

    Returns:
        Configured logger instance
    """
    if name:
        return logger.bind(name=name)
    return logger


def log_performance(operation: str, duration_ms: float, threshold_ms: float = 10.0) -> None:
    """Log how long a frame-pair step took, warning above ``threshold_ms``."""
    if duration_ms > threshold_ms:
        logger.warning(f"Slow operation: {operation} took {duration_ms:.2f}ms (threshold: {threshold_ms}ms)")
    else:
        logger.debug(f"Performance: {operation} took {duration_ms:.2f}ms")


__all__ = ["logger", "configure_logging", "get_logger", "log_performance"]
