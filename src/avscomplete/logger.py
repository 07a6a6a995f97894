"""Logging configuration for avscomplete using loguru."""

import os
import sys
from loguru import logger
from typing import Optional

from avscomplete.utils import get_project_root

# Store the configured log file path to ensure consistency
_log_file_path: Optional[str] = None


def setup_logger(
    log_file: Optional[str] = None,
    log_level: str = "WARNING",
    rotation: str = "10 MB",
    retention: str = "7 days",
    compression: str = "zip",
    console_output: bool = True,
) -> None:
    """
    Configure loguru logger with console and optional file output.

    Args:
        log_file: Path to the log file (if None, reuses the previously configured path, if any)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        rotation: Log rotation size
        retention: How long to keep old logs
        compression: Compression format for old logs
        console_output: Whether to output to stderr
    """
    global _log_file_path

    if log_file is None:
        log_file = _log_file_path
    else:
        # Relative paths are anchored at the project root
        if not os.path.isabs(log_file):
            log_file = os.path.join(get_project_root(), log_file)
        _log_file_path = log_file

    # Remove default handler
    logger.remove()

    if console_output:
        logger.add(
            sys.stderr,
            level=log_level,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{extra[name]}</cyan> - <level>{message}</level>",
            colorize=True,
        )

    if log_file:
        logger.add(
            log_file,
            level=log_level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[name]}:{function}:{line} - {message}",
            rotation=rotation,
            retention=retention,
            compression=compression,
            encoding="utf-8",
        )


def get_logger(name: Optional[str] = None):
    """
    Get a configured logger instance.

    Args:
        name: Optional name for the logger

    Returns:
        Logger instance
    """
    return logger.bind(name=name or "avscomplete")


# Make {extra[name]} resolvable for records logged through the bare logger
logger.configure(extra={"name": "avscomplete"})
setup_logger()
