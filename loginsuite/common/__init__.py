"""
================================================================================
Common Utilities
================================================================================

Shared configuration and logging setup for the login suite.

Exports:
    - ConfigLoader: YAML + environment configuration
    - init_logger: Initialize the loguru logger with standard settings
    - ensure_directory: Create a directory if missing

Usage:
    from loginsuite.common import ConfigLoader, init_logger

    config = ConfigLoader()
    init_logger(level=config.get("logging.level", "INFO"))

================================================================================
"""

import os
import sys

from loguru import logger

from .config_loader import ConfigLoader, DEFAULT_CONFIG_PATH, PROJECT_ROOT


DEFAULT_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[component]}</cyan> | "
    "<level>{message}</level>"
)

_logger_initialized = False


def init_logger(
    level: str = "INFO",
    format_string: str = None,
    log_file: str = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """
    Initializes the loguru logger with standard settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        format_string: Log format string. Uses default if not provided.
        log_file: Optional file path to write logs to.
        rotation: File rotation policy
        retention: File retention policy

    Example:
        init_logger()  # Use defaults
        init_logger(level="DEBUG", log_file="reports/logs/ui.log")
    """
    global _logger_initialized

    if _logger_initialized:
        return

    # Records logged without a bound component still render
    logger.configure(extra={"component": "-"})
    logger.remove()

    format_string = format_string or DEFAULT_LOG_FORMAT

    logger.add(
        sys.stderr,
        format=format_string,
        level=level.upper(),
        colorize=True,
    )

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            ensure_directory(log_dir)

        logger.add(
            log_file,
            format=format_string,
            level=level.upper(),
            rotation=rotation,
            retention=retention,
        )

    _logger_initialized = True
    logger.debug("Logger initialized successfully")


def ensure_directory(path: str) -> str:
    """
    Ensures a directory exists, creating it if necessary.

    Args:
        path: Directory path

    Returns:
        The path (for chaining)
    """
    os.makedirs(path, exist_ok=True)
    return path


__all__ = [
    "ConfigLoader",
    "DEFAULT_CONFIG_PATH",
    "PROJECT_ROOT",
    "init_logger",
    "ensure_directory",
]
