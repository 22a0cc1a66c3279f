"""Centralized logging configuration for longpath."""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "longpath"

# Flag to track if we've already set up the root logger
_ROOT_LOGGER_CONFIGURED = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Set up the root longpath logger with a single handler.

    This should only be called once to avoid duplicate handlers.

    Args:
        level: Logging level (default: INFO).
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stderr StreamHandler).
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)

    root_logger.handlers.clear()

    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # stdout carries the computed path, so logs go to stderr
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)

    formatter = logging.Formatter(format_string)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    # Let logs propagate to root logger so pytest can capture them
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger that inherits the package configuration.

    Args:
        name: Logger name (typically __name__ from calling module).

    Returns:
        Configured logger instance.
    """
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)  # Inherit from parent
    return logger


def set_global_log_level(level: int) -> None:
    """Set the log level for all longpath loggers.

    Args:
        level: Logging level (e.g., logging.DEBUG, logging.INFO).
    """
    setup_root_logger()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)

    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Enable debug logging for the entire package."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Disable debug logging, set to INFO level."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Reset logging configuration (mainly for testing)."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


# Initialize the root logger when the module is imported
setup_root_logger()
