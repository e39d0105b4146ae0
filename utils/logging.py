"""
Logging configuration for the Millionaire quiz engine.
"""
import logging
import sys
from pathlib import Path
from typing import Optional
import config


def _make_handler(handler: logging.Handler, level: int, log_format: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(log_format))
    return handler


def setup_logging(
    log_level: Optional[str] = None,
    log_file: Optional[str] = None,
    log_format: Optional[str] = None
) -> logging.Logger:
    """
    Setup logging configuration.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file, empty string disables file logging
        log_format: Log format string

    Returns:
        Configured root logger
    """
    log_level = log_level or config.config.LOG_LEVEL
    log_file = config.config.LOG_FILE if log_file is None else log_file
    log_format = log_format or config.config.LOG_FORMAT

    level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    root_logger.addHandler(
        _make_handler(logging.StreamHandler(sys.stdout), level, log_format)
    )

    if log_file:
        # Create logs directory if needed
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        root_logger.addHandler(
            _make_handler(logging.FileHandler(log_file, encoding='utf-8'), level, log_format)
        )

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get logger for a specific module (usually __name__)."""
    return logging.getLogger(name)
