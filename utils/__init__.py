"""
Utilities module for the Millionaire quiz engine.
Contains retry decorators, error classes, and logging setup.
"""
from utils.retry import retry_with_backoff, database_retry
from utils.errors import (
    MillionaireError,
    GameError,
    InsufficientContentError,
    HelpAlreadyUsedError,
    GameFinishedError,
    GameNotFoundError,
    GameInProgressError,
    DatabaseError,
    ValidationError,
    ConfigurationError,
)
from utils.logging import setup_logging, get_logger

__all__ = [
    "retry_with_backoff",
    "database_retry",
    "MillionaireError",
    "GameError",
    "InsufficientContentError",
    "HelpAlreadyUsedError",
    "GameFinishedError",
    "GameNotFoundError",
    "GameInProgressError",
    "DatabaseError",
    "ValidationError",
    "ConfigurationError",
    "setup_logging",
    "get_logger",
]
