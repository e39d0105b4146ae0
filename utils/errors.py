"""
Custom exception classes for the Millionaire quiz engine.
"""
from typing import Optional


class MillionaireError(Exception):
    """Base exception for the quiz engine."""

    def __init__(self, message: str, details: Optional[dict] = None):
        """
        Initialize error.

        Args:
            message: Error message
            details: Optional additional details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __repr__(self):
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details})"


class GameError(MillionaireError):
    """Exception raised for game-related errors."""
    pass


class InsufficientContentError(GameError):
    """The question bank has no candidate for some ladder level."""
    pass


class HelpAlreadyUsedError(GameError):
    """The requested help kind was already used in this game."""
    pass


class GameFinishedError(GameError):
    """A rejecting operation was attempted on a finished game."""
    pass


class GameNotFoundError(GameError):
    """Game does not exist or belongs to another user."""
    pass


class GameInProgressError(GameError):
    """User tried to start a second game while one is still open."""
    pass


class DatabaseError(MillionaireError):
    """Exception raised for database-related errors."""
    pass


class ValidationError(MillionaireError):
    """Exception raised for validation errors."""
    pass


class ConfigurationError(MillionaireError):
    """Exception raised for configuration errors."""
    pass
