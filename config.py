"""
Configuration module for the Millionaire quiz engine.
Loads settings from environment variables.
"""
import os
from typing import Tuple
from dotenv import load_dotenv

from utils.errors import ConfigurationError

# Load environment variables from .env file
load_dotenv()


def _parse_levels(raw: str) -> Tuple[int, ...]:
    """Parse a comma separated list of ladder levels. Range is checked by validate()."""
    levels = []
    for level in raw.split(","):
        level = level.strip()
        if not level:
            continue
        try:
            levels.append(int(level))
        except ValueError:
            raise ConfigurationError(
                f"Invalid ladder level {level!r}",
                {"value": raw}
            ) from None
    return tuple(sorted(levels))


class Config:
    """Application configuration class."""

    # Database Configuration
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///millionaire.db")
    DATABASE_POOL_SIZE: int = int(os.getenv("DATABASE_POOL_SIZE", "10"))
    DATABASE_MAX_OVERFLOW: int = int(os.getenv("DATABASE_MAX_OVERFLOW", "20"))

    # Retry Settings
    DATABASE_RETRY_ATTEMPTS: int = int(os.getenv("DATABASE_RETRY_ATTEMPTS", "3"))
    DATABASE_RETRY_DELAY: float = float(os.getenv("DATABASE_RETRY_DELAY", "1.0"))

    # Game Settings
    GAME_TIME_LIMIT_MINUTES: int = int(os.getenv("GAME_TIME_LIMIT_MINUTES", "35"))
    FIREPROOF_LEVELS: Tuple[int, ...] = _parse_levels(os.getenv("FIREPROOF_LEVELS", "4,9,14"))
    SHUFFLE_ANSWERS: bool = os.getenv("SHUFFLE_ANSWERS", "true").lower() in ("1", "true", "yes")

    # Help Settings
    # Extra weight the correct answer gets in the audience vote (1.0 = no bias)
    AUDIENCE_CORRECT_WEIGHT: float = float(os.getenv("AUDIENCE_CORRECT_WEIGHT", "3.0"))
    # Probability that the friend on the phone names the correct answer
    FRIEND_CALL_ACCURACY: float = float(os.getenv("FRIEND_CALL_ACCURACY", "0.8"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: str = os.getenv("LOG_FILE", "logs/millionaire.log")
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # Environment
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    DEBUG: bool = ENVIRONMENT.lower() == "development"

    @classmethod
    def validate(cls) -> bool:
        """Validate critical configuration values."""
        from game.prizes import LEVEL_COUNT

        if not cls.DATABASE_URL:
            raise ConfigurationError("DATABASE_URL is required")
        if cls.GAME_TIME_LIMIT_MINUTES <= 0:
            raise ConfigurationError(
                "GAME_TIME_LIMIT_MINUTES must be positive",
                {"value": cls.GAME_TIME_LIMIT_MINUTES}
            )
        bad_levels = [level for level in cls.FIREPROOF_LEVELS if not 0 <= level < LEVEL_COUNT]
        if bad_levels:
            raise ConfigurationError(
                "FIREPROOF_LEVELS must be ladder levels",
                {"invalid": bad_levels, "level_count": LEVEL_COUNT}
            )
        if not 0.0 <= cls.FRIEND_CALL_ACCURACY <= 1.0:
            raise ConfigurationError("FRIEND_CALL_ACCURACY must be between 0 and 1")
        if cls.AUDIENCE_CORRECT_WEIGHT < 1.0:
            raise ConfigurationError("AUDIENCE_CORRECT_WEIGHT must be at least 1.0")
        return True


# Create global config instance
config = Config()
