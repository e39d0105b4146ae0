"""
Database module for the Millionaire quiz engine.
Contains models, database session management, and queries.
"""
from database.session import get_db_session, DatabaseSession, db_session
from database.models import (
    Base,
    User,
    Question,
    Game,
    GameQuestion,
    GameStatus,
    GameOutcome,
)

__all__ = [
    "get_db_session",
    "DatabaseSession",
    "db_session",
    "Base",
    "User",
    "Question",
    "Game",
    "GameQuestion",
    "GameStatus",
    "GameOutcome",
]
