"""
Database query helpers - common database operations.
"""
from datetime import datetime
from typing import Dict, List, Optional
from sqlalchemy.orm import Session, selectinload
from sqlalchemy import and_, func, asc
from database.models import User, Game, Question


class UserQueries:
    """User-related database queries."""

    @staticmethod
    def get_or_create_user(session: Session, username: str) -> User:
        """Get or create user by username."""
        user = session.query(User).filter(User.username == username).first()
        if not user:
            user = User(username=username, balance=0)
            session.add(user)
            session.flush()
        return user

    @staticmethod
    def get_user(session: Session, user_id: int) -> Optional[User]:
        """Get user by ID."""
        return session.get(User, user_id)


class GameQueries:
    """Game-related database queries."""

    @staticmethod
    def get_game_by_id(session: Session, game_id: int, for_update: bool = False) -> Optional[Game]:
        """Get game by ID, optionally locking the row."""
        query = (
            session.query(Game)
            .options(selectinload(Game.game_questions))
            .filter(Game.id == game_id)
        )
        if for_update:
            query = query.with_for_update()
        return query.first()

    @staticmethod
    def get_open_game_for_user(session: Session, user_id: int) -> Optional[Game]:
        """Get the user's unfinished game, if any."""
        return (
            session.query(Game)
            .options(selectinload(Game.game_questions))
            .filter(
                and_(
                    Game.user_id == user_id,
                    Game.finished_at.is_(None)
                )
            )
            .order_by(asc(Game.created_at))
            .first()
        )

    @staticmethod
    def get_open_games_created_before(session: Session, created_before: datetime) -> List[Game]:
        """Get unfinished games started before the given moment."""
        return (
            session.query(Game)
            .filter(
                and_(
                    Game.finished_at.is_(None),
                    Game.created_at < created_before
                )
            )
            .order_by(asc(Game.created_at))
            .all()
        )

    @staticmethod
    def get_user_games(session: Session, user_id: int) -> List[Game]:
        """Get all games of a user, newest first."""
        return (
            session.query(Game)
            .options(selectinload(Game.game_questions))
            .filter(Game.user_id == user_id)
            .order_by(Game.created_at.desc())
            .all()
        )


class QuestionQueries:
    """Question-related database queries."""

    @staticmethod
    def get_questions_at_level(session: Session, level: int) -> List[Question]:
        """Get all questions of a difficulty level."""
        return (
            session.query(Question)
            .filter(Question.level == level)
            .order_by(asc(Question.id))
            .all()
        )

    @staticmethod
    def count_by_level(session: Session) -> Dict[int, int]:
        """Number of questions per level."""
        rows = (
            session.query(Question.level, func.count(Question.id))
            .group_by(Question.level)
            .all()
        )
        return {level: count for level, count in rows}
