"""
Question repositories - where the engine gets candidate questions from.
"""
from typing import List, Protocol, Sequence
from sqlalchemy.orm import Session
from database.models import Question
from database.queries import QuestionQueries
from utils.retry import database_retry


class QuestionRepository(Protocol):
    """Anything that can list the questions of a difficulty level."""

    def questions_at_level(self, level: int) -> Sequence[Question]:
        ...


class SqlQuestionRepository:
    """Question repository backed by the questions table."""

    def __init__(self, session: Session):
        self.session = session

    @database_retry
    def questions_at_level(self, level: int) -> List[Question]:
        return QuestionQueries.get_questions_at_level(self.session, level)
