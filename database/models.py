"""
Database models for the Millionaire quiz engine.

Game is the aggregate root: it owns its ladder of GameQuestion rows, one per
level. The engine mutates these objects in memory; persisting them is the
caller's job (see game.service).
"""
import enum
from datetime import timedelta
from typing import Dict, List, Optional

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    JSON,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import declarative_base, relationship

from utils.clock import as_utc, utc_now
from utils.errors import ValidationError

Base = declarative_base()

ANSWER_KEYS = ('a', 'b', 'c', 'd')


class GameStatus(enum.Enum):
    """Externally visible game status."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    FAIL = "fail"
    TIMEOUT = "timeout"
    MONEY = "money"


class GameOutcome(enum.Enum):
    """Why a game was finished. Recorded at the terminal transition."""
    WRONG_ANSWER = "wrong_answer"
    TIMED_OUT = "timed_out"
    CASHED_OUT = "cashed_out"
    COMPLETED = "completed"


OUTCOME_STATUS = {
    GameOutcome.WRONG_ANSWER: GameStatus.FAIL,
    GameOutcome.TIMED_OUT: GameStatus.TIMEOUT,
    GameOutcome.CASHED_OUT: GameStatus.MONEY,
    GameOutcome.COMPLETED: GameStatus.WON,
}


class User(Base):
    """Player account. Only the balance matters to the engine."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    username = Column(String(255), unique=True, nullable=True)
    balance = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), default=utc_now)

    games = relationship("Game", back_populates="user")

    def __repr__(self):
        return f"<User(id={self.id}, username={self.username!r}, balance={self.balance})>"


class Question(Base):
    """Question bank entry. Read-only to the engine."""
    __tablename__ = "questions"

    id = Column(Integer, primary_key=True)
    level = Column(Integer, nullable=False, index=True)
    question_text = Column(Text, nullable=False)
    option_a = Column(String(255), nullable=False)
    option_b = Column(String(255), nullable=False)
    option_c = Column(String(255), nullable=False)
    option_d = Column(String(255), nullable=False)
    correct_option = Column(String(1), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utc_now)

    @property
    def options(self) -> Dict[str, str]:
        """Answer texts keyed by letter."""
        return {
            'a': self.option_a,
            'b': self.option_b,
            'c': self.option_c,
            'd': self.option_d,
        }

    def __repr__(self):
        return f"<Question(id={self.id}, level={self.level})>"


class GameQuestion(Base):
    """One ladder slot of a game: a question at a level, plus used helps."""
    __tablename__ = "game_questions"
    __table_args__ = (
        UniqueConstraint("game_id", "level", name="uq_game_questions_game_level"),
    )

    id = Column(Integer, primary_key=True)
    game_id = Column(Integer, ForeignKey("games.id", ondelete="CASCADE"), nullable=False, index=True)
    question_id = Column(Integer, ForeignKey("questions.id"), nullable=False)
    level = Column(Integer, nullable=False)
    # help kind -> payload, see questions.helps
    help_hash = Column(JSON, nullable=False, default=dict)
    # displayed letter -> original option letter of the question
    shuffled_options = Column(JSON, nullable=False)
    correct_answer_key = Column(String(1), nullable=False)

    game = relationship("Game", back_populates="game_questions")
    question = relationship("Question", lazy="joined")

    def __init__(self, question: Question, level: int, shuffled_options: Optional[Dict[str, str]] = None):
        if shuffled_options is None:
            shuffled_options = {key: key for key in ANSWER_KEYS}
        correct_original = question.correct_option.lower()
        correct_answer_key = next(
            (shown for shown, original in shuffled_options.items() if original == correct_original),
            correct_original
        )
        super().__init__(
            question=question,
            question_id=question.id,
            level=level,
            help_hash={},
            shuffled_options=dict(shuffled_options),
            correct_answer_key=correct_answer_key,
        )

    @property
    def text(self) -> str:
        return self.question.question_text

    @property
    def variants(self) -> Dict[str, str]:
        """Answer texts keyed by the letter shown to the player."""
        options = self.question.options
        return {
            shown: options[original]
            for shown, original in sorted(self.shuffled_options.items())
        }

    def answer_correct(self, letter) -> bool:
        return str(letter).strip().lower() == self.correct_answer_key

    def help(self, kind):
        """Typed payload of a used help, or None if it was not used here."""
        from questions.helps import load_help, parse_help_kind

        kind = parse_help_kind(kind)
        payload = (self.help_hash or {}).get(kind.value)
        if payload is None:
            return None
        return load_help(kind, payload)

    def __repr__(self):
        return f"<GameQuestion(game_id={self.game_id}, level={self.level}, question_id={self.question_id})>"


class Game(Base):
    """A single play-through of the question ladder."""
    __tablename__ = "games"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    current_level = Column(Integer, nullable=False, default=0)
    is_failed = Column(Boolean, nullable=False, default=False)
    prize = Column(Integer, nullable=False, default=0)
    outcome = Column(
        Enum(
            GameOutcome,
            native_enum=False,
            length=20,
            values_callable=lambda enum_cls: [member.value for member in enum_cls],
        ),
        nullable=True,
    )
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    finished_at = Column(DateTime(timezone=True), nullable=True, index=True)

    audience_help_used = Column(Boolean, nullable=False, default=False)
    fifty_fifty_used = Column(Boolean, nullable=False, default=False)
    friend_call_used = Column(Boolean, nullable=False, default=False)

    user = relationship("User", back_populates="games")
    game_questions = relationship(
        "GameQuestion",
        back_populates="game",
        order_by="GameQuestion.level",
        cascade="all, delete-orphan",
    )

    def __init__(self, user_id: int, game_questions: List[GameQuestion], created_at=None):
        """
        Create a fresh game over a complete ladder.

        Raises:
            ValidationError: if the ladder does not hold exactly one entry per
                level, in order
        """
        from game.prizes import LEVEL_COUNT

        levels = [game_question.level for game_question in game_questions]
        if levels != list(range(LEVEL_COUNT)):
            raise ValidationError(
                "Game ladder must contain one question per level in order",
                {"levels": levels, "level_count": LEVEL_COUNT}
            )

        super().__init__(
            user_id=user_id,
            game_questions=list(game_questions),
            current_level=0,
            is_failed=False,
            prize=0,
            outcome=None,
            created_at=created_at or utc_now(),
            finished_at=None,
            audience_help_used=False,
            fifty_fifty_used=False,
            friend_call_used=False,
        )

    @property
    def finished(self) -> bool:
        return self.finished_at is not None

    @property
    def previous_level(self) -> int:
        return self.current_level - 1

    @property
    def current_game_question(self) -> Optional[GameQuestion]:
        """Question being played, None once the last level was answered."""
        if 0 <= self.current_level < len(self.game_questions):
            return self.game_questions[self.current_level]
        return None

    @property
    def previous_game_question(self) -> Optional[GameQuestion]:
        if self.previous_level < 0:
            return None
        return self.game_questions[self.previous_level]

    def status_for(self, time_limit: timedelta) -> GameStatus:
        """
        Derive the status.

        Games finished by this engine carry an explicit outcome. Rows without
        one are classified from the stored flags and timestamps.
        """
        from game.prizes import LEVEL_COUNT

        if not self.finished:
            return GameStatus.IN_PROGRESS
        if self.outcome is not None:
            return OUTCOME_STATUS[self.outcome]

        if self.current_level >= LEVEL_COUNT:
            return GameStatus.WON
        if self.is_failed:
            elapsed = as_utc(self.finished_at) - as_utc(self.created_at)
            return GameStatus.TIMEOUT if elapsed > time_limit else GameStatus.FAIL
        return GameStatus.MONEY

    @property
    def status(self) -> GameStatus:
        import config

        return self.status_for(timedelta(minutes=config.config.GAME_TIME_LIMIT_MINUTES))

    def __repr__(self):
        return (
            f"<Game(id={self.id}, user_id={self.user_id}, level={self.current_level}, "
            f"status={self.status.value})>"
        )
