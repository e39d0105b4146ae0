from __future__ import annotations

import random
import sys
from datetime import datetime, timedelta
from pathlib import Path
from typing import Dict, Iterator, List, Tuple

import pytest
import pytz

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from database.models import Question  # noqa: E402
from database.session import DatabaseSession  # noqa: E402
from game.engine import GameEngine  # noqa: E402
from game.prizes import LEVEL_COUNT  # noqa: E402

START = datetime(2024, 1, 1, 12, 0, tzinfo=pytz.UTC)


class FakeClock:
    """Manually advanced clock."""

    def __init__(self, now: datetime = START) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


class FakeLedger:
    """Records credits instead of touching balances."""

    def __init__(self) -> None:
        self.credits: List[Tuple[int, int]] = []

    def credit(self, user_id: int, amount: int) -> None:
        self.credits.append((user_id, amount))

    def balance(self, user_id: int) -> int:
        return sum(amount for uid, amount in self.credits if uid == user_id)


class InMemoryQuestionRepository:
    def __init__(self, questions: List[Question]) -> None:
        self.by_level: Dict[int, List[Question]] = {}
        for question in questions:
            self.by_level.setdefault(question.level, []).append(question)

    def questions_at_level(self, level: int) -> List[Question]:
        return list(self.by_level.get(level, []))


def make_questions(per_level: int = 1, levels: int = LEVEL_COUNT, correct: str = "d") -> List[Question]:
    questions = []
    next_id = 1
    for level in range(levels):
        for n in range(per_level):
            questions.append(
                Question(
                    id=next_id,
                    level=level,
                    question_text=f"Question {n} of level {level}?",
                    option_a=f"{level}-{n}-a",
                    option_b=f"{level}-{n}-b",
                    option_c=f"{level}-{n}-c",
                    option_d=f"{level}-{n}-d",
                    correct_option=correct,
                )
            )
            next_id += 1
    return questions


def wrong_key(game_question) -> str:
    return next(key for key in "abcd" if key != game_question.correct_answer_key)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def ledger() -> FakeLedger:
    return FakeLedger()


@pytest.fixture
def repository() -> InMemoryQuestionRepository:
    return InMemoryQuestionRepository(make_questions(per_level=4))


@pytest.fixture
def engine(ledger: FakeLedger, clock: FakeClock) -> GameEngine:
    return GameEngine(
        ledger,
        clock=clock,
        time_limit=timedelta(minutes=35),
        fireproof_levels=(4, 9, 14),
        rng=random.Random(42),
    )


@pytest.fixture
def game(engine: GameEngine, repository: InMemoryQuestionRepository):
    return engine.create_game(7, repository)


@pytest.fixture
def db() -> Iterator[DatabaseSession]:
    database = DatabaseSession("sqlite://")
    database.create_tables()
    try:
        yield database
    finally:
        database.drop_tables()
        database.engine.dispose()
