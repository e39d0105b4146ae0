from datetime import timedelta

import pytest

from conftest import START, make_questions
from database.models import Game, GameOutcome, GameQuestion, GameStatus
from game.prizes import LEVEL_COUNT
from utils.errors import ValidationError


def make_ladder(levels=None):
    questions = make_questions()
    levels = range(LEVEL_COUNT) if levels is None else levels
    return [GameQuestion(question=questions[level], level=level) for level in levels]


def make_game() -> Game:
    return Game(user_id=1, game_questions=make_ladder(), created_at=START)


def test_game_requires_full_ordered_ladder() -> None:
    with pytest.raises(ValidationError):
        Game(user_id=1, game_questions=make_ladder(range(LEVEL_COUNT - 1)), created_at=START)
    with pytest.raises(ValidationError):
        Game(user_id=1, game_questions=list(reversed(make_ladder())), created_at=START)


def test_new_game_defaults() -> None:
    game = make_game()
    assert game.current_level == 0
    assert game.prize == 0
    assert game.outcome is None
    assert game.finished is False
    assert game.status == GameStatus.IN_PROGRESS


def test_previous_level() -> None:
    game = make_game()
    assert game.previous_level == game.current_level - 1
    game.current_level = 5
    assert game.previous_level == 4
    assert game.previous_game_question is game.game_questions[4]


def test_status_follows_recorded_outcome() -> None:
    game = make_game()
    game.finished_at = START + timedelta(hours=1)
    game.is_failed = True
    game.outcome = GameOutcome.WRONG_ANSWER
    assert game.status == GameStatus.FAIL


@pytest.mark.parametrize(
    "is_failed, current_level, duration, expected",
    [
        (True, 3, timedelta(minutes=5), GameStatus.FAIL),
        (True, 3, timedelta(hours=1), GameStatus.TIMEOUT),
        (False, LEVEL_COUNT, timedelta(minutes=5), GameStatus.WON),
        (False, 3, timedelta(minutes=5), GameStatus.MONEY),
    ],
)
def test_status_without_outcome(is_failed, current_level, duration, expected) -> None:
    game = make_game()
    game.is_failed = is_failed
    game.current_level = current_level
    game.finished_at = START + duration
    assert game.status_for(timedelta(minutes=35)) == expected


def test_answer_correct_ignores_case_and_spaces() -> None:
    entry = make_ladder()[0]
    assert entry.answer_correct(" D ") is True
    assert entry.answer_correct("a") is False
    assert entry.answer_correct(None) is False
