"""
Question ladder - picks one question per level for a new game.
"""
import random
from typing import Dict, List, Optional
from database.models import ANSWER_KEYS, GameQuestion, Question
from questions.repository import QuestionRepository
from utils.errors import InsufficientContentError
from utils.logging import get_logger
import config

logger = get_logger(__name__)


def shuffle_question_options(question: Question, rng: random.Random) -> Dict[str, str]:
    """
    Shuffle answer options for a question.

    Returns:
        Mapping of displayed letter to original letter,
        e.g. {"a": "c", "b": "a", "c": "b", "d": "d"} means position a shows
        the question's original option c
    """
    original_letters = list(ANSWER_KEYS)
    shuffled = original_letters.copy()
    rng.shuffle(shuffled)

    shuffled_mapping = dict(zip(ANSWER_KEYS, shuffled))
    logger.debug(f"Shuffled options of question {question.id}: {shuffled_mapping}")
    return shuffled_mapping


def build_ladder(
    repository: QuestionRepository,
    level_count: int,
    rng: Optional[random.Random] = None,
    shuffle: Optional[bool] = None
) -> List[GameQuestion]:
    """
    Pick a random question for every level and wrap it into ladder entries.

    All levels are checked before any entry is built, so a missing level
    leaves nothing behind.

    Args:
        repository: Source of candidate questions
        level_count: Number of ladder levels
        rng: Random generator
        shuffle: Shuffle answer positions (defaults to SHUFFLE_ANSWERS)

    Returns:
        Unsaved GameQuestion entries ordered by level

    Raises:
        InsufficientContentError: if some level has no questions
    """
    rng = rng or random.Random()
    if shuffle is None:
        shuffle = config.config.SHUFFLE_ANSWERS

    chosen: List[Question] = []
    missing_levels = []
    for level in range(level_count):
        candidates = list(repository.questions_at_level(level))
        if not candidates:
            missing_levels.append(level)
            continue
        chosen.append(rng.choice(candidates))

    if missing_levels:
        logger.error(f"Not enough questions to build a ladder, empty levels: {missing_levels}")
        raise InsufficientContentError(
            "Not enough questions to start a game",
            {"missing_levels": missing_levels}
        )

    ladder = []
    for level, question in enumerate(chosen):
        shuffled_options = shuffle_question_options(question, rng) if shuffle else None
        ladder.append(GameQuestion(question=question, level=level, shuffled_options=shuffled_options))

    logger.debug(f"Ladder built: {[question.id for question in chosen]}")
    return ladder
