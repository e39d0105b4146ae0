"""
Game engine - the state machine of a single play-through.

A game starts in_progress and ends in exactly one of won, fail, timeout or
money. Engine methods mutate Game objects in memory; the caller persists them.
"""
import random
from datetime import timedelta
from typing import Iterable, Optional
from database.models import Game, GameOutcome, GameQuestion, GameStatus
from game.ledger import Ledger
from game.prizes import GRAND_PRIZE, LEVEL_COUNT, fireproof_prize, prize_for_level
from questions.helps import Help, HelpGenerator, HelpKind, apply_help, parse_help_kind
from questions.ladder import build_ladder
from questions.repository import QuestionRepository
from utils.clock import Clock, as_utc, utc_now
from utils.errors import GameFinishedError, HelpAlreadyUsedError
from utils.logging import get_logger
import config

logger = get_logger(__name__)

HELP_FLAGS = {
    HelpKind.AUDIENCE: "audience_help_used",
    HelpKind.FIFTY_FIFTY: "fifty_fifty_used",
    HelpKind.FRIEND_CALL: "friend_call_used",
}


class GameEngine:
    """Main game engine class."""

    def __init__(
        self,
        ledger: Ledger,
        clock: Optional[Clock] = None,
        time_limit: Optional[timedelta] = None,
        fireproof_levels: Optional[Iterable[int]] = None,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize game engine.

        Args:
            ledger: Receives payouts of finished games
            clock: Returns the current aware datetime
            time_limit: Maximum game duration (GAME_TIME_LIMIT_MINUTES by default)
            fireproof_levels: Guaranteed levels (FIREPROOF_LEVELS by default)
            rng: Random generator for ladders and helps
        """
        self.config = config.config
        self.ledger = ledger
        self.clock = clock or utc_now
        self.time_limit = time_limit or timedelta(minutes=self.config.GAME_TIME_LIMIT_MINUTES)
        self.fireproof_levels = tuple(
            self.config.FIREPROOF_LEVELS if fireproof_levels is None else fireproof_levels
        )
        self.rng = rng or random.Random()
        self.help_generator = HelpGenerator(self.rng)

    def create_game(self, user_id: int, repository: QuestionRepository) -> Game:
        """
        Create a new game with a freshly drawn question ladder.

        The caller must make sure the user has no other open game.

        Raises:
            InsufficientContentError: if some level has no questions
        """
        ladder = build_ladder(repository, LEVEL_COUNT, rng=self.rng)
        game = Game(user_id=user_id, game_questions=ladder, created_at=self.clock())
        logger.info(f"Game created for user {user_id}")
        return game

    def answer_current_question(self, game: Game, letter: str) -> bool:
        """
        Answer the current question.

        Late answers are not scored: the time limit is checked first.

        Returns:
            True if the answer was correct, False otherwise (including
            answers to finished or timed out games)
        """
        if game.finished:
            return False

        if self.time_out(game):
            return False

        game_question = game.current_game_question
        if not game_question.answer_correct(letter):
            self._finish_game(
                game,
                GameOutcome.WRONG_ANSWER,
                fireproof_prize(game.previous_level, self.fireproof_levels)
            )
            return False

        if game.current_level == LEVEL_COUNT - 1:
            self._finish_game(game, GameOutcome.COMPLETED, GRAND_PRIZE, current_level=LEVEL_COUNT)
        else:
            game.current_level += 1
            logger.debug(f"Game {game.id}: correct answer, moving to level {game.current_level}")

        return True

    def take_money(self, game: Game) -> None:
        """Finish the game and pay out the prize of the last answered level."""
        if game.finished or self.time_out(game):
            return

        self._finish_game(game, GameOutcome.CASHED_OUT, prize_for_level(game.previous_level))

    def time_out(self, game: Game) -> bool:
        """
        Fail the game if it has been running longer than the time limit.

        Returns:
            True if the game was timed out by this call
        """
        if game.finished:
            return False

        elapsed = as_utc(self.clock()) - as_utc(game.created_at)
        if elapsed <= self.time_limit:
            return False

        self._finish_game(
            game,
            GameOutcome.TIMED_OUT,
            fireproof_prize(game.previous_level, self.fireproof_levels)
        )
        return True

    def use_help(self, game: Game, kind: HelpKind) -> Help:
        """
        Use a help on the current question.

        Raises:
            GameFinishedError: if the game is over, including by running out of time
            HelpAlreadyUsedError: if this help kind was used in this game
            ValidationError: for an unknown help kind
        """
        kind = parse_help_kind(kind)
        if game.finished or self.time_out(game):
            raise GameFinishedError("Game is already finished", {"game_id": game.id})

        flag = HELP_FLAGS[kind]
        if getattr(game, flag):
            raise HelpAlreadyUsedError(
                f"Help {kind.value} was already used",
                {"game_id": game.id, "help": kind.value}
            )

        result = apply_help(game.current_game_question, kind, self.help_generator)
        setattr(game, flag, True)
        logger.info(f"Game {game.id}: help {kind.value} used at level {game.current_level}")
        return result

    def status(self, game: Game) -> GameStatus:
        return game.status_for(self.time_limit)

    def prize(self, game: Game) -> int:
        if not game.finished:
            return 0
        return game.prize

    def current_question(self, game: Game) -> Optional[GameQuestion]:
        return game.current_game_question

    def previous_question(self, game: Game) -> Optional[GameQuestion]:
        return game.previous_game_question

    def _finish_game(
        self,
        game: Game,
        outcome: GameOutcome,
        prize: int,
        current_level: Optional[int] = None
    ) -> None:
        """Terminal transition: pay out once, then record the outcome."""
        self.ledger.credit(game.user_id, prize)

        if current_level is not None:
            game.current_level = current_level
        game.prize = prize
        game.outcome = outcome
        game.finished_at = self.clock()
        if outcome in (GameOutcome.WRONG_ANSWER, GameOutcome.TIMED_OUT):
            game.is_failed = True

        logger.info(
            f"Game {game.id} of user {game.user_id} finished: "
            f"{outcome.value}, level={game.current_level}, prize={prize}"
        )
