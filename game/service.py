"""
Game service - runs player actions against the database.

Every action opens one session, loads the game, lets the engine apply the
transition and commits. This is where "one open game per user" and game
ownership are enforced; the engine itself does not look at stored data.
"""
import random
from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session
from database.models import Game
from database.queries import GameQueries, UserQueries
from database.session import DatabaseSession, get_db_session
from game.engine import GameEngine
from game.ledger import UserLedger
from questions.helps import Help, HelpKind
from questions.repository import SqlQuestionRepository
from utils.clock import Clock, utc_now
from utils.errors import DatabaseError, GameInProgressError, GameNotFoundError
from utils.logging import get_logger

logger = get_logger(__name__)


class GameService:
    """Entry point for the create / answer / take_money / help actions."""

    def __init__(
        self,
        db: Optional[DatabaseSession] = None,
        clock: Optional[Clock] = None,
        rng: Optional[random.Random] = None
    ):
        """Initialize game service."""
        self.db = db or get_db_session()
        self.clock = clock or utc_now
        self.rng = rng or random.Random()

    def _engine(self, session: Session) -> GameEngine:
        return GameEngine(UserLedger(session), clock=self.clock, rng=self.rng)

    def _load_game(self, session: Session, user_id: int, game_id: int) -> Game:
        game = GameQueries.get_game_by_id(session, game_id, for_update=True)
        if game is None or game.user_id != user_id:
            raise GameNotFoundError(f"Game {game_id} not found", {"game_id": game_id, "user_id": user_id})
        return game

    def create_game(self, user_id: int) -> Game:
        """
        Start a new game for the user.

        An open game that has already run out of time is timed out first.

        Raises:
            GameInProgressError: if the user still has an open game
            InsufficientContentError: if the question bank is incomplete
        """
        with self.db.get_session() as session:
            if UserQueries.get_user(session, user_id) is None:
                raise DatabaseError(f"User {user_id} not found", {"user_id": user_id})

            engine = self._engine(session)
            open_game = GameQueries.get_open_game_for_user(session, user_id)
            if open_game is not None and not engine.time_out(open_game):
                raise GameInProgressError(
                    "Finish the current game before starting a new one",
                    {"game_id": open_game.id}
                )
            if open_game is not None:
                # Persist the timeout even though creation may still fail below
                session.commit()

            game = engine.create_game(user_id, SqlQuestionRepository(session))
            session.add(game)
            session.flush()
            logger.info(f"User {user_id} started game {game.id}")
            return game

    def answer(self, user_id: int, game_id: int, letter: str) -> Dict[str, Any]:
        """
        Answer the current question of a game.

        Returns:
            Dict with 'game', 'correct', 'status' and 'prize'
        """
        with self.db.get_session() as session:
            game = self._load_game(session, user_id, game_id)
            engine = self._engine(session)
            correct = engine.answer_current_question(game, letter)
            session.flush()
            return {
                'game': game,
                'correct': correct,
                'status': engine.status(game),
                'prize': engine.prize(game),
            }

    def take_money(self, user_id: int, game_id: int) -> Game:
        """Cash out the prize reached so far."""
        with self.db.get_session() as session:
            game = self._load_game(session, user_id, game_id)
            self._engine(session).take_money(game)
            session.flush()
            return game

    def use_help(self, user_id: int, game_id: int, kind: HelpKind) -> Help:
        """Use a help on the current question of a game."""
        with self.db.get_session() as session:
            game = self._load_game(session, user_id, game_id)
            engine = self._engine(session)
            if engine.time_out(game):
                # Keep the timeout, use_help below rejects the finished game
                session.commit()
            result = engine.use_help(game, kind)
            session.flush()
            return result

    def get_game(self, user_id: int, game_id: int) -> Game:
        """Load a game owned by the user."""
        with self.db.get_session() as session:
            return self._load_game(session, user_id, game_id)

    def current_game(self, user_id: int) -> Optional[Game]:
        """The user's open game, if any."""
        with self.db.get_session() as session:
            return GameQueries.get_open_game_for_user(session, user_id)

    def list_games(self, user_id: int) -> List[Game]:
        """All games of the user, newest first."""
        with self.db.get_session() as session:
            return GameQueries.get_user_games(session, user_id)

    def expire_stale_games(self) -> int:
        """
        Time out every open game that has exceeded the time limit.

        Returns:
            Number of games timed out
        """
        with self.db.get_session() as session:
            engine = self._engine(session)
            stale_games = GameQueries.get_open_games_created_before(
                session, self.clock() - engine.time_limit
            )
            expired = sum(1 for game in stale_games if engine.time_out(game))
            session.flush()
            logger.info(f"Timed out {expired} stale games")
            return expired
