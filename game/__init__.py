"""
Game module for the Millionaire quiz engine.
Contains the game engine, prize ladder, ledger and the game service.
"""
from game.prizes import LEVEL_COUNT, PRIZES, GRAND_PRIZE, fireproof_prize, prize_for_level
from game.engine import GameEngine
from game.ledger import Ledger, UserLedger
from game.service import GameService

__all__ = [
    "LEVEL_COUNT",
    "PRIZES",
    "GRAND_PRIZE",
    "fireproof_prize",
    "prize_for_level",
    "GameEngine",
    "Ledger",
    "UserLedger",
    "GameService",
]
