"""
Prize ladder - prize amounts per level and fireproof floors.
"""
from typing import Iterable, Optional
import config

LEVEL_COUNT = 15

# PRIZES[i] is what the player has earned after answering level i correctly
PRIZES = (
    100, 200, 300, 500, 1000,
    2000, 4000, 8000, 16000, 32000,
    64000, 125000, 250000, 500000, 1000000,
)

GRAND_PRIZE = PRIZES[LEVEL_COUNT - 1]


def prize_for_level(answered_level: int) -> int:
    """Prize earned once `answered_level` has been answered correctly (0 if none)."""
    if answered_level < 0:
        return 0
    return PRIZES[min(answered_level, LEVEL_COUNT - 1)]


def fireproof_prize(answered_level: int, fireproof_levels: Optional[Iterable[int]] = None) -> int:
    """
    Guaranteed prize for a failed game.

    Args:
        answered_level: Highest level answered correctly (-1 if none)
        fireproof_levels: Fireproof level indices, defaults to configuration

    Returns:
        Prize of the highest fireproof level reached, or 0
    """
    if fireproof_levels is None:
        fireproof_levels = config.config.FIREPROOF_LEVELS

    reached = [level for level in fireproof_levels if level <= answered_level]
    if not reached:
        return 0
    return PRIZES[max(reached)]
