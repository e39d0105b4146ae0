#!/usr/bin/env python
"""
Script to time out games that ran past the time limit.
Meant to be run periodically (e.g. from cron); games are also timed out
lazily on the next answer, this only closes abandoned ones.
"""
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from game.service import GameService
from utils.logging import setup_logging, get_logger

setup_logging()
logger = get_logger(__name__)


def main():
    """Expire stale games."""
    logger.info("Looking for stale games...")

    try:
        expired = GameService().expire_stale_games()
        logger.info(f"Done, {expired} games timed out")
    except Exception as e:
        logger.error(f"Error expiring games: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
