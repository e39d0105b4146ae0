"""
User ledger - credits payouts to player balances.
"""
from typing import Protocol
from sqlalchemy.orm import Session
from database.models import User
from utils.errors import DatabaseError, ValidationError
from utils.logging import get_logger

logger = get_logger(__name__)


class Ledger(Protocol):
    """Receives exactly one payout per finished game."""

    def credit(self, user_id: int, amount: int) -> None:
        ...


class UserLedger:
    """Ledger that adds payouts to users.balance in the current session."""

    def __init__(self, session: Session):
        self.session = session

    def credit(self, user_id: int, amount: int) -> None:
        """
        Add amount to the user's balance.

        Raises:
            ValidationError: on a negative amount
            DatabaseError: if the user does not exist
        """
        if amount < 0:
            raise ValidationError("Payout cannot be negative", {"user_id": user_id, "amount": amount})

        user = self.session.get(User, user_id)
        if user is None:
            raise DatabaseError(f"User {user_id} not found", {"user_id": user_id})

        user.balance = (user.balance or 0) + amount
        self.session.flush()
        logger.info(f"Credited {amount} to user {user_id}, balance is now {user.balance}")
