"""
Helps (lifelines) - generation of audience vote, fifty-fifty and friend call.

Each help kind has its own payload type. Payloads are stored in
GameQuestion.help_hash under the kind's value and read back with load_help.
"""
import random
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Dict, List, Optional, Sequence, Tuple, Union
import config
from utils.errors import HelpAlreadyUsedError, ValidationError
from utils.logging import get_logger

logger = get_logger(__name__)

FRIEND_NAMES = (
    "Alice",
    "Boris",
    "Carmen",
    "Dmitry",
    "Elena",
    "Farid",
    "Grace",
    "Hiroshi",
)


class HelpKind(Enum):
    """Help kinds, each usable once per game."""
    AUDIENCE = "audience_help"
    FIFTY_FIFTY = "fifty_fifty"
    FRIEND_CALL = "friend_call"


@dataclass(frozen=True)
class AudienceHelp:
    """Audience vote: percent per answer letter, always all four letters."""
    distribution: Dict[str, int]
    kind: ClassVar[HelpKind] = HelpKind.AUDIENCE

    def to_payload(self) -> Dict[str, int]:
        return dict(self.distribution)


@dataclass(frozen=True)
class FiftyFiftyHelp:
    """The two letters left visible, one of them correct."""
    keys: Tuple[str, str]
    kind: ClassVar[HelpKind] = HelpKind.FIFTY_FIFTY

    def to_payload(self) -> List[str]:
        return list(self.keys)


@dataclass(frozen=True)
class FriendCallHelp:
    """A friend's suggestion. Not necessarily right."""
    friend_name: str
    suggested_key: str
    kind: ClassVar[HelpKind] = HelpKind.FRIEND_CALL

    @property
    def message(self) -> str:
        return f"{self.friend_name} thinks the answer is {self.suggested_key.upper()}"

    def to_payload(self) -> Dict[str, str]:
        return {"friend": self.friend_name, "key": self.suggested_key}


Help = Union[AudienceHelp, FiftyFiftyHelp, FriendCallHelp]


def parse_help_kind(kind) -> HelpKind:
    """
    Resolve a help kind from an enum member or its value.

    Raises:
        ValidationError: for an unknown help kind
    """
    try:
        return HelpKind(kind)
    except ValueError:
        raise ValidationError(f"Unknown help {kind!r}", {"help": kind}) from None


def load_help(kind: HelpKind, payload) -> Help:
    """Rebuild a typed help from its stored payload."""
    if kind == HelpKind.AUDIENCE:
        return AudienceHelp(distribution={key: int(value) for key, value in payload.items()})
    elif kind == HelpKind.FIFTY_FIFTY:
        return FiftyFiftyHelp(keys=tuple(payload))
    else:  # FRIEND_CALL
        return FriendCallHelp(friend_name=payload["friend"], suggested_key=payload["key"])


class HelpGenerator:
    """Produces help payloads for a question."""

    def __init__(self, rng: Optional[random.Random] = None):
        """Initialize help generator."""
        self.config = config.config
        self.rng = rng or random.Random()

    def audience_distribution(self, keys: Sequence[str], correct_key: str) -> AudienceHelp:
        """
        Simulate the audience vote.

        Every letter gets a random weight, the correct one is boosted by
        AUDIENCE_CORRECT_WEIGHT. Weights are turned into whole percents with
        the largest remainder method so they always sum to 100.
        """
        weights = {key: self.rng.uniform(0.05, 1.0) for key in keys}
        if correct_key in weights:
            weights[correct_key] *= self.config.AUDIENCE_CORRECT_WEIGHT

        total = sum(weights.values())
        raw = {key: weight * 100 / total for key, weight in weights.items()}
        percents = {key: int(value) for key, value in raw.items()}

        leftover = 100 - sum(percents.values())
        by_remainder = sorted(keys, key=lambda key: raw[key] - percents[key], reverse=True)
        for key in by_remainder[:leftover]:
            percents[key] += 1

        return AudienceHelp(distribution={key: percents[key] for key in sorted(keys)})

    def fifty_fifty(self, keys: Sequence[str], correct_key: str) -> FiftyFiftyHelp:
        """Keep the correct answer and one random wrong one."""
        wrong_keys = [key for key in keys if key != correct_key]
        kept = self.rng.choice(wrong_keys)
        return FiftyFiftyHelp(keys=tuple(sorted((correct_key, kept))))

    def friend_call(self, keys: Sequence[str], correct_key: str) -> FriendCallHelp:
        """Friend names the correct answer with FRIEND_CALL_ACCURACY probability."""
        friend_name = self.rng.choice(FRIEND_NAMES)

        if self.rng.random() < self.config.FRIEND_CALL_ACCURACY:
            suggested_key = correct_key
        else:
            wrong_keys = [key for key in keys if key != correct_key]
            suggested_key = self.rng.choice(wrong_keys) if wrong_keys else correct_key

        return FriendCallHelp(friend_name=friend_name, suggested_key=suggested_key)

    def generate(self, kind: HelpKind, keys: Sequence[str], correct_key: str) -> Help:
        if kind == HelpKind.AUDIENCE:
            return self.audience_distribution(keys, correct_key)
        elif kind == HelpKind.FIFTY_FIFTY:
            return self.fifty_fifty(keys, correct_key)
        else:  # FRIEND_CALL
            return self.friend_call(keys, correct_key)


def apply_help(game_question, kind: HelpKind, generator: Optional[HelpGenerator] = None) -> Help:
    """
    Generate a help for a ladder entry and record it in its help_hash.

    Args:
        game_question: GameQuestion being played
        kind: Help kind to use
        generator: Help generator (a fresh one by default)

    Returns:
        The typed help payload

    Raises:
        HelpAlreadyUsedError: if this kind was already recorded for the entry
        ValidationError: for an unknown help kind
    """
    kind = parse_help_kind(kind)
    help_hash = game_question.help_hash or {}
    if kind.value in help_hash:
        raise HelpAlreadyUsedError(
            f"Help {kind.value} was already used",
            {"help": kind.value, "level": game_question.level}
        )

    generator = generator or HelpGenerator()
    result = generator.generate(
        kind,
        sorted(game_question.variants.keys()),
        game_question.correct_answer_key
    )

    # New dict so the JSON column registers the change
    game_question.help_hash = {**help_hash, kind.value: result.to_payload()}
    logger.debug(f"Help {kind.value} applied at level {game_question.level}: {result.to_payload()}")
    return result
