"""
Bot Personalities - Strategy objects for each bot difficulty.

Every personality shares the same generator, validator and scorer.
They differ only in:
- The point range of moves they will play
- Their key letter behavior (ignore / avoid / allow / prioritize)
- Whether they validate like a human ("fair") or bypass validation
  ("privileged")
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any
import logging

from .evaluator import ConfidenceWeights
from .policy import BotMove

logger = logging.getLogger(__name__)


class KeyLetterBehavior(Enum):
    """How a personality treats key letters."""
    IGNORE = "ignore"  # Scored without the key letter bonus
    AVOID = "avoid"  # Never plays a word containing a key letter
    ALLOW = "allow"  # No special handling
    PRIORITIZE = "prioritize"  # Key letter moves ranked first


@dataclass(frozen=True)
class BotStrategy:
    """
    A bot personality.

    `min_points` / `max_points` bound the score of moves it will pick.
    """
    id: str
    display_name: str
    max_points: int
    min_points: int | None = None
    key_letter_behavior: KeyLetterBehavior = KeyLetterBehavior.ALLOW
    privileged: bool = False  # Bypass dictionary validation
    description: str = ""
    confidence_weights: ConfidenceWeights = field(default_factory=ConfidenceWeights)
    metadata: dict[str, Any] = field(default_factory=dict)

    def in_range(self, score: int) -> bool:
        if self.min_points is not None and score < self.min_points:
            return False
        return score <= self.max_points

    def distance_from_range(self, score: int) -> int:
        """0 inside the range, otherwise the points needed to reach it."""
        if self.min_points is not None and score < self.min_points:
            return self.min_points - score
        if score > self.max_points:
            return score - self.max_points
        return 0

    @property
    def scores_key_letters(self) -> bool:
        return self.key_letter_behavior != KeyLetterBehavior.IGNORE


# ============================================================================
# Predefined Personalities
# ============================================================================

TRAINER = BotStrategy(
    id="trainer-bot",
    display_name="trainerbot",
    max_points=2,
    key_letter_behavior=KeyLetterBehavior.IGNORE,
    description="Plays 1-2 point moves, completely ignores key letters",
)


EASY = BotStrategy(
    id="easy-bot",
    display_name="easybot",
    max_points=2,
    key_letter_behavior=KeyLetterBehavior.AVOID,
    description="Plays 1-2 point moves, never uses key letters",
)


MEDIUM = BotStrategy(
    id="medium-bot",
    display_name="mediumbot",
    max_points=3,
    key_letter_behavior=KeyLetterBehavior.ALLOW,
    description="Plays 1-3 point moves, can use key letters",
)


HARD = BotStrategy(
    id="hard-bot",
    display_name="hardbot",
    max_points=4,
    key_letter_behavior=KeyLetterBehavior.ALLOW,
    description="Plays 1-4 point moves, can use key letters",
)


BOSS = BotStrategy(
    id="boss-bot",
    display_name="bossbot",
    min_points=3,
    max_points=4,
    key_letter_behavior=KeyLetterBehavior.PRIORITIZE,
    description="Plays 3-4 point moves, prioritizes key letter usage",
)


# All predefined personalities
BOT_STRATEGIES: dict[str, BotStrategy] = {
    s.id: s for s in (TRAINER, EASY, MEDIUM, HARD, BOSS)
}


def get_bot_strategy(bot_id: str) -> BotStrategy:
    """Strategy for a bot ID, falling back to trainer-bot."""
    strategy = BOT_STRATEGIES.get(bot_id)
    if strategy is None:
        logger.warning("Unknown bot strategy '%s', defaulting to trainer-bot", bot_id)
        return TRAINER
    return strategy


def make_privileged(strategy: BotStrategy) -> BotStrategy:
    """Copy of a strategy that skips dictionary validation."""
    return replace(
        strategy,
        id=f"{strategy.id}-privileged",
        privileged=True,
        description=f"{strategy.description} (bypasses validation)",
    )


def _apply_key_letter_behavior(
    moves: list[BotMove], strategy: BotStrategy
) -> list[BotMove]:
    behavior = strategy.key_letter_behavior
    if behavior == KeyLetterBehavior.AVOID:
        return [m for m in moves if not m.uses_key_letters]
    if behavior == KeyLetterBehavior.PRIORITIZE:
        # Stable sort: key letter moves first, existing order otherwise
        return sorted(moves, key=lambda m: not m.uses_key_letters)
    return list(moves)


def filter_candidates_by_strategy(
    moves: list[BotMove], strategy: BotStrategy
) -> list[BotMove]:
    """
    Apply a personality to ranked moves.

    Keeps moves inside the point range, then applies the key letter
    behavior. Input order (best first) is preserved apart from the
    prioritize reordering.
    """
    in_range = [m for m in moves if strategy.in_range(m.score)]
    return _apply_key_letter_behavior(in_range, strategy)


def closest_to_range(moves: list[BotMove], strategy: BotStrategy) -> list[BotMove]:
    """
    Fallback when no move fits the point range.

    Respects the key letter behavior and orders moves by distance from
    the range, keeping the ranked order among equal distances.
    """
    allowed = _apply_key_letter_behavior(moves, strategy)
    return sorted(allowed, key=lambda m: strategy.distance_from_range(m.score))
