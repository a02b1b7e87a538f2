"""
Bot Policy - Interface for bot decision-making.

A BotPolicy takes the current word and the letter constraints and
returns a BotResult: the chosen move (or None) plus the ranked
candidates it considered.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..config import BotOptions
    from ..engine_core.scoring import ScoringBreakdown


@dataclass(frozen=True)
class BotMove:
    """
    A scored candidate the bot could play.

    Contains:
    - The resulting word
    - Its score and a confidence in [0, 1]
    - Reasoning lines (for UI/debugging)
    """
    word: str
    score: int
    confidence: float
    reasoning: tuple[str, ...] = field(default_factory=tuple)
    breakdown: ScoringBreakdown | None = None
    uses_key_letters: bool = False


@dataclass
class BotResult:
    """
    Outcome of one bot decision.

    `move` is None when no legal candidate survived, the time budget ran
    out before scoring, or generation failed.
    """
    move: BotMove | None
    candidates: list[BotMove] = field(default_factory=list)
    processing_time_ms: float = 0.0
    total_candidates_generated: int = 0

    @classmethod
    def no_move(cls, processing_time_ms: float, total_generated: int) -> BotResult:
        return cls(
            move=None,
            candidates=[],
            processing_time_ms=processing_time_ms,
            total_candidates_generated=total_generated,
        )


class BotPolicy(ABC):
    """
    Abstract base class for bot policies.

    A policy defines how a bot selects its next word.
    """

    @abstractmethod
    def generate_bot_move(
        self,
        current_word: str,
        options: BotOptions | None = None,
    ) -> BotResult:
        """
        Choose the next word.

        Args:
            current_word: Word currently in play
            options: Key letters, locked letters and resource limits

        Returns:
            BotResult with the selected move (or None)
        """
        pass

    def get_name(self) -> str:
        """Get the bot's name/identifier."""
        return self.__class__.__name__
