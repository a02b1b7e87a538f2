"""
Candidate Evaluator - Scores and ranks move candidates for the bot.

Each candidate gets:
- A score from the scoring engine
- A confidence heuristic:
    base 0.5
    + min(0.2 * score, 0.3)
    + 0.2 if the word uses a key letter
    + 0.1 if the word is 4-6 letters long
  clamped to [0, 1]

Weights live in ConfidenceWeights so personalities can tune them.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable

from ..engine_core.action import MoveCandidate
from ..engine_core.scoring import score_move
from .policy import BotMove


@dataclass(frozen=True)
class ConfidenceWeights:
    """
    Weights for the confidence heuristic.

    Higher values = more confidence.
    """
    base: float = 0.5
    per_point: float = 0.2
    score_cap: float = 0.3
    key_letter_bonus: float = 0.2
    comfortable_length_bonus: float = 0.1
    comfortable_min_length: int = 4
    comfortable_max_length: int = 6


def uses_key_letters(word: str, key_letters: Iterable[str]) -> bool:
    """True if any key letter appears in the word."""
    return any(k in word for k in key_letters)


class CandidateEvaluator:
    """
    Turns validated candidates into ranked BotMoves.

    Used by the greedy bot:
    1. Score each candidate against the current word
    2. Compute confidence
    3. Sort by (score desc, confidence desc)
    """

    def __init__(self, weights: ConfidenceWeights | None = None):
        self.weights = weights or ConfidenceWeights()

    def confidence(self, word: str, score: int, has_key_letters: bool) -> float:
        w = self.weights
        value = w.base
        value += min(score * w.per_point, w.score_cap)
        if has_key_letters:
            value += w.key_letter_bonus
        if w.comfortable_min_length <= len(word) <= w.comfortable_max_length:
            value += w.comfortable_length_bonus
        return max(0.0, min(1.0, value))

    def evaluate(
        self,
        candidate: MoveCandidate,
        current_word: str,
        key_letters: list[str],
        score_key_letters: bool = True,
    ) -> BotMove:
        """Score a single candidate."""
        breakdown = score_move(
            current_word,
            candidate.word,
            key_letters if score_key_letters else (),
        )
        score = breakdown.total
        has_keys = uses_key_letters(candidate.word, key_letters)
        confidence = self.confidence(candidate.word, score, has_keys)

        reasoning = [
            f"{candidate.kind.value} operation: {', '.join(candidate.operations)}",
            f"Score: {score} points",
        ]
        if has_keys:
            reasoning.append("Uses key letters")
        reasoning.append(f"Confidence: {round(confidence * 100)}%")

        return BotMove(
            word=candidate.word,
            score=score,
            confidence=confidence,
            reasoning=tuple(reasoning),
            breakdown=breakdown,
            uses_key_letters=has_keys,
        )

    def rank(
        self,
        candidates: Iterable[MoveCandidate],
        current_word: str,
        key_letters: list[str],
        score_key_letters: bool = True,
    ) -> list[BotMove]:
        """Score every candidate and sort best first."""
        moves = [
            self.evaluate(c, current_word, key_letters, score_key_letters)
            for c in candidates
        ]
        # Stable sort keeps generation order among exact ties
        moves.sort(key=lambda m: (m.score, m.confidence), reverse=True)
        return moves
