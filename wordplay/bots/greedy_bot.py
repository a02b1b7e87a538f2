"""
Greedy Bot - One-ply word opponent.

This bot:
- Enumerates every candidate next word
- Keeps only legal, dictionary-valid candidates
- Scores and ranks them
- Applies its personality and plays the top entry

The bot does NOT:
- Look ahead past its own move
- Guarantee the globally best play
- Stop mid-phase when over its time budget (the budget is checked
  between phases only)
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging

from ..config import BotOptions
from ..engine_core.action import MoveCandidate
from ..engine_core.move_generator import MoveGenerator
from ..engine_core.runtime import Utilities
from ..engine_core.scoring import dropped_locked_letters
from ..lexicon import ValidationOptions, WordData, normalize_word, validate_word
from .evaluator import CandidateEvaluator
from .personality import (
    BotStrategy,
    TRAINER,
    closest_to_range,
    filter_candidates_by_strategy,
)
from .policy import BotMove, BotPolicy, BotResult

logger = logging.getLogger(__name__)


class _OutOfTime(Exception):
    pass


@dataclass
class GreedyBot(BotPolicy):
    """
    Greedy bot driven by a BotStrategy.

    Usage:
        bot = GreedyBot(word_data, strategy=get_bot_strategy("hard-bot"))
        result = bot.generate_bot_move("CAT", BotOptions(key_letters=["S"]))
        print(result.move.word, result.move.score)
    """
    word_data: WordData
    strategy: BotStrategy = TRAINER
    generator: MoveGenerator = field(default_factory=MoveGenerator)
    utilities: Utilities = field(default_factory=Utilities)
    evaluator: CandidateEvaluator | None = None
    allow_slang: bool = True

    def __post_init__(self):
        if self.evaluator is None:
            self.evaluator = CandidateEvaluator(self.strategy.confidence_weights)

    def get_name(self) -> str:
        return self.strategy.display_name

    def generate_bot_move(
        self,
        current_word: str,
        options: BotOptions | None = None,
    ) -> BotResult:
        """
        Pick the next word.

        Process:
        1. Generate candidates, dropping duplicate words
        2. Drop candidates that lose a locked letter or were already played
        3. Keep dictionary-valid words (skipped when privileged)
        4. Truncate to max_candidates
        5. Score, rank and apply the personality
        """
        options = options or BotOptions()
        word = normalize_word(current_word)
        started = self.utilities.get_timestamp()
        total_generated = 0

        def elapsed() -> float:
            return self.utilities.get_timestamp() - started

        def check_budget(phase: str):
            if elapsed() > options.time_limit_ms:
                self.utilities.log(f"Bot time budget exceeded after {phase}")
                raise _OutOfTime(phase)

        try:
            move_set = self.generator.generate(word)
            total_generated = len(move_set)
            candidates = self._unique(move_set)
            check_budget("generation")

            excluded = set(options.excluded_words)
            candidates = [
                c for c in candidates
                if c.word not in excluded
                and not dropped_locked_letters(word, c.word, options.locked_letters)
            ]
            candidates = self._filter_valid(candidates, word)
            check_budget("validation")

            candidates = candidates[:options.max_candidates]
            ranked = self.evaluator.rank(
                candidates,
                word,
                options.key_letters,
                score_key_letters=self.strategy.scores_key_letters,
            )
            move = self._select(ranked)
        except _OutOfTime:
            return BotResult.no_move(elapsed(), total_generated)
        except Exception:
            logger.exception("Bot move generation failed for %r", current_word)
            return BotResult.no_move(elapsed(), total_generated)

        return BotResult(
            move=move,
            candidates=ranked,
            processing_time_ms=elapsed(),
            total_candidates_generated=total_generated,
        )

    def _unique(self, candidates) -> list[MoveCandidate]:
        seen: set[str] = set()
        unique = []
        for candidate in candidates:
            if candidate.word not in seen:
                seen.add(candidate.word)
                unique.append(candidate)
        return unique

    def _filter_valid(
        self, candidates: list[MoveCandidate], current_word: str
    ) -> list[MoveCandidate]:
        if self.strategy.privileged:
            return candidates
        validation = ValidationOptions(
            is_bot=False,
            previous_word=current_word,
            allow_slang=self.allow_slang,
        )
        return [
            c for c in candidates
            if validate_word(c.word, self.word_data, validation).is_valid
        ]

    def _select(self, ranked: list[BotMove]) -> BotMove | None:
        if not ranked:
            return None
        preferred = filter_candidates_by_strategy(ranked, self.strategy)
        if preferred:
            return preferred[0]
        fallback = closest_to_range(ranked, self.strategy)
        if fallback:
            self.utilities.log(
                f"{self.strategy.id}: no move in range, playing {fallback[0].word}"
            )
            return fallback[0]
        return None


# ============================================================================
# Analysis helpers
# ============================================================================

@dataclass
class MoveExplanation:
    """Readable account of one bot decision."""
    analysis: str
    top_moves: list[BotMove]
    reasoning: list[str]


def explain_bot_move(
    bot: GreedyBot,
    current_word: str,
    key_letters: list[str] | None = None,
    show_top: int = 5,
) -> MoveExplanation:
    """Run the bot once and describe what it considered."""
    word = normalize_word(current_word)
    result = bot.generate_bot_move(word, BotOptions(key_letters=key_letters or []))

    reasoning = [
        f"Analyzed {result.total_candidates_generated} possible moves",
        f"Processing completed in {result.processing_time_ms:.2f}ms",
        f"Found {len(result.candidates)} valid candidates",
    ]
    if result.move:
        reasoning.append(
            f"Selected move: {word} → {result.move.word} ({result.move.score} points)"
        )
        reasoning.extend(result.move.reasoning)
    else:
        reasoning.append("No valid moves found")

    return MoveExplanation(
        analysis="\n".join(reasoning),
        top_moves=result.candidates[:show_top],
        reasoning=reasoning,
    )


@dataclass
class SimulationResult:
    """Outcome of a bot-vs-itself run."""
    success: bool
    completed_turns: int
    total_time_ms: float
    moves: list[BotMove] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def average_time_per_turn_ms(self) -> float:
        if not self.completed_turns:
            return 0.0
        return self.total_time_ms / self.completed_turns


def simulate_bot_game(
    bot: GreedyBot,
    initial_word: str,
    turns: int = 100,
    key_letters: list[str] | None = None,
) -> SimulationResult:
    """
    Let the bot play against itself.

    Words are never repeated. Stops at the first turn without a move.
    Useful for smoke-testing word lists and personalities.
    """
    clock = bot.utilities
    started = clock.get_timestamp()
    word = normalize_word(initial_word)
    played = [word]
    moves: list[BotMove] = []
    errors: list[str] = []

    for turn in range(1, turns + 1):
        options = BotOptions(key_letters=key_letters or [], excluded_words=played)
        result = bot.generate_bot_move(word, options)
        if result.move is None:
            errors.append(f"Turn {turn}: No valid move found")
            break
        moves.append(result.move)
        word = result.move.word
        played.append(word)

    return SimulationResult(
        success=not errors,
        completed_turns=len(moves),
        total_time_ms=clock.get_timestamp() - started,
        moves=moves,
        errors=errors,
    )
