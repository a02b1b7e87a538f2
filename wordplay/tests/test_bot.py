"""
Tests for bot move selection.

Tests:
- Bot only plays legal, dictionary-valid words
- Locked letters and max_candidates are respected
- Personalities change selection
- Time budget and failures produce "no move"
"""

import random

import pytest

from ..bots import (
    BOT_STRATEGIES,
    BotMove,
    CandidateEvaluator,
    GreedyBot,
    KeyLetterBehavior,
    explain_bot_move,
    filter_candidates_by_strategy,
    get_bot_strategy,
    make_privileged,
    simulate_bot_game,
)
from ..bots.personality import BOSS, EASY, HARD, MEDIUM, TRAINER, closest_to_range
from ..config import BotOptions
from ..engine_core.move_generator import MoveGenerator
from ..engine_core.runtime import Utilities


def make_bot(word_data, strategy=HARD, **kwargs) -> GreedyBot:
    kwargs.setdefault("generator", MoveGenerator(rng=random.Random(5)))
    kwargs.setdefault("utilities", Utilities.seeded(5))
    return GreedyBot(word_data=word_data, strategy=strategy, **kwargs)


def move(word, score, uses_keys=False) -> BotMove:
    return BotMove(word=word, score=score, confidence=0.5, uses_key_letters=uses_keys)


class TestBotLegality:
    """Tests that the bot only plays legal words."""

    def test_picks_highest_scoring_word(self, word_data):
        result = make_bot(word_data).generate_bot_move("CAT")
        assert result.move is not None
        assert result.move.word == "EAT"
        assert result.move.score == 2

    def test_candidates_are_dictionary_words(self, word_data):
        result = make_bot(word_data).generate_bot_move("CAT")
        assert result.candidates
        assert all(word_data.has_word(c.word) for c in result.candidates)
        assert "CAT" not in {c.word for c in result.candidates}

    def test_candidates_sorted_best_first(self, word_data):
        result = make_bot(word_data).generate_bot_move("CAT", BotOptions(key_letters=["S"]))
        keys = [(c.score, c.confidence) for c in result.candidates]
        assert keys == sorted(keys, reverse=True)

    def test_total_generated_counts_raw_candidates(self, word_data):
        result = make_bot(word_data).generate_bot_move("CAT")
        # 104 adds + 3 removes + 75 substitutions + 5 rearrangements
        assert result.total_candidates_generated == 187

    @pytest.mark.parametrize("strategy_id", sorted(BOT_STRATEGIES))
    def test_locked_letters_never_dropped(self, word_data, strategy_id):
        bot = make_bot(word_data, get_bot_strategy(strategy_id))
        result = bot.generate_bot_move(
            "CAT", BotOptions(key_letters=["S"], locked_letters=["C"])
        )
        assert result.move is not None
        assert "C" in result.move.word
        assert all("C" in c.word for c in result.candidates)

    @pytest.mark.parametrize("limit", [1, 2, 5])
    def test_max_candidates(self, word_data, limit):
        result = make_bot(word_data).generate_bot_move("CAT", BotOptions(max_candidates=limit))
        assert len(result.candidates) <= limit

    def test_excluded_words_skipped(self, word_data):
        result = make_bot(word_data).generate_bot_move(
            "CAT", BotOptions(key_letters=["S"], excluded_words=["scat"])
        )
        assert result.move.word == "CAST"

    def test_no_valid_words(self):
        from ..lexicon import WordData

        bot = make_bot(WordData.from_words(["CAT"]))
        result = bot.generate_bot_move("CAT")
        assert result.move is None
        assert result.candidates == []


class TestBotPersonality:
    """Tests for personality effects on selection."""

    def test_all_personalities_exist(self):
        assert set(BOT_STRATEGIES) == {
            "trainer-bot", "easy-bot", "medium-bot", "hard-bot", "boss-bot",
        }

    def test_unknown_id_falls_back_to_trainer(self):
        assert get_bot_strategy("nope") is TRAINER

    def test_hard_uses_key_letter(self, word_data):
        result = make_bot(word_data, HARD).generate_bot_move("CAT", BotOptions(key_letters=["S"]))
        assert result.move.word == "SCAT"
        assert result.move.score == 2
        assert result.move.uses_key_letters

    def test_easy_avoids_key_letters(self, word_data):
        result = make_bot(word_data, EASY).generate_bot_move("CAT", BotOptions(key_letters=["S"]))
        assert "S" not in result.move.word
        assert result.move.score <= 2

    def test_trainer_ignores_key_bonus(self, word_data):
        result = make_bot(word_data, TRAINER).generate_bot_move("CAT", BotOptions(key_letters=["S"]))
        assert result.move.score <= 2
        assert all(c.breakdown.key_letter_bonus == 0 for c in result.candidates)

    def test_medium_caps_points(self, word_data):
        result = make_bot(word_data, MEDIUM).generate_bot_move("CAT", BotOptions(key_letters=["B"]))
        assert result.move.word == "BAT"
        assert result.move.score == 3

    def test_boss_plays_in_range(self, word_data):
        result = make_bot(word_data, BOSS).generate_bot_move("CAT", BotOptions(key_letters=["B"]))
        assert result.move.word == "BAT"
        assert 3 <= result.move.score <= 4

    def test_boss_falls_back_to_closest(self, word_data):
        # Nothing scores 3+ here; the boss relaxes its range
        result = make_bot(word_data, BOSS).generate_bot_move("CAT", BotOptions(key_letters=["S"]))
        assert result.move.word == "SCAT"
        assert result.move.score == 2

    def test_privileged_skips_validation(self, word_data):
        fair = make_bot(word_data, HARD).generate_bot_move("CAT")
        privileged = make_bot(word_data, make_privileged(HARD)).generate_bot_move(
            "CAT", BotOptions(max_candidates=1000)
        )
        assert len(privileged.candidates) > len(fair.candidates)
        assert any(not word_data.has_word(c.word) for c in privileged.candidates)
        assert privileged.move.score >= fair.move.score


class TestStrategyFilter:
    """Tests for filter_candidates_by_strategy."""

    def test_range_filter(self):
        moves = [move("A", 4), move("B", 3), move("C", 2), move("D", 1)]
        assert [m.word for m in filter_candidates_by_strategy(moves, MEDIUM)] == ["B", "C", "D"]
        assert [m.word for m in filter_candidates_by_strategy(moves, BOSS)] == ["A", "B"]

    def test_avoid(self):
        moves = [move("A", 2, uses_keys=True), move("B", 1)]
        assert [m.word for m in filter_candidates_by_strategy(moves, EASY)] == ["B"]

    def test_prioritize_keeps_order_within_groups(self):
        moves = [move("A", 4), move("B", 3, uses_keys=True), move("C", 3), move("D", 3, uses_keys=True)]
        assert [m.word for m in filter_candidates_by_strategy(moves, BOSS)] == ["B", "D", "A", "C"]

    def test_closest_to_range(self):
        moves = [move("A", 1), move("B", 2)]
        assert [m.word for m in closest_to_range(moves, BOSS)] == ["B", "A"]

    def test_key_letter_behaviors(self):
        assert TRAINER.key_letter_behavior == KeyLetterBehavior.IGNORE
        assert not TRAINER.scores_key_letters
        assert BOSS.scores_key_letters


class TestConfidence:
    """Tests for the confidence heuristic."""

    def test_base_and_caps(self):
        evaluator = CandidateEvaluator()
        assert evaluator.confidence("LETTERS", 0, False) == pytest.approx(0.5)
        assert evaluator.confidence("CAT", 1, False) == pytest.approx(0.7)
        assert evaluator.confidence("CAT", 5, False) == pytest.approx(0.8)

    def test_default_evaluator_uses_strategy_weights(self, word_data):
        bot = make_bot(word_data, BOSS)
        assert isinstance(bot.evaluator, CandidateEvaluator)
        assert bot.evaluator.weights == BOSS.confidence_weights

    def test_explicit_evaluator_is_kept(self, word_data):
        evaluator = CandidateEvaluator()
        assert make_bot(word_data, evaluator=evaluator).evaluator is evaluator

    def test_key_and_length_bonus_clamped(self):
        evaluator = CandidateEvaluator()
        assert evaluator.confidence("CATS", 1, True) == pytest.approx(1.0)
        assert evaluator.confidence("CATS", 4, True) <= 1.0

    def test_reasoning_lines(self, word_data):
        result = make_bot(word_data).generate_bot_move("CAT", BotOptions(key_letters=["S"]))
        reasoning = result.move.reasoning
        assert reasoning[0] == "add operation: Add S at position 0"
        assert "Score: 2 points" in reasoning
        assert "Uses key letters" in reasoning
        assert reasoning[-1].startswith("Confidence: ")


class TestBotFailures:
    """Tests for time budget and internal errors."""

    def test_time_budget_exceeded(self, word_data):
        bot = make_bot(word_data, utilities=Utilities.seeded(1, step_ms=1000.0))
        result = bot.generate_bot_move("CAT", BotOptions(time_limit_ms=100))
        assert result.move is None
        assert result.total_candidates_generated == 187
        assert result.processing_time_ms > 100

    def test_generation_error_becomes_no_move(self, word_data):
        class ExplodingGenerator(MoveGenerator):
            def generate(self, current_word):
                raise RuntimeError("boom")

        bot = make_bot(word_data, generator=ExplodingGenerator())
        result = bot.generate_bot_move("CAT")
        assert result.move is None
        assert result.total_candidates_generated == 0


class TestAnalysisHelpers:
    """Tests for explain_bot_move and simulate_bot_game."""

    def test_explain(self, word_data):
        explanation = explain_bot_move(make_bot(word_data), "cat", show_top=3)
        assert "Selected move: CAT → EAT (2 points)" in explanation.reasoning
        assert len(explanation.top_moves) == 3
        assert explanation.analysis.startswith("Analyzed 187 possible moves")

    def test_explain_without_move(self):
        from ..lexicon import WordData

        explanation = explain_bot_move(make_bot(WordData.from_words(["CAT"])), "CAT")
        assert explanation.reasoning[-1] == "No valid moves found"
        assert explanation.top_moves == []

    def test_simulate_never_repeats_words(self, word_data):
        result = simulate_bot_game(make_bot(word_data), "CAT", turns=4)
        words = [m.word for m in result.moves]
        assert result.completed_turns == len(words)
        assert len(set(words)) == len(words)
        assert "CAT" not in words
        assert all(word_data.has_word(w) for w in words)
        assert result.success == (result.completed_turns == 4)
