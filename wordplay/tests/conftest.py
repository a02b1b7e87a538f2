"""
Pytest fixtures for WordPlay tests.
"""

import pytest

from ..config import GameConfig, PlayerConfig
from ..engine_core.orchestrator import TurnOrchestrator
from ..engine_core.runtime import Utilities
from ..lexicon import WordData


TEST_WORDS = [
    "CAT", "CATS", "BAT", "BATS", "HAT", "HATS", "RAT", "RATS",
    "ACT", "ACTS", "CAST", "SCAT", "COAT", "COATS", "CART", "CARTS",
    "TACE", "HOT", "LETTER", "LETTERS", "WORD", "WORDS", "LORD",
    "TEA", "EAT", "ATE", "SEAT", "EAST", "EATS",
]


@pytest.fixture
def word_data() -> WordData:
    """Small lexicon with slang and profanity entries."""
    return WordData.from_words(
        TEST_WORDS + ["DARN"],
        slang_words=["YEET", "BRUH"],
        profanity_words=["DARN"],
    )


@pytest.fixture
def utilities() -> Utilities:
    """Seeded randomness and a frozen clock."""
    return Utilities.seeded(42, start_ms=1_000.0)


@pytest.fixture
def make_game(word_data, utilities):
    """Factory for orchestrators (human first, bot second)."""

    def _make(
        initial_word: str = "CAT",
        max_turns: int = 10,
        start: bool = True,
        **config_kwargs,
    ) -> TurnOrchestrator:
        config_kwargs.setdefault("enable_key_letters", False)
        config = GameConfig(
            initial_word=initial_word,
            max_turns=max_turns,
            players=[
                PlayerConfig(player_id="human", name="Player"),
                PlayerConfig(player_id="bot", name="Bot AI", is_bot=True),
            ],
            **config_kwargs,
        )
        game = TurnOrchestrator(word_data, config, utilities)
        if start:
            game.start()
        return game

    return _make
