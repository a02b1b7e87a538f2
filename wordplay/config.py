"""
Configuration - Environment settings and validated option models.

Environment variables (all optional):
    WORDPLAY_MAX_TURNS            Default turns per game (10)
    WORDPLAY_BOT_TIME_LIMIT_MS    Bot soft time budget in ms (100)
    WORDPLAY_BOT_MAX_CANDIDATES   Max candidates the bot scores (1000)
    WORDPLAY_REARRANGE_SAMPLE     Rearrangement sample size (50)
    WORDPLAY_WORDS_FILE           Word list used by the CLI
    WORDPLAY_LOG_LEVEL            Logging level for the CLI (WARNING)

GameConfig and BotOptions are pydantic models so bad values are caught
where the game is configured rather than deep inside a turn.
"""

from __future__ import annotations
from enum import Enum
from typing import Optional
import os

from pydantic import BaseModel, Field, field_validator


# Environment configuration
DEFAULT_MAX_TURNS = int(os.getenv("WORDPLAY_MAX_TURNS", "10"))
DEFAULT_BOT_TIME_LIMIT_MS = float(os.getenv("WORDPLAY_BOT_TIME_LIMIT_MS", "100"))
DEFAULT_BOT_MAX_CANDIDATES = int(os.getenv("WORDPLAY_BOT_MAX_CANDIDATES", "1000"))
DEFAULT_REARRANGE_SAMPLE = int(os.getenv("WORDPLAY_REARRANGE_SAMPLE", "50"))
WORDS_FILE = os.getenv("WORDPLAY_WORDS_FILE", None)
LOG_LEVEL = os.getenv("WORDPLAY_LOG_LEVEL", "WARNING")

DEFAULT_INITIAL_WORD_LENGTH = 4
FALLBACK_INITIAL_WORD = "WORD"


class TiePolicy(Enum):
    """How the winner is picked when top scores are equal."""
    FIRST_IN_ORDER = "first_in_order"  # Earliest player in roster order wins
    DRAW = "draw"  # No winner


def _normalize_letters(letters: list[str]) -> list[str]:
    normalized = []
    for letter in letters:
        letter = letter.strip().upper()
        if len(letter) != 1 or not letter.isalpha():
            raise ValueError(f"not a single letter: {letter!r}")
        if letter not in normalized:
            normalized.append(letter)
    return normalized


class PlayerConfig(BaseModel):
    """One roster entry."""
    player_id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    is_bot: bool = False


def default_roster() -> list[PlayerConfig]:
    return [
        PlayerConfig(player_id="human", name="Player", is_bot=False),
        PlayerConfig(player_id="bot", name="Bot AI", is_bot=True),
    ]


class GameConfig(BaseModel):
    """Settings for one game session."""
    initial_word: Optional[str] = None
    max_turns: int = Field(DEFAULT_MAX_TURNS, ge=1)
    players: list[PlayerConfig] = Field(default_factory=default_roster)

    enable_key_letters: bool = True
    enable_locked_letters: bool = True
    allow_slang: bool = True
    tie_policy: TiePolicy = TiePolicy.FIRST_IN_ORDER

    @field_validator("initial_word")
    @classmethod
    def _normalize_initial_word(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip().upper()
        if not value or not value.isalpha():
            raise ValueError("initial_word must contain letters only")
        return value

    @field_validator("players")
    @classmethod
    def _check_roster(cls, value: list[PlayerConfig]) -> list[PlayerConfig]:
        if not value:
            raise ValueError("at least one player is required")
        ids = [p.player_id for p in value]
        if len(set(ids)) != len(ids):
            raise ValueError("player ids must be unique")
        return value


class BotOptions(BaseModel):
    """Inputs for one bot decision."""
    key_letters: list[str] = Field(default_factory=list)
    locked_letters: list[str] = Field(default_factory=list)
    excluded_words: list[str] = Field(default_factory=list)
    max_candidates: int = Field(DEFAULT_BOT_MAX_CANDIDATES, ge=1)
    time_limit_ms: float = Field(DEFAULT_BOT_TIME_LIMIT_MS, gt=0)

    @field_validator("key_letters", "locked_letters")
    @classmethod
    def _letters(cls, value: list[str]) -> list[str]:
        return _normalize_letters(value)

    @field_validator("excluded_words")
    @classmethod
    def _words(cls, value: list[str]) -> list[str]:
        return [w.strip().upper() for w in value if w and w.strip()]
