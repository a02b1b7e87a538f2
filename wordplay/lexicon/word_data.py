"""
Word Data - Immutable lexicon injected into validation and the bot.

A WordData instance holds three word sets:
- enable_words: the primary playable lexicon
- slang_words: casual words accepted when slang is allowed
- profanity_words: words that stay playable but get masked for display

There is no module-level dictionary. Callers build a WordData once and
pass it to every validation or lookup call. Instances are frozen, so a
single lexicon can be shared by any number of game sessions.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable
import random


def normalize_word(word: str) -> str:
    """Trim and uppercase a word."""
    return word.strip().upper()


def _normalize_all(words: Iterable[str]) -> frozenset[str]:
    return frozenset(normalize_word(w) for w in words if w and w.strip())


def read_word_list(path: str | Path) -> list[str]:
    """
    Read a newline-separated word list.

    Blank lines and lines starting with '#' are skipped.
    """
    words: list[str] = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            words.append(line)
    return words


@dataclass(frozen=True)
class WordData:
    """
    Read-only word sets for one lexicon.

    Usage:
        words = WordData.from_words(["CAT", "CATS", "BAT"])
        words.has_word("cat")  # True
    """
    enable_words: frozenset[str] = field(default_factory=frozenset)
    slang_words: frozenset[str] = field(default_factory=frozenset)
    profanity_words: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_words(
        cls,
        enable_words: Iterable[str],
        slang_words: Iterable[str] = (),
        profanity_words: Iterable[str] = (),
    ) -> WordData:
        """Build a lexicon from plain iterables, normalizing every word."""
        return cls(
            enable_words=_normalize_all(enable_words),
            slang_words=_normalize_all(slang_words),
            profanity_words=_normalize_all(profanity_words),
        )

    @classmethod
    def from_files(
        cls,
        enable_path: str | Path,
        slang_path: str | Path | None = None,
        profanity_path: str | Path | None = None,
    ) -> WordData:
        """Build a lexicon from word list files."""
        return cls.from_words(
            read_word_list(enable_path),
            read_word_list(slang_path) if slang_path else (),
            read_word_list(profanity_path) if profanity_path else (),
        )

    @property
    def word_count(self) -> int:
        """Number of words in the primary lexicon."""
        return len(self.enable_words)

    def in_primary(self, word: str) -> bool:
        return normalize_word(word) in self.enable_words

    def is_slang(self, word: str) -> bool:
        return normalize_word(word) in self.slang_words

    def is_profane(self, word: str) -> bool:
        return normalize_word(word) in self.profanity_words

    def has_word(self, word: str) -> bool:
        """True if the word is in the primary lexicon or the slang set."""
        normalized = normalize_word(word)
        return normalized in self.enable_words or normalized in self.slang_words

    def words_of_length(self, length: int) -> list[str]:
        """All primary words of a given length, sorted for reproducibility."""
        return sorted(w for w in self.enable_words if len(w) == length)

    def random_word_by_length(
        self, length: int, rng: random.Random | None = None
    ) -> str | None:
        """Pick a random primary word of the given length, or None."""
        candidates = self.words_of_length(length)
        if not candidates:
            return None
        rng = rng or random.Random()
        return rng.choice(candidates)

    def random_words_by_length(
        self, length: int, count: int = 1, rng: random.Random | None = None
    ) -> list[str]:
        """Pick `count` random words of a length (with replacement)."""
        candidates = self.words_of_length(length)
        if not candidates:
            return []
        rng = rng or random.Random()
        return [rng.choice(candidates) for _ in range(count)]


DATA_DIR = Path(__file__).parent / "data"


def load_bundled_word_data() -> WordData:
    """The small starter lexicon shipped with the package."""
    return WordData.from_files(
        DATA_DIR / "starter_words.txt",
        slang_path=DATA_DIR / "slang_words.txt",
    )
