"""
Move Generator - Enumerates candidate next words.

The generator is used by:
1. The bot to enumerate possible moves
2. Hint/explain tooling

Four families of candidates:
- add: insert each letter at each position       -> 26 * (n + 1)
- remove: drop each position once                -> n
- substitute: replace each position with the
  other 25 letters                               -> 25 * n
- rearrange: a bounded, deduplicated sample of permutations

Rearrangement cannot be enumerated for long words (n! growth). When the
number of distinct permutations fits in the sample size they are listed
exhaustively; otherwise a mix of adjacent swaps, random pair swaps and
full shuffles is drawn. Reachability of a given anagram is therefore
probabilistic for long words.
"""

from __future__ import annotations
from collections import Counter
from dataclasses import dataclass, field
from math import factorial
from typing import Iterator
import random

from .. import config
from .action import MoveCandidate, TurnAction


# Common letter frequency order; only the order of generation depends on it
ALPHABET = "ETAOINSHRDLCUMWFGYPBVKJXQZ"

# Attempt index thresholds for the sampling strategies
_ADJACENT_SWAP_ATTEMPTS = 10
_RANDOM_SWAP_ATTEMPTS = 20


def distinct_permutation_count(word: str) -> int:
    """n! / prod(count!) for the letters of `word`."""
    total = factorial(len(word))
    for count in Counter(word).values():
        total //= factorial(count)
    return total


def distinct_permutations(word: str) -> Iterator[str]:
    """
    Each distinct ordering of `word` once, in lexicographic order.

    Steps from one ordering to the next in place, so repeated letters
    never produce duplicate work (AAAAAAAAAAB yields 11 orderings, not 11!).
    """
    letters = sorted(word)
    n = len(letters)
    while True:
        yield "".join(letters)
        i = n - 2
        while i >= 0 and letters[i] >= letters[i + 1]:
            i -= 1
        if i < 0:
            return
        j = n - 1
        while letters[j] <= letters[i]:
            j -= 1
        letters[i], letters[j] = letters[j], letters[i]
        letters[i + 1:] = reversed(letters[i + 1:])


@dataclass
class MoveSet:
    """Candidates grouped by operation."""
    add_moves: list[MoveCandidate] = field(default_factory=list)
    remove_moves: list[MoveCandidate] = field(default_factory=list)
    substitute_moves: list[MoveCandidate] = field(default_factory=list)
    rearrange_moves: list[MoveCandidate] = field(default_factory=list)

    def __iter__(self) -> Iterator[MoveCandidate]:
        yield from self.add_moves
        yield from self.remove_moves
        yield from self.rearrange_moves
        yield from self.substitute_moves

    def __len__(self) -> int:
        return (
            len(self.add_moves)
            + len(self.remove_moves)
            + len(self.substitute_moves)
            + len(self.rearrange_moves)
        )


@dataclass
class MoveGenerator:
    """
    Generates move candidates for a word.

    Usage:
        generator = MoveGenerator(rng=random.Random(7))
        moves = generator.generate("CAT")
        len(moves.add_moves)  # 104
    """
    alphabet: str = ALPHABET
    rearrange_sample_size: int = field(
        default_factory=lambda: config.DEFAULT_REARRANGE_SAMPLE
    )
    rng: random.Random = field(default_factory=random.Random)

    def __post_init__(self):
        self.alphabet = self.alphabet.upper()
        if len(set(self.alphabet)) != len(self.alphabet):
            raise ValueError("alphabet must not repeat letters")
        if self.rearrange_sample_size < 0:
            raise ValueError("rearrange_sample_size must be >= 0")

    def generate(self, current_word: str) -> MoveSet:
        """Generate every candidate family for `current_word`."""
        word = current_word.strip().upper()
        return MoveSet(
            add_moves=self.generate_add_moves(word),
            remove_moves=self.generate_remove_moves(word),
            substitute_moves=self.generate_substitute_moves(word),
            rearrange_moves=self.generate_rearrange_moves(word),
        )

    def generate_add_moves(self, word: str) -> list[MoveCandidate]:
        """Insert every alphabet letter at every position."""
        candidates = []
        for pos in range(len(word) + 1):
            for letter in self.alphabet:
                action = TurnAction.add(letter, pos)
                candidates.append(
                    MoveCandidate(
                        word=word[:pos] + letter + word[pos:],
                        action=action,
                        operations=(action.describe(),),
                    )
                )
        return candidates

    def generate_remove_moves(self, word: str) -> list[MoveCandidate]:
        """Drop each position once."""
        candidates = []
        for pos, letter in enumerate(word):
            action = TurnAction.remove(letter, pos)
            candidates.append(
                MoveCandidate(
                    word=word[:pos] + word[pos + 1:],
                    action=action,
                    operations=(action.describe(),),
                )
            )
        return candidates

    def generate_substitute_moves(self, word: str) -> list[MoveCandidate]:
        """Replace each position with every other alphabet letter."""
        candidates = []
        for pos, original in enumerate(word):
            for letter in self.alphabet:
                if letter == original:
                    continue
                action = TurnAction.substitute(original, letter, pos)
                candidates.append(
                    MoveCandidate(
                        word=word[:pos] + letter + word[pos + 1:],
                        action=action,
                        operations=(action.describe(),),
                    )
                )
        return candidates

    def generate_rearrange_moves(self, word: str) -> list[MoveCandidate]:
        """
        Bounded sample of rearrangements.

        Never contains the original word or duplicates.
        """
        limit = self.rearrange_sample_size
        if len(word) < 2 or limit == 0:
            return []

        if distinct_permutation_count(word) - 1 <= limit:
            words = self._all_rearrangements(word, limit)
        else:
            words = self._sample_rearrangements(word, limit)

        action = TurnAction.rearrange()
        return [
            MoveCandidate(
                word=new_word,
                action=action,
                operations=(action.describe(word, new_word),),
            )
            for new_word in words
        ]

    def _all_rearrangements(self, word: str, limit: int) -> list[str]:
        result = []
        for candidate in distinct_permutations(word):
            if len(result) >= limit:
                break
            if candidate != word:
                result.append(candidate)
        return result

    def _sample_rearrangements(self, word: str, limit: int) -> list[str]:
        letters = list(word)
        seen = {word}
        result: list[str] = []
        # Bounded attempts: duplicates are common for words with repeats
        max_attempts = limit * 3

        for attempt in range(max_attempts):
            if len(result) >= limit:
                break
            shuffled = letters.copy()
            if attempt < _ADJACENT_SWAP_ATTEMPTS:
                i = self.rng.randrange(len(shuffled))
                j = (i + 1) % len(shuffled)
                shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
            elif attempt < _RANDOM_SWAP_ATTEMPTS:
                i = self.rng.randrange(len(shuffled))
                j = self.rng.randrange(len(shuffled))
                shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
            else:
                self.rng.shuffle(shuffled)

            candidate = "".join(shuffled)
            if candidate not in seen:
                seen.add(candidate)
                result.append(candidate)

        return result


def generate_moves(current_word: str, rng: random.Random | None = None) -> MoveSet:
    """
    Convenience function to generate candidates.

    Creates a MoveGenerator with default settings.
    """
    generator = MoveGenerator(rng=rng or random.Random())
    return generator.generate(current_word)
