"""
Word Diff - Letter-level difference between two words.

Added and removed letters come from per-letter frequency counts, so
repeated letters are handled correctly (LETTER -> LETTERS adds one S).

`rearranged` covers two situations:
- Pure anagrams: same letters, different order (CAT -> TAC)
- Combined moves: letters were added or removed AND the letters that
  stayed appear in a different relative order (NAG -> LANG)

A plain insertion or deletion that keeps every other letter in place
(CAT -> COAT) is a "natural shift" and is not a rearrangement.
"""

from __future__ import annotations
from collections import Counter
from dataclasses import dataclass, field


def letter_counts(word: str) -> Counter:
    """Frequency map of the letters in a word."""
    return Counter(word)


def is_subsequence(short: str, long: str) -> bool:
    """True if `short` can be read inside `long` keeping order."""
    it = iter(long)
    return all(ch in it for ch in short)


def letters_that_stayed(from_word: str, to_word: str) -> Counter:
    """Multiset intersection of the two words' letters."""
    return letter_counts(from_word) & letter_counts(to_word)


def stayed_sequence(word: str, stayed: Counter) -> str:
    """The letters of `word` that belong to `stayed`, in word order."""
    remaining = Counter(stayed)
    sequence = []
    for ch in word:
        if remaining[ch] > 0:
            sequence.append(ch)
            remaining[ch] -= 1
    return "".join(sequence)


@dataclass(frozen=True)
class WordDiff:
    """Result of analyze_word_change."""
    from_word: str
    to_word: str
    added: Counter = field(default_factory=Counter)
    removed: Counter = field(default_factory=Counter)
    rearranged: bool = False

    @property
    def added_letters(self) -> list[str]:
        """Added letters as a sorted flat list (one entry per instance)."""
        return sorted(self.added.elements())

    @property
    def removed_letters(self) -> list[str]:
        """Removed letters as a sorted flat list (one entry per instance)."""
        return sorted(self.removed.elements())

    @property
    def added_count(self) -> int:
        return sum(self.added.values())

    @property
    def removed_count(self) -> int:
        return sum(self.removed.values())

    @property
    def is_unchanged(self) -> bool:
        return self.from_word == self.to_word


def _is_natural_shift(from_word: str, to_word: str, added: Counter, removed: Counter) -> bool:
    if added and not removed:
        return is_subsequence(from_word, to_word)
    if removed and not added:
        return is_subsequence(to_word, from_word)
    return False


def analyze_word_change(from_word: str, to_word: str) -> WordDiff:
    """
    Classify the difference between two words.

    Both words are normalized (trim + uppercase) before comparison.
    """
    prev = from_word.strip().upper()
    curr = to_word.strip().upper()

    prev_counts = letter_counts(prev)
    curr_counts = letter_counts(curr)

    # Counter subtraction drops non-positive counts
    added = curr_counts - prev_counts
    removed = prev_counts - curr_counts

    rearranged = False
    if prev != curr and not _is_natural_shift(prev, curr, added, removed):
        if not added and not removed:
            rearranged = True
        else:
            stayed = prev_counts & curr_counts
            if sum(stayed.values()) >= 2:
                rearranged = stayed_sequence(prev, stayed) != stayed_sequence(curr, stayed)

    return WordDiff(
        from_word=prev,
        to_word=curr,
        added=added,
        removed=removed,
        rearranged=rearranged,
    )
