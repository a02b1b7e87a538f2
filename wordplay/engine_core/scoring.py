"""
Scoring - Converts a word change into a point breakdown.

Rules:
- +1 per added letter
- +1 per removed letter
- +1 flat if the letters were rearranged (never more than +1)
- +1 per key letter newly introduced by the move

Examples:
- CAT -> CATS: 1 (add S)
- CAT -> BAT: 2 (remove C, add B)
- CAT -> TACE: 2 (add E, rearrange)

Scoring is deterministic and side-effect free. Locked letters are a
legality rule enforced before scoring; a move that drops one is a
programming error here.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable

from .diff import WordDiff, analyze_word_change


class LockedLetterError(ValueError):
    """Raised when a move that drops a locked letter reaches the scorer."""

    def __init__(self, letters: list[str]):
        self.letters = letters
        super().__init__(f"Move removes locked letter(s): {', '.join(letters)}")


@dataclass(frozen=True)
class ScoringBreakdown:
    """
    Points earned by one move.

    `total` is always the sum of the four components.
    """
    add_points: int = 0
    remove_points: int = 0
    rearrange_bonus: int = 0
    key_letter_bonus: int = 0

    key_letters_used: tuple[str, ...] = field(default_factory=tuple)
    actions: tuple[str, ...] = field(default_factory=tuple)

    @property
    def total(self) -> int:
        return (
            self.add_points
            + self.remove_points
            + self.rearrange_bonus
            + self.key_letter_bonus
        )

    @classmethod
    def zero(cls, actions: Iterable[str] = ()) -> ScoringBreakdown:
        """An empty breakdown (used for passes)."""
        return cls(actions=tuple(actions))

    def without_key_bonus(self) -> ScoringBreakdown:
        """Same breakdown with the key letter bonus removed."""
        return ScoringBreakdown(
            add_points=self.add_points,
            remove_points=self.remove_points,
            rearrange_bonus=self.rearrange_bonus,
            key_letter_bonus=0,
            key_letters_used=(),
            actions=tuple(a for a in self.actions if not a.startswith("Used key letter")),
        )


def _normalize_letters(letters: Iterable[str]) -> set[str]:
    return {letter.strip().upper() for letter in letters if letter and letter.strip()}


def dropped_locked_letters(
    from_word: str, to_word: str, locked_letters: Iterable[str]
) -> list[str]:
    """Locked letters present in `from_word` but missing from `to_word`."""
    prev = from_word.upper()
    curr = to_word.upper()
    return sorted(
        letter for letter in _normalize_letters(locked_letters)
        if letter in prev and letter not in curr
    )


def score_diff(diff: WordDiff, key_letters: Iterable[str] = ()) -> ScoringBreakdown:
    """Score an already computed diff."""
    keys = _normalize_letters(key_letters)

    add_points = diff.added_count
    remove_points = diff.removed_count
    rearrange_bonus = 1 if diff.rearranged else 0

    # Only letters this move introduced can earn the bonus
    key_letters_used = tuple(sorted(k for k in keys if diff.added[k] > 0))
    key_letter_bonus = len(key_letters_used)

    actions: list[str] = []
    if add_points:
        actions.append(f"Added letter(s): {', '.join(diff.added_letters)}")
    if remove_points:
        actions.append(f"Removed letter(s): {', '.join(diff.removed_letters)}")
    if rearrange_bonus:
        actions.append("Rearranged letters")
    if key_letter_bonus:
        actions.append(f"Used key letter(s): {', '.join(key_letters_used)}")

    return ScoringBreakdown(
        add_points=add_points,
        remove_points=remove_points,
        rearrange_bonus=rearrange_bonus,
        key_letter_bonus=key_letter_bonus,
        key_letters_used=key_letters_used,
        actions=tuple(actions),
    )


def score_move(
    from_word: str,
    to_word: str,
    key_letters: Iterable[str] = (),
    locked_letters: Iterable[str] = (),
) -> ScoringBreakdown:
    """
    Score the transformation from_word -> to_word.

    Args:
        from_word: Word before the move
        to_word: Word after the move
        key_letters: Active key letters (bonus on first introduction)
        locked_letters: Letters that must survive; checked, not scored

    Raises:
        LockedLetterError: if the move drops a locked letter
    """
    if not from_word or not to_word:
        return ScoringBreakdown.zero()

    dropped = dropped_locked_letters(from_word, to_word, locked_letters)
    if dropped:
        raise LockedLetterError(dropped)

    return score_diff(analyze_word_change(from_word, to_word), key_letters)


def get_score_for_move(
    from_word: str, to_word: str, key_letters: Iterable[str] = ()
) -> int:
    """Numeric score only."""
    return score_move(from_word, to_word, key_letters).total


def is_valid_move(from_word: str, to_word: str) -> bool:
    """
    Check the per-turn move limits.

    At most one letter added and at most one removed; rearranging is free.
    """
    diff = analyze_word_change(from_word, to_word)
    return diff.added_count <= 1 and diff.removed_count <= 1


def validate_breakdown(breakdown: ScoringBreakdown) -> bool:
    """Sanity check: no negative components."""
    components = (
        breakdown.add_points,
        breakdown.remove_points,
        breakdown.rearrange_bonus,
        breakdown.key_letter_bonus,
    )
    return all(points >= 0 for points in components) and breakdown.total >= 0


def format_breakdown(breakdown: ScoringBreakdown) -> str:
    """Short display string, e.g. 'Add: +1, Key Usage: +1'."""
    parts = []
    if breakdown.add_points:
        parts.append(f"Add: +{breakdown.add_points}")
    if breakdown.remove_points:
        parts.append(f"Remove: +{breakdown.remove_points}")
    if breakdown.rearrange_bonus:
        parts.append(f"Rearrange: +{breakdown.rearrange_bonus}")
    if breakdown.key_letter_bonus:
        parts.append(f"Key Usage: +{breakdown.key_letter_bonus}")
    return ", ".join(parts) if parts else "No score"
