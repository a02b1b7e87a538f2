"""
Action System - Turn actions and move candidates.

A TurnAction describes what a move did to the word (add, remove,
substitute, rearrange). It is descriptive: the engine never executes it,
the new word is always the source of truth.

A MoveCandidate is a word produced by the move generator together with
the action and a human-readable trace. Candidates are not yet validated
or scored.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum


class ActionType(Enum):
    """Kinds of word transformation."""
    ADD = "add"
    REMOVE = "remove"
    SUBSTITUTE = "substitute"
    REARRANGE = "rearrange"


@dataclass(frozen=True)
class TurnAction:
    """
    A descriptive operation on a word.

    For ADD and SUBSTITUTE, `letter` is the new letter.
    For REMOVE, `letter` is the dropped letter.
    REARRANGE has no single letter or position.
    """
    kind: ActionType
    letter: str | None = None
    position: int | None = None
    replaced: str | None = None  # Old letter, for SUBSTITUTE

    @classmethod
    def add(cls, letter: str, position: int) -> TurnAction:
        """Factory for an insertion."""
        return cls(kind=ActionType.ADD, letter=letter, position=position)

    @classmethod
    def remove(cls, letter: str, position: int) -> TurnAction:
        """Factory for a removal."""
        return cls(kind=ActionType.REMOVE, letter=letter, position=position)

    @classmethod
    def substitute(cls, old: str, new: str, position: int) -> TurnAction:
        """Factory for a substitution."""
        return cls(
            kind=ActionType.SUBSTITUTE,
            letter=new,
            position=position,
            replaced=old,
        )

    @classmethod
    def rearrange(cls) -> TurnAction:
        """Factory for a rearrangement."""
        return cls(kind=ActionType.REARRANGE)

    def describe(self, source_word: str = "", target_word: str = "") -> str:
        """Human-readable trace line."""
        if self.kind == ActionType.ADD:
            return f"Add {self.letter} at position {self.position}"
        if self.kind == ActionType.REMOVE:
            return f"Remove {self.letter} from position {self.position}"
        if self.kind == ActionType.SUBSTITUTE:
            return f"Substitute {self.replaced} → {self.letter} at position {self.position}"
        return f"Rearrange letters: {source_word} → {target_word}"


@dataclass(frozen=True)
class MoveCandidate:
    """
    A candidate next word.

    Produced by the MoveGenerator; validation and scoring happen later.
    """
    word: str
    action: TurnAction
    operations: tuple[str, ...] = field(default_factory=tuple)

    @property
    def kind(self) -> ActionType:
        return self.action.kind
