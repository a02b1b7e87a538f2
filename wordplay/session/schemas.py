"""
Pydantic Schemas for Snapshots - Serializable game state.

A GameSnapshot is a plain-data copy of a GameState plus the GameConfig
it was created from. Stores persist `snapshot.model_dump(mode="json")`
and restore with `GameSnapshot.model_validate(data)`.

Sets are stored as sorted lists so snapshots compare and diff cleanly.
"""

from __future__ import annotations
from typing import Optional
from pydantic import BaseModel, Field

from ..config import GameConfig
from ..engine_core.scoring import ScoringBreakdown
from ..engine_core.state import GameState, GameStatus, PlayerState, TurnRecord


SNAPSHOT_VERSION = 1


# =============================================================================
# Nested Models
# =============================================================================

class BreakdownSnapshot(BaseModel):
    add_points: int = Field(0, ge=0)
    remove_points: int = Field(0, ge=0)
    rearrange_bonus: int = Field(0, ge=0, le=1)
    key_letter_bonus: int = Field(0, ge=0)
    key_letters_used: list[str] = Field(default_factory=list)
    actions: list[str] = Field(default_factory=list)

    @classmethod
    def from_breakdown(cls, breakdown: ScoringBreakdown) -> BreakdownSnapshot:
        return cls(
            add_points=breakdown.add_points,
            remove_points=breakdown.remove_points,
            rearrange_bonus=breakdown.rearrange_bonus,
            key_letter_bonus=breakdown.key_letter_bonus,
            key_letters_used=list(breakdown.key_letters_used),
            actions=list(breakdown.actions),
        )

    def to_breakdown(self) -> ScoringBreakdown:
        return ScoringBreakdown(
            add_points=self.add_points,
            remove_points=self.remove_points,
            rearrange_bonus=self.rearrange_bonus,
            key_letter_bonus=self.key_letter_bonus,
            key_letters_used=tuple(self.key_letters_used),
            actions=tuple(self.actions),
        )


class PlayerSnapshot(BaseModel):
    player_id: str
    name: str
    is_bot: bool = False
    score: int = Field(0, ge=0)


class TurnRecordSnapshot(BaseModel):
    turn_number: int = Field(ge=1)
    player_id: str
    previous_word: str
    new_word: str
    breakdown: BreakdownSnapshot
    timestamp: float
    passed: bool = False


# =============================================================================
# Game Snapshot
# =============================================================================

class GameSnapshot(BaseModel):
    """Complete, serializable game state."""
    version: int = SNAPSHOT_VERSION
    config: GameConfig

    current_word: str = Field(min_length=1)
    players: list[PlayerSnapshot]
    max_turns: int = Field(ge=1)

    key_letters: list[str] = Field(default_factory=list)
    locked_letters: list[str] = Field(default_factory=list)
    locked_key_letters: list[str] = Field(default_factory=list)
    used_key_letters: list[str] = Field(default_factory=list)
    used_words: list[str] = Field(default_factory=list)

    status: GameStatus
    current_turn: int = Field(ge=1)
    current_player_idx: int = Field(0, ge=0)
    winner_id: Optional[str] = None
    is_draw: bool = False

    turn_history: list[TurnRecordSnapshot] = Field(default_factory=list)
    total_moves: int = Field(0, ge=0)
    started_at: float = 0.0
    last_move_at: float = 0.0

    @classmethod
    def from_state(cls, state: GameState, config: GameConfig) -> GameSnapshot:
        return cls(
            config=config,
            current_word=state.current_word,
            players=[
                PlayerSnapshot(
                    player_id=p.player_id,
                    name=p.name,
                    is_bot=p.is_bot,
                    score=p.score,
                )
                for p in state.players
            ],
            max_turns=state.max_turns,
            key_letters=sorted(state.key_letters),
            locked_letters=sorted(state.locked_letters),
            locked_key_letters=sorted(state.locked_key_letters),
            used_key_letters=sorted(state.used_key_letters),
            used_words=sorted(state.used_words),
            status=state.status,
            current_turn=state.current_turn,
            current_player_idx=state.current_player_idx,
            winner_id=state.winner.player_id if state.winner else None,
            is_draw=state.is_draw,
            turn_history=[
                TurnRecordSnapshot(
                    turn_number=t.turn_number,
                    player_id=t.player_id,
                    previous_word=t.previous_word,
                    new_word=t.new_word,
                    breakdown=BreakdownSnapshot.from_breakdown(t.breakdown),
                    timestamp=t.timestamp,
                    passed=t.passed,
                )
                for t in state.turn_history
            ],
            total_moves=state.total_moves,
            started_at=state.started_at,
            last_move_at=state.last_move_at,
        )

    def to_config(self) -> GameConfig:
        return self.config.model_copy(deep=True)

    def to_state(self) -> GameState:
        """Rebuild a GameState; raises ValueError if the snapshot is inconsistent."""
        players = [
            PlayerState(
                player_id=p.player_id,
                name=p.name,
                is_bot=p.is_bot,
                score=p.score,
            )
            for p in self.players
        ]
        if not players or self.current_player_idx >= len(players):
            raise ValueError("snapshot has no player at current_player_idx")

        winner = None
        if self.winner_id is not None:
            winner = next((p for p in players if p.player_id == self.winner_id), None)
            if winner is None:
                raise ValueError(f"unknown winner id: {self.winner_id}")

        return GameState(
            current_word=self.current_word,
            players=players,
            max_turns=self.max_turns,
            key_letters=set(self.key_letters),
            locked_letters=set(self.locked_letters),
            locked_key_letters=set(self.locked_key_letters),
            used_key_letters=set(self.used_key_letters),
            used_words=set(self.used_words),
            status=self.status,
            current_turn=self.current_turn,
            current_player_idx=self.current_player_idx,
            winner=winner,
            is_draw=self.is_draw,
            turn_history=[
                TurnRecord(
                    turn_number=t.turn_number,
                    player_id=t.player_id,
                    previous_word=t.previous_word,
                    new_word=t.new_word,
                    breakdown=t.breakdown.to_breakdown(),
                    timestamp=t.timestamp,
                    passed=t.passed,
                )
                for t in self.turn_history
            ],
            total_moves=self.total_moves,
            started_at=self.started_at,
            last_move_at=self.last_move_at,
        )
