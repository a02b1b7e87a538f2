"""
Game State - State container for one word game.

Design principles:
- Owned by exactly one TurnOrchestrator
- Mutated only through orchestrator operations
- Serializable via session.schemas.GameSnapshot
- Replaced wholesale on reset/restore, never partially rebuilt
"""

from __future__ import annotations
from dataclasses import dataclass, field
from copy import deepcopy
from enum import Enum

from .scoring import ScoringBreakdown


class GameStatus(Enum):
    """Lifecycle of a game. Transitions only move forward."""
    WAITING = "waiting"
    PLAYING = "playing"
    FINISHED = "finished"


@dataclass
class PlayerState:
    """A player in the roster."""
    player_id: str
    name: str
    is_bot: bool = False
    score: int = 0


@dataclass(frozen=True)
class TurnRecord:
    """Append-only audit entry for one turn."""
    turn_number: int
    player_id: str
    previous_word: str
    new_word: str
    breakdown: ScoringBreakdown
    timestamp: float
    passed: bool = False

    @property
    def score(self) -> int:
        return self.breakdown.total


@dataclass
class GameState:
    """
    Complete game state at a point in time.

    Key letters earn a bonus the first time a move introduces them and are
    then consumed. Locked letters must survive every move; locked key
    letters are the key letters the previous player used, locked for the
    next player's turn only.
    """
    current_word: str
    players: list[PlayerState] = field(default_factory=list)
    max_turns: int = 10

    # Letters
    key_letters: set[str] = field(default_factory=set)
    locked_letters: set[str] = field(default_factory=set)
    locked_key_letters: set[str] = field(default_factory=set)
    used_key_letters: set[str] = field(default_factory=set)
    used_words: set[str] = field(default_factory=set)

    # Game flow
    status: GameStatus = GameStatus.WAITING
    current_turn: int = 1
    current_player_idx: int = 0
    winner: PlayerState | None = None
    is_draw: bool = False

    # History
    turn_history: list[TurnRecord] = field(default_factory=list)
    total_moves: int = 0

    # Timestamps (ms)
    started_at: float = 0.0
    last_move_at: float = 0.0

    @property
    def current_player(self) -> PlayerState:
        """Get the player whose turn it is."""
        return self.players[self.current_player_idx]

    @property
    def num_players(self) -> int:
        return len(self.players)

    @property
    def all_locked_letters(self) -> set[str]:
        """Locked letters plus key letters locked for this turn."""
        return self.locked_letters | self.locked_key_letters

    def get_player(self, player_id: str) -> PlayerState | None:
        """Get player by ID."""
        for p in self.players:
            if p.player_id == player_id:
                return p
        return None

    def clone(self) -> GameState:
        """Deep copy the state."""
        return deepcopy(self)
