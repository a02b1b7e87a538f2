"""
Session Module - Manages game sessions.

A session represents one play-through of a game:
- Created when a player starts a game
- Holds the orchestrator and the bots
- Can be saved to and restored from an injected StateStore

Saving propagates failures; restoring degrades to a fresh game.
"""

from .schemas import GameSnapshot, PlayerSnapshot, TurnRecordSnapshot, BreakdownSnapshot
from .persistence import StateStore, InMemoryStateStore, PersistenceError
from .manager import SessionManager, Session
from .game_loop import GameLoop, LoopState, TurnResult

__all__ = [
    "GameSnapshot",
    "PlayerSnapshot",
    "TurnRecordSnapshot",
    "BreakdownSnapshot",
    "StateStore",
    "InMemoryStateStore",
    "PersistenceError",
    "SessionManager",
    "Session",
    "GameLoop",
    "LoopState",
    "TurnResult",
]
