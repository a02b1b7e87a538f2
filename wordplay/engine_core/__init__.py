"""
Engine Core - Deterministic word game rules and state management.

The engine is the runtime that:
1. Diffs two words letter by letter
2. Scores the change
3. Generates candidate next words
4. Owns GameState and applies turns via the orchestrator
"""

from .action import ActionType, TurnAction, MoveCandidate
from .diff import WordDiff, analyze_word_change
from .scoring import (
    ScoringBreakdown,
    LockedLetterError,
    score_move,
    get_score_for_move,
    is_valid_move,
    format_breakdown,
)
from .move_generator import MoveGenerator, MoveSet, generate_moves
from .runtime import Utilities
from .state import GameState, GameStatus, PlayerState, TurnRecord
from .events import GameEvent, GameEventType, EventBus
from .orchestrator import TurnOrchestrator, MoveAttempt, GameStats

__all__ = [
    "ActionType",
    "TurnAction",
    "MoveCandidate",
    "WordDiff",
    "analyze_word_change",
    "ScoringBreakdown",
    "LockedLetterError",
    "score_move",
    "get_score_for_move",
    "is_valid_move",
    "format_breakdown",
    "MoveGenerator",
    "MoveSet",
    "generate_moves",
    "Utilities",
    "GameState",
    "GameStatus",
    "PlayerState",
    "TurnRecord",
    "GameEvent",
    "GameEventType",
    "EventBus",
    "TurnOrchestrator",
    "MoveAttempt",
    "GameStats",
]
