"""
Game Events - Typed notifications published by the orchestrator.

Listeners are plain callables. They run synchronously after each
mutation; a listener that raises is logged and skipped so observers can
never break a turn.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable
import logging

logger = logging.getLogger(__name__)


class GameEventType(Enum):
    """Kinds of state change."""
    GAME_STARTED = "game_started"
    WORD_CHANGED = "word_changed"
    TURN_COMPLETED = "turn_completed"
    LETTERS_UPDATED = "letters_updated"
    GAME_FINISHED = "game_finished"
    GAME_RESET = "game_reset"


@dataclass(frozen=True)
class GameEvent:
    """A single state-change notification."""
    event_type: GameEventType
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: float = 0.0


GameEventListener = Callable[[GameEvent], None]


class EventBus:
    """Ordered list of listeners with subscribe/unsubscribe."""

    def __init__(self):
        self._listeners: list[GameEventListener] = []

    def subscribe(self, listener: GameEventListener) -> Callable[[], None]:
        """Register a listener; returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def publish(self, event: GameEvent):
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Listener failed on %s", event.event_type.value)

    def __len__(self) -> int:
        return len(self._listeners)
