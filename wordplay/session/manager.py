"""
Session Manager - Creates, tracks and persists game sessions.

A session is one play-through:
- An orchestrator that owns the GameState
- One bot per bot seat in the roster
- Metadata (id, creation time)

PERSISTENCE RULES:
- Saving propagates failures as PersistenceError so the caller can
  retry or alert
- Restoring never fails: a missing, unreadable or invalid snapshot
  degrades to a fresh game and logs a warning
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any
import logging
import uuid

from pydantic import ValidationError

from ..bots import BotPolicy, GreedyBot, get_bot_strategy
from ..config import GameConfig
from ..engine_core.move_generator import MoveGenerator
from ..engine_core.orchestrator import TurnOrchestrator
from ..engine_core.runtime import Utilities
from ..engine_core.state import GameStatus
from ..lexicon import WordData
from .persistence import InMemoryStateStore, PersistenceError, StateStore
from .schemas import GameSnapshot

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """
    A game session.

    Contains:
    - The orchestrator (and through it the game state)
    - Bots keyed by the player id they play for
    - Session metadata
    """
    session_id: str
    orchestrator: TurnOrchestrator
    created_at: float
    bots: dict[str, BotPolicy] = field(default_factory=dict)
    restored: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    def is_active(self) -> bool:
        return self.orchestrator.state.status != GameStatus.FINISHED

    def is_human_turn(self) -> bool:
        state = self.orchestrator.state
        return state.status == GameStatus.PLAYING and not state.current_player.is_bot

    def current_bot(self) -> BotPolicy | None:
        state = self.orchestrator.state
        if state.status != GameStatus.PLAYING:
            return None
        return self.bots.get(state.current_player.player_id)


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create sessions with bots for every bot seat
    - Track active sessions
    - Save and restore them through an injected StateStore
    """

    def __init__(
        self,
        word_data: WordData,
        store: StateStore | None = None,
        utilities: Utilities | None = None,
        bot_strategy: str = "trainer-bot",
    ):
        self.word_data = word_data
        self.store = store or InMemoryStateStore()
        self.utilities = utilities or Utilities()
        self.bot_strategy = bot_strategy
        self._sessions: dict[str, Session] = {}

    def _make_bots(self, orchestrator: TurnOrchestrator) -> dict[str, BotPolicy]:
        strategy = get_bot_strategy(self.bot_strategy)
        return {
            p.player_id: GreedyBot(
                word_data=self.word_data,
                strategy=strategy,
                generator=MoveGenerator(rng=self.utilities.rng),
                utilities=self.utilities,
                allow_slang=orchestrator.config.allow_slang,
            )
            for p in orchestrator.state.players
            if p.is_bot
        }

    def _register(
        self,
        orchestrator: TurnOrchestrator,
        session_id: str | None = None,
        restored: bool = False,
    ) -> Session:
        session = Session(
            session_id=session_id or str(uuid.uuid4()),
            orchestrator=orchestrator,
            created_at=self.utilities.get_timestamp(),
            bots=self._make_bots(orchestrator),
            restored=restored,
        )
        self._sessions[session.session_id] = session
        return session

    def create_session(
        self,
        config: GameConfig | None = None,
        session_id: str | None = None,
        start: bool = True,
    ) -> Session:
        """
        Create a new game session.

        Args:
            config: Game settings (defaults to human vs bot)
            session_id: Optional fixed id (generated otherwise)
            start: Start the game immediately

        Returns:
            New Session
        """
        orchestrator = TurnOrchestrator(self.word_data, config, self.utilities)
        if start:
            orchestrator.start()
        session = self._register(orchestrator, session_id)
        logger.info("Created session %s", session.session_id)
        return session

    def get_session(self, session_id: str) -> Session | None:
        return self._sessions.get(session_id)

    def end_session(self, session_id: str):
        """Forget a session. Stored snapshots are left alone."""
        self._sessions.pop(session_id, None)

    def list_active_sessions(self) -> list[str]:
        return [sid for sid, s in self._sessions.items() if s.is_active()]

    # =========================================================================
    # Persistence
    # =========================================================================

    async def save_session(self, session_id: str):
        """
        Persist a session's snapshot.

        Raises:
            KeyError: unknown session id
            PersistenceError: the store failed
        """
        session = self._sessions[session_id]
        data = session.orchestrator.snapshot().model_dump(mode="json")
        try:
            await self.store.save_state(session_id, data)
        except PersistenceError:
            raise
        except Exception as e:
            raise PersistenceError(session_id, str(e)) from e

    async def restore_session(
        self,
        session_id: str,
        config: GameConfig | None = None,
    ) -> Session:
        """
        Load a session from the store.

        Falls back to a fresh, started game (built from `config`) when
        nothing usable is stored.
        """
        try:
            data = await self.store.load_state(session_id)
        except Exception as e:
            logger.warning("Failed to load session %s: %s", session_id, e)
            data = None

        if data is not None:
            try:
                snapshot = GameSnapshot.model_validate(data)
                orchestrator = TurnOrchestrator.from_snapshot(
                    snapshot, self.word_data, self.utilities
                )
                return self._register(orchestrator, session_id, restored=True)
            except (ValidationError, ValueError) as e:
                logger.warning("Discarding invalid snapshot for %s: %s", session_id, e)

        logger.info("Starting a fresh game for session %s", session_id)
        return self.create_session(config, session_id=session_id)
