"""
Turn Orchestrator - The single owner of a game's state.

All state changes go through the orchestrator:
- start / finish_game / reset drive the lifecycle
- attempt_move checks a word without touching state
- apply_move / pass_turn record a turn and advance play
- key and locked letter operations manage the letter sets

Lifecycle: WAITING -> PLAYING -> FINISHED. Transitions never go back;
reset() replaces the state wholesale with a fresh WAITING game.

Observers are notified synchronously through an EventBus after each
mutation.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import logging

from ..config import (
    FALLBACK_INITIAL_WORD,
    DEFAULT_INITIAL_WORD_LENGTH,
    BotOptions,
    GameConfig,
    TiePolicy,
)
from ..lexicon import (
    ReasonCode,
    ValidationOptions,
    WordData,
    normalize_word,
    validate_word,
    USER_MESSAGES,
)
from .events import EventBus, GameEvent, GameEventListener, GameEventType
from .runtime import Utilities
from .scoring import ScoringBreakdown, dropped_locked_letters, is_valid_move, score_move
from .state import GameState, GameStatus, PlayerState, TurnRecord

if TYPE_CHECKING:
    from ..bots import BotMove, BotPolicy
    from ..session.schemas import GameSnapshot

logger = logging.getLogger(__name__)

KEY_LETTER_POOL = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


@dataclass(frozen=True)
class MoveAttempt:
    """
    Result of checking a word against the current game state.

    `previous_word` and `turn_number` pin the attempt to the state it was
    checked against; apply_move refuses a stale attempt.
    """
    word: str
    is_valid: bool
    previous_word: str
    turn_number: int
    player_id: str | None = None
    reason: ReasonCode | None = None
    user_message: str | None = None
    breakdown: ScoringBreakdown | None = None
    display_override: str | None = None

    @property
    def score(self) -> int:
        return self.breakdown.total if self.breakdown else 0

    @classmethod
    def rejected(
        cls,
        word: str,
        reason: ReasonCode,
        state: GameState,
        player_id: str | None = None,
    ) -> MoveAttempt:
        return cls(
            word=word,
            is_valid=False,
            previous_word=state.current_word,
            turn_number=state.current_turn,
            player_id=player_id,
            reason=reason,
            user_message=USER_MESSAGES[reason],
        )


@dataclass
class PlayerStats:
    player_id: str
    name: str
    score: int
    move_count: int
    average_score_per_move: float


@dataclass
class GameStats:
    """Summary numbers for a game."""
    duration_ms: float
    total_moves: int
    average_score: float
    player_stats: list[PlayerStats]


class TurnOrchestrator:
    """
    Owns one GameState and applies turns to it.

    Usage:
        game = TurnOrchestrator(word_data, GameConfig(initial_word="CAT"))
        game.start()
        attempt = game.attempt_move("CATS")
        if attempt.is_valid:
            game.apply_move(attempt)
    """

    def __init__(
        self,
        word_data: WordData,
        config: GameConfig | None = None,
        utilities: Utilities | None = None,
    ):
        self.word_data = word_data
        self.config = config or GameConfig()
        self.utilities = utilities or Utilities()
        self._events = EventBus()
        self.state = self._initial_state()

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def _initial_state(self) -> GameState:
        players = [
            PlayerState(player_id=p.player_id, name=p.name, is_bot=p.is_bot)
            for p in self.config.players
        ]
        return GameState(
            current_word=self.config.initial_word or self._random_initial_word(),
            players=players,
            max_turns=self.config.max_turns,
            started_at=self.utilities.get_timestamp(),
        )

    def _random_initial_word(self) -> str:
        word = self.word_data.random_word_by_length(
            DEFAULT_INITIAL_WORD_LENGTH, self.utilities.rng
        )
        return word or FALLBACK_INITIAL_WORD

    def start(self) -> bool:
        """WAITING -> PLAYING. Returns False if the game already started."""
        if self.state.status != GameStatus.WAITING:
            logger.warning("start() ignored: game is %s", self.state.status.value)
            return False

        self.state.status = GameStatus.PLAYING
        self.state.started_at = self.utilities.get_timestamp()
        self.state.used_words.add(self.state.current_word)
        if self.config.enable_key_letters:
            self._draw_key_letter()

        self._publish(
            GameEventType.GAME_STARTED,
            current_word=self.state.current_word,
            key_letters=sorted(self.state.key_letters),
        )
        return True

    def finish_game(self):
        """PLAYING -> FINISHED and pick the winner."""
        if self.state.status != GameStatus.PLAYING:
            return

        self.state.status = GameStatus.FINISHED
        self.state.winner, self.state.is_draw = self._pick_winner()

        self._publish(
            GameEventType.GAME_FINISHED,
            winner=self.state.winner.player_id if self.state.winner else None,
            is_draw=self.state.is_draw,
            final_scores={p.player_id: p.score for p in self.state.players},
        )

    def _pick_winner(self) -> tuple[PlayerState | None, bool]:
        if not self.state.players:
            return None, False
        best = max(p.score for p in self.state.players)
        leaders = [p for p in self.state.players if p.score == best]
        if len(leaders) == 1:
            return leaders[0], False
        if self.config.tie_policy == TiePolicy.DRAW:
            return None, True
        # Roster order decides
        return leaders[0], False

    def reset(self):
        """Replace the state with a fresh WAITING game."""
        self.state = self._initial_state()
        self._publish(GameEventType.GAME_RESET, current_word=self.state.current_word)

    # =========================================================================
    # Moves
    # =========================================================================

    def attempt_move(self, word: str) -> MoveAttempt:
        """
        Check a word for the current player without changing state.

        Validation order:
        1. Game must be in progress
        2. Word must not have been played already
        3. Dictionary and shape rules (bots bypass these)
        4. Humans: one add and one remove at most
        5. Locked letters must stay
        """
        state = self.state
        normalized = normalize_word(word or "")

        if state.status != GameStatus.PLAYING:
            return MoveAttempt.rejected(normalized, ReasonCode.GAME_NOT_ACTIVE, state)

        player = state.current_player
        if normalized and normalized in state.used_words:
            return MoveAttempt.rejected(
                normalized, ReasonCode.ALREADY_USED, state, player.player_id
            )

        validation = validate_word(
            normalized,
            self.word_data,
            ValidationOptions(
                is_bot=player.is_bot,
                previous_word=state.current_word,
                allow_slang=self.config.allow_slang,
            ),
        )
        if not validation.is_valid:
            return MoveAttempt.rejected(
                validation.word, validation.reason, state, player.player_id
            )

        if not player.is_bot and not is_valid_move(state.current_word, normalized):
            return MoveAttempt.rejected(
                normalized, ReasonCode.INVALID_MOVE, state, player.player_id
            )

        locked = state.all_locked_letters
        if dropped_locked_letters(state.current_word, normalized, locked):
            return MoveAttempt.rejected(
                normalized, ReasonCode.LOCKED_LETTER_REMOVED, state, player.player_id
            )

        breakdown = score_move(
            state.current_word, normalized, state.key_letters, locked
        )
        return MoveAttempt(
            word=normalized,
            is_valid=True,
            previous_word=state.current_word,
            turn_number=state.current_turn,
            player_id=player.player_id,
            breakdown=breakdown,
            display_override=validation.display_override,
        )

    def apply_move(self, attempt: MoveAttempt) -> ScoringBreakdown | None:
        """
        Apply a valid attempt.

        No-op (returns None) when the game is not in progress or the
        attempt is invalid or stale.
        """
        state = self.state
        if state.status != GameStatus.PLAYING:
            return None
        if not attempt.is_valid or attempt.breakdown is None:
            return None
        if (
            attempt.previous_word != state.current_word
            or attempt.turn_number != state.current_turn
            or attempt.player_id != state.current_player.player_id
        ):
            logger.warning("Stale move attempt for %r ignored", attempt.word)
            return None

        player = state.current_player
        breakdown = attempt.breakdown
        previous_word = state.current_word
        now = self.utilities.get_timestamp()

        state.current_word = attempt.word
        state.used_words.add(attempt.word)
        state.turn_history.append(
            TurnRecord(
                turn_number=state.current_turn,
                player_id=player.player_id,
                previous_word=previous_word,
                new_word=attempt.word,
                breakdown=breakdown,
                timestamp=now,
            )
        )
        player.score += breakdown.total
        state.total_moves += 1
        state.last_move_at = now

        self._consume_key_letters(breakdown.key_letters_used, attempt.word)

        self._publish(
            GameEventType.WORD_CHANGED,
            previous_word=previous_word,
            new_word=attempt.word,
            score=breakdown.total,
            player_id=player.player_id,
        )

        self.switch_player()
        return breakdown

    def play_word(self, word: str) -> MoveAttempt:
        """attempt_move + apply_move in one call."""
        attempt = self.attempt_move(word)
        if attempt.is_valid:
            self.apply_move(attempt)
        return attempt

    def pass_turn(self) -> bool:
        """Record a zero-point pass and move on. False if not playing."""
        state = self.state
        if state.status != GameStatus.PLAYING:
            return False

        player = state.current_player
        state.locked_key_letters = set()
        state.turn_history.append(
            TurnRecord(
                turn_number=state.current_turn,
                player_id=player.player_id,
                previous_word=state.current_word,
                new_word=state.current_word,
                breakdown=ScoringBreakdown.zero(["PASS"]),
                timestamp=self.utilities.get_timestamp(),
                passed=True,
            )
        )
        self.switch_player(passed=True)
        return True

    def switch_player(self, passed: bool = False):
        """Advance round-robin, bump the turn counter, finish when done."""
        state = self.state
        if state.status != GameStatus.PLAYING:
            return

        finished_player = state.current_player.player_id
        state.current_player_idx = (state.current_player_idx + 1) % state.num_players
        state.current_turn += 1

        self._publish(
            GameEventType.TURN_COMPLETED,
            player_id=finished_player,
            next_player_id=state.current_player.player_id,
            current_turn=state.current_turn,
            passed=passed,
        )

        if state.current_turn > state.max_turns:
            self.finish_game()

    def make_bot_move(self, bot: BotPolicy) -> BotMove | None:
        """
        Let a bot play the current turn.

        The bot's move is checked like any other; if the bot has nothing
        (or its word is rejected) the turn is passed.
        """
        state = self.state
        if state.status != GameStatus.PLAYING:
            return None
        if not state.current_player.is_bot:
            logger.warning("make_bot_move called on a human turn")
            return None

        result = bot.generate_bot_move(
            state.current_word,
            BotOptions(
                key_letters=sorted(state.key_letters),
                locked_letters=sorted(state.all_locked_letters),
                excluded_words=sorted(state.used_words),
            ),
        )
        if result.move is not None:
            attempt = self.attempt_move(result.move.word)
            if attempt.is_valid:
                self.apply_move(attempt)
                return result.move
            logger.warning(
                "Bot %s proposed rejected word %r (%s)",
                bot.get_name(),
                result.move.word,
                attempt.reason.value if attempt.reason else "unknown",
            )

        self.pass_turn()
        return None

    # =========================================================================
    # Letters
    # =========================================================================

    def _consume_key_letters(self, used: tuple[str, ...], new_word: str):
        state = self.state
        # Key letters just played are locked for the next player only
        state.locked_key_letters = {k for k in used if k in new_word}

        if used:
            state.key_letters -= set(used)
            state.used_key_letters |= set(used)
            self._publish(
                GameEventType.LETTERS_UPDATED,
                action="key_letters_consumed",
                letters=list(used),
                key_letters=sorted(state.key_letters),
            )

        if self.config.enable_key_letters:
            self._draw_key_letter()

    def _draw_key_letter(self) -> str | None:
        """Top up to one key letter not used before and not in the word."""
        state = self.state
        if state.key_letters:
            return None
        available = [
            letter for letter in KEY_LETTER_POOL
            if letter not in state.used_key_letters
            and letter not in state.current_word
        ]
        if not available:
            self.utilities.log("No key letters left to draw")
            return None

        letter = self.utilities.rng.choice(available)
        state.key_letters.add(letter)
        self._publish(
            GameEventType.LETTERS_UPDATED,
            action="key_letter_drawn",
            letter=letter,
            key_letters=sorted(state.key_letters),
        )
        return letter

    def add_key_letter(self, letter: str) -> bool:
        letter = letter.strip().upper()
        if not self.config.enable_key_letters or letter in self.state.key_letters:
            return False
        self.state.key_letters.add(letter)
        self._publish(
            GameEventType.LETTERS_UPDATED,
            action="key_added",
            letter=letter,
            key_letters=sorted(self.state.key_letters),
        )
        return True

    def remove_key_letter(self, letter: str) -> bool:
        letter = letter.strip().upper()
        if letter not in self.state.key_letters:
            return False
        self.state.key_letters.discard(letter)
        self._publish(
            GameEventType.LETTERS_UPDATED,
            action="key_removed",
            letter=letter,
            key_letters=sorted(self.state.key_letters),
        )
        return True

    def add_locked_letter(self, letter: str) -> bool:
        letter = letter.strip().upper()
        if not self.config.enable_locked_letters or letter in self.state.locked_letters:
            return False
        self.state.locked_letters.add(letter)
        self._publish(
            GameEventType.LETTERS_UPDATED,
            action="locked_added",
            letter=letter,
            locked_letters=sorted(self.state.locked_letters),
        )
        return True

    def remove_locked_letter(self, letter: str) -> bool:
        letter = letter.strip().upper()
        if letter not in self.state.locked_letters:
            return False
        self.state.locked_letters.discard(letter)
        self._publish(
            GameEventType.LETTERS_UPDATED,
            action="locked_removed",
            letter=letter,
            locked_letters=sorted(self.state.locked_letters),
        )
        return True

    # =========================================================================
    # Observers and queries
    # =========================================================================

    def subscribe(self, listener: GameEventListener):
        """Register a listener; returns an unsubscribe function."""
        return self._events.subscribe(listener)

    def _publish(self, event_type: GameEventType, **data: Any):
        self._events.publish(
            GameEvent(
                event_type=event_type,
                data=data,
                timestamp=self.utilities.get_timestamp(),
            )
        )

    def get_state(self) -> GameState:
        """A copy of the state; mutating it does not affect the game."""
        return self.state.clone()

    def get_stats(self) -> GameStats:
        state = self.state
        total_score = sum(p.score for p in state.players)
        average = total_score / state.total_moves if state.total_moves else 0.0

        player_stats = []
        for p in state.players:
            moves = [
                t for t in state.turn_history
                if t.player_id == p.player_id and not t.passed
            ]
            player_stats.append(
                PlayerStats(
                    player_id=p.player_id,
                    name=p.name,
                    score=p.score,
                    move_count=len(moves),
                    average_score_per_move=p.score / len(moves) if moves else 0.0,
                )
            )

        return GameStats(
            duration_ms=self.utilities.get_timestamp() - state.started_at,
            total_moves=state.total_moves,
            average_score=average,
            player_stats=player_stats,
        )

    # =========================================================================
    # Snapshots
    # =========================================================================

    def snapshot(self) -> GameSnapshot:
        """Serializable copy of the current state."""
        from ..session.schemas import GameSnapshot
        return GameSnapshot.from_state(self.state, self.config)

    @classmethod
    def from_snapshot(
        cls,
        snapshot: GameSnapshot,
        word_data: WordData,
        utilities: Utilities | None = None,
    ) -> TurnOrchestrator:
        """Rebuild an orchestrator around a saved state."""
        orchestrator = cls(word_data, snapshot.to_config(), utilities)
        orchestrator.state = snapshot.to_state()
        return orchestrator
