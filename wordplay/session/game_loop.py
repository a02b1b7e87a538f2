"""
Game Loop - Drives a session turn by turn.

The loop:
1. Human submits a word (or passes)
2. Engine validates and applies it
3. Engine runs bot turns until it is a human's turn again
4. Caller shows the result
5. Repeat until the game is over
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from ..engine_core.state import GameStatus
from ..lexicon import ReasonCode

if TYPE_CHECKING:
    from .manager import Session


class LoopState(Enum):
    """State of the game loop."""
    WAITING_HUMAN = "waiting_human"
    RUNNING_BOTS = "running_bots"
    GAME_OVER = "game_over"


@dataclass
class TurnResult:
    """
    Result of processing a human turn and the bot turns that followed.
    """
    success: bool
    loop_state: LoopState

    word: str | None = None
    score: int = 0
    reason: ReasonCode | None = None
    user_message: str | None = None

    # "BOT: CAT -> CATS (+1)" style lines, or "BOT passed"
    bot_moves: list[str] = field(default_factory=list)

    # Game over info
    winner: str | None = None
    is_draw: bool = False


class GameLoop:
    """
    The main game loop driver.

    Usage:
        loop = GameLoop(session)
        result = loop.submit_word("CATS")
        if not result.success:
            show(result.user_message)
        show(result.bot_moves)
    """

    def __init__(self, session: Session):
        self.session = session
        self.state = self._current_loop_state()

    @property
    def orchestrator(self):
        return self.session.orchestrator

    def _current_loop_state(self) -> LoopState:
        if self.orchestrator.state.status == GameStatus.FINISHED:
            return LoopState.GAME_OVER
        if self.session.is_human_turn():
            return LoopState.WAITING_HUMAN
        return LoopState.RUNNING_BOTS

    def submit_word(self, word: str) -> TurnResult:
        """Play a word for the human whose turn it is, then run bots."""
        if not self.session.is_human_turn():
            return TurnResult(
                success=False,
                loop_state=self._current_loop_state(),
                reason=ReasonCode.GAME_NOT_ACTIVE,
                user_message="not your turn",
            )

        attempt = self.orchestrator.attempt_move(word)
        if not attempt.is_valid:
            return TurnResult(
                success=False,
                loop_state=self._current_loop_state(),
                word=attempt.word,
                reason=attempt.reason,
                user_message=attempt.user_message,
            )

        self.orchestrator.apply_move(attempt)
        result = TurnResult(
            success=True,
            loop_state=LoopState.RUNNING_BOTS,
            word=attempt.word,
            score=attempt.score,
        )
        return self._finish_round(result)

    def pass_turn(self) -> TurnResult:
        """Pass the human's turn, then run bots."""
        if not self.session.is_human_turn():
            return TurnResult(
                success=False,
                loop_state=self._current_loop_state(),
                reason=ReasonCode.GAME_NOT_ACTIVE,
                user_message="not your turn",
            )
        self.orchestrator.pass_turn()
        return self._finish_round(
            TurnResult(success=True, loop_state=LoopState.RUNNING_BOTS)
        )

    def run_bot_turns(self) -> list[str]:
        """
        Play bot turns until a human is up or the game ends.

        Returns one line per bot turn.
        """
        lines = []
        self.state = LoopState.RUNNING_BOTS
        while True:
            bot = self.session.current_bot()
            if bot is None:
                break
            state = self.orchestrator.state
            player = state.current_player
            previous = state.current_word
            move = self.orchestrator.make_bot_move(bot)
            if move is None:
                lines.append(f"{player.name} passed")
            else:
                # Credited score, which includes any key bonus the bot ignored
                credited = self.orchestrator.state.turn_history[-1].score
                lines.append(f"{player.name}: {previous} → {move.word} (+{credited})")
        self.state = self._current_loop_state()
        return lines

    def _finish_round(self, result: TurnResult) -> TurnResult:
        result.bot_moves = self.run_bot_turns()
        result.loop_state = self.state
        game = self.orchestrator.state
        if game.status == GameStatus.FINISHED:
            result.winner = game.winner.player_id if game.winner else None
            result.is_draw = game.is_draw
        return result
