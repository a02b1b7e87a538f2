"""
Bots module - Word game opponents.

Provides:
- BotPolicy: Interface for bot decision-making
- CandidateEvaluator: Scores and ranks candidates
- GreedyBot: One-ply greedy opponent
- BotStrategy: Personalities (trainer/easy/medium/hard/boss)
"""

from .policy import BotPolicy, BotMove, BotResult
from .evaluator import CandidateEvaluator, ConfidenceWeights
from .personality import (
    BotStrategy,
    KeyLetterBehavior,
    BOT_STRATEGIES,
    get_bot_strategy,
    make_privileged,
    filter_candidates_by_strategy,
)
from .greedy_bot import (
    GreedyBot,
    MoveExplanation,
    SimulationResult,
    explain_bot_move,
    simulate_bot_game,
)

__all__ = [
    "BotPolicy",
    "BotMove",
    "BotResult",
    "CandidateEvaluator",
    "ConfidenceWeights",
    "BotStrategy",
    "KeyLetterBehavior",
    "BOT_STRATEGIES",
    "get_bot_strategy",
    "make_privileged",
    "filter_candidates_by_strategy",
    "GreedyBot",
    "MoveExplanation",
    "SimulationResult",
    "explain_bot_move",
    "simulate_bot_game",
]
