"""
Bots module - Automated player implementations.

Provides:
- BotPolicy: Interface for bot decision-making
- HeuristicBot: The fixed priority-rule opponent
- select_move: The heuristic as a pure function
"""

from .policy import BotPolicy, BotDecision, MoveRule
from .heuristic import HeuristicBot, select_move, explain_move, winning_move

__all__ = [
    "BotPolicy",
    "BotDecision",
    "MoveRule",
    "HeuristicBot",
    "select_move",
    "explain_move",
    "winning_move",
]
