"""
Engine Core - Deterministic game state management.

The engine is the runtime that:
1. Holds the GameState (board, turn owner, outcome)
2. Evaluates terminal outcomes and legal moves
3. Applies actions via the reducer
"""

from .state import (
    Board,
    GamePhase,
    GameState,
    Mark,
    Outcome,
    OutcomeKind,
    empty_board,
    format_board,
    parse_board,
)
from .action import Action, ActionType, ActionResult, ErrorCode
from .rules import LINES, evaluate, legal_moves, occupied_count, is_valid_index
from .reducer import Reducer, apply_action, place_mark, reset

__all__ = [
    "Board",
    "GamePhase",
    "GameState",
    "Mark",
    "Outcome",
    "OutcomeKind",
    "empty_board",
    "format_board",
    "parse_board",
    "Action",
    "ActionType",
    "ActionResult",
    "ErrorCode",
    "LINES",
    "evaluate",
    "legal_moves",
    "occupied_count",
    "is_valid_index",
    "Reducer",
    "apply_action",
    "place_mark",
    "reset",
]
