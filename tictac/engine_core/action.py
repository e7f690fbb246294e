"""
Action System - Actions and results.

Actions represent the only two ways a game can change:
1. A player places a mark
2. The game is reset

All state changes flow through actions.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .state import GameState, Mark


class ActionType(Enum):
    """Types of actions in the system."""
    PLACE_MARK = "place_mark"
    RESET = "reset"


class ErrorCode(str, Enum):
    """Structured reasons an action was rejected."""
    GAME_OVER = "GAME_OVER"
    CELL_OCCUPIED = "CELL_OCCUPIED"
    INVALID_INDEX = "INVALID_INDEX"
    WRONG_TURN = "WRONG_TURN"
    NO_HANDLER = "NO_HANDLER"


@dataclass(frozen=True)
class Action:
    """
    A complete action to be applied to the game state.

    `mark` is optional on placements: when given, the reducer checks it
    against the turn owner; when omitted, the turn owner places.
    """
    action_type: ActionType
    index: int | None = None
    mark: Mark | None = None

    @classmethod
    def place_mark(cls, index: int, mark: Mark | None = None) -> Action:
        """Factory for a placement."""
        return cls(action_type=ActionType.PLACE_MARK, index=index, mark=mark)

    @classmethod
    def reset(cls) -> Action:
        """Factory for a reset."""
        return cls(action_type=ActionType.RESET)


@dataclass
class ActionResult:
    """
    Result of applying an action.

    Contains:
    - Whether action succeeded
    - New state (if succeeded)
    - Error and error code (if failed)
    - Human-readable changes (for logs and the console)
    """
    success: bool
    new_state: GameState | None = None
    error: str | None = None
    error_code: ErrorCode | None = None
    changes: list[str] = field(default_factory=list)

    @classmethod
    def failure(cls, error: str, error_code: ErrorCode | None = None) -> ActionResult:
        """Create a failure result."""
        return cls(success=False, error=error, error_code=error_code)

    @classmethod
    def success_with_state(
        cls,
        state: GameState,
        changes: list[str] | None = None,
    ) -> ActionResult:
        """Create a success result with new state."""
        return cls(success=True, new_state=state, changes=changes or [])

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "error": self.error,
            "error_code": self.error_code.value if self.error_code else None,
            "changes": list(self.changes),
        }
