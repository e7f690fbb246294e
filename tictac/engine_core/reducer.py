"""
Reducer - Applies actions to game state.

The reducer is the single point of state mutation.
All state changes must go through apply_action().

Design principles:
- Pure function: (state, action) -> new_state
- Validates before applying
- Returns ActionResult with success/failure, never raises for game rules
"""

from __future__ import annotations
from dataclasses import dataclass
import logging

from .state import GameState, GamePhase, Mark
from .action import Action, ActionType, ActionResult, ErrorCode
from .rules import evaluate, is_valid_index

_log = logging.getLogger(__name__)


@dataclass
class Reducer:
    """
    Reducer applies actions to game state.

    Stateless - all state is in GameState.
    """

    def apply(self, state: GameState, action: Action) -> ActionResult:
        """
        Apply an action to the game state.

        Returns ActionResult with new state or error.
        """
        handler = self._get_handler(action.action_type)
        if not handler:
            return ActionResult.failure(
                f"No handler for action type: {action.action_type}",
                error_code=ErrorCode.NO_HANDLER,
            )

        result = handler(state, action)
        if not result.success:
            _log.debug("Rejected %s: %s", action.action_type.value, result.error)
        return result

    def _get_handler(self, action_type: ActionType):
        """Get the handler function for an action type."""
        handlers = {
            ActionType.PLACE_MARK: self._handle_place_mark,
            ActionType.RESET: self._handle_reset,
        }
        return handlers.get(action_type)

    def _validate_place(self, state: GameState, action: Action) -> ActionResult | None:
        """
        Validate a placement in the current state.

        Returns a failure result if invalid, None if valid.
        """
        if state.phase == GamePhase.OVER:
            return ActionResult.failure(
                "Game is over - no moves allowed", error_code=ErrorCode.GAME_OVER
            )

        if not is_valid_index(action.index):
            return ActionResult.failure(
                f"Cell index out of range: {action.index!r}",
                error_code=ErrorCode.INVALID_INDEX,
            )

        if state.board[action.index] is not None:
            return ActionResult.failure(
                f"Cell {action.index} is already occupied",
                error_code=ErrorCode.CELL_OCCUPIED,
            )

        if action.mark is not None and action.mark != state.turn_owner:
            return ActionResult.failure(
                f"Not {action.mark.value}'s turn", error_code=ErrorCode.WRONG_TURN
            )

        return None

    def _handle_place_mark(self, state: GameState, action: Action) -> ActionResult:
        """Handle a placement."""
        rejection = self._validate_place(state, action)
        if rejection:
            return rejection

        mark = state.turn_owner
        board = list(state.board)
        board[action.index] = mark
        new_board = tuple(board)

        outcome = evaluate(new_board)
        new_state = state._copy_with(
            board=new_board,
            turn_owner=mark.opponent,
            outcome=outcome,
            phase=GamePhase.OVER if outcome.is_terminal else GamePhase.PLAYING,
            move_history=state.move_history + (action.index,),
        )

        changes = [f"{mark.value} placed at {action.index}"]
        if outcome.is_terminal:
            changes.append(f"Game over: {outcome}")
        return ActionResult.success_with_state(new_state, changes=changes)

    def _handle_reset(self, state: GameState, action: Action) -> ActionResult:
        """Handle reset; always succeeds."""
        return ActionResult.success_with_state(GameState.new(), changes=["Game reset"])


_REDUCER = Reducer()


def apply_action(state: GameState, action: Action) -> ActionResult:
    """
    Convenience function to apply an action.

    Uses a shared stateless Reducer.
    """
    return _REDUCER.apply(state, action)


def place_mark(state: GameState, index: int, mark: Mark | None = None) -> ActionResult:
    """Place the turn owner's mark at index."""
    return apply_action(state, Action.place_mark(index, mark))


def reset(state: GameState | None = None) -> ActionResult:
    """Return a fresh initial state, whatever the current one is."""
    return apply_action(state or GameState.new(), Action.reset())
