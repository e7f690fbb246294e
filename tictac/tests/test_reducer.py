"""
Tests for the reducer (state transitions).

Tests:
- Placement application
- Validation and rejection codes
- Terminal transitions
- Reset
"""

import pytest

from ..engine_core.state import GameState, GamePhase, Mark, OutcomeKind
from ..engine_core.action import Action, ActionType, ActionResult, ErrorCode
from ..engine_core.reducer import Reducer, apply_action, place_mark, reset
from .conftest import state_from


def play(*indices):
    """Apply placements in order, asserting each succeeds."""
    state = GameState.new()
    for index in indices:
        result = place_mark(state, index)
        assert result.success, result.error
        state = result.new_state
    return state


class TestPlaceMark:
    """Tests for the place mark transition."""

    def test_places_turn_owner(self, new_state):
        """Placing puts X on the board and passes the turn to O."""
        result = place_mark(new_state, 4)

        assert result.success
        assert result.new_state.board[4] == Mark.X
        assert result.new_state.turn_owner == Mark.O
        assert result.new_state.move_history == (4,)
        assert result.changes == ["X placed at 4"]

    def test_input_state_not_modified(self, new_state):
        place_mark(new_state, 0)
        assert new_state == GameState.new()

    def test_turns_alternate(self):
        state = play(0, 1, 2)
        assert state.board[:3] == (Mark.X, Mark.O, Mark.X)
        assert state.turn_owner == Mark.O
        assert state.count(Mark.X) - state.count(Mark.O) == 1

    def test_occupied_cell_rejected(self):
        """Placing on an occupied cell fails and leaves the session unchanged."""
        state = play(4)
        result = place_mark(state, 4)

        assert not result.success
        assert result.error_code == ErrorCode.CELL_OCCUPIED
        assert result.new_state is None
        assert state == play(4)

    @pytest.mark.parametrize("index", [-1, 9, None, "4"])
    def test_invalid_index_rejected(self, new_state, index):
        result = place_mark(new_state, index)
        assert not result.success
        assert result.error_code == ErrorCode.INVALID_INDEX

    def test_wrong_mark_rejected(self, new_state):
        result = place_mark(new_state, 0, mark=Mark.O)
        assert not result.success
        assert result.error_code == ErrorCode.WRONG_TURN
        assert "turn" in result.error.lower()

    def test_matching_mark_accepted(self, new_state):
        assert place_mark(new_state, 0, mark=Mark.X).success


class TestTerminalTransitions:
    """Tests for win and draw detection through the reducer."""

    def test_win_ends_game(self):
        # X: 0, 1, 2 / O: 3, 4
        state = play(0, 3, 1, 4, 2)

        assert state.phase == GamePhase.OVER
        assert state.is_over
        assert state.winner == Mark.X
        assert state.winning_line == (0, 1, 2)

    def test_win_reports_change(self):
        state = play(0, 3, 1, 4)
        result = place_mark(state, 2)
        assert result.changes[-1] == "Game over: winner X 0,1,2"

    def test_draw_ends_game(self):
        # X O X / X O O / O X X
        state = play(0, 1, 2, 4, 3, 5, 7, 6, 8)

        assert state.is_over
        assert state.outcome.kind == OutcomeKind.DRAW
        assert state.winner is None
        assert state.winning_line == ()

    def test_no_moves_after_game_over(self):
        state = play(0, 3, 1, 4, 2)
        result = place_mark(state, 8)

        assert not result.success
        assert result.error_code == ErrorCode.GAME_OVER
        assert "over" in result.error.lower()

    def test_in_progress_stays_playing(self):
        state = play(0, 4)
        assert state.phase == GamePhase.PLAYING
        assert state.outcome.kind == OutcomeKind.NONE


class TestReset:
    """Tests for reset."""

    def test_reset_from_any_state(self):
        result = reset(state_from("XXXOO____"))
        assert result.success
        assert result.new_state == GameState.new()

    def test_reset_idempotent(self):
        once = reset(play(0, 4)).new_state
        twice = reset(once).new_state
        assert once == twice == GameState.new()

    def test_reset_without_state(self):
        assert reset().new_state == GameState.new()


class TestReducerDispatch:
    """Tests for action dispatch."""

    def test_apply_action_place(self, new_state):
        result = apply_action(new_state, Action.place_mark(8))
        assert result.success
        assert result.new_state.board[8] == Mark.X

    def test_apply_action_reset(self):
        result = Reducer().apply(play(0), Action.reset())
        assert result.new_state == GameState.new()

    def test_action_factories(self):
        action = Action.place_mark(3, Mark.O)
        assert action.action_type == ActionType.PLACE_MARK
        assert action.index == 3
        assert action.mark == Mark.O
        assert Action.reset().action_type == ActionType.RESET

    def test_result_to_dict(self):
        result = ActionResult.failure("nope", error_code=ErrorCode.CELL_OCCUPIED)
        assert result.to_dict() == {
            "success": False,
            "error": "nope",
            "error_code": "CELL_OCCUPIED",
            "changes": [],
        }
