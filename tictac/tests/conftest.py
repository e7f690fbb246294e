"""
Pytest fixtures for tictac tests.
"""

import pytest

from ..engine_core.state import GameState, GamePhase, Mark, empty_board, parse_board
from ..engine_core.rules import evaluate, legal_moves
from ..session import GameLoop, GameMode
from ..session.timer import Scheduler, TimerHandle


class ManualHandle(TimerHandle):
    def __init__(self, delay, callback):
        self.delay = delay
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class ManualScheduler(Scheduler):
    """Scheduler that only fires callbacks when the test says so."""

    def __init__(self):
        self.handles = []

    def call_later(self, delay, callback):
        handle = ManualHandle(delay, callback)
        self.handles.append(handle)
        return handle

    @property
    def outstanding(self):
        return [h for h in self.handles if not h.cancelled]

    def fire_all(self):
        """Run every scheduled callback, cancelled ones included."""
        handles, self.handles = self.handles, []
        for handle in handles:
            handle.callback()

    def fire_pending(self):
        """Run only callbacks that were not cancelled."""
        handles, self.handles = self.handles, []
        for handle in handles:
            if not handle.cancelled:
                handle.callback()


def state_from(text: str) -> GameState:
    """Build a consistent GameState from a board string."""
    board = parse_board(text)
    x_count = board.count(Mark.X)
    o_count = board.count(Mark.O)
    outcome = evaluate(board)
    state = GameState.new()._copy_with(
        board=board,
        turn_owner=Mark.X if x_count == o_count else Mark.O,
        outcome=outcome,
    )
    if outcome.is_terminal:
        state = state._copy_with(phase=GamePhase.OVER)
    return state


def reachable_boards():
    """Every board reachable by alternating play from an empty board."""
    seen = set()
    stack = [(empty_board(), Mark.X)]
    while stack:
        board, mark = stack.pop()
        if board in seen:
            continue
        seen.add(board)
        if evaluate(board).is_terminal:
            continue
        for i in legal_moves(board):
            stack.append((board[:i] + (mark,) + board[i + 1:], mark.opponent))
    return seen


@pytest.fixture
def manual_scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def pvc_loop(manual_scheduler) -> GameLoop:
    """Human (X) vs computer (O) with a manually driven timer."""
    return GameLoop(mode=GameMode.PVC, scheduler=manual_scheduler)


@pytest.fixture
def pvp_loop(manual_scheduler) -> GameLoop:
    return GameLoop(mode=GameMode.PVP, scheduler=manual_scheduler)


@pytest.fixture
def new_state() -> GameState:
    return GameState.new()
