"""
Game Loop - The game state holder.

The loop:
1. Human selects a cell
2. Reducer validates and applies the placement
3. Rules re-evaluate the outcome
4. If the automated player is next, its move is scheduled after a delay
5. The delayed move applies only if the game it was computed for is
   still the current one
6. Repeat until the game is over; reset at any time

Sessions are EPHEMERAL: nothing is persisted.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING
import logging

from ..bots import BotPolicy, HeuristicBot
from ..engine_core.state import GameState, GamePhase, Mark
from ..engine_core.reducer import place_mark, reset
from .timer import Scheduler, TimerHandle, ImmediateScheduler

if TYPE_CHECKING:
    from .schemas import SessionView

_log = logging.getLogger(__name__)

DEFAULT_AUTOMA_DELAY = 0.35
AUTOMA_MARK = Mark.O


class GameMode(str, Enum):
    """Whether one side is automated."""
    PVP = "pvp"  # human vs human
    PVC = "pvc"  # human vs computer


@dataclass
class PendingMove:
    """
    An automated move waiting for its delay to elapse.

    Captures the generation and state it was scheduled for; both must
    still be current when the timer fires.
    """
    generation: int
    state: GameState
    handle: TimerHandle | None = field(default=None, repr=False)


class GameLoop:
    """
    Owns the mutable session: current state, mode, and pending automa move.

    Usage:
        loop = GameLoop(mode=GameMode.PVC, scheduler=AsyncioScheduler())

        # Human input
        if not loop.select_cell(4):
            ...  # rejected: occupied, game over, or not the human's turn

        # Show the result
        view = loop.view()
        print(view.status_text)
    """

    def __init__(
        self,
        mode: GameMode = GameMode.PVC,
        automa_delay: float = DEFAULT_AUTOMA_DELAY,
        scheduler: Scheduler | None = None,
        bot: BotPolicy | None = None,
    ):
        self.mode = GameMode(mode)
        self.automa_delay = automa_delay
        self.scheduler = scheduler or ImmediateScheduler()
        self.bot = bot or HeuristicBot(mark=AUTOMA_MARK)
        self.automa_mark = getattr(self.bot, "mark", AUTOMA_MARK)

        self.state = GameState.new()
        # Bumped on every reset; stale pending moves compare against it
        self.generation = 0
        self._pending: PendingMove | None = None

        # An automated X opens the game
        self._maybe_schedule_automa()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def pending(self) -> bool:
        """Whether an automated move is scheduled and not yet applied."""
        return self._pending is not None

    @property
    def is_over(self) -> bool:
        return self.state.phase == GamePhase.OVER

    def is_automated(self, mark: Mark) -> bool:
        return self.mode == GameMode.PVC and mark == self.automa_mark

    @property
    def is_automa_turn(self) -> bool:
        return not self.is_over and self.is_automated(self.state.turn_owner)

    def view(self) -> SessionView:
        from .schemas import SessionView
        return SessionView.from_loop(self)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def select_cell(self, index: int) -> bool:
        """
        Human input for a cell.

        Rejected while the automated player owns the turn.
        """
        if self.is_automa_turn:
            _log.debug("Ignoring cell %s: waiting for automated player", index)
            return False
        return self.place_mark(index)

    def place_mark(self, index: int) -> bool:
        """
        Place the turn owner's mark at index.

        Returns False (state unchanged) if the game is over, the index is
        invalid, or the cell is occupied.
        """
        result = place_mark(self.state, index)
        if not result.success:
            return False

        self.state = result.new_state
        for change in result.changes:
            _log.debug(change)
        if self.state.is_over:
            _log.info("Game over: %s", self.state.outcome)

        self._maybe_schedule_automa()
        return True

    def reset(self) -> None:
        """Start a fresh game, discarding any pending automated move."""
        self._cancel_pending()
        self.generation += 1
        self.state = reset(self.state).new_state
        _log.info("New game (mode=%s, generation=%d)", self.mode.value, self.generation)
        self._maybe_schedule_automa()

    def set_mode(self, mode: GameMode) -> None:
        """Switch mode; always starts a new game."""
        self.mode = GameMode(mode)
        _log.info("Mode set to %s", self.mode.value)
        self.reset()

    # ------------------------------------------------------------------
    # Automated turn
    # ------------------------------------------------------------------

    def _maybe_schedule_automa(self) -> None:
        if not self.is_automa_turn:
            return

        self._cancel_pending()
        pending = PendingMove(generation=self.generation, state=self.state)
        self._pending = pending

        handle = self.scheduler.call_later(
            self.automa_delay, lambda: self._run_automa(pending)
        )
        # An inline scheduler may already have fired the move
        if self._pending is pending:
            pending.handle = handle

    def _cancel_pending(self) -> None:
        pending, self._pending = self._pending, None
        if pending and pending.handle:
            pending.handle.cancel()

    def _is_stale(self, pending: PendingMove) -> bool:
        return (
            pending is not self._pending
            or pending.generation != self.generation
            or pending.state is not self.state
        )

    def _run_automa(self, pending: PendingMove) -> None:
        if self._is_stale(pending):
            _log.debug("Discarding stale automated move (generation %d)", pending.generation)
            return
        self._pending = None

        if not self.is_automa_turn:
            return

        decision = self.bot.select_move(self.state)
        _log.debug("Automated move: %d (%s)", decision.index, decision.explanation)
        self.place_mark(decision.index)
