"""
Pydantic Schemas for session display.

These models define what any display surface (console, UI) gets to
show about a running session:
- Board contents
- Whose turn it is, and whether that side is automated
- Terminal outcome text
- The winning line, for highlighting
"""

from __future__ import annotations
from enum import Enum
from typing import Optional, TYPE_CHECKING
from pydantic import BaseModel, Field

from ..engine_core.state import Mark, OutcomeKind
from .game_loop import GameMode

if TYPE_CHECKING:
    from .game_loop import GameLoop


# =============================================================================
# Enums
# =============================================================================

class SessionStatus(str, Enum):
    """Session status values."""
    PLAYING = "playing"
    WON = "won"
    DRAW = "draw"


# =============================================================================
# Helpers
# =============================================================================

def player_label(loop: GameLoop, mark: Mark) -> str:
    """Legend label for a mark."""
    return "Computer" if loop.is_automated(mark) else "Player"


def status_text(loop: GameLoop) -> str:
    state = loop.state
    if state.outcome.kind == OutcomeKind.DRAW:
        return "Draw game"
    if state.outcome.kind == OutcomeKind.WINNER:
        return f"Winner: {state.winner.value}"

    suffix = " (Computer)" if loop.is_automated(state.turn_owner) else ""
    return f"Turn: {state.turn_owner.value}{suffix}"


# =============================================================================
# Views
# =============================================================================

class SessionView(BaseModel):
    """Snapshot of a session for display."""
    mode: GameMode
    board: list[Optional[Mark]] = Field(..., min_length=9, max_length=9)
    turn_owner: Mark
    turn_owner_is_automated: bool = False
    status: SessionStatus = SessionStatus.PLAYING
    winner: Optional[Mark] = None
    winning_line: list[int] = Field(default_factory=list)
    status_text: str
    can_reset: bool = True
    move_count: int = Field(0, ge=0, le=9)
    automa_pending: bool = False

    @classmethod
    def from_loop(cls, loop: GameLoop) -> SessionView:
        state = loop.state
        if state.outcome.kind == OutcomeKind.WINNER:
            status = SessionStatus.WON
        elif state.outcome.kind == OutcomeKind.DRAW:
            status = SessionStatus.DRAW
        else:
            status = SessionStatus.PLAYING

        return cls(
            mode=loop.mode,
            board=list(state.board),
            turn_owner=state.turn_owner,
            turn_owner_is_automated=loop.is_automated(state.turn_owner),
            status=status,
            winner=state.winner,
            winning_line=list(state.winning_line),
            status_text=status_text(loop),
            move_count=len(state.move_history),
            automa_pending=loop.pending,
        )
