"""
Session Module - Manages the ephemeral game session.

A session represents one running game board:
- Holds the current game state
- Accepts human input and runs the automated player's turn
- Resets on demand or when the mode changes

Sessions are EPHEMERAL:
- No persistence
- State lives only as long as the GameLoop object
"""

from .timer import Scheduler, TimerHandle, AsyncioScheduler, ImmediateScheduler
from .game_loop import GameLoop, GameMode, PendingMove
from .schemas import SessionView, SessionStatus, player_label

__all__ = [
    "Scheduler",
    "TimerHandle",
    "AsyncioScheduler",
    "ImmediateScheduler",
    "GameLoop",
    "GameMode",
    "PendingMove",
    "SessionView",
    "SessionStatus",
    "player_label",
]
