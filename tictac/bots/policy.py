"""
Bot Policy - Interface for bot decision-making.

A BotPolicy takes a game state and returns a decision.
Decisions include:
- Which cell to mark
- Which rule produced the choice (for UI/debugging)
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..engine_core.state import GameState, Mark


class MoveRule(Enum):
    """Heuristic rules, in priority order."""
    WIN = "win"
    BLOCK = "block"
    CENTER = "center"
    CORNER = "corner"
    ANY = "any"


@dataclass
class BotDecision:
    """
    A decision made by a bot.

    Contains:
    - The cell to mark
    - The mark being placed
    - The rule that selected the cell
    - Explanation (for UI/debugging)
    """
    index: int
    mark: Mark
    rule: MoveRule | None = None
    explanation: str = ""


class BotPolicy(ABC):
    """
    Abstract base class for bot policies.

    A policy defines how a bot selects moves. The automated
    player in a session is any BotPolicy.
    """

    @abstractmethod
    def select_move(self, state: GameState) -> BotDecision:
        """
        Select a move for the current state.

        Args:
            state: Current game state; must be playing and on the bot's turn

        Returns:
            BotDecision with the selected cell
        """
        pass

    def get_name(self) -> str:
        """Get the bot's name/identifier."""
        return self.__class__.__name__
