"""
Heuristic Bot - The automated opponent.

A fixed priority list, first match wins:
1. Win now
2. Block the opponent's win
3. Take the center
4. Take the lowest free corner
5. Take the lowest free cell

The bot does NOT:
- Search the game tree
- Use randomness
- Play optimally (a side-entry opening can beat it)
"""

from __future__ import annotations
from dataclasses import dataclass
import logging

from .policy import BotPolicy, BotDecision, MoveRule
from ..engine_core.state import Board, GameState, Mark, OutcomeKind
from ..engine_core.rules import evaluate, legal_moves

_log = logging.getLogger(__name__)

CENTER = 4
CORNERS = (0, 2, 6, 8)


def winning_move(board: Board, mark: Mark) -> int | None:
    """First legal move (ascending) that completes a line for mark."""
    for index in legal_moves(board):
        probe = board[:index] + (mark,) + board[index + 1:]
        outcome = evaluate(probe)
        if outcome.kind == OutcomeKind.WINNER and outcome.winner == mark:
            return index
    return None


def explain_move(
    board: Board,
    self_mark: Mark,
    opponent_mark: Mark,
) -> tuple[int | None, MoveRule | None]:
    """Select a move and report which rule chose it."""
    index = winning_move(board, self_mark)
    if index is not None:
        return index, MoveRule.WIN

    index = winning_move(board, opponent_mark)
    if index is not None:
        return index, MoveRule.BLOCK

    if board[CENTER] is None:
        return CENTER, MoveRule.CENTER

    for corner in CORNERS:
        if board[corner] is None:
            return corner, MoveRule.CORNER

    available = legal_moves(board)
    if available:
        return available[0], MoveRule.ANY
    return None, None


def select_move(board: Board, self_mark: Mark, opponent_mark: Mark) -> int | None:
    """
    Choose a cell for self_mark.

    Returns None only when the board is full; callers should check
    for a terminal state first.
    """
    index, _ = explain_move(board, self_mark, opponent_mark)
    return index


_EXPLANATIONS = {
    MoveRule.WIN: "Completes a line",
    MoveRule.BLOCK: "Blocks the opponent's line",
    MoveRule.CENTER: "Takes the center",
    MoveRule.CORNER: "Takes a free corner",
    MoveRule.ANY: "Takes the first free cell",
}


@dataclass
class HeuristicBot(BotPolicy):
    """
    Automated player using the fixed priority heuristic.

    Usage:
        bot = HeuristicBot(mark=Mark.O)
        decision = bot.select_move(state)
        print(decision.index, decision.rule)
    """
    mark: Mark = Mark.O

    def select_move(self, state: GameState) -> BotDecision:
        if state.is_over:
            raise ValueError("Game is over - no moves to select")
        if state.turn_owner != self.mark:
            raise ValueError(f"Not {self.mark.value}'s turn")

        index, rule = explain_move(state.board, self.mark, self.mark.opponent)
        if index is None:
            raise ValueError("No legal moves available")

        decision = BotDecision(
            index=index,
            mark=self.mark,
            rule=rule,
            explanation=_EXPLANATIONS[rule],
        )
        _log.debug("%s chose %d (%s)", self.get_name(), index, rule.value)
        return decision
