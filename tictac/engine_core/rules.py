"""
Rules - Terminal detection and legal move generation.

Used by:
1. The reducer, to recompute the outcome after every placement
2. Bots, to enumerate and probe candidate moves
3. The session view, to report the winning line

All functions are pure and never raise.
"""

from __future__ import annotations

from .state import Board, BOARD_SIZE, Outcome

# Rows, then columns, then both diagonals.
LINES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


def evaluate(board: Board) -> Outcome:
    """
    Determine the outcome of a board.

    Returns the first line (in LINES order) held entirely by one mark.
    On a board built by alternating turns at most one mark can hold a
    line, so the scan order never changes the winner.
    """
    for a, b, c in LINES:
        mark = board[a]
        if mark is not None and mark == board[b] and mark == board[c]:
            return Outcome.win(mark, (a, b, c))

    if all(cell is not None for cell in board):
        return Outcome.draw()
    return Outcome.none()


def legal_moves(board: Board) -> list[int]:
    """Indices of empty cells, ascending."""
    return [i for i, cell in enumerate(board) if cell is None]


def occupied_count(board: Board) -> int:
    return sum(1 for cell in board if cell is not None)


def is_valid_index(index: object) -> bool:
    """Check an index addresses a cell (bools are rejected)."""
    return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < BOARD_SIZE
