"""
Game State - The owned, explicit session state of a tic-tac-toe game.

Design principles:
- Immutable-friendly: all mutations return new state
- Board is a plain tuple of 9 cells, row-major
- Outcome is derived from the board, never set independently
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

BOARD_SIZE = 9


class Mark(str, Enum):
    """The two symbols a player places. X always moves first."""
    X = "X"
    O = "O"

    @property
    def opponent(self) -> Mark:
        return Mark.O if self is Mark.X else Mark.X


Cell = Mark | None
Board = tuple[Cell, ...]


class GamePhase(Enum):
    """High-level game phases."""
    PLAYING = "playing"
    OVER = "over"


class OutcomeKind(Enum):
    NONE = "none"
    WINNER = "winner"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    Terminal status of a board.

    `line` holds the winning index triple and is empty unless
    kind is WINNER.
    """
    kind: OutcomeKind = OutcomeKind.NONE
    winner: Mark | None = None
    line: tuple[int, ...] = ()

    @classmethod
    def none(cls) -> Outcome:
        return cls()

    @classmethod
    def draw(cls) -> Outcome:
        return cls(kind=OutcomeKind.DRAW)

    @classmethod
    def win(cls, mark: Mark, line: tuple[int, ...]) -> Outcome:
        return cls(kind=OutcomeKind.WINNER, winner=mark, line=tuple(line))

    @property
    def is_terminal(self) -> bool:
        return self.kind != OutcomeKind.NONE

    def __str__(self) -> str:
        if self.kind == OutcomeKind.WINNER:
            return f"winner {self.winner.value} {','.join(str(i) for i in self.line)}"
        return self.kind.value


def empty_board() -> Board:
    """Return a board with all 9 cells empty."""
    return (None,) * BOARD_SIZE


_EMPTY_CHARS = {"_", ".", "-"}
_SEPARATORS = {",", "|", "/", " ", "\n", "\t"}


def parse_board(text: str) -> Board:
    """
    Parse a board from text such as "XX_______" or "X|O|_ / _|X|_ / ...".

    X and O (case-insensitive) are marks; "_", "." and "-" are
    empty cells. Commas, pipes, slashes and whitespace are ignored.

    Raises:
        ValueError: unknown characters or not exactly 9 cells
    """
    cells: list[Cell] = []
    for ch in text:
        if ch in _SEPARATORS:
            continue
        upper = ch.upper()
        if upper in ("X", "O"):
            cells.append(Mark(upper))
        elif ch in _EMPTY_CHARS:
            cells.append(None)
        else:
            raise ValueError(f"Invalid board character: {ch!r}")

    if len(cells) != BOARD_SIZE:
        raise ValueError(f"Board must have {BOARD_SIZE} cells, got {len(cells)}")
    return tuple(cells)


def format_board(board: Board, empty: str = ".") -> str:
    """Render a board as three rows of text."""
    symbols = [cell.value if cell else empty for cell in board]
    rows = [" ".join(symbols[r * 3:r * 3 + 3]) for r in range(3)]
    return "\n".join(rows)


@dataclass(frozen=True)
class GameState:
    """
    Complete game state at a point in time.

    All state changes go through the reducer. A state is terminal
    once phase is OVER; only a reset leaves that state.
    """
    board: Board = field(default_factory=empty_board)
    turn_owner: Mark = Mark.X
    outcome: Outcome = field(default_factory=Outcome.none)
    phase: GamePhase = GamePhase.PLAYING

    # Indices in the order they were played
    move_history: tuple[int, ...] = ()

    @classmethod
    def new(cls) -> GameState:
        """Initial session: empty board, X to move."""
        return cls()

    @property
    def is_over(self) -> bool:
        return self.phase == GamePhase.OVER

    @property
    def winner(self) -> Mark | None:
        return self.outcome.winner

    @property
    def winning_line(self) -> tuple[int, ...]:
        return self.outcome.line

    def count(self, mark: Mark) -> int:
        return sum(1 for cell in self.board if cell is mark)

    def _copy_with(self, **kwargs) -> GameState:
        """Create a copy with some fields replaced."""
        return GameState(
            board=kwargs.get("board", self.board),
            turn_owner=kwargs.get("turn_owner", self.turn_owner),
            outcome=kwargs.get("outcome", self.outcome),
            phase=kwargs.get("phase", self.phase),
            move_history=kwargs.get("move_history", self.move_history),
        )
