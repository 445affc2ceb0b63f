"""Connect-4 board model: grid state, gravity placement and outcome detection."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from functools import lru_cache
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np


class IllegalMoveError(ValueError):
    """Raised when a piece is dropped into a full or non-existent column."""


class InvalidBoardError(ValueError):
    """Raised when a board is built from malformed input."""


@dataclass(frozen=True)
class Connect4Config:
    width: int = 7
    height: int = 6
    k: int = 4

    def validate(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("width/height must be >= 1")
        if self.k < 2:
            raise ValueError("k must be >= 2")
        if self.k > max(self.width, self.height):
            raise ValueError("k must be <= max(width, height)")

    @property
    def center_col(self) -> int:
        return self.width // 2


class Cell(IntEnum):
    EMPTY = 0
    RED = 1
    YELLOW = 2

    def opponent(self) -> "Cell":
        if self is Cell.EMPTY:
            raise ValueError("EMPTY has no opponent")
        return Cell.YELLOW if self is Cell.RED else Cell.RED

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {Cell.EMPTY: ".", Cell.RED: "R", Cell.YELLOW: "Y"}
_FROM_SYMBOL = {v: k for k, v in _SYMBOLS.items()}


class Status(str, Enum):
    ONGOING = "ongoing"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    status: Status
    winner: Optional[Cell]
    reason: str

    @property
    def is_terminal(self) -> bool:
        return self.status is not Status.ONGOING


ONGOING = Outcome(Status.ONGOING, None, "in-progress")
DRAW = Outcome(Status.DRAW, None, "draw")


@dataclass(frozen=True)
class Move:
    ply: int
    player: Cell
    row: int
    col: int


@dataclass(frozen=True, eq=False)
class Board:
    """
    Immutable grid of cell values.

    grid has shape (height, width), dtype=int8, row 0 is the TOP row.
    The array is flagged read-only; every move produces a new Board.
    """

    grid: np.ndarray

    def __post_init__(self) -> None:
        self.grid.flags.writeable = False

    @property
    def height(self) -> int:
        return int(self.grid.shape[0])

    @property
    def width(self) -> int:
        return int(self.grid.shape[1])

    def cell(self, row: int, col: int) -> Cell:
        return Cell(int(self.grid[row, col]))

    def count(self, player: Cell) -> int:
        return int(np.count_nonzero(self.grid == player))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash((self.grid.shape, self.grid.tobytes()))

    def __repr__(self) -> str:
        rows = ["".join(Cell(int(v)).symbol for v in row) for row in self.grid]
        return f"Board({rows!r})"


def initial_board(cfg: Connect4Config) -> Board:
    cfg.validate()
    return Board(np.zeros((cfg.height, cfg.width), dtype=np.int8))


RowSpec = Union[str, Sequence[int]]


def board_from_rows(cfg: Connect4Config, rows: Sequence[RowSpec]) -> Board:
    """
    Build a board from rows listed top to bottom.

    A row is either a string of symbols (".", "R", "Y") or a sequence of
    cell values (0, 1, 2). The result must respect gravity.
    """

    cfg.validate()
    if len(rows) != cfg.height:
        raise InvalidBoardError(f"expected {cfg.height} rows, got {len(rows)}")

    grid = np.zeros((cfg.height, cfg.width), dtype=np.int8)
    for r, row in enumerate(rows):
        if len(row) != cfg.width:
            raise InvalidBoardError(f"row {r} has {len(row)} cells, expected {cfg.width}")
        for c, raw in enumerate(row):
            grid[r, c] = _parse_cell(raw, r, c)

    for c in range(cfg.width):
        column = grid[:, c]
        occupied = np.nonzero(column != Cell.EMPTY)[0]
        if occupied.size and np.any(column[occupied[0]:] == Cell.EMPTY):
            raise InvalidBoardError(f"column {c} has a floating piece")

    return Board(grid)


def _parse_cell(raw: Union[str, int], row: int, col: int) -> int:
    if isinstance(raw, str):
        cell = _FROM_SYMBOL.get(raw.upper())
        if cell is None:
            raise InvalidBoardError(f"unknown symbol {raw!r} at ({row}, {col})")
        return int(cell)
    try:
        return int(Cell(int(raw)))
    except ValueError:
        raise InvalidBoardError(f"unknown cell value {raw!r} at ({row}, {col})") from None


def legal_columns(cfg: Connect4Config, board: Board) -> List[int]:
    return np.nonzero(board.grid[0] == Cell.EMPTY)[0].tolist()


def lowest_open_row(cfg: Connect4Config, board: Board, col: int) -> Optional[int]:
    if col < 0 or col >= cfg.width:
        return None
    for r in range(cfg.height - 1, -1, -1):
        if board.grid[r, col] == Cell.EMPTY:
            return r
    return None


def is_full(cfg: Connect4Config, board: Board) -> bool:
    return bool(np.all(board.grid[0] != Cell.EMPTY))


def apply_move(cfg: Connect4Config, board: Board, col: int, player: Cell) -> Board:
    """
    Drop `player` into `col` and return the resulting board.

    The input board is never modified. A full or out-of-range column raises
    IllegalMoveError and leaves nothing changed.
    """

    if player is Cell.EMPTY:
        raise ValueError("player must be RED or YELLOW")
    if col < 0 or col >= cfg.width:
        raise IllegalMoveError(f"column {col} out of range")

    row = lowest_open_row(cfg, board, col)
    if row is None:
        raise IllegalMoveError(f"illegal move: column {col} is full")

    grid = board.grid.copy()
    grid[row, col] = player
    return Board(grid)


@lru_cache(maxsize=None)
def window_index(cfg: Connect4Config) -> Tuple[np.ndarray, Tuple[str, ...]]:
    """
    Flat indices of every k-window, plus the orientation of each window.

    Windows are listed in outcome precedence order:
      - horizontal, top row first, left to right
      - vertical, left column first, top to bottom
      - diagonal-up (bottom-left to top-right), bottom row first
      - diagonal-down (top-left to bottom-right), top row first
    """

    cfg.validate()
    h, w, k = cfg.height, cfg.width, cfg.k
    windows: List[List[int]] = []
    kinds: List[str] = []

    def add(cells: List[Tuple[int, int]], kind: str) -> None:
        windows.append([r * w + c for r, c in cells])
        kinds.append(kind)

    for r in range(h):
        for c in range(w - k + 1):
            add([(r, c + i) for i in range(k)], "horizontal")

    for c in range(w):
        for r in range(h - k + 1):
            add([(r + i, c) for i in range(k)], "vertical")

    for r in range(h - 1, k - 2, -1):
        for c in range(w - k + 1):
            add([(r - i, c + i) for i in range(k)], "diagonal-up")

    for r in range(h - k + 1):
        for c in range(w - k + 1):
            add([(r + i, c + i) for i in range(k)], "diagonal-down")

    idx = np.array(windows, dtype=np.intp).reshape(len(windows), k)
    idx.flags.writeable = False
    return idx, tuple(kinds)


def board_windows(cfg: Connect4Config, board: Board) -> np.ndarray:
    """Cell values of every k-window, shape (n_windows, k)."""
    idx, _ = window_index(cfg)
    return board.grid.ravel()[idx]


def evaluate_outcome(cfg: Connect4Config, board: Board) -> Outcome:
    """
    Return WIN for the first completed window in precedence order, else DRAW
    when the top row is full, else ONGOING.

    Two simultaneous winners can not arise from alternating play; if a
    hand-built board holds both, the earlier window in precedence order wins.
    """

    idx, kinds = window_index(cfg)
    windows = board_windows(cfg, board)
    first = windows[:, 0]
    complete = (first != Cell.EMPTY) & np.all(windows == first[:, None], axis=1)
    if complete.any():
        i = int(np.argmax(complete))
        return Outcome(Status.WIN, Cell(int(first[i])), kinds[i])
    if is_full(cfg, board):
        return DRAW
    return ONGOING
