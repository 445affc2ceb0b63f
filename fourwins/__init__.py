"""Connect-4 package (board model + search agents + CLI)."""

from fourwins.agents import Decision
from fourwins.engine import (
    Board,
    Cell,
    Connect4Config,
    IllegalMoveError,
    Move,
    Outcome,
    Status,
    apply_move,
    evaluate_outcome,
    initial_board,
    legal_columns,
    lowest_open_row,
)
from fourwins.selector import Difficulty, select_move

__all__ = [
    "Board",
    "Cell",
    "Connect4Config",
    "Decision",
    "Difficulty",
    "IllegalMoveError",
    "Move",
    "Outcome",
    "Status",
    "apply_move",
    "evaluate_outcome",
    "initial_board",
    "legal_columns",
    "lowest_open_row",
    "select_move",
]
