"""Static position score used at the search frontier."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from fourwins.engine import Board, Cell, Connect4Config, board_windows

FULL_WINDOW = 100
OPEN_THREE = 5
OPEN_TWO = 2
OPPONENT_OPEN_THREE = -4
CENTER_WEIGHT = 3


def score_position(cfg: Connect4Config, board: Board, player: Cell) -> int:
    """
    Heuristic evaluation of a non-terminal position from `player`'s side.

    Every k-cell window in all four orientations contributes:
      - k own marks                   -> +100
      - k-1 own marks, 1 empty        -> +5
      - k-2 own marks, 2 empty        -> +2
      - k-1 opponent marks, 1 empty   -> -4
    Windows holding both players match none of the buckets.

    Own marks in the centre column add +3 each.
    """

    opponent = player.opponent()
    k = cfg.k
    windows = board_windows(cfg, board)
    own = np.count_nonzero(windows == player, axis=1)
    opp = np.count_nonzero(windows == opponent, axis=1)
    empty = k - own - opp

    score = FULL_WINDOW * int(np.count_nonzero(own == k))
    score += OPEN_THREE * int(np.count_nonzero((own == k - 1) & (empty == 1)))
    score += OPEN_TWO * int(np.count_nonzero((own == k - 2) & (empty == 2)))
    score += OPPONENT_OPEN_THREE * int(np.count_nonzero((opp == k - 1) & (empty == 1)))

    center = board.grid[:, cfg.center_col]
    score += CENTER_WEIGHT * int(np.count_nonzero(center == player))
    return score


def score_window(window: Sequence[int], player: Cell) -> int:
    """Score a single window of cell values on its own."""

    cells = np.asarray(window)
    k = cells.size
    own = int(np.count_nonzero(cells == player))
    opp = int(np.count_nonzero(cells == player.opponent()))
    empty = k - own - opp

    score = 0
    if own == k:
        score += FULL_WINDOW
    elif own == k - 1 and empty == 1:
        score += OPEN_THREE
    elif own == k - 2 and empty == 2:
        score += OPEN_TWO

    if opp == k - 1 and empty == 1:
        score += OPPONENT_OPEN_THREE
    return score
