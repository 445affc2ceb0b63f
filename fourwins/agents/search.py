"""
Depth-limited game-tree search: plain minimax and minimax with alpha-beta pruning.

Both searches share the same leaf scoring and the same move order (legal
columns ascending), and only replace the running best on a strict
improvement. With a full (-inf, +inf) window at the root, alpha-beta
therefore returns the same root score and the same root column as plain
minimax; pruning only reduces the number of positions visited.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from fourwins.agents.heuristic import score_position
from fourwins.engine import Board, Cell, Connect4Config, Status, apply_move, evaluate_outcome, legal_columns

WIN_SCORE = 1_000_000


class Turn(Enum):
    MAXIMIZING = "max"
    MINIMIZING = "min"

    def flip(self) -> "Turn":
        return Turn.MINIMIZING if self is Turn.MAXIMIZING else Turn.MAXIMIZING


@dataclass(frozen=True)
class SearchNode:
    """A candidate column and the score of its subtree at a given remaining depth."""

    column: int
    score: float
    depth: int


@dataclass(frozen=True)
class SearchResult:
    column: Optional[int]
    score: float
    trace: Tuple[SearchNode, ...]
    nodes: int


def leaf_score(cfg: Connect4Config, board: Board, player: Cell, opponent: Cell) -> Optional[float]:
    """
    Score `board` if it is a leaf regardless of depth, else None.

    A board is a leaf once someone has won or no column is left.
    """

    outcome = evaluate_outcome(cfg, board)
    if outcome.status is Status.WIN:
        if outcome.winner is player:
            return WIN_SCORE
        if outcome.winner is opponent:
            return -WIN_SCORE
    if outcome.is_terminal:
        return score_position(cfg, board, player)
    return None


def _frontier(cfg: Connect4Config, board: Board, depth: int, player: Cell, opponent: Cell) -> Optional[SearchResult]:
    score = leaf_score(cfg, board, player, opponent)
    if score is None and depth <= 0:
        score = score_position(cfg, board, player)
    if score is None:
        return None
    return SearchResult(column=None, score=score, trace=(), nodes=1)


def minimax(
    cfg: Connect4Config,
    board: Board,
    depth: int,
    turn: Turn,
    player: Cell,
    opponent: Cell,
) -> SearchResult:
    """Exhaustive depth-limited minimax; `player` maximizes, `opponent` minimizes."""

    leaf = _frontier(cfg, board, depth, player, opponent)
    if leaf is not None:
        return leaf

    maximizing = turn is Turn.MAXIMIZING
    mover = player if maximizing else opponent
    best_col: Optional[int] = None
    best = -math.inf if maximizing else math.inf
    trace: List[SearchNode] = []
    nodes = 1

    for col in legal_columns(cfg, board):
        child = minimax(cfg, apply_move(cfg, board, col, mover), depth - 1, turn.flip(), player, opponent)
        nodes += child.nodes
        trace.append(SearchNode(col, child.score, depth))
        if (maximizing and child.score > best) or (not maximizing and child.score < best):
            best = child.score
            best_col = col

    return SearchResult(column=best_col, score=best, trace=tuple(trace), nodes=nodes)


def alphabeta(
    cfg: Connect4Config,
    board: Board,
    depth: int,
    turn: Turn,
    player: Cell,
    opponent: Cell,
    alpha: float = -math.inf,
    beta: float = math.inf,
) -> SearchResult:
    """
    Minimax with alpha-beta pruning.

    alpha is the best score the maximizer can already guarantee, beta the best
    the minimizer can. Once alpha >= beta the remaining siblings can not change
    the decision above this node and are skipped.
    """

    leaf = _frontier(cfg, board, depth, player, opponent)
    if leaf is not None:
        return leaf

    maximizing = turn is Turn.MAXIMIZING
    mover = player if maximizing else opponent
    best_col: Optional[int] = None
    best = -math.inf if maximizing else math.inf
    trace: List[SearchNode] = []
    nodes = 1

    for col in legal_columns(cfg, board):
        child = alphabeta(
            cfg,
            apply_move(cfg, board, col, mover),
            depth - 1,
            turn.flip(),
            player,
            opponent,
            alpha,
            beta,
        )
        nodes += child.nodes
        trace.append(SearchNode(col, child.score, depth))

        if maximizing:
            if child.score > best:
                best = child.score
                best_col = col
            alpha = max(alpha, best)
        else:
            if child.score < best:
                best = child.score
                best_col = col
            beta = min(beta, best)

        if alpha >= beta:
            break

    return SearchResult(column=best_col, score=best, trace=tuple(trace), nodes=nodes)
