"""Plain depth-limited minimax agent (no pruning)."""

from __future__ import annotations

import logging

from fourwins.agents.base import Agent, Decision
from fourwins.agents.search import SearchResult, Turn, minimax
from fourwins.engine import Board, Cell, Connect4Config, legal_columns

LOGGER = logging.getLogger(__name__)


class MinimaxAgent(Agent):
    """
    Searches every line of play up to `max_depth` plies.

    The root player maximizes and the opponent minimizes; frontier positions
    are scored with the window heuristic. Ties keep the lowest column.
    """

    def __init__(self, name: str, *, max_depth: int = 3, debug_top_k: int = 3) -> None:
        if max_depth < 1:
            raise ValueError("max_depth must be >= 1")
        self.name = name
        self.max_depth = max_depth
        self.debug_top_k = max(1, debug_top_k)

    def select_move(self, cfg: Connect4Config, board: Board, player: Cell, opponent: Cell) -> Decision:
        if not legal_columns(cfg, board):
            return Decision(column=None)

        result = self._search(cfg, board, player, opponent)
        self._log_result(result)
        return Decision(column=result.column, score=result.score, trace=result.trace, nodes=result.nodes)

    def _search(self, cfg: Connect4Config, board: Board, player: Cell, opponent: Cell) -> SearchResult:
        return minimax(cfg, board, self.max_depth, Turn.MAXIMIZING, player, opponent)

    def _log_result(self, result: SearchResult) -> None:
        if not LOGGER.isEnabledFor(logging.DEBUG):
            return
        LOGGER.debug(
            "%s selected col %s score=%s depth=%d nodes=%d",
            self.name,
            result.column,
            result.score,
            self.max_depth,
            result.nodes,
        )
        ranked = sorted(result.trace, key=lambda node: node.score, reverse=True)
        for idx, node in enumerate(ranked[: self.debug_top_k], start=1):
            LOGGER.debug("Candidate #%d col=%d score=%s", idx, node.column, node.score)
