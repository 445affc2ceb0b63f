"""Abstract base class for Connect-4 agents."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Optional, Tuple

from fourwins.agents.search import SearchNode
from fourwins.engine import Board, Cell, Connect4Config


@dataclass(frozen=True)
class Decision:
    """
    An agent's recommendation for one turn.

    column is None when no legal column remains. trace lists the candidates
    considered at the root, for display only.
    """

    column: Optional[int]
    score: float = 0.0
    trace: Tuple[SearchNode, ...] = ()
    nodes: int = 0


class Agent(abc.ABC):
    name: str

    @abc.abstractmethod
    def select_move(self, cfg: Connect4Config, board: Board, player: Cell, opponent: Cell) -> Decision:
        raise NotImplementedError
