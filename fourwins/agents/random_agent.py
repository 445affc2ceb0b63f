"""Random baseline agent."""

from __future__ import annotations

import random
from typing import Optional

from fourwins.agents.base import Agent, Decision
from fourwins.engine import Board, Cell, Connect4Config, legal_columns


class RandomAgent(Agent):
    def __init__(self, name: str, seed: Optional[int] = None) -> None:
        self.name = name
        self.rng = random.Random(seed)

    def select_move(self, cfg: Connect4Config, board: Board, player: Cell, opponent: Cell) -> Decision:
        legal = legal_columns(cfg, board)
        if not legal:
            return Decision(column=None)
        return Decision(column=self.rng.choice(legal))
