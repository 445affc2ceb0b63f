"""Difficulty tiers and the single entry point used once per AI turn."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Optional, Union

from fourwins.agents import Agent, AlphaBetaAgent, Decision, MinimaxAgent, RandomAgent
from fourwins.engine import Board, Cell, Connect4Config

LOGGER = logging.getLogger(__name__)


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value: Union[str, "Difficulty"]) -> "Difficulty":
        if isinstance(value, Difficulty):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ", ".join(d.value for d in cls)
            raise ValueError(f"unknown difficulty {value!r} (expected one of: {choices})") from None


DEFAULT_DEPTHS: Dict[Difficulty, int] = {
    Difficulty.MEDIUM: 3,
    Difficulty.HARD: 5,
}


def build_agent(
    difficulty: Union[str, Difficulty],
    *,
    depth: Optional[int] = None,
    seed: Optional[int] = None,
) -> Agent:
    """Create the strategy for a tier: random, plain minimax or alpha-beta."""
    difficulty = Difficulty.parse(difficulty)
    if difficulty is Difficulty.EASY:
        return RandomAgent("Random", seed=seed)

    max_depth = depth if depth is not None else DEFAULT_DEPTHS[difficulty]
    if difficulty is Difficulty.MEDIUM:
        return MinimaxAgent("Minimax", max_depth=max_depth)
    if difficulty is Difficulty.HARD:
        return AlphaBetaAgent("AlphaBeta", max_depth=max_depth)

    raise ValueError(f"unsupported difficulty: {difficulty}")


def select_move(
    cfg: Connect4Config,
    board: Board,
    ai_player: Cell,
    human_player: Cell,
    difficulty: Union[str, Difficulty],
    *,
    depth: Optional[int] = None,
    seed: Optional[int] = None,
) -> Decision:
    """
    Pick a column for `ai_player`.

    Decision.column is None when the board has no legal column left; callers
    treat that as the end of the game, not as an error.
    """

    agent = build_agent(difficulty, depth=depth, seed=seed)
    decision = agent.select_move(cfg, board, ai_player, human_player)
    LOGGER.debug("%s chose column %s (score=%s)", agent.name, decision.column, decision.score)
    return decision
