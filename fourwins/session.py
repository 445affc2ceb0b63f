"""Human-vs-AI game session: whose turn it is, move history and the result."""

from __future__ import annotations

import logging
from typing import Optional, Tuple, Union

from fourwins.agents import Agent, Decision
from fourwins.engine import (
    DRAW,
    ONGOING,
    Board,
    Cell,
    Connect4Config,
    IllegalMoveError,
    Move,
    Outcome,
    apply_move,
    evaluate_outcome,
    initial_board,
    legal_columns,
    lowest_open_row,
)
from fourwins.selector import Difficulty, build_agent

LOGGER = logging.getLogger(__name__)


class SessionError(RuntimeError):
    """Base class for turn-protocol violations."""


class GameOverError(SessionError):
    pass


class NotYourTurnError(SessionError):
    pass


class GameSession:
    """
    One game between a human and the AI.

    The human always moves first. After every move the board is checked for a
    win or a draw; once the game is over no further moves are accepted until
    reset() is called.
    """

    def __init__(
        self,
        cfg: Optional[Connect4Config] = None,
        difficulty: Union[str, Difficulty] = Difficulty.EASY,
        *,
        human: Cell = Cell.RED,
        depth: Optional[int] = None,
        seed: Optional[int] = None,
    ) -> None:
        self.cfg = cfg or Connect4Config()
        self.cfg.validate()
        self.human = human
        self.ai = human.opponent()
        self.depth = depth
        self.seed = seed
        self.difficulty = Difficulty.parse(difficulty)
        self._agent: Agent = build_agent(self.difficulty, depth=depth, seed=seed)
        self.reset()

    def reset(self) -> None:
        self.board: Board = initial_board(self.cfg)
        self.current_player: Cell = self.human
        self.outcome: Outcome = ONGOING
        self.history: Tuple[Move, ...] = ()
        self.last_decision: Optional[Decision] = None
        LOGGER.info("New game: human=%s ai=%s difficulty=%s", self.human.name, self.ai.name, self.difficulty.value)

    @property
    def is_over(self) -> bool:
        return self.outcome.is_terminal

    @property
    def is_human_turn(self) -> bool:
        return not self.is_over and self.current_player is self.human

    def set_difficulty(self, difficulty: Union[str, Difficulty]) -> None:
        """Switch tier; only allowed while waiting for the human."""
        self._require_turn(self.human)
        self.difficulty = Difficulty.parse(difficulty)
        self._agent = build_agent(self.difficulty, depth=self.depth, seed=self.seed)
        LOGGER.info("Difficulty set to %s", self.difficulty.value)

    def play_human(self, col: int) -> Move:
        self._require_turn(self.human)
        if col not in legal_columns(self.cfg, self.board):
            raise IllegalMoveError(f"column {col + 1} is not playable")
        return self._play(col)

    def play_ai(self) -> Optional[Move]:
        """
        Let the AI move. Returns None if it had no column to play, in which
        case the game is recorded as a draw.
        """
        self._require_turn(self.ai)
        decision = self._agent.select_move(self.cfg, self.board, self.ai, self.human)
        self.last_decision = decision
        if decision.column is None:
            self.outcome = DRAW
            LOGGER.info("AI has no legal move; game drawn")
            return None
        return self._play(decision.column)

    def _require_turn(self, player: Cell) -> None:
        if self.is_over:
            raise GameOverError("game is over; reset to play again")
        if self.current_player is not player:
            raise NotYourTurnError(f"it is {self.current_player.name}'s turn")

    def _play(self, col: int) -> Move:
        player = self.current_player
        row = lowest_open_row(self.cfg, self.board, col)
        self.board = apply_move(self.cfg, self.board, col, player)
        move = Move(ply=len(self.history), player=player, row=row, col=col)
        self.history = self.history + (move,)

        self.outcome = evaluate_outcome(self.cfg, self.board)
        if self.outcome.is_terminal:
            LOGGER.info(
                "Game over after %d plies: %s %s",
                len(self.history),
                self.outcome.status.value,
                self.outcome.winner.name if self.outcome.winner else "",
            )
        else:
            self.current_player = player.opponent()
        return move
