"""Play difficulty tiers against each other and tally the results."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

from tqdm import trange

from fourwins.agents import Agent
from fourwins.engine import (
    DRAW,
    Cell,
    Connect4Config,
    Move,
    Outcome,
    apply_move,
    evaluate_outcome,
    initial_board,
    lowest_open_row,
)
from fourwins.selector import Difficulty, build_agent

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchResult:
    outcome: Outcome
    moves: Tuple[Move, ...]

    @property
    def winner(self) -> Optional[Cell]:
        return self.outcome.winner


@dataclass
class ArenaResult:
    red: str
    yellow: str
    red_wins: int = 0
    yellow_wins: int = 0
    draws: int = 0

    @property
    def games(self) -> int:
        return self.red_wins + self.yellow_wins + self.draws

    def record(self, result: MatchResult) -> None:
        if result.winner is Cell.RED:
            self.red_wins += 1
        elif result.winner is Cell.YELLOW:
            self.yellow_wins += 1
        else:
            self.draws += 1

    def summary(self) -> str:
        return (
            f"{self.red} (R) vs {self.yellow} (Y) over {self.games} games: "
            f"R wins={self.red_wins} Y wins={self.yellow_wins} draws={self.draws}"
        )


def play_match(cfg: Connect4Config, red: Agent, yellow: Agent, *, first: Cell = Cell.RED) -> MatchResult:
    """Play one game to the end; `first` chooses which colour opens."""

    board = initial_board(cfg)
    agents = {Cell.RED: red, Cell.YELLOW: yellow}
    player = first
    moves: Tuple[Move, ...] = ()

    while True:
        outcome = evaluate_outcome(cfg, board)
        if outcome.is_terminal:
            return MatchResult(outcome=outcome, moves=moves)

        decision = agents[player].select_move(cfg, board, player, player.opponent())
        if decision.column is None:
            return MatchResult(outcome=DRAW, moves=moves)

        row = lowest_open_row(cfg, board, decision.column)
        board = apply_move(cfg, board, decision.column, player)
        moves = moves + (Move(ply=len(moves), player=player, row=row, col=decision.column),)
        player = player.opponent()


def run_arena(
    cfg: Connect4Config,
    red: Union[str, Difficulty],
    yellow: Union[str, Difficulty],
    games: int,
    *,
    depth: Optional[int] = None,
    seed: Optional[int] = None,
    progress: bool = True,
) -> ArenaResult:
    """
    Play `games` games between two tiers.

    The opening colour alternates every game to reduce first-player bias.
    Results are reported per colour: `red` always plays RED.
    """

    red = Difficulty.parse(red)
    yellow = Difficulty.parse(yellow)
    red_agent = build_agent(red, depth=depth, seed=seed)
    yellow_agent = build_agent(yellow, depth=depth, seed=None if seed is None else seed + 1)
    result = ArenaResult(red=red.value, yellow=yellow.value)

    for g in trange(games, desc=f"{red.value} vs {yellow.value}", disable=not progress, leave=False):
        first = Cell.RED if g % 2 == 0 else Cell.YELLOW
        match = play_match(cfg, red_agent, yellow_agent, first=first)
        result.record(match)
        LOGGER.debug(
            "Game %d: first=%s outcome=%s winner=%s plies=%d",
            g,
            first.name,
            match.outcome.status.value,
            match.winner.name if match.winner else "-",
            len(match.moves),
        )

    LOGGER.info("%s", result.summary())
    return result


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Pit two Connect-4 difficulty tiers against each other")
    choices = [d.value for d in Difficulty]
    parser.add_argument("--red", choices=choices, default=Difficulty.HARD.value, help="tier playing RED")
    parser.add_argument("--yellow", choices=choices, default=Difficulty.EASY.value, help="tier playing YELLOW")
    parser.add_argument("--games", type=int, default=20, help="number of games")
    parser.add_argument("--depth", type=int, default=None, help="search depth override for both sides")
    parser.add_argument("--seed", type=int, default=None, help="base random seed")
    parser.add_argument("--no-progress", action="store_true", help="disable the progress bar")
    parser.add_argument("--log-level", type=str, default="INFO", help="Python logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    result = run_arena(
        Connect4Config(),
        Difficulty.parse(args.red),
        Difficulty.parse(args.yellow),
        args.games,
        depth=args.depth,
        seed=args.seed,
        progress=not args.no_progress,
    )
    print(result.summary())


if __name__ == "__main__":
    main()
