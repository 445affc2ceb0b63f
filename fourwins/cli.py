"""CLI rendering and input helpers for playing Connect-4 against the AI."""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from fourwins.agents.search import SearchNode
from fourwins.engine import Board, Connect4Config, IllegalMoveError, Move, Status
from fourwins.selector import Difficulty
from fourwins.session import GameSession, SessionError

HELP = "Commands: <column 1-{width}> | difficulty <easy|medium|hard> | reset | help | quit"
QUIT = "quit"


def render_board(cfg: Connect4Config, board: Board) -> str:
    lines: List[str] = []
    for r in range(cfg.height):
        lines.append(" ".join(board.cell(r, c).symbol for c in range(cfg.width)))
    lines.append("-" * (2 * cfg.width - 1))
    lines.append(" ".join(str(c + 1) for c in range(cfg.width)))
    return "\n".join(lines)


def format_move_history(moves: Sequence[Move]) -> str:
    return " ".join(f"{m.ply}:{m.player.symbol}@{m.col + 1}" for m in moves)


def format_trace(trace: Sequence[SearchNode]) -> str:
    """One line per root candidate, columns shown 1-based."""
    if not trace:
        return "AI selected a random valid move."
    return "\n".join(
        f"At depth {node.depth}, considering column {node.column + 1}, score: {node.score}" for node in trace
    )


def _parse_column(raw: str, width: int) -> Optional[int]:
    raw = raw.strip()
    if not raw:
        return None
    try:
        col = int(raw)
    except ValueError:
        return None

    if 1 <= col <= width:
        return col - 1
    return None


def describe_result(session: GameSession) -> str:
    outcome = session.outcome
    if outcome.status is Status.DRAW:
        return "Result: draw"
    if outcome.winner is session.human:
        return f"Result: you win ({outcome.reason})"
    return f"Result: AI wins ({outcome.reason})"


def handle_command(session: GameSession, raw: str) -> Optional[str]:
    """
    Apply one line of user input to the session.

    Returns the message to show, or QUIT when the user asked to leave.
    """

    text = raw.strip().lower()
    width = session.cfg.width
    if text in {"quit", "exit", "q"}:
        return QUIT
    if text in {"help", "?"}:
        return HELP.format(width=width)
    if text == "reset":
        session.reset()
        return "New game."
    if text.startswith("difficulty"):
        parts = text.split()
        if len(parts) != 2:
            return "Usage: difficulty <easy|medium|hard>"
        try:
            session.set_difficulty(parts[1])
        except (ValueError, SessionError) as exc:
            return str(exc)
        return f"Difficulty: {session.difficulty.value}"

    col = _parse_column(text, width)
    if col is None:
        return f"Enter a column between 1 and {width}."
    try:
        move = session.play_human(col)
    except IllegalMoveError:
        return "Illegal move: column full."
    except SessionError as exc:
        return str(exc)
    return f"You -> column {move.col + 1}, row {move.row}"


def play_game(session: GameSession, *, show_thinking: bool = False) -> None:
    cfg = session.cfg
    print(HELP.format(width=cfg.width))

    while True:
        print(render_board(cfg, session.board))

        if session.is_over:
            print(describe_result(session))
            if session.history:
                print(f"Moves: {format_move_history(session.history)}")
            answer = input("Play again? [y/N] ").strip().lower()
            if answer not in {"y", "yes"}:
                return
            session.reset()
            continue

        if session.is_human_turn:
            message = handle_command(session, input(f"Your move ({session.human.symbol}): "))
            if message == QUIT:
                return
            print(message)
            print("")
            continue

        move = session.play_ai()
        if show_thinking and session.last_decision is not None:
            print(format_trace(session.last_decision.trace))
        if move is not None:
            print(f"AI ({move.player.symbol}) -> column {move.col + 1}, row {move.row}")
        print("")


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Play Connect-4 against the computer.")
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=Difficulty.EASY.value,
        help="easy = random, medium = minimax, hard = alpha-beta",
    )
    parser.add_argument("--depth", type=int, default=None, help="search depth override (plies)")
    parser.add_argument("--seed", type=int, default=None, help="random seed for the easy tier")
    parser.add_argument("--show-thinking", action="store_true", help="print the AI's candidate scores")
    parser.add_argument("--log-level", type=str, default="WARNING", help="Python logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))

    session = GameSession(Connect4Config(), args.difficulty, depth=args.depth, seed=args.seed)
    play_game(session, show_thinking=args.show_thinking)


if __name__ == "__main__":
    main()
