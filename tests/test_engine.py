import random
import unittest

import numpy as np

from fourwins.engine import (
    Board,
    Cell,
    Connect4Config,
    IllegalMoveError,
    InvalidBoardError,
    Status,
    apply_move,
    board_from_rows,
    evaluate_outcome,
    initial_board,
    is_full,
    legal_columns,
    lowest_open_row,
    window_index,
)

# Full 6x7 board with no four-in-a-row anywhere.
DRAWN_ROWS = [
    "RYRYRYR",
    "RYRYRYR",
    "YRYRYRY",
    "YRYRYRY",
    "RYRYRYR",
    "RYRYRYR",
]


def random_board(cfg: Connect4Config, rng: random.Random, plies: int) -> Board:
    board = initial_board(cfg)
    player = Cell.RED
    for _ in range(plies):
        legal = legal_columns(cfg, board)
        if not legal or evaluate_outcome(cfg, board).is_terminal:
            break
        board = apply_move(cfg, board, rng.choice(legal), player)
        player = player.opponent()
    return board


class TestConfig(unittest.TestCase):
    def test_defaults(self):
        cfg = Connect4Config()
        self.assertEqual((cfg.height, cfg.width, cfg.k), (6, 7, 4))
        self.assertEqual(cfg.center_col, 3)

    def test_validate_rejects_bad_dimensions(self):
        for bad in (Connect4Config(width=0), Connect4Config(k=1), Connect4Config(width=3, height=3, k=4)):
            with self.assertRaises(ValueError):
                bad.validate()

    def test_window_count(self):
        idx, kinds = window_index(Connect4Config())
        # 24 horizontal + 21 vertical + 12 + 12 diagonals
        self.assertEqual(idx.shape, (69, 4))
        self.assertEqual(kinds.count("horizontal"), 24)
        self.assertEqual(kinds.count("vertical"), 21)
        self.assertEqual(kinds.count("diagonal-up"), 12)
        self.assertEqual(kinds.count("diagonal-down"), 12)


class TestCell(unittest.TestCase):
    def test_opponent(self):
        self.assertIs(Cell.RED.opponent(), Cell.YELLOW)
        self.assertIs(Cell.YELLOW.opponent(), Cell.RED)
        with self.assertRaises(ValueError):
            Cell.EMPTY.opponent()


class TestBoardConstruction(unittest.TestCase):
    def setUp(self):
        self.cfg = Connect4Config()

    def test_initial_board_is_empty(self):
        board = initial_board(self.cfg)
        self.assertEqual(board.grid.shape, (6, 7))
        self.assertTrue(np.all(board.grid == Cell.EMPTY))
        self.assertFalse(board.grid.flags.writeable)

    def test_from_rows_symbols_and_values_agree(self):
        a = board_from_rows(self.cfg, ["......."] * 5 + ["RY....."])
        b = board_from_rows(self.cfg, [[0] * 7] * 5 + [[1, 2, 0, 0, 0, 0, 0]])
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertIs(a.cell(5, 0), Cell.RED)
        self.assertIs(a.cell(5, 1), Cell.YELLOW)

    def test_from_rows_rejects_floating_piece(self):
        rows = ["......."] * 4 + ["R......", "......."]
        with self.assertRaises(InvalidBoardError):
            board_from_rows(self.cfg, rows)

    def test_from_rows_rejects_bad_shape_and_symbols(self):
        with self.assertRaises(InvalidBoardError):
            board_from_rows(self.cfg, ["......."] * 5)
        with self.assertRaises(InvalidBoardError):
            board_from_rows(self.cfg, ["......"] * 6)
        with self.assertRaises(InvalidBoardError):
            board_from_rows(self.cfg, ["......."] * 5 + ["X......"])
        with self.assertRaises(InvalidBoardError):
            board_from_rows(self.cfg, [[0] * 7] * 5 + [[3, 0, 0, 0, 0, 0, 0]])


class TestMoves(unittest.TestCase):
    def setUp(self):
        self.cfg = Connect4Config()

    def test_legal_columns_and_lowest_row_on_empty_board(self):
        board = initial_board(self.cfg)
        self.assertEqual(legal_columns(self.cfg, board), list(range(7)))
        for c in range(7):
            self.assertEqual(lowest_open_row(self.cfg, board, c), 5)

    def test_full_column_is_not_legal_and_has_no_open_row(self):
        board = initial_board(self.cfg)
        player = Cell.RED
        for _ in range(6):
            board = apply_move(self.cfg, board, 2, player)
            player = player.opponent()
        self.assertNotIn(2, legal_columns(self.cfg, board))
        self.assertIsNone(lowest_open_row(self.cfg, board, 2))

    def test_out_of_range_column_has_no_open_row(self):
        board = initial_board(self.cfg)
        self.assertIsNone(lowest_open_row(self.cfg, board, -1))
        self.assertIsNone(lowest_open_row(self.cfg, board, 7))

    def test_illegal_columns_never_have_open_row(self):
        """Scenario: random positions; every column outside legal_columns reports no open row."""
        rng = random.Random(7)
        for plies in range(0, 42, 3):
            board = random_board(self.cfg, rng, plies)
            legal = set(legal_columns(self.cfg, board))
            for c in range(self.cfg.width):
                if c not in legal:
                    self.assertIsNone(lowest_open_row(self.cfg, board, c))
                else:
                    self.assertIsNotNone(lowest_open_row(self.cfg, board, c))

    def test_apply_move_changes_exactly_the_lowest_empty_cell(self):
        rng = random.Random(11)
        for plies in range(0, 30, 2):
            board = random_board(self.cfg, rng, plies)
            for c in legal_columns(self.cfg, board):
                before = board.grid.copy()
                row = lowest_open_row(self.cfg, board, c)
                after = apply_move(self.cfg, board, c, Cell.YELLOW)

                changed = np.argwhere(after.grid != before)
                self.assertEqual(changed.tolist(), [[row, c]])
                self.assertIs(after.cell(row, c), Cell.YELLOW)
                np.testing.assert_array_equal(board.grid, before)

    def test_apply_move_on_full_column_raises_and_leaves_board(self):
        board = board_from_rows(self.cfg, DRAWN_ROWS)
        snapshot = board.grid.copy()
        with self.assertRaises(IllegalMoveError):
            apply_move(self.cfg, board, 0, Cell.RED)
        np.testing.assert_array_equal(board.grid, snapshot)

    def test_apply_move_rejects_out_of_range_and_empty_player(self):
        board = initial_board(self.cfg)
        with self.assertRaises(IllegalMoveError):
            apply_move(self.cfg, board, 7, Cell.RED)
        with self.assertRaises(IllegalMoveError):
            apply_move(self.cfg, board, -1, Cell.RED)
        with self.assertRaises(ValueError):
            apply_move(self.cfg, board, 0, Cell.EMPTY)

    def test_board_grid_is_read_only(self):
        board = apply_move(self.cfg, initial_board(self.cfg), 3, Cell.RED)
        with self.assertRaises(ValueError):
            board.grid[0, 0] = Cell.RED


class TestOutcome(unittest.TestCase):
    def setUp(self):
        self.cfg = Connect4Config()

    def test_empty_board_is_ongoing(self):
        outcome = evaluate_outcome(self.cfg, initial_board(self.cfg))
        self.assertIs(outcome.status, Status.ONGOING)
        self.assertFalse(outcome.is_terminal)
        self.assertIsNone(outcome.winner)

    def test_bottom_row_four_is_a_win(self):
        """Scenario: RED on row 5, columns 0-3 of an otherwise empty board."""
        board = initial_board(self.cfg)
        for c in range(4):
            board = apply_move(self.cfg, board, c, Cell.RED)
        outcome = evaluate_outcome(self.cfg, board)
        self.assertIs(outcome.status, Status.WIN)
        self.assertIs(outcome.winner, Cell.RED)
        self.assertEqual(outcome.reason, "horizontal")

    def test_vertical_win_after_alternating_play(self):
        """
        Scenario: RED plays column 3 and YELLOW column 4, three times each.
        RED's fourth drop in column 3 lands on row 2 and completes a column.
        """
        board = initial_board(self.cfg)
        for _ in range(3):
            board = apply_move(self.cfg, board, 3, Cell.RED)
            self.assertIs(evaluate_outcome(self.cfg, board).status, Status.ONGOING)
            board = apply_move(self.cfg, board, 4, Cell.YELLOW)
            self.assertIs(evaluate_outcome(self.cfg, board).status, Status.ONGOING)

        self.assertEqual(lowest_open_row(self.cfg, board, 3), 2)
        board = apply_move(self.cfg, board, 3, Cell.RED)
        outcome = evaluate_outcome(self.cfg, board)
        self.assertIs(outcome.winner, Cell.RED)
        self.assertEqual(outcome.reason, "vertical")

    def test_diagonal_up_win(self):
        board = board_from_rows(
            self.cfg,
            [
                ".......",
                ".......",
                "...Y...",
                "..YR...",
                ".YRR...",
                "YRRY...",
            ],
        )
        outcome = evaluate_outcome(self.cfg, board)
        self.assertIs(outcome.winner, Cell.YELLOW)
        self.assertEqual(outcome.reason, "diagonal-up")

    def test_diagonal_down_win(self):
        board = board_from_rows(
            self.cfg,
            [
                ".......",
                ".......",
                "...R...",
                "...YR..",
                "...YYR.",
                "...YYRR",
            ],
        )
        outcome = evaluate_outcome(self.cfg, board)
        self.assertIs(outcome.winner, Cell.RED)
        self.assertEqual(outcome.reason, "diagonal-down")

    def test_full_board_without_line_is_a_draw(self):
        board = board_from_rows(self.cfg, DRAWN_ROWS)
        self.assertTrue(is_full(self.cfg, board))
        self.assertEqual(legal_columns(self.cfg, board), [])
        outcome = evaluate_outcome(self.cfg, board)
        self.assertIs(outcome.status, Status.DRAW)
        self.assertIsNone(outcome.winner)

    def test_two_winners_resolve_by_scan_order(self):
        """
        Scenario: unreachable board with a RED row and a YELLOW column.
        Horizontal windows are scanned first, so RED is reported.
        """
        board = board_from_rows(
            self.cfg,
            [
                ".......",
                ".......",
                "......Y",
                "......Y",
                "......Y",
                "RRRR..Y",
            ],
        )
        for _ in range(3):
            outcome = evaluate_outcome(self.cfg, board)
            self.assertIs(outcome.winner, Cell.RED)
            self.assertEqual(outcome.reason, "horizontal")

    def test_evaluate_outcome_is_idempotent(self):
        rng = random.Random(3)
        for plies in range(0, 42, 5):
            board = random_board(self.cfg, rng, plies)
            self.assertEqual(evaluate_outcome(self.cfg, board), evaluate_outcome(self.cfg, board))

    def test_smaller_board_with_k3(self):
        cfg = Connect4Config(width=4, height=4, k=3)
        board = initial_board(cfg)
        for c in (0, 1, 2):
            board = apply_move(cfg, board, c, Cell.YELLOW)
        self.assertIs(evaluate_outcome(cfg, board).winner, Cell.YELLOW)


if __name__ == "__main__":
    unittest.main()
