import random
import unittest
from unittest import mock

from checkers_engine.board import Board, init_board
from checkers_engine.piece import Piece
from checkers_engine.rules import all_moves_for_side
from checkers_engine.strategy_base import RandomStrategy, select_move
from checkers_engine.types import Color, Move, Position


def P(row: int, col: int) -> Position:
    return Position(row, col)


class TestSelectMove(unittest.TestCase):
    def test_no_moves_returns_none(self):
        board = Board.from_pieces({P(5, 2): Piece(Color.LIGHT)})
        self.assertIsNone(select_move(board, Color.DARK, random.Random(0)))

    def test_picks_a_legal_move(self):
        board = init_board()
        legal = all_moves_for_side(board, Color.DARK)
        for seed in range(20):
            self.assertIn(select_move(board, Color.DARK, random.Random(seed)), legal)

    def test_prefers_capture(self):
        board = Board.from_pieces(
            {
                P(5, 2): Piece(Color.LIGHT),
                P(4, 3): Piece(Color.DARK),
                P(5, 6): Piece(Color.LIGHT),
            }
        )
        for seed in range(20):
            move = select_move(board, Color.LIGHT, random.Random(seed))
            self.assertEqual(move, Move(P(5, 2), P(3, 4), captures=(P(4, 3),)))

    def test_renarrows_mixed_pool(self):
        capture = Move(P(5, 2), P(3, 4), captures=(P(4, 3),))
        simple = Move(P(5, 6), P(4, 5))
        with mock.patch(
            "checkers_engine.strategy_base.all_moves_for_side",
            return_value=[simple, capture, simple],
        ):
            for seed in range(20):
                self.assertEqual(
                    select_move(init_board(), Color.LIGHT, random.Random(seed)), capture
                )

    def test_seeded_determinism(self):
        board = init_board()
        first = [select_move(board, Color.LIGHT, random.Random(11)) for _ in range(5)]
        self.assertEqual(len(set(first)), 1)

    def test_uniform_pick_covers_pool(self):
        board = init_board()
        rng = random.Random(3)
        picks = {select_move(board, Color.LIGHT, rng) for _ in range(300)}
        self.assertEqual(picks, set(all_moves_for_side(board, Color.LIGHT)))


class TestRandomStrategy(unittest.TestCase):
    def test_seeded_strategies_agree(self):
        board = init_board()
        a = RandomStrategy(rng_seed=5)
        b = RandomStrategy(rng_seed=5)
        for _ in range(10):
            self.assertEqual(a.select_move(board, Color.DARK), b.select_move(board, Color.DARK))

    def test_name(self):
        self.assertEqual(RandomStrategy.name, "random")


if __name__ == "__main__":
    unittest.main()
