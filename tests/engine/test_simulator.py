from __future__ import annotations

import unittest

from checkers_engine.board import Board
from checkers_engine.piece import Piece
from checkers_engine.simulator import Simulator
from checkers_engine.strategy_base import RandomStrategy
from checkers_engine.types import Color, Outcome, Position


def seeded(seed: int, max_turns: int = 500) -> Simulator:
    return Simulator(
        light=RandomStrategy(rng_seed=seed),
        dark=RandomStrategy(rng_seed=seed + 1),
        max_turns=max_turns,
    )


class SimulatorTests(unittest.TestCase):
    def test_game_ends_or_hits_cap(self) -> None:
        record = seeded(0).play_game()
        if record.outcome is None:
            self.assertEqual(record.plies, 500)
        else:
            self.assertIsInstance(record.outcome, Outcome)
        self.assertEqual(
            24 - record.final_board.total_pieces(), record.captures
        )

    def test_seeded_runs_reproducible(self) -> None:
        a = seeded(9).play_game()
        b = seeded(9).play_game()
        self.assertEqual(a.outcome, b.outcome)
        self.assertEqual(a.plies, b.plies)
        self.assertEqual(a.final_board, b.final_board)

    def test_zero_turn_cap(self) -> None:
        record = seeded(1, max_turns=0).play_game()
        self.assertIsNone(record.outcome)
        self.assertEqual(record.plies, 0)

    def test_already_finished_board(self) -> None:
        board = Board.from_pieces({Position(5, 2): Piece(Color.LIGHT)})
        record = seeded(2).play_game(board)
        self.assertIs(record.outcome, Outcome.LIGHT_WINS)
        self.assertEqual(record.plies, 0)

    def test_run_many_summary(self) -> None:
        summary = seeded(3, max_turns=200).run_many(5)
        self.assertEqual(set(summary), {"light", "dark", "draw", "unfinished"})
        self.assertEqual(sum(summary.values()), 5)


if __name__ == "__main__":
    unittest.main()
