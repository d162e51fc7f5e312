import unittest

from checkers_engine.board import Board, init_board
from checkers_engine.piece import Piece
from checkers_engine.rules import all_moves_for_side, moves_for_piece
from checkers_engine.types import Color, Move, Position


def P(row: int, col: int) -> Position:
    return Position(row, col)


class TestMovesForPiece(unittest.TestCase):
    def test_opening_dark_piece(self):
        board = init_board()
        moves = moves_for_piece(board, P(2, 1), Color.DARK)
        self.assertEqual(
            moves,
            [Move(P(2, 1), P(3, 0)), Move(P(2, 1), P(3, 2))],
        )

    def test_empty_square_and_wrong_side(self):
        board = init_board()
        self.assertEqual(moves_for_piece(board, P(3, 0), Color.DARK), [])
        self.assertEqual(moves_for_piece(board, P(2, 1), Color.LIGHT), [])

    def test_blocked_back_row_piece(self):
        board = init_board()
        self.assertEqual(moves_for_piece(board, P(0, 1), Color.DARK), [])

    def test_light_men_move_up(self):
        board = Board.from_pieces({P(5, 2): Piece(Color.LIGHT)})
        targets = {mv.to_pos for mv in moves_for_piece(board, P(5, 2), Color.LIGHT)}
        self.assertEqual(targets, {P(4, 1), P(4, 3)})

    def test_king_moves_all_directions(self):
        board = Board.from_pieces({P(4, 3): Piece(Color.LIGHT, is_king=True)})
        targets = {mv.to_pos for mv in moves_for_piece(board, P(4, 3), Color.LIGHT)}
        self.assertEqual(targets, {P(3, 2), P(3, 4), P(5, 2), P(5, 4)})

    def test_edge_piece_stays_in_bounds(self):
        board = Board.from_pieces({P(4, 7): Piece(Color.DARK)})
        moves = moves_for_piece(board, P(4, 7), Color.DARK)
        self.assertEqual(moves, [Move(P(4, 7), P(5, 6))])

    def test_capture_scenario(self):
        # same diagonal geometry on the other square colour
        board = Board.from_pieces(
            {P(4, 4): Piece(Color.LIGHT), P(3, 3): Piece(Color.DARK)},
            playable_only=False,
        )
        moves = moves_for_piece(board, P(4, 4), Color.LIGHT)
        self.assertIn(Move(P(4, 4), P(2, 2), captures=(P(3, 3),)), moves)
        self.assertIn(Move(P(4, 4), P(3, 5)), moves)

    def test_men_capture_backwards(self):
        board = Board.from_pieces({P(2, 3): Piece(Color.LIGHT), P(3, 4): Piece(Color.DARK)})
        moves = moves_for_piece(board, P(2, 3), Color.LIGHT)
        self.assertIn(Move(P(2, 3), P(4, 5), captures=(P(3, 4),)), moves)

    def test_no_capture_when_landing_occupied(self):
        board = Board.from_pieces(
            {
                P(5, 2): Piece(Color.LIGHT),
                P(4, 3): Piece(Color.DARK),
                P(3, 4): Piece(Color.DARK),
            }
        )
        moves = moves_for_piece(board, P(5, 2), Color.LIGHT)
        self.assertFalse(any(mv.is_capture for mv in moves))

    def test_no_capture_of_own_piece(self):
        board = Board.from_pieces({P(5, 2): Piece(Color.LIGHT), P(4, 3): Piece(Color.LIGHT)})
        moves = moves_for_piece(board, P(5, 2), Color.LIGHT)
        self.assertEqual(moves, [Move(P(5, 2), P(4, 1))])

    def test_no_capture_off_board(self):
        board = Board.from_pieces({P(1, 2): Piece(Color.LIGHT), P(0, 1): Piece(Color.DARK)})
        moves = moves_for_piece(board, P(1, 2), Color.LIGHT)
        self.assertFalse(any(mv.is_capture for mv in moves))


class TestAllMovesForSide(unittest.TestCase):
    def test_opening_has_seven_moves_each(self):
        board = init_board()
        self.assertEqual(len(all_moves_for_side(board, Color.DARK)), 7)
        self.assertEqual(len(all_moves_for_side(board, Color.LIGHT)), 7)

    def test_forced_capture_filters_simple_moves(self):
        board = Board.from_pieces(
            {
                P(4, 4): Piece(Color.LIGHT),
                P(3, 3): Piece(Color.DARK),
                P(7, 0): Piece(Color.LIGHT),
            },
            playable_only=False,
        )
        moves = all_moves_for_side(board, Color.LIGHT)
        self.assertEqual(moves, [Move(P(4, 4), P(2, 2), captures=(P(3, 3),))])

    def test_filtered_set_never_mixes(self):
        board = Board.from_pieces(
            {
                P(5, 2): Piece(Color.LIGHT),
                P(4, 3): Piece(Color.DARK),
                P(5, 6): Piece(Color.LIGHT),
                P(2, 1): Piece(Color.DARK),
            }
        )
        moves = all_moves_for_side(board, Color.LIGHT)
        self.assertTrue(moves)
        self.assertTrue(all(mv.is_capture for mv in moves))

    def test_side_without_pieces(self):
        board = Board.from_pieces({P(5, 2): Piece(Color.LIGHT)})
        self.assertEqual(all_moves_for_side(board, Color.DARK), [])


if __name__ == "__main__":
    unittest.main()
