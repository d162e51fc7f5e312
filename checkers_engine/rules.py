from __future__ import annotations

from typing import List, Optional

from loguru import logger

from .board import Board
from .types import Color, Move, Outcome, Position

DIAGONALS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))


def _step_directions(color: Color, is_king: bool) -> tuple[tuple[int, int], ...]:
    if is_king:
        return DIAGONALS
    return ((color.forward, -1), (color.forward, 1))


# --- Rules: move generation ---
def moves_for_piece(board: Board, pos: Position, side: Color) -> List[Move]:
    """Simple moves followed by jumps for the piece on ``pos``.

    Returns an empty list when the square is empty or holds the other side.
    Jumps are looked for in all four directions, for men as well as kings.
    """
    piece = board.piece_at(pos)
    if piece is None or piece.color != side:
        return []

    moves: List[Move] = []
    for d_row, d_col in _step_directions(piece.color, piece.is_king):
        to = pos.offset(d_row, d_col)
        if to.in_bounds() and board.is_empty(to):
            moves.append(Move(from_pos=pos, to_pos=to))

    for d_row, d_col in DIAGONALS:
        mid = pos.offset(d_row, d_col)
        to = pos.offset(2 * d_row, 2 * d_col)
        if not (mid.in_bounds() and to.in_bounds()):
            continue
        victim = board.piece_at(mid)
        if victim is not None and victim.color != side and board.is_empty(to):
            moves.append(Move(from_pos=pos, to_pos=to, captures=(mid,)))

    return moves


def all_moves_for_side(board: Board, side: Color) -> List[Move]:
    """Every legal move for ``side``, restricted to jumps when any jump exists."""
    moves: List[Move] = []
    for pos in board.positions_of(side):
        moves.extend(moves_for_piece(board, pos, side))

    captures = [mv for mv in moves if mv.is_capture]
    return captures if captures else moves


# --- Applying a move ---
def apply_move(board: Board, move: Move) -> Board:
    """Return the board after ``move``; the input board is left untouched.

    Captured squares are cleared, the piece is relocated and crowned when it
    lands on its promotion row. A move from an empty square is a no-op.
    """
    piece = board.piece_at(move.from_pos)
    if piece is None:
        logger.debug(f"No piece at {move.from_pos}; move ignored")
        return board

    if move.to_pos.row == piece.color.promotion_row:
        piece = piece.crowned()

    changes = {cap: None for cap in move.captures}
    changes[move.from_pos] = None
    changes[move.to_pos] = piece
    return board.with_changes(changes)


# --- Terminal detection ---
def check_game_over(board: Board) -> Optional[Outcome]:
    light = board.count(Color.LIGHT)
    dark = board.count(Color.DARK)
    if light == 0:
        return Outcome.win_for(Color.DARK)
    if dark == 0:
        return Outcome.win_for(Color.LIGHT)

    light_stuck = not all_moves_for_side(board, Color.LIGHT)
    dark_stuck = not all_moves_for_side(board, Color.DARK)
    if light_stuck and dark_stuck:
        return Outcome.DRAW
    if light_stuck:
        return Outcome.win_for(Color.DARK)
    if dark_stuck:
        return Outcome.win_for(Color.LIGHT)
    return None
