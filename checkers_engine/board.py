from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Mapping, Optional, Tuple

import numpy as np

from .config import config
from .piece import Piece
from .types import Color, Position

Grid = Tuple[Tuple[Optional[Piece], ...], ...]


def square_name(pos: Position) -> str:
    """Algebraic label for a square: column letter A-H, rank 8 at row 0."""
    return f"{chr(ord('A') + pos.col)}{config.BOARD_SIZE - pos.row}"


@dataclass(frozen=True, slots=True)
class Board:
    """Immutable 8x8 grid of optional pieces (no rule logic).

    Boards from ``init_board`` only occupy playable squares, i.e.
    ``(row + col)`` is odd, and diagonal moves keep it that way. Every change
    produces a new Board through ``with_changes``.
    """

    grid: Grid

    @classmethod
    def empty(cls) -> "Board":
        row = (None,) * config.BOARD_SIZE
        return cls(grid=(row,) * config.BOARD_SIZE)

    @classmethod
    def from_pieces(
        cls, pieces: Mapping[Position, Piece], playable_only: bool = True
    ) -> "Board":
        """Build a board from explicit placements.

        Raises ValueError for squares off the board, and for squares off the
        playable set unless ``playable_only`` is False. Diagonal moves keep a
        piece on its starting square colour, so the rules behave the same on
        either set.
        """
        for pos in pieces:
            if not pos.in_bounds():
                raise ValueError(f"Position {pos} is outside the board")
            if playable_only and not pos.is_playable():
                raise ValueError(f"Position {pos} is not a playable square")
        return cls.empty().with_changes(dict(pieces))

    # --- Queries ---
    def piece_at(self, pos: Position) -> Optional[Piece]:
        if not pos.in_bounds():
            return None
        return self.grid[pos.row][pos.col]

    def is_empty(self, pos: Position) -> bool:
        return self.piece_at(pos) is None

    def occupied(self) -> Iterator[tuple[Position, Piece]]:
        for r, row in enumerate(self.grid):
            for c, piece in enumerate(row):
                if piece is not None:
                    yield Position(r, c), piece

    def positions_of(self, color: Color) -> list[Position]:
        return [pos for pos, piece in self.occupied() if piece.color == color]

    def count(self, color: Color) -> int:
        return sum(1 for _, piece in self.occupied() if piece.color == color)

    def total_pieces(self) -> int:
        return sum(1 for _ in self.occupied())

    # --- Derivation ---
    def with_changes(self, changes: Mapping[Position, Optional[Piece]]) -> "Board":
        rows = [list(row) for row in self.grid]
        for pos, piece in changes.items():
            rows[pos.row][pos.col] = piece
        return Board(grid=tuple(tuple(row) for row in rows))

    # --- Host helpers ---
    def to_array(self, out: np.ndarray | None = None) -> np.ndarray:
        """Return a (4, 8, 8) float32 plane encoding of the board.

        Planes:
        0: Light men
        1: Light kings
        2: Dark men
        3: Dark kings
        """
        shape = (4, config.BOARD_SIZE, config.BOARD_SIZE)
        if out is not None:
            planes = out
            if planes.shape != shape:
                raise ValueError(f"Expected board array of shape {shape}")
            planes.fill(0.0)
        else:
            planes = np.zeros(shape, dtype=np.float32)

        for pos, piece in self.occupied():
            plane = int(piece.color) * 2 + int(piece.is_king)
            planes[plane, pos.row, pos.col] = 1.0
        return planes

    def render(self) -> str:
        lines = []
        for r, row in enumerate(self.grid):
            cells = []
            for c, piece in enumerate(row):
                if piece is not None:
                    cells.append(piece.symbol)
                else:
                    cells.append("." if (r + c) % 2 == 1 else " ")
            lines.append(f"{config.BOARD_SIZE - r} " + " ".join(cells))
        footer = "  " + " ".join(chr(ord("A") + c) for c in range(config.BOARD_SIZE))
        lines.append(footer)
        return "\n".join(lines)


def init_board() -> Board:
    """Standard opening: Dark on the top setup rows, Light on the bottom ones."""
    placements: dict[Position, Piece] = {}
    for row in range(config.BOARD_SIZE):
        if row < config.SETUP_ROWS:
            color = Color.DARK
        elif row >= config.BOARD_SIZE - config.SETUP_ROWS:
            color = Color.LIGHT
        else:
            continue
        for col in range(config.BOARD_SIZE):
            pos = Position(row, col)
            if pos.is_playable():
                placements[pos] = Piece(color=color)
    return Board.empty().with_changes(placements)
