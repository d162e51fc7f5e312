from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import ClassVar, Protocol

from .board import Board
from .rules import all_moves_for_side
from .types import Color, Move


def select_move(board: Board, side: Color, rng: random.Random) -> Move | None:
    """Capture-preferring uniform pick over the legal moves of ``side``.

    ``None`` means the side cannot move at all.
    """
    moves = all_moves_for_side(board, side)
    if not moves:
        return None
    # all_moves_for_side already narrows to jumps; keep the selector correct on its own
    captures = [mv for mv in moves if mv.is_capture]
    pool = captures if captures else moves
    return rng.choice(pool)


class Strategy(Protocol):
    name: ClassVar[str]

    def select_move(self, board: Board, side: Color) -> Move | None:
        ...


@dataclass(slots=True)
class RandomStrategy:
    name: ClassVar[str] = "random"

    rng_seed: int | None = None
    rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.rng = random.Random(self.rng_seed)

    def select_move(self, board: Board, side: Color) -> Move | None:
        return select_move(board, side, self.rng)
