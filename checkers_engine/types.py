from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional

from .config import config


class Color(IntEnum):
    LIGHT = 0  # starts on rows 5-7, moves toward row 0
    DARK = 1  # starts on rows 0-2, moves toward row 7

    @property
    def opponent(self) -> "Color":
        return Color.DARK if self is Color.LIGHT else Color.LIGHT

    @property
    def forward(self) -> int:
        """Row delta of a man's simple move."""
        return -1 if self is Color.LIGHT else 1

    @property
    def promotion_row(self) -> int:
        return 0 if self is Color.LIGHT else config.LAST_ROW


class Outcome(Enum):
    LIGHT_WINS = "light"
    DARK_WINS = "dark"
    DRAW = "draw"

    @classmethod
    def win_for(cls, color: Color) -> "Outcome":
        return cls.LIGHT_WINS if color is Color.LIGHT else cls.DARK_WINS


class GameStatus(Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    LIGHT_WINS = "light_wins"
    DARK_WINS = "dark_wins"
    DRAW = "draw"

    @property
    def is_terminal(self) -> bool:
        return self in (GameStatus.LIGHT_WINS, GameStatus.DARK_WINS, GameStatus.DRAW)

    @classmethod
    def from_outcome(cls, outcome: Outcome) -> "GameStatus":
        return {
            Outcome.LIGHT_WINS: cls.LIGHT_WINS,
            Outcome.DARK_WINS: cls.DARK_WINS,
            Outcome.DRAW: cls.DRAW,
        }[outcome]


class Difficulty(Enum):
    """Only changes how long the opponent appears to think."""

    EASY = "easy"
    MEDIUM = "medium"


@dataclass(frozen=True, slots=True)
class Position:
    row: int
    col: int

    def in_bounds(self) -> bool:
        return 0 <= self.row < config.BOARD_SIZE and 0 <= self.col < config.BOARD_SIZE

    def is_playable(self) -> bool:
        return (self.row + self.col) % 2 == 1

    def offset(self, d_row: int, d_col: int) -> "Position":
        return Position(self.row + d_row, self.col + d_col)

    def chebyshev(self, other: "Position") -> int:
        return max(abs(self.row - other.row), abs(self.col - other.col))


@dataclass(frozen=True, slots=True)
class Move:
    from_pos: Position
    to_pos: Position
    captures: tuple[Position, ...] = ()

    @property
    def is_capture(self) -> bool:
        return len(self.captures) > 0


@dataclass(slots=True)
class TurnResult:
    """What a single Game turn reports back to the caller."""

    move: Optional[Move]
    applied: bool
    captured: bool = False
    collected: Optional[str] = None  # power-up type value
    rotated: bool = False
    weather_drift: Optional[Position] = None
    outcome: Optional[Outcome] = None
