from dataclasses import dataclass, replace

from .types import Color


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable piece value. Holds state only.

    Movement and promotion rules live in the rules module; a promoted piece
    is a new Piece instance produced by ``crowned``.
    """

    color: Color
    is_king: bool = False

    def crowned(self) -> "Piece":
        return self if self.is_king else replace(self, is_king=True)

    @property
    def symbol(self) -> str:
        base = "l" if self.color is Color.LIGHT else "d"
        return base.upper() if self.is_king else base
