"""
Enhanced-mode modifiers: power-ups, piece personalities, fog of war,
board rotation and weather.

Nothing here changes move legality. Personalities and power-up effects are
display metadata, fog and rotation are presentation transforms, and weather
only perturbs a destination that has already been judged legal.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Iterable, List, Optional

import numpy as np
from loguru import logger

from .board import Board
from .config import config
from .types import Color, Position


class PowerUpType(Enum):
    SPEED = "speed"
    SHIELD = "shield"
    DOUBLE_JUMP = "double-jump"


class Personality(Enum):
    BRAVE = "brave"
    SNEAKY = "sneaky"
    HEAVY = "heavy"
    SCOUT = "scout"
    NORMAL = "normal"


class BoardModifier(Enum):
    FOG_OF_WAR = "fog-of-war"
    ROTATING = "rotating"
    WEATHER_RAIN = "weather-rain"
    WEATHER_WIND = "weather-wind"
    NONE = "none"


class Weather(Enum):
    RAIN = "rain"
    WIND = "wind"
    NONE = "none"


# Personalities handed out at game start; NORMAL is the fallback for unlabelled pieces
ASSIGNABLE_PERSONALITIES = (
    Personality.BRAVE,
    Personality.SNEAKY,
    Personality.HEAVY,
    Personality.SCOUT,
)

# up, down, left, right
CARDINALS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

POWER_UP_DESCRIPTIONS: Dict[PowerUpType, str] = {
    PowerUpType.SPEED: "Speed: Jump 3 spaces on next move!",
    PowerUpType.SHIELD: "Shield: Immune to capture for 1 turn!",
    PowerUpType.DOUBLE_JUMP: "Double Jump: Make two jumps in one turn!",
}

PERSONALITY_DESCRIPTIONS: Dict[Personality, str] = {
    Personality.BRAVE: "Brave: Can't retreat, only forward!",
    Personality.SNEAKY: "Sneaky: Can move backward without being king!",
    Personality.HEAVY: "Heavy: Requires 2 captures to eliminate!",
    Personality.SCOUT: "Scout: Reveals opponent's next move!",
    Personality.NORMAL: "Standard piece",
}

MODIFIER_DESCRIPTIONS: Dict[BoardModifier, str] = {
    BoardModifier.FOG_OF_WAR: "Fog of War: Limited visibility!",
    BoardModifier.ROTATING: "Rotating Board: Board rotates every "
    f"{config.ROTATION_INTERVAL} moves!",
    BoardModifier.WEATHER_RAIN: "Rain: Pieces may slip randomly!",
    BoardModifier.WEATHER_WIND: "Wind: Pieces get pushed by wind!",
    BoardModifier.NONE: "Clear conditions",
}


@dataclass(frozen=True, slots=True)
class PowerUp:
    type: PowerUpType
    position: Position
    active: bool = True

    def deactivated(self) -> "PowerUp":
        return replace(self, active=False)


@dataclass(slots=True)
class ActiveEffect:
    type: PowerUpType
    position: Position
    turns_remaining: int


# --- Generators ---
def generate_power_ups(
    count: int = config.POWER_UP_COUNT, rng: Optional[random.Random] = None
) -> List[PowerUp]:
    """Place ``count`` power-ups on distinct playable squares of the middle rows.

    Raises ValueError when ``count`` exceeds the playable squares in those rows.
    """
    eligible = sum(
        1
        for row in range(config.POWER_UP_MIN_ROW, config.POWER_UP_MAX_ROW + 1)
        for col in range(config.BOARD_SIZE)
        if Position(row, col).is_playable()
    )
    if not 0 <= count <= eligible:
        raise ValueError(f"count must be between 0 and {eligible}, got {count}")

    rng = rng or random.Random()
    power_ups: List[PowerUp] = []
    used: set[Position] = set()
    types = list(PowerUpType)

    for _ in range(count):
        while True:
            pos = Position(
                rng.randrange(config.BOARD_SIZE), rng.randrange(config.BOARD_SIZE)
            )
            if (
                pos.is_playable()
                and pos not in used
                and config.POWER_UP_MIN_ROW <= pos.row <= config.POWER_UP_MAX_ROW
            ):
                break
        used.add(pos)
        power_ups.append(PowerUp(type=rng.choice(types), position=pos))

    return power_ups


def generate_personalities(
    n: int = config.PERSONALITY_COUNT, rng: Optional[random.Random] = None
) -> Dict[str, Personality]:
    rng = rng or random.Random()
    return {f"piece-{i}": rng.choice(ASSIGNABLE_PERSONALITIES) for i in range(n)}


def random_modifier(rng: Optional[random.Random] = None) -> BoardModifier:
    rng = rng or random.Random()
    return rng.choice(list(BoardModifier))


def weather_for(modifier: BoardModifier) -> Weather:
    if modifier is BoardModifier.WEATHER_RAIN:
        return Weather.RAIN
    if modifier is BoardModifier.WEATHER_WIND:
        return Weather.WIND
    return Weather.NONE


# --- Fog of war ---
def is_visible_in_fog(
    pos: Position, own_positions: Iterable[Position], radius: int = config.FOG_RADIUS
) -> bool:
    return any(pos.chebyshev(own) <= radius for own in own_positions)


def fog_mask(board: Board, side: Color, radius: int = config.FOG_RADIUS) -> np.ndarray:
    """Return an (8, 8) bool grid of the squares ``side`` can see."""
    mask = np.zeros((config.BOARD_SIZE, config.BOARD_SIZE), dtype=np.bool_)
    for own in board.positions_of(side):
        r0, r1 = max(own.row - radius, 0), min(own.row + radius, config.LAST_ROW)
        c0, c1 = max(own.col - radius, 0), min(own.col + radius, config.LAST_ROW)
        mask[r0 : r1 + 1, c0 : c1 + 1] = True
    return mask


# --- Rotation ---
def rotate_position(pos: Position, angle: int) -> Position:
    last = config.LAST_ROW
    if angle == 90:
        return Position(pos.col, last - pos.row)
    if angle == 180:
        return Position(last - pos.row, last - pos.col)
    if angle == 270:
        return Position(last - pos.col, pos.row)
    return pos


# --- Weather ---
def apply_weather_effect(
    pos: Position, weather: Weather, rng: Optional[random.Random] = None
) -> Position:
    """Perturb an already-legal destination.

    Only bounds are checked for the substitute square; occupancy and capture
    legality are not re-validated.
    """
    if weather is Weather.NONE:
        return pos
    rng = rng or random.Random()

    if weather is Weather.RAIN:
        slips = [pos.offset(dr, dc) for dr, dc in CARDINALS]
        slips = [s for s in slips if s.in_bounds()]
        if rng.random() < config.RAIN_SLIP_PROBABILITY and slips:
            return rng.choice(slips)

    if weather is Weather.WIND:
        d_row, d_col = CARDINALS[rng.randrange(len(CARDINALS))]
        pushed = pos.offset(d_row, d_col)
        if pushed.in_bounds():
            return pushed

    return pos


@dataclass(slots=True)
class ModifierState:
    """Per-game enhanced-mode state. Lives from reset to reset."""

    modifier: BoardModifier = BoardModifier.NONE
    power_ups: List[PowerUp] = field(default_factory=list)
    personalities: Dict[str, Personality] = field(default_factory=dict)
    rotation: int = 0
    move_count: int = 0
    collected: List[PowerUpType] = field(default_factory=list)
    effects: List[ActiveEffect] = field(default_factory=list)

    @classmethod
    def enhanced(cls, rng: random.Random) -> "ModifierState":
        state = cls(
            modifier=random_modifier(rng),
            power_ups=generate_power_ups(config.POWER_UP_COUNT, rng),
            personalities=generate_personalities(config.PERSONALITY_COUNT, rng),
        )
        logger.info(
            f"Enhanced mode: modifier={state.modifier.value}, "
            f"power-ups={[(p.type.value, p.position) for p in state.power_ups]}"
        )
        return state

    @classmethod
    def disabled(cls) -> "ModifierState":
        return cls()

    @property
    def weather(self) -> Weather:
        return weather_for(self.modifier)

    @property
    def turns_until_rotation(self) -> Optional[int]:
        if self.modifier is not BoardModifier.ROTATING:
            return None
        return config.ROTATION_INTERVAL - self.move_count % config.ROTATION_INTERVAL

    def personality_of(self, key: str) -> Personality:
        return self.personalities.get(key, Personality.NORMAL)

    def active_power_up_at(self, pos: Position) -> Optional[PowerUp]:
        for power_up in self.power_ups:
            if power_up.active and power_up.position == pos:
                return power_up
        return None

    def collect_power_up(self, pos: Position) -> Optional[PowerUpType]:
        """Deactivate the active power-up on ``pos`` and start its effect."""
        found = self.active_power_up_at(pos)
        if found is None:
            return None
        self.power_ups = [
            p.deactivated() if p is found else p for p in self.power_ups
        ]
        self.collected.append(found.type)
        self.effects.append(
            ActiveEffect(
                type=found.type,
                position=found.position,
                turns_remaining=config.POWER_UP_DURATION,
            )
        )
        logger.debug(f"Collected {found.type.value} at {pos}")
        return found.type

    def record_player_move(self) -> bool:
        """Count one completed player move; return True when the board rotated.

        Ticks the effects collected on earlier moves, so call it before
        collecting on the current one.
        """
        self.move_count += 1
        for effect in self.effects:
            effect.turns_remaining -= 1
        self.effects = [e for e in self.effects if e.turns_remaining > 0]

        if (
            self.modifier is BoardModifier.ROTATING
            and self.move_count % config.ROTATION_INTERVAL == 0
        ):
            self.rotation = (self.rotation + config.ROTATION_STEP) % 360
            logger.debug(f"Board rotated to {self.rotation} degrees")
            return True
        return False
