from .board import Board, init_board, square_name
from .config import config
from .game import Game
from .modifiers import (
    BoardModifier,
    ModifierState,
    Personality,
    PowerUp,
    PowerUpType,
    Weather,
    apply_weather_effect,
    generate_personalities,
    generate_power_ups,
    is_visible_in_fog,
    rotate_position,
)
from .piece import Piece
from .rules import all_moves_for_side, apply_move, check_game_over, moves_for_piece
from .simulator import Simulator
from .strategy_base import RandomStrategy, select_move
from .types import Color, Difficulty, GameStatus, Move, Outcome, Position, TurnResult

__all__ = [
    "config",
    "Color",
    "Difficulty",
    "GameStatus",
    "Move",
    "Outcome",
    "Position",
    "TurnResult",
    "Piece",
    "Board",
    "init_board",
    "square_name",
    "moves_for_piece",
    "all_moves_for_side",
    "apply_move",
    "check_game_over",
    "select_move",
    "RandomStrategy",
    "BoardModifier",
    "ModifierState",
    "Personality",
    "PowerUp",
    "PowerUpType",
    "Weather",
    "generate_power_ups",
    "generate_personalities",
    "is_visible_in_fog",
    "rotate_position",
    "apply_weather_effect",
    "Game",
    "Simulator",
]
