from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional

from loguru import logger

from .board import Board, init_board, square_name
from .config import config
from .modifiers import (
    BoardModifier,
    ModifierState,
    apply_weather_effect,
    is_visible_in_fog,
    rotate_position,
)
from .rules import all_moves_for_side, apply_move, check_game_over, moves_for_piece
from .strategy_base import RandomStrategy, Strategy
from .types import Color, Difficulty, GameStatus, Move, Outcome, Position, TurnResult


@dataclass(slots=True)
class Game:
    """One checkers session as driven by a UI.

    The human plays ``human_color`` and moves first; ``opponent`` answers for
    the other side. Enhanced mode layers a ModifierState on top of the rules.
    """

    human_color: Color = Color.LIGHT
    opponent: Strategy = field(default_factory=RandomStrategy)
    enhanced: bool = False
    difficulty: Difficulty = Difficulty.EASY
    rng: random.Random = field(default_factory=random.Random)
    human_name: str = "You"
    opponent_name: str = "Eeko"
    board: Board = field(init=False)
    current: Color = field(init=False)
    status: GameStatus = field(default=GameStatus.NOT_STARTED, init=False)
    outcome: Optional[Outcome] = field(default=None, init=False)
    modifiers: ModifierState = field(init=False)
    history: List[str] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        self.board = init_board()
        self.current = self.human_color
        self.modifiers = self._new_modifiers()

    # --- Lifecycle ---
    def _new_modifiers(self) -> ModifierState:
        if self.enhanced:
            return ModifierState.enhanced(self.rng)
        return ModifierState.disabled()

    @property
    def opponent_color(self) -> Color:
        return self.human_color.opponent

    @property
    def opponent_delay_ms(self) -> int:
        return config.OPPONENT_DELAY_MS[self.difficulty.value]

    def start(self) -> None:
        if self.status is not GameStatus.NOT_STARTED:
            logger.warning(f"start() ignored, game is {self.status.value}")
            return
        self.status = GameStatus.IN_PROGRESS
        logger.info(f"Game started (enhanced={self.enhanced})")

    def reset(self) -> None:
        self.board = init_board()
        self.current = self.human_color
        self.status = GameStatus.NOT_STARTED
        self.outcome = None
        self.history = []
        self.modifiers = self._new_modifiers()
        logger.info("Game reset")

    def toggle_enhanced(self) -> None:
        self.enhanced = not self.enhanced
        self.reset()

    # --- Queries ---
    def moves_for(self, pos: Position) -> List[Move]:
        """Moves the human may pick for the piece on ``pos``.

        Narrowed by the side-wide forced-capture rule.
        """
        if self.status is not GameStatus.IN_PROGRESS or self.current is not self.human_color:
            return []
        legal = set(all_moves_for_side(self.board, self.human_color))
        return [
            mv for mv in moves_for_piece(self.board, pos, self.human_color) if mv in legal
        ]

    def is_visible(self, pos: Position) -> bool:
        if not self.enhanced or self.modifiers.modifier is not BoardModifier.FOG_OF_WAR:
            return True
        return is_visible_in_fog(pos, self.board.positions_of(self.human_color))

    def display_position(self, pos: Position) -> Position:
        return rotate_position(pos, self.modifiers.rotation)

    # --- Turns ---
    def play(self, move: Move) -> TurnResult:
        """Apply a human move; rejected moves leave the game untouched."""
        if self.status is not GameStatus.IN_PROGRESS:
            logger.warning(f"Move {move} rejected, game is {self.status.value}")
            return TurnResult(move=move, applied=False, outcome=self.outcome)
        if self.current is not self.human_color:
            logger.warning(f"Move {move} rejected, it is {self.current.name}'s turn")
            return TurnResult(move=move, applied=False)
        if move not in all_moves_for_side(self.board, self.human_color):
            logger.warning(f"Illegal move {move} rejected")
            return TurnResult(move=move, applied=False)

        self.board = apply_move(self.board, move)
        self._record(self.human_name, move)
        result = TurnResult(move=move, applied=True, captured=move.is_capture)

        if self.enhanced:
            result.rotated = self.modifiers.record_player_move()
            collected = self.modifiers.collect_power_up(move.to_pos)
            if collected is not None:
                result.collected = collected.value
            drift = apply_weather_effect(move.to_pos, self.modifiers.weather, self.rng)
            if drift != move.to_pos:
                # presentation only; the board keeps the legal destination
                result.weather_drift = drift
                logger.debug(f"Weather pushed {move.to_pos} toward {drift}")

        self.current = self.opponent_color
        result.outcome = self._evaluate()
        return result

    def opponent_turn(self) -> TurnResult:
        if self.status is not GameStatus.IN_PROGRESS or self.current is not self.opponent_color:
            logger.warning("opponent_turn() called out of turn")
            return TurnResult(move=None, applied=False, outcome=self.outcome)

        move = self.opponent.select_move(self.board, self.opponent_color)
        if move is None:
            # stuck side; the terminal detector reports it
            return TurnResult(move=None, applied=False, outcome=self._evaluate())

        self.board = apply_move(self.board, move)
        self._record(self.opponent_name, move)
        self.current = self.human_color
        return TurnResult(
            move=move, applied=True, captured=move.is_capture, outcome=self._evaluate()
        )

    def _record(self, player: str, move: Move) -> None:
        suffix = " (capture)" if move.is_capture else ""
        entry = f"{player}: {square_name(move.from_pos)} → {square_name(move.to_pos)}{suffix}"
        self.history = [entry, *self.history][: config.HISTORY_LENGTH]
        logger.debug(entry)

    def _evaluate(self) -> Optional[Outcome]:
        self.outcome = check_game_over(self.board)
        if self.outcome is not None:
            self.status = GameStatus.from_outcome(self.outcome)
            logger.info(f"Game over: {self.outcome.value}")
        return self.outcome
