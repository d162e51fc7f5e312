from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from loguru import logger

from .board import Board, init_board
from .config import config
from .rules import apply_move, check_game_over
from .strategy_base import RandomStrategy, Strategy
from .types import Color, Outcome


@dataclass(slots=True)
class GameRecord:
    outcome: Optional[Outcome]  # None when the turn cap was reached
    plies: int
    captures: int
    final_board: Board


@dataclass(slots=True)
class Simulator:
    """Plays automated games between two strategies, Light moving first."""

    light: Strategy = field(default_factory=RandomStrategy)
    dark: Strategy = field(default_factory=RandomStrategy)
    max_turns: int = config.MAX_TURNS

    def play_game(self, board: Board | None = None) -> GameRecord:
        board = board if board is not None else init_board()
        side = Color.LIGHT
        plies = 0
        captures = 0

        outcome = check_game_over(board)
        while outcome is None and plies < self.max_turns:
            strategy = self.light if side is Color.LIGHT else self.dark
            move = strategy.select_move(board, side)
            if move is None:
                # check_game_over would already have ended the game
                logger.warning(f"{side.name} has no move on a live board")
                break
            board = apply_move(board, move)
            plies += 1
            captures += len(move.captures)
            side = side.opponent
            outcome = check_game_over(board)

        if outcome is None:
            logger.debug(f"Game stopped after {plies} plies without a result")
        return GameRecord(outcome=outcome, plies=plies, captures=captures, final_board=board)

    def run_many(self, games: int) -> Dict[str, int]:
        summary = {"light": 0, "dark": 0, "draw": 0, "unfinished": 0}
        for idx in range(games):
            record = self.play_game()
            key = record.outcome.value if record.outcome is not None else "unfinished"
            summary[key] += 1
            logger.debug(
                f"Game {idx + 1}/{games}: {key} in {record.plies} plies, "
                f"{record.captures} captures"
            )
        logger.info(f"Simulated {games} games: {summary}")
        return summary
