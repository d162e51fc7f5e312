import argparse
import random
import sys
import time

from loguru import logger

from checkers_engine import Game, RandomStrategy, Simulator
from checkers_engine.config import config
from checkers_engine.modifiers import MODIFIER_DESCRIPTIONS


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Simulate random-vs-random checkers games"
    )
    parser.add_argument("--games", type=int, default=100, help="Number of games to play")
    parser.add_argument("--seed", type=int, default=42, help="Seed for both strategies")
    parser.add_argument(
        "--max-turns",
        type=int,
        default=config.MAX_TURNS,
        help="Ply cap before a game counts as unfinished",
    )
    parser.add_argument(
        "--enhanced",
        action="store_true",
        help="Play a single verbose enhanced-mode session instead of a batch",
    )
    parser.add_argument("--verbose", action="store_true", help="Log every move")
    return parser.parse_args()


def play_enhanced_session(seed: int, max_turns: int) -> None:
    rng = random.Random(seed)
    game = Game(enhanced=True, rng=rng, opponent=RandomStrategy(rng_seed=seed + 1))
    human = RandomStrategy(rng_seed=seed)
    game.start()

    print(f"Modifier: {MODIFIER_DESCRIPTIONS[game.modifiers.modifier]}")
    print(game.board.render())

    plies = 0
    while not game.status.is_terminal and plies < max_turns:
        move = human.select_move(game.board, game.human_color)
        if move is None:
            break
        result = game.play(move)
        plies += 1
        if result.collected:
            print(f"Collected power-up: {result.collected}")
        if result.rotated:
            print(f"Board rotated to {game.modifiers.rotation} degrees")
        if result.weather_drift is not None:
            print(f"Weather pushed the piece toward {result.weather_drift}")
        if game.status.is_terminal:
            break
        game.opponent_turn()
        plies += 1

    print("\n".join(reversed(game.history)))
    print(game.board.render())
    print(f"Status: {game.status.value} after {plies} plies")


def main() -> None:
    args = parse_args()
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "INFO")

    if args.enhanced:
        play_enhanced_session(args.seed, args.max_turns)
        return

    sim = Simulator(
        light=RandomStrategy(rng_seed=args.seed),
        dark=RandomStrategy(rng_seed=args.seed + 1),
        max_turns=args.max_turns,
    )

    print(f"--- Simulating {args.games} games (seed={args.seed}) ---")
    start_time = time.time()
    summary = sim.run_many(args.games)
    end_time = time.time()

    print("\n--- SIMULATION COMPLETE ---")
    for key, count in summary.items():
        print(f"{key:>10}: {count}")
    print(f"Simulation Time: {end_time - start_time:.2f} seconds")


if __name__ == "__main__":
    main()
