"""Main entry point for the card game engine."""

import argparse
import logging
import random
import sys
from datetime import datetime
from pathlib import Path

from cardengine.config import Config, GameLogConfig, load_config
from cardengine.errors import CardGameError
from cardengine.game import DefaultBuilder, DefaultRules, Game, GameRunner
from cardengine.logging import GameLogger
from cardengine.strategy import HumanStrategy, RandomStrategy, Strategy
from cardengine.utils.logger import GameDisplay, setup_logging

logger = logging.getLogger(__name__)


def generate_log_filename(log_dir: str) -> str:
    """Generate a timestamped log filename in ``log_dir``."""
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    return str(Path(log_dir) / f"{timestamp}_game.jsonl")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Play a draw-or-discard card game"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-n",
        "--num-players",
        type=int,
        help="Number of players, 2-4 (overrides config)",
    )
    parser.add_argument(
        "--hand-size",
        type=int,
        help="Cards dealt to each player (overrides config)",
    )
    parser.add_argument(
        "--decks",
        type=int,
        help="Number of decks shuffled together (overrides config)",
    )
    parser.add_argument(
        "--no-jokers",
        action="store_true",
        help="Play without jokers",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed (overrides config)",
    )
    parser.add_argument(
        "--max-turns",
        type=int,
        help="Turn limit (overrides config)",
    )
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Play seat 1 yourself, the others play randomly",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--show-hands",
        action="store_true",
        help="Show player hands in output",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Directory for game log files (filename auto-generated)",
    )
    return parser.parse_args(argv)


def apply_overrides(config: Config, args: argparse.Namespace) -> Config:
    """Apply command-line overrides to a loaded config.

    The result is re-validated so out-of-range values are rejected.
    """
    data = config.model_dump()
    if args.num_players is not None:
        data["game"]["num_players"] = args.num_players
    if args.hand_size is not None:
        data["game"]["hand_size"] = args.hand_size
    if args.seed is not None:
        data["game"]["seed"] = args.seed
    if args.max_turns is not None:
        data["game"]["max_turns"] = args.max_turns
    if args.decks is not None:
        data["deck"]["num_decks"] = args.decks
    if args.no_jokers:
        data["deck"]["jokers"] = False
    if args.verbose:
        data["logging"]["level"] = "DEBUG"
    if args.show_hands:
        data["logging"]["show_hands"] = True
    return Config.model_validate(data)


def build_strategies(config: Config, interactive: bool) -> list[Strategy]:
    """Create one strategy per seat."""
    rng = random.Random(config.game.seed)
    strategies: list[Strategy] = [
        RandomStrategy(rng=rng) for _ in range(config.game.num_players)
    ]
    if interactive:
        strategies[0] = HumanStrategy()
    return strategies


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    args = parse_args(argv)

    try:
        config = apply_overrides(load_config(args.config), args)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    game_log_enabled = args.game_log is not None or config.game_log.enabled
    if args.game_log:
        game_log_config = GameLogConfig(
            enabled=True, output_path=generate_log_filename(str(args.game_log))
        )
    else:
        game_log_config = GameLogConfig(
            enabled=game_log_enabled, output_path=config.game_log.output_path
        )

    setup_logging(config.logging.level)
    display = GameDisplay(show_hands=config.logging.show_hands)

    print(f"Players: {config.game.num_players}")
    print(f"Decks: {config.deck.num_decks} ({'with' if config.deck.jokers else 'no'} jokers)")
    if game_log_enabled:
        print(f"Game log: {game_log_config.output_path}")
    print()

    builder = DefaultBuilder(config.game, config.deck)
    game = Game(builder, DefaultRules())

    try:
        with GameLogger(game_log_config) as game_logger:
            runner = GameRunner(
                game,
                build_strategies(config, args.interactive),
                game_logger,
            )

            def on_move(turn_number, player_index, move, status) -> None:
                display.print_move(turn_number, game.state, player_index, move)

            def on_game_end(status, state) -> None:
                display.print_hands(state)
                display.print_game_end(status, state)

            runner.set_callbacks(
                on_game_start=display.print_game_start,
                on_move=on_move,
                on_game_end=on_game_end,
            )
            runner.run(max_turns=config.game.max_turns)

        return 0

    except KeyboardInterrupt:
        print("\nGame interrupted by user")
        return 1
    except EOFError:
        logger.error("Input closed before the game finished")
        return 1
    except CardGameError as e:
        logger.exception(f"Game error: {e}")
        return 1
    except RuntimeError as e:
        logger.error(f"Game aborted: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
