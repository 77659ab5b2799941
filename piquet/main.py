"""Self-play runner: plays deals between two automatic players."""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from piquet.config import load_config
from piquet.game.engine import Game
from piquet.logging import DealLogConfig, DealLogger
from piquet.models.moves import PlayerId
from piquet.strategy import SimpleStrategy, run_deal
from piquet.utils.logger import DealDisplay, setup_logging

logger = logging.getLogger(__name__)


def generate_log_filename(log_dir: str, seed: str) -> str:
    """Generate log filename with timestamp and seed.

    Format: {ISO timestamp}_{seed}.jsonl

    Args:
        log_dir: Directory for log files.
        seed: Game seed as hex.

    Returns:
        Full path to log file.
    """
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    return str(Path(log_dir) / f"{timestamp}_{seed}.jsonl")


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    parser = argparse.ArgumentParser(description="Piquet self-play runner")
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-s",
        "--seed",
        help="Game seed, 32 hex digits (overrides config)",
    )
    parser.add_argument(
        "-n",
        "--num-deals",
        type=int,
        help="Number of deals to play (overrides config)",
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
        help="Show dealt hands in output",
    )
    parser.add_argument(
        "--deal-log",
        type=Path,
        help="Directory for deal log files (filename auto-generated)",
    )

    args = parser.parse_args(argv)

    config = load_config(args.config)

    # Apply command-line overrides
    if args.seed:
        config.game.seed = args.seed
    if args.num_deals:
        config.game.num_deals = args.num_deals
    if args.verbose:
        config.logging.level = "DEBUG"
    if args.show_hands:
        config.logging.show_hands = True

    setup_logging(config.logging.level)
    display = DealDisplay(show_hands=config.logging.show_hands)

    deal_log_enabled = args.deal_log is not None or config.deal_log.enabled
    deal_log_dir = str(args.deal_log) if args.deal_log else str(Path(config.deal_log.output_path).parent)

    num_deals = min(config.game.num_deals, config.rules.max_deals)
    strategies = {
        PlayerId.PLAYER1: SimpleStrategy(config.rules.elder_max_exchange),
        PlayerId.PLAYER2: SimpleStrategy(config.rules.elder_max_exchange),
    }

    try:
        game = Game.from_config(config)
        seed = game.seed.hex()
        print(f"Seed: {seed}")

        if deal_log_enabled:
            log_path = generate_log_filename(deal_log_dir, seed)
            deal_log_config = DealLogConfig(enabled=True, output_path=log_path)
            print(f"Deal log: {log_path}")
        else:
            deal_log_config = DealLogConfig(enabled=False)

        with DealLogger(deal_log_config) as deal_logger:
            game.deal_logger = deal_logger
            deal_logger.log_game_start(game.state.players, seed)

            for _ in range(num_deals):
                state = run_deal(
                    game,
                    strategies,
                    on_deal=lambda s: display.print_deal_start(s.deal_num, s.players),
                )
                display.print_deal_end(state.deal_num, state.players)

            final = game.state
            deal_logger.log_game_end(final.deal_num, final.players)
            display.print_final_results(final.players)

        return 0

    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 1
    except Exception as e:
        logger.exception(f"Runner error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
