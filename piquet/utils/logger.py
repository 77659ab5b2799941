"""Logging utilities and deal summary display."""

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from piquet.models.player import Player


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


class DealDisplay:
    """Print deal results to stdout."""

    def __init__(self, show_hands: bool = False):
        """Initialize display.

        Args:
            show_hands: Whether to print the dealt hands
        """
        self.show_hands = show_hands

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 60)

    def print_deal_start(self, deal_num: int, players: list["Player"]) -> None:
        """Print deal header and, if enabled, the hands."""
        self.print_separator()
        print(f"DEAL {deal_num}")
        self.print_separator()
        if not self.show_hands:
            return
        for player in players:
            role = "elder" if player.is_elder else "younger"
            print(f"  {player.name} ({role}): {player.hand}")

    def print_deal_end(self, deal_num: int, players: list["Player"]) -> None:
        """Print deal points and tricks."""
        print(f"\nDeal {deal_num} finished!")
        for player in players:
            print(
                f"  {player.name}: {player.deal_points} points, "
                f"{player.deal_tricks} tricks"
            )

    def print_final_results(self, players: list["Player"]) -> None:
        """Print game points, best first."""
        self.print_separator()
        print("FINAL RESULTS")
        self.print_separator()
        ranked = sorted(players, key=lambda p: p.game_points, reverse=True)
        for rank, player in enumerate(ranked, 1):
            print(f"  #{rank}: {player.name} - {player.game_points} points")
