"""Automatic players."""

from .base import Strategy
from .driver import run_deal, run_game
from .simple import SimpleStrategy

__all__ = [
    "SimpleStrategy",
    "Strategy",
    "run_deal",
    "run_game",
]
