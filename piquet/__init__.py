"""Piquet two-player card game engine."""

__version__ = "0.1.0"

from .errors import PiquetError, PiquetErrorKind
from .game.engine import Game
from .models import (
    Card,
    Combination,
    CombinationType,
    Deck,
    Hand,
    PlayerId,
    Rank,
    Step,
    Suit,
)

__all__ = [
    "Card",
    "Combination",
    "CombinationType",
    "Deck",
    "Game",
    "Hand",
    "PiquetError",
    "PiquetErrorKind",
    "PlayerId",
    "Rank",
    "Step",
    "Suit",
]
