"""Game logic."""

from .combinations import (
    best_combination,
    extract,
    get_smaller_combinations,
    is_carte_blanche,
    is_valid_combination,
    points,
    show_declaration_name,
)
from .declaration import DeclarationOutcome, expected_response, resolve
from .engine import Game, SavedGame
from .scoring import move_points
from .validator import MoveValidator, ValidationResult

__all__ = [
    "best_combination",
    "extract",
    "get_smaller_combinations",
    "is_carte_blanche",
    "is_valid_combination",
    "points",
    "show_declaration_name",
    "DeclarationOutcome",
    "expected_response",
    "resolve",
    "Game",
    "SavedGame",
    "move_points",
    "MoveValidator",
    "ValidationResult",
]
