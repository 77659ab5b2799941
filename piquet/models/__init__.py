"""Game models."""

from .card import Card, Deck, Hand, Rank, Suit, create_full_deck
from .combination import Combination, CombinationType
from .game_state import DeclarationWinner, GameState, PlayedCard, Step
from .moves import DealRecord, DeclarationResponse, MoveRecord, PlayerId, PlayerMove
from .player import Player

__all__ = [
    "Card",
    "Deck",
    "Hand",
    "Rank",
    "Suit",
    "create_full_deck",
    "Combination",
    "CombinationType",
    "DeclarationWinner",
    "GameState",
    "PlayedCard",
    "Step",
    "DealRecord",
    "DeclarationResponse",
    "MoveRecord",
    "PlayerId",
    "PlayerMove",
    "Player",
]
