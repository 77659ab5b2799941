"""Formatters for deal log output."""

from typing import Any, Iterable

from piquet.models.card import Card, Hand, Rank, Suit
from piquet.models.moves import MoveRecord

# Suit codes for log output
SUIT_CODES: dict[Suit, str] = {
    Suit.HEART: "H",
    Suit.DIAMOND: "D",
    Suit.SPADE: "S",
    Suit.CLUB: "C",
}

RANK_CODES: dict[Rank, str] = {
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}


def format_card(card: Card) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Formatted string (e.g., "KH" for King of hearts).
    """
    return f"{RANK_CODES[card.rank]}{SUIT_CODES[card.suit]}"


def format_cards(cards: Hand | Iterable[Card]) -> str:
    """Format cards to a comma-separated string ("" if none)."""
    return ",".join(format_card(c) for c in cards)


def format_move(record: MoveRecord) -> dict[str, Any]:
    """Format a move record as a JSON-ready dict with card codes."""
    move = record.move.model_dump(mode="json", exclude={"cards", "card", "combination"})
    if hasattr(record.move, "card"):
        move["card"] = format_card(record.move.card)
    if hasattr(record.move, "cards"):
        move["cards"] = format_cards(record.move.cards)
    if hasattr(record.move, "combination"):
        move["combination_type"] = record.move.combination.combination_type.value
        move["cards"] = format_cards(record.move.combination.cards)
    return {
        "player": record.player.name.lower(),
        "move": move,
        "points": record.points,
    }
