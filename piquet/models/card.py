"""Card, Hand and Deck models."""

import random
from enum import IntEnum
from typing import Iterator

from pydantic import BaseModel, Field, field_validator


class Suit(IntEnum):
    """Card suit.

    The order only matters as a tie-break between otherwise equal cards.
    """

    HEART = 0
    DIAMOND = 1
    SPADE = 2
    CLUB = 3


class Rank(IntEnum):
    """Card rank of the 32-card piquet pack, weakest first.

    Value is the face value (Jack=11 .. Ace=14).
    """

    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def successor(self) -> "Rank | None":
        """Next rank up, or None for the Ace."""
        if self == Rank.ACE:
            return None
        return Rank(self + 1)

    @property
    def point_value(self) -> int:
        """Value used when counting the Point: Ace 11, court cards 10."""
        if self == Rank.ACE:
            return 11
        return min(int(self), 10)


RANK_NAMES = {
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

SUIT_SYMBOLS = {
    Suit.HEART: "♥",
    Suit.DIAMOND: "♦",
    Suit.SPADE: "♠",
    Suit.CLUB: "♣",
}

FACE_RANKS = (Rank.JACK, Rank.QUEEN, Rank.KING)

DECK_SIZE = 32


class Card(BaseModel, frozen=True):
    """Single card. Ordered by rank first, then suit."""

    rank: Rank
    suit: Suit

    @property
    def sort_key(self) -> tuple[int, int]:
        return (self.rank, self.suit)

    @property
    def point_value(self) -> int:
        return self.rank.point_value

    def __lt__(self, other: "Card") -> bool:
        return self.sort_key < other.sort_key

    def __le__(self, other: "Card") -> bool:
        return self.sort_key <= other.sort_key

    def __gt__(self, other: "Card") -> bool:
        return self.sort_key > other.sort_key

    def __ge__(self, other: "Card") -> bool:
        return self.sort_key >= other.sort_key

    def __str__(self) -> str:
        return f"{RANK_NAMES[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    def __repr__(self) -> str:
        return str(self)


class Hand(BaseModel):
    """Ordered list of cards held by a player (or any pile of cards)."""

    cards: list[Card] = Field(default_factory=list)

    @classmethod
    def empty(cls) -> "Hand":
        return cls()

    def sort_by_suit(self) -> None:
        """Sort in place by suit, then rank."""
        self.cards.sort(key=lambda c: (c.suit, c.rank))

    def sort_by_rank(self) -> None:
        """Sort in place by rank, then suit."""
        self.cards.sort(key=lambda c: (c.rank, c.suit))

    def max_card(self) -> Card | None:
        """Highest card under the card ordering, None if empty."""
        if not self.cards:
            return None
        return max(self.cards)

    def point_value(self) -> int:
        """Sum of the point values of all cards."""
        return sum(c.point_value for c in self.cards)

    def add(self, card: Card) -> None:
        self.cards.append(card)

    def remove(self, card: Card) -> None:
        """Remove a card. Raises ValueError if it is not held."""
        self.cards.remove(card)

    def contains_all(self, cards: "Hand | list[Card]") -> bool:
        """Check if every given card is held."""
        return all(c in self.cards for c in cards)

    def cards_of_suit(self, suit: Suit) -> list[Card]:
        return [c for c in self.cards if c.suit == suit]

    def copy(self) -> "Hand":
        """Create an independent copy of this hand."""
        return Hand(cards=list(self.cards))

    def is_empty(self) -> bool:
        return not self.cards

    def __iter__(self) -> Iterator[Card]:  # type: ignore[override]
        return iter(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __contains__(self, card: Card) -> bool:
        return card in self.cards

    def __str__(self) -> str:
        return "[" + ", ".join(str(c) for c in self.cards) + "]"


def _full_pack() -> list[Card]:
    return [Card(rank=rank, suit=suit) for suit in Suit for rank in Rank]


class Deck(BaseModel):
    """Pack of cards.

    `Deck()` is the full 32-card pack, sorted by suit then rank. Passing
    `cards` builds a smaller pile (the talon, the remains of a deal); a card
    never appears twice.
    """

    cards: list[Card] = Field(default_factory=_full_pack)

    @field_validator("cards")
    @classmethod
    def _check_unique(cls, cards: list[Card]) -> list[Card]:
        if len(cards) > DECK_SIZE:
            raise ValueError(f"A deck holds at most {DECK_SIZE} cards, got {len(cards)}")
        if len(set(cards)) != len(cards):
            raise ValueError("A deck cannot contain the same card twice")
        return cards

    @classmethod
    def empty(cls) -> "Deck":
        """Zero-card pile (used for the talon before a deal)."""
        return cls(cards=[])

    def shuffle(self, rng: random.Random) -> None:
        """Shuffle in place with the given generator."""
        rng.shuffle(self.cards)

    def draw(self, count: int) -> list[Card]:
        """Remove and return the first `count` cards."""
        if count > len(self.cards):
            raise ValueError(f"Cannot draw {count} cards from {len(self.cards)}")
        drawn = self.cards[:count]
        del self.cards[:count]
        return drawn

    def __iter__(self) -> Iterator[Card]:  # type: ignore[override]
        return iter(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __contains__(self, card: Card) -> bool:
        return card in self.cards


def create_full_deck() -> Deck:
    """Create the 32-card piquet pack, sorted by suit then rank."""
    deck = Deck()
    if len(deck) != DECK_SIZE:
        raise ValueError(f"Expected {DECK_SIZE} cards, built {len(deck)}")
    return deck
