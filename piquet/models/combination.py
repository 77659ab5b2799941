"""Combination model and its ordering."""

from enum import Enum

from pydantic import BaseModel

from .card import Hand


class CombinationType(str, Enum):
    """Family of a scoring combination."""

    POINT = "point"  # Cards of one suit
    SEQUENCE = "sequence"  # Consecutive ranks of one suit
    SET = "set"  # Same rank, Ten or higher


class Combination(BaseModel):
    """A scoring group of cards.

    Equality (==) is structural. The ordering operators compare strength
    within one family: more cards always wins, then the Point compares
    summed point values while Sequence and Set compare their highest card.
    Comparing two different families raises ValueError.
    """

    combination_type: CombinationType
    cards: Hand

    def __len__(self) -> int:
        return len(self.cards)

    def tie_break(self) -> tuple[int, ...]:
        """Value compared between two combinations of the same length."""
        if self.combination_type == CombinationType.POINT:
            return (self.cards.point_value(),)
        top = self.cards.max_card()
        if top is None:
            return ()
        return top.sort_key

    def compare(self, other: "Combination") -> int:
        """Return -1, 0 or 1 as self is weaker, equal or stronger than other."""
        if self.combination_type != other.combination_type:
            raise ValueError(
                f"Cannot compare {self.combination_type.value} with "
                f"{other.combination_type.value}"
            )
        mine = (len(self), self.tie_break())
        theirs = (len(other), other.tie_break())
        if mine == theirs:
            return 0
        return 1 if mine > theirs else -1

    def __lt__(self, other: "Combination") -> bool:
        return self.compare(other) < 0

    def __le__(self, other: "Combination") -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: "Combination") -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: "Combination") -> bool:
        return self.compare(other) >= 0

    def __str__(self) -> str:
        return f"{self.combination_type.value}: {self.cards}"
