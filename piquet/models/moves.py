"""Player moves.

A move is a tagged variant: every model carries a literal `kind` so that a
list of moves can be validated back from JSON.
"""

from enum import Enum, IntEnum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from .card import Card, Hand, Rank
from .combination import Combination, CombinationType


class PlayerId(IntEnum):
    """Seat of a player in the game."""

    PLAYER1 = 0
    PLAYER2 = 1

    @property
    def other(self) -> "PlayerId":
        return PlayerId(1 - self)


class DeclarationResponse(str, Enum):
    """Younger's answer to the elder's declaration."""

    GOOD = "good"  # Elder's declaration stands
    NOT_GOOD = "not_good"  # Younger holds better
    EQUALS = "equals"


class CarteBlanche(BaseModel, frozen=True):
    kind: Literal["carte_blanche"] = "carte_blanche"


class CarteRouge(BaseModel, frozen=True):
    kind: Literal["carte_rouge"] = "carte_rouge"


class Exchange(BaseModel, frozen=True):
    """Cards discarded, replaced by the same number taken from the talon."""

    kind: Literal["exchange"] = "exchange"
    cards: Hand


class DeclarationCount(BaseModel, frozen=True):
    """Announce the number of cards of a combination (0 = nothing)."""

    kind: Literal["declaration_count"] = "declaration_count"
    combination_type: CombinationType
    count: int = Field(ge=0)


class DeclarationUpper(BaseModel, frozen=True):
    """Announce the highest rank of the combination counted before."""

    kind: Literal["declaration_upper"] = "declaration_upper"
    combination_type: CombinationType
    rank: Rank


class PlayerResponse(BaseModel, frozen=True):
    kind: Literal["player_response"] = "player_response"
    combination_type: CombinationType
    response: DeclarationResponse


class Declaration(BaseModel, frozen=True):
    kind: Literal["declaration"] = "declaration"
    combination: Combination


class Repique(BaseModel, frozen=True):
    kind: Literal["repique"] = "repique"


class PlayFirst(BaseModel, frozen=True):
    kind: Literal["play_first"] = "play_first"
    card: Card


class Pique(BaseModel, frozen=True):
    kind: Literal["pique"] = "pique"


class WinAsSecond(BaseModel, frozen=True):
    kind: Literal["win_as_second"] = "win_as_second"


class WinLastTrick(BaseModel, frozen=True):
    kind: Literal["win_last_trick"] = "win_last_trick"


class PlayCard(BaseModel, frozen=True):
    kind: Literal["play_card"] = "play_card"
    card: Card


class WinCards(BaseModel, frozen=True):
    kind: Literal["win_cards"] = "win_cards"


class Capot(BaseModel, frozen=True):
    kind: Literal["capot"] = "capot"


MOVE_TYPES = (
    CarteBlanche,
    CarteRouge,
    Exchange,
    DeclarationCount,
    DeclarationUpper,
    PlayerResponse,
    Declaration,
    Repique,
    PlayFirst,
    Pique,
    WinAsSecond,
    WinLastTrick,
    PlayCard,
    WinCards,
    Capot,
)

PlayerMove = Annotated[Union[MOVE_TYPES], Field(discriminator="kind")]

# Moves only the engine awards; a player can never submit them.
AWARDED_MOVES = (CarteRouge, Repique, Pique, WinAsSecond, WinLastTrick, WinCards, Capot)


class MoveRecord(BaseModel):
    """A move accepted (or awarded) during a deal and the points it credited."""

    player: PlayerId
    move: PlayerMove
    points: int = 0


class DealRecord(BaseModel):
    """Move log of one completed deal."""

    deal: int
    moves: list[MoveRecord] = Field(default_factory=list)
