"""Game state models."""

from enum import Enum, IntEnum

from pydantic import BaseModel, Field

from .card import Card, Deck, Rank
from .combination import Combination, CombinationType
from .moves import DealRecord, MoveRecord, PlayerId
from .player import Player


class Step(IntEnum):
    """Phase of a deal, in play order."""

    START = 0
    DEAL = 1
    EXCHANGE_ELDER = 2
    EXCHANGE_YOUNGER = 3
    DECLARE_POINT_ELDER = 4
    DECLARE_POINT_RESPONSE = 5
    SET_POINTS_POINT_ELDER = 6
    DECLARE_SEQUENCE_ELDER = 7
    DECLARE_SEQUENCE_RESPONSE = 8
    SET_POINTS_SEQUENCE_ELDER = 9
    DECLARE_SET_ELDER = 10
    DECLARE_SET_RESPONSE = 11
    SET_POINTS_SET_ELDER = 12
    PLAY_FIRST_CARD = 13
    SET_POINTS_POINT_YOUNGER = 14
    SET_POINTS_SEQUENCE_YOUNGER = 15
    SET_POINTS_SET_YOUNGER = 16
    PLAY_CARDS = 17
    PLAY_END = 18
    END = 19

    @property
    def successor(self) -> "Step | None":
        """Next step, or None after END."""
        if self == Step.END:
            return None
        return Step(self + 1)


# Family discussed at each declaration step
DECLARE_ELDER_STEPS = {
    Step.DECLARE_POINT_ELDER: CombinationType.POINT,
    Step.DECLARE_SEQUENCE_ELDER: CombinationType.SEQUENCE,
    Step.DECLARE_SET_ELDER: CombinationType.SET,
}

RESPONSE_STEPS = {
    Step.DECLARE_POINT_RESPONSE: CombinationType.POINT,
    Step.DECLARE_SEQUENCE_RESPONSE: CombinationType.SEQUENCE,
    Step.DECLARE_SET_RESPONSE: CombinationType.SET,
}

SET_POINTS_ELDER_STEPS = {
    Step.SET_POINTS_POINT_ELDER: CombinationType.POINT,
    Step.SET_POINTS_SEQUENCE_ELDER: CombinationType.SEQUENCE,
    Step.SET_POINTS_SET_ELDER: CombinationType.SET,
}

SET_POINTS_YOUNGER_STEPS = {
    Step.SET_POINTS_POINT_YOUNGER: CombinationType.POINT,
    Step.SET_POINTS_SEQUENCE_YOUNGER: CombinationType.SEQUENCE,
    Step.SET_POINTS_SET_YOUNGER: CombinationType.SET,
}

# Steps the engine passes through on its own
ENGINE_STEPS = frozenset(
    {Step.DEAL, Step.PLAY_END, *SET_POINTS_ELDER_STEPS, *SET_POINTS_YOUNGER_STEPS}
)


class DeclarationWinner(str, Enum):
    """Outcome of one declaration family."""

    ELDER = "elder"
    YOUNGER = "younger"
    TIE = "tie"
    NOBODY = "nobody"


class PlayedCard(BaseModel):
    """A card laid on the open trick."""

    player: PlayerId
    card: Card


class GameState(BaseModel):
    """Overall game state (one game, several deals)."""

    # Game progress
    deal_num: int = 0  # 0 before the first deal
    deal_moves: list[MoveRecord] = Field(default_factory=list)
    deals: list[DealRecord] = Field(default_factory=list)

    deck: Deck = Field(default_factory=Deck)
    visible: Deck = Field(default_factory=Deck.empty)  # Talon
    step: Step = Step.START

    player1: Player
    player2: Player
    elder: PlayerId | None = None
    is_elder_to_play: bool = True

    # Declarations
    point_winner: DeclarationWinner = DeclarationWinner.NOBODY
    point_combination: Combination | None = None
    sequence_winner: DeclarationWinner = DeclarationWinner.NOBODY
    sequence_combination: Combination | None = None
    set_winner: DeclarationWinner = DeclarationWinner.NOBODY
    set_combination: Combination | None = None
    announced_count: int | None = None
    announced_upper: Rank | None = None
    scored: dict[CombinationType, list[Combination]] = Field(default_factory=dict)  # Combinations credited per family

    # Play
    trick: list[PlayedCard] = Field(default_factory=list)
    tricks_played: int = 0
    bonus_awarded: bool = False  # Pique or repique already scored this deal

    def player(self, player_id: PlayerId) -> Player:
        return self.player1 if player_id == PlayerId.PLAYER1 else self.player2

    @property
    def players(self) -> list[Player]:
        return [self.player1, self.player2]

    @property
    def younger(self) -> PlayerId | None:
        if self.elder is None:
            return None
        return self.elder.other

    def elder_player(self) -> Player:
        if self.elder is None:
            raise ValueError("Elder has not been chosen")
        return self.player(self.elder)

    def younger_player(self) -> Player:
        if self.elder is None:
            raise ValueError("Elder has not been chosen")
        return self.player(self.elder.other)

    def role_of(self, player_id: PlayerId) -> DeclarationWinner:
        """Elder or younger, as used in declaration outcomes."""
        return DeclarationWinner.ELDER if player_id == self.elder else DeclarationWinner.YOUNGER

    def has_won_family(self, player_id: PlayerId) -> bool:
        """Whether a family resolved so far went to this player."""
        role = self.role_of(player_id)
        return any(self.winner(f) == role for f in CombinationType)

    def turn_owner(self) -> PlayerId | None:
        """Player expected to move, None when nobody can move."""
        if self.elder is None or self.step in (Step.START, Step.END) or self.step in ENGINE_STEPS:
            return None
        return self.elder if self.is_elder_to_play else self.elder.other

    def winner(self, combination_type: CombinationType) -> DeclarationWinner:
        return getattr(self, f"{combination_type.value}_winner")

    def set_outcome(
        self,
        combination_type: CombinationType,
        winner: DeclarationWinner,
        combination: Combination | None,
    ) -> None:
        """Record the winner and winning combination of a family."""
        setattr(self, f"{combination_type.value}_winner", winner)
        setattr(self, f"{combination_type.value}_combination", combination)

    def reset_for_new_deal(self) -> None:
        """Reset deal state; players and game points are kept."""
        self.deal_moves = []
        self.visible = Deck.empty()
        self.step = Step.START
        self.is_elder_to_play = True
        for combination_type in CombinationType:
            self.set_outcome(combination_type, DeclarationWinner.NOBODY, None)
        self.announced_count = None
        self.announced_upper = None
        self.scored = {}
        self.trick = []
        self.tricks_played = 0
        self.bonus_awarded = False

    def __str__(self) -> str:
        return f"Deal {self.deal_num}, {self.step.name}"
