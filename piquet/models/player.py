"""Player model."""

from pydantic import BaseModel, Field

from .card import Card, Hand
from .combination import Combination, CombinationType
from .moves import PlayerId


class Player(BaseModel):
    """Player state.

    Identity and game points persist for the whole game; everything else is
    reset at the start of each deal.
    """

    player_id: PlayerId
    name: str = "Player"
    game_points: int = 0

    # Deal state
    hand: Hand = Field(default_factory=Hand)
    is_elder: bool = False
    left_until_carte_rouge: Hand = Field(default_factory=Hand)  # Cards not yet covered by a scored combination
    discards: Hand = Field(default_factory=Hand)
    card_played: Card | None = None
    point_candidate: Combination | None = None
    sequence_candidate: Combination | None = None
    set_candidate: Combination | None = None
    deal_points: int = 0
    declaration_points: int = 0  # Carte blanche and combinations only
    deal_tricks: int = 0
    carte_blanche_declared: bool = False
    carte_rouge_awarded: bool = False

    def candidate(self, combination_type: CombinationType) -> Combination | None:
        """Get the candidate held for a family."""
        return getattr(self, f"{combination_type.value}_candidate")

    def set_candidate_for(
        self, combination_type: CombinationType, combination: Combination | None
    ) -> None:
        setattr(self, f"{combination_type.value}_candidate", combination)

    def reset_deal_state(self, hand: Hand) -> None:
        """Reset deal-related state and take a freshly dealt hand."""
        self.hand = hand
        self.left_until_carte_rouge = hand.copy()
        self.discards = Hand.empty()
        self.card_played = None
        self.point_candidate = None
        self.sequence_candidate = None
        self.set_candidate = None
        self.deal_points = 0
        self.declaration_points = 0
        self.deal_tricks = 0
        self.carte_blanche_declared = False
        self.carte_rouge_awarded = False

    def __str__(self) -> str:
        role = "elder" if self.is_elder else "younger"
        return f"{self.name} ({role}): {self.deal_points} pts, rouge left={len(self.left_until_carte_rouge)}"
