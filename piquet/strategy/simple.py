"""Simple strategy implementation.

Strategy:
- Exchange: keep combinations and the longest suit, discard lowest cards
- Declare: announce the best combination of each family in full
- Respond: always answer truthfully
- Lead: highest card
- Follow: cheapest card that wins, else lowest card of the suit, else lowest card
"""

from piquet.game.combinations import best_combination, extract, is_carte_blanche
from piquet.game.declaration import expected_response
from piquet.models.card import Card, Hand
from piquet.models.combination import CombinationType
from piquet.models.game_state import GameState
from piquet.models.moves import (
    Declaration,
    DeclarationCount,
    DeclarationResponse,
    DeclarationUpper,
    PlayerId,
    PlayerMove,
)

from .base import Strategy

YOUNGER_EXCHANGE = 3


def _discard_order(card: Card) -> tuple[int, int, int]:
    return (card.point_value, card.rank, card.suit)


class SimpleStrategy(Strategy):
    """Plays a legal, reasonable deal without looking ahead."""

    def __init__(self, max_exchange: int = 5):
        """Initialize strategy.

        Args:
            max_exchange: Most cards the elder may exchange
        """
        self.max_exchange = max_exchange

    def wants_carte_blanche(self, state: GameState, player_id: PlayerId) -> bool:
        player = state.player(player_id)
        return not player.carte_blanche_declared and is_carte_blanche(player.hand)

    def select_exchange(self, state: GameState, player_id: PlayerId) -> Hand:
        hand = state.player(player_id).hand
        talon = len(state.visible)
        if player_id == state.elder:
            count = min(self.max_exchange, talon)
        else:
            count = min(YOUNGER_EXCHANGE, talon)

        keep: set[Card] = set()
        for family in (CombinationType.SEQUENCE, CombinationType.SET):
            for combination in extract(family, hand):
                keep.update(combination.cards)
        point = best_combination(extract(CombinationType.POINT, hand))
        if point is not None:
            keep.update(point.cards)

        loose = sorted((c for c in hand if c not in keep), key=_discard_order)
        kept = sorted((c for c in hand if c in keep), key=_discard_order)
        return Hand(cards=(loose + kept)[:count])

    def select_declaration(
        self, state: GameState, player_id: PlayerId, combination_type: CombinationType
    ) -> PlayerMove:
        best = best_combination(extract(combination_type, state.player(player_id).hand))
        if best is None:
            return DeclarationCount(combination_type=combination_type, count=0)
        if state.announced_count is None:
            return DeclarationCount(combination_type=combination_type, count=len(best))
        if combination_type != CombinationType.POINT and state.announced_upper is None:
            return DeclarationUpper(
                combination_type=combination_type, rank=best.cards.max_card().rank
            )
        return Declaration(combination=best)

    def select_response(
        self, state: GameState, player_id: PlayerId, combination_type: CombinationType
    ) -> DeclarationResponse:
        elder_declared = state.elder_player().candidate(combination_type)
        own_best = best_combination(extract(combination_type, state.player(player_id).hand))
        return expected_response(elder_declared, own_best)

    def select_lead(self, state: GameState, player_id: PlayerId) -> Card:
        return state.player(player_id).hand.max_card()

    def select_follow(self, state: GameState, player_id: PlayerId, led: Card) -> Card:
        hand = state.player(player_id).hand
        same_suit = hand.cards_of_suit(led.suit)
        if not same_suit:
            return min(hand, key=_discard_order)
        winners = [c for c in same_suit if c.rank > led.rank]
        if winners:
            return min(winners)
        return min(same_suit)
