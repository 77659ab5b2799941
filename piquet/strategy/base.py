"""Base strategy class for automatic players.

Defines the interface that all strategies must implement.
"""

from abc import ABC, abstractmethod

from piquet.models.card import Card, Hand
from piquet.models.combination import CombinationType
from piquet.models.game_state import (
    DECLARE_ELDER_STEPS,
    RESPONSE_STEPS,
    GameState,
    Step,
)
from piquet.models.moves import (
    CarteBlanche,
    DeclarationResponse,
    Exchange,
    PlayCard,
    PlayerId,
    PlayerMove,
    PlayerResponse,
    PlayFirst,
)


class Strategy(ABC):
    """Abstract base class for strategies.

    A strategy only reads the state it is given and returns one move.
    """

    @abstractmethod
    def select_exchange(self, state: GameState, player_id: PlayerId) -> Hand:
        """Select the cards to discard.

        Args:
            state: Current game state
            player_id: Player to move

        Returns:
            Hand with the cards to discard
        """

    @abstractmethod
    def select_declaration(
        self, state: GameState, player_id: PlayerId, combination_type: CombinationType
    ) -> PlayerMove:
        """Select the elder's next declaration move for a family."""

    @abstractmethod
    def select_response(
        self, state: GameState, player_id: PlayerId, combination_type: CombinationType
    ) -> DeclarationResponse:
        """Select the younger's answer to the elder's declaration."""

    @abstractmethod
    def select_lead(self, state: GameState, player_id: PlayerId) -> Card:
        """Select the card to lead a trick."""

    @abstractmethod
    def select_follow(self, state: GameState, player_id: PlayerId, led: Card) -> Card:
        """Select the card answering the led card."""

    def wants_carte_blanche(self, state: GameState, player_id: PlayerId) -> bool:
        """Whether to declare carte blanche now (never, by default)."""
        return False

    def select_move(self, state: GameState, player_id: PlayerId) -> PlayerMove:
        """Select a move for the current step.

        Dispatches to the select_* method matching state.step.

        Args:
            state: Current game state
            player_id: Player to move

        Returns:
            The move to submit
        """
        step = state.step
        if step in (Step.EXCHANGE_ELDER, Step.EXCHANGE_YOUNGER):
            if self.wants_carte_blanche(state, player_id):
                return CarteBlanche()
            return Exchange(cards=self.select_exchange(state, player_id))
        if step in DECLARE_ELDER_STEPS:
            return self.select_declaration(state, player_id, DECLARE_ELDER_STEPS[step])
        if step in RESPONSE_STEPS:
            family = RESPONSE_STEPS[step]
            return PlayerResponse(
                combination_type=family,
                response=self.select_response(state, player_id, family),
            )
        if step == Step.PLAY_FIRST_CARD:
            return PlayFirst(card=self.select_lead(state, player_id))
        if step == Step.PLAY_CARDS:
            if state.trick:
                return PlayCard(card=self.select_follow(state, player_id, state.trick[0].card))
            return PlayCard(card=self.select_lead(state, player_id))
        raise ValueError(f"No move to select during {step.name}")
