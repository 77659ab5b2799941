"""Move validation for submitted moves."""

from dataclasses import dataclass

from piquet.config import RulesConfig
from piquet.errors import PiquetErrorKind
from piquet.models.card import Card
from piquet.models.combination import CombinationType
from piquet.models.game_state import (
    DECLARE_ELDER_STEPS,
    RESPONSE_STEPS,
    GameState,
    Step,
)
from piquet.models.moves import (
    AWARDED_MOVES,
    MOVE_TYPES,
    CarteBlanche,
    Declaration,
    DeclarationCount,
    DeclarationUpper,
    Exchange,
    PlayCard,
    PlayerId,
    PlayerMove,
    PlayerResponse,
    PlayFirst,
)

from .combinations import (
    best_combination,
    extract,
    is_carte_blanche,
    is_valid_combination,
    matches_candidate,
)
from .declaration import expected_response

EXCHANGE_STEPS = (Step.EXCHANGE_ELDER, Step.EXCHANGE_YOUNGER)


@dataclass
class ValidationResult:
    """Result of move validation."""

    is_valid: bool
    error: PiquetErrorKind | None = None
    error_message: str = ""


def _reject(error: PiquetErrorKind, message: str) -> ValidationResult:
    return ValidationResult(is_valid=False, error=error, error_message=message)


class MoveValidator:
    """Validates submitted moves against the game state.

    Nothing is modified; the engine applies a move only after it passed.
    """

    def __init__(self, rules: RulesConfig | None = None):
        """Initialize validator.

        Args:
            rules: Rules configuration (defaults if not provided)
        """
        self.rules = rules or RulesConfig()

    def validate(
        self,
        state: GameState,
        player_id: PlayerId,
        move: PlayerMove,
    ) -> ValidationResult:
        """Validate a move.

        Args:
            state: Current game state
            player_id: Player submitting the move
            move: Submitted move

        Returns:
            ValidationResult
        """
        step = state.step

        if not isinstance(move, MOVE_TYPES):
            return _reject(PiquetErrorKind.UNKNOWN_COMMAND, f"Unknown move: {move!r}")

        if isinstance(move, AWARDED_MOVES) or not self._allowed_in_step(step, move):
            return _reject(
                PiquetErrorKind.INVALID_FOR_STEP,
                f"{type(move).__name__} is not allowed during {step.name}",
            )

        if state.turn_owner() != player_id:
            return _reject(PiquetErrorKind.NOT_YOUR_TURN, f"Not the turn of {player_id.name}")

        if isinstance(move, CarteBlanche):
            return self._check_carte_blanche(state, player_id)
        if isinstance(move, Exchange):
            return self.validate_exchange(state, player_id, move)
        if isinstance(move, (DeclarationCount, DeclarationUpper, Declaration)):
            return self._check_declaration(state, player_id, move)
        if isinstance(move, PlayerResponse):
            return self._check_response(state, player_id, move)
        if isinstance(move, (PlayFirst, PlayCard)):
            return self._check_card_play(state, player_id, move.card)

        return _reject(PiquetErrorKind.UNKNOWN_COMMAND, f"Unknown move: {move!r}")

    def _allowed_in_step(self, step: Step, move: PlayerMove) -> bool:
        if isinstance(move, (CarteBlanche, Exchange)):
            return step in EXCHANGE_STEPS
        if isinstance(move, (DeclarationCount, DeclarationUpper, Declaration)):
            return DECLARE_ELDER_STEPS.get(step) == self._family_of(move)
        if isinstance(move, PlayerResponse):
            return RESPONSE_STEPS.get(step) == move.combination_type
        if isinstance(move, PlayFirst):
            return step == Step.PLAY_FIRST_CARD
        if isinstance(move, PlayCard):
            return step == Step.PLAY_CARDS
        return False

    @staticmethod
    def _family_of(move: DeclarationCount | DeclarationUpper | Declaration) -> CombinationType:
        if isinstance(move, Declaration):
            return move.combination.combination_type
        return move.combination_type

    def _check_carte_blanche(self, state: GameState, player_id: PlayerId) -> ValidationResult:
        player = state.player(player_id)
        if player.carte_blanche_declared:
            return _reject(PiquetErrorKind.INVALID_FOR_STEP, "Carte blanche already declared")
        if not is_carte_blanche(player.hand):
            return _reject(PiquetErrorKind.INVALID_COMBINATION, "Hand holds a face card")
        return ValidationResult(is_valid=True)

    def validate_exchange(
        self,
        state: GameState,
        player_id: PlayerId,
        move: Exchange,
    ) -> ValidationResult:
        """Validate the cards a player discards.

        The elder must exchange at least one card and at most
        `elder_max_exchange`; the younger may take up to what is left.
        """
        player = state.player(player_id)
        talon = len(state.visible)
        count = len(move.cards)

        if state.step == Step.EXCHANGE_ELDER:
            low, high = 1, min(self.rules.elder_max_exchange, talon)
        else:
            low, high = 0, talon

        if not low <= count <= high:
            return _reject(
                PiquetErrorKind.INVALID_EXCHANGE,
                f"Must exchange between {low} and {high} cards, got {count}",
            )
        if len(set(move.cards)) != count:
            return _reject(PiquetErrorKind.INVALID_EXCHANGE, "Same card discarded twice")
        if not player.hand.contains_all(move.cards):
            return _reject(PiquetErrorKind.CARD_NOT_IN_HAND, "Discarded card not in hand")
        return ValidationResult(is_valid=True)

    def _check_declaration(
        self,
        state: GameState,
        player_id: PlayerId,
        move: DeclarationCount | DeclarationUpper | Declaration,
    ) -> ValidationResult:
        player = state.player(player_id)
        family = DECLARE_ELDER_STEPS[state.step]
        candidates = extract(family, player.hand)

        if isinstance(move, DeclarationCount):
            if state.announced_count is not None:
                return _reject(PiquetErrorKind.INVALID_FOR_STEP, "Count already announced")
            if move.count and not any(len(c) == move.count for c in candidates):
                return _reject(
                    PiquetErrorKind.INVALID_COMBINATION,
                    f"No {family.value} of {move.count} cards in hand",
                )
            return ValidationResult(is_valid=True)

        if isinstance(move, DeclarationUpper):
            if state.announced_count is None or state.announced_upper is not None:
                return _reject(
                    PiquetErrorKind.INVALID_FOR_STEP, "Upper card must follow a count"
                )
            if not any(
                len(c) == state.announced_count and c.cards.max_card().rank == move.rank
                for c in candidates
            ):
                return _reject(
                    PiquetErrorKind.INVALID_COMBINATION,
                    f"No {family.value} of {state.announced_count} cards up to {move.rank.name}",
                )
            return ValidationResult(is_valid=True)

        combination = move.combination
        if not is_valid_combination(combination):
            return _reject(PiquetErrorKind.INVALID_COMBINATION, f"Not a valid {family.value}")
        if not player.hand.contains_all(combination.cards):
            return _reject(PiquetErrorKind.CARD_NOT_IN_HAND, "Declared card not in hand")
        if not matches_candidate(combination, candidates):
            return _reject(
                PiquetErrorKind.INVALID_COMBINATION,
                f"Declared {family.value} is not a complete combination of the hand",
            )
        if state.announced_count is not None and len(combination) != state.announced_count:
            return _reject(
                PiquetErrorKind.INVALID_COMBINATION,
                f"Announced {state.announced_count} cards, declared {len(combination)}",
            )
        if (
            state.announced_upper is not None
            and combination.cards.max_card().rank != state.announced_upper
        ):
            return _reject(
                PiquetErrorKind.INVALID_COMBINATION,
                f"Announced {state.announced_upper.name} as upper card",
            )
        return ValidationResult(is_valid=True)

    def _check_response(
        self,
        state: GameState,
        player_id: PlayerId,
        move: PlayerResponse,
    ) -> ValidationResult:
        family = move.combination_type
        elder_declared = state.elder_player().candidate(family)
        younger_best = best_combination(extract(family, state.player(player_id).hand))
        expected = expected_response(elder_declared, younger_best)
        if move.response != expected:
            return _reject(
                PiquetErrorKind.INVALID_RESPONSE,
                f"Answered {move.response.value}, hand says {expected.value}",
            )
        return ValidationResult(is_valid=True)

    def _check_card_play(
        self,
        state: GameState,
        player_id: PlayerId,
        card: Card,
    ) -> ValidationResult:
        hand = state.player(player_id).hand
        if card not in hand:
            return _reject(PiquetErrorKind.CARD_NOT_IN_HAND, f"{card} not in hand")

        if state.trick:
            led = state.trick[0].card
            if card.suit != led.suit and hand.cards_of_suit(led.suit):
                return _reject(
                    PiquetErrorKind.MUST_FOLLOW_SUIT, f"Must follow {led.suit.name}"
                )
        return ValidationResult(is_valid=True)
