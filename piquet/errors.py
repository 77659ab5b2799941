"""Errors raised for rejected moves."""

from enum import Enum

from piquet.models.game_state import Step


class PiquetErrorKind(str, Enum):
    """Why a move or request was rejected."""

    NOT_YOUR_TURN = "not_your_turn"
    INVALID_FOR_STEP = "invalid_for_step"
    INVALID_COMBINATION = "invalid_combination"
    CARD_NOT_IN_HAND = "card_not_in_hand"
    INVALID_EXCHANGE = "invalid_exchange"
    INVALID_RESPONSE = "invalid_response"
    MUST_FOLLOW_SUIT = "must_follow_suit"

    # Session layer
    ALREADY_CONNECTED = "already_connected"
    NOT_CONNECTED = "not_connected"
    UNKNOWN_COMMAND = "unknown_command"


class PiquetError(Exception):
    """A rule violation. The game state is left unchanged."""

    def __init__(
        self,
        kind: PiquetErrorKind,
        message: str = "",
        step: Step | None = None,
    ):
        self.kind = kind
        self.step = step
        self.message = message or kind.value
        super().__init__(self.message)

    def __repr__(self) -> str:
        if self.step is not None:
            return f"PiquetError({self.kind.name}, step={self.step.name}: {self.message})"
        return f"PiquetError({self.kind.name}: {self.message})"
