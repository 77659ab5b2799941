"""Fixed point values of moves and deal bonuses."""

from piquet.errors import PiquetError, PiquetErrorKind
from piquet.models.moves import (
    Capot,
    CarteBlanche,
    CarteRouge,
    Declaration,
    DeclarationCount,
    DeclarationUpper,
    Exchange,
    Pique,
    PlayCard,
    PlayerMove,
    PlayerResponse,
    PlayFirst,
    Repique,
    WinAsSecond,
    WinCards,
    WinLastTrick,
)

from .combinations import points

CARTE_BLANCHE = 10
CARTE_ROUGE = 20
PIQUE = 30
REPIQUE = 60
WIN_CARDS = 10
CAPOT = 40
LEAD_FIRST = 1
WIN_AS_SECOND = 1
WIN_LAST_TRICK = 1

TRICKS_PER_DEAL = 12

FIXED_POINTS: dict[type, int] = {
    CarteBlanche: CARTE_BLANCHE,
    CarteRouge: CARTE_ROUGE,
    Pique: PIQUE,
    Repique: REPIQUE,
    WinCards: WIN_CARDS,
    Capot: CAPOT,
    PlayFirst: LEAD_FIRST,
    WinAsSecond: WIN_AS_SECOND,
    WinLastTrick: WIN_LAST_TRICK,
    Exchange: 0,
    DeclarationCount: 0,
    DeclarationUpper: 0,
    PlayerResponse: 0,
    PlayCard: 0,
}


def move_points(move: PlayerMove) -> int:
    """Points a move is worth when it scores.

    Raises:
        PiquetError: UNKNOWN_COMMAND for an object that is not a move.
    """
    if isinstance(move, Declaration):
        return points(move.combination)
    try:
        return FIXED_POINTS[type(move)]
    except KeyError:
        raise PiquetError(
            PiquetErrorKind.UNKNOWN_COMMAND, f"Unknown move: {move!r}"
        ) from None
