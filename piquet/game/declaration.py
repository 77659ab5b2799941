"""Declaration protocol: elder against younger, one family at a time."""

import logging
from dataclasses import dataclass, field

from piquet.models.combination import Combination, CombinationType
from piquet.models.game_state import DeclarationWinner
from piquet.models.moves import DeclarationResponse

from .combinations import get_smaller_combinations, points

logger = logging.getLogger(__name__)


@dataclass
class DeclarationOutcome:
    """Result of resolving one family.

    `scored` holds every combination credited to the winner: the winning
    one first, then the smaller ones it may also declare.
    """

    combination_type: CombinationType
    winner: DeclarationWinner
    combination: Combination | None = None
    scored: list[Combination] = field(default_factory=list)

    @property
    def points(self) -> int:
        return sum(points(c) for c in self.scored)


def expected_response(
    elder_declared: Combination | None,
    younger_best: Combination | None,
) -> DeclarationResponse:
    """Truthful answer of younger to the elder's declaration."""
    if younger_best is None:
        return DeclarationResponse.GOOD
    if elder_declared is None:
        return DeclarationResponse.NOT_GOOD

    order = elder_declared.compare(younger_best)
    if order > 0:
        return DeclarationResponse.GOOD
    if order < 0:
        return DeclarationResponse.NOT_GOOD
    return DeclarationResponse.EQUALS


def _scored(
    combination_type: CombinationType,
    best: Combination,
    reference: Combination | None,
    candidates: list[Combination],
) -> list[Combination]:
    """Winner's best combination, plus the smaller Sequences or Sets it holds.

    Only one Point is ever scored.
    """
    if combination_type == CombinationType.POINT:
        return [best]
    return [best, *get_smaller_combinations(reference, candidates)]


def resolve(
    combination_type: CombinationType,
    elder_best: Combination | None,
    younger_best: Combination | None,
    elder_candidates: list[Combination],
    younger_candidates: list[Combination],
) -> DeclarationOutcome:
    """Decide who scores a family.

    A tie scores nothing for either side, smaller combinations included.

    Args:
        combination_type: Family being resolved
        elder_best: Combination declared by the elder (None if nothing)
        younger_best: Younger's best candidate (None if nothing)
        elder_candidates: All elder candidates of the family
        younger_candidates: All younger candidates of the family

    Returns:
        DeclarationOutcome
    """
    if elder_best is None and younger_best is None:
        outcome = DeclarationOutcome(combination_type, DeclarationWinner.NOBODY)
    elif younger_best is None:
        outcome = DeclarationOutcome(
            combination_type,
            DeclarationWinner.ELDER,
            elder_best,
            _scored(combination_type, elder_best, None, elder_candidates),
        )
    elif elder_best is None:
        outcome = DeclarationOutcome(
            combination_type,
            DeclarationWinner.YOUNGER,
            younger_best,
            _scored(combination_type, younger_best, None, younger_candidates),
        )
    else:
        order = elder_best.compare(younger_best)
        if order > 0:
            outcome = DeclarationOutcome(
                combination_type,
                DeclarationWinner.ELDER,
                elder_best,
                _scored(combination_type, elder_best, younger_best, elder_candidates),
            )
        elif order < 0:
            outcome = DeclarationOutcome(
                combination_type,
                DeclarationWinner.YOUNGER,
                younger_best,
                _scored(combination_type, younger_best, elder_best, younger_candidates),
            )
        else:
            outcome = DeclarationOutcome(combination_type, DeclarationWinner.TIE)

    logger.debug(
        f"{combination_type.value}: {outcome.winner.value} scores {outcome.points}"
    )
    return outcome
