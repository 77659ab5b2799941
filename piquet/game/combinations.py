"""Combination extraction and scoring."""

from itertools import groupby

from piquet.errors import PiquetError, PiquetErrorKind
from piquet.models.card import FACE_RANKS, Card, Hand, Rank
from piquet.models.combination import Combination, CombinationType

MIN_GROUP_LENGTH = 3  # Pairs and two-card runs never score

SET_NAMES = {
    3: "Trio",
    4: "Quatorze",
}

SEQUENCE_NAMES = {
    3: "Tierce",
    4: "Quart",
    5: "Cinquième",
    6: "Sixième",
    7: "Septième",
    8: "Huitième",
}


def extract(combination_type: CombinationType, hand: Hand) -> list[Combination]:
    """Find the candidate combinations of one family in a hand.

    The hand is not modified.

    Args:
        combination_type: Family to look for
        hand: Cards to analyze

    Returns:
        Candidates in suit order (Point, Sequence) or rank order (Set)
    """
    if combination_type == CombinationType.POINT:
        return _extract_points(hand)
    if combination_type == CombinationType.SEQUENCE:
        return _extract_sequences(hand)
    return _extract_sets(hand)


def _extract_points(hand: Hand) -> list[Combination]:
    """One candidate per suit present."""
    cards = hand.copy()
    cards.sort_by_suit()
    return [
        Combination(combination_type=CombinationType.POINT, cards=Hand(cards=list(group)))
        for _, group in groupby(cards, key=lambda c: c.suit)
    ]


def _extract_sets(hand: Hand) -> list[Combination]:
    """Three or four cards of one rank, Ten or higher."""
    cards = hand.copy()
    cards.sort_by_rank()
    combinations = []
    for rank, group in groupby(cards, key=lambda c: c.rank):
        same_rank = list(group)
        if rank > Rank.NINE and len(same_rank) >= MIN_GROUP_LENGTH:
            combinations.append(
                Combination(combination_type=CombinationType.SET, cards=Hand(cards=same_rank))
            )
    return combinations


def _extract_sequences(hand: Hand) -> list[Combination]:
    """Runs of three or more consecutive cards of one suit."""
    cards = hand.copy()
    cards.sort_by_suit()

    runs: list[list[Card]] = []
    run: list[Card] = []
    for card in cards:
        if run and card.suit == run[-1].suit and card.rank == run[-1].rank.successor:
            run.append(card)
        else:
            runs.append(run)
            run = [card]
    runs.append(run)

    return [
        Combination(combination_type=CombinationType.SEQUENCE, cards=Hand(cards=r))
        for r in runs
        if len(r) >= MIN_GROUP_LENGTH
    ]


def best_combination(candidates: list[Combination]) -> Combination | None:
    """Strongest candidate, None if there are none."""
    if not candidates:
        return None
    return max(candidates)


def is_valid_combination(combination: Combination) -> bool:
    """Check the structural invariant of a combination's family."""
    cards = combination.cards.copy()
    if cards.is_empty():
        return False

    if combination.combination_type == CombinationType.SET:
        ranks = {c.rank for c in cards}
        return (
            len(ranks) == 1
            and ranks.pop() > Rank.NINE
            and len(set(cards)) == len(cards)
            and len(cards) in SET_NAMES
        )

    if len({c.suit for c in cards}) != 1:
        return False
    if combination.combination_type == CombinationType.POINT:
        return len(set(cards)) == len(cards)

    if len(cards) not in SEQUENCE_NAMES:
        return False
    cards.sort_by_rank()
    return all(
        later.rank == earlier.rank.successor
        for earlier, later in zip(cards.cards, cards.cards[1:])
    )


def show_declaration_name(combination: Combination) -> str:
    """Traditional name of a combination (e.g. "Quatorze", "Tierce").

    Raises:
        PiquetError: INVALID_COMBINATION for a Set or Sequence length
            that has no name.
    """
    length = len(combination)
    if combination.combination_type == CombinationType.POINT:
        return f"Point de {length}"

    names = SET_NAMES if combination.combination_type == CombinationType.SET else SEQUENCE_NAMES
    if length not in names:
        raise PiquetError(
            PiquetErrorKind.INVALID_COMBINATION,
            f"No {combination.combination_type.value} of {length} cards",
        )
    return names[length]


def points(combination: Combination) -> int:
    """Points scored by a combination.

    Point: one per card. Set: 14 for a quatorze, 3 for a trio.
    Sequence: its length, plus 10 from five cards up.
    """
    length = len(combination)
    if combination.combination_type == CombinationType.POINT:
        return length
    if combination.combination_type == CombinationType.SET:
        return 14 if length == 4 else 3
    return length + 10 if length > 4 else length


def is_carte_blanche(hand: Hand) -> bool:
    """True if the hand holds no King, Queen or Jack."""
    return not any(c.rank in FACE_RANKS for c in hand)


def get_smaller_combinations(
    reference: Combination | None,
    candidates: list[Combination],
) -> list[Combination]:
    """Candidates strictly weaker than the reference (none without one)."""
    if reference is None:
        return []
    return [c for c in candidates if c < reference]


def matches_candidate(combination: Combination, candidates: list[Combination]) -> bool:
    """Check if a combination holds exactly the cards of one candidate."""
    cards = set(combination.cards)
    return any(
        c.combination_type == combination.combination_type and set(c.cards) == cards
        for c in candidates
    )
