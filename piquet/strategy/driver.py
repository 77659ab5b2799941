"""Drive deals with automatic players."""

import logging
from typing import Callable

from piquet.game.engine import Game
from piquet.models.game_state import GameState, Step
from piquet.models.moves import PlayerId

from .base import Strategy

logger = logging.getLogger(__name__)


def run_deal(
    game: Game,
    strategies: dict[PlayerId, Strategy],
    on_deal: Callable[[GameState], None] | None = None,
) -> GameState:
    """Deal and play one deal to its end.

    Args:
        game: Game at Start or End
        strategies: Strategy of each player
        on_deal: Called with the state right after the cards are dealt

    Returns:
        State after the deal
    """
    game.deal()
    if on_deal:
        on_deal(game.state)
    while game.step != Step.END:
        player_id = game.current_player
        if player_id is None:
            raise RuntimeError(f"Nobody to move during {game.step.name}")
        move = strategies[player_id].select_move(game.state, player_id)
        game.apply_move(player_id, move)
    return game.state


def run_game(
    game: Game,
    strategies: dict[PlayerId, Strategy],
    num_deals: int,
) -> GameState:
    """Play several deals in a row.

    Returns:
        State after the last deal
    """
    state = game.state
    for _ in range(num_deals):
        state = run_deal(game, strategies)
        logger.debug(f"Deal {state.deal_num} finished")
    return state
