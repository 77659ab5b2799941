"""Deal state machine for Piquet."""

from __future__ import annotations

import logging
import random
import secrets

from pydantic import BaseModel

from piquet.config import Config, ElderPolicy, RulesConfig
from piquet.errors import PiquetError, PiquetErrorKind
from piquet.logging import DealLogger
from piquet.models.card import Card, Deck, Hand, create_full_deck
from piquet.models.combination import Combination, CombinationType
from piquet.models.game_state import (
    SET_POINTS_YOUNGER_STEPS,
    DeclarationWinner,
    GameState,
    PlayedCard,
    Step,
)
from piquet.models.moves import (
    Capot,
    CarteBlanche,
    CarteRouge,
    Declaration,
    DeclarationCount,
    DeclarationUpper,
    DealRecord,
    Exchange,
    MoveRecord,
    Pique,
    PlayCard,
    PlayerId,
    PlayerMove,
    PlayerResponse,
    PlayFirst,
    Repique,
    WinAsSecond,
    WinCards,
    WinLastTrick,
)
from piquet.models.player import Player

from .combinations import best_combination, extract
from .declaration import resolve
from .scoring import TRICKS_PER_DEAL, move_points
from .validator import MoveValidator

logger = logging.getLogger(__name__)

SEED_SIZE = 16
HAND_SIZE = 12
PACKET_SIZE = 2  # Cards are dealt two at a time


class SavedGame(BaseModel):
    """Serialized form of a game, generator state included."""

    seed: str
    state: GameState
    rng_state: tuple[int, tuple[int, ...], float | None]
    rules: RulesConfig


class Game:
    """A two-player Piquet game.

    All changes go through `choose_elder`, `deal` and `apply_move`. A rejected
    move raises PiquetError and leaves the state untouched.
    """

    def __init__(
        self,
        seed: bytes,
        config: Config | None = None,
        deal_logger: DealLogger | None = None,
    ):
        """Initialize a game.

        Args:
            seed: 16 bytes seeding the game's random generator
            config: Configuration (uses defaults if not provided)
            deal_logger: DealLogger instance for detailed logging

        Raises:
            ValueError: If the seed is not 16 bytes long
        """
        if len(seed) != SEED_SIZE:
            raise ValueError(f"Seed must be {SEED_SIZE} bytes, got {len(seed)}")

        self.seed = bytes(seed)
        self.config = config or Config()
        self.rules = self.config.rules
        self.deal_logger = deal_logger
        self.validator = MoveValidator(self.rules)

        self._rng = random.Random(self.seed)

        deck = create_full_deck()
        deck.shuffle(self._rng)
        name1, name2 = self.config.game.player_names
        self._state = GameState(
            deck=deck,
            visible=Deck.empty(),
            player1=Player(player_id=PlayerId.PLAYER1, name=name1),
            player2=Player(player_id=PlayerId.PLAYER2, name=name2),
        )

        if self.deal_logger:
            self.deal_logger.log_game_start(self._state.players, self.seed.hex())

    @classmethod
    def from_config(cls, config: Config, deal_logger: DealLogger | None = None) -> Game:
        """Create a game seeded from the config (random seed if none)."""
        if config.game.seed:
            seed = bytes.fromhex(config.game.seed)
        else:
            seed = secrets.token_bytes(SEED_SIZE)
        return cls(seed, config, deal_logger)

    @property
    def state(self) -> GameState:
        """Copy of the current state (changes to it do not affect the game)."""
        return self._state.model_copy(deep=True)

    @property
    def step(self) -> Step:
        return self._state.step

    @property
    def current_player(self) -> PlayerId | None:
        """Player expected to move next."""
        return self._state.turn_owner()

    def player(self, player_id: PlayerId) -> Player:
        """Copy of a player's state."""
        return self._state.player(player_id).model_copy(deep=True)

    # Serialization

    def to_json(self) -> str:
        saved = SavedGame(
            seed=self.seed.hex(),
            state=self._state,
            rng_state=self._rng.getstate(),
            rules=self.rules,
        )
        return saved.model_dump_json()

    @classmethod
    def from_json(
        cls,
        data: str,
        config: Config | None = None,
        deal_logger: DealLogger | None = None,
    ) -> Game:
        """Restore a game saved with `to_json`.

        The saved rules replace those of `config`.
        """
        saved = SavedGame.model_validate_json(data)
        if config:
            config = config.model_copy(update={"rules": saved.rules})
        else:
            config = Config(rules=saved.rules)
        game = cls(bytes.fromhex(saved.seed), config)
        game._state = saved.state
        game._rng.setstate(saved.rng_state)
        game.deal_logger = deal_logger
        return game

    # Deal setup

    def choose_elder(self) -> PlayerId:
        """Draw the elder at random. Allowed once, before the first deal.

        Raises:
            PiquetError: INVALID_FOR_STEP once an elder has been chosen
        """
        state = self._state
        if state.elder is not None or state.deal_num > 0:
            raise PiquetError(
                PiquetErrorKind.INVALID_FOR_STEP, "Elder already chosen", step=state.step
            )
        elder = PlayerId(self._rng.randrange(2))
        self._assign_elder(elder)
        logger.info(f"{state.player(elder).name} is elder")
        return elder

    def _assign_elder(self, elder: PlayerId) -> None:
        self._state.elder = elder
        for player in self._state.players:
            player.is_elder = player.player_id == elder

    def deal(self) -> None:
        """Deal a new hand: 12 cards each, 8 to the talon.

        Raises:
            PiquetError: INVALID_FOR_STEP while a deal is in progress or
                once the last deal of the game has been played
        """
        state = self._state
        if state.step not in (Step.START, Step.END):
            raise PiquetError(
                PiquetErrorKind.INVALID_FOR_STEP, "A deal is in progress", step=state.step
            )
        if state.deal_num >= self.rules.max_deals:
            raise PiquetError(
                PiquetErrorKind.INVALID_FOR_STEP,
                f"All {self.rules.max_deals} deals have been played",
                step=state.step,
            )

        if state.elder is None:
            self.choose_elder()
        elif state.deal_num > 0:
            self._apply_elder_policy()
            state.deck = create_full_deck()
            state.deck.shuffle(self._rng)

        state.reset_for_new_deal()
        state.deal_num += 1
        state.step = Step.DEAL

        elder = state.elder
        hands: dict[PlayerId, list[Card]] = {elder: [], elder.other: []}
        dealt = 2 * HAND_SIZE
        cards = state.deck.draw(dealt)
        for packet, start in enumerate(range(0, dealt, PACKET_SIZE)):
            owner = elder if packet % 2 == 0 else elder.other
            hands[owner].extend(cards[start:start + PACKET_SIZE])
        state.visible = Deck(cards=state.deck.draw(len(state.deck)))

        for player in state.players:
            player.reset_deal_state(Hand(cards=hands[player.player_id]))

        logger.info(f"Deal {state.deal_num} dealt, elder: {state.elder_player().name}")
        if self.deal_logger:
            self.deal_logger.log_deal_start(state.deal_num, state.players, state.visible, elder)

        self._advance()
        state.is_elder_to_play = True

    def _apply_elder_policy(self) -> None:
        policy = self.rules.elder_policy
        if policy == ElderPolicy.ALTERNATE:
            self._assign_elder(self._state.elder.other)
        elif policy == ElderPolicy.RANDOM:
            self._assign_elder(PlayerId(self._rng.randrange(2)))

    # Moves

    def apply_move(self, player_id: PlayerId, move: PlayerMove) -> None:
        """Validate and apply a player's move.

        Args:
            player_id: Player submitting the move
            move: The move

        Raises:
            PiquetError: If the move is not legal now; nothing is changed
        """
        result = self.validator.validate(self._state, player_id, move)
        if not result.is_valid:
            logger.debug(f"Rejected {type(move).__name__} from {player_id.name}: {result.error_message}")
            raise PiquetError(result.error, result.error_message, step=self._state.step)

        if isinstance(move, CarteBlanche):
            self._state.player(player_id).carte_blanche_declared = True
            self._score(player_id, move, declaration=True)
        elif isinstance(move, Exchange):
            self._exchange(player_id, move)
        elif isinstance(move, DeclarationCount):
            self._record(player_id, move)
            if move.count == 0:
                self._state.player(player_id).set_candidate_for(move.combination_type, None)
                self._to_response()
            else:
                self._state.announced_count = move.count
        elif isinstance(move, DeclarationUpper):
            self._record(player_id, move)
            self._state.announced_upper = move.rank
        elif isinstance(move, Declaration):
            # Points are credited when the family is resolved
            self._record(player_id, move)
            combination = move.combination
            self._state.player(player_id).set_candidate_for(combination.combination_type, combination)
            self._to_response()
        elif isinstance(move, PlayerResponse):
            self._record(player_id, move)
            self._resolve_family(move.combination_type)
        elif isinstance(move, PlayFirst):
            self._lay_card(player_id, move.card)
            self._score(player_id, move)
            self._score_younger_declarations()
        elif isinstance(move, PlayCard):
            self._lay_card(player_id, move.card)
            self._record(player_id, move)
            if len(self._state.trick) == 2:
                self._finish_trick()
            else:
                self._state.is_elder_to_play = not self._state.is_elder_to_play

    def _advance(self) -> None:
        state = self._state
        successor = state.step.successor
        if successor is None:
            raise PiquetError(PiquetErrorKind.INVALID_FOR_STEP, "Deal is over", step=state.step)
        logger.debug(f"{state.step.name} -> {successor.name}")
        state.step = successor

    def _record(self, player_id: PlayerId, move: PlayerMove, points: int = 0) -> MoveRecord:
        """Append a move to the deal log and credit its points."""
        state = self._state
        record = MoveRecord(player=player_id, move=move, points=points)
        state.deal_moves.append(record)
        state.player(player_id).deal_points += points
        if self.deal_logger:
            self.deal_logger.log_move(state.deal_num, state.step, record)
        return record

    def _score(self, player_id: PlayerId, move: PlayerMove, declaration: bool = False) -> None:
        """Record a move that scores its fixed value."""
        points = move_points(move)
        self._record(player_id, move, points)
        if declaration:
            self._state.player(player_id).declaration_points += points
        logger.debug(f"{self._state.player(player_id).name} scores {points} ({type(move).__name__})")

    # Exchange

    def _exchange(self, player_id: PlayerId, move: Exchange) -> None:
        state = self._state
        player = state.player(player_id)
        for card in move.cards:
            player.hand.remove(card)
            player.discards.add(card)
        player.hand.cards.extend(state.visible.draw(len(move.cards)))
        player.left_until_carte_rouge = player.hand.copy()
        self._record(player_id, move)

        self._advance()
        state.is_elder_to_play = state.step != Step.EXCHANGE_YOUNGER

    # Declarations

    def _to_response(self) -> None:
        state = self._state
        state.announced_count = None
        state.announced_upper = None
        self._advance()
        state.is_elder_to_play = False

    def _resolve_family(self, combination_type: CombinationType) -> None:
        """Compare elder and younger, then score the elder if it won."""
        state = self._state
        elder = state.elder_player()
        younger = state.younger_player()

        elder_candidates = extract(combination_type, elder.hand)
        younger_candidates = extract(combination_type, younger.hand)
        younger_best = best_combination(younger_candidates)
        younger.set_candidate_for(combination_type, younger_best)

        outcome = resolve(
            combination_type,
            elder.candidate(combination_type),
            younger_best,
            elder_candidates,
            younger_candidates,
        )
        state.set_outcome(combination_type, outcome.winner, outcome.combination)
        state.scored[combination_type] = outcome.scored
        logger.info(
            f"{combination_type.value.capitalize()}: {outcome.winner.value}"
            f" ({outcome.points} points)"
        )

        self._advance()  # SET_POINTS_*_ELDER
        if outcome.winner == DeclarationWinner.ELDER:
            self._award_combinations(state.elder, outcome.scored)
        if state.step == Step.SET_POINTS_SET_ELDER:
            self._check_repique(state.elder)

        self._advance()
        state.is_elder_to_play = True

    def _award_combinations(self, player_id: PlayerId, combinations: list[Combination]) -> None:
        player = self._state.player(player_id)
        for combination in combinations:
            self._score(player_id, Declaration(combination=combination), declaration=True)
            for card in combination.cards:
                if card in player.left_until_carte_rouge:
                    player.left_until_carte_rouge.remove(card)

        if player.left_until_carte_rouge.is_empty() and not player.carte_rouge_awarded:
            player.carte_rouge_awarded = True
            self._score(player_id, CarteRouge(), declaration=True)

    def _check_repique(self, player_id: PlayerId) -> None:
        """Repique: 30 from declarations before the opponent scores any.

        A family the opponent won counts as scored even while its points
        wait for the opponent's SetPoints step.
        """
        state = self._state
        player = state.player(player_id)
        opponent = state.player(player_id.other)
        if (
            not state.bonus_awarded
            and player.declaration_points >= self.rules.repique_threshold
            and opponent.declaration_points == 0
            and not state.has_won_family(player_id.other)
        ):
            state.bonus_awarded = True
            self._score(player_id, Repique())

    def _check_pique(self) -> None:
        """Pique: elder reaches 30 before younger scores anything."""
        state = self._state
        elder = state.elder_player()
        younger = state.younger_player()
        if (
            not state.bonus_awarded
            and elder.deal_points >= self.rules.repique_threshold
            and younger.deal_points == 0
        ):
            state.bonus_awarded = True
            self._score(state.elder, Pique())

    def _score_younger_declarations(self) -> None:
        """Pass the younger's SetPoints steps, then open the play."""
        state = self._state
        younger = state.younger
        self._advance()
        while state.step in SET_POINTS_YOUNGER_STEPS:
            combination_type = SET_POINTS_YOUNGER_STEPS[state.step]
            if state.winner(combination_type) == DeclarationWinner.YOUNGER:
                self._award_combinations(younger, state.scored.get(combination_type, []))
            if state.step == Step.SET_POINTS_SET_YOUNGER:
                self._check_repique(younger)
            self._advance()

        self._check_pique()
        state.is_elder_to_play = False

    # Play

    def _lay_card(self, player_id: PlayerId, card: Card) -> None:
        player = self._state.player(player_id)
        player.hand.remove(card)
        player.card_played = card
        self._state.trick.append(PlayedCard(player=player_id, card=card))

    def _finish_trick(self) -> None:
        state = self._state
        lead, follow = state.trick
        follower_wins = follow.card.suit == lead.card.suit and follow.card.rank > lead.card.rank
        winner = follow.player if follower_wins else lead.player

        state.player(winner).deal_tricks += 1
        state.tricks_played += 1
        state.trick = []
        logger.debug(f"Trick {state.tricks_played}: {lead.card} {follow.card}, won by {state.player(winner).name}")

        if follower_wins:
            self._score(winner, WinAsSecond())
        state.is_elder_to_play = winner == state.elder

        if state.tricks_played == TRICKS_PER_DEAL:
            self._score(winner, WinLastTrick())
            self._end_deal()
        else:
            self._check_pique()

    def _end_deal(self) -> None:
        state = self._state
        self._advance()  # PLAY_END

        by_tricks = sorted(state.players, key=lambda p: p.deal_tricks, reverse=True)
        leader, trailer = by_tricks
        if leader.deal_tricks == TRICKS_PER_DEAL:
            self._score(leader.player_id, Capot())
        elif leader.deal_tricks > trailer.deal_tricks:
            self._score(leader.player_id, WinCards())

        self._advance()  # END
        for player in state.players:
            player.game_points += player.deal_points
        state.deals.append(DealRecord(deal=state.deal_num, moves=list(state.deal_moves)))

        logger.info(
            f"Deal {state.deal_num} over: "
            + ", ".join(f"{p.name} {p.deal_points}" for p in state.players)
        )
        if self.deal_logger:
            self.deal_logger.log_deal_end(state.deal_num, state.players)

