"""Turn engine: drives a game from the deal to the win."""

import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, List, Optional

from unoengine.engine.card import Card, CardType
from unoengine.engine.deck import Deck
from unoengine.engine.errors import GameOverError, ProtocolViolation
from unoengine.engine.events import (
    GameEvent,
    GameWon,
    Listener,
    PlayerDrew,
    TurnPlayed,
    TurnSkipped,
)
from unoengine.engine.game_state import GameState, Seat, TurnView
from unoengine.engine.recycler import ensure_drawable
from unoengine.engine.rules import (
    HAND_SIZE,
    Drew,
    Played,
    TurnDecision,
    next_player,
    playable_cards,
    setup_state,
)

if TYPE_CHECKING:
    from unoengine.agent.protocol import PlayerProtocol

logger = logging.getLogger(__name__)


@dataclass
class GameOutcome:
    """Outcome of a completed game."""

    winner: int
    winner_name: str
    num_turns: int


class Game:
    """Owns the game state and plays it one turn at a time.

    Players are addressed by their index in the roster. The engine keeps
    each player's hand in a `Seat` and only ever calls into the player to
    ask for a decision or to notify it.
    """

    def __init__(
        self,
        players: Iterable["PlayerProtocol"],
        seed: Optional[int] = None,
        hand_size: int = HAND_SIZE,
        listeners: Iterable[Listener] = (),
    ):
        self.state = GameState(
            draw_pile=Deck.generate(random.Random(seed)),
            seats=[Seat(player=p) for p in players],
        )
        self.hand_size = hand_size
        self.num_turns = 0
        self._listeners: List[Listener] = list(listeners)

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def _emit(self, event: GameEvent) -> None:
        for listener in self._listeners:
            listener(event)

    @property
    def started(self) -> bool:
        """True once a card is on the discard pile."""
        return bool(self.state.discard_pile)

    @property
    def is_over(self) -> bool:
        return self.state.winner is not None

    def setup(self) -> None:
        """Shuffle, deal and turn up the first discard."""
        setup_state(self.state, hand_size=self.hand_size)

    def run(self) -> GameOutcome:
        """Play turns until somebody empties their hand."""
        if not self.started:
            self.setup()
        while not self.is_over:
            self.play_turn()
        return self.result()

    def result(self) -> GameOutcome:
        if self.state.winner is None:
            raise RuntimeError("The game has no winner yet")
        return GameOutcome(
            winner=self.state.winner,
            winner_name=self.state.seats[self.state.winner].name,
            num_turns=self.num_turns,
        )

    def play_turn(self) -> None:
        """Play one turn for the next player."""
        state = self.state
        if state.winner is not None:
            raise GameOverError(f"{state.seats[state.winner].name} already won")
        if not self.started:
            self.setup()

        recycled = ensure_drawable(state, state.pending_draws)
        if recycled is not None:
            self._emit(recycled)

        # Cursor and turn count move only once the decision is accepted.
        index = self._advance(state.current_player)
        seat = state.seats[index]
        top = state.top_discard()
        playable = playable_cards(seat.hand, top, state.pending_draws, state.active_color)

        if state.pending_draws > 0 and top is not None and top.is_stack_card:
            if not any(c.type == top.type for c in playable):
                state.current_player = index
                self.num_turns += 1
                drawn = self._draw_into(seat, state.pending_draws)
                logger.debug("%s cannot stack on %s, drew %d", seat.name, top, len(drawn))
                seat.player.observe_turn_skip(drawn)
                self._emit(PlayerDrew(index, seat.name, tuple(drawn), forced=True))
                state.pending_draws = 0
                return

        decision = seat.player.execute_turn(TurnView.from_state(state, index, playable))
        self._check(seat, decision, playable)
        state.current_player = index
        self.num_turns += 1
        self._apply(index, decision)

        if not seat.hand:
            state.winner = index
            logger.info("%s won after %d turns", seat.name, self.num_turns)
            self._emit(GameWon(index, seat.name, self.num_turns))

    def _advance(self, cursor: int) -> int:
        return next_player(cursor, self.state.direction, len(self.state.seats))

    def _draw_into(self, seat: Seat, count: int) -> List[Card]:
        drawn = self.state.draw_pile.draw_multiple(count)
        seat.hand.extend(drawn)
        return drawn

    def _check(self, seat: Seat, decision: TurnDecision, playable: List[Card]) -> None:
        """Reject a decision before anything is changed."""
        if isinstance(decision, Drew):
            return
        if not isinstance(decision, Played):
            raise ProtocolViolation(f"{seat.name} returned an unknown decision: {decision!r}")
        if decision.card not in playable:
            raise ProtocolViolation(f"{seat.name} tried to play {decision.card}, which was not offered")

    def _apply(self, index: int, decision: TurnDecision) -> None:
        state = self.state
        seat = state.seats[index]

        if isinstance(decision, Drew):
            drawn = self._draw_into(seat, state.pending_draws or 1)
            logger.debug("%s drew %d", seat.name, len(drawn))
            seat.player.observe_turn_skip(drawn)
            self._emit(PlayerDrew(index, seat.name, tuple(drawn)))
            state.pending_draws = 0
            return

        card = decision.card
        seat.hand.remove(card)
        state.discard_pile.append(card)
        state.active_color = decision.chosen_color if card.is_wild else None
        logger.debug("%s played %s", seat.name, card)
        for other in state.seats:
            other.player.observe_turn(seat.name, card)
        self._emit(TurnPlayed(index, seat.name, card, state.active_color))

        if card.type == CardType.SKIP:
            state.current_player = self._advance(state.current_player)
            skipped = state.seats[state.current_player]
            skipped.player.observe_turn_skip(None)
            self._emit(TurnSkipped(state.current_player, skipped.name))
        elif card.type == CardType.REVERSE:
            state.direction = state.direction.flipped()
        elif card.type in (CardType.DRAW_TWO, CardType.DRAW_FOUR):
            state.pending_draws += card.penalty
        elif card.type in (CardType.NUMBER, CardType.WILD):
            pass
        else:
            raise ValueError(f"Unhandled card type: {card.type}")
