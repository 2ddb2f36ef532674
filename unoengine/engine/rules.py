"""UNO rules: playable cards, turn rotation and game setup."""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from unoengine.engine.card import Card, Color
from unoengine.engine.errors import DeckExhaustedError, SetupError
from unoengine.engine.game_state import Direction, GameState

logger = logging.getLogger(__name__)

HAND_SIZE = 7


@dataclass(frozen=True)
class Played:
    """Decision: play a card. For wilds, chosen_color names the next color."""

    card: Card
    chosen_color: Optional[Color] = None


@dataclass(frozen=True)
class Drew:
    """Decision: draw instead of playing (takes the pending penalty if any)."""

    pass


TurnDecision = Union[Played, Drew]


def playable_cards(
    hand: Sequence[Card],
    top: Optional[Card],
    pending_draws: int,
    active_color: Optional[Color] = None,
) -> List[Card]:
    """Return the cards of `hand` that may be played right now.

    While a penalty is pending on a Draw Two/Four only an identical card can
    be stacked on it.
    """
    if top is None:
        return list(hand)
    if pending_draws > 0 and top.is_stack_card:
        return [c for c in hand if c == top]
    return [c for c in hand if c.can_play_on(top, active_color)]


def next_player(cursor: int, direction: Direction, roster_size: int) -> int:
    """Index of the player after `cursor` in the given direction."""
    if direction is Direction.CLOCKWISE:
        return (cursor + 1) % roster_size
    if cursor == 0:
        return roster_size - 1
    return cursor - 1


def deal(state: GameState, hand_size: int = HAND_SIZE) -> None:
    """Give every seat `hand_size` cards, in roster order."""
    needed = hand_size * len(state.seats)
    if len(state.draw_pile) < needed:
        raise SetupError(
            f"Cannot deal {hand_size} cards to {len(state.seats)} players "
            f"from a pile of {len(state.draw_pile)}"
        )
    for seat in state.seats:
        try:
            seat.hand.extend(state.draw_pile.draw_multiple(hand_size))
        except DeckExhaustedError as e:
            raise SetupError(str(e)) from e


def seed_discard(state: GameState) -> Card:
    """Turn up the first discard, sending wilds back into the pile."""
    if all(c.is_wild for c in state.draw_pile):
        raise SetupError("No non-wild card left to start the discard pile")
    while True:
        card = state.draw_pile.draw()
        if not card.is_wild:
            state.discard_pile.append(card)
            return card
        state.draw_pile.reinsert_random(card)


def setup_state(state: GameState, hand_size: int = HAND_SIZE) -> None:
    """Shuffle the pile, deal and turn up the first discard."""
    if len(state.seats) < 2:
        raise SetupError(f"At least 2 players are required, got {len(state.seats)}")
    state.draw_pile.shuffle()
    deal(state, hand_size)
    top = seed_discard(state)
    logger.info(
        "Dealt %d cards to %d players, starting discard %s",
        hand_size, len(state.seats), top,
    )
