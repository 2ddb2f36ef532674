"""Refill the draw pile from the discard pile."""

import logging
from typing import Optional

from unoengine.engine.deck import create_deck
from unoengine.engine.events import DeckRecycled
from unoengine.engine.game_state import GameState

logger = logging.getLogger(__name__)


def ensure_drawable(state: GameState, pending_draws: int) -> Optional[DeckRecycled]:
    """Make sure the draw pile can serve this turn's draw.

    Reshuffles every discard below the top back into the pile. If even that
    is not enough, the old discards are dropped and a fresh deck is added
    instead, so card counts are not conserved on that path.

    Returns the recycle event, or None if the pile was already big enough.
    """
    needed = max(pending_draws, 1)
    pile = state.draw_pile
    if len(pile) >= needed:
        return None

    recyclable = state.discard_pile[:-1]
    del state.discard_pile[:-1]

    if len(pile) + len(recyclable) >= needed:
        pile.reinsert(recyclable)
        pile.shuffle()
        logger.info("Shuffled %d discards back into the draw pile", len(recyclable))
        return DeckRecycled(moved=len(recyclable))

    fresh = create_deck()
    pile.reinsert(fresh)
    pile.shuffle()
    logger.warning(
        "Draw pile exhausted (%d cards, %d needed): dropped %d discards and added a fresh deck of %d",
        len(pile) - len(fresh), needed, len(recyclable), len(fresh),
    )
    return DeckRecycled(moved=len(fresh), dropped=len(recyclable), degenerate=True)
