"""Random agent - plays a random offered card, draws only when it must."""

import random
from collections import Counter
from typing import Optional, Sequence

from unoengine.engine import Card, Color, Drew, Played, TurnDecision, TurnView


def _preferred_color(hand: Sequence[Card]) -> Color:
    """Most common color in the hand, red if there are only wilds."""
    counts = Counter(c.color for c in hand if c.color is not None)
    if not counts:
        return Color.RED
    return counts.most_common(1)[0][0]


class RandomAgent:
    def __init__(self, name: str, seed: Optional[int] = None):
        self._name = name
        self._rng = random.Random(seed)

    @property
    def name(self) -> str:
        return self._name

    def execute_turn(self, view: TurnView) -> TurnDecision:
        # Prefer playing over drawing to make game progress
        if not view.playable:
            return Drew()
        card = self._rng.choice(view.playable)
        if card.is_wild:
            rest = list(view.hand)
            rest.remove(card)
            return Played(card, chosen_color=_preferred_color(rest))
        return Played(card)

    def observe_turn(self, acting_player: str, card: Card) -> None:
        pass

    def observe_turn_skip(self, drawn_cards: Optional[Sequence[Card]]) -> None:
        pass
