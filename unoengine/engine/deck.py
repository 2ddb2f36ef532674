"""Deck creation and the draw pile."""

import random
from typing import Iterable, Iterator, List, Optional

from unoengine.engine.card import Card, CardType, Color
from unoengine.engine.errors import DeckExhaustedError

ACTION_TYPES = (CardType.SKIP, CardType.REVERSE, CardType.DRAW_TWO)


def create_deck() -> List[Card]:
    """Create the cards of a standard 108-card UNO deck, unshuffled.

    - 4 colors × (0-9, Skip, Reverse, Draw Two): 100 cards
    - 4 Wild, 4 Wild Draw Four: 8 cards
    - Total: 108 cards
    """
    cards: List[Card] = []

    for color in Color:
        # One zero per color
        cards.append(Card.number(color, 0))
        # Two of each 1-9 and action cards per color
        for rank in range(1, 10):
            cards.append(Card.number(color, rank))
            cards.append(Card.number(color, rank))
        for card_type in ACTION_TYPES:
            cards.append(Card.action(card_type, color))
            cards.append(Card.action(card_type, color))

    for _ in range(4):
        cards.append(Card.wild())
        cards.append(Card.wild(draw_four=True))

    return cards


class Deck:
    """Draw pile. The end of the list is the top of the pile."""

    def __init__(self, cards: Iterable[Card] = (), rng: Optional[random.Random] = None):
        self.cards: List[Card] = list(cards)
        self._rng = rng or random.Random()

    @classmethod
    def generate(cls, rng: Optional[random.Random] = None) -> "Deck":
        """Standard composition, not yet shuffled."""
        return cls(create_deck(), rng=rng)

    def shuffle(self) -> None:
        self._rng.shuffle(self.cards)

    def draw(self) -> Optional[Card]:
        if not self.cards:
            return None
        return self.cards.pop()

    def draw_multiple(self, n: int) -> List[Card]:
        if n > len(self.cards):
            raise DeckExhaustedError(f"Cannot draw {n} cards from a pile of {len(self.cards)}")
        return [self.cards.pop() for _ in range(n)]

    def reinsert(self, cards: Iterable[Card]) -> None:
        self.cards.extend(cards)

    def reinsert_random(self, card: Card) -> None:
        self.cards.insert(self._rng.randint(0, len(self.cards)), card)

    def is_empty(self) -> bool:
        return not self.cards

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)
