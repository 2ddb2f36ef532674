"""Shared test helpers."""

from typing import Callable, List, Optional, Sequence

from unoengine.engine import (
    Card,
    CardType,
    Color,
    Deck,
    Drew,
    Game,
    Played,
    TurnDecision,
    TurnView,
)

R, B, G, Y = Color.RED, Color.BLUE, Color.GREEN, Color.YELLOW


def num(color: Color, rank: int) -> Card:
    return Card.number(color, rank)


def skip(color: Color) -> Card:
    return Card.action(CardType.SKIP, color)


def reverse(color: Color) -> Card:
    return Card.action(CardType.REVERSE, color)


def draw_two(color: Color) -> Card:
    return Card.action(CardType.DRAW_TWO, color)


class ScriptedAgent:
    """Plays the first offered card, or follows a custom strategy.

    Records everything the engine tells it.
    """

    def __init__(self, name: str, strategy: Optional[Callable[[TurnView], TurnDecision]] = None):
        self._name = name
        self._strategy = strategy
        self.views: List[TurnView] = []
        self.observed: List[tuple] = []
        self.skips: List[Optional[Sequence[Card]]] = []

    @property
    def name(self) -> str:
        return self._name

    def execute_turn(self, view: TurnView) -> TurnDecision:
        self.views.append(view)
        if self._strategy is not None:
            return self._strategy(view)
        if view.playable:
            return Played(view.playable[0])
        return Drew()

    def observe_turn(self, acting_player: str, card: Card) -> None:
        self.observed.append((acting_player, card))

    def observe_turn_skip(self, drawn_cards: Optional[Sequence[Card]]) -> None:
        self.skips.append(drawn_cards)


def always_draw(view: TurnView) -> TurnDecision:
    return Drew()


def rigged_game(
    hands: List[List[Card]],
    discard: List[Card],
    pile: List[Card],
    agents: Optional[List[ScriptedAgent]] = None,
) -> Game:
    """A started game with known hands, discard and draw pile (top of pile is last)."""
    agents = agents or [ScriptedAgent(f"p{i}") for i in range(len(hands))]
    game = Game(agents, seed=0)
    game.state.draw_pile = Deck(pile)
    game.state.discard_pile = list(discard)
    for seat, hand in zip(game.state.seats, hands):
        seat.hand = list(hand)
    return game
