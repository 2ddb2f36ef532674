"""Player protocol - interface that human and scripted players implement."""

from typing import Optional, Protocol, Sequence

from unoengine.engine import Card, TurnDecision, TurnView


class PlayerProtocol(Protocol):
    """Interface for UNO-playing agents."""

    @property
    def name(self) -> str:
        """Display name for the player."""
        ...

    def execute_turn(self, view: TurnView) -> TurnDecision:
        """Choose what to do this turn.

        Args:
            view: The cards the engine offers (`view.playable`), this
                player's hand and public info.

        Returns:
            Played(card) with a card from `view.playable`, or Drew().
        """
        ...

    def observe_turn(self, acting_player: str, card: Card) -> None:
        """Called on every player after `acting_player` played `card`."""
        ...

    def observe_turn_skip(self, drawn_cards: Optional[Sequence[Card]]) -> None:
        """Called when this player's turn ended without a play.

        `drawn_cards` is None for a Skip, otherwise the cards just drawn.
        """
        ...
