"""Events emitted by the game engine for observers (console, logs, tests)."""

from dataclasses import dataclass
from typing import Callable, Optional, Tuple, Union

from unoengine.engine.card import Card, Color


@dataclass(frozen=True)
class TurnPlayed:
    """A player put a card on the discard pile."""

    player: int
    name: str
    card: Card
    chosen_color: Optional[Color] = None


@dataclass(frozen=True)
class TurnSkipped:
    """A player lost their turn to a Skip."""

    player: int
    name: str


@dataclass(frozen=True)
class PlayerDrew:
    """A player took cards from the draw pile.

    `forced` is True when a pending penalty was discharged without the
    player being offered a decision.
    """

    player: int
    name: str
    cards: Tuple[Card, ...]
    forced: bool = False


@dataclass(frozen=True)
class DeckRecycled:
    """The draw pile was replenished.

    `degenerate` marks the fallback where a fresh deck was injected and the
    old discard cards were dropped.
    """

    moved: int
    dropped: int = 0
    degenerate: bool = False


@dataclass(frozen=True)
class GameWon:
    player: int
    name: str
    num_turns: int


GameEvent = Union[TurnPlayed, TurnSkipped, PlayerDrew, DeckRecycled, GameWon]
Listener = Callable[[GameEvent], None]


def describe(event: GameEvent) -> str:
    """One-line human readable description of an event."""
    if isinstance(event, TurnPlayed):
        desc = f"{event.name} played {event.card}"
        if event.chosen_color:
            desc += f" (chose {event.chosen_color.value})"
        return desc
    if isinstance(event, TurnSkipped):
        return f"{event.name} was skipped"
    if isinstance(event, PlayerDrew):
        if event.forced:
            return f"{event.name} drew {len(event.cards)} cards (penalty)"
        if len(event.cards) == 1:
            return f"{event.name} drew a card"
        return f"{event.name} drew {len(event.cards)} cards"
    if isinstance(event, DeckRecycled):
        if event.degenerate:
            return f"Draw pile rebuilt from a fresh deck ({event.dropped} discards dropped)"
        return f"Discard pile shuffled back into the draw pile ({event.moved} cards)"
    if isinstance(event, GameWon):
        return f"{event.name} WON after {event.num_turns} turns!"
    raise TypeError(f"Unknown event: {event!r}")
