"""Game state for UNO."""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from unoengine.engine.card import Card, Color
from unoengine.engine.deck import Deck

if TYPE_CHECKING:
    from unoengine.agent.protocol import PlayerProtocol


class Direction(str, Enum):
    """Rotation direction of play."""

    CLOCKWISE = "clockwise"
    COUNTER_CLOCKWISE = "counter_clockwise"

    def flipped(self) -> "Direction":
        if self is Direction.CLOCKWISE:
            return Direction.COUNTER_CLOCKWISE
        return Direction.CLOCKWISE


@dataclass
class Seat:
    """Roster entry: a player and the hand the engine keeps for them."""

    player: "PlayerProtocol"
    hand: List[Card] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.player.name


@dataclass
class GameState:
    """Mutable UNO game state, owned by the engine."""

    draw_pile: Deck
    seats: List[Seat]
    discard_pile: List[Card] = field(default_factory=list)  # top is last
    current_player: int = 0
    direction: Direction = Direction.CLOCKWISE
    pending_draws: int = 0  # accumulated Draw Two/Four
    active_color: Optional[Color] = None  # named color for a wild on top
    winner: Optional[int] = None

    def top_discard(self) -> Optional[Card]:
        """Return the top card on the discard pile."""
        return self.discard_pile[-1] if self.discard_pile else None

    def total_cards(self) -> int:
        return len(self.draw_pile) + len(self.discard_pile) + sum(len(s.hand) for s in self.seats)


@dataclass(frozen=True)
class TurnView:
    """What the acting player may see when deciding.

    Contains the offered playable cards, that player's own hand and public
    info. Other players' hands are reduced to card counts.
    """

    player: int
    playable: Tuple[Card, ...]
    hand: Tuple[Card, ...]
    top_discard: Optional[Card]
    active_color: Optional[Color]
    pending_draws: int
    direction: Direction
    draw_pile_size: int
    discard_pile_size: int
    num_cards_per_player: Dict[int, int]  # seat index -> card count

    @classmethod
    def from_state(cls, state: GameState, player: int, playable: List[Card]) -> "TurnView":
        """Create the view for `player`, hiding other players' hands."""
        return cls(
            player=player,
            playable=tuple(playable),
            hand=tuple(state.seats[player].hand),
            top_discard=state.top_discard(),
            active_color=state.active_color,
            pending_draws=state.pending_draws,
            direction=state.direction,
            draw_pile_size=len(state.draw_pile),
            discard_pile_size=len(state.discard_pile),
            num_cards_per_player={i: len(s.hand) for i, s in enumerate(state.seats)},
        )
