"""Game engine for UNO."""

from unoengine.engine.card import Card, CardType, Color
from unoengine.engine.deck import Deck, create_deck
from unoengine.engine.errors import (
    DeckExhaustedError,
    GameOverError,
    ProtocolViolation,
    SetupError,
    UnoError,
)
from unoengine.engine.events import (
    DeckRecycled,
    GameEvent,
    GameWon,
    PlayerDrew,
    TurnPlayed,
    TurnSkipped,
)
from unoengine.engine.game_state import Direction, GameState, Seat, TurnView
from unoengine.engine.rules import (
    Drew,
    Played,
    TurnDecision,
    next_player,
    playable_cards,
)
from unoengine.engine.recycler import ensure_drawable
from unoengine.engine.game import Game, GameOutcome

__all__ = [
    "Card",
    "CardType",
    "Color",
    "Deck",
    "create_deck",
    "UnoError",
    "SetupError",
    "DeckExhaustedError",
    "ProtocolViolation",
    "GameOverError",
    "GameEvent",
    "TurnPlayed",
    "TurnSkipped",
    "PlayerDrew",
    "DeckRecycled",
    "GameWon",
    "Direction",
    "GameState",
    "Seat",
    "TurnView",
    "Played",
    "Drew",
    "TurnDecision",
    "next_player",
    "playable_cards",
    "ensure_drawable",
    "Game",
    "GameOutcome",
]
