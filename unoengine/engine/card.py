"""Card, CardType and Color types for UNO."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Color(str, Enum):
    """Card colors."""

    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"


class CardType(str, Enum):
    """Card types."""

    NUMBER = "number"
    SKIP = "skip"
    REVERSE = "reverse"
    DRAW_TWO = "draw_two"
    WILD = "wild"
    DRAW_FOUR = "wild_draw_four"


WILD_TYPES = (CardType.WILD, CardType.DRAW_FOUR)
STACK_TYPES = (CardType.DRAW_TWO, CardType.DRAW_FOUR)


@dataclass(frozen=True)
class Card:
    """A UNO card.

    For number cards: color is set and rank is 0-9.
    For skip/reverse/draw_two: color is set, rank is None.
    For wild cards: color and rank are None.
    """

    type: CardType
    color: Optional[Color] = None
    rank: Optional[int] = None

    def __post_init__(self) -> None:
        if self.type in WILD_TYPES and self.color is not None:
            raise ValueError("Wild cards must have color=None")
        if self.type not in WILD_TYPES and self.color is None:
            raise ValueError("Non-wild cards must have a color")
        if self.type == CardType.NUMBER:
            if self.rank is None or not 0 <= self.rank <= 9:
                raise ValueError(f"Invalid number rank: {self.rank}")
        elif self.rank is not None:
            raise ValueError(f"Only number cards carry a rank, got {self.type.value}")

    @classmethod
    def number(cls, color: Color, rank: int) -> "Card":
        return cls(CardType.NUMBER, color, rank)

    @classmethod
    def action(cls, card_type: CardType, color: Color) -> "Card":
        return cls(card_type, color)

    @classmethod
    def wild(cls, draw_four: bool = False) -> "Card":
        return cls(CardType.DRAW_FOUR if draw_four else CardType.WILD)

    @property
    def is_wild(self) -> bool:
        return self.type in WILD_TYPES

    @property
    def is_stack_card(self) -> bool:
        """DrawTwo and DrawFour carry a pending-draw penalty."""
        return self.type in STACK_TYPES

    @property
    def penalty(self) -> int:
        if self.type == CardType.DRAW_TWO:
            return 2
        if self.type == CardType.DRAW_FOUR:
            return 4
        return 0

    def can_play_on(self, other: "Card", active_color: Optional[Color] = None) -> bool:
        """Check if this card may be played on top of `other`.

        `active_color` is the color named when `other` is a wild; with no
        named color anything goes on a wild.
        """
        if self.is_wild:
            return True
        if other.is_wild:
            return active_color is None or self.color == active_color
        if self.color == other.color:
            return True
        if self.type == CardType.NUMBER:
            return other.type == CardType.NUMBER and self.rank == other.rank
        return self.type == other.type

    def __str__(self) -> str:
        if self.color is None:
            return self.type.value
        if self.type == CardType.NUMBER:
            return f"{self.color.value}_{self.rank}"
        return f"{self.color.value}_{self.type.value}"
