"""Human agent - reads decisions from terminal."""

from typing import Optional, Sequence

import typer

from unoengine.engine import Card, Color, Drew, Played, TurnDecision, TurnView


class HumanAgent:
    """Agent that prompts the human for input via terminal."""

    def __init__(self, name: str = "human"):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def execute_turn(self, view: TurnView) -> TurnDecision:
        typer.echo(f"\n--- {self._name}, your turn ---")
        typer.echo("Your hand: " + " ".join(str(c) for c in view.hand))
        top = str(view.top_discard)
        if view.active_color:
            top += f" (color: {view.active_color.value})"
        typer.echo(f"Top discard: {top}")
        if view.pending_draws:
            typer.echo(f"Pending draws: {view.pending_draws}")
        typer.echo("\nOptions:")
        typer.echo("  0: DRAW")
        for i, card in enumerate(view.playable, start=1):
            typer.echo(f"  {i}: PLAY {card}")

        while True:
            idx = typer.prompt("Enter number", type=int)
            if idx == 0:
                return Drew()
            if 1 <= idx <= len(view.playable):
                card = view.playable[idx - 1]
                if card.is_wild:
                    return Played(card, chosen_color=self._ask_color())
                return Played(card)
            typer.echo("Invalid. Try again.")

    def _ask_color(self) -> Color:
        choices = ", ".join(c.value for c in Color)
        while True:
            raw = typer.prompt(f"Choose a color ({choices})").strip().lower()
            try:
                return Color(raw)
            except ValueError:
                typer.echo("Invalid. Try again.")

    def observe_turn(self, acting_player: str, card: Card) -> None:
        pass

    def observe_turn_skip(self, drawn_cards: Optional[Sequence[Card]]) -> None:
        if drawn_cards is None:
            typer.echo(f"{self._name}, you were skipped.")
        else:
            typer.echo(f"{self._name}, you drew: " + " ".join(str(c) for c in drawn_cards))
