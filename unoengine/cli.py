"""CLI entry point."""

from __future__ import annotations

import logging
import time
from typing import Optional

import typer
from dotenv import load_dotenv

from unoengine.engine.events import GameEvent, describe

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="UNO turn engine with random and human players")


def _parse_agents(agent_specs: str, seed: Optional[int] = None) -> dict[str, "PlayerProtocol"]:
    from unoengine.agent.protocol import PlayerProtocol
    from unoengine.agents.human_agent import HumanAgent
    from unoengine.agents.random_agent import RandomAgent

    parts = [s.strip().lower() for s in agent_specs.split(",") if s.strip()]
    agents: dict[str, PlayerProtocol] = {}
    for i, kind in enumerate(parts):
        pid = f"player_{i}"
        if kind == "random":
            agent_seed = None if seed is None else seed + i
            agents[pid] = RandomAgent(name=f"Bot_{i}", seed=agent_seed)
        elif kind == "human":
            agents[pid] = HumanAgent(name=f"Human_{i}")
        else:
            raise typer.BadParameter(f"Unknown agent type: {kind}. Use 'random' or 'human'.")
    if len(agents) < 2:
        raise typer.BadParameter("At least two agents are required.")
    return agents


def _console_listener(delay: float):
    def listener(event: GameEvent) -> None:
        typer.echo(f"> {describe(event)}")
        if delay > 0:
            time.sleep(delay)

    return listener


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def play(
    agents: str = typer.Option(
        "random,random,random,random",
        "--agents",
        "-a",
        envvar="UNO_AGENTS",
        help="Comma-separated: random or human (e.g. human,random,random)",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", envvar="UNO_SEED", help="Random seed"),
    delay: float = typer.Option(
        0.0, "--delay", "-d", envvar="UNO_DELAY", help="Seconds to pause after each event"
    ),
    max_turns: Optional[int] = typer.Option(
        None, "--max-turns", envvar="UNO_MAX_TURNS", help="Stop after this many turns"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Run a single UNO game."""
    from unoengine.orchestration.game_runner import GameRunner

    _configure_logging(verbose)
    agent_map = _parse_agents(agents, seed)
    runner = GameRunner(
        agent_map,
        seed=seed,
        max_turns=max_turns,
        listeners=[_console_listener(delay)],
    )
    result = runner.run()
    typer.echo(f"Winner: {result.winner or 'None (turn limit)'}")
    typer.echo(f"Turns: {result.num_turns}")


@app.command()
def tournament(
    agents: str = typer.Option(
        "random,random",
        "--agents",
        "-a",
        envvar="UNO_AGENTS",
        help="Comma-separated agent types",
    ),
    games: int = typer.Option(100, "--games", "-g", help="Number of games"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", envvar="UNO_SEED", help="Random seed"),
    max_turns: Optional[int] = typer.Option(
        None, "--max-turns", envvar="UNO_MAX_TURNS", help="Turn cap per game"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Run a tournament."""
    from unoengine.orchestration.tournament import run_tournament

    _configure_logging(verbose)
    agent_map = _parse_agents(agents, seed)
    wins = run_tournament(agent_map, num_games=games, seed=seed, max_turns=max_turns)
    typer.echo("Tournament results:")
    for pid in agent_map:
        typer.echo(f"  {pid}: {wins.get(pid, 0)} wins")


if __name__ == "__main__":
    app()
