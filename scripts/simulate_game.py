"""Simulate a game with random agents."""

from unoengine.agents import RandomAgent
from unoengine.engine.events import GameEvent, describe
from unoengine.orchestration.game_runner import GameRunner


def print_event(event: GameEvent) -> None:
    print(f"> {describe(event)}")


def main():
    agents = {
        "p1": RandomAgent("Bot1", seed=1),
        "p2": RandomAgent("Bot2", seed=2),
        "p3": RandomAgent("Bot3", seed=3),
        "p4": RandomAgent("Bot4", seed=4),
    }

    runner = GameRunner(agents, seed=42, listeners=[print_event])
    result = runner.run()

    print(f"Game finished! Winner: {result.winner}")
    print(f"Turns: {result.num_turns}")


if __name__ == "__main__":
    main()
