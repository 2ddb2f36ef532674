"""Tournament - run many games and aggregate results."""

import random
from collections import defaultdict
from typing import Any, Optional

from unoengine.orchestration.game_runner import GameRunner


def run_tournament(
    agents: dict[str, Any],
    num_games: int = 100,
    seed: int | None = None,
    max_turns: Optional[int] = None,
) -> dict[str, int]:
    """Run a tournament: the same agents play `num_games` games.

    Seat order is reversed every other game so nobody always starts.

    Returns:
        Dict mapping player_id to number of wins.
    """
    player_ids = list(agents.keys())
    wins: dict[str, int] = defaultdict(int)

    rng = random.Random(seed)
    for g in range(num_games):
        order = player_ids if g % 2 == 0 else list(reversed(player_ids))
        ordered_agents = {pid: agents[pid] for pid in order}
        runner = GameRunner(
            ordered_agents,
            seed=rng.randint(0, 2**31 - 1),
            max_turns=max_turns,
        )
        result = runner.run()
        if result.winner:
            wins[result.winner] += 1

    return dict(wins)
