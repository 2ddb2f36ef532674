"""Single game runner."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Optional

from unoengine.engine import Game
from unoengine.engine.events import Listener

if TYPE_CHECKING:
    from unoengine.agent.protocol import PlayerProtocol

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """Result of a game, keyed by player id."""

    winner: Optional[str]
    num_turns: int
    player_ids: tuple[str, ...]


class GameRunner:
    """Runs a single UNO game to completion or to a turn cap."""

    def __init__(
        self,
        agents: dict[str, "PlayerProtocol"],
        seed: Optional[int] = None,
        max_turns: Optional[int] = None,
        listeners: Iterable[Listener] = (),
    ):
        self._agents = agents
        self._seed = seed
        self._max_turns = max_turns
        self._listeners = list(listeners)

    def run(self) -> GameResult:
        """Run the game and return the result."""
        player_ids = list(self._agents.keys())
        game = Game(
            [self._agents[pid] for pid in player_ids],
            seed=self._seed,
            listeners=self._listeners,
        )
        game.setup()

        while not game.is_over:
            if self._max_turns is not None and game.num_turns >= self._max_turns:
                logger.info("Stopping after %d turns without a winner", game.num_turns)
                break
            game.play_turn()

        winner = game.state.winner
        return GameResult(
            winner=player_ids[winner] if winner is not None else None,
            num_turns=game.num_turns,
            player_ids=tuple(player_ids),
        )
