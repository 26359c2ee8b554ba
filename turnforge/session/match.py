"""
Match Runner - Plays one match between bot policies.

The loop:
1. Ask the forward model for the legal actions
2. Ask the acting player's policy for a decision
3. Apply the decision through next()
4. Repeat until the game is over

The returned MatchRecord is a plain pydantic model so it can be printed
or dumped as JSON by the CLI.
"""

from __future__ import annotations
import logging
from typing import Any, Sequence

from pydantic import BaseModel, Field

from ..bots.policy import BotPolicy
from ..engine_core.config import GameParameters
from ..engine_core.errors import EngineConsistencyError
from ..engine_core.forward_model import ForwardModel
from ..engine_core.state import GameResult

logger = logging.getLogger(__name__)

DEFAULT_MAX_STEPS = 10_000


class MatchRecord(BaseModel):
    """Outcome of one finished match."""
    game: str
    seed: int
    players: list[str] = Field(description="Policy name per seat")
    steps: int = Field(description="Actions applied, including passes")
    rounds: int = 0
    scores: list[int]
    results: list[GameResult]

    @property
    def winners(self) -> list[int]:
        return [p for p, r in enumerate(self.results) if r == GameResult.WIN]


def play_match(
    model: ForwardModel,
    policies: Sequence[BotPolicy],
    config: GameParameters | dict[str, Any] | None = None,
    seed: int = 0,
    max_steps: int = DEFAULT_MAX_STEPS,
) -> MatchRecord:
    """
    Play a match to the end, one policy per seat.

    Raises:
        ConfigurationError: unsupported player count or bad config
        EngineConsistencyError: the match did not finish within max_steps
    """
    state = model.setup(len(policies), config, random_seed=seed)

    steps = 0
    while not model.is_terminal(state):
        if steps >= max_steps:
            logger.error("%s match (seed %d) not finished after %d steps", model.game_name, seed, steps)
            raise EngineConsistencyError(f"Match did not finish within {max_steps} steps")

        legal = model.compute_available_actions(state)
        player = model.get_acting_player(state)
        decision = policies[player].select_action(state, model, legal)
        logger.debug("Player %d: %s (%s)", player, decision.action, decision.explanation)
        model.next(state, decision.action).unwrap()
        steps += 1

    return MatchRecord(
        game=model.game_name,
        seed=seed,
        players=[policy.get_name() for policy in policies],
        steps=steps,
        rounds=state.round_counter + 1,
        scores=list(state.scores),
        results=model.get_results(state),
    )
