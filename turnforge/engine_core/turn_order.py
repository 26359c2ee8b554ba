"""
Turn Order - The single writer of phase, player and resource counters.

TurnOrder tracks:
- Current phase (a game-specific Enum member)
- Current player, turn counter, round counter
- Per-player resource counters (actions, buys, extra turns, ...)

Nothing else in the engine assigns these values. Actions that grant
resources ("+2 Actions") go through grant(); actions that consume them go
through spend(). Phase changes, player rotation and round advancement are
driven by the forward model's transition rule calling set_phase(),
end_player_turn() and end_round().
"""

from __future__ import annotations
import logging
from enum import Enum
from typing import Mapping

from .errors import EngineConsistencyError

logger = logging.getLogger(__name__)


class TurnOrder:
    """
    Phase/turn/round bookkeeping for one match.

    Fields are private; read them through the properties.
    """

    def __init__(
        self,
        player_count: int,
        initial_phase: Enum,
        resource_defaults: Mapping[str, int] | None = None,
        first_player: int = 0,
    ):
        if player_count < 1:
            raise EngineConsistencyError("TurnOrder needs at least one player")
        self._player_count = player_count
        self._phase = initial_phase
        self._first_player = first_player
        self._current_player = first_player
        self._turn_counter = 0
        self._round_counter = 0
        self._resource_defaults = dict(resource_defaults or {})
        self._resources = [dict(self._resource_defaults) for _ in range(player_count)]

    @property
    def player_count(self) -> int:
        return self._player_count

    @property
    def phase(self) -> Enum:
        return self._phase

    @property
    def current_player(self) -> int:
        return self._current_player

    @property
    def first_player(self) -> int:
        return self._first_player

    @property
    def turn_counter(self) -> int:
        return self._turn_counter

    @property
    def round_counter(self) -> int:
        return self._round_counter

    def resource(self, player: int, name: str) -> int:
        """Current value of a player's resource counter."""
        try:
            return self._resources[player][name]
        except KeyError:
            raise EngineConsistencyError(f"Unknown resource '{name}'") from None

    def resources(self, player: int) -> dict[str, int]:
        """Copy of all resource counters for a player."""
        return dict(self._resources[player])

    def grant(self, player: int, name: str, amount: int = 1) -> None:
        """Add to a resource counter."""
        self._resources[player][name] = self.resource(player, name) + amount

    def spend(self, player: int, name: str, amount: int = 1) -> None:
        """
        Consume from a resource counter.

        Spending more than is available means an action was offered
        that should not have been legal.
        """
        available = self.resource(player, name)
        if amount > available:
            logger.error("Player %d spent %d %s with only %d available", player, amount, name, available)
            raise EngineConsistencyError(
                f"Player {player} cannot spend {amount} {name} (has {available})"
            )
        self._resources[player][name] = available - amount

    def reset_resources(self, player: int) -> None:
        """Restore a player's counters to their turn-start defaults."""
        self._resources[player] = dict(self._resource_defaults)

    def set_phase(self, phase: Enum) -> None:
        logger.debug("Phase %s -> %s", self._phase.name, phase.name)
        self._phase = phase

    def end_player_turn(self, next_phase: Enum | None = None) -> None:
        """
        Finish the current player's turn.

        Resets the outgoing player's counters, advances the turn counter
        and passes play to the next seat.
        """
        self.reset_resources(self._current_player)
        self._turn_counter += 1
        self._current_player = (self._current_player + 1) % self._player_count
        if next_phase is not None:
            self._phase = next_phase
        logger.debug("Turn %d: player %d to act", self._turn_counter, self._current_player)

    def end_round(self, next_phase: Enum | None = None) -> None:
        """Advance the round counter and restart at the first player."""
        for player in range(self._player_count):
            self.reset_resources(player)
        self._round_counter += 1
        self._turn_counter = 0
        self._current_player = self._first_player
        if next_phase is not None:
            self._phase = next_phase
        logger.info("Round %d begins", self._round_counter)
