"""
Trigger Registry - Deferred effects keyed to game events.

A card can schedule an effect that happens later ("at the start of your
Buy phase, +$1 if you have a Silver"). The effect is registered with a
TriggerKind; when the forward model fires that kind, every matching
effect runs once, in registration order, and is discarded.
"""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .state import GameState

logger = logging.getLogger(__name__)


class TriggerKind(Enum):
    """Events that deferred effects can wait for."""
    PHASE_ENTERED_BUY = "phase_entered_buy"
    TURN_ENDED = "turn_ended"
    ROUND_ENDED = "round_ended"


class DeferredEffect(ABC):
    """An effect waiting for a trigger."""

    @property
    @abstractmethod
    def trigger_kind(self) -> TriggerKind:
        """The event this effect waits for."""

    @abstractmethod
    def execute(self, state: GameState) -> None:
        """Apply the effect. Called at most once."""


class TriggerRegistry:
    """Pending deferred effects for one match."""

    def __init__(self):
        self._pending: list[DeferredEffect] = []

    def __len__(self) -> int:
        return len(self._pending)

    @property
    def pending(self) -> tuple[DeferredEffect, ...]:
        return tuple(self._pending)

    def register(self, effect: DeferredEffect) -> None:
        self._pending.append(effect)

    def fire(self, kind: TriggerKind, state: GameState) -> int:
        """
        Run and discard every pending effect waiting for `kind`.

        Effects registered while firing are kept for a later event,
        even if they wait for the same kind.

        Returns the number of effects executed.
        """
        matching = [e for e in self._pending if e.trigger_kind == kind]
        self._pending = [e for e in self._pending if e.trigger_kind != kind]
        if matching:
            logger.debug("Firing %d effect(s) for %s", len(matching), kind.name)
        for effect in matching:
            effect.execute(state)
        return len(matching)

