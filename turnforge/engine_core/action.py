"""
Action System - Actions and results.

Actions represent:
1. Player decisions (play a card, buy a card, pick a card)
2. Follow-on decisions inside an extended action (discard this, gain that)
3. Phase control (end the current phase, pass)

Actions are immutable value objects: two actions built with the same
fields compare equal, which is how next() checks an action against the
legal set. Each action knows how to apply its own effect via execute().
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .errors import IllegalActionError

if TYPE_CHECKING:
    from .state import GameState


@dataclass(frozen=True)
class Action(ABC):
    """
    A player action.

    player_id is the seat taking the action. That is normally the
    current player, but follow-on decisions of an extended action
    (e.g. discarding to an attack) can belong to another seat.
    """
    player_id: int

    @abstractmethod
    def execute(self, state: GameState) -> None:
        """Apply this action's own effect to the state."""

    def describe(self) -> str:
        """Short human-readable description for logs."""
        return repr(self)


@dataclass(frozen=True)
class EndPhase(Action):
    """Explicitly end the current phase. The transition rule does the rest."""

    def execute(self, state: GameState) -> None:
        pass

    def describe(self) -> str:
        return f"player {self.player_id} ends the phase"


@dataclass(frozen=True)
class DoNothing(Action):
    """Decline an optional follow-on decision of an extended action."""

    def execute(self, state: GameState) -> None:
        pass

    def describe(self) -> str:
        return f"player {self.player_id} declines"


@dataclass(frozen=True)
class PassAction(Action):
    """
    Offered when nothing else is legal.

    Consuming it completes the turn the same way an ordinary empty
    turn would.
    """

    def execute(self, state: GameState) -> None:
        pass

    def describe(self) -> str:
        return f"player {self.player_id} passes"


@dataclass
class ActionResult:
    """
    Result of applying an action.

    Contains:
    - Whether the action was accepted
    - The (mutated) state on success
    - Error message and code on rejection
    """
    success: bool
    new_state: Any | None = None  # GameState
    error: str | None = None
    error_code: str | None = None

    @classmethod
    def failure(cls, error: str, error_code: str | None = None) -> ActionResult:
        """Create a failure result."""
        return cls(success=False, error=error, error_code=error_code)

    @classmethod
    def success_with_state(cls, state: Any) -> ActionResult:
        """Create a success result with the updated state."""
        return cls(success=True, new_state=state)

    def unwrap(self) -> Any:
        """Return the state, or raise IllegalActionError if rejected."""
        if not self.success:
            raise IllegalActionError(self.error or "Action rejected", self.error_code)
        return self.new_state
