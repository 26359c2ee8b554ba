"""
Action Stack - Step-based resolution of extended actions.

Some actions cannot be applied in one step: playing a Cellar asks the
player which cards to discard, a Militia asks every opponent to discard
down to three, a Throne Room plays another card twice. Each such action
pushes an ExtendedAction frame. While frames are on the stack:
- the top frame observes every action taken
- legal actions come from the top frame, not the phase
- a frame is popped as soon as it reports completion

Frames can nest: a Throne Room that plays a Cellar has the Cellar frame
on top of it until the Cellar is resolved.
"""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .errors import EngineConsistencyError

if TYPE_CHECKING:
    from .action import Action
    from .state import GameState

logger = logging.getLogger(__name__)

# Upper bound on completion checks in one sweep
MAX_SWEEP_ITERATIONS = 100


@dataclass
class ExtendedAction(ABC):
    """
    An in-progress multi-step action.

    player_id is the seat that started the action.
    """
    player_id: int

    @abstractmethod
    def register_action_taken(self, state: GameState, action: Action) -> None:
        """Observe an action taken while this frame is on top of the stack."""

    @abstractmethod
    def execution_complete(self, state: GameState) -> bool:
        """True once no further decisions are needed. May push a new frame."""

    @abstractmethod
    def follow_on_actions(self, state: GameState) -> list[Action]:
        """Legal actions while this frame is on top. Must not mutate state."""

    def deciding_player(self, state: GameState) -> int:
        """The seat that makes the next follow-on decision."""
        return self.player_id


class ActionStack:
    """Push-down stack of ExtendedAction frames."""

    def __init__(self):
        self._frames: list[ExtendedAction] = []

    def __len__(self) -> int:
        return len(self._frames)

    @property
    def is_empty(self) -> bool:
        return not self._frames

    def push(self, frame: ExtendedAction) -> None:
        logger.debug("Push %s (depth %d)", type(frame).__name__, len(self._frames) + 1)
        self._frames.append(frame)

    def peek(self) -> ExtendedAction | None:
        return self._frames[-1] if self._frames else None

    def pop(self) -> ExtendedAction:
        frame = self._frames.pop()
        logger.debug("Pop %s (depth %d)", type(frame).__name__, len(self._frames))
        return frame

    def register(self, state: GameState, action: Action) -> None:
        """Let the top frame observe an action, if there is one."""
        if self._frames:
            self._frames[-1].register_action_taken(state, action)

    def sweep(self, state: GameState) -> int:
        """
        Pop completed frames from the top.

        Stops at the first incomplete frame. Returns how many were popped.
        A completion check may push a new frame (Throne Room's second
        play); the new top is then checked before the frame below it.
        Every check that reports completion counts towards
        MAX_SWEEP_ITERATIONS, past which the stack is treated as broken.
        """
        popped = 0
        checks = 0
        while self._frames:
            top = self._frames[-1]
            if not top.execution_complete(state):
                break
            checks += 1
            if checks > MAX_SWEEP_ITERATIONS:
                logger.error("Action stack sweep exceeded %d iterations", MAX_SWEEP_ITERATIONS)
                raise EngineConsistencyError(
                    f"Action stack did not settle after {MAX_SWEEP_ITERATIONS} completion checks"
                )
            if self._frames[-1] is top:
                self.pop()
                popped += 1
        return popped
