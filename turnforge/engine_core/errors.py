"""
Engine Errors - Exception hierarchy for the rules engine.

Three kinds of failure exist:
1. Configuration errors - rejected at setup, before any state exists
2. Caller protocol errors - illegal action or game already over; next()
   reports these as a failed ActionResult and leaves the state untouched
3. Internal consistency failures - a game's action/trigger wiring is broken;
   the match cannot continue
"""

from __future__ import annotations


class TurnforgeError(Exception):
    """Base exception for all engine errors."""
    pass


class ConfigurationError(TurnforgeError):
    """Raised when game parameters or the player count are invalid."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f"Configuration invalid with {len(errors)} error(s): {'; '.join(errors)}")


class IllegalActionError(TurnforgeError):
    """Raised by ActionResult.unwrap() when next() rejected an action."""

    def __init__(self, message: str, error_code: str | None = None):
        self.error_code = error_code
        super().__init__(message)


class EngineConsistencyError(TurnforgeError):
    """
    Fatal: the engine reached a state its rules cannot handle.

    Examples: an extended action that never reports completion,
    an unknown phase in a transition switch.
    """
    pass
