"""
Engine Core - Deterministic turn-based rules engine.

The engine is the runtime that:
1. Sets up a GameState from parameters and a seed
2. Generates legal actions
3. Applies actions via the forward model
4. Resolves extended actions on the action stack
5. Fires deferred effects from the trigger registry
6. Resolves scoring and winners at round and game end
"""

from .state import GameState, GameResult, Card, Zone, VisibilityMode
from .action import Action, ActionResult, EndPhase, DoNothing, PassAction
from .action_stack import ActionStack, ExtendedAction, MAX_SWEEP_ITERATIONS
from .triggers import TriggerRegistry, TriggerKind, DeferredEffect
from .turn_order import TurnOrder
from .forward_model import ForwardModel, Transition, EXTRA_TURNS
from .config import GameParameters, load_parameters
from .scoring import majority_bonus, minority_bonus, resolve_winner, split_evenly
from .errors import (
    TurnforgeError,
    ConfigurationError,
    IllegalActionError,
    EngineConsistencyError,
)

__all__ = [
    "GameState",
    "GameResult",
    "Card",
    "Zone",
    "VisibilityMode",
    "Action",
    "ActionResult",
    "EndPhase",
    "DoNothing",
    "PassAction",
    "ActionStack",
    "ExtendedAction",
    "MAX_SWEEP_ITERATIONS",
    "TriggerRegistry",
    "TriggerKind",
    "DeferredEffect",
    "TurnOrder",
    "ForwardModel",
    "Transition",
    "EXTRA_TURNS",
    "GameParameters",
    "load_parameters",
    "majority_bonus",
    "minority_bonus",
    "resolve_winner",
    "split_evenly",
    "TurnforgeError",
    "ConfigurationError",
    "IllegalActionError",
    "EngineConsistencyError",
]
