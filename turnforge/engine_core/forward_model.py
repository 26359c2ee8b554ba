"""
Forward Model - Applies actions to game state and drives the turn cycle.

The forward model is the single entry point for changing a match:
- setup() builds the initial state from parameters and a seed
- compute_available_actions() lists legal actions (read-only)
- next() applies one action and runs every rule it triggers

next() follows a fixed sequence:
1. Reject if the game is over or the action is not legal
2. Let the top extended action observe the action
3. Apply the action's own effect
4. Pop extended actions that are now complete
5. Run the game's transition rule (phases, reveals, triggers)
6. End the game, end the round, or advance the turn

Game-specific rules plug in through the underscore hooks. The model
itself holds no per-match state, so one instance can drive any number
of matches.
"""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

from .action import Action, ActionResult, PassAction
from .config import GameParameters, load_parameters
from .errors import ConfigurationError
from .state import GameResult, GameState

logger = logging.getLogger(__name__)

# Resource name used for "take another turn straight away"
EXTRA_TURNS = "extra_turns"


class Transition(Enum):
    """What the transition rule decided after an action."""
    CONTINUE = "continue"  # Same player keeps acting (mid-turn or phase change)
    TURN_OVER = "turn_over"  # Current player's turn is finished
    ROUND_OVER = "round_over"  # Round finished, game continues
    GAME_OVER = "game_over"  # Game finished; final scoring required


class ForwardModel(ABC):
    """
    Base class for a game's rules.

    Subclasses set game_name and parameters_type and implement the
    abstract hooks.
    """
    game_name: str = "game"
    parameters_type: type[GameParameters] = GameParameters

    # =========================================================================
    # Public API
    # =========================================================================

    def setup(
        self,
        player_count: int,
        config: GameParameters | dict[str, Any] | None = None,
        random_seed: int = 0,
    ) -> GameState:
        """
        Create the initial state of a match.

        Args:
            player_count: Number of seated players
            config: Parameters model, a dict of overrides, or None for defaults
            random_seed: Seed for every shuffle in the match

        Raises:
            ConfigurationError: bad player count or parameters
        """
        if isinstance(config, GameParameters):
            params = config
        else:
            params = load_parameters(self.parameters_type, config)
        if not isinstance(params, self.parameters_type):
            raise ConfigurationError([
                f"{self.game_name} expects {self.parameters_type.__name__}, "
                f"got {type(params).__name__}"
            ])
        params.validate_player_count(player_count)

        state = self._create_state(player_count, params, random_seed)
        self._setup(state)
        logger.info("%s set up for %d players (seed %d)", self.game_name, player_count, random_seed)
        return state

    def compute_available_actions(self, state: GameState) -> list[Action]:
        """
        Generate all legal actions for the player who must act.

        Never empty while the game is ongoing: if nothing else is legal,
        a PassAction is returned. Does not modify the state.
        """
        if state.is_terminal:
            return []

        frame = state.action_stack.peek()
        if frame is not None:
            actions = frame.follow_on_actions(state)
        else:
            actions = self._compute_phase_actions(state)

        if not actions:
            actions = [PassAction(self.get_acting_player(state))]
        return actions

    def next(self, state: GameState, action: Action, validate: bool = True) -> ActionResult:
        """
        Apply an action to the game state, in place.

        Returns ActionResult; a rejected action leaves the state untouched.
        Internal consistency failures raise EngineConsistencyError.
        """
        if state.is_terminal:
            return ActionResult.failure("Game is over - no actions allowed", error_code="GAME_OVER")

        if validate and action not in self.compute_available_actions(state):
            return ActionResult.failure(
                f"Illegal action: {action.describe()}", error_code="INVALID_ACTION"
            )

        logger.debug("Apply %s", action.describe())

        state.action_stack.register(state, action)
        action.execute(state)
        state.action_stack.sweep(state)

        outcome = self._transition(state, action)
        if outcome is Transition.GAME_OVER:
            self._end_game(state)
            logger.info("%s over: scores=%s results=%s", self.game_name, state.scores,
                        [r.value for r in state.results])
        elif outcome is Transition.ROUND_OVER:
            self._end_round(state)
        elif outcome is Transition.TURN_OVER:
            self._advance_turn(state)

        state.action_history.append(action)
        return ActionResult.success_with_state(state)

    def is_terminal(self, state: GameState) -> bool:
        return state.is_terminal

    def get_results(self, state: GameState) -> list[GameResult]:
        return list(state.results)

    def get_scores(self, state: GameState) -> list[int]:
        return [state.game_score(p) for p in range(state.player_count)]

    def get_acting_player(self, state: GameState) -> int:
        """The seat whose decision is needed next."""
        frame = state.action_stack.peek()
        if frame is not None:
            return frame.deciding_player(state)
        return state.current_player

    # =========================================================================
    # Turn advancement
    # =========================================================================

    def _advance_turn(self, state: GameState) -> None:
        """
        Move to the next player's turn.

        A player holding unconsumed extra turns keeps acting instead;
        one extra turn is consumed.
        """
        player = state.current_player
        if EXTRA_TURNS in state.turn_order.resources(player) and \
                state.turn_order.resource(player, EXTRA_TURNS) > 0:
            state.turn_order.spend(player, EXTRA_TURNS)
            logger.debug("Player %d takes an extra turn", player)
            return
        self._end_player_turn(state)

    def _end_player_turn(self, state: GameState) -> None:
        """End-of-turn housekeeping. Default: rotate to the next seat."""
        state.turn_order.end_player_turn()

    def _assign_results(self, state: GameState, results: list[GameResult]) -> None:
        """Write final results once."""
        state.results = list(results)

    # =========================================================================
    # Game-specific hooks
    # =========================================================================

    @abstractmethod
    def _create_state(self, player_count: int, params: GameParameters, random_seed: int) -> GameState:
        """Build an empty state object of the game's state type."""

    @abstractmethod
    def _setup(self, state: GameState) -> None:
        """Deal cards, build supplies, set the first phase."""

    @abstractmethod
    def _compute_phase_actions(self, state: GameState) -> list[Action]:
        """Legal actions when no extended action is in progress."""

    @abstractmethod
    def _transition(self, state: GameState, action: Action) -> Transition:
        """Apply phase/turn/round rules after an action; report the outcome."""

    @abstractmethod
    def _end_game(self, state: GameState) -> None:
        """Final scoring and result assignment."""

    def _end_round(self, state: GameState) -> None:
        """Reset per-round state. Only games with rounds override this."""
        state.turn_order.end_round()
