"""
Bot Policy - Interface for automated players.

A BotPolicy takes a game state and the legal actions and returns a
decision. The policy never changes the state; the match runner applies
the chosen action through the forward model.
"""

from __future__ import annotations
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..engine_core.action import Action
    from ..engine_core.forward_model import ForwardModel
    from ..engine_core.state import GameState


@dataclass
class BotDecision:
    """
    One action chosen by a policy, with notes on how it was chosen.

    Contains:
    - The action to take
    - A short explanation, logged by the match runner at DEBUG
    - How sure the policy is, in [0, 1]
    """
    action: Action
    explanation: str = ""
    confidence: float = 1.0

    # Number of legal actions the policy looked at
    evaluated_actions: int = 0


class BotPolicy(ABC):
    """
    Chooses one action for the acting player.

    Policies may keep their own rng but never touch the game's.
    """

    @abstractmethod
    def select_action(
        self,
        state: GameState,
        model: ForwardModel,
        legal_actions: list[Action],
    ) -> BotDecision:
        """
        Select an action from the legal actions.

        Args:
            state: Current game state, read only
            model: Forward model of the game being played
            legal_actions: List of legal actions to choose from

        Returns:
            BotDecision with the selected action
        """

    def get_name(self) -> str:
        """Get the bot's name/identifier."""
        return self.__class__.__name__


class RandomPolicy(BotPolicy):
    """
    Uniform choice over the legal actions, seeded for replay.

    Used for:
    - Testing
    - Baseline comparison
    """

    def __init__(self, seed: int | None = None):
        self.rng = random.Random(seed)

    def select_action(self, state, model, legal_actions):
        if not legal_actions:
            raise ValueError("No legal actions available")

        action = self.rng.choice(legal_actions)
        return BotDecision(
            action=action,
            explanation="Selected randomly",
            confidence=1.0 / len(legal_actions),
            evaluated_actions=len(legal_actions),
        )


class FirstLegalPolicy(BotPolicy):
    """
    First-legal policy - always selects the first legal action.

    Used for deterministic testing. Dominion lists the most expensive
    purchase first, so this policy is also a crude "big money" player.
    """

    def select_action(self, state, model, legal_actions):
        if not legal_actions:
            raise ValueError("No legal actions available")

        return BotDecision(
            action=legal_actions[0],
            explanation="Selected first legal action",
            evaluated_actions=1,
        )
