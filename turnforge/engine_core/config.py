"""
Game Parameters - Immutable per-game configuration.

Parameters are pydantic models frozen at construction. They are supplied
to ForwardModel.setup() and never mutated afterwards; scoring tables and
card counts live here, not in engine logic.
"""

from __future__ import annotations
from typing import TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from .errors import ConfigurationError


class GameParameters(BaseModel):
    """Base class for per-game parameters."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    min_players: int = 2
    max_players: int = 4

    @model_validator(mode="after")
    def check_player_bounds(self) -> GameParameters:
        if self.min_players < 1:
            raise ValueError("min_players must be >= 1")
        if self.max_players < self.min_players:
            raise ValueError("max_players must be >= min_players")
        return self

    def validate_player_count(self, player_count: int) -> None:
        """Raise ConfigurationError if player_count is not supported."""
        if not self.min_players <= player_count <= self.max_players:
            raise ConfigurationError([
                f"player_count must be between {self.min_players} and "
                f"{self.max_players}, got {player_count}"
            ])


P = TypeVar("P", bound=GameParameters)


def load_parameters(model: type[P], data: dict | None = None) -> P:
    """
    Build a parameter model from a plain dict.

    Validation failures are re-raised as ConfigurationError so callers
    only need to handle the engine's own exception types.
    """
    try:
        return model.model_validate(data or {})
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(part) for part in err['loc']) or model.__name__}: {err['msg']}"
            for err in e.errors()
        ]
        raise ConfigurationError(errors) from e
