"""
Games module - Game-specific implementations.

Each game has its own subpackage with:
- Card definitions
- Parameters (pydantic models)
- Game-specific state extensions and actions
- A ForwardModel subclass holding the rules
"""

from .dominion import DominionForwardModel
from .sushigo import SushiGoForwardModel

GAMES = {
    DominionForwardModel.game_name: DominionForwardModel,
    SushiGoForwardModel.game_name: SushiGoForwardModel,
}

__all__ = ["GAMES", "DominionForwardModel", "SushiGoForwardModel"]
