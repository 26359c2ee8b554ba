"""
Sushi Go - Card drafting game.

Key mechanics:
- Each player picks one card from their hand per turn slot
- Picks are revealed together, then hands are passed on
- Chopsticks allow two picks in one slot; wasabi triples a nigiri
- Maki scored per round, pudding at the end of the third round
"""

from .cards import SushiCard, MAKI_ICONS, NIGIRI, is_nigiri
from .parameters import SushiGoParameters
from .state import SushiGoGameState, SushiGoPhase
from .actions import PickCard, PickNigiriOnWasabi, UseChopsticks, pick_points
from .forward_model import SushiGoForwardModel

__all__ = [
    "SushiCard",
    "MAKI_ICONS",
    "NIGIRI",
    "is_nigiri",
    "SushiGoParameters",
    "SushiGoGameState",
    "SushiGoPhase",
    "PickCard",
    "PickNigiriOnWasabi",
    "UseChopsticks",
    "pick_points",
    "SushiGoForwardModel",
]
