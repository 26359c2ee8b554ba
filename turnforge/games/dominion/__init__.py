"""
Dominion - Deck-building purchase game.

Key mechanics:
- Every player starts with 7 Coppers and 3 Estates
- Each turn: a Play phase (action cards) then a Buy phase (supply cards)
- Action cards can need further decisions (extended actions) or
  schedule effects for later (deferred effects)
- Game ends when Provinces or three supply piles run out

This module contains:
- Card catalog
- Dominion-specific state model and parameters
- Actions, extended actions and deferred effects
- The forward model
"""

from .cards import CardType, Category, DominionCard, CARDS, get_card
from .parameters import DominionParameters, FIRST_GAME, SIZE_DISTORTION
from .state import DominionGameState, DominionPhase
from .actions import PlayCard, BuyCard, DiscardCard, TrashCard, GainCard
from .frames import FRAME_FACTORIES, resolve_card
from .effects import MerchantBonus
from .forward_model import DominionForwardModel

__all__ = [
    "CardType",
    "Category",
    "DominionCard",
    "CARDS",
    "get_card",
    "DominionParameters",
    "FIRST_GAME",
    "SIZE_DISTORTION",
    "DominionGameState",
    "DominionPhase",
    "PlayCard",
    "BuyCard",
    "DiscardCard",
    "TrashCard",
    "GainCard",
    "FRAME_FACTORIES",
    "resolve_card",
    "MerchantBonus",
    "DominionForwardModel",
]
