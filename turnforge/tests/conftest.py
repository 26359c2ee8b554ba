"""
Pytest fixtures for Turnforge tests.
"""

import pytest

from ..engine_core.state import Card, GameState
from ..engine_core.turn_order import TurnOrder
from ..games.dominion import DominionForwardModel, DominionGameState, DominionPhase
from ..games.dominion.parameters import DominionParameters
from ..games.sushigo import SushiGoForwardModel, SushiGoGameState


@pytest.fixture
def bare_state() -> GameState:
    """A two-player GameState with no game rules attached."""
    return GameState(
        game_id="test_game",
        player_count=2,
        params=None,
        turn_order=TurnOrder(2, DominionPhase.PLAY, {"actions": 1}),
    )


@pytest.fixture
def dominion_model() -> DominionForwardModel:
    return DominionForwardModel()


@pytest.fixture
def sushigo_model() -> SushiGoForwardModel:
    return SushiGoForwardModel()


@pytest.fixture
def dominion_state(dominion_model: DominionForwardModel) -> DominionGameState:
    """A fresh 2-player Dominion match with the Size Distortion kingdom."""
    return dominion_model.setup(2, DominionParameters.size_distortion(), random_seed=42)


@pytest.fixture
def sushigo_state(sushigo_model: SushiGoForwardModel) -> SushiGoGameState:
    """A fresh 3-player Sushi Go match."""
    return sushigo_model.setup(3, random_seed=42)


@pytest.fixture
def set_hand():
    """
    Replace a player's hand with fresh cards of the given types.

    The old hand goes back on top of the draw pile (Dominion) or to the
    draw pile (Sushi Go) so card counts stay consistent.
    """
    def _set_hand(state, player, *card_types) -> list[Card]:
        old = state.hands[player].clear()
        if isinstance(state, DominionGameState):
            state.draw_piles[player].cards[:0] = old
        else:
            state.draw_pile.extend(old)
        cards = [state.new_card(t) for t in card_types]
        state.hands[player].extend(cards)
        return cards

    return _set_hand
