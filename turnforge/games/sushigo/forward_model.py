"""
Sushi Go Forward Model - Simultaneous-reveal drafting game.

Turn structure:
- Players pick one card each, one seat after another, in a shared slot
- When the last seat has picked (and holds no extra turns), every pick
  is revealed onto its owner's field and hands are passed to the right
- Chopsticks let a player take two picks in one slot

A round ends when every hand is empty and maki rolls are scored. After
the last round pudding is scored and the player with the most points
wins; ties go to the most puddings, then draw.
"""

from __future__ import annotations
import logging
import random

from ...engine_core.action import Action
from ...engine_core.errors import EngineConsistencyError
from ...engine_core.forward_model import ForwardModel, Transition
from ...engine_core.scoring import majority_bonus, minority_bonus, resolve_winner
from ...engine_core.state import VisibilityMode, Zone
from ...engine_core.triggers import TriggerKind
from ...engine_core.turn_order import TurnOrder
from .actions import PickCard, PickNigiriOnWasabi, UseChopsticks
from .cards import SushiCard, is_nigiri
from .parameters import SushiGoParameters
from .state import EXTRA_TURNS, TURN_RESOURCES, SushiGoGameState, SushiGoPhase

logger = logging.getLogger(__name__)


class SushiGoForwardModel(ForwardModel):
    """Rules for Sushi Go."""
    game_name = "sushigo"
    parameters_type = SushiGoParameters

    # =========================================================================
    # Setup
    # =========================================================================

    def _create_state(self, player_count, params, random_seed):
        return SushiGoGameState(
            game_id=f"sushigo_{random_seed}",
            player_count=player_count,
            params=params,
            turn_order=TurnOrder(player_count, SushiGoPhase.DRAW, TURN_RESOURCES),
            random_seed=random_seed,
            rng=random.Random(random_seed),
        )

    def _setup(self, state: SushiGoGameState) -> None:
        n = state.player_count

        for card_type, amount in state.params.deck_composition().items():
            state.draw_pile.extend([state.new_card(card_type) for _ in range(amount)])
        state.draw_pile.shuffle(state.rng)

        for p in range(n):
            state.hands.append(Zone(name=f"player{p}_hand", owner=p, visibility=VisibilityMode.VISIBLE_TO_OWNER))
            state.fields.append(Zone(name=f"player{p}_field", owner=p))
        state.picks = [[] for _ in range(n)]
        state.score_to_add = [0] * n
        state.wasabi_available = [0] * n
        state.chopsticks_activated = [False] * n

        self._deal(state)

    def _deal(self, state: SushiGoGameState) -> None:
        hand_size = state.params.hand_size(state.player_count)
        for hand in state.hands:
            for _ in range(hand_size):
                hand.append(state.draw_pile.draw())

    # =========================================================================
    # Legal actions
    # =========================================================================

    def _compute_phase_actions(self, state: SushiGoGameState) -> list[Action]:
        player = state.current_player
        actions: list[Action] = []
        for card_type in state.unpicked_types(player):
            actions.append(PickCard(player, card_type))
            if is_nigiri(card_type) and state.wasabi_available[player] > 0:
                actions.append(PickNigiriOnWasabi(player, card_type))
        if state.can_use_chopsticks(player):
            actions.append(UseChopsticks(player))
        return actions

    # =========================================================================
    # Transitions
    # =========================================================================

    def _transition(self, state: SushiGoGameState, action: Action) -> Transition:
        if state.phase is not SushiGoPhase.DRAW:
            raise EngineConsistencyError(f"Unknown game phase {state.phase}")

        player = state.current_player
        slot_complete = (state.turn_counter + 1) % state.player_count == 0
        if not slot_complete or state.turn_order.resource(player, EXTRA_TURNS) > 0:
            return Transition.TURN_OVER

        self._reveal(state)
        self._rotate_hands(state)

        if not state.hands_empty():
            return Transition.TURN_OVER

        self._score_maki(state)
        if state.round_counter + 1 >= state.params.rounds:
            return Transition.GAME_OVER
        return Transition.ROUND_OVER

    def _reveal(self, state: SushiGoGameState) -> None:
        """Move every pick to its owner's field and bank the pending points."""
        for p in range(state.player_count):
            for card in state.picks[p]:
                state.hands[p].remove(card)
                state.fields[p].append(card)
            state.add_score(p, state.score_to_add[p])
            logger.debug("Player %d reveals %s (+%d)", p,
                         [c.card_type.value for c in state.picks[p]], state.score_to_add[p])
            state.score_to_add[p] = 0
            state.picks[p] = []

            # Used chopsticks go back into the hand that is passed on
            if state.chopsticks_activated[p]:
                chopsticks = state.fields[p].first_of(SushiCard.CHOPSTICKS)
                state.fields[p].remove(chopsticks)
                state.hands[p].append(chopsticks)
                state.chopsticks_activated[p] = False

    def _rotate_hands(self, state: SushiGoGameState) -> None:
        """Player i takes the hand of player i+1."""
        n = state.player_count
        passed = [hand.cards for hand in state.hands]
        for i, hand in enumerate(state.hands):
            hand.cards = passed[(i + 1) % n]

    def _score_maki(self, state: SushiGoGameState) -> None:
        params: SushiGoParameters = state.params
        maki = [state.maki_count(p) for p in range(state.player_count)]
        bonus = majority_bonus(maki, params.maki_most, params.maki_second)
        for p, points in enumerate(bonus):
            state.add_score(p, points)
        logger.info("Round %d over: maki %s, scores %s", state.round_counter, maki, state.scores)

    # =========================================================================
    # Round and game end
    # =========================================================================

    def _end_round(self, state: SushiGoGameState) -> None:
        """Clear the table except puddings and deal the next round."""
        for p in range(state.player_count):
            field = state.fields[p]
            for card in [c for c in field if c.card_type != SushiCard.PUDDING]:
                field.remove(card)
                state.discard_pile.append(card)
            state.picks[p] = []
            state.score_to_add[p] = 0
            state.wasabi_available[p] = 0
            state.chopsticks_activated[p] = False
        state.triggers.fire(TriggerKind.ROUND_ENDED, state)
        state.turn_order.end_round(next_phase=SushiGoPhase.DRAW)
        self._deal(state)

    def _end_game(self, state: SushiGoGameState) -> None:
        params: SushiGoParameters = state.params
        puddings = [state.pudding_count(p) for p in range(state.player_count)]
        bonus = minority_bonus(puddings, params.pudding_most, params.pudding_least)
        for p, points in enumerate(bonus):
            state.add_score(p, points)
        self._assign_results(state, resolve_winner(state.scores, puddings))
