"""
Dominion Forward Model - Two-phase purchasing game.

Turn structure:
- PLAY: play action cards while Actions remain, or end the phase
- BUY: buy cards within the coins in hand, or end the phase
- Cleanup: hand and played cards are discarded, a new hand is drawn

The game ends after a Buy phase in which the Province pile runs out or
enough supply piles are empty. Highest victory points wins; ties go to
the player who took fewer turns, then draw.
"""

from __future__ import annotations
import logging
import random

from ...engine_core.action import Action, EndPhase
from ...engine_core.errors import EngineConsistencyError
from ...engine_core.forward_model import ForwardModel, Transition
from ...engine_core.scoring import resolve_winner
from ...engine_core.state import VisibilityMode, Zone
from ...engine_core.triggers import TriggerKind
from ...engine_core.turn_order import TurnOrder
from .actions import BuyCard, PlayCard
from .cards import CardType, get_card
from .parameters import DominionParameters
from .state import TURN_RESOURCES, DominionGameState, DominionPhase

logger = logging.getLogger(__name__)


class DominionForwardModel(ForwardModel):
    """Rules for Dominion."""
    game_name = "dominion"
    parameters_type = DominionParameters

    # =========================================================================
    # Setup
    # =========================================================================

    def _create_state(self, player_count, params, random_seed):
        return DominionGameState(
            game_id=f"dominion_{random_seed}",
            player_count=player_count,
            params=params,
            turn_order=TurnOrder(player_count, DominionPhase.PLAY, TURN_RESOURCES),
            random_seed=random_seed,
            rng=random.Random(random_seed),
            turns_taken=[0] * player_count,
        )

    def _setup(self, state: DominionGameState) -> None:
        params: DominionParameters = state.params
        n = state.player_count

        for p in range(n):
            state.hands.append(Zone(name=f"player{p}_hand", owner=p, visibility=VisibilityMode.VISIBLE_TO_OWNER))
            state.draw_piles.append(Zone(name=f"player{p}_draw", owner=p, visibility=VisibilityMode.HIDDEN_TO_ALL))
            state.discard_piles.append(Zone(name=f"player{p}_discard", owner=p))
            state.tables.append(Zone(name=f"player{p}_table", owner=p))

        victory_size = params.victory_pile_size(n)
        pile_sizes = {
            CardType.COPPER: params.copper_supply - params.starting_coppers * n,
            CardType.SILVER: params.silver_supply,
            CardType.GOLD: params.gold_supply,
            CardType.ESTATE: victory_size,
            CardType.DUCHY: victory_size,
            CardType.PROVINCE: victory_size,
            CardType.CURSE: params.curses_per_opponent * (n - 1),
        }
        for card_type in params.kingdom:
            if get_card(card_type).is_victory:
                pile_sizes[card_type] = victory_size
            else:
                pile_sizes[card_type] = params.kingdom_pile_size

        for card_type, size in pile_sizes.items():
            pile = Zone(name=f"supply_{card_type.value}")
            pile.extend([state.new_card(card_type) for _ in range(max(size, 0))])
            state.supply[card_type] = pile

        for p in range(n):
            deck = state.draw_piles[p]
            deck.extend([state.new_card(CardType.COPPER) for _ in range(params.starting_coppers)])
            deck.extend([state.new_card(CardType.ESTATE) for _ in range(params.starting_estates)])
            deck.shuffle(state.rng)
            state.draw_cards(p, params.hand_size)

    # =========================================================================
    # Legal actions
    # =========================================================================

    def _compute_phase_actions(self, state: DominionGameState) -> list[Action]:
        player = state.current_player
        phase = state.phase

        if phase is DominionPhase.PLAY:
            actions: list[Action] = []
            if state.actions_left(player) > 0:
                actions.extend(
                    PlayCard(player, t)
                    for t in state.hand_types(player)
                    if get_card(t).is_action
                )
            actions.append(EndPhase(player))
            return actions

        if phase is DominionPhase.BUY:
            budget = state.available_spend(player)
            affordable = [t for t in state.cards_to_buy() if get_card(t).cost <= budget]
            affordable.sort(key=lambda t: -get_card(t).cost)
            actions = [BuyCard(player, t) for t in affordable] if state.buys_left(player) > 0 else []
            actions.append(EndPhase(player))
            return actions

        raise EngineConsistencyError(f"Unknown game phase {phase}")

    # =========================================================================
    # Transitions
    # =========================================================================

    def _transition(self, state: DominionGameState, action: Action) -> Transition:
        player = state.current_player
        phase = state.phase

        if phase is DominionPhase.PLAY:
            if state.action_stack.is_empty and (
                state.actions_left(player) < 1 or isinstance(action, EndPhase)
            ):
                state.turn_order.set_phase(DominionPhase.BUY)
                state.triggers.fire(TriggerKind.PHASE_ENTERED_BUY, state)
            return Transition.CONTINUE

        if phase is DominionPhase.BUY:
            if state.buys_left(player) < 1 or isinstance(action, EndPhase):
                state.turns_taken[player] += 1
                if state.game_over():
                    logger.info("End condition met: %d empty piles", state.empty_piles())
                    return Transition.GAME_OVER
                return Transition.TURN_OVER
            return Transition.CONTINUE

        raise EngineConsistencyError(f"Unknown game phase {phase}")

    def _end_player_turn(self, state: DominionGameState) -> None:
        player = state.current_player
        state.cleanup(player)
        state.triggers.fire(TriggerKind.TURN_ENDED, state)
        state.draw_cards(player, state.params.hand_size)
        state.turn_order.end_player_turn(next_phase=DominionPhase.PLAY)

    # =========================================================================
    # End of game
    # =========================================================================

    def _end_game(self, state: DominionGameState) -> None:
        final_scores = [state.game_score(p) for p in range(state.player_count)]
        state.scores = final_scores
        # Fewer turns taken wins a tie
        tie_break = [-t for t in state.turns_taken]
        self._assign_results(state, resolve_winner(final_scores, tie_break))
