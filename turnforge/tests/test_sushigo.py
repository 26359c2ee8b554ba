"""
Tests for the Sushi Go rules.

Tests:
- Setup and legal picks
- Pick scoring (tempura, sashimi, dumpling, nigiri, wasabi)
- Reveal and hand rotation
- Chopsticks extra turns and the return-to-hand policy
- Maki at round end, pudding and tie-break at game end
"""

from dataclasses import dataclass, field

import pytest

from ..engine_core.state import GameResult
from ..engine_core.triggers import DeferredEffect, TriggerKind
from ..games.sushigo import (
    PickCard,
    PickNigiriOnWasabi,
    SushiCard,
    SushiGoPhase,
    UseChopsticks,
)

S = SushiCard


def apply(model, state, action):
    """Apply an action and fail the test if it was rejected."""
    result = model.next(state, action)
    assert result.success, result.error
    return state


def types(zone):
    return [c.card_type for c in zone]


def put_on_field(state, player, *card_types):
    for t in card_types:
        state.fields[player].append(state.new_card(t))


@dataclass
class FieldSnapshot(DeferredEffect):
    """Records every field and the round number when a round ends."""
    seen: list = field(default_factory=list)

    @property
    def trigger_kind(self):
        return TriggerKind.ROUND_ENDED

    def execute(self, state):
        self.seen.append((state.round_counter, [types(f) for f in state.fields]))


class TestSetup:
    """Tests for initial state."""

    def test_deal(self, sushigo_state):
        assert [h.count for h in sushigo_state.hands] == [9, 9, 9]
        assert sushigo_state.draw_pile.count == 108 - 27
        assert all(f.is_empty for f in sushigo_state.fields)
        assert sushigo_state.phase is SushiGoPhase.DRAW
        assert sushigo_state.scores == [0, 0, 0]

    @pytest.mark.parametrize("players,hand", [(2, 10), (4, 8), (5, 7)])
    def test_hand_size_by_players(self, sushigo_model, players, hand):
        state = sushigo_model.setup(players, random_seed=1)
        assert all(h.count == hand for h in state.hands)

    def test_legal_picks_are_distinct_types(self, sushigo_model, sushigo_state, set_hand):
        set_hand(sushigo_state, 0, S.TEMPURA, S.TEMPURA, S.EGG_NIGIRI)
        legal = sushigo_model.compute_available_actions(sushigo_state)
        assert legal == [PickCard(0, S.TEMPURA), PickCard(0, S.EGG_NIGIRI)]


class TestPickScoring:
    """Points are computed when picked and banked at the reveal."""

    def pick(self, model, state, set_hand, card_type):
        set_hand(state, 0, card_type, S.PUDDING)
        apply(model, state, PickCard(0, card_type))
        return state.score_to_add[0]

    def test_single_tempura_scores_nothing(self, sushigo_model, sushigo_state, set_hand):
        assert self.pick(sushigo_model, sushigo_state, set_hand, S.TEMPURA) == 0

    def test_tempura_pair(self, sushigo_model, sushigo_state, set_hand):
        put_on_field(sushigo_state, 0, S.TEMPURA)
        assert self.pick(sushigo_model, sushigo_state, set_hand, S.TEMPURA) == 5

    def test_sashimi_set(self, sushigo_model, sushigo_state, set_hand):
        put_on_field(sushigo_state, 0, S.SASHIMI, S.SASHIMI)
        assert self.pick(sushigo_model, sushigo_state, set_hand, S.SASHIMI) == 10

    def test_dumpling_increments(self, sushigo_model, sushigo_state, set_hand):
        put_on_field(sushigo_state, 0, S.DUMPLING, S.DUMPLING)
        assert self.pick(sushigo_model, sushigo_state, set_hand, S.DUMPLING) == 3

    def test_sixth_dumpling_worth_nothing(self, sushigo_model, sushigo_state, set_hand):
        put_on_field(sushigo_state, 0, *[S.DUMPLING] * 5)
        assert self.pick(sushigo_model, sushigo_state, set_hand, S.DUMPLING) == 0

    def test_nigiri_values(self, sushigo_model, sushigo_state, set_hand):
        assert self.pick(sushigo_model, sushigo_state, set_hand, S.SQUID_NIGIRI) == 3

    def test_points_wait_for_reveal(self, sushigo_model, sushigo_state, set_hand):
        self.pick(sushigo_model, sushigo_state, set_hand, S.SQUID_NIGIRI)
        assert sushigo_state.scores[0] == 0
        assert sushigo_state.fields[0].is_empty
        assert sushigo_state.current_player == 1

    def test_wasabi_marks_available(self, sushigo_model, sushigo_state, set_hand):
        self.pick(sushigo_model, sushigo_state, set_hand, S.WASABI)
        assert sushigo_state.wasabi_available[0] == 1

    def test_nigiri_on_wasabi(self, sushigo_model, sushigo_state, set_hand):
        sushigo_state.wasabi_available[0] = 1
        set_hand(sushigo_state, 0, S.SALMON_NIGIRI, S.PUDDING)

        legal = sushigo_model.compute_available_actions(sushigo_state)
        assert PickNigiriOnWasabi(0, S.SALMON_NIGIRI) in legal

        apply(sushigo_model, sushigo_state, PickNigiriOnWasabi(0, S.SALMON_NIGIRI))
        assert sushigo_state.score_to_add[0] == 6
        assert sushigo_state.wasabi_available[0] == 0

    def test_no_wasabi_option_without_wasabi(self, sushigo_model, sushigo_state, set_hand):
        set_hand(sushigo_state, 0, S.SALMON_NIGIRI, S.PUDDING)
        legal = sushigo_model.compute_available_actions(sushigo_state)
        assert not any(isinstance(a, PickNigiriOnWasabi) for a in legal)


class TestRevealAndRotation:
    """Simultaneous reveal at the end of a slot, then hands pass on."""

    def test_slot_reveal_and_rotation(self, sushigo_model, sushigo_state, set_hand):
        set_hand(sushigo_state, 0, S.TEMPURA, S.SASHIMI)
        set_hand(sushigo_state, 1, S.EGG_NIGIRI, S.SALMON_NIGIRI)
        set_hand(sushigo_state, 2, S.SQUID_NIGIRI, S.DUMPLING)

        apply(sushigo_model, sushigo_state, PickCard(0, S.TEMPURA))
        apply(sushigo_model, sushigo_state, PickCard(1, S.EGG_NIGIRI))
        assert all(f.is_empty for f in sushigo_state.fields)

        apply(sushigo_model, sushigo_state, PickCard(2, S.SQUID_NIGIRI))

        assert [types(f) for f in sushigo_state.fields] == [[S.TEMPURA], [S.EGG_NIGIRI], [S.SQUID_NIGIRI]]
        assert sushigo_state.scores == [0, 1, 3]
        assert sushigo_state.score_to_add == [0, 0, 0]
        assert sushigo_state.picks == [[], [], []]
        # Player i now holds what player i+1 had left
        assert [types(h) for h in sushigo_state.hands] == [[S.SALMON_NIGIRI], [S.DUMPLING], [S.SASHIMI]]
        assert sushigo_state.current_player == 0
        assert sushigo_state.turn_counter == 3

    def test_round_ends_when_hands_empty(self, sushigo_model, sushigo_state, set_hand):
        set_hand(sushigo_state, 0, S.EGG_NIGIRI)
        set_hand(sushigo_state, 1, S.EGG_NIGIRI)
        set_hand(sushigo_state, 2, S.EGG_NIGIRI)
        put_on_field(sushigo_state, 0, S.MAKI_3, S.PUDDING)
        put_on_field(sushigo_state, 1, S.MAKI_3)
        put_on_field(sushigo_state, 2, S.MAKI_1)

        for p in range(3):
            apply(sushigo_model, sushigo_state, PickCard(p, S.EGG_NIGIRI))

        # Eggs (1 each) plus maki: tied most share 6, unique second gets 3
        assert sushigo_state.scores == [4, 4, 4]
        assert sushigo_state.round_counter == 1
        assert sushigo_state.turn_counter == 0
        assert sushigo_state.current_player == 0
        assert types(sushigo_state.fields[0]) == [S.PUDDING]
        assert sushigo_state.fields[1].is_empty
        assert [h.count for h in sushigo_state.hands] == [9, 9, 9]
        assert sushigo_state.discard_pile.count == 6
        assert not sushigo_model.is_terminal(sushigo_state)

    def test_round_end_trigger_fires_after_cleanup(self, sushigo_model, sushigo_state, set_hand):
        snapshot = FieldSnapshot()
        sushigo_state.triggers.register(snapshot)
        for p in range(3):
            set_hand(sushigo_state, p, S.PUDDING if p == 0 else S.TEMPURA)
        put_on_field(sushigo_state, 1, S.MAKI_2)

        apply(sushigo_model, sushigo_state, PickCard(0, S.PUDDING))
        apply(sushigo_model, sushigo_state, PickCard(1, S.TEMPURA))
        assert snapshot.seen == []

        apply(sushigo_model, sushigo_state, PickCard(2, S.TEMPURA))

        assert snapshot.seen == [(0, [[S.PUDDING], [], []])]
        assert len(sushigo_state.triggers) == 0
        assert sushigo_state.round_counter == 1


class TestChopsticks:
    """Chopsticks give two picks in one slot."""

    def test_not_legal_without_chopsticks(self, sushigo_model, sushigo_state):
        legal = sushigo_model.compute_available_actions(sushigo_state)
        assert UseChopsticks(0) not in legal

    def test_not_legal_with_one_card(self, sushigo_model, sushigo_state, set_hand):
        put_on_field(sushigo_state, 0, S.CHOPSTICKS)
        set_hand(sushigo_state, 0, S.TEMPURA)
        assert UseChopsticks(0) not in sushigo_model.compute_available_actions(sushigo_state)

    def test_two_picks_and_return(self, sushigo_model, sushigo_state, set_hand):
        put_on_field(sushigo_state, 0, S.CHOPSTICKS)
        set_hand(sushigo_state, 0, S.TEMPURA, S.TEMPURA, S.EGG_NIGIRI)
        set_hand(sushigo_state, 1, S.MAKI_1, S.MAKI_2, S.MAKI_3)
        set_hand(sushigo_state, 2, S.PUDDING, S.PUDDING, S.PUDDING)

        apply(sushigo_model, sushigo_state, UseChopsticks(0))
        assert sushigo_state.current_player == 0
        assert sushigo_state.chopsticks_activated[0]

        apply(sushigo_model, sushigo_state, PickCard(0, S.TEMPURA))
        assert sushigo_state.current_player == 0
        assert UseChopsticks(0) not in sushigo_model.compute_available_actions(sushigo_state)

        apply(sushigo_model, sushigo_state, PickCard(0, S.TEMPURA))
        assert sushigo_state.current_player == 1
        assert sushigo_state.score_to_add[0] == 5

        apply(sushigo_model, sushigo_state, PickCard(1, S.MAKI_3))
        apply(sushigo_model, sushigo_state, PickCard(2, S.PUDDING))

        # Used chopsticks went back into the hand, which p2 now holds
        assert types(sushigo_state.fields[0]) == [S.TEMPURA, S.TEMPURA]
        assert sorted(types(sushigo_state.hands[2]), key=lambda t: t.value) == [S.CHOPSTICKS, S.EGG_NIGIRI]
        assert not sushigo_state.chopsticks_activated[0]
        assert sushigo_state.scores[0] == 5
        assert [h.count for h in sushigo_state.hands] == [2, 2, 2]

    def test_last_seat_reveal_waits_for_extra_turns(self, sushigo_model, sushigo_state, set_hand):
        put_on_field(sushigo_state, 2, S.CHOPSTICKS)
        set_hand(sushigo_state, 0, S.TEMPURA, S.TEMPURA, S.TEMPURA)
        set_hand(sushigo_state, 1, S.TEMPURA, S.TEMPURA, S.TEMPURA)
        set_hand(sushigo_state, 2, S.SASHIMI, S.DUMPLING, S.EGG_NIGIRI)

        apply(sushigo_model, sushigo_state, PickCard(0, S.TEMPURA))
        apply(sushigo_model, sushigo_state, PickCard(1, S.TEMPURA))
        apply(sushigo_model, sushigo_state, UseChopsticks(2))
        apply(sushigo_model, sushigo_state, PickCard(2, S.SASHIMI))
        assert sushigo_state.fields[0].is_empty
        assert sushigo_state.current_player == 2

        apply(sushigo_model, sushigo_state, PickCard(2, S.DUMPLING))
        assert types(sushigo_state.fields[0]) == [S.TEMPURA]
        assert S.DUMPLING in types(sushigo_state.fields[2])
        assert sushigo_state.current_player == 0


class TestGameEnd:
    """Pudding scoring and winner resolution after the last round."""

    def test_pudding_and_winner(self, sushigo_model, set_hand):
        state = sushigo_model.setup(3, {"rounds": 1}, random_seed=3)
        set_hand(state, 0, S.EGG_NIGIRI)
        set_hand(state, 1, S.SQUID_NIGIRI)
        set_hand(state, 2, S.SALMON_NIGIRI)
        put_on_field(state, 0, S.PUDDING, S.PUDDING)
        put_on_field(state, 1, S.PUDDING)

        apply(sushigo_model, state, PickCard(0, S.EGG_NIGIRI))
        apply(sushigo_model, state, PickCard(1, S.SQUID_NIGIRI))
        apply(sushigo_model, state, PickCard(2, S.SALMON_NIGIRI))

        assert sushigo_model.is_terminal(state)
        assert state.scores == [7, 3, -4]
        assert sushigo_model.get_results(state) == [GameResult.WIN, GameResult.LOSE, GameResult.LOSE]
        assert sushigo_model.compute_available_actions(state) == []

    def test_tie_broken_by_puddings(self, sushigo_model, set_hand):
        state = sushigo_model.setup(2, {"rounds": 1}, random_seed=3)
        set_hand(state, 0, S.EGG_NIGIRI)
        set_hand(state, 1, S.EGG_NIGIRI)
        put_on_field(state, 0, S.PUDDING, S.PUDDING)
        put_on_field(state, 1, S.PUDDING)
        state.add_score(1, 12)

        apply(sushigo_model, state, PickCard(0, S.EGG_NIGIRI))
        apply(sushigo_model, state, PickCard(1, S.EGG_NIGIRI))

        assert state.scores == [7, 7]
        assert sushigo_model.get_results(state) == [GameResult.WIN, GameResult.LOSE]

    def test_rejected_after_game_over(self, sushigo_model, set_hand):
        state = sushigo_model.setup(2, {"rounds": 1}, random_seed=3)
        set_hand(state, 0, S.EGG_NIGIRI)
        set_hand(state, 1, S.EGG_NIGIRI)
        apply(sushigo_model, state, PickCard(0, S.EGG_NIGIRI))
        apply(sushigo_model, state, PickCard(1, S.EGG_NIGIRI))

        result = sushigo_model.next(state, PickCard(0, S.EGG_NIGIRI))
        assert result.error_code == "GAME_OVER"
        assert state.results == [GameResult.DRAW, GameResult.DRAW]
