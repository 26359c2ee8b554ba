"""
Tests for round/game bonuses and winner resolution.
"""

import pytest

from ..engine_core.scoring import (
    majority_bonus,
    minority_bonus,
    resolve_winner,
    split_evenly,
)
from ..engine_core.state import GameResult

WIN, LOSE, DRAW = GameResult.WIN, GameResult.LOSE, GameResult.DRAW


class TestSplitEvenly:
    """Integer split of a bonus pool."""

    def test_divisible(self):
        assert split_evenly(6, 2) == 3

    def test_remainder_lost(self):
        assert split_evenly(6, 4) == 1

    def test_negative_truncates_toward_zero(self):
        assert split_evenly(-6, 4) == -1
        assert split_evenly(-6, 2) == -3

    def test_no_recipients(self):
        assert split_evenly(6, 0) == 0


class TestMajorityBonus:
    """Most / second-most bonus (maki rolls)."""

    def test_tied_most_and_unique_second(self):
        assert majority_bonus([3, 3, 1], 6, 3) == [3, 3, 3]

    def test_unique_most_and_tied_second(self):
        assert majority_bonus([5, 2, 2, 0], 6, 3) == [6, 1, 1, 0]

    def test_zero_values_get_nothing(self):
        """Nobody with zero of the metric scores, even as runner-up."""
        assert majority_bonus([4, 0, 0], 6, 3) == [6, 0, 0]
        assert majority_bonus([0, 0, 0], 6, 3) == [0, 0, 0]

    def test_everyone_tied(self):
        assert majority_bonus([2, 2, 2], 6, 3) == [2, 2, 2]

    def test_score_conservation_when_divisible(self):
        bonus = majority_bonus([4, 4, 2, 2, 1], 6, 4)
        assert sum(bonus) == 6 + 4

    def test_score_conservation_when_not_divisible(self):
        """Remainders are dropped, never over-awarded."""
        bonus = majority_bonus([4, 4, 4, 2], 10, 3)
        assert bonus == [3, 3, 3, 3]
        assert sum(bonus) <= 10 + 3


class TestMinorityBonus:
    """Most / least bonus (pudding)."""

    def test_pudding_scenario(self):
        assert minority_bonus([2, 2, 1, 0], 6, -6) == [3, 3, 0, -6]

    def test_all_equal_no_minority(self):
        assert minority_bonus([2, 2, 2], 6, -6) == [2, 2, 2]

    def test_all_zero(self):
        assert minority_bonus([0, 0], 6, -6) == [0, 0]

    def test_zero_max_still_penalises_nothing(self):
        """With nobody holding any, there is no most and no least."""
        assert minority_bonus([0, 0, 0, 0], 6, -6) == [0, 0, 0, 0]

    def test_tied_least_splits_penalty(self):
        assert minority_bonus([3, 1, 1], 6, -6) == [6, -3, -3]

    def test_two_players(self):
        assert minority_bonus([1, 0], 6, -6) == [6, -6]


class TestResolveWinner:
    """Winner resolution with a tie-break metric."""

    def test_unique_max_wins(self):
        assert resolve_winner([10, 20, 5], [0, 0, 0]) == [LOSE, WIN, LOSE]

    def test_tie_broken_by_metric(self):
        assert resolve_winner([20, 20, 5], [1, 3, 9]) == [LOSE, WIN, LOSE]

    def test_tie_break_ignores_non_leaders(self):
        """Only the players tied on score compare tie-break values."""
        assert resolve_winner([20, 20, 5], [2, 2, 9]) == [DRAW, DRAW, LOSE]

    def test_full_draw(self):
        assert resolve_winner([7, 7], [0, 0]) == [DRAW, DRAW]

    def test_partial_tie_break_leaves_draw(self):
        assert resolve_winner([9, 9, 9], [4, 4, 1]) == [DRAW, DRAW, LOSE]

    def test_negative_scores(self):
        assert resolve_winner([-3, -1], [0, 0]) == [LOSE, WIN]

    @pytest.mark.parametrize("scores,tie_break", [
        ([5, 5, 3], [1, 2, 0]),
        ([0, 0, 0, 0], [3, 3, 1, 0]),
        ([12, 4, 12], [0, 0, 0]),
    ])
    def test_deterministic(self, scores, tie_break):
        assert resolve_winner(scores, tie_break) == resolve_winner(list(scores), list(tie_break))

    def test_length_mismatch(self):
        with pytest.raises(ValueError):
            resolve_winner([1, 2], [0])
