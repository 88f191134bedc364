"""Tests for TargetRanker — scoring, narrowing, elimination and random fallback."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from spothunt.ai.candidates import Candidate
from spothunt.ai.factors import ACTIVE_FACTORS, compare
from spothunt.ai.ranker import (
    STAGE_ELIMINATION, STAGE_RANDOM, STAGE_RATING, TargetRanker,
)
from spothunt.config import HuntConfig
from spothunt.core.enums import Factor, Ordering
from spothunt.core.models import GoalSpot, Vector2


def _cand(x: int = 0, y: int = 0, tpd: int = 0, sd: int = 0, cost: int = 0, threat: int = 0) -> Candidate:
    goal = GoalSpot(Vector2(x, y), total_player_distance=tpd, spot_distance=sd)
    return Candidate(
        goal=goal, total_player_distance=tpd, spot_distance=sd,
        calculated_cost=cost, surround_threat=threat,
    )


# ---------------------------------------------------------------------------
# Factor comparison
# ---------------------------------------------------------------------------

class TestFactorCompare:
    def test_higher_player_distance_is_better(self):
        assert compare(Factor.TOTAL_PLAYER_DISTANCE, _cand(tpd=9), _cand(tpd=3)) == Ordering.BETTER
        assert compare(Factor.TOTAL_PLAYER_DISTANCE, _cand(tpd=3), _cand(tpd=9)) == Ordering.WORSE

    def test_lower_is_better_for_the_rest(self):
        near, far = _cand(sd=1, cost=1, threat=1), _cand(sd=4, cost=4, threat=4)
        for factor in (Factor.SPOT_DISTANCE, Factor.FASTEST_DANGER_COST, Factor.SURROUND_THREAT):
            assert compare(factor, near, far) == Ordering.BETTER
            assert compare(factor, far, near) == Ordering.WORSE

    def test_equal_metrics(self):
        assert compare(Factor.HIGHEST_DANGER, _cand(), _cand(x=3)) == Ordering.EQUAL

    def test_active_order_excludes_surround_threat(self):
        assert ACTIVE_FACTORS == (
            Factor.TOTAL_PLAYER_DISTANCE,
            Factor.SPOT_DISTANCE,
            Factor.FASTEST_DANGER_COST,
            Factor.HIGHEST_DANGER,
        )


# ---------------------------------------------------------------------------
# Scoring pass
# ---------------------------------------------------------------------------

class TestScoring:
    def test_cheaper_path_wins_on_rating(self):
        g1 = _cand(5, 5, tpd=10, sd=2, cost=3)
        g2 = _cand(6, 5, tpd=10, sd=2, cost=5)
        ratings = TargetRanker().rate([g1, g2])
        assert ratings == [10.0, 8.0]

    def test_outcome_does_not_depend_on_order(self):
        g1 = _cand(5, 5, tpd=10, sd=2, cost=3)
        g2 = _cand(6, 5, tpd=10, sd=2, cost=5)
        assert TargetRanker().rate([g2, g1]) == [8.0, 10.0]

    def test_beaten_group_loses_its_weight(self):
        ranker = TargetRanker(factors=(Factor.TOTAL_PLAYER_DISTANCE,))
        ratings = ranker.rate([_cand(tpd=5), _cand(x=1, tpd=5), _cand(x=2, tpd=7)])
        assert ratings == [0.0, 0.0, 4.0]

    def test_literal_scoring_never_credits_first_candidate(self):
        ranker = TargetRanker(credit_first_candidate=False)
        g1 = _cand(5, 5, tpd=10, sd=2, cost=3)
        g2 = _cand(6, 5, tpd=10, sd=2, cost=5)
        assert ranker.rate([g1, g2]) == [0.0, 8.0]

    def test_literal_scoring_penalizes_beaten_first_candidate(self):
        ranker = TargetRanker(factors=(Factor.TOTAL_PLAYER_DISTANCE,), credit_first_candidate=False)
        assert ranker.rate([_cand(tpd=1), _cand(x=1, tpd=5)]) == [-4.0, 4.0]

    def test_custom_weights(self):
        ranker = TargetRanker(weights={Factor.TOTAL_PLAYER_DISTANCE: 10.0})
        assert ranker.weight(Factor.TOTAL_PLAYER_DISTANCE) == 10.0
        assert ranker.weight(Factor.SPOT_DISTANCE) == 3.0

    def test_fractional_weights_keep_identical_candidates_tied(self):
        ranker = TargetRanker(weights={
            Factor.TOTAL_PLAYER_DISTANCE: 0.1,
            Factor.SPOT_DISTANCE: 0.2,
            Factor.FASTEST_DANGER_COST: 0.7,
            Factor.HIGHEST_DANGER: 0.3,
        })
        a = _cand(0, 0, tpd=5, sd=1, cost=0)
        b = _cand(1, 0, tpd=3, sd=0, cost=9)
        c = _cand(2, 0, tpd=5, sd=1, cost=0)
        ratings = ranker.rate([a, b, c])
        assert ratings[0] == ratings[2]
        assert ratings[0] > ratings[1]

        result = ranker.rank([a, b, c], 0.0)
        assert result.best_options == [0, 2]
        assert result.stage == STAGE_RANDOM
        assert result.ratings[0] == result.ratings[2]

    def test_from_config(self):
        cfg = HuntConfig(weight_sd=0.5, credit_first_candidate=False)
        ranker = TargetRanker.from_config(cfg)
        assert ranker.weight(Factor.SPOT_DISTANCE) == 0.5
        assert ranker.rate([_cand(sd=1), _cand(x=1, sd=1)])[0] == 0.0


# ---------------------------------------------------------------------------
# Narrowing
# ---------------------------------------------------------------------------

class TestNarrowing:
    def test_keeps_all_top_ratings_in_order(self):
        assert TargetRanker.narrow([1.0, 3.0, 3.0, 2.0]) == [1, 2]

    def test_first_candidate_listed_once(self):
        assert TargetRanker.narrow([5.0, 5.0]) == [0, 1]

    def test_single_top(self):
        assert TargetRanker.narrow([-2.0, -1.0]) == [1]


# ---------------------------------------------------------------------------
# Elimination
# ---------------------------------------------------------------------------

class TestElimination:
    def test_tie_aborts_factor_even_if_a_later_candidate_is_best(self):
        a = _cand(0, 0, tpd=5, sd=4)
        b = _cand(1, 0, tpd=5, sd=2)
        c = _cand(2, 0, tpd=9, sd=3)
        idx, factor = TargetRanker().eliminate([a, b, c], [0, 1, 2])
        assert (idx, factor) == (1, Factor.SPOT_DISTANCE)

    def test_each_factor_restarts_from_the_full_group(self):
        a = _cand(0, 0, tpd=5, sd=1, cost=9)
        b = _cand(1, 0, tpd=5, sd=1, cost=2)
        idx, factor = TargetRanker().eliminate([a, b], [0, 1])
        assert (idx, factor) == (1, Factor.FASTEST_DANGER_COST)

    def test_only_best_options_are_considered(self):
        a = _cand(0, 0, tpd=5)
        b = _cand(1, 0, tpd=1)
        c = _cand(2, 0, tpd=3)
        idx, _ = TargetRanker().eliminate([a, b, c], [1, 2])
        assert idx == 2

    def test_all_factors_exhausted(self):
        assert TargetRanker().eliminate([_cand(), _cand(x=1)], [0, 1]) == (None, None)


# ---------------------------------------------------------------------------
# Random fallback
# ---------------------------------------------------------------------------

class TestRandomIndex:
    def test_uniform_range_reaches_last_index(self):
        ranker = TargetRanker()
        assert ranker.random_index(3, 0.0) == 0
        assert ranker.random_index(3, 0.5) == 1
        assert ranker.random_index(3, 0.99) == 2

    def test_legacy_range_never_reaches_last_index(self):
        ranker = TargetRanker(legacy_random_range=True)
        for value in (0.0, 0.5, 0.75, 0.999999):
            assert ranker.random_index(3, value) < 2
        assert ranker.random_index(2, 0.99) == 0


# ---------------------------------------------------------------------------
# Full pipeline
# ---------------------------------------------------------------------------

class TestRank:
    def test_empty_candidates_rejected(self):
        with pytest.raises(ValueError):
            TargetRanker().rank([], 0.5)

    def test_single_candidate_is_returned(self):
        only = _cand(3, 3, tpd=1, sd=1, cost=1)
        result = TargetRanker().rank([only], 0.99)
        assert result.goal == only.goal
        assert result.stage == STAGE_RATING

    def test_dominant_player_distance_wins_without_tie_break(self):
        b = _cand(0, 0, tpd=3, sd=1, cost=1)
        a = _cand(1, 0, tpd=9, sd=1, cost=1)
        c = _cand(2, 0, tpd=5, sd=1, cost=1)
        result = TargetRanker().rank([b, a, c], 0.0)
        assert result.ratings == [6.0, 10.0, 6.0]
        assert result.goal == a.goal
        assert result.stage == STAGE_RATING

    def test_cheaper_path_is_picked(self):
        g1 = _cand(5, 5, tpd=10, sd=2, cost=3)
        g2 = _cand(6, 5, tpd=10, sd=2, cost=5)
        assert TargetRanker().rank([g1, g2], 0.9).goal == g1.goal

    def test_rating_tie_broken_by_elimination(self):
        a = _cand(0, 0, tpd=8, sd=5)
        b = _cand(1, 0, tpd=6, sd=2)
        ranker = TargetRanker(weights={Factor.TOTAL_PLAYER_DISTANCE: 3.0})
        result = ranker.rank([a, b], 0.9)
        assert result.ratings == [6.0, 6.0]
        assert result.stage == STAGE_ELIMINATION
        assert result.deciding_factor == Factor.TOTAL_PLAYER_DISTANCE
        assert result.goal == a.goal

    def test_identical_candidates_fall_back_to_random(self):
        cands = [_cand(x=i, tpd=4, sd=2, cost=1) for i in range(3)]
        result = TargetRanker().rank(cands, 0.5)
        assert result.ratings == [10.0, 10.0, 10.0]
        assert result.best_options == [0, 1, 2]
        assert result.stage == STAGE_RANDOM
        assert result.goal == cands[1].goal

    def test_random_pick_draws_from_full_candidate_set(self):
        a = _cand(0, 0, tpd=5, sd=1, cost=1)
        b = _cand(1, 0, tpd=5, sd=1, cost=1)
        c = _cand(2, 0, tpd=1, sd=9, cost=9)
        result = TargetRanker().rank([a, b, c], 0.9)
        assert result.best_options == [0, 1]
        assert result.stage == STAGE_RANDOM
        assert result.goal == c.goal
