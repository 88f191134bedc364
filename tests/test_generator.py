"""Tests for HuntGenerator, DeterministicRNG and HuntConfig."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from spothunt.config import HuntConfig
from spothunt.core.enums import Domain, Factor, HuntOutcome
from spothunt.systems.generator import HuntGenerator
from spothunt.systems.rng import DeterministicRNG


class TestDeterministicRNG:
    def test_same_inputs_same_value(self):
        a, b = DeterministicRNG(9), DeterministicRNG(9)
        assert a.next_float(Domain.TARGET, 1, 5) == b.next_float(Domain.TARGET, 1, 5)

    def test_domains_are_separated(self):
        rng = DeterministicRNG(9)
        assert rng.next_float(Domain.TARGET, 1, 5) != rng.next_float(Domain.SPAWN_GOAL, 1, 5)

    def test_ranges(self):
        rng = DeterministicRNG(123)
        for tick in range(200):
            f = rng.next_float(Domain.TARGET, 0, tick)
            assert 0.0 <= f < 1.0
            assert 2 <= rng.next_int(Domain.SPAWN_GOAL, 0, tick, 2, 4) <= 4


class TestHuntGenerator:
    def _build(self, **overrides):
        cfg = HuntConfig(**overrides)
        return HuntGenerator(cfg, DeterministicRNG(cfg.world_seed)).build()

    def test_positions_are_distinct(self):
        state = self._build(grid_width=8, grid_height=8, num_players=4, num_goals=6)
        positions = [state.mover.pos] + [p.pos for p in state.players] + state.goal_positions
        assert len(positions) == len(set(positions)) == 11
        assert all(state.playfield.in_bounds(p) for p in positions)

    def test_occupancy_recorded(self):
        state = self._build()
        assert state.playfield.spots() == [state.mover.pos]
        for p in state.players:
            assert state.playfield.cell(p.pos).player_count >= 1
        assert state.outcome == HuntOutcome.RUNNING

    def test_same_seed_same_layout(self):
        a = self._build(world_seed=17)
        b = self._build(world_seed=17)
        assert a.mover.pos == b.mover.pos
        assert [p.pos for p in a.players] == [p.pos for p in b.players]
        assert a.goal_positions == b.goal_positions

    def test_full_field_packed_in_scan_order(self):
        state = self._build(grid_width=2, grid_height=2, num_players=1, num_goals=2)
        positions = {state.mover.pos, state.players[0].pos, *state.goal_positions}
        assert len(positions) == 4

    def test_overfull_field_rejected(self):
        with pytest.raises(ValueError):
            self._build(grid_width=2, grid_height=1, num_players=1, num_goals=5)


class TestHuntConfig:
    def test_defaults(self):
        cfg = HuntConfig()
        assert cfg.wall_penalty == 1.6
        assert cfg.credit_first_candidate is True
        assert cfg.legacy_random_range is False

    def test_factor_weights(self):
        weights = HuntConfig(weight_hd=0.25).factor_weights()
        assert set(weights) == set(Factor)
        assert weights[Factor.HIGHEST_DANGER] == 0.25
        assert weights[Factor.TOTAL_PLAYER_DISTANCE] == 4.0

    @pytest.mark.parametrize("kwargs", [
        {"grid_width": 0},
        {"grid_height": -3},
        {"num_goals": 0},
    ])
    def test_invalid_config_rejected(self, kwargs):
        with pytest.raises(ValueError):
            HuntConfig(**kwargs)
