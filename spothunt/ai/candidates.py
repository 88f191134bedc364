"""Candidate evaluation: one immutable metrics record per goal spot."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from spothunt.ai.oracle import GoalOracle
    from spothunt.core.models import GoalSpot, Vector2
    from spothunt.core.playfield import GridBounds

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Candidate:
    """Raw metrics of one goal for a single target decision."""

    goal: GoalSpot
    total_player_distance: int
    spot_distance: int
    calculated_cost: int
    surround_threat: int
    penalty: float = 1.0
    highest_danger: int = 0


class CandidateEvaluator:
    """Turns goal spots into Candidates using the grid bounds and a GoalOracle."""

    __slots__ = ("_bounds", "_oracle", "_wall_penalty")

    def __init__(self, bounds: GridBounds, oracle: GoalOracle, wall_penalty: float = 1.6) -> None:
        self._bounds = bounds
        self._oracle = oracle
        self._wall_penalty = wall_penalty

    def penalty_for(self, goal: GoalSpot) -> float:
        """Surround-threat multiplier: goals against a wall are easier to corner."""
        return self._wall_penalty if self._bounds.is_boundary(goal.pos) else 1.0

    def evaluate(self, mover_pos: Vector2, goals: Sequence[GoalSpot]) -> list[Candidate]:
        candidates: list[Candidate] = []
        for goal in goals:
            penalty = self.penalty_for(goal)
            cost = self._oracle.danger_cost(mover_pos.x, mover_pos.y, goal)
            threat = int(self._oracle.surround_threat(goal) * penalty)
            candidates.append(Candidate(
                goal=goal,
                total_player_distance=goal.total_player_distance,
                spot_distance=goal.spot_distance,
                calculated_cost=cost,
                surround_threat=threat,
                penalty=penalty,
                # TODO: take the max cell danger along DangerPathfinder.fastest_path
                # once HIGHEST_DANGER should influence ranking.
                highest_danger=0,
            ))
            logger.debug(
                "Candidate %s: tpd=%d sd=%d cost=%d threat=%d penalty=%.1f",
                goal.pos, goal.total_player_distance, goal.spot_distance, cost, threat, penalty,
            )
        return candidates
