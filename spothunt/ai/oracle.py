"""Goal metric providers consumed by the candidate evaluator.

A `GoalOracle` answers the two questions the ranking core cannot answer
by itself: how dangerous is the fastest way to a goal, and how
threatening is the area around it.  `PlayfieldOracle` answers them from
the live playfield danger field.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from spothunt.ai.pathfinding import DangerPathfinder
from spothunt.core.models import Vector2

if TYPE_CHECKING:
    from spothunt.config import HuntConfig
    from spothunt.core.models import GoalSpot
    from spothunt.core.playfield import Playfield


class GoalOracle(Protocol):
    def danger_cost(self, mover_x: int, mover_y: int, goal: GoalSpot) -> int:
        """Danger cost of the fastest path from the mover to *goal*."""

    def surround_threat(self, goal: GoalSpot) -> int:
        """Base threat of the area around *goal* (before any wall penalty)."""


class PlayfieldOracle:
    """GoalOracle backed by a Playfield and its danger field."""

    __slots__ = ("_field", "_pathfinder", "_surround_radius")

    def __init__(self, playfield: Playfield, config: HuntConfig) -> None:
        self._field = playfield
        self._pathfinder = DangerPathfinder(
            playfield,
            max_nodes=config.pathfinder_max_nodes,
            unreachable_cost=config.unreachable_cost,
        )
        self._surround_radius = config.surround_radius

    @property
    def pathfinder(self) -> DangerPathfinder:
        return self._pathfinder

    def danger_cost(self, mover_x: int, mover_y: int, goal: GoalSpot) -> int:
        return self._pathfinder.danger_cost(Vector2(mover_x, mover_y), goal.pos)

    def surround_threat(self, goal: GoalSpot) -> int:
        return self._field.area_danger(goal.pos, self._surround_radius)
