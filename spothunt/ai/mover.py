"""MovingSpot — the agent that picks a goal spot and walks to it."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from spothunt.ai.candidates import CandidateEvaluator
from spothunt.ai.ranker import RankingResult, TargetRanker
from spothunt.core.enums import Domain
from spothunt.core.models import Vector2

if TYPE_CHECKING:
    from spothunt.ai.oracle import GoalOracle
    from spothunt.config import HuntConfig
    from spothunt.core.models import GoalSpot
    from spothunt.core.playfield import Playfield
    from spothunt.systems.rng import DeterministicRNG

logger = logging.getLogger(__name__)


class MovingSpot:
    """The mover: owns its location on the playfield and chooses targets.

    Stateless between decisions apart from its position; every call to
    ``pick_target`` builds and discards its own candidate set.
    """

    __slots__ = ("id", "_pos", "_field", "_evaluator", "_ranker", "_rng")

    def __init__(
        self,
        playfield: Playfield,
        oracle: GoalOracle,
        config: HuntConfig,
        rng: DeterministicRNG,
        start: Vector2 = Vector2(0, 0),
        mover_id: int = 0,
    ) -> None:
        if not playfield.in_bounds(start):
            raise ValueError(f"Start position {start} is outside the playfield")
        self.id = mover_id
        self._field = playfield
        self._evaluator = CandidateEvaluator(playfield, oracle, config.wall_penalty)
        self._ranker = TargetRanker.from_config(config)
        self._rng = rng
        self._pos = start
        playfield.put_spot(start)

    @property
    def pos(self) -> Vector2:
        return self._pos

    @property
    def x(self) -> int:
        return self._pos.x

    @property
    def y(self) -> int:
        return self._pos.y

    def set_location(self, new_x: int, new_y: int) -> None:
        """Move to (*new_x*, *new_y*), updating playfield occupancy."""
        if not self._field.in_bounds_xy(new_x, new_y):
            raise ValueError(
                f"Location ({new_x}, {new_y}) is outside the "
                f"{self._field.width}x{self._field.height} playfield"
            )
        self._field.remove_spot(self._pos)
        self._pos = Vector2(new_x, new_y)
        self._field.put_spot(self._pos)

    def decide(self, goals: Sequence[GoalSpot], tick: int = 0) -> RankingResult:
        """Rank *goals* from the current position and return the full result."""
        if not goals:
            raise ValueError("pick_target needs at least one goal spot")
        candidates = self._evaluator.evaluate(self._pos, goals)
        rng_value = self._rng.next_float(Domain.TARGET, self.id, tick)
        result = self._ranker.rank(candidates, rng_value)
        logger.debug(
            "Mover %d at %s picked %s (%s)", self.id, self._pos, result.goal.pos, result.stage,
        )
        return result

    def pick_target(self, goals: Sequence[GoalSpot], tick: int = 0) -> GoalSpot:
        """Pick the best goal spot to move to."""
        return self.decide(goals, tick).goal

    def __repr__(self) -> str:
        return f"[{self._pos.x},{self._pos.y}]"
