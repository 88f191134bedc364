"""POST /api/v1/pick — rank caller-supplied goal spots without a live hunt."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from spothunt.ai.candidates import CandidateEvaluator
from spothunt.ai.ranker import TargetRanker
from spothunt.api.dependencies import get_hunt_manager
from spothunt.api.hunt_manager import HuntManager
from spothunt.api.schemas import CandidateSchema, PickRequest, PickResponse, PositionSchema
from spothunt.core.models import GoalSpot, Vector2
from spothunt.core.playfield import GridBounds

router = APIRouter()


class SuppliedMetricsOracle:
    """GoalOracle answering from metrics sent in the request."""

    def __init__(self) -> None:
        self._metrics: dict[int, tuple[int, int]] = {}

    def add(self, goal: GoalSpot, danger_cost: int, surround_threat: int) -> None:
        self._metrics[id(goal)] = (danger_cost, surround_threat)

    def danger_cost(self, mover_x: int, mover_y: int, goal: GoalSpot) -> int:
        return self._metrics[id(goal)][0]

    def surround_threat(self, goal: GoalSpot) -> int:
        return self._metrics[id(goal)][1]


@router.post("/pick", response_model=PickResponse)
def pick_target(
    request: PickRequest,
    manager: HuntManager = Depends(get_hunt_manager),
) -> PickResponse:
    if not request.goals:
        raise HTTPException(status_code=422, detail="At least one goal is required.")

    bounds = GridBounds(request.width, request.height)
    mover = Vector2(request.mover.x, request.mover.y)
    if not bounds.in_bounds(mover):
        raise HTTPException(status_code=422, detail=f"Mover {mover} is outside the playfield.")

    oracle = SuppliedMetricsOracle()
    goals: list[GoalSpot] = []
    for g in request.goals:
        goal = GoalSpot(Vector2(g.x, g.y), g.total_player_distance, g.spot_distance)
        if not bounds.in_bounds(goal.pos):
            raise HTTPException(status_code=422, detail=f"Goal {goal.pos} is outside the playfield.")
        oracle.add(goal, g.danger_cost, g.surround_threat)
        goals.append(goal)

    cfg = manager.config
    candidates = CandidateEvaluator(bounds, oracle, cfg.wall_penalty).evaluate(mover, goals)
    result = TargetRanker.from_config(cfg).rank(candidates, request.rng_value)

    return PickResponse(
        target=PositionSchema(x=result.goal.x, y=result.goal.y),
        stage=result.stage,
        deciding_factor=result.deciding_factor.name if result.deciding_factor else None,
        best_options=result.best_options,
        candidates=[
            CandidateSchema(
                x=c.goal.x, y=c.goal.y, rating=rating,
                calculated_cost=c.calculated_cost,
                surround_threat=c.surround_threat,
                penalty=c.penalty,
            )
            for c, rating in zip(candidates, result.ratings)
        ],
    )
