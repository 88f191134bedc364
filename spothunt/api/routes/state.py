"""GET /api/v1/state — live hunt positions and events."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from spothunt.api.dependencies import get_hunt_manager
from spothunt.api.hunt_manager import HuntManager
from spothunt.api.schemas import EventSchema, HuntStateResponse, PlayerSchema, PositionSchema

router = APIRouter()


@router.get("/state", response_model=HuntStateResponse)
def get_state(
    since_tick: int | None = Query(None, ge=0, description="Only events at or after this tick"),
    manager: HuntManager = Depends(get_hunt_manager),
) -> HuntStateResponse:
    with manager.lock:
        state = manager.get_state()
        if since_tick is not None:
            events = manager.event_log.since_tick(since_tick)
        else:
            events = manager.event_log.latest()
        return HuntStateResponse(
            tick=state.tick,
            outcome=state.outcome.name.lower(),
            mover=PositionSchema(x=state.mover.x, y=state.mover.y),
            target=PositionSchema(x=state.target.x, y=state.target.y) if state.target else None,
            reached=state.reached,
            players=[PlayerSchema(id=p.id, x=p.pos.x, y=p.pos.y) for p in state.players],
            goals=[PositionSchema(x=g.x, y=g.y) for g in state.goal_positions],
            events=[EventSchema(tick=e.tick, category=e.category, message=e.message) for e in events],
        )
