"""POST /api/v1/control/{action} — hunt lifecycle controls."""

from __future__ import annotations

from enum import Enum

from fastapi import APIRouter, Depends, Query

from spothunt.api.dependencies import get_hunt_manager
from spothunt.api.hunt_manager import HuntManager
from spothunt.api.schemas import ControlResponse

router = APIRouter()


class ControlAction(str, Enum):
    step = "step"
    reset = "reset"


@router.post("/control/{action}", response_model=ControlResponse)
def control(
    action: ControlAction,
    ticks: int = Query(1, ge=1, le=1000, description="Ticks to advance (step only)"),
    manager: HuntManager = Depends(get_hunt_manager),
) -> ControlResponse:
    match action:
        case ControlAction.step:
            ran, tick, outcome = manager.step(ticks)
            if ran == 0:
                return ControlResponse(
                    status="noop", message=f"Hunt is over ({outcome.name.lower()}).", tick=tick,
                )
            return ControlResponse(status="ok", message=f"Advanced {ran} tick(s).", tick=tick)

        case ControlAction.reset:
            tick = manager.reset()
            return ControlResponse(status="ok", message="Hunt reset.", tick=tick)
