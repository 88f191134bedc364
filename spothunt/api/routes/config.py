"""GET /api/v1/config — expose hunt configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from spothunt.api.dependencies import get_hunt_manager
from spothunt.api.hunt_manager import HuntManager
from spothunt.api.schemas import HuntConfigResponse

router = APIRouter()


@router.get("/config", response_model=HuntConfigResponse)
def get_config(
    manager: HuntManager = Depends(get_hunt_manager),
) -> HuntConfigResponse:
    cfg = manager.config
    return HuntConfigResponse(
        world_seed=cfg.world_seed,
        grid_width=cfg.grid_width,
        grid_height=cfg.grid_height,
        max_ticks=cfg.max_ticks,
        num_players=cfg.num_players,
        num_goals=cfg.num_goals,
        wall_penalty=cfg.wall_penalty,
        factor_weights={f.name.lower(): w for f, w in cfg.factor_weights().items()},
        credit_first_candidate=cfg.credit_first_candidate,
        legacy_random_range=cfg.legacy_random_range,
    )
