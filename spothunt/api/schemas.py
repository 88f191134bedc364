"""Pydantic request and response models for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PositionSchema(BaseModel):
    x: int
    y: int


# --- Pick ---

class GoalInput(BaseModel):
    x: int = Field(ge=0)
    y: int = Field(ge=0)
    total_player_distance: int = 0
    spot_distance: int = 0
    danger_cost: int = 0
    surround_threat: int = 0


MAX_GRID_SIZE = 1024


class PickRequest(BaseModel):
    width: int = Field(gt=0, le=MAX_GRID_SIZE)
    height: int = Field(gt=0, le=MAX_GRID_SIZE)
    mover: PositionSchema
    goals: list[GoalInput]
    rng_value: float = Field(0.0, ge=0.0, lt=1.0)


class CandidateSchema(BaseModel):
    x: int
    y: int
    rating: float
    calculated_cost: int
    surround_threat: int
    penalty: float


class PickResponse(BaseModel):
    target: PositionSchema
    stage: str
    deciding_factor: str | None = None
    best_options: list[int] = Field(default_factory=list)
    candidates: list[CandidateSchema] = Field(default_factory=list)


# --- State ---

class PlayerSchema(BaseModel):
    id: int
    x: int
    y: int


class EventSchema(BaseModel):
    tick: int
    category: str
    message: str


class HuntStateResponse(BaseModel):
    tick: int
    outcome: str
    mover: PositionSchema
    target: PositionSchema | None = None
    reached: int = 0
    players: list[PlayerSchema] = Field(default_factory=list)
    goals: list[PositionSchema] = Field(default_factory=list)
    events: list[EventSchema] = Field(default_factory=list)


# --- Control ---

class ControlResponse(BaseModel):
    status: str
    message: str
    tick: int = 0


# --- Config ---

class HuntConfigResponse(BaseModel):
    world_seed: int
    grid_width: int
    grid_height: int
    max_ticks: int
    num_players: int
    num_goals: int
    wall_penalty: float
    factor_weights: dict[str, float]
    credit_first_candidate: bool
    legacy_random_range: bool
