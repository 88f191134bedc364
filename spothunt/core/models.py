"""Core data models: Vector2, GoalSpot, Player."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True, slots=True)
class Vector2:
    """Immutable 2D integer coordinate."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def manhattan(self, other: Vector2) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def __repr__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True, slots=True)
class GoalSpot:
    """A destination the mover may pursue, with its precomputed distances."""

    pos: Vector2
    total_player_distance: int = 0
    spot_distance: int = 0

    @property
    def x(self) -> int:
        return self.pos.x

    @property
    def y(self) -> int:
        return self.pos.y

    @classmethod
    def measure(cls, pos: Vector2, mover_pos: Vector2, players: Iterable[Player]) -> GoalSpot:
        """Build a GoalSpot at *pos* with distances to the mover and all players."""
        tpd = sum(pos.manhattan(p.pos) for p in players)
        return cls(pos=pos, total_player_distance=tpd, spot_distance=pos.manhattan(mover_pos))


@dataclass(slots=True)
class Player:
    """A hunter chasing the mover."""

    id: int
    pos: Vector2

    def step_toward(self, target: Vector2) -> Vector2:
        """Next position one tile closer to *target* (x axis first)."""
        if self.pos.x != target.x:
            dx = 1 if target.x > self.pos.x else -1
            return Vector2(self.pos.x + dx, self.pos.y)
        if self.pos.y != target.y:
            dy = 1 if target.y > self.pos.y else -1
            return Vector2(self.pos.x, self.pos.y + dy)
        return self.pos
