"""Playfield: the grid of cells the mover and players stand on."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from spothunt.core.models import Player, Vector2


@dataclass(slots=True)
class Cell:
    """Occupancy and danger bookkeeping for one tile."""

    has_spot: bool = False
    player_count: int = 0
    danger: int = 0

    def put_spot(self) -> None:
        self.has_spot = True

    def remove_spot(self) -> None:
        self.has_spot = False

    def put_player(self) -> None:
        self.player_count += 1

    def remove_player(self) -> None:
        if self.player_count > 0:
            self.player_count -= 1


class GridBounds:
    """Width and height of a grid, with bounds and wall checks but no cells."""

    __slots__ = ("width", "height")

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Playfield size must be positive (width={width}, height={height})")
        self.width = width
        self.height = height

    def in_bounds(self, pos: Vector2) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def in_bounds_xy(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_boundary(self, pos: Vector2) -> bool:
        """True when *pos* lies against one of the four walls."""
        return (
            pos.x == 0
            or pos.x == self.width - 1
            or pos.y == 0
            or pos.y == self.height - 1
        )


class Playfield(GridBounds):
    """2D cell grid backed by a flat list for cache-friendly access."""

    __slots__ = ("_cells",)

    def __init__(self, width: int, height: int) -> None:
        super().__init__(width, height)
        self._cells: list[Cell] = [Cell() for _ in range(width * height)]

    # -- access --

    def _idx(self, x: int, y: int) -> int:
        return y * self.width + x

    def cell(self, pos: Vector2) -> Cell:
        if not self.in_bounds(pos):
            raise ValueError(f"Position {pos} is outside the {self.width}x{self.height} playfield")
        return self._cells[self._idx(pos.x, pos.y)]

    def danger_at(self, pos: Vector2) -> int:
        return self.cell(pos).danger

    # -- occupancy --

    def put_spot(self, pos: Vector2) -> None:
        self.cell(pos).put_spot()

    def remove_spot(self, pos: Vector2) -> None:
        self.cell(pos).remove_spot()

    def put_player(self, pos: Vector2) -> None:
        self.cell(pos).put_player()

    def remove_player(self, pos: Vector2) -> None:
        self.cell(pos).remove_player()

    def spots(self) -> list[Vector2]:
        """Positions of every cell currently holding the moving spot."""
        return [
            Vector2(i % self.width, i // self.width)
            for i, c in enumerate(self._cells)
            if c.has_spot
        ]

    # -- danger field --

    def refresh_danger(self, players: Iterable[Player], player_danger: int, radius: int) -> None:
        """Recompute cell danger from the current player positions.

        Each player adds ``player_danger - distance`` to every cell within
        *radius* (Manhattan), so the player's own cell gets the full value.
        """
        for c in self._cells:
            c.danger = 0
        for p in players:
            for dy in range(-radius, radius + 1):
                for dx in range(-radius, radius + 1):
                    dist = abs(dx) + abs(dy)
                    if dist > radius:
                        continue
                    x, y = p.pos.x + dx, p.pos.y + dy
                    if not self.in_bounds_xy(x, y):
                        continue
                    self._cells[self._idx(x, y)].danger += max(player_danger - dist, 0)

    def area_danger(self, center: Vector2, radius: int) -> int:
        """Sum of cell danger within *radius* (Manhattan) of *center*."""
        total = 0
        for dy in range(-radius, radius + 1):
            for dx in range(-radius, radius + 1):
                if abs(dx) + abs(dy) > radius:
                    continue
                x, y = center.x + dx, center.y + dy
                if self.in_bounds_xy(x, y):
                    total += self._cells[self._idx(x, y)].danger
        return total
