"""A* pathfinding over the playfield danger field.

Provides a `DangerPathfinder` that finds the *fastest* path between two
cells (fewest steps) and, among equally fast paths, the least dangerous
one.  The danger accumulated along that path is the goal's fastest
danger cost.

Usage:
    pf = DangerPathfinder(playfield)
    path = pf.fastest_path(start, goal)       # list[Vector2] or None
    cost = pf.danger_cost(start, goal)        # int
"""

from __future__ import annotations

import heapq
from typing import TYPE_CHECKING

from spothunt.core.models import Vector2

if TYPE_CHECKING:
    from spothunt.core.playfield import Playfield

# Cardinal directions only, Manhattan grid
_DIRS = (Vector2(1, 0), Vector2(-1, 0), Vector2(0, 1), Vector2(0, -1))


class DangerPathfinder:
    """A* pathfinder ranking paths by (steps, accumulated danger).

    Reads only from the playfield; never mutates it.
    Performance-bounded: explores at most `max_nodes` before giving up.
    """

    __slots__ = ("_field", "_max_nodes", "_unreachable_cost")

    def __init__(self, playfield: Playfield, max_nodes: int = 1024, unreachable_cost: int = 9999) -> None:
        self._field = playfield
        self._max_nodes = max_nodes
        self._unreachable_cost = unreachable_cost

    def fastest_path(self, start: Vector2, goal: Vector2) -> list[Vector2] | None:
        """Compute the fastest, then least dangerous, path from *start* to *goal*.

        Returns a list of positions (excluding *start*, including *goal*),
        or None if the goal is off the field or not reached within the
        node budget.
        """
        if start == goal:
            return []

        field = self._field
        if not field.in_bounds(goal):
            return None

        # Open set: (f_steps, g_danger, counter, x, y)
        counter = 0
        open_heap: list[tuple[int, int, int, int, int]] = []
        heapq.heappush(open_heap, (0, 0, counter, start.x, start.y))

        g_score: dict[tuple[int, int], tuple[int, int]] = {(start.x, start.y): (0, 0)}
        came_from: dict[tuple[int, int], tuple[int, int]] = {}
        closed: set[tuple[int, int]] = set()
        nodes_explored = 0

        gx, gy = goal.x, goal.y

        while open_heap and nodes_explored < self._max_nodes:
            _, _, _, cx, cy = heapq.heappop(open_heap)
            ckey = (cx, cy)

            if cx == gx and cy == gy:
                return self._reconstruct(came_from, ckey)

            if ckey in closed:
                continue
            closed.add(ckey)
            nodes_explored += 1

            steps, danger = g_score[ckey]

            for d in _DIRS:
                nx, ny = cx + d.x, cy + d.y
                nkey = (nx, ny)

                if nkey in closed or not field.in_bounds_xy(nx, ny):
                    continue

                tentative = (steps + 1, danger + field.danger_at(Vector2(nx, ny)))
                if tentative < g_score.get(nkey, (10**9, 10**9)):
                    g_score[nkey] = tentative
                    came_from[nkey] = ckey
                    h = abs(nx - gx) + abs(ny - gy)  # Manhattan heuristic
                    counter += 1
                    heapq.heappush(open_heap, (tentative[0] + h, tentative[1], counter, nx, ny))

        return None  # No path found within budget

    def next_step(self, start: Vector2, goal: Vector2) -> Vector2 | None:
        """Return the first step of the fastest path, or None if there is none."""
        path = self.fastest_path(start, goal)
        if path:
            return path[0]
        return None

    def danger_cost(self, start: Vector2, goal: Vector2) -> int:
        """Sum of cell danger along the fastest path (start cell excluded)."""
        path = self.fastest_path(start, goal)
        if path is None:
            return self._unreachable_cost
        return sum(self._field.danger_at(p) for p in path)

    @staticmethod
    def _reconstruct(
        came_from: dict[tuple[int, int], tuple[int, int]],
        current: tuple[int, int],
    ) -> list[Vector2]:
        """Walk back through came_from to build the path."""
        path: list[Vector2] = []
        while current in came_from:
            path.append(Vector2(current[0], current[1]))
            current = came_from[current]
        path.reverse()
        return path
