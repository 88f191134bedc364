"""Mutable authoritative hunt state — only mutated by the HuntLoop."""

from __future__ import annotations

from typing import TYPE_CHECKING

from spothunt.core.enums import HuntOutcome
from spothunt.core.models import GoalSpot

if TYPE_CHECKING:
    from spothunt.ai.mover import MovingSpot
    from spothunt.ai.oracle import PlayfieldOracle
    from spothunt.core.models import Player, Vector2
    from spothunt.core.playfield import Playfield


class HuntState:
    """The single source of truth for one hunt."""

    __slots__ = (
        "tick", "seed", "playfield", "oracle", "mover", "players",
        "goal_positions", "outcome", "target", "reached",
    )

    def __init__(
        self,
        seed: int,
        playfield: Playfield,
        oracle: PlayfieldOracle,
        mover: MovingSpot,
        players: list[Player],
        goal_positions: list[Vector2],
    ) -> None:
        self.tick: int = 0
        self.seed: int = seed
        self.playfield = playfield
        self.oracle = oracle
        self.mover = mover
        self.players = players
        self.goal_positions = goal_positions
        self.outcome: HuntOutcome = HuntOutcome.RUNNING
        self.target: Vector2 | None = None
        self.reached: int = 0

    def measure_goals(self) -> list[GoalSpot]:
        """Goal spots with distances measured from the current positions."""
        return [
            GoalSpot.measure(pos, self.mover.pos, self.players)
            for pos in self.goal_positions
        ]

    def move_player(self, player: Player, new_pos: Vector2) -> None:
        self.playfield.remove_player(player.pos)
        player.pos = new_pos
        self.playfield.put_player(new_pos)

    def is_caught(self) -> bool:
        return any(p.pos == self.mover.pos for p in self.players)
