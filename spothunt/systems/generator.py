"""HuntGenerator — deterministic placement of the mover, players and goals."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from spothunt.ai.mover import MovingSpot
from spothunt.ai.oracle import PlayfieldOracle
from spothunt.core.enums import Domain
from spothunt.core.hunt_state import HuntState
from spothunt.core.models import Player, Vector2
from spothunt.core.playfield import Playfield

if TYPE_CHECKING:
    from spothunt.config import HuntConfig
    from spothunt.systems.rng import DeterministicRNG

logger = logging.getLogger(__name__)

_MAX_ATTEMPTS = 100


class HuntGenerator:
    """Builds a fresh HuntState from the config and seed."""

    __slots__ = ("_config", "_rng")

    def __init__(self, config: HuntConfig, rng: DeterministicRNG) -> None:
        self._config = config
        self._rng = rng

    def _random_free_pos(self, domain: Domain, index: int, taken: set[Vector2]) -> Vector2:
        cfg = self._config
        for attempt in range(_MAX_ATTEMPTS):
            x = self._rng.next_int(domain, index, attempt * 2, 0, cfg.grid_width - 1)
            y = self._rng.next_int(domain, index, attempt * 2 + 1, 0, cfg.grid_height - 1)
            pos = Vector2(x, y)
            if pos not in taken:
                return pos
        # Dense field: fall back to the first free cell in scan order
        for y in range(cfg.grid_height):
            for x in range(cfg.grid_width):
                pos = Vector2(x, y)
                if pos not in taken:
                    return pos
        raise ValueError(
            f"No free cell left on a {cfg.grid_width}x{cfg.grid_height} playfield"
        )

    def build(self) -> HuntState:
        cfg = self._config
        playfield = Playfield(cfg.grid_width, cfg.grid_height)
        oracle = PlayfieldOracle(playfield, cfg)
        taken: set[Vector2] = set()

        start = self._random_free_pos(Domain.SPAWN_MOVER, 0, taken)
        taken.add(start)
        mover = MovingSpot(playfield, oracle, cfg, self._rng, start=start)

        players: list[Player] = []
        for i in range(cfg.num_players):
            pos = self._random_free_pos(Domain.SPAWN_PLAYER, i, taken)
            taken.add(pos)
            players.append(Player(id=i + 1, pos=pos))
            playfield.put_player(pos)

        goals: list[Vector2] = []
        for i in range(cfg.num_goals):
            pos = self._random_free_pos(Domain.SPAWN_GOAL, i, taken)
            taken.add(pos)
            goals.append(pos)

        playfield.refresh_danger(players, cfg.player_danger, cfg.danger_radius)
        logger.info(
            "Hunt built: mover at %s, %d players, %d goals on %dx%d",
            start, len(players), len(goals), cfg.grid_width, cfg.grid_height,
        )
        return HuntState(cfg.world_seed, playfield, oracle, mover, players, goals)
