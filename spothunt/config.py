"""Hunt configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass

from spothunt.core.enums import Factor


@dataclass(frozen=True)
class HuntConfig:
    """Immutable configuration for a hunt run."""

    # World
    world_seed: int = 42
    grid_width: int = 16
    grid_height: int = 16

    # Timing
    max_ticks: int = 200

    # Population
    num_players: int = 3
    num_goals: int = 5

    # Danger field
    player_danger: int = 5                 # Danger on a player's own cell
    danger_radius: int = 3                 # Manhattan reach of a player's danger
    surround_radius: int = 1               # Area summed for surround threat
    wall_penalty: float = 1.6              # Surround threat multiplier on the boundary

    # Pathfinding
    pathfinder_max_nodes: int = 1024
    unreachable_cost: int = 9999           # Danger cost reported when no path exists

    # Factor weights
    weight_tpd: float = 4.0
    weight_sd: float = 3.0
    weight_fdc: float = 2.0
    weight_st: float = 1.5
    weight_hd: float = 1.0

    # Ranking behaviour
    credit_first_candidate: bool = True    # False: first candidate of a scoring pass is never credited
    legacy_random_range: bool = False      # True: random fallback draws from [0, count - 1)

    # Logging
    log_level: str = "INFO"
    replay_file: str = "replay.json"

    def __post_init__(self) -> None:
        if self.grid_width <= 0 or self.grid_height <= 0:
            raise ValueError(
                f"Grid size must be positive (width={self.grid_width}, height={self.grid_height})"
            )
        if self.num_goals < 1:
            raise ValueError(f"num_goals must be at least 1 (got {self.num_goals})")

    def factor_weights(self) -> dict[Factor, float]:
        return {
            Factor.TOTAL_PLAYER_DISTANCE: self.weight_tpd,
            Factor.SPOT_DISTANCE: self.weight_sd,
            Factor.FASTEST_DANGER_COST: self.weight_fdc,
            Factor.SURROUND_THREAT: self.weight_st,
            Factor.HIGHEST_DANGER: self.weight_hd,
        }
