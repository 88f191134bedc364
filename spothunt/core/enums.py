"""Enumerations used throughout the hunt."""

from __future__ import annotations

from enum import IntEnum, unique


@unique
class Factor(IntEnum):
    """Comparison dimensions used to rank goal spots."""

    TOTAL_PLAYER_DISTANCE = 0
    SPOT_DISTANCE = 1
    FASTEST_DANGER_COST = 2
    SURROUND_THREAT = 3
    HIGHEST_DANGER = 4


@unique
class Ordering(IntEnum):
    """Three-way comparison outcome of one candidate against another."""

    WORSE = -1
    EQUAL = 0
    BETTER = 1


@unique
class Domain(IntEnum):
    """RNG domains for deterministic randomness isolation."""

    TARGET = 0
    SPAWN_MOVER = 1
    SPAWN_PLAYER = 2
    SPAWN_GOAL = 3


@unique
class HuntOutcome(IntEnum):
    """How a hunt ended."""

    RUNNING = 0
    CAUGHT = 1
    TIMED_OUT = 2
