"""Hunt systems: RNG and hunt generation."""

from spothunt.systems.generator import HuntGenerator
from spothunt.systems.rng import DeterministicRNG

__all__ = ["DeterministicRNG", "HuntGenerator"]
