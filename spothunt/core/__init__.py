"""Core data models and playfield representation."""

from spothunt.core.enums import Domain, Factor, HuntOutcome, Ordering
from spothunt.core.models import GoalSpot, Player, Vector2
from spothunt.core.playfield import Cell, GridBounds, Playfield

__all__ = [
    "Cell",
    "Domain",
    "Factor",
    "GridBounds",
    "GoalSpot",
    "HuntOutcome",
    "Ordering",
    "Playfield",
    "Player",
    "Vector2",
]
