"""Factor rules: which candidate metric each Factor reads and which way is better."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from spothunt.core.enums import Factor, Ordering

if TYPE_CHECKING:
    from spothunt.ai.candidates import Candidate


@dataclass(frozen=True, slots=True)
class FactorRule:
    metric: str
    higher_is_better: bool


FACTOR_RULES: dict[Factor, FactorRule] = {
    Factor.TOTAL_PLAYER_DISTANCE: FactorRule("total_player_distance", higher_is_better=True),
    Factor.SPOT_DISTANCE:         FactorRule("spot_distance", higher_is_better=False),
    Factor.FASTEST_DANGER_COST:   FactorRule("calculated_cost", higher_is_better=False),
    Factor.SURROUND_THREAT:       FactorRule("surround_threat", higher_is_better=False),
    Factor.HIGHEST_DANGER:        FactorRule("highest_danger", higher_is_better=False),
}

# Scoring and elimination both walk this order.  SURROUND_THREAT is
# comparable but deliberately not part of it.
ACTIVE_FACTORS: tuple[Factor, ...] = (
    Factor.TOTAL_PLAYER_DISTANCE,
    Factor.SPOT_DISTANCE,
    Factor.FASTEST_DANGER_COST,
    Factor.HIGHEST_DANGER,
)


def metric(factor: Factor, candidate: Candidate) -> float:
    return getattr(candidate, FACTOR_RULES[factor].metric)


def compare(factor: Factor, a: Candidate, b: Candidate) -> Ordering:
    """Three-way comparison of *a* against *b* on *factor*."""
    va, vb = metric(factor, a), metric(factor, b)
    if va == vb:
        return Ordering.EQUAL
    if (va > vb) == FACTOR_RULES[factor].higher_is_better:
        return Ordering.BETTER
    return Ordering.WORSE
