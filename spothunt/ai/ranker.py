"""TargetRanker — weighted factor voting with strict tie-breaking.

Pipeline for one decision:
  1. Scoring     — every active factor hands its weight to the candidates
                   that are best on it (ratings accumulate across factors).
  2. Narrowing   — keep the candidates sharing the highest rating.
  3. Elimination — walk the factors again; the first factor with a single
                   strict winner among the best options decides.
  4. Fallback    — otherwise pick uniformly from *all* candidates.

Ratings live in a per-call list indexed like the candidate sequence and are
accumulated as exact Fractions of the float weights, so equal vote totals
compare equal whatever order the gains and losses arrived in.  The
Candidates themselves are never mutated.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from fractions import Fraction
from typing import TYPE_CHECKING, Mapping, Sequence

from spothunt.ai.factors import ACTIVE_FACTORS, compare
from spothunt.core.enums import Factor, Ordering

if TYPE_CHECKING:
    from spothunt.ai.candidates import Candidate
    from spothunt.config import HuntConfig
    from spothunt.core.models import GoalSpot

logger = logging.getLogger(__name__)

DEFAULT_WEIGHTS: dict[Factor, float] = {
    Factor.TOTAL_PLAYER_DISTANCE: 4.0,
    Factor.SPOT_DISTANCE: 3.0,
    Factor.FASTEST_DANGER_COST: 2.0,
    Factor.SURROUND_THREAT: 1.5,
    Factor.HIGHEST_DANGER: 1.0,
}

STAGE_RATING = "rating"
STAGE_ELIMINATION = "elimination"
STAGE_RANDOM = "random"


@dataclass(slots=True)
class RankingResult:
    """Outcome of one ranking: the chosen goal plus how it was reached."""

    goal: GoalSpot
    index: int
    stage: str
    ratings: list[float] = field(default_factory=list)
    best_options: list[int] = field(default_factory=list)
    deciding_factor: Factor | None = None


class TargetRanker:
    """Ranks candidates and selects exactly one of them.

    Usage::

        ranker = TargetRanker.from_config(config)
        result = ranker.rank(candidates, rng_value)
    """

    __slots__ = ("_weights", "_factors", "_credit_first", "_legacy_random_range")

    def __init__(
        self,
        weights: Mapping[Factor, float] | None = None,
        factors: Sequence[Factor] = ACTIVE_FACTORS,
        credit_first_candidate: bool = True,
        legacy_random_range: bool = False,
    ) -> None:
        self._weights = dict(DEFAULT_WEIGHTS)
        if weights:
            self._weights.update(weights)
        self._factors = tuple(factors)
        self._credit_first = credit_first_candidate
        self._legacy_random_range = legacy_random_range

    @classmethod
    def from_config(cls, config: HuntConfig) -> TargetRanker:
        return cls(
            weights=config.factor_weights(),
            credit_first_candidate=config.credit_first_candidate,
            legacy_random_range=config.legacy_random_range,
        )

    @property
    def factors(self) -> tuple[Factor, ...]:
        return self._factors

    def weight(self, factor: Factor) -> float:
        return self._weights[factor]

    # -- scoring --

    def rate(self, candidates: Sequence[Candidate]) -> list[Fraction]:
        """Run the scoring pass over every active factor and return the exact ratings."""
        ratings = [Fraction(0)] * len(candidates)
        for factor in self._factors:
            self._rate_factor(candidates, factor, ratings)
        return ratings

    def _rate_factor(self, candidates: Sequence[Candidate], factor: Factor, ratings: list[Fraction]) -> None:
        weight = Fraction(self._weights[factor])
        best = 0
        equals = [best]
        if self._credit_first:
            ratings[best] += weight

        for k in range(1, len(candidates)):
            outcome = compare(factor, candidates[k], candidates[best])
            if outcome == Ordering.BETTER:
                for j in equals:
                    ratings[j] -= weight
                best = k
                ratings[best] += weight
                equals = [best]
            elif outcome == Ordering.EQUAL:
                # best keeps pointing at the earlier candidate
                ratings[k] += weight
                equals.append(k)

    # -- narrowing --

    @staticmethod
    def narrow(ratings: Sequence[Fraction]) -> list[int]:
        """Indices of all candidates sharing the highest rating, in input order."""
        top = max(ratings)
        return [i for i, r in enumerate(ratings) if r == top]

    # -- elimination --

    def eliminate(self, candidates: Sequence[Candidate], options: Sequence[int]) -> tuple[int | None, Factor | None]:
        """Find the first factor with a lone strict winner among *options*.

        Every factor starts again from the full *options* group.  Returns
        ``(index, factor)`` of the winner, or ``(None, None)`` when no
        factor decides.
        """
        for factor in self._factors:
            winner = self._eliminate_factor(candidates, options, factor)
            if winner is not None:
                return winner, factor
        return None, None

    @staticmethod
    def _eliminate_factor(candidates: Sequence[Candidate], options: Sequence[int], factor: Factor) -> int | None:
        best = options[0]
        for k in options[1:]:
            outcome = compare(factor, candidates[k], candidates[best])
            if outcome == Ordering.BETTER:
                best = k
            elif outcome == Ordering.EQUAL:
                return None
        return best

    # -- random fallback --

    def random_index(self, count: int, rng_value: float) -> int:
        """Map a float in [0, 1) to a candidate index.

        With ``legacy_random_range`` the range is ``count - 1``, which never
        yields the last index.
        """
        span = count - 1 if self._legacy_random_range else count
        return min(int(rng_value * span), count - 1)

    # -- full pipeline --

    def rank(self, candidates: Sequence[Candidate], rng_value: float) -> RankingResult:
        """Select one candidate.  *rng_value* is only used by the random fallback."""
        if not candidates:
            raise ValueError("Cannot rank an empty candidate set")

        exact = self.rate(candidates)
        options = self.narrow(exact)
        ratings = [float(r) for r in exact]
        logger.debug("Ratings %s, best options %s", ratings, options)

        if len(options) == 1:
            idx = options[0]
            return RankingResult(candidates[idx].goal, idx, STAGE_RATING, ratings, options)

        idx, factor = self.eliminate(candidates, options)
        if idx is not None:
            logger.debug("Tie among %s broken by %s -> %d", options, factor.name, idx)
            return RankingResult(candidates[idx].goal, idx, STAGE_ELIMINATION, ratings, options, factor)

        idx = self.random_index(len(candidates), rng_value)
        logger.debug("No factor separates %s; random pick %d of %d", options, idx, len(candidates))
        return RankingResult(candidates[idx].goal, idx, STAGE_RANDOM, ratings, options)
