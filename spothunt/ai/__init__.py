"""AI layer: candidate evaluation, ranking, pathfinding and the mover."""

from spothunt.ai.candidates import Candidate, CandidateEvaluator
from spothunt.ai.mover import MovingSpot
from spothunt.ai.oracle import GoalOracle, PlayfieldOracle
from spothunt.ai.ranker import RankingResult, TargetRanker

__all__ = [
    "Candidate",
    "CandidateEvaluator",
    "GoalOracle",
    "MovingSpot",
    "PlayfieldOracle",
    "RankingResult",
    "TargetRanker",
]
