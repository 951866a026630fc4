"""Weighted combination of factor scores into one overall score."""

from agencymatch.core.schemas import FactorScores
from agencymatch.matching.scorers import round_half_up

# Fixed weight table; thinking style dominates. Sums to 100.
FACTOR_WEIGHTS: dict[str, int] = {
    "thinking": 30,
    "budget": 25,
    "categories": 20,
    "industries": 10,
    "areas": 10,
    "keywords": 5,
}


def aggregate(scores: FactorScores) -> int:
    """Return round(sum(score * weight) / 100), an int in 0-100."""
    total = sum(
        getattr(scores, factor) * weight for factor, weight in FACTOR_WEIGHTS.items()
    )
    return max(0, min(100, round_half_up(total / 100)))
