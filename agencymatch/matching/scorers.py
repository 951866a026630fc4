"""Per-factor scorers for agency/startup compatibility.

Every scorer returns an int in 0-100. Empty preferences score a neutral 50
so that an unspecified dimension neither rewards nor penalizes a candidate.
"""

import math
from collections.abc import Iterable
from enum import Enum

from agencymatch.core.errors import InvalidInputError
from agencymatch.core.schemas import ThinkingStyle

NEUTRAL_SCORE = 50

# Below the agency minimum the score decays to 40 at 30% under, then drops to 0.
_BELOW_MIN_TOLERANCE = 0.3
_BELOW_MIN_SLOPE = 200
# Above the agency maximum the score decays to 50 at 50% over, then floors at 20.
_ABOVE_MAX_TOLERANCE = 0.5
_ABOVE_MAX_SLOPE = 100
_ABOVE_MAX_FLOOR = 20

_KEYWORD_EXACT_POINTS = 30
_KEYWORD_PARTIAL_POINTS = 20
_KEYWORD_DESCRIPTION_POINTS = 10


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (no banker's rounding)."""
    return int(math.floor(value + 0.5))


def _clamp(score: int) -> int:
    return max(0, min(100, score))


def _normalize(values: Iterable[str | Enum]) -> list[str]:
    """Lowercase, strip and dedupe values, keeping first-seen order."""
    result: list[str] = []
    for v in values:
        text = (v.value if isinstance(v, Enum) else v).strip().lower()
        if text and text not in result:
            result.append(text)
    return result


def thinking_score(preferred: ThinkingStyle, actual: ThinkingStyle) -> int:
    """Score thinking-style alignment: exact 100, hybrid on either side 75, opposite 25."""
    if preferred == actual:
        return 100
    if ThinkingStyle.HYBRID in (preferred, actual):
        return 75
    return 25


def budget_score(requested: float, budget_min: int, budget_max: int) -> int:
    """Score how well a requested budget fits an agency's [min, max] range.

    Tolerance is asymmetric: budgets under the minimum are forgiven up to 30%,
    budgets over the maximum up to 50% and never drop below 20.

    Raises:
        InvalidInputError: If the requested budget or the range maximum is not
            positive, or the range is inverted.
    """
    if requested <= 0:
        msg = f"budget must be positive, got {requested}"
        raise InvalidInputError("budget", msg)
    if budget_min > budget_max:
        msg = f"budget_min ({budget_min}) is greater than budget_max ({budget_max})"
        raise InvalidInputError("budget_min", msg)
    if budget_max <= 0:
        msg = f"budget_max must be positive, got {budget_max}"
        raise InvalidInputError("budget_max", msg)

    if budget_min <= requested <= budget_max:
        return 100

    if requested < budget_min:
        pct_below = (budget_min - requested) / budget_min
        if pct_below <= _BELOW_MIN_TOLERANCE:
            return _clamp(round_half_up(100 - pct_below * _BELOW_MIN_SLOPE))
        return 0

    pct_above = (requested - budget_max) / budget_max
    if pct_above <= _ABOVE_MAX_TOLERANCE:
        return _clamp(round_half_up(100 - pct_above * _ABOVE_MAX_SLOPE))
    return _ABOVE_MAX_FLOOR


def overlap_score(requested: Iterable[str | Enum], offered: Iterable[str | Enum]) -> int:
    """Score case-insensitive overlap between requested and offered values.

    Used for categories, industries and areas alike. Coverage ratio plus a
    breadth boost of 5 per extra match, capped at 15.
    """
    wanted = _normalize(requested)
    available = set(_normalize(offered))
    if not wanted or not available:
        return NEUTRAL_SCORE

    matches = sum(1 for v in wanted if v in available)
    if matches == 0:
        return 0

    ratio = matches / len(wanted)
    boost = min(matches - 1, 3) * 5
    return min(100, round_half_up(ratio * 100 + boost))


def keyword_score(
    requested: Iterable[str],
    offered_keywords: Iterable[str],
    description: str,
) -> int:
    """Score fuzzy keyword relevance against an agency's keywords and description.

    Per requested keyword the first hit wins: exact keyword 30, partial keyword
    (substring either way) 20, description substring 10.
    """
    wanted = _normalize(requested)
    if not wanted:
        return NEUTRAL_SCORE

    available = _normalize(offered_keywords)
    description_lower = description.lower()

    points = 0
    for kw in wanted:
        if kw in available:
            points += _KEYWORD_EXACT_POINTS
        elif any(kw in k or k in kw for k in available):
            points += _KEYWORD_PARTIAL_POINTS
        elif kw in description_lower:
            points += _KEYWORD_DESCRIPTION_POINTS

    max_points = len(wanted) * _KEYWORD_EXACT_POINTS
    return min(100, round_half_up(points / max_points * 100))
