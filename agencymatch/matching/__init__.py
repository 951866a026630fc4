"""Agency match engine.

Usage:
    from agencymatch.matching import match_candidates
    from agencymatch.matching.explain import render_reasons

    results = match_candidates(preferences, agencies, min_score=20)
    for r in results:
        print(r.overall_score, render_reasons(r.reasons))
"""

from agencymatch.matching.engine import (
    compute_factor_scores,
    match_candidates,
    ranking_key,
    run_match,
    score_candidate,
)

__all__ = [
    "compute_factor_scores",
    "match_candidates",
    "ranking_key",
    "run_match",
    "score_candidate",
]
