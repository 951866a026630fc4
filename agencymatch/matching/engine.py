"""Match engine: scores every candidate, filters by threshold and ranks.

Data flow per run:
  1. Factor scores (thinking, budget, categories, industries, areas, keywords)
  2. Weighted aggregate -> overall score
  3. Explanations from the same factor scores
  4. Threshold filter (overall >= min_score)
  5. Sort: overall desc, thinking desc, candidate id asc

Candidates are independent, so step 1-3 may run on a thread pool; the final
sort is applied once all results are collected.
"""

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from agencymatch.core.errors import InvalidInputError
from agencymatch.core.schemas import (
    CandidateProfile,
    FactorScores,
    MatchOutcome,
    MatchResult,
    PreferenceRequest,
    SkippedCandidate,
)
from agencymatch.matching.aggregator import aggregate
from agencymatch.matching.explain import build_reasons
from agencymatch.matching.scorers import (
    budget_score,
    keyword_score,
    overlap_score,
    thinking_score,
)

logger = logging.getLogger(__name__)


def compute_factor_scores(
    preferences: PreferenceRequest,
    candidate: CandidateProfile,
) -> FactorScores:
    """Run every factor scorer for one candidate."""
    return FactorScores(
        thinking=thinking_score(preferences.thinking_preference, candidate.thinking_style),
        budget=budget_score(preferences.budget, candidate.budget_min, candidate.budget_max),
        categories=overlap_score(preferences.categories, candidate.categories),
        industries=overlap_score(preferences.industries, candidate.industries),
        areas=overlap_score(preferences.areas, candidate.areas),
        keywords=keyword_score(preferences.keywords, candidate.keywords, candidate.description),
    )


def score_candidate(
    preferences: PreferenceRequest,
    candidate: CandidateProfile,
) -> MatchResult:
    """Score and explain a single candidate.

    Raises:
        InvalidInputError: If the candidate's budget range is unusable.
    """
    scores = compute_factor_scores(preferences, candidate)
    return MatchResult(
        candidate=candidate,
        scores=scores,
        overall_score=aggregate(scores),
        reasons=build_reasons(preferences, candidate, scores),
    )


def ranking_key(result: MatchResult) -> tuple[int, int, str]:
    """Sort key giving a total order: overall desc, thinking desc, id asc."""
    return (-result.overall_score, -result.thinking_match_score, result.candidate.id)


def run_match(
    preferences: PreferenceRequest,
    candidates: Sequence[CandidateProfile],
    min_score: int = 0,
    *,
    max_workers: int | None = None,
) -> MatchOutcome:
    """Score all candidates and return ranked results plus skipped candidates.

    Args:
        preferences: The requester's validated preferences.
        candidates: Every candidate to consider; never mutated.
        min_score: Results with an overall score below this are dropped.
        max_workers: Thread pool size. None or 1 scores sequentially.

    Returns:
        MatchOutcome with results sorted by ``ranking_key``.

    Raises:
        InvalidInputError: If the requested budget is not positive.
    """
    if preferences.budget <= 0:
        msg = f"budget must be positive, got {preferences.budget}"
        raise InvalidInputError("budget", msg)

    def _score(candidate: CandidateProfile) -> MatchResult | SkippedCandidate:
        try:
            return score_candidate(preferences, candidate)
        except InvalidInputError as e:
            logger.warning("Skipping candidate '%s': %s", candidate.id, e)
            return SkippedCandidate(candidate_id=candidate.id, field=e.field, reason=str(e))

    if max_workers is not None and max_workers > 1 and len(candidates) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            scored = list(executor.map(_score, candidates))
    else:
        scored = [_score(c) for c in candidates]

    results = [s for s in scored if isinstance(s, MatchResult)]
    skipped = [s for s in scored if isinstance(s, SkippedCandidate)]

    kept = [r for r in results if r.overall_score >= min_score]
    below = len(results) - len(kept)
    if below:
        logger.debug("Threshold %d: removed %d candidates", min_score, below)

    kept.sort(key=ranking_key)
    logger.info(
        "Matched %d candidates: %d ranked, %d below threshold, %d skipped",
        len(candidates), len(kept), below, len(skipped),
    )
    return MatchOutcome(results=kept, skipped=skipped)


def match_candidates(
    preferences: PreferenceRequest,
    candidates: Sequence[CandidateProfile],
    min_score: int = 0,
    *,
    max_workers: int | None = None,
) -> list[MatchResult]:
    """Return ranked match results with overall score >= min_score."""
    outcome = run_match(preferences, candidates, min_score, max_workers=max_workers)
    return outcome.results
