"""Orchestrator: wires catalog, engine, threshold defaults, limit and export.

Data flow:
  1. Resolve min_score / limit (explicit value or MatchingConfig default)
  2. Engine run over the full catalog -> ranked results + skipped
  3. Truncate to limit (total_matches counts the untruncated list)
  4. Project agency fields for output (internal ids omitted)
"""

import json
import logging
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, Field

from agencymatch.core.config import MatchingConfig
from agencymatch.core.schemas import (
    CandidateProfile,
    MatchResult,
    PreferenceRequest,
    SkippedCandidate,
)
from agencymatch.matching.engine import run_match
from agencymatch.matching.explain import render_reasons
from agencymatch.pipeline.catalog_filters import (
    CatalogQuery,
    build_catalog_filters,
    run_filter_chain,
)

logger = logging.getLogger(__name__)


class MatchResponse(BaseModel):
    """What the result consumer hands back for one match request."""

    matches: list[MatchResult] = Field(default_factory=list)
    total_matches: int = 0
    preferences_used: PreferenceRequest
    skipped: list[SkippedCandidate] = Field(default_factory=list)


def build_match_response(
    preferences: PreferenceRequest,
    candidates: Sequence[CandidateProfile],
    config: MatchingConfig,
    *,
    min_score: int | None = None,
    limit: int | None = None,
) -> MatchResponse:
    """Run the engine and shape its output for a caller.

    ``min_score`` and ``limit`` fall back to the configured defaults.
    """
    threshold = config.min_score if min_score is None else min_score
    max_results = config.limit if limit is None else limit
    if max_results < 1:
        msg = f"limit must be at least 1, got {max_results}"
        raise ValueError(msg)

    outcome = run_match(
        preferences,
        candidates,
        threshold,
        max_workers=config.max_workers,
    )

    logger.info(
        "Returning %d of %d matches (min_score=%d)",
        min(max_results, len(outcome.results)), len(outcome.results), threshold,
    )
    return MatchResponse(
        matches=outcome.results[:max_results],
        total_matches=len(outcome.results),
        preferences_used=preferences,
        skipped=outcome.skipped,
    )


def browse_catalog(
    profiles: list[CandidateProfile],
    query: CatalogQuery,
) -> list[CandidateProfile]:
    """Return catalog profiles matching the browse query."""
    result = run_filter_chain(profiles, build_catalog_filters(query))
    logger.info("Catalog browse: %d of %d profiles", len(result), len(profiles))
    return result


def agency_summary(profile: CandidateProfile) -> dict[str, Any]:
    """Public projection of an agency profile."""
    return {
        "id": profile.id,
        "name": profile.name,
        "categories": [c.value for c in profile.categories],
        "industries": [i.value for i in profile.industries],
        "budget_min": profile.budget_min,
        "budget_max": profile.budget_max,
        "areas": list(profile.areas),
        "thinking_style": profile.thinking_style.value,
        "experience_level": profile.experience_level.value,
        "description": profile.description,
    }


def export_response_json(response: MatchResponse) -> str:
    """Export a match response as a JSON string."""
    data = {
        "matches": [
            {
                "agency": agency_summary(r.candidate),
                "thinking_match_score": r.thinking_match_score,
                "overall_score": r.overall_score,
                "why_matched": render_reasons(r.reasons),
            }
            for r in response.matches
        ],
        "total_matches": response.total_matches,
        "preferences_used": response.preferences_used.model_dump(mode="json"),
        "skipped": [s.model_dump(mode="json") for s in response.skipped],
    }
    return json.dumps(data, indent=2)
