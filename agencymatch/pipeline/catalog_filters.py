"""Filter chain for browsing the agency catalog.

Filter order:
  1. ThinkingStyleFilter    - exact
  2. ExperienceLevelFilter  - exact
  3. CategoryFilter         - exact membership
  4. AreaFilter             - case-insensitive substring
  5. IndustryFilter         - exact membership
  6. BudgetRangeFilter      - range overlap
  7. KeywordSearchFilter    - keywords, name or description; reorders by keyword hits

Every filter is a no-op when its criterion is unset.
"""

import logging
from collections.abc import Callable

from pydantic import BaseModel

from agencymatch.core.schemas import (
    CandidateProfile,
    Category,
    ExperienceLevel,
    Industry,
    ThinkingStyle,
)

logger = logging.getLogger(__name__)

# A filter is a callable that takes profiles and returns a subset.
Filter = Callable[[list[CandidateProfile]], list[CandidateProfile]]


class CatalogQuery(BaseModel):
    """Optional browse criteria; unset fields do not filter."""

    category: Category | None = None
    area: str | None = None
    budget_min: int | None = None
    budget_max: int | None = None
    keyword: str | None = None
    industry: Industry | None = None
    thinking_style: ThinkingStyle | None = None
    experience_level: ExperienceLevel | None = None


class ThinkingStyleFilter:
    """Keep profiles with the given thinking style."""

    def __init__(self, style: ThinkingStyle | None) -> None:
        self._style = style

    def __call__(self, profiles: list[CandidateProfile]) -> list[CandidateProfile]:
        if self._style is None:
            return profiles
        return _log_removed(
            self, profiles, [p for p in profiles if p.thinking_style == self._style],
        )


class ExperienceLevelFilter:
    """Keep profiles with the given experience level."""

    def __init__(self, level: ExperienceLevel | None) -> None:
        self._level = level

    def __call__(self, profiles: list[CandidateProfile]) -> list[CandidateProfile]:
        if self._level is None:
            return profiles
        return _log_removed(
            self, profiles, [p for p in profiles if p.experience_level == self._level],
        )


class CategoryFilter:
    """Keep profiles offering the given service category."""

    def __init__(self, category: Category | None) -> None:
        self._category = category

    def __call__(self, profiles: list[CandidateProfile]) -> list[CandidateProfile]:
        if self._category is None:
            return profiles
        return _log_removed(self, profiles, [p for p in profiles if self._category in p.categories])


class IndustryFilter:
    """Keep profiles with experience in the given industry."""

    def __init__(self, industry: Industry | None) -> None:
        self._industry = industry

    def __call__(self, profiles: list[CandidateProfile]) -> list[CandidateProfile]:
        if self._industry is None:
            return profiles
        return _log_removed(self, profiles, [p for p in profiles if self._industry in p.industries])


class AreaFilter:
    """Keep profiles serving an area containing the query (case-insensitive)."""

    def __init__(self, area: str | None) -> None:
        self._area = (area or "").lower().strip()

    def __call__(self, profiles: list[CandidateProfile]) -> list[CandidateProfile]:
        if not self._area:
            return profiles
        result = [p for p in profiles if any(self._area in a.lower() for a in p.areas)]
        return _log_removed(self, profiles, result)


class BudgetRangeFilter:
    """Keep profiles whose [budget_min, budget_max] overlaps the query bounds.

    ``budget_min`` keeps profiles whose maximum reaches it; ``budget_max``
    keeps profiles whose minimum does not exceed it.
    """

    def __init__(self, budget_min: int | None = None, budget_max: int | None = None) -> None:
        self._min = budget_min
        self._max = budget_max

    def __call__(self, profiles: list[CandidateProfile]) -> list[CandidateProfile]:
        if self._min is None and self._max is None:
            return profiles
        result = [
            p for p in profiles
            if (self._min is None or p.budget_max >= self._min)
            and (self._max is None or p.budget_min <= self._max)
        ]
        return _log_removed(self, profiles, result)


class KeywordSearchFilter:
    """Keep profiles mentioning the term in keywords, name or description.

    Survivors are reordered by how many of their keywords contain the term,
    most first; ties keep catalog order.
    """

    def __init__(self, keyword: str | None) -> None:
        self._term = (keyword or "").lower().strip()

    def __call__(self, profiles: list[CandidateProfile]) -> list[CandidateProfile]:
        if not self._term:
            return profiles
        result = [p for p in profiles if self._matches(p)]
        result.sort(key=self._keyword_hits, reverse=True)
        return _log_removed(self, profiles, result)

    def _matches(self, profile: CandidateProfile) -> bool:
        return (
            self._keyword_hits(profile) > 0
            or self._term in profile.name.lower()
            or self._term in profile.description.lower()
        )

    def _keyword_hits(self, profile: CandidateProfile) -> int:
        return sum(1 for k in profile.keywords if self._term in k.lower())


def _log_removed(
    f: object,
    before: list[CandidateProfile],
    after: list[CandidateProfile],
) -> list[CandidateProfile]:
    removed = len(before) - len(after)
    if removed:
        logger.debug("%s: removed %d profiles", type(f).__name__, removed)
    return after


def build_catalog_filters(query: CatalogQuery) -> list[Filter]:
    """Build the filter chain for a catalog query."""
    filters: list[Filter] = [
        ThinkingStyleFilter(query.thinking_style),
        ExperienceLevelFilter(query.experience_level),
        CategoryFilter(query.category),
        AreaFilter(query.area),
        IndustryFilter(query.industry),
        BudgetRangeFilter(query.budget_min, query.budget_max),
        KeywordSearchFilter(query.keyword),
    ]
    return filters


def run_filter_chain(
    profiles: list[CandidateProfile],
    filters: list[Filter],
) -> list[CandidateProfile]:
    """Apply filters in order, returning the surviving profiles."""
    result = profiles
    for f in filters:
        result = f(result)
    return result
