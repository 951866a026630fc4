"""Core data models for the agency match engine."""

from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ThinkingStyle(str, Enum):
    """Working philosophy of an agency, the primary compatibility axis."""

    CREATIVE = "creative"
    DATA = "data"
    HYBRID = "hybrid"


class ExperienceLevel(str, Enum):
    EARLY_STAGE = "early-stage"
    GROWTH = "growth"
    ENTERPRISE = "enterprise"


class Category(str, Enum):
    SEO = "SEO"
    BRANDING = "Branding"
    PERFORMANCE = "Performance"
    WEB = "Web"
    SOCIAL_MEDIA = "Social Media"
    CONTENT_MARKETING = "Content Marketing"
    EMAIL_MARKETING = "Email Marketing"
    PR = "PR"
    INFLUENCER_MARKETING = "Influencer Marketing"


class Industry(str, Enum):
    SAAS = "SaaS"
    D2C = "D2C"
    FINTECH = "Fintech"
    EDTECH = "Edtech"
    HEALTHCARE = "Healthcare"
    E_COMMERCE = "E-commerce"
    B2B = "B2B"
    CONSUMER = "Consumer"


def _dedupe(values: list[Any]) -> list[Any]:
    """Drop blanks and case-insensitive duplicates, keeping first-seen order."""
    seen: set[str] = set()
    result: list[Any] = []
    for v in values:
        text = v.value if isinstance(v, Enum) else str(v).strip()
        key = text.lower()
        if not key or key in seen:
            continue
        seen.add(key)
        result.append(v if isinstance(v, Enum) else text)
    return result


class CandidateProfile(BaseModel):
    """An agency profile as supplied by the profile store.

    Frozen: the engine reads it and never mutates it.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    user_id: str | None = None
    categories: list[Category] = Field(default_factory=list)
    industries: list[Industry] = Field(default_factory=list)
    budget_min: int = Field(ge=0)
    budget_max: int = Field(ge=0)
    areas: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    experience_level: ExperienceLevel = ExperienceLevel.GROWTH
    thinking_style: ThinkingStyle
    description: str = ""

    @model_validator(mode="after")
    def budget_range_ordered(self) -> "CandidateProfile":
        if self.budget_min > self.budget_max:
            msg = "budget_min cannot be greater than budget_max"
            raise ValueError(msg)
        return self


class PreferenceRequest(BaseModel):
    """A startup's stated preferences for one match invocation."""

    model_config = ConfigDict(frozen=True)

    budget: float = Field(gt=0)
    categories: list[Category]
    industries: list[Industry] = Field(default_factory=list)
    areas: list[str] = Field(default_factory=list)
    thinking_preference: ThinkingStyle
    experience_level: ExperienceLevel | None = None
    keywords: list[str] = Field(default_factory=list)

    @field_validator("categories", "industries", "areas", "keywords")
    @classmethod
    def unique_entries(cls, v: list[Any]) -> list[Any]:
        return _dedupe(v)

    @field_validator("categories")
    @classmethod
    def categories_not_empty(cls, v: list[Category]) -> list[Category]:
        if not v:
            msg = "categories must be a non-empty list"
            raise ValueError(msg)
        return v

    @classmethod
    def from_yaml(cls, path: str | Path) -> "PreferenceRequest":
        """Load a preference request from a YAML file."""
        path = Path(path)
        if not path.exists():
            msg = f"Request file not found: {path}"
            raise FileNotFoundError(msg)
        raw: dict[str, Any] = yaml.safe_load(path.read_text()) or {}
        return cls.model_validate(raw)


class FactorScores(BaseModel):
    """Per-factor sub-scores for one candidate, each 0-100."""

    model_config = ConfigDict(frozen=True)

    thinking: int = Field(ge=0, le=100)
    budget: int = Field(ge=0, le=100)
    categories: int = Field(ge=0, le=100)
    industries: int = Field(ge=0, le=100)
    areas: int = Field(ge=0, le=100)
    keywords: int = Field(ge=0, le=100)


class ReasonKind(str, Enum):
    THINKING_EXACT = "thinking_exact"
    THINKING_HYBRID_CANDIDATE = "thinking_hybrid_candidate"
    THINKING_HYBRID_PREFERENCE = "thinking_hybrid_preference"
    BUDGET_FIT = "budget_fit"
    BUDGET_NEAR = "budget_near"
    CATEGORIES = "categories"
    INDUSTRIES = "industries"
    AREAS = "areas"
    EXPERIENCE_LEVEL = "experience_level"
    GENERAL = "general"


class Reason(BaseModel):
    """One "why matched" justification, rendered to text at the output boundary."""

    model_config = ConfigDict(frozen=True)

    kind: ReasonKind
    items: tuple[str, ...] = ()
    budget: float | None = None
    budget_min: int | None = None
    budget_max: int | None = None


class MatchResult(BaseModel):
    """A scored candidate with its justifications."""

    model_config = ConfigDict(frozen=True)

    candidate: CandidateProfile
    scores: FactorScores
    overall_score: int = Field(ge=0, le=100)
    reasons: tuple[Reason, ...] = Field(min_length=1)

    @property
    def thinking_match_score(self) -> int:
        return self.scores.thinking


class SkippedCandidate(BaseModel):
    """A candidate left out of a run because its data violated a precondition."""

    model_config = ConfigDict(frozen=True)

    candidate_id: str
    field: str
    reason: str


class MatchOutcome(BaseModel):
    """Ranked results of one match run plus any skipped candidates."""

    results: list[MatchResult] = Field(default_factory=list)
    skipped: list[SkippedCandidate] = Field(default_factory=list)
