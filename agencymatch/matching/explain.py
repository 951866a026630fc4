"""Match explanations ("why matched") derived from factor scores.

Reasons are built as tagged ``Reason`` values and only turned into text by
``render_reason`` at the output boundary.
"""

from collections.abc import Iterable

from agencymatch.core.schemas import (
    CandidateProfile,
    FactorScores,
    PreferenceRequest,
    Reason,
    ReasonKind,
    ThinkingStyle,
)

THINKING_REASON_THRESHOLD = 75
BUDGET_FIT_THRESHOLD = 80
BUDGET_NEAR_THRESHOLD = 50
OVERLAP_REASON_THRESHOLD = 50

GENERAL_REASON_TEXT = "General compatibility based on profile analysis"


def build_reasons(
    preferences: PreferenceRequest,
    candidate: CandidateProfile,
    scores: FactorScores,
) -> tuple[Reason, ...]:
    """Return the ordered, non-empty reasons a candidate matched."""
    reasons: list[Reason] = []

    thinking = _thinking_reason(preferences, candidate, scores)
    if thinking is not None:
        reasons.append(thinking)

    if scores.budget >= BUDGET_FIT_THRESHOLD:
        reasons.append(Reason(
            kind=ReasonKind.BUDGET_FIT,
            budget=preferences.budget,
            budget_min=candidate.budget_min,
            budget_max=candidate.budget_max,
        ))
    elif scores.budget >= BUDGET_NEAR_THRESHOLD:
        reasons.append(Reason(
            kind=ReasonKind.BUDGET_NEAR,
            budget_min=candidate.budget_min,
            budget_max=candidate.budget_max,
        ))

    categories = [c.value for c in preferences.categories if c in candidate.categories]
    if categories:
        reasons.append(Reason(kind=ReasonKind.CATEGORIES, items=tuple(categories)))

    if scores.industries >= OVERLAP_REASON_THRESHOLD:
        industries = [i.value for i in preferences.industries if i in candidate.industries]
        if industries:
            reasons.append(Reason(kind=ReasonKind.INDUSTRIES, items=tuple(industries)))

    if scores.areas >= OVERLAP_REASON_THRESHOLD:
        offered = {a.strip().lower() for a in candidate.areas}
        areas = [a for a in preferences.areas if a.lower() in offered]
        if areas:
            reasons.append(Reason(kind=ReasonKind.AREAS, items=tuple(areas)))

    if (
        preferences.experience_level is not None
        and preferences.experience_level == candidate.experience_level
    ):
        reasons.append(Reason(
            kind=ReasonKind.EXPERIENCE_LEVEL,
            items=(candidate.experience_level.value,),
        ))

    if not reasons:
        reasons.append(Reason(kind=ReasonKind.GENERAL))
    return tuple(reasons)


def _thinking_reason(
    preferences: PreferenceRequest,
    candidate: CandidateProfile,
    scores: FactorScores,
) -> Reason | None:
    if scores.thinking < THINKING_REASON_THRESHOLD:
        return None
    if candidate.thinking_style == preferences.thinking_preference:
        return Reason(
            kind=ReasonKind.THINKING_EXACT,
            items=(candidate.thinking_style.value,),
        )
    if candidate.thinking_style == ThinkingStyle.HYBRID:
        return Reason(
            kind=ReasonKind.THINKING_HYBRID_CANDIDATE,
            items=(preferences.thinking_preference.value,),
        )
    return Reason(
        kind=ReasonKind.THINKING_HYBRID_PREFERENCE,
        items=(candidate.thinking_style.value,),
    )


def format_money(amount: float) -> str:
    """Format an amount as dollars with thousands separators: 50000 -> '$50,000'."""
    if float(amount).is_integer():
        return f"${int(amount):,}"
    return f"${amount:,.2f}"


def render_reason(reason: Reason) -> str:
    """Render a reason to its human-readable sentence."""
    kind = reason.kind
    items = ", ".join(reason.items)

    if kind == ReasonKind.THINKING_EXACT:
        return f"Perfect thinking style match: Both favor {items} approach"
    if kind == ReasonKind.THINKING_HYBRID_CANDIDATE:
        return f"Flexible hybrid thinking adapts to your {items} preference"
    if kind == ReasonKind.THINKING_HYBRID_PREFERENCE:
        return f"Hybrid preference works well with {items} approach"
    if kind == ReasonKind.BUDGET_FIT:
        return (
            f"Budget aligned: Your budget of {format_money(reason.budget or 0)} fits within "
            f"their {_money_range(reason)} range"
        )
    if kind == ReasonKind.BUDGET_NEAR:
        return f"Budget is near their range ({_money_range(reason)})"
    if kind == ReasonKind.CATEGORIES:
        return f"Expertise in: {items}"
    if kind == ReasonKind.INDUSTRIES:
        return f"Industry experience: {items}"
    if kind == ReasonKind.AREAS:
        return f"Available in: {items}"
    if kind == ReasonKind.EXPERIENCE_LEVEL:
        return f"Specializes in {items} startups"
    return GENERAL_REASON_TEXT


def render_reasons(reasons: Iterable[Reason]) -> list[str]:
    """Render reasons in order, as shown under "why matched"."""
    return [render_reason(r) for r in reasons]


def _money_range(reason: Reason) -> str:
    return f"{format_money(reason.budget_min or 0)}-{format_money(reason.budget_max or 0)}"
