"""Tests for the per-factor scorers."""

import pytest

from agencymatch.core.errors import InvalidInputError
from agencymatch.core.schemas import Category, ThinkingStyle
from agencymatch.matching.scorers import (
    budget_score,
    keyword_score,
    overlap_score,
    round_half_up,
    thinking_score,
)

STYLES = list(ThinkingStyle)


# ---------------------------------------------------------------------------
# Thinking style
# ---------------------------------------------------------------------------


class TestThinkingScore:
    @pytest.mark.parametrize("style", STYLES)
    def test_exact_match(self, style: ThinkingStyle) -> None:
        assert thinking_score(style, style) == 100

    def test_hybrid_with_either_pole(self) -> None:
        assert thinking_score(ThinkingStyle.HYBRID, ThinkingStyle.CREATIVE) == 75
        assert thinking_score(ThinkingStyle.HYBRID, ThinkingStyle.DATA) == 75

    def test_opposite_poles(self) -> None:
        assert thinking_score(ThinkingStyle.CREATIVE, ThinkingStyle.DATA) == 25

    def test_symmetric(self) -> None:
        for a in STYLES:
            for b in STYLES:
                assert thinking_score(a, b) == thinking_score(b, a)


# ---------------------------------------------------------------------------
# Budget
# ---------------------------------------------------------------------------


class TestBudgetScore:
    def test_inside_range(self) -> None:
        assert budget_score(50000, 40000, 60000) == 100

    def test_range_bounds_inclusive(self) -> None:
        assert budget_score(40000, 40000, 60000) == 100
        assert budget_score(60000, 40000, 60000) == 100

    def test_single_point_range(self) -> None:
        assert budget_score(5000, 5000, 5000) == 100

    def test_slightly_below_min(self) -> None:
        # 15% below -> 100 - 30
        assert budget_score(42500, 50000, 80000) == 70

    def test_below_min_at_tolerance(self) -> None:
        assert budget_score(35000, 50000, 80000) == 40

    def test_far_below_min(self) -> None:
        assert budget_score(10000, 50000, 80000) == 0

    def test_slightly_above_max(self) -> None:
        # 25% above -> 100 - 25
        assert budget_score(75000, 40000, 60000) == 75

    def test_above_max_at_tolerance(self) -> None:
        assert budget_score(90000, 40000, 60000) == 50

    def test_far_above_max_has_floor(self) -> None:
        assert budget_score(1_000_000, 40000, 60000) == 20

    def test_zero_minimum(self) -> None:
        assert budget_score(100, 0, 5000) == 100

    def test_non_increasing_below_range(self) -> None:
        scores = [budget_score(r, 50000, 80000) for r in range(50000, 0, -2500)]
        assert all(a >= b for a, b in zip(scores, scores[1:]))
        assert scores[-1] == 0

    def test_non_increasing_above_range(self) -> None:
        scores = [budget_score(r, 40000, 60000) for r in range(60000, 200000, 2500)]
        assert all(a >= b for a, b in zip(scores, scores[1:]))
        assert scores[-1] == 20

    def test_inverted_range_raises(self) -> None:
        with pytest.raises(InvalidInputError) as exc:
            budget_score(50000, 80000, 10000)
        assert exc.value.field == "budget_min"

    def test_zero_maximum_raises(self) -> None:
        with pytest.raises(InvalidInputError) as exc:
            budget_score(50000, 0, 0)
        assert exc.value.field == "budget_max"

    def test_non_positive_budget_raises(self) -> None:
        with pytest.raises(InvalidInputError) as exc:
            budget_score(0, 100, 200)
        assert exc.value.field == "budget"

    def test_invalid_input_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="budget_min"):
            budget_score(50000, 80000, 10000)


# ---------------------------------------------------------------------------
# Set overlap
# ---------------------------------------------------------------------------


class TestOverlapScore:
    def test_empty_requested_is_neutral(self) -> None:
        assert overlap_score([], ["SEO"]) == 50

    def test_empty_offered_is_neutral(self) -> None:
        assert overlap_score(["SEO"], []) == 50

    def test_no_overlap(self) -> None:
        assert overlap_score(["SEO"], ["Branding", "PR"]) == 0

    def test_single_full_match_no_boost(self) -> None:
        assert overlap_score(["SEO"], ["SEO", "Branding"]) == 100

    def test_half_coverage(self) -> None:
        assert overlap_score(["SEO", "PR"], ["SEO"]) == 50

    def test_third_coverage_rounds(self) -> None:
        assert overlap_score(["SEO", "PR", "Web"], ["Web"]) == 33

    def test_boost_for_second_match(self) -> None:
        # 2 of 4 -> 50 + 5
        assert overlap_score(["a", "b", "c", "d"], ["a", "b"]) == 55

    def test_boost_for_third_match(self) -> None:
        # 3 of 4 -> 75 + 10
        assert overlap_score(["a", "b", "c", "d"], ["a", "b", "c"]) == 85

    def test_boost_capped_at_15(self) -> None:
        # 4 of 5 -> 80 + 15; 5 of 6 -> 83.3 + 15
        assert overlap_score(["a", "b", "c", "d", "e"], ["a", "b", "c", "d"]) == 95
        assert overlap_score(list("abcdef"), list("abcde")) == 98

    def test_capped_at_100(self) -> None:
        assert overlap_score(["a", "b"], ["a", "b"]) == 100
        assert overlap_score(["a", "b", "c", "d"], ["a", "b", "c", "d", "e"]) == 100

    def test_case_insensitive(self) -> None:
        assert overlap_score(["remote", "BANGALORE"], ["Remote", "Bangalore"]) == 100

    def test_accepts_enums(self) -> None:
        assert overlap_score([Category.SEO], [Category.SEO, Category.WEB]) == 100

    def test_duplicates_collapse(self) -> None:
        assert overlap_score(["Remote", "remote"], ["Remote"]) == 100

    def test_blank_entries_ignored(self) -> None:
        assert overlap_score(["  "], ["Remote"]) == 50


# ---------------------------------------------------------------------------
# Keywords
# ---------------------------------------------------------------------------


class TestKeywordScore:
    def test_empty_requested_is_neutral(self) -> None:
        assert keyword_score([], ["seo"], "anything") == 50

    def test_exact_match(self) -> None:
        assert keyword_score(["PLG"], ["plg", "analytics"], "") == 100

    def test_partial_keyword_match(self) -> None:
        # 20 of 30
        assert keyword_score(["growth"], ["growth hacking"], "") == 67

    def test_partial_match_other_direction(self) -> None:
        assert keyword_score(["growth hacking"], ["growth"], "") == 67

    def test_description_match(self) -> None:
        # 10 of 30
        assert keyword_score(["storytelling"], ["brand"], "We love Storytelling.") == 33

    def test_no_match(self) -> None:
        assert keyword_score(["fintech"], ["brand"], "Consumer studio") == 0

    def test_first_hit_wins(self) -> None:
        # Exact keyword also present in description still counts 30, not 40.
        assert keyword_score(["seo"], ["seo"], "seo experts") == 100

    def test_mixed_hits_normalized(self) -> None:
        # 30 + 10 of 60
        assert keyword_score(["seo", "audits"], ["seo"], "Technical audits") == 67

    def test_empty_offered_keywords_use_description(self) -> None:
        assert keyword_score(["audits"], [], "technical audits") == 33


class TestRoundHalfUp:
    def test_halves_round_up(self) -> None:
        assert round_half_up(2.5) == 3
        assert round_half_up(98.5) == 99
        assert round_half_up(47.5) == 48

    def test_below_half_rounds_down(self) -> None:
        assert round_half_up(0.49) == 0
        assert round_half_up(66.4) == 66
