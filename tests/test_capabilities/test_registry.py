"""Tests for the capability policy table."""

import pytest

from resubuild_ai.capabilities.registry import (
    CAPABILITIES,
    CHAT_REASONING_BUDGET,
    DEEP_REASONING_BUDGET,
    REFINE_REASONING_BUDGET,
    REGISTRY,
    basic_audit_fallback,
    design_theme_fallback,
    get_capability,
    job_match_fallback,
)

BASIC = {
    "generate_summary", "improve_description", "suggest_skills", "audit_resume",
    "generate_cold_email", "generate_salary_script", "generate_email_template",
    "generate_linkedin_content", "generate_interview_questions",
    "generate_lesson_plan", "generate_quiz", "generate_rubric", "generate_study_plan",
    "generate_essay_outline", "generate_flashcards", "explain_concept",
    "generate_form_schema", "suggest_form_fields", "generate_design_theme",
    "find_best_candidates",
}
PINNED = {
    "deep_audit_resume", "suggest_career_paths", "generate_resume_from_linkedin",
    "generate_interactive_portfolio", "refine_content", "refine_html",
}
WITH_FALLBACK = {
    "audit_resume", "suggest_career_paths", "generate_interview_questions",
    "analyze_job_match", "suggest_form_fields", "generate_design_theme",
    "find_best_candidates",
}


class TestRegistry:
    def test_names_unique(self):
        assert len(REGISTRY) == len(CAPABILITIES)

    def test_tiers(self):
        for cap in CAPABILITIES:
            expected = "basic" if cap.name in BASIC else "complex"
            assert cap.tier == expected, cap.name

    def test_pins(self):
        pinned = {c.name for c in CAPABILITIES if c.pin_high_capability}
        assert pinned == PINNED

    def test_fallbacks(self):
        assert {c.name for c in CAPABILITIES if c.fallback} == WITH_FALLBACK

    @pytest.mark.parametrize(
        "name, budget",
        [
            ("deep_audit_resume", DEEP_REASONING_BUDGET),
            ("suggest_career_paths", DEEP_REASONING_BUDGET),
            ("generate_resume_from_linkedin", DEEP_REASONING_BUDGET),
            ("chat_with_resume", CHAT_REASONING_BUDGET),
            ("refine_content", REFINE_REASONING_BUDGET),
            ("refine_html", REFINE_REASONING_BUDGET),
        ],
    )
    def test_reasoning_budgets(self, name, budget):
        assert REGISTRY[name].thinking_budget == budget

    def test_budget_values(self):
        assert (DEEP_REASONING_BUDGET, CHAT_REASONING_BUDGET, REFINE_REASONING_BUDGET) == (32768, 16384, 8192)

    def test_only_chat_budget_requires_high_capability(self):
        flagged = {c.name for c in CAPABILITIES if c.thinking_requires_high_capability}
        assert flagged == {"chat_with_resume"}

    def test_get_capability_unknown(self):
        with pytest.raises(KeyError, match="Unknown capability"):
            get_capability("make_coffee")


class TestFallbackValues:
    def test_basic_audit(self):
        audit = basic_audit_fallback()
        assert audit.score == 75
        assert audit.strengths == ["Clear structure", "Relevant experience"]
        assert len(audit.improvements) == 2

    def test_fresh_value_each_call(self):
        first = basic_audit_fallback()
        first.strengths.append("mutated")
        assert "mutated" not in basic_audit_fallback().strengths

    def test_job_match(self):
        result = job_match_fallback()
        assert result.match_score == 0
        assert result.summary == "Unable to analyze the job match right now."
        assert result.matching_skills == []

    def test_design_theme(self):
        theme = design_theme_fallback()
        assert theme.theme_color == "#000000"
        assert theme.custom_style.font_family == "Inter, sans-serif"
        assert theme.custom_style.layout == "classic"
