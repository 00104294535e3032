"""Declarative table of every AI capability and its per-capability policy."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from functools import partial
from typing import Any

from resubuild_ai.clients.llm_client import ResponseMode
from resubuild_ai.generation import normalizer as norm
from resubuild_ai.generation.resolver import Tier
from resubuild_ai.models.analysis import (
    AuditResult,
    CareerPath,
    InterviewQuestion,
    JobMatchAnalysis,
    LinkedInContent,
)
from resubuild_ai.models.builders import CandidateMatch, DesignTheme, FormField, FormSchema
from resubuild_ai.models.classroom import Flashcard, QuizQuestion
from resubuild_ai.prompts import builders, career, chat, classroom, resume

# Fixed reasoning budgets; not user-configurable.
DEEP_REASONING_BUDGET = 32768
CHAT_REASONING_BUDGET = 16384
REFINE_REASONING_BUDGET = 8192


@dataclass(frozen=True)
class Capability:
    """One AI-backed operation.

    ``pin_high_capability`` runs on the configured high-capability model
    regardless of tier and user preference.
    ``fallback`` builds the value returned instead of raising when the
    upstream call fails or its response is malformed; capabilities without
    one propagate those errors.
    """

    name: str
    template: Callable[..., str]
    normalize: Callable[[str], Any]
    response_mode: ResponseMode = "text"
    tier: Tier = "basic"
    pin_high_capability: bool = False
    thinking_budget: int | None = None
    thinking_requires_high_capability: bool = False
    fallback: Callable[[], Any] | None = None


def basic_audit_fallback() -> AuditResult:
    return AuditResult(
        score=75,
        summary=(
            "Your resume has a solid foundation. Add measurable achievements "
            "and tailor it to your target role to stand out."
        ),
        strengths=["Clear structure", "Relevant experience"],
        improvements=[
            "Quantify your achievements with numbers",
            "Tailor your summary to the target role",
        ],
    )


def job_match_fallback() -> JobMatchAnalysis:
    return JobMatchAnalysis(match_score=0, summary="Unable to analyze the job match right now.")


def design_theme_fallback() -> DesignTheme:
    return DesignTheme()


def empty_list() -> list:
    return []


CAPABILITIES: tuple[Capability, ...] = (
    # --- Résumé editing ---
    Capability("generate_summary", resume.summary_prompt, norm.normalize_text),
    Capability("improve_description", resume.improve_description_prompt, norm.normalize_text),
    Capability("suggest_skills", resume.suggest_skills_prompt, norm.normalize_comma_list),
    Capability(
        "audit_resume",
        resume.audit_prompt,
        partial(norm.normalize_model, model=AuditResult),
        response_mode="json",
        fallback=basic_audit_fallback,
    ),
    Capability(
        "deep_audit_resume",
        resume.deep_audit_prompt,
        partial(norm.normalize_model, model=AuditResult),
        response_mode="json",
        tier="complex",
        pin_high_capability=True,
        thinking_budget=DEEP_REASONING_BUDGET,
    ),
    # --- Whole-résumé generation and transformation ---
    Capability(
        "translate_resume", resume.translate_prompt, norm.normalize_resume,
        response_mode="json", tier="complex",
    ),
    Capability(
        "generate_resume_from_prompt", resume.resume_from_prompt_prompt, norm.normalize_resume,
        response_mode="json", tier="complex",
    ),
    Capability(
        "generate_resume_from_linkedin",
        resume.resume_from_linkedin_prompt,
        norm.normalize_resume,
        response_mode="json",
        tier="complex",
        pin_high_capability=True,
        thinking_budget=DEEP_REASONING_BUDGET,
    ),
    Capability(
        "update_resume", resume.update_resume_prompt, norm.normalize_resume,
        response_mode="json", tier="complex",
    ),
    Capability(
        "chat_with_resume",
        chat.chat_router_prompt,
        norm.normalize_chat,
        response_mode="json",
        tier="complex",
        thinking_budget=CHAT_REASONING_BUDGET,
        thinking_requires_high_capability=True,
    ),
    # --- Code generation and refinement ---
    Capability(
        "generate_interactive_portfolio",
        resume.portfolio_prompt,
        norm.normalize_html,
        tier="complex",
        pin_high_capability=True,
    ),
    Capability(
        "refine_content",
        resume.refine_content_prompt,
        norm.normalize_text,
        tier="complex",
        pin_high_capability=True,
        thinking_budget=REFINE_REASONING_BUDGET,
    ),
    Capability(
        "refine_html",
        resume.refine_content_prompt,
        norm.normalize_html,
        tier="complex",
        pin_high_capability=True,
        thinking_budget=REFINE_REASONING_BUDGET,
    ),
    # --- Applications and career ---
    Capability("generate_cover_letter", career.cover_letter_prompt, norm.normalize_text, tier="complex"),
    Capability("generate_cold_email", career.cold_email_prompt, norm.normalize_text),
    Capability("generate_salary_script", career.salary_script_prompt, norm.normalize_text),
    Capability("generate_email_template", career.email_template_prompt, norm.normalize_text),
    Capability(
        "suggest_career_paths",
        career.career_paths_prompt,
        partial(norm.normalize_list, model=CareerPath, keys=("careerPaths", "paths", "items")),
        response_mode="json",
        tier="complex",
        pin_high_capability=True,
        thinking_budget=DEEP_REASONING_BUDGET,
        fallback=empty_list,
    ),
    Capability(
        "generate_linkedin_content",
        career.linkedin_content_prompt,
        partial(norm.normalize_model, model=LinkedInContent),
        response_mode="json",
    ),
    Capability(
        "generate_interview_questions",
        career.interview_questions_prompt,
        partial(norm.normalize_list, model=InterviewQuestion, keys=("questions", "items")),
        response_mode="json",
        fallback=empty_list,
    ),
    Capability(
        "analyze_job_match",
        career.job_match_prompt,
        partial(norm.normalize_model, model=JobMatchAnalysis),
        response_mode="json",
        tier="complex",
        fallback=job_match_fallback,
    ),
    # --- Teacher and student tools ---
    Capability("generate_lesson_plan", classroom.lesson_plan_prompt, norm.normalize_text),
    Capability(
        "generate_quiz",
        classroom.quiz_prompt,
        partial(norm.normalize_list, model=QuizQuestion, keys=("quiz", "questions", "items")),
        response_mode="json",
    ),
    Capability("generate_rubric", classroom.rubric_prompt, norm.normalize_text),
    Capability("generate_study_plan", classroom.study_plan_prompt, norm.normalize_text),
    Capability("generate_essay_outline", classroom.essay_outline_prompt, norm.normalize_text),
    Capability(
        "generate_flashcards",
        classroom.flashcards_prompt,
        partial(norm.normalize_list, model=Flashcard, keys=("flashcards", "cards", "items")),
        response_mode="json",
    ),
    Capability("explain_concept", classroom.explain_concept_prompt, norm.normalize_text),
    # --- Builders ---
    Capability(
        "generate_form_schema",
        builders.form_schema_prompt,
        norm.normalize_form_schema,
        response_mode="json",
    ),
    Capability(
        "suggest_form_fields",
        builders.form_fields_prompt,
        partial(norm.normalize_list, model=FormField, keys=("fields", "items"), with_ids=True),
        response_mode="json",
        fallback=empty_list,
    ),
    Capability(
        "generate_design_theme",
        builders.design_theme_prompt,
        partial(norm.normalize_model, model=DesignTheme),
        response_mode="json",
        fallback=design_theme_fallback,
    ),
    Capability("run_custom_agent", builders.custom_agent_prompt, norm.normalize_text, tier="complex"),
    Capability(
        "find_best_candidates",
        builders.candidates_prompt,
        partial(norm.normalize_list, model=CandidateMatch, keys=("matches", "candidates", "items")),
        response_mode="json",
        fallback=empty_list,
    ),
)

REGISTRY: dict[str, Capability] = {c.name: c for c in CAPABILITIES}


def get_capability(name: str) -> Capability:
    try:
        return REGISTRY[name]
    except KeyError:
        raise KeyError(f"Unknown capability: {name}") from None
