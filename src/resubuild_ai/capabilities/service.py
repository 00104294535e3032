"""Typed entry points for every AI capability."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Literal

from resubuild_ai.capabilities.runner import CapabilityRunner
from resubuild_ai.clients.llm_client import LLMClient
from resubuild_ai.config import AppConfig
from resubuild_ai.generation.invoker import GenerationInvoker
from resubuild_ai.generation.resolver import ModelResolver
from resubuild_ai.models.analysis import (
    AuditResult,
    CareerPath,
    InterviewQuestion,
    JobMatchAnalysis,
    LinkedInContent,
)
from resubuild_ai.models.base import new_id
from resubuild_ai.models.builders import CandidateMatch, CustomAgent, DesignTheme, FormField, FormSchema
from resubuild_ai.models.chat import ChatRouterResult, ResumeUpdate
from resubuild_ai.models.classroom import Flashcard, QuizQuestion
from resubuild_ai.models.resume import ResumeProfile
from resubuild_ai.settings.preferences import PreferenceProvider


def _keep_identity(updated: ResumeProfile, original: ResumeProfile) -> ResumeProfile:
    """Carry the original résumé id and dashboard fields over when the model dropped them."""
    if not updated.id:
        updated.id = original.id
    if "name" not in updated.model_fields_set:
        updated.name = original.name
    if "template_id" not in updated.model_fields_set:
        updated.template_id = original.template_id
    return updated


class ResumeAIService:
    """One async method per capability.

    Each call is independent: nothing is cached and no state is shared
    between calls apart from the LLM client's token log.
    """

    def __init__(self, runner: CapabilityRunner):
        self.runner = runner

    @classmethod
    def from_config(cls, config: AppConfig, preferences: PreferenceProvider) -> ResumeAIService:
        resolver = ModelResolver(
            preferences,
            default_model=config.llm.default_model,
            high_capability_model=config.llm.high_capability_model,
        )
        llm = LLMClient(timeout=config.llm.timeout)
        return cls(CapabilityRunner(GenerationInvoker(resolver, llm)))

    @property
    def llm(self) -> LLMClient:
        return self.runner.invoker.llm

    # --- Résumé editing ---

    async def generate_summary(self, resume: ResumeProfile) -> str:
        return await self.runner.run("generate_summary", resume)

    async def improve_description(self, description: str, job_title: str) -> str:
        return await self.runner.run("improve_description", description, job_title)

    async def suggest_skills(self, job_title: str, context: str) -> list[str]:
        return await self.runner.run("suggest_skills", job_title, context)

    async def audit_resume(self, resume: ResumeProfile) -> AuditResult:
        return await self.runner.run("audit_resume", resume)

    async def deep_audit_resume(self, resume: ResumeProfile) -> AuditResult:
        return await self.runner.run("deep_audit_resume", resume)

    # --- Whole-résumé generation and transformation ---

    async def generate_resume_from_prompt(self, prompt: str) -> ResumeProfile:
        result = await self.runner.run("generate_resume_from_prompt", prompt)
        if not result.id:
            result.id = new_id()
        return result

    async def generate_resume_from_linkedin(self, profile: str) -> ResumeProfile:
        result = await self.runner.run("generate_resume_from_linkedin", profile)
        if not result.id:
            result.id = new_id()
        return result

    async def update_resume(self, resume: ResumeProfile, instruction: str) -> ResumeProfile:
        result = await self.runner.run("update_resume", resume, instruction)
        return _keep_identity(result, resume)

    async def translate_resume(self, resume: ResumeProfile, language: str) -> ResumeProfile:
        result = await self.runner.run("translate_resume", resume, language)
        return _keep_identity(result, resume)

    async def chat_with_resume(self, resume: ResumeProfile, message: str) -> ChatRouterResult:
        result = await self.runner.run("chat_with_resume", resume, message)
        if isinstance(result, ResumeUpdate):
            _keep_identity(result.updated_resume, resume)
        return result

    # --- Code generation and refinement ---

    async def generate_interactive_portfolio(self, resume: ResumeProfile) -> str:
        return await self.runner.run("generate_interactive_portfolio", resume)

    async def refine_content(
        self,
        content: str,
        instruction: str,
        content_type: Literal["text", "html"] = "text",
    ) -> str:
        name = "refine_html" if content_type == "html" else "refine_content"
        return await self.runner.run(name, content, instruction, content_type)

    # --- Applications and career ---

    async def generate_cover_letter(self, resume: ResumeProfile, job_description: str, company: str = "") -> str:
        return await self.runner.run("generate_cover_letter", resume, job_description, company)

    async def generate_cold_email(self, resume: ResumeProfile, company: str, role: str) -> str:
        return await self.runner.run("generate_cold_email", resume, company, role)

    async def generate_salary_script(self, resume: ResumeProfile, current_offer: str, target: str) -> str:
        return await self.runner.run("generate_salary_script", resume, current_offer, target)

    async def generate_email_template(self, purpose: str, details: str = "", tone: str = "professional") -> str:
        return await self.runner.run("generate_email_template", purpose, details, tone)

    async def suggest_career_paths(self, resume: ResumeProfile) -> list[CareerPath]:
        return await self.runner.run("suggest_career_paths", resume)

    async def generate_linkedin_content(self, resume: ResumeProfile) -> LinkedInContent:
        return await self.runner.run("generate_linkedin_content", resume)

    async def generate_interview_questions(
        self,
        job_title: str,
        job_description: str = "",
        resume: ResumeProfile | None = None,
    ) -> list[InterviewQuestion]:
        return await self.runner.run("generate_interview_questions", job_title, job_description, resume)

    async def analyze_job_match(self, resume: ResumeProfile, job_description: str) -> JobMatchAnalysis:
        return await self.runner.run("analyze_job_match", resume, job_description)

    # --- Teacher and student tools ---

    async def generate_lesson_plan(self, subject: str, grade: str, topic: str) -> str:
        return await self.runner.run("generate_lesson_plan", subject, grade, topic)

    async def generate_quiz(self, topic: str, grade: str, count: int = 5) -> list[QuizQuestion]:
        return await self.runner.run("generate_quiz", topic, grade, count)

    async def generate_rubric(self, assignment_type: str, grade: str) -> str:
        return await self.runner.run("generate_rubric", assignment_type, grade)

    async def generate_study_plan(self, subject: str, exam_date: str, hours_per_day: str) -> str:
        return await self.runner.run("generate_study_plan", subject, exam_date, hours_per_day)

    async def generate_essay_outline(self, topic: str) -> str:
        return await self.runner.run("generate_essay_outline", topic)

    async def generate_flashcards(self, topic: str, count: int = 10) -> list[Flashcard]:
        return await self.runner.run("generate_flashcards", topic, count)

    async def explain_concept(self, concept: str, level: str = "high school") -> str:
        return await self.runner.run("explain_concept", concept, level)

    # --- Builders ---

    async def generate_form_schema(self, description: str) -> FormSchema:
        return await self.runner.run("generate_form_schema", description)

    async def suggest_form_fields(
        self,
        title: str,
        description: str = "",
        existing_labels: list[str] | None = None,
    ) -> list[FormField]:
        return await self.runner.run("suggest_form_fields", title, description, existing_labels)

    async def generate_design_theme(self, description: str) -> DesignTheme:
        return await self.runner.run("generate_design_theme", description)

    async def run_custom_agent(
        self,
        agent: CustomAgent,
        user_input: str,
        resume: ResumeProfile | None = None,
    ) -> str:
        return await self.runner.run("run_custom_agent", agent, user_input, resume)

    async def find_best_candidates(
        self,
        requirements: str,
        candidates: Mapping[str, ResumeProfile],
    ) -> list[CandidateMatch]:
        """Rank candidates; matches naming an id outside ``candidates`` are dropped."""
        matches = await self.runner.run("find_best_candidates", requirements, candidates)
        return [m for m in matches if m.candidate_id in candidates]
