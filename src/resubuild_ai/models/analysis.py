"""Structured results of résumé and career analysis capabilities."""

from __future__ import annotations

from pydantic import Field

from resubuild_ai.models.base import LenientModel, Score


class AuditResult(LenientModel):
    """Shared by the basic and the deep audit."""

    score: Score = 0
    summary: str = ""
    strengths: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)


class CareerPath(LenientModel):
    title: str
    description: str = ""
    match_score: Score = 0
    required_skills: list[str] = Field(default_factory=list)
    salary_range: str = ""
    next_steps: list[str] = Field(default_factory=list)


class LinkedInContent(LenientModel):
    headline: str = ""
    about: str = ""
    skills: list[str] = Field(default_factory=list)
    post_ideas: list[str] = Field(default_factory=list)


class InterviewQuestion(LenientModel):
    question: str
    category: str = "general"
    tip: str = ""


class JobMatchAnalysis(LenientModel):
    match_score: Score = 0
    summary: str = ""
    matching_skills: list[str] = Field(default_factory=list)
    missing_skills: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
