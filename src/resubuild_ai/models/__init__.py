"""Data models for the generation layer."""

from resubuild_ai.models.analysis import (
    AuditResult,
    CareerPath,
    InterviewQuestion,
    JobMatchAnalysis,
    LinkedInContent,
)
from resubuild_ai.models.builders import (
    AgentNode,
    CandidateMatch,
    CustomAgent,
    CustomStyle,
    DesignTheme,
    FormField,
    FormSchema,
)
from resubuild_ai.models.chat import ChatReply, ChatRouterResult, JobSuggestion, ResumeUpdate
from resubuild_ai.models.classroom import Flashcard, QuizQuestion
from resubuild_ai.models.jobs import JobPost, JobSearchQuery
from resubuild_ai.models.resume import (
    CustomSection,
    CustomSectionItem,
    Education,
    Experience,
    PersonalInfo,
    Project,
    ResumeProfile,
)

__all__ = [
    "AgentNode",
    "AuditResult",
    "CandidateMatch",
    "CareerPath",
    "ChatReply",
    "ChatRouterResult",
    "CustomAgent",
    "CustomSection",
    "CustomSectionItem",
    "CustomStyle",
    "DesignTheme",
    "Education",
    "Experience",
    "Flashcard",
    "FormField",
    "FormSchema",
    "InterviewQuestion",
    "JobMatchAnalysis",
    "JobPost",
    "JobSearchQuery",
    "JobSuggestion",
    "LinkedInContent",
    "PersonalInfo",
    "Project",
    "QuizQuestion",
    "ResumeProfile",
    "ResumeUpdate",
]
