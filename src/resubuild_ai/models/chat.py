"""Typed result of the chat-mode capability router."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import Field

from resubuild_ai.models.base import LenientModel
from resubuild_ai.models.jobs import JobSearchQuery
from resubuild_ai.models.resume import ResumeProfile


class ResumeUpdate(LenientModel):
    """The user asked for an edit; ``updated_resume`` is the whole résumé, not a diff."""

    action: Literal["update_resume"] = "update_resume"
    text: str = ""
    updated_resume: ResumeProfile


class JobSuggestion(LenientModel):
    """The user asked for jobs; ``search_query`` goes to the job-search client."""

    action: Literal["suggest_jobs"] = "suggest_jobs"
    text: str = ""
    search_query: JobSearchQuery


class ChatReply(LenientModel):
    action: Literal["none"] = "none"
    text: str = ""


ChatRouterResult = Annotated[
    Union[ResumeUpdate, JobSuggestion, ChatReply],
    Field(discriminator="action"),
]
