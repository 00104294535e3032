"""Job listings and job-search queries."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ValidationInfo, field_validator

from resubuild_ai.models.base import LenientModel


class JobSearchQuery(LenientModel):
    query: str = ""
    location: str = ""


class JobPost(BaseModel):
    """One listing from the Remotive API (snake_case on the wire)."""

    id: int
    url: str = ""
    title: str = ""
    company_name: str = ""
    company_logo: str = ""
    category: str = ""
    job_type: str = ""
    publication_date: str = ""
    candidate_required_location: str = ""
    salary: str = ""
    description: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _null_to_empty(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.field_name != "id":
            return ""
        return value
