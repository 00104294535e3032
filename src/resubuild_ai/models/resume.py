"""Résumé data as the builder application stores it."""

from __future__ import annotations

from pydantic import Field

from resubuild_ai.models.base import LenientModel, new_id


class PersonalInfo(LenientModel):
    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    website: str = ""
    summary: str = ""
    job_title: str = ""


class Experience(LenientModel):
    id: str = ""
    company: str = ""
    position: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    description: str = ""


class Education(LenientModel):
    id: str = ""
    institution: str = ""
    degree: str = ""
    field: str = ""
    graduation_date: str = ""


class Project(LenientModel):
    id: str = ""
    name: str = ""
    description: str = ""
    link: str = ""


class CustomSectionItem(LenientModel):
    id: str = ""
    title: str = ""
    subtitle: str = ""
    date: str = ""
    description: str = ""


class CustomSection(LenientModel):
    id: str = ""
    title: str = ""
    items: list[CustomSectionItem] = Field(default_factory=list)


class ResumeProfile(LenientModel):
    id: str = ""
    name: str = "Untitled Resume"
    last_updated: int = 0
    template_id: str = "modern"
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    experience: list[Experience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    custom_sections: list[CustomSection] = Field(default_factory=list)
    theme_color: str = "#000000"

    @classmethod
    def empty(cls, template_id: str = "modern") -> ResumeProfile:
        return cls(id=new_id(), template_id=template_id)

    def to_prompt_json(self) -> str:
        return self.model_dump_json(by_alias=True)
