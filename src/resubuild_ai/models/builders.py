"""Form, design-theme, custom-agent and candidate-search shapes."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from resubuild_ai.models.base import LenientModel, Score

FieldType = Literal["text", "textarea", "email", "number", "date", "select", "checkbox"]


class FormField(LenientModel):
    id: str = ""
    type: FieldType = "text"
    label: str
    required: bool = False
    placeholder: str = ""
    options: list[str] = Field(default_factory=list)


class FormSchema(LenientModel):
    title: str = "Untitled Form"
    description: str = ""
    theme_color: str = "#000000"
    fields: list[FormField] = Field(default_factory=list)


class CustomStyle(LenientModel):
    font_family: str = "Inter, sans-serif"
    heading_color: str = "#111827"
    text_color: str = "#374151"
    background_color: str = "#ffffff"
    accent_color: str = "#000000"
    layout: str = "classic"


class DesignTheme(LenientModel):
    name: str = "Classic"
    theme_color: str = "#000000"
    custom_style: CustomStyle = Field(default_factory=CustomStyle)


NodeType = Literal["source", "persona", "task"]


class AgentNode(LenientModel):
    id: str = ""
    type: NodeType
    title: str = ""
    config: dict[str, str] = Field(default_factory=dict)


class CustomAgent(LenientModel):
    id: str = ""
    name: str = "New Agent"
    description: str = ""
    nodes: list[AgentNode] = Field(default_factory=list)


class CandidateMatch(LenientModel):
    candidate_id: str
    score: Score = 0
    reason: str = ""
