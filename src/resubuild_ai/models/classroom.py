"""Student and teacher tool outputs."""

from __future__ import annotations

from pydantic import Field

from resubuild_ai.models.base import LenientModel


class QuizQuestion(LenientModel):
    question: str
    options: list[str] = Field(default_factory=list)
    answer: str = ""


class Flashcard(LenientModel):
    front: str
    back: str = ""
