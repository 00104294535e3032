"""Prompt templates for the student and teacher tools."""

from __future__ import annotations

from resubuild_ai.prompts.resume import PLAIN_TEXT_RULE


def lesson_plan_prompt(subject: str, grade: str, topic: str) -> str:
    return f"""Act as an experienced {subject} teacher. Write a 45-minute lesson plan on "{topic}" for grade {grade}.
Include: learning objectives, materials, a warm-up, direct instruction, guided practice, independent practice, assessment and homework,
each with a time estimate. {PLAIN_TEXT_RULE}"""


def quiz_prompt(topic: str, grade: str, count: int = 5) -> str:
    return f"""Write a {count}-question multiple-choice quiz on "{topic}" for grade {grade}.
Each question has exactly 4 options and one correct answer; "answer" must repeat the correct option text exactly.
Respond with a JSON array only, in exactly this shape:
[
  {{"question": "the question", "options": ["A", "B", "C", "D"], "answer": "A"}}
]"""


def rubric_prompt(assignment_type: str, grade: str) -> str:
    return f"""Write a grading rubric for a grade {grade} {assignment_type}.
Use 4-5 criteria, each with descriptors for Excellent, Proficient, Developing and Beginning, and a point value.
Lay it out as plain text lines, one criterion per block. {PLAIN_TEXT_RULE}"""


def study_plan_prompt(subject: str, exam_date: str, hours_per_day: str) -> str:
    return f"""Act as a study coach. Build a day-by-day study plan for a {subject} exam on {exam_date}, with {hours_per_day} hours of study per day.
Cover review, practice and rest days, and end with a short exam-day checklist. {PLAIN_TEXT_RULE}"""


def essay_outline_prompt(topic: str) -> str:
    return f"""Write a detailed essay outline on "{topic}".
Include a working thesis, an introduction, 3 body sections with topic sentences and supporting points, and a conclusion.
Use plain numbered lines. {PLAIN_TEXT_RULE}"""


def flashcards_prompt(topic: str, count: int = 10) -> str:
    return f"""Write {count} study flashcards on "{topic}". Keep each front under 15 words and each back under 40 words.
Respond with a JSON array only, in exactly this shape:
[
  {{"front": "question or term", "back": "answer or definition"}}
]"""


def explain_concept_prompt(concept: str, level: str = "high school") -> str:
    return f"""Explain "{concept}" to a {level} student.
Start with a one-sentence definition, then an everyday analogy, then a worked example, then two common misconceptions.
{PLAIN_TEXT_RULE}"""
