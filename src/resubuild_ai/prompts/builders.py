"""Prompt templates for the form builder, design pilot, custom agents and candidate search."""

from __future__ import annotations

from collections.abc import Mapping

from resubuild_ai.models.builders import CustomAgent
from resubuild_ai.models.resume import ResumeProfile
from resubuild_ai.prompts.budgets import CANDIDATE_SUMMARY_CHARS, CHAT_CONTEXT_CHARS, truncate
from resubuild_ai.prompts.resume import PLAIN_TEXT_RULE

FIELD_JSON_SHAPE = (
    '{"id": "", "type": "text|textarea|email|number|date|select|checkbox", '
    '"label": "question", "required": true, "placeholder": "", "options": []}'
)


def form_schema_prompt(description: str) -> str:
    return f"""Act as a form designer. Design a form for the request below.
Use 4-10 fields. "options" is only filled for "select" fields. Leave "id" as an empty string.
Respond with JSON only, in exactly this shape:
{{
  "title": "form title",
  "description": "one sentence shown under the title",
  "themeColor": "#hex",
  "fields": [{FIELD_JSON_SHAPE}]
}}

Request:
{description}"""


def form_fields_prompt(title: str, description: str = "", existing_labels: list[str] | None = None) -> str:
    existing = ", ".join(existing_labels or []) or "none"
    return f"""Suggest 3-5 additional questions for the form "{title}" ({description}).
Do not repeat any existing question: {existing}. Leave "id" as an empty string.
Respond with a JSON array only, in exactly this shape:
[{FIELD_JSON_SHAPE}]"""


def design_theme_prompt(description: str) -> str:
    return f"""Act as a resume designer. Create a visual theme for a resume from this description: "{description}".
Colors are hex strings; "fontFamily" is a CSS font stack; "layout" is one of classic, modern, minimal, creative.
Make sure text stays readable against the background.
Respond with JSON only, in exactly this shape:
{{
  "name": "theme name",
  "themeColor": "#hex",
  "customStyle": {{
    "fontFamily": "Inter, sans-serif",
    "headingColor": "#hex",
    "textColor": "#hex",
    "backgroundColor": "#hex",
    "accentColor": "#hex",
    "layout": "classic"
  }}
}}"""


def custom_agent_prompt(agent: CustomAgent, user_input: str, resume: ResumeProfile | None = None) -> str:
    """Chain the agent's nodes, in order, into one prompt."""
    parts: list[str] = []
    for node in agent.nodes:
        if node.type == "persona":
            role = node.config.get("personaRole") or node.title
            tone = node.config.get("tone")
            parts.append(f"You are {role}." + (f" Tone: {tone}." if tone else ""))
        elif node.type == "task":
            instructions = node.config.get("prompt")
            if instructions:
                parts.append(f"Task ({node.title}): {instructions}")
        elif node.type == "source" and resume is not None:
            parts.append(
                f"Context from the user's resume (JSON):\n{truncate(resume.to_prompt_json(), CHAT_CONTEXT_CHARS)}"
            )
    parts.append(f"User input:\n{user_input}")
    parts.append(f"Respond in plain text. {PLAIN_TEXT_RULE}")
    return "\n\n".join(parts)


def candidates_prompt(requirements: str, candidates: Mapping[str, ResumeProfile]) -> str:
    lines = []
    for candidate_id, resume in candidates.items():
        info = resume.personal_info
        summary = truncate(
            f"{info.job_title}. {info.summary} Skills: {', '.join(resume.skills)}. "
            f"Experience: {', '.join(f'{e.position} at {e.company}' for e in resume.experience)}",
            CANDIDATE_SUMMARY_CHARS,
        )
        lines.append(f"- candidateId: {candidate_id} | {info.full_name} | {summary}")
    pool = "\n".join(lines) or "(no candidates)"
    return f"""Act as a technical recruiter. Pick the candidates that best fit the employer's requirements, best first, at most 5.
Only use candidateId values from the list. Return an empty array when nobody fits.
Respond with a JSON array only, in exactly this shape:
[
  {{"candidateId": "id from the list", "score": 0-100, "reason": "one sentence"}}
]

Requirements:
{requirements}

Candidates:
{pool}"""
