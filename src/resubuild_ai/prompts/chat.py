"""Prompt template for the chat-mode capability router."""

from __future__ import annotations

from resubuild_ai.models.resume import ResumeProfile
from resubuild_ai.prompts.budgets import CHAT_CONTEXT_CHARS, truncate
from resubuild_ai.prompts.resume import RESUME_JSON_SHAPE


def chat_router_prompt(resume: ResumeProfile, message: str) -> str:
    return f"""You are a resume assistant inside a resume builder. Read the user's message and pick exactly one action.

1. If the user asks to edit, add, remove or rewrite anything in the resume, respond with:
{{"action": "update_resume", "text": "short confirmation of what changed", "updatedResume": <the ENTIRE resume>}}
"updatedResume" is the whole resume, fully reconstructed with the change applied (not a diff), in this shape:
{RESUME_JSON_SHAPE}
Keep existing "id" values unchanged. New list items get an empty "id".

2. If the user asks for job recommendations or openings, respond with:
{{"action": "suggest_jobs", "text": "short reply", "searchQuery": {{"query": "job title or keywords", "location": "location or empty string"}}}}

3. Otherwise reply conversationally with:
{{"action": "none", "text": "your reply in plain text"}}

Respond with JSON only.

Current resume (JSON):
{truncate(resume.to_prompt_json(), CHAT_CONTEXT_CHARS)}

User message:
{message}"""
