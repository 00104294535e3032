"""Character budgets for free text interpolated into prompts."""

from __future__ import annotations

SHORT_JOB_DESCRIPTION_CHARS = 500
JOB_DESCRIPTION_CHARS = 1000
RESUME_CONTEXT_CHARS = 1000
CHAT_CONTEXT_CHARS = 8000
CANDIDATE_SUMMARY_CHARS = 500


def truncate(text: str, budget: int) -> str:
    """Keep the first ``budget`` characters."""
    return (text or "")[:budget]
