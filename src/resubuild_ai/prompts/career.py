"""Prompt templates for job applications and career planning."""

from __future__ import annotations

from resubuild_ai.models.resume import ResumeProfile
from resubuild_ai.prompts.budgets import (
    JOB_DESCRIPTION_CHARS,
    RESUME_CONTEXT_CHARS,
    SHORT_JOB_DESCRIPTION_CHARS,
    truncate,
)
from resubuild_ai.prompts.resume import PLAIN_TEXT_RULE


def _resume_context(resume: ResumeProfile) -> str:
    return truncate(resume.to_prompt_json(), RESUME_CONTEXT_CHARS)


def cover_letter_prompt(resume: ResumeProfile, job_description: str, company: str = "") -> str:
    target = f" at {company}" if company else ""
    info = resume.personal_info
    return f"""Act as a professional career coach. Write a tailored cover letter for {info.full_name or 'the candidate'}{target}.
Use 3-4 short paragraphs: a specific opening, two paragraphs connecting real experience to the role, and a confident close.
Use only facts from the candidate profile. {PLAIN_TEXT_RULE}

Candidate: {info.full_name}, {info.job_title}
Key Skills: {', '.join(resume.skills)}
Experience: {', '.join(f'{e.position} at {e.company}' for e in resume.experience)}

Job Description:
{truncate(job_description, JOB_DESCRIPTION_CHARS)}"""


def cold_email_prompt(resume: ResumeProfile, company: str, role: str) -> str:
    return f"""Write a short cold outreach email (under 150 words) from the candidate below to a hiring manager at {company} about the {role} role.
Include a subject line on the first line as "Subject: ...". Be specific, confident and polite, and end with a clear call to action.
{PLAIN_TEXT_RULE}

Candidate profile (JSON):
{_resume_context(resume)}"""


def salary_script_prompt(resume: ResumeProfile, current_offer: str, target: str) -> str:
    return f"""Act as a salary negotiation coach. Write a word-for-word negotiation script the candidate can use on a call.
The current offer is {current_offer} and the target is {target}. Ground the ask in the candidate's experience and market value,
include responses to two likely pushbacks, and keep the tone collaborative. {PLAIN_TEXT_RULE}

Candidate profile (JSON):
{_resume_context(resume)}"""


def email_template_prompt(purpose: str, details: str = "", tone: str = "professional") -> str:
    return f"""Write a reusable {tone} email template for this purpose: {purpose}.
Put a subject line on the first line as "Subject: ...". Use [square brackets] for placeholders the sender fills in.
{PLAIN_TEXT_RULE}

Details:
{details}"""


def career_paths_prompt(resume: ResumeProfile) -> str:
    return f"""Act as a career strategist. Based on the resume below, suggest 3-5 realistic next career paths.
Respond with a JSON array only, in exactly this shape:
[
  {{
    "title": "role title",
    "description": "why this path fits",
    "matchScore": 0-100,
    "requiredSkills": ["skill to acquire"],
    "salaryRange": "e.g. $90k-$120k",
    "nextSteps": ["concrete step"]
  }}
]

Resume (JSON):
{resume.to_prompt_json()}"""


def linkedin_content_prompt(resume: ResumeProfile) -> str:
    return f"""Act as a LinkedIn branding expert. Write LinkedIn profile content for the person below.
Respond with JSON only, in exactly this shape:
{{
  "headline": "max 220 characters",
  "about": "3 short paragraphs, plain text",
  "skills": ["top skill"],
  "postIdeas": ["one-sentence post idea"]
}}

Resume (JSON):
{resume.to_prompt_json()}"""


def interview_questions_prompt(job_title: str, job_description: str = "", resume: ResumeProfile | None = None) -> str:
    candidate = ""
    if resume is not None:
        candidate = f"\nCandidate profile (JSON):\n{_resume_context(resume)}\n"
    return f"""Act as an interviewer hiring for "{job_title}". Write 8 likely interview questions mixing behavioral, technical and situational ones.
Respond with a JSON array only, in exactly this shape:
[
  {{"question": "the question", "category": "behavioral|technical|situational", "tip": "one sentence on how to answer"}}
]

Job Description:
{truncate(job_description, SHORT_JOB_DESCRIPTION_CHARS)}
{candidate}"""


def job_match_prompt(resume: ResumeProfile, job_description: str) -> str:
    return f"""Act as a recruiter. Compare the candidate with the job description and assess the fit.
Respond with JSON only, in exactly this shape:
{{
  "matchScore": 0-100,
  "summary": "2-3 sentence assessment",
  "matchingSkills": ["skill"],
  "missingSkills": ["skill"],
  "recommendations": ["concrete resume change"]
}}

Job Description:
{truncate(job_description, JOB_DESCRIPTION_CHARS)}

Candidate profile (JSON):
{_resume_context(resume)}"""
