"""Prompt templates that read or rewrite a résumé."""

from __future__ import annotations

from resubuild_ai.models.resume import ResumeProfile
from resubuild_ai.prompts.budgets import CHAT_CONTEXT_CHARS, truncate

PLAIN_TEXT_RULE = "Do not include markdown formatting like **bold** or *italic*. Keep it clean plain text."

RESUME_JSON_SHAPE = """\
{
  "personalInfo": {"fullName": "", "jobTitle": "", "email": "", "phone": "", "location": "", "website": "", "summary": ""},
  "experience": [{"id": "", "company": "", "position": "", "startDate": "", "endDate": "", "current": false, "description": ""}],
  "education": [{"id": "", "institution": "", "degree": "", "field": "", "graduationDate": ""}],
  "projects": [{"id": "", "name": "", "description": "", "link": ""}],
  "skills": ["skill"],
  "customSections": [{"id": "", "title": "", "items": [{"id": "", "title": "", "subtitle": "", "date": "", "description": ""}]}],
  "themeColor": "#000000"
}"""

AUDIT_JSON_SHAPE = """\
{
  "score": 0-100,
  "summary": "overall assessment",
  "strengths": ["strength 1", "strength 2"],
  "improvements": ["improvement 1", "improvement 2"]
}"""


def _recent_experience(resume: ResumeProfile) -> str:
    return ", ".join(f"{e.position} at {e.company}" for e in resume.experience)


def summary_prompt(resume: ResumeProfile) -> str:
    info = resume.personal_info
    return f"""Act as a professional career coach. Write a compelling, modern professional summary (max 3-4 sentences) for a resume based on the following profile.
{PLAIN_TEXT_RULE}

Name: {info.full_name}
Target Job Title: {info.job_title}
Key Skills: {', '.join(resume.skills)}
Recent Experience: {_recent_experience(resume)}"""


def improve_description_prompt(description: str, job_title: str) -> str:
    return f"""Act as a professional resume writer. Rewrite the following job description for a "{job_title}" role.
Turn it into 3-5 punchy, result-oriented bullet points starting with strong action verbs.
Do not use markdown formatting (no * bullets, just new lines or plain dashes).

Original Description:
{description}"""


def suggest_skills_prompt(job_title: str, context: str) -> str:
    return f"""Based on the job title "{job_title}" and the following experience context, suggest a list of 8-10 relevant technical and soft skills.
Return the result as a comma-separated list ONLY. No other text.

Context:
{context}"""


def audit_prompt(resume: ResumeProfile) -> str:
    return f"""Act as an experienced recruiter. Audit the following resume for clarity, impact and completeness.
Respond with JSON only, in exactly this shape:
{AUDIT_JSON_SHAPE}
"score" is an integer. "strengths" and "improvements" hold 3-5 short sentences each.

Resume (JSON):
{resume.to_prompt_json()}"""


def deep_audit_prompt(resume: ResumeProfile) -> str:
    return f"""Act as a senior hiring manager and ATS specialist performing a deep resume review.
Evaluate: quantified impact of every experience entry, keyword coverage for the target title "{resume.personal_info.job_title}",
consistency of dates and tense, summary strength, and section ordering. Be specific and cite the entries you mean.
Respond with JSON only, in exactly this shape:
{AUDIT_JSON_SHAPE}
"score" is an integer. "summary" is one paragraph. "strengths" and "improvements" hold 4-8 specific, actionable sentences each.

Resume (JSON):
{resume.to_prompt_json()}"""


def translate_prompt(resume: ResumeProfile, language: str) -> str:
    return f"""Translate every human-readable text value of the following resume into {language}.
Keep names of people, companies, products and technologies as they are. Keep dates, links, emails, phone numbers, ids and "themeColor" unchanged.
Return the ENTIRE resume as JSON only, with exactly the same structure and field names:
{RESUME_JSON_SHAPE}

Resume (JSON):
{resume.to_prompt_json()}"""


def resume_from_prompt_prompt(prompt: str) -> str:
    return f"""Act as an expert resume writer. Create a complete, realistic, professional resume from the following request.
Write result-oriented experience descriptions (one achievement per line, plain dashes, no markdown) and a 3-4 sentence summary.
Leave "id" fields as empty strings. Return JSON only, in exactly this shape:
{RESUME_JSON_SHAPE}

Request:
{prompt}"""


def resume_from_linkedin_prompt(profile: str) -> str:
    return f"""Act as an expert resume writer. Build a complete professional resume from the LinkedIn profile below.
The input may be a profile URL or pasted profile text. Use only information that the profile supports; when the input is only a URL,
infer a plausible profile from the name and handle in it and keep every field conservative.
Write result-oriented experience descriptions (plain dashes, no markdown). Leave "id" fields as empty strings.
Return JSON only, in exactly this shape:
{RESUME_JSON_SHAPE}

LinkedIn profile:
{profile}"""


def update_resume_prompt(resume: ResumeProfile, instruction: str) -> str:
    return f"""You are editing a resume. Apply the instruction below to the current resume.
Return the ENTIRE updated resume, fully reconstructed with the change applied (not a diff), as JSON only, in exactly this shape:
{RESUME_JSON_SHAPE}
Keep existing "id" values unchanged. New list items get an empty "id".

Instruction:
{instruction}

Current resume (JSON):
{truncate(resume.to_prompt_json(), CHAT_CONTEXT_CHARS)}"""


def portfolio_prompt(resume: ResumeProfile) -> str:
    return f"""Act as a senior front-end developer. Build a single-file interactive personal portfolio website for the person described by this resume.
Requirements: one complete HTML document starting with <!DOCTYPE html>; all CSS in a <style> tag and all JavaScript in a <script> tag;
responsive layout; sections for hero, about, experience timeline, projects, skills and contact; use "{resume.theme_color}" as the accent color.
Return raw HTML only. Do not wrap it in markdown code fences and do not add explanations.

Resume (JSON):
{resume.to_prompt_json()}"""


def refine_content_prompt(content: str, instruction: str, content_type: str = "text") -> str:
    if content_type == "html":
        output_rule = (
            "Return the complete refined HTML document only, as raw HTML. "
            "Do not wrap it in markdown code fences and do not add explanations."
        )
    else:
        output_rule = f"Return only the refined text as plain text. {PLAIN_TEXT_RULE}"
    return f"""Act as an expert editor. Refine the content below according to the instruction.
Preserve every fact; change wording, structure or styling only as the instruction asks.
{output_rule}

Instruction:
{instruction}

Content:
{content}"""
