"""Prompt templates for each career tool."""

from __future__ import annotations

import json
from dataclasses import dataclass

from career_tools.config import AppConfig
from career_tools.models.requests import (
    CareerCoachingRequest,
    CoverLetterRequest,
    InterviewRequest,
    OptimizationRequest,
    PortfolioRequest,
    ResumeRequest,
    TaskRequest,
)

RESUME_SYSTEM = "You are an expert resume writer. Generate ATS-friendly resumes in JSON format."

COVER_LETTER_SYSTEM = (
    "You are an expert career consultant and writer specializing in creating "
    "compelling cover letters."
)

OPTIMIZATION_SYSTEM = (
    "You are an ATS optimization expert. Analyze resumes and provide detailed "
    "improvement suggestions."
)

INTERVIEW_SYSTEM = "You are an expert interviewer and talent acquisition specialist."

CAREER_COACH_SYSTEM = (
    "You are an expert career coach with deep industry knowledge across multiple fields."
)

PORTFOLIO_SYSTEM = (
    "You are a professional web developer and designer. Create a modern, professional "
    "portfolio website structure with sections for about, skills, experience, projects, "
    "and contact. Return the content as a JSON object with sections and their content."
)

RESUME_SCHEMA = """\
{
  "header": {"name": "", "email": "", "phone": "", "location": "", "links": []},
  "summary": "",
  "experience": [{"title": "", "company": "", "duration": "", "description": ""}],
  "education": [{"degree": "", "institution": "", "year": ""}],
  "skills": [""],
  "projects": [{"name": "", "description": "", "technologies": []}]
}"""

OPTIMIZATION_SCHEMA = """\
{
  "ats_score": 0,
  "missing_keywords": [""],
  "suggestions": [""],
  "optimized_version": ""
}"""

INTERVIEW_SCHEMA = """\
{
  "technical_questions": [{"question": "", "guideline": ""}],
  "behavioral_questions": [{"question": "", "guideline": ""}],
  "situational_questions": [{"question": "", "guideline": ""}]
}"""

PORTFOLIO_SCHEMA = """\
{
  "hero": {"title": "", "subtitle": "", "description": ""},
  "about": {"title": "About Me", "content": ""},
  "skills": {"title": "Skills", "items": [""]},
  "experience": {"title": "Experience", "items": []},
  "projects": {"title": "Projects", "items": []},
  "contact": {"title": "Contact", "email": ""}
}"""


@dataclass(frozen=True)
class Prompt:
    """Everything needed for one chat-completion call."""

    system: str
    user: str
    model: str
    max_tokens: int
    temperature: float

    def messages(self) -> list[dict[str, str]]:
        return [
            {"role": "system", "content": self.system},
            {"role": "user", "content": self.user},
        ]


def _resume_prompt(request: ResumeRequest) -> tuple[str, str]:
    user_info = request.model_dump(exclude={"kind"})
    user = f"""Generate a professional ATS-friendly resume in JSON format based on this information:

User Information: {json.dumps(user_info, ensure_ascii=False)}

Return a JSON object with sections: header, summary, experience, education, skills, projects. \
Make it comprehensive and professional. Use exactly this structure:
{RESUME_SCHEMA}

Respond with JSON only."""
    return RESUME_SYSTEM, user


def _cover_letter_prompt(request: CoverLetterRequest) -> tuple[str, str]:
    user = f"""Write a compelling cover letter for the following job description. Use a {request.tone} tone.

Company: {request.company_name}
Position: {request.job_title}

Job Description: {request.job_description}

User Profile:
- Name: {request.full_name or 'Professional'}
- Skills: {request.user_skills or 'Various technical and soft skills'}
- Experience: {request.user_experience or 'Relevant industry experience'}

Make the cover letter personalized, highlighting relevant skills and experience. \
Keep it concise and professional."""
    return COVER_LETTER_SYSTEM, user


def _optimization_prompt(request: OptimizationRequest) -> tuple[str, str]:
    user = f"""Analyze this resume against the job description and provide optimization suggestions:

Resume: {request.resume_content}

Job Description: {request.job_description}

Provide:
1. ATS Score (0-100)
2. Missing keywords
3. Specific improvement suggestions
4. Optimized version

Return in JSON format with these sections:
{OPTIMIZATION_SCHEMA}"""
    return OPTIMIZATION_SYSTEM, user


def _interview_prompt(request: InterviewRequest) -> tuple[str, str]:
    user = f"""Generate interview questions for a {request.level}-level {request.job_role} position. Include:

1. 5 technical questions
2. 5 behavioral questions
3. 3 situational questions

Return in JSON format with question categories and expected answer guidelines:
{INTERVIEW_SCHEMA}"""
    return INTERVIEW_SYSTEM, user


def _career_coaching_prompt(request: CareerCoachingRequest) -> tuple[str, str]:
    profile = request.model_dump(exclude={"kind"})
    user = f"""Analyze this user's career profile and provide personalized career coaching advice:

Profile: {json.dumps(profile, ensure_ascii=False)}

Provide:
1. Career path analysis
2. Skill gap identification
3. Growth recommendations
4. Industry insights
5. Next steps

Make it actionable and specific."""
    return CAREER_COACH_SYSTEM, user


def _portfolio_prompt(request: PortfolioRequest) -> tuple[str, str]:
    details = []
    if request.full_name:
        details.append(f"Name: {request.full_name}")
    if request.headline:
        details.append(f"Headline: {request.headline}")
    if request.about:
        details.append(f"About: {request.about}")
    if request.skills:
        details.append(f"Skills: {request.skills}")
    if request.resume_text:
        details.append(f"Resume:\n{request.resume_text}")
    owner = "\n".join(details) or "No additional details provided."

    user = f"""Create a professional portfolio website structure for subdomain: {request.subdomain}. \
Include modern sections like hero, about, skills, experience, projects, and contact. \
Make it professional and engaging.

Owner details:
{owner}

Return a JSON object with this structure:
{PORTFOLIO_SCHEMA}"""
    return PORTFOLIO_SYSTEM, user


_BUILDERS = {
    "resume": _resume_prompt,
    "cover_letter": _cover_letter_prompt,
    "optimization": _optimization_prompt,
    "interview": _interview_prompt,
    "career_coaching": _career_coaching_prompt,
    "portfolio": _portfolio_prompt,
}


def build_prompt(request: TaskRequest, config: AppConfig) -> Prompt:
    """Compose the system/user turns and sampling parameters for a request."""
    system, user = _BUILDERS[request.kind](request)
    task = config.task(request.kind)
    return Prompt(
        system=system,
        user=user,
        model=config.llm.model,
        max_tokens=task.max_tokens,
        temperature=task.temperature,
    )
