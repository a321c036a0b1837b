"""Deterministic results built from the user's own input.

Used when a completion cannot be read as structured data. Every field of the
returned model is populated so that renderers never meet a missing field,
and nothing here depends on time or randomness: the same request and raw
text always give the same result.
"""

from __future__ import annotations

from career_tools.models.requests import (
    InterviewRequest,
    OptimizationRequest,
    PortfolioRequest,
    ResumeRequest,
)
from career_tools.models.results import (
    EducationEntry,
    ExperienceEntry,
    InterviewResult,
    OptimizationResult,
    PortfolioResult,
    PortfolioSection,
    ProjectEntry,
    ResumeHeader,
    ResumeResult,
)

EXPERIENCE_TITLE = "Professional Experience"
EXPERIENCE_COMPANY = "Various Companies"
EDUCATION_DEGREE = "Education"
EDUCATION_INSTITUTION = "Various Institutions"
PROJECTS_NAME = "Projects"
RESUME_SUMMARY = "Professional with diverse experience and skills."

PORTFOLIO_TITLE = "Professional Portfolio"
PORTFOLIO_SUBTITLE = "Welcome to my digital showcase"
PORTFOLIO_ABOUT = RESUME_SUMMARY


def split_comma_list(text: str) -> list[str]:
    """Split comma-separated text, trimming items and dropping blanks."""
    return [item.strip() for item in text.split(",") if item.strip()]


def resume_fallback(request: ResumeRequest, raw: str) -> ResumeResult:
    """Wrap the submitted free text into the resume shape verbatim."""
    experience: list[ExperienceEntry | str] = []
    if request.experience:
        experience.append(
            ExperienceEntry(
                title=EXPERIENCE_TITLE,
                company=EXPERIENCE_COMPANY,
                duration="",
                description=request.experience,
            )
        )

    education: list[EducationEntry | str] = []
    if request.education:
        education.append(
            EducationEntry(
                degree=EDUCATION_DEGREE,
                institution=EDUCATION_INSTITUTION,
                year="",
                description=request.education,
            )
        )

    projects: list[ProjectEntry | str] = []
    if request.projects:
        projects.append(
            ProjectEntry(name=PROJECTS_NAME, description=request.projects, technologies=[])
        )

    return ResumeResult(
        header=ResumeHeader(
            name=request.full_name,
            email=request.email,
            phone=request.phone,
            location=request.location,
            links=[link for link in (request.linkedin, request.website) if link],
        ),
        summary=request.summary or RESUME_SUMMARY,
        experience=experience,
        education=education,
        skills=split_comma_list(request.skills),
        projects=projects,
    )


def optimization_fallback(request: OptimizationRequest, raw: str) -> OptimizationResult:
    """Show the model's text as an analysis next to the untouched resume."""
    return OptimizationResult(
        ats_score=None,
        missing_keywords=[],
        suggestions=[],
        optimized_version=request.resume_content,
        analysis=raw,
    )


def interview_fallback(request: InterviewRequest, raw: str) -> InterviewResult:
    """Keep the whole text as one opaque block; per-question navigation is off."""
    return InterviewResult(
        technical_questions=[],
        behavioral_questions=[],
        situational_questions=[],
        questions=raw,
    )


def _section(title: str, **fields) -> PortfolioSection:
    values = {"subtitle": "", "description": "", "content": "", "items": [], "email": ""}
    values.update(fields)
    return PortfolioSection(title=title, **values)


def portfolio_fallback(request: PortfolioRequest, raw: str) -> PortfolioResult:
    """Placeholder portfolio sections filled from the submitted details."""
    title = f"{request.full_name} | {PORTFOLIO_TITLE}" if request.full_name else PORTFOLIO_TITLE
    about = request.about or PORTFOLIO_ABOUT
    return PortfolioResult(
        hero=_section(
            title,
            subtitle=request.headline or PORTFOLIO_SUBTITLE,
            description=about,
        ),
        about=_section("About Me", content=about),
        skills=_section("Skills", items=split_comma_list(request.skills)),
        experience=_section("Experience"),
        projects=_section("Projects"),
        contact=_section("Contact", email=request.email),
    )


FALLBACK_BUILDERS = {
    "resume": resume_fallback,
    "optimization": optimization_fallback,
    "interview": interview_fallback,
    "portfolio": portfolio_fallback,
}
