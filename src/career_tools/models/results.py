"""Pydantic models for the structured results each tool renders."""

from __future__ import annotations

from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, ConfigDict


class _ResultModel(BaseModel):
    # Models return keys we do not know about; keep them for display.
    model_config = ConfigDict(extra="allow")


# --- Resume ---


class ResumeHeader(_ResultModel):
    name: str | None = None
    email: str | None = None
    phone: str | int | None = None
    location: str | None = None
    links: list[str] | None = None


class ExperienceEntry(_ResultModel):
    title: str | None = None
    company: str | None = None
    duration: str | int | None = None
    description: str | list[str] | None = None


class EducationEntry(_ResultModel):
    degree: str | None = None
    institution: str | None = None
    year: str | int | None = None
    description: str | None = None


class ProjectEntry(_ResultModel):
    name: str | None = None
    description: str | list[str] | None = None
    technologies: list[str] | None = None


class ResumeResult(_ResultModel):
    header: ResumeHeader | None = None
    summary: str | None = None
    experience: list[ExperienceEntry | str] | None = None
    education: list[EducationEntry | str] | None = None
    skills: list[str | dict[str, Any]] | dict[str, list[str] | str] | None = None
    projects: list[ProjectEntry | str] | None = None


# --- Resume optimization ---


class OptimizationResult(_ResultModel):
    ats_score: int | float | None = None
    missing_keywords: list[str] | None = None
    suggestions: list[str] | None = None
    optimized_version: str | None = None
    analysis: str | None = None


# --- Interview ---


class InterviewQuestion(_ResultModel):
    question: str
    guideline: str | None = None


class InterviewResult(_ResultModel):
    technical_questions: list[InterviewQuestion | str] | None = None
    behavioral_questions: list[InterviewQuestion | str] | None = None
    situational_questions: list[InterviewQuestion | str] | None = None
    questions: str | None = None  # opaque text when the list form was not recovered

    @property
    def navigable(self) -> bool:
        """Whether questions can be stepped through one at a time."""
        return self.questions is None


# --- Portfolio ---


class PortfolioSection(_ResultModel):
    title: str | None = None
    subtitle: str | None = None
    description: str | None = None
    content: str | None = None
    items: list[Any] | None = None
    email: str | None = None


class PortfolioResult(_ResultModel):
    hero: PortfolioSection | None = None
    about: PortfolioSection | None = None
    skills: PortfolioSection | None = None
    experience: PortfolioSection | None = None
    projects: PortfolioSection | None = None
    contact: PortfolioSection | None = None


StructuredResult = Union[ResumeResult, OptimizationResult, InterviewResult, PortfolioResult]

RESULT_SCHEMAS: dict[str, type[_ResultModel]] = {
    "resume": ResumeResult,
    "optimization": OptimizationResult,
    "interview": InterviewResult,
    "portfolio": PortfolioResult,
}


class Stage(str, Enum):
    """Which normalization step produced a result."""

    STRICT = "strict"
    EXTRACTED = "extracted"
    FALLBACK = "fallback"
    PASSTHROUGH = "passthrough"


class NormalizedResult(BaseModel):
    """A tool result tagged with the stage that produced it."""

    model_config = ConfigDict(frozen=True)

    kind: str
    stage: Stage
    value: StructuredResult | str
    raw: str

    @property
    def is_text(self) -> bool:
        return isinstance(self.value, str)

    def payload(self) -> dict[str, Any] | str:
        """JSON-ready view of the result.

        Parsed stages omit fields the model did not return; the fallback
        carries every field.
        """
        if isinstance(self.value, str):
            return self.value
        if self.stage is Stage.FALLBACK:
            return self.value.model_dump()
        return self.value.model_dump(exclude_unset=True)
