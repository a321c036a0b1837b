"""Pydantic models for the per-tool user submissions."""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

RequiredText = Annotated[str, Field(min_length=1)]


class _BaseRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)


class ResumeRequest(_BaseRequest):
    kind: Literal["resume"] = "resume"
    full_name: RequiredText
    email: RequiredText
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    website: str = ""
    summary: str = ""
    experience: str = ""
    education: str = ""
    skills: str = ""  # comma-separated
    projects: str = ""


class CoverLetterRequest(_BaseRequest):
    kind: Literal["cover_letter"] = "cover_letter"
    company_name: RequiredText
    job_title: RequiredText
    job_description: RequiredText
    tone: str = "professional"
    full_name: str = ""
    user_skills: str = ""
    user_experience: str = ""


class OptimizationRequest(_BaseRequest):
    kind: Literal["optimization"] = "optimization"
    resume_content: RequiredText
    job_description: RequiredText


class InterviewRequest(_BaseRequest):
    kind: Literal["interview"] = "interview"
    job_role: RequiredText
    level: Literal["entry", "mid", "senior", "lead"] = "mid"


class CareerCoachingRequest(_BaseRequest):
    kind: Literal["career_coaching"] = "career_coaching"
    current_role: RequiredText
    full_name: str = ""
    industry: str = ""
    skills: str = ""
    experience: str = ""
    goals: str = ""


class PortfolioRequest(_BaseRequest):
    kind: Literal["portfolio"] = "portfolio"
    subdomain: RequiredText
    full_name: str = ""
    email: str = ""
    headline: str = ""
    about: str = ""
    skills: str = ""  # comma-separated
    resume_text: str = ""

    @field_validator("subdomain")
    @classmethod
    def _check_subdomain(cls, value: str) -> str:
        value = value.lower()
        if not all(c.isascii() and (c.isalnum() or c == "-") for c in value):
            raise ValueError("subdomain may only contain letters, digits and hyphens")
        if value.startswith("-") or value.endswith("-"):
            raise ValueError("subdomain cannot start or end with a hyphen")
        return value


TaskRequest = Annotated[
    Union[
        ResumeRequest,
        CoverLetterRequest,
        OptimizationRequest,
        InterviewRequest,
        CareerCoachingRequest,
        PortfolioRequest,
    ],
    Field(discriminator="kind"),
]

_request_adapter: TypeAdapter[TaskRequest] = TypeAdapter(TaskRequest)

FREE_TEXT_KINDS = frozenset({"cover_letter", "career_coaching"})


def parse_request(data: dict[str, Any]) -> TaskRequest:
    """Build the matching request variant from a mapping carrying ``kind``.

    Raises pydantic.ValidationError when ``kind`` is unknown or a required
    field is missing or blank.
    """
    return _request_adapter.validate_python(data)
