"""Data models for the career tools."""

from career_tools.models.requests import (
    CareerCoachingRequest,
    CoverLetterRequest,
    InterviewRequest,
    OptimizationRequest,
    PortfolioRequest,
    ResumeRequest,
    TaskRequest,
    parse_request,
)
from career_tools.models.results import (
    InterviewResult,
    NormalizedResult,
    OptimizationResult,
    PortfolioResult,
    ResumeResult,
    Stage,
)

__all__ = [
    "CareerCoachingRequest",
    "CoverLetterRequest",
    "InterviewRequest",
    "InterviewResult",
    "NormalizedResult",
    "OptimizationRequest",
    "OptimizationResult",
    "PortfolioRequest",
    "PortfolioResult",
    "ResumeRequest",
    "ResumeResult",
    "Stage",
    "TaskRequest",
    "parse_request",
]
