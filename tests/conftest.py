"""Shared test fixtures."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock

import pytest

from career_tools.clients.completion_client import Completion, CompletionClient
from career_tools.models.requests import (
    CareerCoachingRequest,
    CoverLetterRequest,
    InterviewRequest,
    OptimizationRequest,
    PortfolioRequest,
    ResumeRequest,
)


@pytest.fixture
def resume_request() -> ResumeRequest:
    return ResumeRequest(
        full_name="Jane Doe",
        email="jane@x.com",
        phone="555-0100",
        location="Berlin",
        linkedin="linkedin.com/in/janedoe",
        summary="Backend engineer focused on distributed systems.",
        experience="Acme Corp 2020-2024: built payment APIs in Go",
        education="BSc Computer Science, TU Berlin",
        skills="Go, Rust, PostgreSQL",
        projects="Open-source rate limiter",
    )


@pytest.fixture
def cover_letter_request() -> CoverLetterRequest:
    return CoverLetterRequest(
        company_name="Acme Corp",
        job_title="Backend Engineer",
        job_description="Build and operate high-throughput payment services.",
        user_skills="Go, Kafka",
    )


@pytest.fixture
def optimization_request() -> OptimizationRequest:
    return OptimizationRequest(
        resume_content="Jane Doe\nBackend engineer, 4 years of Go.",
        job_description="Senior Go engineer with Kubernetes experience.",
    )


@pytest.fixture
def interview_request() -> InterviewRequest:
    return InterviewRequest(job_role="Data Engineer", level="senior")


@pytest.fixture
def coaching_request() -> CareerCoachingRequest:
    return CareerCoachingRequest(
        current_role="QA Analyst",
        skills="Selenium, Python",
        goals="Move into SRE within two years",
    )


@pytest.fixture
def portfolio_request() -> PortfolioRequest:
    return PortfolioRequest(
        subdomain="jane-doe",
        full_name="Jane Doe",
        email="jane@x.com",
        headline="Backend Engineer",
        skills="Go, Rust, , SQL ",
    )


@pytest.fixture
def resume_json() -> dict:
    return {
        "header": {"name": "Jane Doe", "email": "jane@x.com", "links": ["github.com/jane"]},
        "summary": "Backend engineer with 4 years of Go.",
        "experience": [
            {
                "title": "Backend Engineer",
                "company": "Acme Corp",
                "duration": "2020-2024",
                "description": "Built payment APIs handling 2k rps.",
            }
        ],
        "education": [{"degree": "BSc Computer Science", "institution": "TU Berlin", "year": "2019"}],
        "skills": ["Go", "Rust", "PostgreSQL"],
        "projects": [{"name": "ratelimit", "description": "Token bucket limiter", "technologies": ["Go"]}],
    }


@pytest.fixture
def interview_json() -> dict:
    return {
        "technical_questions": [
            {"question": "How would you design an idempotent ETL job?", "guideline": "Mention checkpoints."}
        ],
        "behavioral_questions": [{"question": "Tell me about a failed deploy."}],
        "situational_questions": ["A pipeline is late before a board meeting. What do you do?"],
    }


@pytest.fixture
def mock_completion_client() -> CompletionClient:
    """Create a mock completion client returning an empty JSON object."""
    client = AsyncMock(spec=CompletionClient)
    client.complete = AsyncMock(
        return_value=Completion(text=json.dumps({}), model="test-model", prompt_tokens=100, completion_tokens=50)
    )
    return client
