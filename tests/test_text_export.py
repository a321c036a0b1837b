"""Tests for plain-text rendering and export."""

from career_tools.export.text_export import default_filename, export_text, render_text
from career_tools.models.requests import CoverLetterRequest, ResumeRequest
from career_tools.models.results import (
    InterviewResult,
    NormalizedResult,
    OptimizationResult,
    ResumeResult,
    Stage,
)
from career_tools.pipeline.fallbacks import interview_fallback, resume_fallback


class TestRenderText:
    def test_free_text_is_unchanged(self):
        result = NormalizedResult(
            kind="cover_letter", stage=Stage.PASSTHROUGH, value="Dear team,\n\nHello.", raw="Dear team,\n\nHello."
        )
        assert render_text(result) == "Dear team,\n\nHello."

    def test_resume_layout(self, resume_json):
        value = ResumeResult.model_validate(resume_json)
        text = render_text(NormalizedResult(kind="resume", stage=Stage.STRICT, value=value, raw=""))

        lines = text.splitlines()
        assert lines[0] == "Jane Doe"
        assert lines[1] == "jane@x.com | github.com/jane"
        assert "EXPERIENCE" in lines
        assert "- Backend Engineer | Acme Corp | 2020-2024 | Built payment APIs handling 2k rps." in lines
        assert "- Go" in lines

    def test_resume_fallback_skips_empty_sections(self):
        request = ResumeRequest(full_name="Jane Doe", email="jane@x.com", skills="Go, Rust")
        value = resume_fallback(request, "")
        text = render_text(NormalizedResult(kind="resume", stage=Stage.FALLBACK, value=value, raw=""))

        assert "SKILLS" in text
        assert "EXPERIENCE" not in text
        assert text.endswith("- Rust\n")

    def test_optimization_sections(self):
        value = OptimizationResult(ats_score=64, missing_keywords=["Kubernetes", "Terraform"])
        text = render_text(NormalizedResult(kind="optimization", stage=Stage.STRICT, value=value, raw=""))

        assert text == "ATS SCORE\n64\n\nMISSING KEYWORDS\n- Kubernetes\n- Terraform\n"

    def test_interview_opaque_questions(self):
        value = interview_fallback(None, "1. Why data?\n2. Why us?")
        text = render_text(NormalizedResult(kind="interview", stage=Stage.FALLBACK, value=value, raw=""))

        assert text == "QUESTIONS\n1. Why data?\n2. Why us?\n"

    def test_interview_question_objects(self):
        value = InterviewResult.model_validate(
            {"technical_questions": [{"question": "What is a DAG?", "guideline": "Directed, acyclic"}]}
        )
        text = render_text(NormalizedResult(kind="interview", stage=Stage.STRICT, value=value, raw=""))

        assert "- What is a DAG? | Directed, acyclic" in text


class TestExport:
    def test_default_filename(self, resume_request, portfolio_request):
        assert default_filename(resume_request) == "resume_Jane_Doe.txt"
        assert default_filename(portfolio_request) == "portfolio_jane-doe.txt"

    def test_default_filename_strips_unsafe_characters(self):
        request = CoverLetterRequest(company_name="A/B & Co.", job_title="Dev", job_description="x")
        assert default_filename(request) == "cover_letter_A_B_Co.txt"

    def test_export_creates_parent_dirs(self, tmp_path):
        result = NormalizedResult(kind="cover_letter", stage=Stage.PASSTHROUGH, value="Hi", raw="Hi")
        path = export_text(result, tmp_path / "out" / "letter.txt")

        assert path.read_text(encoding="utf-8") == "Hi"
