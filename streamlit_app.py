"""Streamlit Web UI for career-tools.

One tab per tool. Each form is validated before any request is sent; while a
request is in flight its submit button is disabled, and a failed request
leaves the previous result on screen.
"""

from __future__ import annotations

import logging
import os

import streamlit as st
from dotenv import load_dotenv
from pydantic import ValidationError

logger = logging.getLogger(__name__)

load_dotenv()

from career_tools.clients.completion_client import CompletionClient, CompletionError
from career_tools.config import load_config
from career_tools.export.text_export import default_filename, render_text
from career_tools.models.requests import parse_request
from career_tools.models.results import NormalizedResult, Stage
from career_tools.pipeline.runner import CareerToolRunner

config = load_config()

# Streamlit Cloud: fall back to st.secrets for the API key
API_KEY = os.environ.get(config.llm.api_key_env)
if not API_KEY:
    try:
        API_KEY = st.secrets[config.llm.api_key_env]
    except Exception:
        API_KEY = None

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(page_title="AI Career Tools", page_icon=":briefcase:", layout="wide")

with st.sidebar:
    st.title("AI Career Tools")
    st.caption("Resumes, cover letters and interview prep")
    if not API_KEY:
        API_KEY = st.text_input("API key", type="password") or None


def _runner() -> CareerToolRunner:
    client = CompletionClient(
        API_KEY,
        base_url=config.llm.base_url,
        timeout=config.llm.timeout,
        max_attempts=config.llm.max_attempts,
    )
    return CareerToolRunner(client, config)


def _busy_key(kind: str) -> str:
    return f"busy_{kind}"


def _submit(kind: str, fields: dict[str, str], action: str) -> None:
    """on_click handler: snapshots the form and marks the tool busy.

    Widget values are read from session_state here because callbacks run
    after this rerun's widget changes are committed.
    """
    data = {name: st.session_state.get(key) for name, key in fields.items()}
    st.session_state[_busy_key(kind)] = True
    st.session_state[f"pending_{kind}"] = (data, action)


def _process(kind: str) -> None:
    pending = st.session_state.pop(f"pending_{kind}", None)
    if pending is None:
        return
    data, action = pending
    try:
        try:
            request = parse_request({"kind": kind, **data})
        except ValidationError as exc:
            missing = ", ".join(str(e["loc"][-1]) for e in exc.errors())
            st.toast(f"Missing Information: please fill in {missing}.", icon="⚠️")
            return
        with st.spinner(f"{action}..."):
            try:
                result = _runner().run_sync(request)
            except CompletionError:
                logger.error("%s failed", action, exc_info=True)
                st.toast(f"Generation Failed: {action.lower()} did not complete. Please try again.", icon="❌")
                return
        st.session_state[f"result_{kind}"] = (request, result)
        st.toast(f"{action} complete!", icon="✅")
    finally:
        st.session_state[_busy_key(kind)] = False
        st.rerun()


def _show_result(kind: str) -> None:
    stored = st.session_state.get(f"result_{kind}")
    if stored is None:
        return
    request, result = stored
    result: NormalizedResult
    st.divider()
    if result.stage is Stage.FALLBACK:
        st.info("The AI response could not be structured, so this was built from your input.")

    if kind == "interview" and not result.value.navigable:
        st.caption("Questions are shown as one block; per-question navigation is unavailable.")

    if result.is_text:
        st.text_area("Result", result.value, height=400)
    else:
        st.json(result.payload())

    st.download_button(
        "Download .txt",
        data=render_text(result).encode("utf-8"),
        file_name=default_filename(request),
        mime="text/plain",
        key=f"download_{kind}",
    )


def _button(kind: str, label: str, fields: dict[str, str], action: str) -> None:
    st.button(
        label,
        type="primary",
        key=f"submit_{kind}",
        disabled=st.session_state.get(_busy_key(kind), False),
        on_click=_submit,
        args=(kind, fields, action),
    )


tabs = st.tabs(
    ["CV Generator", "Cover Letter", "Resume Optimizer", "Mock Interview", "Career Coach", "Portfolio"]
)

with tabs[0]:
    col1, col2 = st.columns(2)
    with col1:
        st.text_input("Full name *", key="r_name")
        st.text_input("Email *", key="r_email")
        st.text_input("Phone", key="r_phone")
        st.text_input("Location", key="r_location")
        st.text_input("LinkedIn", key="r_linkedin")
        st.text_input("Website", key="r_website")
    with col2:
        st.text_area("Summary", key="r_summary")
        st.text_area("Experience", key="r_experience")
        st.text_area("Education", key="r_education")
        st.text_input("Skills (comma-separated)", key="r_skills")
        st.text_area("Projects", key="r_projects")
    _button(
        "resume",
        "Generate Resume",
        {
            "full_name": "r_name",
            "email": "r_email",
            "phone": "r_phone",
            "location": "r_location",
            "linkedin": "r_linkedin",
            "website": "r_website",
            "summary": "r_summary",
            "experience": "r_experience",
            "education": "r_education",
            "skills": "r_skills",
            "projects": "r_projects",
        },
        "Resume generation",
    )
    _process("resume")
    _show_result("resume")

with tabs[1]:
    st.text_input("Company name *", key="c_company")
    st.text_input("Job title *", key="c_title")
    st.selectbox("Tone", ["professional", "friendly", "enthusiastic", "formal"], key="c_tone")
    st.text_area("Your key skills", key="c_skills")
    st.text_area("Your relevant experience", key="c_experience")
    st.text_area("Job description *", height=200, key="c_jd")
    _button(
        "cover_letter",
        "Generate Cover Letter",
        {
            "company_name": "c_company",
            "job_title": "c_title",
            "tone": "c_tone",
            "user_skills": "c_skills",
            "user_experience": "c_experience",
            "job_description": "c_jd",
        },
        "Cover letter",
    )
    _process("cover_letter")
    _show_result("cover_letter")

with tabs[2]:
    col1, col2 = st.columns(2)
    with col1:
        st.text_area("Current resume *", height=300, key="o_resume")
    with col2:
        st.text_area("Target job description *", height=300, key="o_jd")
    _button(
        "optimization",
        "Analyze & Optimize Resume",
        {"resume_content": "o_resume", "job_description": "o_jd"},
        "Resume analysis",
    )
    _process("optimization")
    _show_result("optimization")

with tabs[3]:
    st.text_input("Job role *", key="i_role")
    st.selectbox("Level", ["entry", "mid", "senior", "lead"], index=1, key="i_level")
    _button("interview", "Generate Questions", {"job_role": "i_role", "level": "i_level"}, "Interview questions")
    _process("interview")
    _show_result("interview")

with tabs[4]:
    st.text_input("Current role *", key="k_role")
    st.text_input("Industry", key="k_industry")
    st.text_area("Skills", key="k_skills")
    st.text_area("Experience", key="k_experience")
    st.text_area("Career goals", key="k_goals")
    _button(
        "career_coaching",
        "Get Advice",
        {
            "current_role": "k_role",
            "industry": "k_industry",
            "skills": "k_skills",
            "experience": "k_experience",
            "goals": "k_goals",
        },
        "Career analysis",
    )
    _process("career_coaching")
    _show_result("career_coaching")

with tabs[5]:
    st.text_input("Subdomain *", key="p_subdomain")
    st.text_input("Name", key="p_name")
    st.text_input("Contact email", key="p_email")
    st.text_input("Headline", key="p_headline")
    st.text_area("About", key="p_about")
    st.text_input("Skills (comma-separated)", key="p_skills")
    st.text_area("Resume text", height=200, key="p_resume")
    _button(
        "portfolio",
        "Generate Portfolio",
        {
            "subdomain": "p_subdomain",
            "full_name": "p_name",
            "email": "p_email",
            "headline": "p_headline",
            "about": "p_about",
            "skills": "p_skills",
            "resume_text": "p_resume",
        },
        "Portfolio generation",
    )
    _process("portfolio")
    _show_result("portfolio")
