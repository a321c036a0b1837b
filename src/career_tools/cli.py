"""CLI interface using typer + rich."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

load_dotenv()

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn

from career_tools.clients.completion_client import CompletionClient, CompletionError
from career_tools.config import AppConfig, load_config
from career_tools.export.text_export import default_filename, export_text, render_text
from career_tools.models.requests import TaskRequest, parse_request
from career_tools.models.results import NormalizedResult, Stage
from career_tools.pipeline.runner import CareerToolRunner

app = typer.Typer(
    name="career-tools",
    help="AI career tools: resumes, cover letters, interview prep and more",
    no_args_is_help=True,
)
console = Console()

API_KEY_HELP = "API key (defaults to the environment variable named in config, GROQ_API_KEY)"


def _read_text(path: Path | None) -> str:
    if path is None:
        return ""
    if not path.exists():
        console.print(f"[red]File not found: {path}[/red]")
        raise typer.Exit(1)
    return path.read_text(encoding="utf-8")


def _build_request(data: dict[str, Any]) -> TaskRequest:
    try:
        return parse_request(data)
    except ValidationError as exc:
        console.print("[red]Missing Information[/red]")
        for error in exc.errors():
            field = ".".join(str(p) for p in error["loc"][1:]) or "request"
            console.print(f"  - {field}: {error['msg']}")
        raise typer.Exit(1)


def _make_runner(config: AppConfig, api_key: str | None) -> CareerToolRunner:
    client = CompletionClient(
        api_key or os.environ.get(config.llm.api_key_env),
        base_url=config.llm.base_url,
        timeout=config.llm.timeout,
        max_attempts=config.llm.max_attempts,
    )
    return CareerToolRunner(client, config)


def _show(result: NormalizedResult, title: str, as_json: bool) -> None:
    if as_json:
        payload = result.payload()
        console.print_json(json.dumps({"stage": result.stage.value, "result": payload}, ensure_ascii=False))
        return
    subtitle = None
    if result.stage is Stage.FALLBACK:
        subtitle = "[yellow]built from your input: the AI response could not be structured[/yellow]"
    console.print(Panel(escape(render_text(result)), title=title, subtitle=subtitle))


def _execute(
    data: dict[str, Any],
    *,
    title: str,
    api_key: str | None,
    output: Path | None,
    as_json: bool,
    verbose: bool,
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    request = _build_request(data)
    config = load_config()
    runner = _make_runner(config, api_key)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        progress.add_task(f"Generating {title.lower()}...", total=None)
        try:
            result = runner.run_sync(request)
        except CompletionError as exc:
            progress.stop()
            console.print(f"[red]Generation Failed[/red]: {exc}")
            raise typer.Exit(1)

    _show(result, title, as_json)

    if verbose:
        usage = runner.client.get_token_summary()
        console.print(f"[dim]stage: {result.stage.value} | tokens: {usage['input']} in, {usage['output']} out[/dim]")

    if output is not None:
        if output.is_dir():
            output = output / default_filename(request)
        path = export_text(result, output)
        console.print(f"[green]Saved: {path}[/green]")


@app.command()
def resume(
    full_name: str = typer.Option(..., "--name", help="Full name"),
    email: str = typer.Option(..., "--email", help="Email address"),
    phone: str = typer.Option("", "--phone"),
    location: str = typer.Option("", "--location"),
    linkedin: str = typer.Option("", "--linkedin"),
    website: str = typer.Option("", "--website"),
    summary: str = typer.Option("", "--summary"),
    skills: str = typer.Option("", "--skills", help="Comma-separated skills"),
    experience: Path = typer.Option(None, "--experience", help="Text file describing your experience"),
    education: Path = typer.Option(None, "--education", help="Text file describing your education"),
    projects: Path = typer.Option(None, "--projects", help="Text file describing your projects"),
    api_key: str = typer.Option(None, "--api-key", help=API_KEY_HELP),
    output: Path = typer.Option(None, "--output", "-o", help="Save as .txt (file or directory)"),
    as_json: bool = typer.Option(False, "--json", help="Print the structured result as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Generate an ATS-friendly resume."""
    _execute(
        {
            "kind": "resume",
            "full_name": full_name,
            "email": email,
            "phone": phone,
            "location": location,
            "linkedin": linkedin,
            "website": website,
            "summary": summary,
            "skills": skills,
            "experience": _read_text(experience),
            "education": _read_text(education),
            "projects": _read_text(projects),
        },
        title="Resume",
        api_key=api_key,
        output=output,
        as_json=as_json,
        verbose=verbose,
    )


@app.command("cover-letter")
def cover_letter(
    company: str = typer.Argument(help="Company name"),
    job_title: str = typer.Option(..., "--title", help="Job title"),
    jd: Path = typer.Option(..., "--jd", help="Job description text file"),
    tone: str = typer.Option("professional", "--tone", help="professional, friendly, enthusiastic, ..."),
    full_name: str = typer.Option("", "--name"),
    skills: str = typer.Option("", "--skills"),
    experience: str = typer.Option("", "--experience", help="Brief description of relevant experience"),
    api_key: str = typer.Option(None, "--api-key", help=API_KEY_HELP),
    output: Path = typer.Option(None, "--output", "-o", help="Save as .txt (file or directory)"),
    as_json: bool = typer.Option(False, "--json"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Write a cover letter for a job posting."""
    _execute(
        {
            "kind": "cover_letter",
            "company_name": company,
            "job_title": job_title,
            "job_description": _read_text(jd),
            "tone": tone,
            "full_name": full_name,
            "user_skills": skills,
            "user_experience": experience,
        },
        title="Cover Letter",
        api_key=api_key,
        output=output,
        as_json=as_json,
        verbose=verbose,
    )


@app.command()
def optimize(
    resume_file: Path = typer.Option(..., "--resume", help="Resume text file"),
    jd: Path = typer.Option(..., "--jd", help="Target job description text file"),
    api_key: str = typer.Option(None, "--api-key", help=API_KEY_HELP),
    output: Path = typer.Option(None, "--output", "-o", help="Save as .txt (file or directory)"),
    as_json: bool = typer.Option(False, "--json"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Analyze a resume against a job description."""
    _execute(
        {
            "kind": "optimization",
            "resume_content": _read_text(resume_file),
            "job_description": _read_text(jd),
        },
        title="Resume Analysis",
        api_key=api_key,
        output=output,
        as_json=as_json,
        verbose=verbose,
    )


@app.command()
def interview(
    job_role: str = typer.Argument(help="Role to practice for"),
    level: str = typer.Option("mid", "--level", help="entry, mid, senior or lead"),
    api_key: str = typer.Option(None, "--api-key", help=API_KEY_HELP),
    output: Path = typer.Option(None, "--output", "-o", help="Save as .txt (file or directory)"),
    as_json: bool = typer.Option(False, "--json"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Generate mock interview questions."""
    _execute(
        {"kind": "interview", "job_role": job_role, "level": level},
        title="Interview Questions",
        api_key=api_key,
        output=output,
        as_json=as_json,
        verbose=verbose,
    )


@app.command()
def coach(
    current_role: str = typer.Argument(help="Your current role"),
    full_name: str = typer.Option("", "--name"),
    industry: str = typer.Option("", "--industry"),
    skills: str = typer.Option("", "--skills"),
    experience: str = typer.Option("", "--experience"),
    goals: str = typer.Option("", "--goals", help="Where you want to be"),
    api_key: str = typer.Option(None, "--api-key", help=API_KEY_HELP),
    output: Path = typer.Option(None, "--output", "-o", help="Save as .txt (file or directory)"),
    as_json: bool = typer.Option(False, "--json"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Get personalized career coaching advice."""
    _execute(
        {
            "kind": "career_coaching",
            "current_role": current_role,
            "full_name": full_name,
            "industry": industry,
            "skills": skills,
            "experience": experience,
            "goals": goals,
        },
        title="Career Advice",
        api_key=api_key,
        output=output,
        as_json=as_json,
        verbose=verbose,
    )


@app.command()
def portfolio(
    subdomain: str = typer.Argument(help="Portfolio subdomain"),
    full_name: str = typer.Option("", "--name"),
    email: str = typer.Option("", "--email"),
    headline: str = typer.Option("", "--headline"),
    about: str = typer.Option("", "--about"),
    skills: str = typer.Option("", "--skills", help="Comma-separated skills"),
    resume_file: Path = typer.Option(None, "--resume", help="Resume text file"),
    api_key: str = typer.Option(None, "--api-key", help=API_KEY_HELP),
    output: Path = typer.Option(None, "--output", "-o", help="Save as .txt (file or directory)"),
    as_json: bool = typer.Option(False, "--json"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Generate portfolio website content."""
    _execute(
        {
            "kind": "portfolio",
            "subdomain": subdomain,
            "full_name": full_name,
            "email": email,
            "headline": headline,
            "about": about,
            "skills": skills,
            "resume_text": _read_text(resume_file),
        },
        title="Portfolio",
        api_key=api_key,
        output=output,
        as_json=as_json,
        verbose=verbose,
    )


if __name__ == "__main__":
    app()
