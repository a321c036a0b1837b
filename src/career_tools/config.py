"""Application configuration loaded from config.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

TASK_KINDS = (
    "resume",
    "cover_letter",
    "optimization",
    "interview",
    "career_coaching",
    "portfolio",
)


def _check_range(name: str, value: float, low: float, high: float) -> None:
    if not low <= value <= high:
        raise ValueError(f"{name} must be between {low} and {high}, got {value}")


@dataclass(frozen=True)
class LLMConfig:
    base_url: str = "https://api.groq.com/openai/v1"
    model: str = "mixtral-8x7b-32768"
    timeout: int = 60
    max_attempts: int = 1
    api_key_env: str = "GROQ_API_KEY"

    def __post_init__(self) -> None:
        _check_range("timeout", self.timeout, 1, 600)
        _check_range("max_attempts", self.max_attempts, 1, 5)
        if not self.base_url.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got {self.base_url!r}")


@dataclass(frozen=True)
class TaskConfig:
    max_tokens: int
    temperature: float

    def __post_init__(self) -> None:
        _check_range("max_tokens", self.max_tokens, 1, 32768)
        _check_range("temperature", self.temperature, 0.0, 2.0)


DEFAULT_TASKS: dict[str, TaskConfig] = {
    "resume": TaskConfig(max_tokens=1500, temperature=0.7),
    "cover_letter": TaskConfig(max_tokens=800, temperature=0.7),
    "optimization": TaskConfig(max_tokens=1200, temperature=0.3),
    "interview": TaskConfig(max_tokens=1000, temperature=0.7),
    "career_coaching": TaskConfig(max_tokens=1200, temperature=0.6),
    "portfolio": TaskConfig(max_tokens=2000, temperature=0.7),
}


@dataclass(frozen=True)
class ExportConfig:
    output_dir: str = "./output"

    @property
    def resolved_output_dir(self) -> Path:
        return Path(self.output_dir).expanduser()


@dataclass(frozen=True)
class AppConfig:
    llm: LLMConfig = field(default_factory=LLMConfig)
    tasks: dict[str, TaskConfig] = field(default_factory=lambda: dict(DEFAULT_TASKS))
    export: ExportConfig = field(default_factory=ExportConfig)

    def task(self, kind: str) -> TaskConfig:
        return self.tasks[kind]


def _load_tasks(raw: dict) -> dict[str, TaskConfig]:
    tasks = dict(DEFAULT_TASKS)
    for kind, overrides in raw.items():
        if kind not in TASK_KINDS:
            raise ValueError(f"Unknown task kind in tasks: {kind!r}")
        base = DEFAULT_TASKS[kind]
        overrides = overrides or {}
        if not isinstance(overrides, dict):
            raise ValueError(f"tasks.{kind} must be a mapping, got {type(overrides).__name__}")
        tasks[kind] = TaskConfig(
            max_tokens=overrides.get("max_tokens", base.max_tokens),
            temperature=overrides.get("temperature", base.temperature),
        )
    return tasks


def _mapping(raw: dict, name: str) -> dict:
    value = raw.get(name) or {}
    if not isinstance(value, dict):
        raise ValueError(f"{name} must be a mapping, got {type(value).__name__}")
    return value


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        # Look for config.yaml relative to the project root
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        llm=LLMConfig(**_mapping(raw, "llm")),
        tasks=_load_tasks(_mapping(raw, "tasks")),
        export=ExportConfig(**_mapping(raw, "export")),
    )
