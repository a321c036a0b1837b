"""Plain-text rendering and file export of tool results."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

from career_tools.models.requests import TaskRequest
from career_tools.models.results import NormalizedResult, ResumeResult

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^\w\-]+")


def _heading(key: str) -> str:
    return key.replace("_", " ").title()


def _render_item(item: Any) -> str:
    if isinstance(item, dict):
        parts = [str(v) for v in item.values() if v not in (None, "", [], {})]
        return " | ".join(parts)
    return str(item)


def _render_value(value: Any, lines: list[str]) -> None:
    if isinstance(value, dict):
        for key, sub in value.items():
            if sub in (None, "", [], {}):
                continue
            if isinstance(sub, (dict, list)):
                lines.append(f"{_heading(key)}:")
                _render_value(sub, lines)
            else:
                lines.append(f"{_heading(key)}: {sub}")
    elif isinstance(value, list):
        for item in value:
            lines.append(f"- {_render_item(item)}")
    elif value not in (None, ""):
        lines.append(str(value))


def _render_resume(payload: dict[str, Any]) -> list[str]:
    lines: list[str] = []
    header = payload.pop("header", None) or {}
    if header.get("name"):
        lines.append(header["name"])
    contact = [header.get(k) for k in ("email", "phone", "location")] + list(header.get("links") or [])
    contact = [str(c) for c in contact if c]
    if contact:
        lines.append(" | ".join(contact))
    for key, value in payload.items():
        if value in (None, "", [], {}):
            continue
        lines.append("")
        lines.append(_heading(key).upper())
        _render_value(value, lines)
    return lines


def render_text(result: NormalizedResult) -> str:
    """Render a result as readable plain text."""
    payload = result.payload()
    if isinstance(payload, str):
        return payload

    if isinstance(result.value, ResumeResult):
        lines = _render_resume(payload)
    else:
        lines = []
        for key, value in payload.items():
            if value in (None, "", [], {}):
                continue
            if lines:
                lines.append("")
            lines.append(_heading(key).upper())
            _render_value(value, lines)
    return "\n".join(lines).strip() + "\n"


def default_filename(request: TaskRequest) -> str:
    """Derive a filesystem-safe .txt name for a request."""
    label = {
        "resume": getattr(request, "full_name", ""),
        "cover_letter": getattr(request, "company_name", ""),
        "optimization": "resume",
        "interview": getattr(request, "job_role", ""),
        "career_coaching": getattr(request, "current_role", ""),
        "portfolio": getattr(request, "subdomain", ""),
    }[request.kind]
    safe = _UNSAFE_CHARS.sub("_", label).strip("_") or "result"
    return f"{request.kind}_{safe}.txt"


def export_text(result: NormalizedResult, path: str | Path) -> Path:
    """Write the rendered result to ``path`` as UTF-8 text."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_text(result), encoding="utf-8")
    logger.debug("Exported %s result to %s", result.kind, path)
    return path
