"""Helpers to pull a JSON object out of an LLM response."""

from __future__ import annotations

import json
from typing import Any

_decoder = json.JSONDecoder()


def parse_strict(text: str) -> dict[str, Any] | None:
    """Parse the whole text as a JSON object.

    Returns None when the text is not valid JSON or decodes to something
    other than an object.
    """
    try:
        data = json.loads(text)
    except (ValueError, RecursionError, TypeError):
        return None
    return data if isinstance(data, dict) else None


def extract_first_object(text: str) -> dict[str, Any] | None:
    """Decode the JSON object that starts at the leftmost '{'.

    Decoding stops at the brace that closes that object, so prose or
    further objects after it are ignored. Braces inside JSON strings do not
    count. Only the leftmost '{' is tried: if the object starting there is
    malformed, the result is None even when a later object would decode.
    """
    start = text.find("{")
    if start == -1:
        return None
    try:
        data, _end = _decoder.raw_decode(text, start)
    except (ValueError, RecursionError):
        return None
    return data if isinstance(data, dict) else None
