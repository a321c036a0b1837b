"""Turns raw completion text into the result shape each tool renders."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from career_tools.models.requests import FREE_TEXT_KINDS, TaskRequest
from career_tools.models.results import RESULT_SCHEMAS, NormalizedResult, Stage
from career_tools.pipeline.fallbacks import FALLBACK_BUILDERS
from career_tools.utils.json_parser import extract_first_object, parse_strict

logger = logging.getLogger(__name__)


class ResponseNormalizer:
    """Strict parse, then first-object extraction, then a built fallback.

    Cover letters and coaching advice are free text and are returned as-is.
    ``normalize`` never raises for string input and never calls the network.
    """

    def normalize(self, raw: str, request: TaskRequest) -> NormalizedResult:
        kind = request.kind
        if kind in FREE_TEXT_KINDS:
            return NormalizedResult(kind=kind, stage=Stage.PASSTHROUGH, value=raw, raw=raw)

        schema = RESULT_SCHEMAS[kind]

        value = self._validate(schema, parse_strict(raw))
        if value is not None:
            logger.debug("Normalized %s response with strict parse", kind)
            return NormalizedResult(kind=kind, stage=Stage.STRICT, value=value, raw=raw)

        value = self._validate(schema, extract_first_object(raw))
        if value is not None:
            logger.debug("Normalized %s response from embedded JSON object", kind)
            return NormalizedResult(kind=kind, stage=Stage.EXTRACTED, value=value, raw=raw)

        logger.debug("No usable JSON in %s response (%d chars); using fallback", kind, len(raw))
        value = FALLBACK_BUILDERS[kind](request, raw)
        return NormalizedResult(kind=kind, stage=Stage.FALLBACK, value=value, raw=raw)

    @staticmethod
    def _validate(schema, data: dict[str, Any] | None):
        if data is None:
            return None
        try:
            return schema.model_validate(data)
        except ValidationError as exc:
            logger.debug("JSON did not match %s: %d errors", schema.__name__, exc.error_count())
            return None


def normalize_response(raw: str, request: TaskRequest) -> NormalizedResult:
    """Module-level shortcut for ``ResponseNormalizer().normalize``."""
    return ResponseNormalizer().normalize(raw, request)
