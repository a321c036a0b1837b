"""Runs one career tool end to end: prompt, completion, normalization."""

from __future__ import annotations

import asyncio
import logging
import time

from career_tools.clients.completion_client import CompletionClient
from career_tools.config import AppConfig
from career_tools.models.requests import TaskRequest
from career_tools.models.results import NormalizedResult
from career_tools.pipeline.normalizer import ResponseNormalizer
from career_tools.pipeline.prompts import build_prompt

logger = logging.getLogger(__name__)


class CareerToolRunner:
    """Dispatches a validated request through the completion service.

    Completion errors propagate unchanged so the caller can report them;
    normalization only ever sees text that actually came back.
    """

    def __init__(
        self,
        client: CompletionClient,
        config: AppConfig | None = None,
        normalizer: ResponseNormalizer | None = None,
    ):
        self.client = client
        self.config = config or AppConfig()
        self.normalizer = normalizer or ResponseNormalizer()

    async def run(self, request: TaskRequest) -> NormalizedResult:
        """Generate and normalize the result for a single submission."""
        start = time.monotonic()
        prompt = build_prompt(request, self.config)
        completion = await self.client.complete(
            prompt.messages(),
            model=prompt.model,
            max_tokens=prompt.max_tokens,
            temperature=prompt.temperature,
        )
        result = self.normalizer.normalize(completion.text, request)
        logger.info(
            "%s finished in %.1fs (stage=%s)",
            request.kind,
            time.monotonic() - start,
            result.stage.value,
        )
        return result

    def run_sync(self, request: TaskRequest) -> NormalizedResult:
        """Blocking wrapper for front ends without an event loop."""
        return asyncio.run(self.run(request))
