"""Chat-completion API wrapper with async support and optional retries."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.groq.com/openai/v1"
DEFAULT_MODEL = "mixtral-8x7b-32768"


class CompletionError(Exception):
    """Base class for failures talking to the completion service."""


class MissingAPIKeyError(CompletionError):
    def __init__(self) -> None:
        super().__init__("API key not configured. Please add your API key.")


class CompletionHTTPError(CompletionError):
    def __init__(self, status_code: int, reason: str):
        super().__init__(f"Completion API error: {status_code} {reason}".rstrip())
        self.status_code = status_code
        self.reason = reason


class CompletionTransportError(CompletionError):
    """Network-level failure (connection refused, timeout, ...)."""


class CompletionResponseError(CompletionError):
    """The response envelope had no first-choice message content."""


@dataclass
class Completion:
    """Text of the first choice plus usage metadata."""

    text: str
    model: str
    prompt_tokens: int = 0
    completion_tokens: int = 0


class CompletionClient:
    """Async client for an OpenAI-compatible ``/chat/completions`` endpoint.

    The API key and endpoint are fixed at construction; build a new client to
    change them.
    """

    def __init__(
        self,
        api_key: str | None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 60.0,
        max_attempts: int = 1,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key or None
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_attempts = max_attempts
        self._transport = transport
        self._token_log: list[tuple[str, int, int]] = []  # (model, prompt_tokens, completion_tokens)

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    async def _post(self, payload: dict) -> dict:
        """Make a single API call and return the decoded envelope."""
        url = f"{self.base_url}/chat/completions"
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                response = await client.post(url, headers=self._headers(), json=payload)
            except httpx.HTTPError as exc:
                raise CompletionTransportError(str(exc) or type(exc).__name__) from exc
        if not response.is_success:
            raise CompletionHTTPError(response.status_code, response.reason_phrase)
        try:
            return response.json()
        except ValueError as exc:
            raise CompletionResponseError("Response body is not JSON") from exc

    async def complete(
        self,
        messages: list[dict[str, str]],
        *,
        model: str = DEFAULT_MODEL,
        max_tokens: int = 1024,
        temperature: float = 0.7,
    ) -> Completion:
        """Send the chat turns and return the first choice's message content."""
        if not self.api_key:
            raise MissingAPIKeyError()

        payload = {
            "model": model,
            "messages": messages,
            "max_tokens": max_tokens,
            "temperature": temperature,
        }
        logger.debug("Completion call: model=%s max_tokens=%d", model, max_tokens)
        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self.max_attempts),
                wait=wait_exponential(min=1, max=10),
                retry=retry_if_exception_type(CompletionTransportError),
                reraise=True,
            ):
                with attempt:
                    envelope = await self._post(payload)
        except CompletionError:
            logger.error("Completion call failed", exc_info=True)
            raise

        try:
            text = envelope["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as exc:
            raise CompletionResponseError("Response has no choices[0].message.content") from exc
        if not isinstance(text, str):
            raise CompletionResponseError("choices[0].message.content is not a string")

        usage = envelope.get("usage") or {}
        prompt_tokens = usage.get("prompt_tokens", 0)
        completion_tokens = usage.get("completion_tokens", 0)
        logger.debug("Completion response: %d prompt, %d completion tokens", prompt_tokens, completion_tokens)
        self._token_log.append((model, prompt_tokens, completion_tokens))
        return Completion(
            text=text,
            model=model,
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
        )

    def get_token_summary(self) -> dict:
        """Return accumulated token usage and reset the log."""
        summary = {
            "input": sum(t[1] for t in self._token_log),
            "output": sum(t[2] for t in self._token_log),
            "calls": list(self._token_log),
        }
        self._token_log.clear()
        return summary
