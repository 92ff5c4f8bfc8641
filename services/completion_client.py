from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum

import openai
from openai import AsyncOpenAI

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"


class UpstreamErrorKind(str, Enum):
    invalid_credential = "invalid_credential"
    rate_limited = "rate_limited"
    bad_request = "bad_request"
    upstream = "upstream"


STATUS_TO_KIND: dict[int, UpstreamErrorKind] = {
    401: UpstreamErrorKind.invalid_credential,
    429: UpstreamErrorKind.rate_limited,
    400: UpstreamErrorKind.bad_request,
}


def classify_status(status_code: int | None) -> UpstreamErrorKind:
    if status_code is None:
        return UpstreamErrorKind.upstream
    return STATUS_TO_KIND.get(status_code, UpstreamErrorKind.upstream)


class CompletionError(RuntimeError):
    """Raised when the chat-completion provider rejects or fails a request."""

    def __init__(self, kind: UpstreamErrorKind, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.status_code = status_code


def _default_client_factory(api_key: str) -> AsyncOpenAI:
    # Retries are disabled; every failure is surfaced to the caller immediately.
    return AsyncOpenAI(api_key=api_key, max_retries=0)


class CompletionClient:
    """Send one system/user prompt pair to the OpenAI chat completions API.

    The provider client is created per call from the caller's API key and closed
    afterwards, so no credential outlives the request that supplied it.
    """

    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        temperature: float = 0.7,
        max_tokens: int = 4000,
        client_factory: Callable[[str], AsyncOpenAI] = _default_client_factory,
    ) -> None:
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._client_factory = client_factory

    async def complete(self, api_key: str, system_prompt: str, user_prompt: str) -> str:
        try:
            async with self._client_factory(api_key) as client:
                response = await client.chat.completions.create(
                    model=self._model,
                    messages=[
                        {"role": "system", "content": system_prompt},
                        {"role": "user", "content": user_prompt},
                    ],
                    temperature=self._temperature,
                    max_tokens=self._max_tokens,
                )
        except openai.APIStatusError as exc:
            kind = classify_status(exc.status_code)
            logger.warning("OpenAI request failed with status %s (%s)", exc.status_code, kind.value)
            raise CompletionError(kind, exc.message, status_code=exc.status_code) from exc
        except openai.APIError as exc:
            logger.warning("OpenAI request failed: %s", exc.message)
            raise CompletionError(UpstreamErrorKind.upstream, exc.message) from exc

        if not response.choices:
            logger.warning("OpenAI returned no choices")
            return ""
        return response.choices[0].message.content or ""
