from __future__ import annotations

import logging

from fastapi import APIRouter, Body, Depends

from app.core.errors import APIError
from schemas.listicle import ErrorResponse, GenerationRequest, GenerationResponse
from services.completion_client import CompletionClient, CompletionError, UpstreamErrorKind
from services.prompt_builder import build_prompts
from services.response_normalizer import normalize

logger = logging.getLogger(__name__)

router = APIRouter(tags=["listicle"])

FALLBACK_WARNING = "Content was parsed with fallback method"

UPSTREAM_ERRORS: dict[UpstreamErrorKind, tuple[int, str]] = {
    UpstreamErrorKind.invalid_credential: (401, "Invalid API key. Please check your OpenAI API key."),
    UpstreamErrorKind.rate_limited: (429, "Rate limit exceeded. Please try again later."),
    UpstreamErrorKind.bad_request: (400, "Bad request. Please check your input."),
    UpstreamErrorKind.upstream: (500, "Failed to generate content. Please try again."),
}


def get_completion_client() -> CompletionClient:
    return CompletionClient()


def _is_blank(value: str | None) -> bool:
    return not value or not value.strip()


def _to_api_error(exc: CompletionError) -> APIError:
    status_code, message = UPSTREAM_ERRORS[exc.kind]
    details = exc.message if exc.kind is UpstreamErrorKind.upstream else None
    return APIError(status_code, message, details)


@router.post(
    "/generate-listicle",
    response_model=GenerationResponse,
    response_model_exclude_unset=True,
    responses={code: {"model": ErrorResponse} for code in (400, 401, 429, 500)},
)
async def generate_listicle(
    payload: GenerationRequest | None = Body(default=None),
    client: CompletionClient = Depends(get_completion_client),
) -> GenerationResponse:
    # An empty or `null` body is just a brief with every field missing.
    if payload is None:
        payload = GenerationRequest()
    if _is_blank(payload.apiKey):
        raise APIError(400, "API key is required")
    if _is_blank(payload.idea) or _is_blank(payload.audience):
        raise APIError(400, "Article idea and audience are required")

    data_driven = bool(payload.isDataDriven)
    prompts = build_prompts(
        idea=payload.idea,
        audience=payload.audience,
        context=payload.context,
        data_driven=data_driven,
    )

    try:
        raw_text = await client.complete(payload.apiKey.strip(), prompts.system, prompts.user)
    except CompletionError as exc:
        logger.error("Error generating listicle: %s (%s)", exc.message, exc.kind.value)
        raise _to_api_error(exc) from exc

    normalized = normalize(raw_text)
    if normalized.used_fallback:
        return GenerationResponse(
            success=True,
            data=normalized.data,
            isDataDriven=data_driven,
            warning=FALLBACK_WARNING,
        )
    return GenerationResponse(success=True, data=normalized.data, isDataDriven=data_driven)
