from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class GenerationRequest(BaseModel):
    # Required fields are checked by the handler so that a missing value is a
    # 400 with a readable message rather than a schema error.
    apiKey: str | None = None
    idea: str | None = None
    audience: str | None = None
    context: str | None = None
    isDataDriven: bool | None = False


class GenerationResponse(BaseModel):
    success: bool = True
    # Passed through as decoded from the model; fields are not guaranteed.
    data: dict[str, Any]
    isDataDriven: bool
    warning: str | None = None


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None
