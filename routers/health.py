from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter

from schemas.health import ConnectivityResponse, HealthResponse

router = APIRouter(tags=["health"])

ENDPOINTS = [
    "GET / - Health check",
    "POST /api/generate-listicle - Generate listicle content",
]


def _utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get("/", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse(
        message="Listicle Generator API is running!",
        timestamp=_utc_timestamp(),
        endpoints=ENDPOINTS,
    )


@router.get("/api/test", response_model=ConnectivityResponse)
async def connectivity_check() -> ConnectivityResponse:
    """Lets a browser client confirm that cross-origin requests get through."""
    return ConnectivityResponse(message="CORS test successful!", timestamp=_utc_timestamp())
