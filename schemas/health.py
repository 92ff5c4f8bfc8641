from __future__ import annotations

from pydantic import BaseModel


class HealthResponse(BaseModel):
    message: str
    timestamp: str
    endpoints: list[str]


class ConnectivityResponse(BaseModel):
    message: str
    timestamp: str
