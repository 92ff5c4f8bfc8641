from __future__ import annotations

import os
from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

Environment = Literal["development", "production", "staging", "test"]


def _resolve_env_files() -> tuple[str, ...]:
    env = os.getenv("LISTICLE_ENVIRONMENT", "development").lower()
    if env in {"prod", "production"}:
        return (".env", ".env.prod")
    if env in {"dev", "development"}:
        return (".env", ".env.dev")
    if env in {"test", "testing"}:
        return (".env", ".env.test")
    return (".env",)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="LISTICLE_",
        env_file=_resolve_env_files(),
        extra="ignore",
    )

    environment: Environment = "development"
    project_name: str = "Listicle Generator API"
    log_level: str = "INFO"
    log_json: bool = False
    allowed_hosts: list[str] = ["*"]
    cors_origins: list[str] = ["*"]
    enable_docs: bool = True
    max_body_bytes: int = 10 * 1024 * 1024

    host: str = "0.0.0.0"
    # Hosting platforms inject a bare PORT variable.
    port: int = Field(default=3000, validation_alias=AliasChoices("PORT", "LISTICLE_PORT"))


@lru_cache
def get_settings() -> Settings:
    return Settings()
