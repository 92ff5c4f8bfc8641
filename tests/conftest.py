"""Shared test fixtures for the listicle API."""

from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from routers.listicle import get_completion_client
from services.completion_client import CompletionError


class StubCompletionClient:
    """Stands in for CompletionClient and records every call."""

    def __init__(self, reply: str = "", error: CompletionError | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[tuple[str, str, str]] = []

    async def complete(self, api_key: str, system_prompt: str, user_prompt: str) -> str:
        self.calls.append((api_key, system_prompt, user_prompt))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def listicle_content() -> dict:
    """Return a well-formed model reply payload."""
    return {
        "title": "7 Ways to Build an Emergency Fund",
        "introduction": "Saving for the unexpected starts with a plan.",
        "tableOfContents": "<ol><li>Set a target</li><li>Automate savings</li></ol>",
        "mainContent": "<h2>Set a target</h2><p>Three to six months of expenses.</p>",
        "conclusion": "Start small and stay consistent.",
    }


@pytest.fixture
def stub_client(listicle_content) -> StubCompletionClient:
    return StubCompletionClient(reply=json.dumps(listicle_content))


@pytest.fixture
def app(stub_client):
    application = create_app()
    application.dependency_overrides[get_completion_client] = lambda: stub_client
    return application


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def valid_payload() -> dict:
    return {
        "apiKey": "sk-test-123",
        "idea": "Ways to build an emergency fund",
        "audience": "beginner",
        "context": "Focus on young professionals",
        "isDataDriven": False,
    }
