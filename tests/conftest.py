"""Shared pytest fixtures for the translation API."""

from __future__ import annotations

from typing import Any, Dict, Optional

import pytest
from fastapi.testclient import TestClient

from app.api import dependencies as dependency_cache
from app.api.dependencies import (
    get_anthropic_translation_service,
    get_openai_translation_service,
    get_translation_wrapper,
)
from app.core.config import ProviderConfig
from app.main import app
from app.translation.prompts import PromptStyle
from app.translation.providers.base import CompletionProvider
from app.translation.translation_service import TranslationService


class StubProvider(CompletionProvider):
    """Deterministic provider that records every upstream request."""

    provider_id = "stub"
    display_name = "Stub"

    def __init__(
        self,
        reply: str = "",
        truncated: bool = False,
        error: Optional[Exception] = None,
        model: str = "stub-model",
    ):
        super().__init__(
            ProviderConfig(
                provider_id=self.provider_id,
                api_key="test-token",
                base_url="http://upstream.test",
                model=model,
                temperature=0.3,
                timeout_seconds=5,
            )
        )
        self.reply = reply
        self.truncated = truncated
        self.error = error
        self.requests: list[Dict[str, Any]] = []

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def build_request(self, prompt, max_output_tokens, json_mode=False):
        return {
            "prompt": prompt,
            "max_output_tokens": max_output_tokens,
            "json_mode": json_mode,
            "temperature": self.config.temperature,
        }

    def invoke(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return {"text": self.reply, "truncated": self.truncated}

    def extract_text(self, response):
        return response["text"]

    def detect_truncation(self, response):
        return response["truncated"]


class StubOpenAIProvider(StubProvider):
    provider_id = "openai"
    display_name = "OpenAI"
    prompt_style = PromptStyle.INLINE
    supports_json_mode = True
    strips_code_fences = False


class StubAnthropicProvider(StubProvider):
    provider_id = "anthropic"
    display_name = "Anthropic"
    prompt_style = PromptStyle.STANDALONE
    supports_json_mode = False
    strips_code_fences = True
    malformed_json_hint = (
        "The AI returned malformed JSON. Please try with OpenAI provider or a smaller JSON."
    )


class DummyTranslationWrapper:
    """Stub wrapper exposing prebuilt services to the routes."""

    def __init__(self, services: Dict[str, TranslationService]):
        self.services = services
        self.is_initialized = True

    def initialize(self):  # pragma: no cover - lifecycle stub
        return None

    def get_service(self, provider_id: str) -> TranslationService:
        return self.services[provider_id]


UPSTREAM_ENV_VARS = (
    "PROXY_TOKEN",
    "OPENAI_API_KEY",
    "ANTHROPIC_API_KEY",
    "OPENAI_BASE_URL",
    "ANTHROPIC_BASE_URL",
    "OPENAI_MODEL",
    "ANTHROPIC_MODEL",
)


@pytest.fixture(autouse=True)
def clean_upstream_env(monkeypatch):
    """Keep developer credentials out of Settings built inside tests."""

    for name in UPSTREAM_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_dependency_singletons():
    """Ensure global dependency caches do not leak between tests."""

    dependency_cache.reset_dependency_caches()
    yield
    dependency_cache.reset_dependency_caches()


@pytest.fixture()
def openai_provider() -> StubOpenAIProvider:
    return StubOpenAIProvider(model="gpt-4o-mini")


@pytest.fixture()
def anthropic_provider() -> StubAnthropicProvider:
    return StubAnthropicProvider(model="claude-sonnet-4-5-20250929")


@pytest.fixture()
def openai_service(openai_provider: StubOpenAIProvider) -> TranslationService:
    return TranslationService(openai_provider, max_output_tokens=1024, enforce_json_structure=True)


@pytest.fixture()
def anthropic_service(anthropic_provider: StubAnthropicProvider) -> TranslationService:
    return TranslationService(
        anthropic_provider, max_output_tokens=1024, enforce_json_structure=True
    )


@pytest.fixture()
def test_client(openai_service: TranslationService, anthropic_service: TranslationService):
    wrapper = DummyTranslationWrapper(
        {"openai": openai_service, "anthropic": anthropic_service}
    )
    overrides = {
        get_translation_wrapper: lambda: wrapper,
        get_openai_translation_service: lambda: openai_service,
        get_anthropic_translation_service: lambda: anthropic_service,
    }

    app.dependency_overrides.update(overrides)
    client = TestClient(app, raise_server_exceptions=False)

    try:
        yield client
    finally:
        app.dependency_overrides.clear()
