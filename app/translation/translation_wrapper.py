"""Translation service wrapper for provider selection."""

from typing import Dict, Optional

from app.core.config import Settings, settings as default_settings
from app.core.logging import get_logger
from app.services.exceptions import ConfigurationError
from app.translation.providers.base import CompletionProvider
from app.translation.translation_service import TranslationService

logger = get_logger(__name__)

SUPPORTED_PROVIDERS = ("openai", "anthropic")


def build_provider(provider_id: str, app_settings: Settings = default_settings) -> CompletionProvider:
    """Instantiate the adapter for ``provider_id`` from settings."""
    config = app_settings.provider_config(provider_id)
    if config.provider_id == "openai":
        from app.translation.providers.openai_provider import OpenAIProvider

        return OpenAIProvider(config)
    if config.provider_id == "anthropic":
        from app.translation.providers.anthropic_provider import AnthropicProvider

        return AnthropicProvider(config)
    raise ConfigurationError(f"Unsupported translation provider: {provider_id}")


class TranslationServiceWrapper:
    """Builds and holds one translation service per configured provider."""

    def __init__(self, app_settings: Optional[Settings] = None):
        self._settings = app_settings or default_settings
        self._services: Dict[str, TranslationService] = {}

    def initialize(self):
        """Build every provider; raises ConfigurationError on missing settings."""
        for provider_id in SUPPORTED_PROVIDERS:
            self.get_service(provider_id)
        logger.info("Translation: providers ready: %s", ", ".join(self._services))

    def get_service(self, provider_id: str) -> TranslationService:
        service = self._services.get(provider_id)
        if service is None:
            provider = build_provider(provider_id, self._settings)
            service = TranslationService(
                provider,
                max_output_tokens=self._settings.translation_max_output_tokens,
                enforce_json_structure=self._settings.translation_enforce_json_structure,
            )
            self._services[provider_id] = service
        return service

    @property
    def is_initialized(self) -> bool:
        return all(provider_id in self._services for provider_id in SUPPORTED_PROVIDERS)

    def providers(self) -> list[CompletionProvider]:
        return [service.provider for service in self._services.values()]
