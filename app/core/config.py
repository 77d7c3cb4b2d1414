"""Application configuration settings."""

from dataclasses import dataclass
from typing import ClassVar, Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.services.exceptions import ConfigurationError


@dataclass(frozen=True)
class ProviderConfig:
    """Immutable upstream wiring handed to a provider adapter."""

    provider_id: str
    api_key: str
    base_url: str
    model: str
    temperature: float
    timeout_seconds: float


class Settings(BaseSettings):
    """Application settings."""

    _app_name_base: ClassVar[str] = "LLM Translation API"

    # Determine if we are in development mode
    environment: str = "development"  # "development" or "production"
    is_development: bool = True
    is_production: bool = False

    # API Settings
    app_name: str = _app_name_base
    app_version: str = "1.0.0"
    app_description: str = (
        "Forwards text or JSON documents to hosted LLM providers and returns the translation"
    )

    # Server Settings
    host: str = "0.0.0.0"
    port: int = 8000
    reload: Optional[bool] = None
    log_level: str = "info"

    # Upstream credentials (PROXY_TOKEN is shared unless a provider key is set)
    proxy_token: Optional[str] = None
    openai_api_key: Optional[str] = None
    anthropic_api_key: Optional[str] = None

    # Upstream endpoints
    openai_base_url: Optional[str] = None
    anthropic_base_url: Optional[str] = None

    # Upstream models
    openai_model: str = "gpt-4o-mini"
    anthropic_model: str = "claude-sonnet-4-5-20250929"

    # Translation Settings
    translation_max_output_tokens: int = 16384
    translation_temperature: float = 0.3
    translation_timeout_seconds: float = 120.0
    translation_enforce_json_structure: bool = True
    translation_languages: dict[str, str] = {
        "en": "English",
        "zh": "Mandarin Chinese",
        "de": "German",
        "es": "Spanish",
        "ja": "Japanese",
        "ko": "Korean",
        "ar": "Arabic",
        "ru": "Russian",
    }

    # API Settings
    docs_url: str = "/docs"
    redoc_url: str = "/redoc"
    openapi_url: str = "/openapi.json"

    # CORS Settings
    cors_origins: str = (
        "http://localhost:3000,http://127.0.0.1:3000"  # Comma-separated list of allowed origins
    )
    cors_allow_methods: str = "*"  # Comma-separated list or "*" for all methods
    cors_allow_headers: str = "*"  # Comma-separated list or "*" for all headers

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    @model_validator(mode="after")
    def _set_environment_flags(self):
        env = (self.environment or "").strip().lower()
        self.is_development = env in {"development", "dev", "local"}
        self.is_production = not self.is_development
        if self.reload is None:
            self.reload = self.is_development

        # Only auto-append the development suffix when using the default base name
        if self.app_name in {
            self._app_name_base,
            f"{self._app_name_base} (Development)",
        }:
            suffix = " (Development)" if self.is_development else ""
            self.app_name = f"{self._app_name_base}{suffix}"

        return self

    @staticmethod
    def _split_csv(raw: str) -> list[str]:
        return [chunk.strip() for chunk in raw.split(",") if chunk.strip()]

    @property
    def cors_origin_list(self) -> list[str]:
        return self._split_csv(self.cors_origins)

    @property
    def cors_method_list(self) -> list[str]:
        return self._split_csv(self.cors_allow_methods)

    @property
    def cors_header_list(self) -> list[str]:
        return self._split_csv(self.cors_allow_headers)

    def provider_config(self, provider_id: str) -> ProviderConfig:
        """Build the frozen upstream config for ``provider_id``.

        Raises ``ConfigurationError`` when the credential or the base URL is
        missing, so a misconfigured deployment fails at startup rather than on
        the first request.
        """
        provider_id = provider_id.strip().lower()
        if provider_id == "openai":
            api_key = self.openai_api_key or self.proxy_token
            base_url = self.openai_base_url
            model = self.openai_model
        elif provider_id == "anthropic":
            api_key = self.anthropic_api_key or self.proxy_token
            base_url = self.anthropic_base_url
            model = self.anthropic_model
        else:
            raise ConfigurationError(f"Unsupported translation provider: {provider_id}")

        missing = []
        if not api_key:
            missing.append(f"{provider_id.upper()}_API_KEY or PROXY_TOKEN")
        if not base_url:
            missing.append(f"{provider_id.upper()}_BASE_URL")
        if missing:
            raise ConfigurationError(
                f"Provider '{provider_id}' is not configured",
                detail=f"Missing settings: {', '.join(missing)}",
            )

        return ProviderConfig(
            provider_id=provider_id,
            api_key=api_key,
            base_url=base_url,
            model=model,
            temperature=self.translation_temperature,
            timeout_seconds=self.translation_timeout_seconds,
        )


# Global settings instance
settings = Settings()
