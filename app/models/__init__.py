"""Models package for Pydantic schemas."""

from .schemas import (
    ErrorResponse,
    HealthCheckResponse,
    LanguageInfo,
    LanguageListResponse,
    ProviderInfo,
    ProviderListResponse,
    TranslationRequest,
    TranslationResponse,
)

__all__ = [
    "ErrorResponse",
    "HealthCheckResponse",
    "LanguageInfo",
    "LanguageListResponse",
    "ProviderInfo",
    "ProviderListResponse",
    "TranslationRequest",
    "TranslationResponse",
]
