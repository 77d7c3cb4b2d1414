"""Pydantic models for API request/response schemas."""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Response model for API errors."""

    error: str = Field(..., description="Error message")
    details: Optional[str] = Field(None, description="Additional error details")


class TranslationRequest(BaseModel):
    """Request model for a single translation.

    Required fields are optional here so that missing values surface as a
    400 ``MissingFields`` error from the pipeline rather than a 422.
    """

    model_config = ConfigDict(populate_by_name=True)

    text: Optional[str] = Field(None, description="Text or JSON document to translate")
    source_lang: Optional[str] = Field(
        None, alias="sourceLang", description="Source language hint"
    )
    target_lang: Optional[str] = Field(
        None, alias="targetLang", description="Target language"
    )
    is_json: bool = Field(
        False, alias="isJson", description="Translate string values of a JSON document"
    )


class TranslationResponse(BaseModel):
    """Response model for a successful translation."""

    model_config = ConfigDict(populate_by_name=True)

    translated_text: str = Field(
        ..., alias="translatedText", description="Translated text or JSON document"
    )
    provider: str = Field(..., description="Provider that served the request")
    model: str = Field(..., description="Upstream model identifier")


class ProviderInfo(BaseModel):
    """Capabilities of one configured provider."""

    model_config = ConfigDict(populate_by_name=True)

    provider: str = Field(..., description="Provider identifier")
    model: str = Field(..., description="Upstream model identifier")
    json_mode: bool = Field(
        ..., alias="jsonMode", description="Requests structured JSON output upstream"
    )
    strips_code_fences: bool = Field(
        ..., alias="stripsCodeFences", description="Removes markdown fences from JSON output"
    )


class ProviderListResponse(BaseModel):
    """Response model for the provider listing."""

    providers: List[ProviderInfo] = Field(..., description="Configured providers")


class LanguageInfo(BaseModel):
    """One entry of the language catalog."""

    code: str = Field(..., description="Language code")
    name: str = Field(..., description="Display name")


class LanguageListResponse(BaseModel):
    """Response model for the language catalog."""

    languages: List[LanguageInfo] = Field(..., description="Offered languages")


class HealthCheckResponse(BaseModel):
    """Response model for detailed health check."""

    status: str = Field(..., description="Overall health status")
    checks: Dict[str, dict] = Field(..., description="Individual health checks")
