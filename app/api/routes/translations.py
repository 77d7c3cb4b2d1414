"""Translation endpoints, one per upstream provider."""

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from app.api.dependencies import (
    get_anthropic_translation_service,
    get_openai_translation_service,
    get_translation_wrapper,
)
from app.core.config import settings
from app.models.schemas import (
    ErrorResponse,
    LanguageInfo,
    LanguageListResponse,
    ProviderInfo,
    ProviderListResponse,
    TranslationRequest,
    TranslationResponse,
)
from app.translation.translation_service import TranslationService
from app.translation.translation_wrapper import SUPPORTED_PROVIDERS

router = APIRouter(prefix="/api/translate", tags=["translations"])

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing fields or invalid JSON input"},
    413: {"model": ErrorResponse, "description": "Translation exceeded the output bound"},
    500: {"model": ErrorResponse, "description": "Upstream returned no or malformed output"},
}


async def _translate(
    payload: TranslationRequest, service: TranslationService
) -> TranslationResponse:
    result = await run_in_threadpool(
        service.translate,
        payload.text,
        payload.source_lang,
        payload.target_lang,
        payload.is_json,
    )
    return TranslationResponse(
        translated_text=result.translated_text,
        provider=result.provider,
        model=result.model,
    )


@router.post(
    "/openai",
    response_model=TranslationResponse,
    responses=_ERROR_RESPONSES,
    summary="Translate text or JSON with OpenAI",
)
async def translate_openai(
    payload: TranslationRequest,
    service: TranslationService = Depends(get_openai_translation_service),
):
    return await _translate(payload, service)


@router.post(
    "/anthropic",
    response_model=TranslationResponse,
    responses=_ERROR_RESPONSES,
    summary="Translate text or JSON with Anthropic",
)
async def translate_anthropic(
    payload: TranslationRequest,
    service: TranslationService = Depends(get_anthropic_translation_service),
):
    return await _translate(payload, service)


@router.get(
    "/providers",
    response_model=ProviderListResponse,
    summary="List configured translation providers",
)
async def list_providers(wrapper=Depends(get_translation_wrapper)):
    providers = [
        wrapper.get_service(provider_id).provider.describe()
        for provider_id in SUPPORTED_PROVIDERS
    ]
    return ProviderListResponse(
        providers=[ProviderInfo(**provider) for provider in providers]
    )


@router.get(
    "/languages",
    response_model=LanguageListResponse,
    summary="Language catalog offered to clients",
)
async def list_languages():
    return LanguageListResponse(
        languages=[
            LanguageInfo(code=code, name=name)
            for code, name in settings.translation_languages.items()
        ]
    )
