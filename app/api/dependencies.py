"""FastAPI dependencies."""

from functools import lru_cache

from app.translation.translation_service import TranslationService
from app.translation.translation_wrapper import TranslationServiceWrapper


@lru_cache
def get_translation_wrapper() -> TranslationServiceWrapper:
    return TranslationServiceWrapper()


def get_openai_translation_service() -> TranslationService:
    return get_translation_wrapper().get_service("openai")


def get_anthropic_translation_service() -> TranslationService:
    return get_translation_wrapper().get_service("anthropic")


def reset_dependency_caches() -> None:
    """Utility for tests to clear cached singletons."""

    get_translation_wrapper.cache_clear()
