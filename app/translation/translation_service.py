"""Translation pipeline shared by every completion provider."""

import json
import re
from dataclasses import dataclass
from typing import Any, Optional

from app.core.config import settings
from app.core.logging import get_logger
from app.services.exceptions import (
    EmptyTranslationError,
    InvalidInputJSONError,
    MalformedTranslationJSONError,
    MissingFieldsError,
    OutputTooLongError,
    TranslationError,
    UpstreamFailureError,
)
from app.translation.prompts import build_prompt
from app.translation.providers.base import CompletionProvider

logger = get_logger(__name__)

# Only a fence wrapping the whole reply; backticks inside string values stay.
_CODE_FENCE_RE = re.compile(r"\s*```(?:json)?\s*([\s\S]*?)\s*```\s*", re.IGNORECASE)


@dataclass
class TranslationResult:
    translated_text: str
    provider: str
    model: str


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def parse_json(text: str) -> Any:
    """Strict ``json.loads``: ``NaN`` and ``Infinity`` are rejected."""
    return json.loads(text, parse_constant=_reject_constant)


def strip_code_fences(text: str) -> str:
    """Return the body of a code block wrapping the whole text, or ``text`` unchanged."""
    match = _CODE_FENCE_RE.fullmatch(text)
    if match:
        return match.group(1).strip()
    return text


def find_structure_mismatch(source: Any, translated: Any, path: str = "$") -> Optional[str]:
    """Return the first path where ``translated`` departs from ``source``.

    Keys, nesting and array lengths must match and non-string leaves must be
    identical, including their JSON type (``1`` vs ``1.0`` vs ``true``). Only
    string leaves may differ. Returns None when the shapes agree.
    """
    if isinstance(source, str):
        return None if isinstance(translated, str) else path

    if type(source) is not type(translated):
        return path

    if isinstance(source, dict):
        if set(source) != set(translated):
            return path
        for key, value in source.items():
            mismatch = find_structure_mismatch(value, translated[key], f"{path}.{key}")
            if mismatch:
                return mismatch
        return None

    if isinstance(source, list):
        if len(source) != len(translated):
            return path
        for index, (value, other) in enumerate(zip(source, translated)):
            mismatch = find_structure_mismatch(value, other, f"{path}[{index}]")
            if mismatch:
                return mismatch
        return None

    return None if source == translated else path


class TranslationService:
    """Runs one translation request against one provider.

    validate -> build prompt -> call upstream -> inspect -> repair -> validate.
    Every step ends in a result or raises a ``TranslationError``.
    """

    def __init__(
        self,
        provider: CompletionProvider,
        max_output_tokens: int = None,
        enforce_json_structure: bool = None,
    ):
        self.provider = provider
        self.max_output_tokens = max_output_tokens or settings.translation_max_output_tokens
        if enforce_json_structure is None:
            enforce_json_structure = settings.translation_enforce_json_structure
        self.enforce_json_structure = enforce_json_structure

    def translate(
        self,
        text: Optional[str],
        source_lang: Optional[str],
        target_lang: Optional[str],
        is_json: bool = False,
    ) -> TranslationResult:
        if not text or not source_lang or not target_lang:
            raise MissingFieldsError()

        source_document = None
        if is_json:
            try:
                source_document = parse_json(text)
            except ValueError as exc:
                raise InvalidInputJSONError(detail=str(exc)) from exc

        provider = self.provider
        prompt = build_prompt(
            text, source_lang, target_lang, is_json=is_json, style=provider.prompt_style
        )
        logger.info(
            "Translation: %s/%s %s -> %s (%d chars, json=%s)",
            provider.provider_id,
            provider.model,
            source_lang,
            target_lang,
            len(text),
            is_json,
        )

        try:
            completion = provider.complete(prompt, self.max_output_tokens, json_mode=is_json)
        except TranslationError:
            raise
        except Exception as exc:
            logger.error(
                "Translation: %s upstream call failed", provider.provider_id, exc_info=exc
            )
            raise UpstreamFailureError(detail=str(exc) or type(exc).__name__) from exc

        if completion.truncated:
            logger.warning(
                "Translation: %s output hit the %d token bound",
                provider.provider_id,
                self.max_output_tokens,
            )
            raise OutputTooLongError()

        translated_text = (completion.text or "").strip()
        if not translated_text:
            logger.error("Translation: %s returned empty content", provider.provider_id)
            raise EmptyTranslationError(
                message=f"No translation received from {provider.display_name}"
            )

        if is_json:
            translated_text = self._validate_json_output(translated_text, source_document)

        return TranslationResult(
            translated_text=translated_text,
            provider=provider.provider_id,
            model=provider.model,
        )

    def _validate_json_output(self, translated_text: str, source_document: Any) -> str:
        provider = self.provider
        if provider.strips_code_fences:
            translated_text = strip_code_fences(translated_text)

        try:
            translated_document = parse_json(translated_text)
        except ValueError as exc:
            logger.error("Translation: %s returned invalid JSON: %s", provider.provider_id, exc)
            logger.error("Translation: received text: %s", translated_text[:500])
            raise MalformedTranslationJSONError(detail=provider.malformed_json_hint) from exc

        if self.enforce_json_structure:
            mismatch = find_structure_mismatch(source_document, translated_document)
            if mismatch:
                logger.error(
                    "Translation: %s changed the JSON structure at %s",
                    provider.provider_id,
                    mismatch,
                )
                raise MalformedTranslationJSONError(
                    detail=f"The AI changed the JSON structure at {mismatch}. {provider.malformed_json_hint}"
                )

        return translated_text
