"""OpenAI chat-completions provider."""

from typing import Any, Dict

from openai import OpenAI

from app.core.config import ProviderConfig
from app.core.logging import get_logger
from app.translation.prompts import PromptStyle
from .base import CompletionProvider

logger = get_logger(__name__)


class OpenAIProvider(CompletionProvider):
    provider_id = "openai"
    display_name = "OpenAI"
    prompt_style = PromptStyle.INLINE
    supports_json_mode = True
    strips_code_fences = False
    malformed_json_hint = "The AI returned malformed JSON. Please try again."

    def __init__(self, config: ProviderConfig, client: OpenAI = None):
        super().__init__(config)
        logger.info("Translation: initializing OpenAI client for %s", config.base_url)
        self.client = client or OpenAI(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=config.timeout_seconds,
            max_retries=0,
        )

    def build_request(
        self, prompt: str, max_output_tokens: int, json_mode: bool = False
    ) -> Dict[str, Any]:
        request = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": self.config.temperature,
            "max_tokens": max_output_tokens,
        }
        if json_mode and self.supports_json_mode:
            request["response_format"] = {"type": "json_object"}
        return request

    def invoke(self, request: Dict[str, Any]) -> Any:
        return self.client.chat.completions.create(**request)

    def extract_text(self, response: Any) -> str:
        if not response.choices:
            return ""
        message = response.choices[0].message
        content = getattr(message, "content", None) or ""
        return content.strip()

    def detect_truncation(self, response: Any) -> bool:
        return bool(response.choices) and response.choices[0].finish_reason == "length"
