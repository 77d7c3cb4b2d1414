"""Anthropic messages provider."""

from typing import Any, Dict

from anthropic import Anthropic

from app.core.config import ProviderConfig
from app.core.logging import get_logger
from app.translation.prompts import PromptStyle
from .base import CompletionProvider

logger = get_logger(__name__)


class AnthropicProvider(CompletionProvider):
    provider_id = "anthropic"
    display_name = "Anthropic"
    prompt_style = PromptStyle.STANDALONE
    supports_json_mode = False
    # Claude models wrap JSON answers in ```json fences despite instructions
    strips_code_fences = True
    malformed_json_hint = (
        "The AI returned malformed JSON. Please try with OpenAI provider or a smaller JSON."
    )

    def __init__(self, config: ProviderConfig, client: Anthropic = None):
        super().__init__(config)
        logger.info("Translation: initializing Anthropic client for %s", config.base_url)
        self.client = client or Anthropic(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=config.timeout_seconds,
            max_retries=0,
        )

    def build_request(
        self, prompt: str, max_output_tokens: int, json_mode: bool = False
    ) -> Dict[str, Any]:
        return {
            "model": self.model,
            "max_tokens": max_output_tokens,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": self.config.temperature,
        }

    def invoke(self, request: Dict[str, Any]) -> Any:
        return self.client.messages.create(**request)

    def extract_text(self, response: Any) -> str:
        if not response.content:
            return ""
        block = response.content[0]
        if getattr(block, "type", None) != "text":
            return ""
        return (block.text or "").strip()

    def detect_truncation(self, response: Any) -> bool:
        return response.stop_reason == "max_tokens"
