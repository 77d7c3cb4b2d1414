"""Completion provider interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict

from app.core.config import ProviderConfig
from app.translation.prompts import PromptStyle


@dataclass(frozen=True)
class Completion:
    """Text returned by one upstream call and whether it hit the output bound."""

    text: str
    truncated: bool = False


class CompletionProvider(ABC):
    """One upstream text-completion model.

    Subclasses describe the upstream's quirks through class attributes and
    implement the four request hooks; ``complete`` strings them together and is
    the only method the translation pipeline calls.
    """

    provider_id: str = ""
    display_name: str = ""
    prompt_style: PromptStyle = PromptStyle.INLINE
    supports_json_mode: bool = False
    strips_code_fences: bool = False
    malformed_json_hint: str = "The AI returned malformed JSON. Please try again."

    def __init__(self, config: ProviderConfig):
        self.config = config

    @property
    def model(self) -> str:
        return self.config.model

    @abstractmethod
    def build_request(
        self, prompt: str, max_output_tokens: int, json_mode: bool = False
    ) -> Dict[str, Any]:
        """Return the keyword arguments for the upstream SDK call."""
        raise NotImplementedError

    @abstractmethod
    def invoke(self, request: Dict[str, Any]) -> Any:
        """Send the request upstream and return the raw SDK response."""
        raise NotImplementedError

    @abstractmethod
    def extract_text(self, response: Any) -> str:
        """Pull the completion text out of a raw response ("" when absent)."""
        raise NotImplementedError

    @abstractmethod
    def detect_truncation(self, response: Any) -> bool:
        """Return True when generation stopped at the output-token bound."""
        raise NotImplementedError

    def complete(
        self, prompt: str, max_output_tokens: int, json_mode: bool = False
    ) -> Completion:
        request = self.build_request(prompt, max_output_tokens, json_mode=json_mode)
        response = self.invoke(request)
        if self.detect_truncation(response):
            return Completion(text="", truncated=True)
        return Completion(text=self.extract_text(response))

    def describe(self) -> Dict[str, Any]:
        return {
            "provider": self.provider_id,
            "model": self.model,
            "jsonMode": self.supports_json_mode,
            "stripsCodeFences": self.strips_code_fences,
        }
