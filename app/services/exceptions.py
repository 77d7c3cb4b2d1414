"""Domain-level translation exceptions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional


@dataclass(eq=False)
class TranslationError(Exception):
    """Base error raised by the translation pipeline.

    ``code`` is the stable machine tag; ``message`` ends up in the ``error``
    field of the response body and ``detail`` in ``details``.
    """

    message: str
    status_code: int = 500
    detail: Optional[str] = None

    code: ClassVar[str] = "TranslationError"

    def __str__(self) -> str:  # pragma: no cover - repr helper
        return self.message


@dataclass(eq=False)
class MissingFieldsError(TranslationError):
    """Raised when text, sourceLang or targetLang is absent or empty."""

    message: str = "Missing required fields: text, sourceLang, or targetLang"
    status_code: int = 400

    code: ClassVar[str] = "MissingFields"


@dataclass(eq=False)
class InvalidInputJSONError(TranslationError):
    """Raised when JSON-mode input does not parse."""

    message: str = "Invalid JSON input"
    status_code: int = 400

    code: ClassVar[str] = "InvalidInputJSON"


@dataclass(eq=False)
class OutputTooLongError(TranslationError):
    """Raised when the upstream stopped at the output-token bound."""

    message: str = "Translation too long"
    status_code: int = 413
    detail: Optional[str] = (
        "Your input is too large to translate in one request. "
        "Try using smaller text or breaking it into parts."
    )

    code: ClassVar[str] = "OutputTooLong"


@dataclass(eq=False)
class EmptyTranslationError(TranslationError):
    """Raised when the upstream completion carries no text."""

    message: str = "No translation received"
    status_code: int = 500

    code: ClassVar[str] = "EmptyTranslation"


@dataclass(eq=False)
class MalformedTranslationJSONError(TranslationError):
    """Raised when JSON-mode output cannot be parsed or lost its shape."""

    message: str = "Translation produced invalid JSON"
    status_code: int = 500

    code: ClassVar[str] = "MalformedTranslationJSON"


@dataclass(eq=False)
class UpstreamFailureError(TranslationError):
    """Raised for transport or unexpected errors from the provider call."""

    message: str = "Translation failed"
    status_code: int = 500

    code: ClassVar[str] = "UpstreamFailure"


@dataclass(eq=False)
class ConfigurationError(Exception):
    """Raised at startup when a provider is missing its credential or endpoint."""

    message: str
    detail: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover - repr helper
        if self.detail:
            return f"{self.message}: {self.detail}"
        return self.message
