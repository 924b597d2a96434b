"""Anthropic API provider client."""

from typing import Any

import anthropic
from langchain_anthropic import ChatAnthropic
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage

from quizforge.config.settings import Settings
from quizforge.errors import ProviderError, ProviderErrorKind
from quizforge.providers.base import extract_text, iter_causes

QUOTA_STATUS_CODES = {402, 429}
MALFORMED_STATUS_CODES = {400, 422}


def classify_anthropic_error(exc: BaseException) -> ProviderErrorKind:
    """
    Map an exception raised while calling the Anthropic API to an error kind.

    Args:
        exc: Exception raised by the chat model

    Returns:
        Normalized error kind
    """
    for cause in iter_causes(exc):
        # APITimeoutError subclasses APIConnectionError, so check it first
        if isinstance(cause, (anthropic.APITimeoutError, TimeoutError)):
            return ProviderErrorKind.TIMEOUT
        if isinstance(cause, anthropic.APIConnectionError):
            return ProviderErrorKind.UNREACHABLE
        if isinstance(cause, anthropic.RateLimitError):
            return ProviderErrorKind.QUOTA_EXCEEDED
        if isinstance(cause, anthropic.APIStatusError):
            if cause.status_code in QUOTA_STATUS_CODES:
                return ProviderErrorKind.QUOTA_EXCEEDED
            if cause.status_code in MALFORMED_STATUS_CODES:
                return ProviderErrorKind.MALFORMED
            return ProviderErrorKind.UNREACHABLE
        if isinstance(cause, anthropic.APIResponseValidationError):
            return ProviderErrorKind.MALFORMED
    return ProviderErrorKind.UNREACHABLE


class AnthropicProvider:
    """Generates quiz text through the Anthropic Messages API.

    When built from settings the chat model is created on the first
    ``generate`` call, inside the same error translation as the call itself.
    """

    def __init__(
        self,
        llm: BaseChatModel | None = None,
        name: str = "anthropic",
        settings: Settings | None = None,
    ):
        if llm is None and settings is None:
            raise ValueError("Either llm or settings is required")
        self._llm = llm
        self.settings = settings
        self.name = name

    @classmethod
    def from_settings(cls, settings: Settings) -> "AnthropicProvider":
        return cls(settings=settings)

    def build_llm(self) -> BaseChatModel:
        """Build a client that makes exactly one bounded attempt per call."""
        kwargs: dict[str, Any] = {
            "model": self.settings.anthropic_model_name,
            "temperature": self.settings.generation_temperature,
            "max_tokens": self.settings.max_output_tokens,
            "timeout": self.settings.provider_timeout_seconds,
            "max_retries": 0,
        }
        # Without an explicit key ChatAnthropic falls back to ANTHROPIC_API_KEY
        if self.settings.anthropic_api_key:
            kwargs["api_key"] = self.settings.anthropic_api_key
        return ChatAnthropic(**kwargs)

    @property
    def llm(self) -> BaseChatModel:
        if self._llm is None:
            self._llm = self.build_llm()
        return self._llm

    def generate(self, prompt: str) -> str:
        """Send the prompt and return the raw response text."""
        try:
            response = self.llm.invoke([HumanMessage(content=prompt)])
        except Exception as exc:
            raise ProviderError(
                classify_anthropic_error(exc), self.name, str(exc)
            ) from exc
        return extract_text(response, self.name)
