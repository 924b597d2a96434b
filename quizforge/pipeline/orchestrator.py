"""Fallback Orchestrator - Tries each provider once, in order."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from quizforge.errors import GenerationFailure, ProviderError
from quizforge.pipeline.prompt import build_prompt

if TYPE_CHECKING:
    from quizforge.providers.base import ProviderClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProviderSuccess:
    """Raw text returned by the provider that answered."""

    raw_text: str
    provider: str


@dataclass(frozen=True)
class ProviderFailure:
    """A provider attempt that ended in a ProviderError."""

    cause: ProviderError


ProviderOutcome = ProviderSuccess | ProviderFailure


def attempt(provider: "ProviderClient", prompt: str) -> ProviderOutcome:
    """
    Call one provider exactly once and capture the result.

    Args:
        provider: Client to call
        prompt: Rendered prompt

    Returns:
        ProviderSuccess with the raw text, or ProviderFailure with the cause
    """
    logger.info("Requesting quiz from %s", provider.name)
    try:
        return ProviderSuccess(raw_text=provider.generate(prompt), provider=provider.name)
    except ProviderError as exc:
        return ProviderFailure(cause=exc)


class FallbackOrchestrator:
    """
    Sends one prompt through a fixed chain of providers.

    The standard chain is primary then secondary. Each provider is tried at
    most once per request, strictly one after another: the next provider is
    only called after the previous one has failed.
    """

    def __init__(self, providers: Sequence["ProviderClient"]):
        if not providers:
            raise ValueError("At least one provider is required")
        self.providers = tuple(providers)

    @property
    def provider_names(self) -> list[str]:
        return [provider.name for provider in self.providers]

    def run(self, source_content: str, requested_count: int) -> ProviderSuccess:
        """
        Generate raw quiz text, falling back on provider failure.

        Args:
            source_content: Content the quiz must be about
            requested_count: Number of questions to ask for

        Returns:
            ProviderSuccess from the first provider that answered

        Raises:
            GenerationFailure: If every provider failed
        """
        prompt = build_prompt(source_content, requested_count)
        causes: list[ProviderError] = []

        for provider in self.providers:
            outcome = attempt(provider, prompt)
            if isinstance(outcome, ProviderSuccess):
                if causes:
                    logger.info("Quiz generated using fallback provider %s", outcome.provider)
                return outcome
            logger.warning(
                "Provider %s failed (%s): %s",
                provider.name,
                outcome.cause.kind.value,
                outcome.cause.message,
            )
            causes.append(outcome.cause)

        logger.error("All providers failed: %s", ", ".join(self.provider_names))
        raise GenerationFailure(causes)

    def orchestrate(self, source_content: str, requested_count: int) -> str:
        """Generate raw quiz text; see run()."""
        return self.run(source_content, requested_count).raw_text
