"""Builds provider clients and the fallback chain from settings."""

from quizforge.config.settings import Settings, get_settings
from quizforge.pipeline.orchestrator import FallbackOrchestrator
from quizforge.providers.anthropic_api import AnthropicProvider
from quizforge.providers.base import ProviderClient
from quizforge.providers.bedrock import BedrockProvider

PROVIDER_BUILDERS = {
    "bedrock": BedrockProvider.from_settings,
    "anthropic": AnthropicProvider.from_settings,
}


def build_provider(name: str, settings: Settings) -> ProviderClient:
    """
    Create the provider client registered under a name.

    Args:
        name: Provider name (bedrock or anthropic)
        settings: Application settings

    Returns:
        Configured provider client
    """
    try:
        builder = PROVIDER_BUILDERS[name]
    except KeyError:
        raise ValueError(
            f"Unknown provider '{name}'. Choose from: {', '.join(PROVIDER_BUILDERS)}"
        ) from None
    return builder(settings)


def build_orchestrator(settings: Settings | None = None) -> FallbackOrchestrator:
    """Create the primary -> secondary fallback chain configured in settings."""
    settings = settings or get_settings()
    return FallbackOrchestrator(
        [
            build_provider(settings.primary_provider, settings),
            build_provider(settings.secondary_provider, settings),
        ]
    )
