"""Provider clients for the generation fallback chain."""

from .anthropic_api import AnthropicProvider
from .base import ProviderClient
from .bedrock import BedrockProvider

__all__ = [
    "ProviderClient",
    "BedrockProvider",
    "AnthropicProvider",
]
