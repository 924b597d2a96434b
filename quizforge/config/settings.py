"""Application settings and configuration."""

from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

# Load .env file if present
load_dotenv()

ProviderName = Literal["bedrock", "anthropic"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Provider chain
    primary_provider: ProviderName = Field(
        default="bedrock",
        description="Provider tried first for every generation request",
        validation_alias="PRIMARY_PROVIDER",
    )
    secondary_provider: ProviderName = Field(
        default="anthropic",
        description="Provider tried only when the primary fails",
        validation_alias="SECONDARY_PROVIDER",
    )

    # AWS Bedrock
    bedrock_model_name: str = Field(
        default="anthropic.claude-3-7-sonnet-20250219-v1:0",
        description="Model to use (AWS Bedrock model ID)",
        validation_alias="BEDROCK_MODEL_NAME",
    )
    aws_default_region: str | None = Field(
        default=None,
        description="AWS API region",
        validation_alias="AWS_DEFAULT_REGION",
    )

    # Anthropic API
    anthropic_api_key: str | None = Field(
        default=None,
        description="Anthropic API key",
        validation_alias="ANTHROPIC_API_KEY",
    )
    anthropic_model_name: str = Field(
        default="claude-3-5-haiku-latest",
        description="Model to use on the Anthropic API",
        validation_alias="ANTHROPIC_MODEL_NAME",
    )

    # Generation Settings
    generation_temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=1.0,
        description="Temperature for question generation",
        validation_alias="GENERATION_TEMPERATURE",
    )

    max_output_tokens: int = Field(
        default=8192,
        ge=256,
        description="Upper bound on tokens a provider may return",
        validation_alias="MAX_OUTPUT_TOKENS",
    )

    provider_timeout_seconds: float = Field(
        default=60.0,
        gt=0.0,
        le=600.0,
        description="Timeout for a single provider call",
        validation_alias="PROVIDER_TIMEOUT_SECONDS",
    )

    # Storage and Output Settings
    store_path: str = Field(
        default=".quizforge/quizzes",
        description="Directory holding saved quizzes",
        validation_alias="QUIZ_STORE_PATH",
    )

    default_output_dir: str = Field(
        default="output",
        description="Directory exported documents are written to",
        validation_alias="DEFAULT_OUTPUT_DIR",
    )

    default_owner: str = Field(
        default="local",
        description="Owner recorded on quizzes saved from the CLI",
        validation_alias="QUIZ_OWNER",
    )

    log_level: str = Field(
        default="WARNING",
        description="Root log level for the CLI",
        validation_alias="LOG_LEVEL",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# This is loaded the first time and then cached for further use
@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings object with loaded configuration
    """
    return Settings()
