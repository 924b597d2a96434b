"""AWS Bedrock provider client."""

from botocore.config import Config
from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectTimeoutError,
    NoCredentialsError,
    ReadTimeoutError,
)
from langchain_aws import ChatBedrock
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage

from quizforge.config.settings import Settings
from quizforge.errors import ProviderError, ProviderErrorKind
from quizforge.providers.base import extract_text, iter_causes

QUOTA_ERROR_CODES = {
    "ThrottlingException",
    "ServiceQuotaExceededException",
    "TooManyRequestsException",
}
MALFORMED_ERROR_CODES = {"ValidationException", "ModelErrorException"}
TIMEOUT_ERROR_CODES = {"ModelTimeoutException"}


def classify_bedrock_error(exc: BaseException) -> ProviderErrorKind:
    """
    Map an exception raised while calling Bedrock to a provider error kind.

    ChatBedrock re-raises service errors as ValueError, so the whole cause
    chain is searched for the underlying botocore exception.

    Args:
        exc: Exception raised by the chat model

    Returns:
        Normalized error kind
    """
    for cause in iter_causes(exc):
        if isinstance(cause, (ReadTimeoutError, ConnectTimeoutError, TimeoutError)):
            return ProviderErrorKind.TIMEOUT
        if isinstance(cause, ClientError):
            code = cause.response.get("Error", {}).get("Code", "")
            if code in QUOTA_ERROR_CODES:
                return ProviderErrorKind.QUOTA_EXCEEDED
            if code in MALFORMED_ERROR_CODES:
                return ProviderErrorKind.MALFORMED
            if code in TIMEOUT_ERROR_CODES:
                return ProviderErrorKind.TIMEOUT
            return ProviderErrorKind.UNREACHABLE
        if isinstance(cause, (NoCredentialsError, BotoCoreError)):
            return ProviderErrorKind.UNREACHABLE
    return ProviderErrorKind.UNREACHABLE


class BedrockProvider:
    """Generates quiz text through a Bedrock-hosted chat model.

    When built from settings the chat model is created on the first
    ``generate`` call, so missing AWS configuration surfaces as a
    ProviderError and the fallback chain can move on.
    """

    def __init__(
        self,
        llm: BaseChatModel | None = None,
        name: str = "bedrock",
        settings: Settings | None = None,
    ):
        if llm is None and settings is None:
            raise ValueError("Either llm or settings is required")
        self._llm = llm
        self.settings = settings
        self.name = name

    @classmethod
    def from_settings(cls, settings: Settings) -> "BedrockProvider":
        return cls(settings=settings)

    def build_llm(self) -> BaseChatModel:
        """Build a client that makes exactly one bounded attempt per call."""
        boto_config = Config(
            connect_timeout=self.settings.provider_timeout_seconds,
            read_timeout=self.settings.provider_timeout_seconds,
            retries={"total_max_attempts": 1},
        )
        return ChatBedrock(
            model=self.settings.bedrock_model_name,
            region_name=self.settings.aws_default_region,
            temperature=self.settings.generation_temperature,
            max_tokens=self.settings.max_output_tokens,
            config=boto_config,
        )

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
                classify_bedrock_error(exc), self.name, str(exc)
            ) from exc
        return extract_text(response, self.name)
